"""Session-local learner progress.

``ProgressCounters`` is a frozen value; the functions below return updated
copies so the caller always owns the current state explicitly.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import datetime, timezone
from typing import FrozenSet, Optional

from .content import validate_difficulty
from .feedback import Report


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class ProgressCounters:
    """Counters displayed on the dashboard."""

    exercises_completed: int = 0
    total_errors: int = 0
    hints_used: int = 0
    completed_exercises: FrozenSet[int] = frozenset()
    last_attempt: datetime = field(default_factory=_utcnow)
    skill_level: str = "beginner"


def record_attempt(
    progress: ProgressCounters, report: Report, now: Optional[datetime] = None
) -> ProgressCounters:
    """Count a run of the editor; failed runs increase ``total_errors``."""
    return replace(
        progress,
        total_errors=progress.total_errors + (0 if report.ok else 1),
        last_attempt=now or _utcnow(),
    )


def record_hints(progress: ProgressCounters, count: int) -> ProgressCounters:
    if count < 0:
        raise ValueError(f"Hint count must not be negative: {count}")
    return replace(progress, hints_used=progress.hints_used + count)


def mark_completed(progress: ProgressCounters, exercise_id: int) -> ProgressCounters:
    """Add ``exercise_id`` to the completed set; repeated calls are no-ops."""
    completed = progress.completed_exercises | {exercise_id}
    return replace(
        progress,
        completed_exercises=frozenset(completed),
        exercises_completed=len(completed),
    )


def with_skill_level(progress: ProgressCounters, skill_level: str) -> ProgressCounters:
    return replace(progress, skill_level=validate_difficulty(skill_level))
