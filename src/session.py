"""State of one learner session and the commands that change it.

The UI keeps a :class:`SessionState` value and replaces it with the result of
:func:`update` after every user action.  Nothing here is global: two sessions
never share state, and :func:`src.feedback.analyze` never sees it.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from datetime import datetime
from typing import Callable, Dict, Optional, Tuple

from .content import ContentStore, TutorialDescriptor
from .feedback import Report, analyze
from .progress import (
    ProgressCounters,
    mark_completed,
    record_attempt,
    record_hints,
    with_skill_level,
)

logger = logging.getLogger(__name__)

VIEWS: Tuple[str, ...] = ("editor", "exercises", "tutorials", "dashboard")
DEFAULT_CODE = "print('Hello, World!')"


@dataclass(frozen=True)
class SessionState:
    view: str = "editor"
    code: str = DEFAULT_CODE
    current_exercise_id: Optional[int] = None
    tutorial_index: int = 0
    tutorial_step: int = 0
    report: Optional[Report] = None
    progress: ProgressCounters = field(default_factory=ProgressCounters)

    @property
    def skill_level(self) -> str:
        return self.progress.skill_level


@dataclass(frozen=True)
class EditCode:
    code: str


@dataclass(frozen=True)
class ClearCode:
    pass


@dataclass(frozen=True)
class RunCode:
    pass


@dataclass(frozen=True)
class SelectExercise:
    exercise_id: int


@dataclass(frozen=True)
class StartTutorial:
    index: int = 0


@dataclass(frozen=True)
class NextTutorialStep:
    pass


@dataclass(frozen=True)
class PreviousTutorialStep:
    pass


@dataclass(frozen=True)
class Navigate:
    view: str


@dataclass(frozen=True)
class SetSkillLevel:
    skill_level: str


def current_tutorial(state: SessionState, store: ContentStore) -> TutorialDescriptor:
    return store.get_tutorial(state.tutorial_index)


def _edit(state, command: EditCode, store, now):
    return replace(state, code=command.code)


def _clear(state, command, store, now):
    return replace(state, code="")


def _solves_current_exercise(state: SessionState, report: Report, store: ContentStore) -> bool:
    """An exercise counts as solved when its edited code runs clean."""
    if state.current_exercise_id is None or not report.ok or report.logic_notes:
        return False
    template = store.get_exercise(state.current_exercise_id).template
    return state.code.strip() != template.strip()


def _run(state: SessionState, command, store, now) -> SessionState:
    report = analyze(state.code)
    progress = record_attempt(state.progress, report, now)
    if report.debug_hints:
        progress = record_hints(progress, len(report.debug_hints))
    if _solves_current_exercise(state, report, store):
        progress = mark_completed(progress, state.current_exercise_id)
    logger.debug("Run finished: ok=%s status=%r", report.ok, report.status_message)
    return replace(state, report=report, progress=progress)


def _select_exercise(state, command: SelectExercise, store: ContentStore, now):
    exercise = store.get_exercise(command.exercise_id)
    return replace(
        state,
        current_exercise_id=exercise.id,
        code=exercise.template,
        view="editor",
    )


def _start_tutorial(state, command: StartTutorial, store: ContentStore, now):
    store.get_tutorial(command.index)
    return replace(state, tutorial_index=command.index, tutorial_step=0, view="tutorials")


def _next_step(state: SessionState, command, store: ContentStore, now):
    last = len(current_tutorial(state, store).steps) - 1
    return replace(state, tutorial_step=min(state.tutorial_step + 1, last))


def _previous_step(state: SessionState, command, store, now):
    return replace(state, tutorial_step=max(state.tutorial_step - 1, 0))


def _navigate(state, command: Navigate, store, now):
    if command.view not in VIEWS:
        raise ValueError(f"Unknown view '{command.view}'. Expected one of: {', '.join(VIEWS)}")
    return replace(state, view=command.view)


def _set_skill_level(state: SessionState, command: SetSkillLevel, store, now):
    return replace(state, progress=with_skill_level(state.progress, command.skill_level))


_HANDLERS: Dict[type, Callable[..., SessionState]] = {
    EditCode: _edit,
    ClearCode: _clear,
    RunCode: _run,
    SelectExercise: _select_exercise,
    StartTutorial: _start_tutorial,
    NextTutorialStep: _next_step,
    PreviousTutorialStep: _previous_step,
    Navigate: _navigate,
    SetSkillLevel: _set_skill_level,
}


def update(
    state: SessionState,
    command: object,
    store: ContentStore,
    now: Optional[datetime] = None,
) -> SessionState:
    """Apply ``command`` to ``state`` and return the new state.

    Errors raised by the content store (``KeyError`` for an unknown exercise,
    ``IndexError`` for an unknown tutorial) and ``ValueError`` for an unknown
    view or tier propagate; ``state`` is never modified.
    """
    handler = _HANDLERS.get(type(command))
    if handler is None:
        raise TypeError(f"Unsupported command: {command!r}")
    return handler(state, command, store, now)
