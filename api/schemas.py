from __future__ import annotations

from typing import List, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from api.config import MAX_SOURCE_CHARS
from src.content import ExerciseDescriptor, TutorialDescriptor
from src.feedback import Report

Difficulty = Literal["beginner", "intermediate", "advanced"]


class AnalyzeRequest(BaseModel):
    """Code typed in the editor."""

    code: str = Field("", description="Source text to analyse")

    @field_validator("code")
    @classmethod
    def check_length(cls, value: str) -> str:
        if len(value) > MAX_SOURCE_CHARS:
            raise ValueError(f"Code is longer than {MAX_SOURCE_CHARS} characters")
        return value


class ReportResponse(BaseModel):
    """Feedback returned for one analysis, serialized with camelCase keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    style_notes: List[str]
    logic_notes: List[str]
    status_message: str
    ok: bool
    debug_hints: List[str]

    @classmethod
    def from_report(cls, report: Report) -> "ReportResponse":
        return cls(
            style_notes=list(report.style_notes),
            logic_notes=list(report.logic_notes),
            status_message=report.status_message,
            ok=report.ok,
            debug_hints=list(report.debug_hints),
        )


class ExerciseResponse(BaseModel):
    id: int
    title: str
    description: str
    template: str
    difficulty: Difficulty
    category: str

    @classmethod
    def from_descriptor(cls, exercise: ExerciseDescriptor) -> "ExerciseResponse":
        return cls(
            id=exercise.id,
            title=exercise.title,
            description=exercise.description,
            template=exercise.template,
            difficulty=exercise.difficulty,
            category=exercise.category,
        )


class TutorialResponse(BaseModel):
    title: str
    steps: List[str]

    @classmethod
    def from_descriptor(cls, tutorial: TutorialDescriptor) -> "TutorialResponse":
        return cls(title=tutorial.title, steps=list(tutorial.steps))
