"""Exercises tab: pick an exercise of the current skill level."""

from __future__ import annotations

import logging
from functools import partial
from typing import Any, Dict, List, Optional, Tuple

import gradio as gr

from src.content import ContentStore, ExerciseDescriptor
from src.session import Navigate, SelectExercise, SessionState, update
from views.editor import exercise_banner

logger = logging.getLogger(__name__)


def exercise_choices(exercises: List[ExerciseDescriptor]) -> List[Tuple[str, int]]:
    return [(exercise.title, exercise.id) for exercise in exercises]


def describe_exercise(exercise_id: Optional[int], store: ContentStore) -> str:
    """Return the card text shown under the picker."""
    if exercise_id is None:
        return "No exercises available for this level yet."
    exercise = store.get_exercise(int(exercise_id))
    return (
        f"#### {exercise.title}\n\n"
        f"{exercise.description}\n\n"
        f"`{exercise.difficulty}` · {exercise.category}"
    )


def refresh(state: SessionState, store: ContentStore) -> Tuple[SessionState, Any, str]:
    """Fill the picker with the exercises of the current skill level."""
    state = update(state, Navigate("exercises"), store)
    exercises = store.by_difficulty(state.skill_level)
    value = exercises[0].id if exercises else None
    return (
        state,
        gr.update(choices=exercise_choices(exercises), value=value),
        describe_exercise(value, store),
    )


def start_exercise(
    exercise_id: Optional[int], state: SessionState, store: ContentStore
) -> Tuple[SessionState, Any, str, str]:
    """Load the exercise template into the editor and switch to it.

    Returns the new state, the tab selection, the editor code and the banner.
    """
    if exercise_id is None:
        gr.Warning("Select an exercise first.")
        return state, gr.update(), state.code, exercise_banner(state, store)
    try:
        state = update(state, SelectExercise(int(exercise_id)), store)
    except KeyError:
        logger.warning("Unknown exercise selected: %s", exercise_id)
        gr.Warning(f"Exercise {exercise_id} is not available.")
        return state, gr.update(), state.code, exercise_banner(state, store)
    return state, gr.update(selected=state.view), state.code, exercise_banner(state, store)


def render(tab: gr.Tab, state: gr.State, store: ContentStore) -> Dict[str, gr.components.Component]:
    """Render the exercises tab."""
    gr.Markdown("### Coding Exercises")
    initial = store.by_difficulty(SessionState().skill_level)
    picker = gr.Dropdown(
        label="Exercise",
        choices=exercise_choices(initial),
        value=initial[0].id if initial else None,
    )
    details = gr.Markdown(describe_exercise(initial[0].id if initial else None, store))
    start_btn = gr.Button("Start Exercise", variant="primary")

    picker.change(partial(describe_exercise, store=store), inputs=picker, outputs=details)
    tab.select(partial(refresh, store=store), inputs=state, outputs=[state, picker, details])

    return {"picker": picker, "start": start_btn}
