"""Dashboard tab: counters, suggested exercises and last activity."""

from __future__ import annotations

from functools import partial
from typing import Any, Dict, Tuple

import gradio as gr

from src.content import ContentStore
from src.session import Navigate, SessionState, update
from views.exercises import exercise_choices


def summary(state: SessionState) -> str:
    progress = state.progress
    return (
        "| Exercises Completed | Total Errors | Hints Used |\n"
        "|:---:|:---:|:---:|\n"
        f"| {progress.exercises_completed} | {progress.total_errors} | {progress.hints_used} |"
    )


def timeline(state: SessionState) -> str:
    progress = state.progress
    last = progress.last_attempt.strftime("%Y-%m-%d %H:%M:%S %Z").strip()
    return (
        "#### Progress Timeline\n\n"
        f"Last activity: {last}\n\n"
        f"Current skill level: {progress.skill_level}"
    )


def refresh(state: SessionState, store: ContentStore) -> Tuple[SessionState, str, Any, str]:
    """Return the state, the counters, the suggestion picker and the timeline."""
    state = update(state, Navigate("dashboard"), store)
    suggested = store.suggestions(state.skill_level)
    return (
        state,
        summary(state),
        gr.update(
            choices=exercise_choices(suggested),
            value=suggested[0].id if suggested else None,
        ),
        timeline(state),
    )


def render(tab: gr.Tab, state: gr.State, store: ContentStore) -> Dict[str, gr.components.Component]:
    """Render the dashboard tab."""
    gr.Markdown("### Learning Dashboard")
    initial = SessionState()
    counters = gr.Markdown(summary(initial))
    gr.Markdown("#### Suggested Next Steps")
    suggested = store.suggestions(initial.skill_level)
    picker = gr.Dropdown(
        label="Suggested exercise",
        choices=exercise_choices(suggested),
        value=suggested[0].id if suggested else None,
    )
    start_btn = gr.Button("Start Now", variant="primary")
    history = gr.Markdown(timeline(initial))

    tab.select(partial(refresh, store=store), inputs=state, outputs=[state, counters, picker, history])

    return {"picker": picker, "start": start_btn}
