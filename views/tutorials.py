"""Tutorials tab: step through a tutorial one instruction at a time."""

from __future__ import annotations

from functools import partial
from typing import Any, Dict, Tuple

import gradio as gr

from src.content import ContentStore
from src.session import (
    Navigate,
    NextTutorialStep,
    PreviousTutorialStep,
    SessionState,
    StartTutorial,
    current_tutorial,
    update,
)


def step_text(state: SessionState, store: ContentStore) -> str:
    """Return ``"{title} - Step n of total"`` followed by the step itself."""
    tutorial = current_tutorial(state, store)
    total = len(tutorial.steps)
    return (
        f"#### {tutorial.title} - Step {state.tutorial_step + 1} of {total}\n\n"
        f"{tutorial.steps[state.tutorial_step]}"
    )


def _view(state: SessionState, store: ContentStore) -> Tuple[SessionState, str, Any, Any]:
    last = len(current_tutorial(state, store).steps) - 1
    return (
        state,
        step_text(state, store),
        gr.update(interactive=state.tutorial_step > 0),
        gr.update(interactive=state.tutorial_step < last),
    )


def start(index: int, state: SessionState, store: ContentStore):
    """Open tutorial ``index`` at its first step."""
    return _view(update(state, StartTutorial(int(index or 0)), store), store)


def next_step(state: SessionState, store: ContentStore):
    return _view(update(state, NextTutorialStep(), store), store)


def previous_step(state: SessionState, store: ContentStore):
    return _view(update(state, PreviousTutorialStep(), store), store)


def try_in_editor(state: SessionState, store: ContentStore) -> Tuple[SessionState, Any]:
    state = update(state, Navigate("editor"), store)
    return state, gr.update(selected=state.view)


def render(tab: gr.Tab, state: gr.State, store: ContentStore) -> Dict[str, gr.components.Component]:
    """Render the tutorials tab."""
    gr.Markdown("### Interactive Tutorial")
    choices = [(tutorial.title, index) for index, tutorial in enumerate(store.tutorials)]
    picker = gr.Dropdown(label="Tutorial", choices=choices, value=0)
    text = gr.Markdown(step_text(SessionState(), store))
    with gr.Row():
        prev_btn = gr.Button("Previous", interactive=False)
        next_btn = gr.Button("Next", variant="primary")
        editor_btn = gr.Button("Try in Editor")

    outputs = [state, text, prev_btn, next_btn]
    picker.input(partial(start, store=store), inputs=[picker, state], outputs=outputs)
    tab.select(partial(start, store=store), inputs=[picker, state], outputs=outputs)
    prev_btn.click(partial(previous_step, store=store), inputs=state, outputs=outputs)
    next_btn.click(partial(next_step, store=store), inputs=state, outputs=outputs)

    return {"try_in_editor": editor_btn}
