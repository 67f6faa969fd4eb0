"""Code editor tab: write code, run the feedback engine, read the results."""

from __future__ import annotations

from functools import partial
from typing import Dict, List, Optional, Tuple

import gradio as gr

from src.content import DIFFICULTY_LEVELS, ContentStore
from src.feedback import Report
from src.session import (
    ClearCode,
    EditCode,
    Navigate,
    RunCode,
    SessionState,
    SetSkillLevel,
    update,
)
from ui.constants import (
    CODE_PLACEHOLDER,
    ERROR_COLOR,
    HINT_COLOR,
    HINTS_HEADING,
    LOGIC_COLOR,
    LOGIC_HEADING,
    STYLE_COLOR,
    STYLE_HEADING,
    SUCCESS_COLOR,
)


def _section(heading: str, color: str, items) -> List[str]:
    if not items:
        return []
    lines = ["", f'<h4 style="color:{color}">{heading}</h4>', ""]
    lines.extend(f"- {item}" for item in items)
    return lines


def format_report(report: Optional[Report]) -> str:
    """Render ``report`` as Markdown for the analysis panel.

    Empty sections are omitted; the status line always comes first.
    """
    if report is None:
        return ""
    color = SUCCESS_COLOR if report.ok else ERROR_COLOR
    lines = [
        "### Analysis Results",
        "",
        f'<p style="color:{color}">{report.status_message}</p>',
    ]
    lines += _section(STYLE_HEADING, STYLE_COLOR, report.style_notes)
    lines += _section(LOGIC_HEADING, LOGIC_COLOR, report.logic_notes)
    lines += _section(HINTS_HEADING, HINT_COLOR, report.debug_hints)
    return "\n".join(lines)


def exercise_banner(state: SessionState, store: ContentStore) -> str:
    if state.current_exercise_id is None:
        return ""
    exercise = store.get_exercise(state.current_exercise_id)
    return f"**Current Exercise: {exercise.title}**\n\n{exercise.description}"


def run_code(code: str, state: SessionState, store: ContentStore) -> Tuple[SessionState, str]:
    """Handle the "Run Code" button."""
    state = update(state, EditCode(code or ""), store)
    state = update(state, RunCode(), store)
    return state, format_report(state.report)


def edit_code(code: str, state: SessionState, store: ContentStore) -> SessionState:
    return update(state, EditCode(code or ""), store)


def clear_code(state: SessionState, store: ContentStore) -> Tuple[SessionState, str]:
    state = update(state, ClearCode(), store)
    return state, state.code


def change_skill_level(level: str, state: SessionState, store: ContentStore) -> SessionState:
    return update(state, SetSkillLevel(level), store)


def refresh(state: SessionState, store: ContentStore) -> Tuple[SessionState, str, str, str]:
    """Switch to the editor; return the state, code, banner and skill level."""
    state = update(state, Navigate("editor"), store)
    return state, state.code, exercise_banner(state, store), state.skill_level


def render(tab: gr.Tab, state: gr.State, store: ContentStore) -> Dict[str, gr.components.Component]:
    """Render the editor tab and return the components other tabs update."""
    gr.Markdown("### Code Editor")
    level_in = gr.Dropdown(
        label="Skill level",
        choices=list(DIFFICULTY_LEVELS),
        value=DIFFICULTY_LEVELS[0],
    )
    banner = gr.Markdown()
    code_in = gr.Textbox(
        label="Code",
        lines=12,
        placeholder=CODE_PLACEHOLDER,
        value=SessionState().code,
    )
    with gr.Row():
        run_btn = gr.Button("Run Code", variant="primary")
        clear_btn = gr.Button("Clear")
    result_out = gr.Markdown()

    run_btn.click(partial(run_code, store=store), inputs=[code_in, state], outputs=[state, result_out])
    code_in.input(partial(edit_code, store=store), inputs=[code_in, state], outputs=state)
    clear_btn.click(partial(clear_code, store=store), inputs=state, outputs=[state, code_in])
    level_in.change(partial(change_skill_level, store=store), inputs=[level_in, state], outputs=state)
    tab.select(partial(refresh, store=store), inputs=state, outputs=[state, code_in, banner, level_in])

    return {"code": code_in, "banner": banner, "level": level_in, "result": result_out}
