import pytest

gr = pytest.importorskip("gradio")

from src.content import ContentStore  # noqa: E402
from src.feedback import analyze  # noqa: E402
from src.session import SessionState, SetSkillLevel, update  # noqa: E402
from views import dashboard, editor, exercises, tutorials  # noqa: E402

STORE = ContentStore()


def test_format_report_success_sections():
    text = editor.format_report(analyze("def f():\n    pass"))
    assert "Code executed successfully!" in text
    assert "Style Suggestions:" in text
    assert "Logic Considerations:" in text
    assert "Debugging Hints:" not in text


def test_format_report_error_sections():
    text = editor.format_report(analyze("# c\nprint('x'"))
    assert "Missing closing parenthesis" in text
    assert "Style Suggestions:" not in text
    assert "- Check that all parentheses are properly closed" in text


def test_format_report_none():
    assert editor.format_report(None) == ""


def test_run_code_updates_state():
    state, panel = editor.run_code("print('hi'", SessionState(), STORE)
    assert state.code == "print('hi'"
    assert state.progress.total_errors == 1
    assert "Debugging Hints:" in panel


def test_clear_code():
    state, code = editor.clear_code(SessionState(), STORE)
    assert code == "" and state.code == ""


def test_editor_refresh_shows_exercise_banner():
    state = SessionState(view="dashboard", current_exercise_id=3)
    new_state, code, banner, level = editor.refresh(state, STORE)
    assert new_state.view == "editor"
    assert "Factorial Calculator" in banner
    assert level == "beginner"
    assert code == state.code


def test_exercises_follow_skill_level():
    state = update(SessionState(), SetSkillLevel("intermediate"), STORE)
    state, picker, details = exercises.refresh(state, STORE)
    assert state.view == "exercises"
    assert picker["choices"] == [("Factorial Calculator", 3), ("List Manipulation", 4)]
    assert picker["value"] == 3
    assert "recursion" in details


def test_exercises_empty_level():
    state = update(SessionState(), SetSkillLevel("advanced"), STORE)
    _, picker, details = exercises.refresh(state, STORE)
    assert picker["choices"] == []
    assert details == "No exercises available for this level yet."


def test_start_exercise_switches_to_editor():
    state, tabs, code, banner = exercises.start_exercise(1, SessionState(), STORE)
    assert tabs["selected"] == "editor"
    assert state.current_exercise_id == 1
    assert code == "print('Hello, World!')"
    assert "Hello World" in banner


def test_start_without_selection_keeps_state():
    state = SessionState(view="exercises")
    new_state, tabs, code, banner = exercises.start_exercise(None, state, STORE)
    assert new_state is state
    assert "selected" not in tabs
    assert code == state.code


def test_start_unknown_exercise_keeps_state():
    state = SessionState(view="exercises")
    new_state, tabs, _, banner = exercises.start_exercise(99, state, STORE)
    assert new_state is state
    assert "selected" not in tabs
    assert banner == ""


def test_tutorial_navigation():
    state, text, prev_btn, next_btn = tutorials.start(0, SessionState(), STORE)
    assert "Introduction to Python - Step 1 of 5" in text
    assert prev_btn["interactive"] is False
    assert next_btn["interactive"] is True
    for _ in range(6):
        state, text, prev_btn, next_btn = tutorials.next_step(state, STORE)
    assert "Step 5 of 5" in text
    assert next_btn["interactive"] is False
    state, text, prev_btn, _ = tutorials.previous_step(state, STORE)
    assert "Step 4 of 5" in text
    assert prev_btn["interactive"] is True


def test_try_in_editor():
    state, tabs = tutorials.try_in_editor(SessionState(view="tutorials"), STORE)
    assert state.view == "editor"
    assert tabs["selected"] == "editor"


def test_dashboard_refresh():
    state, _ = editor.run_code("print('x'", SessionState(), STORE)
    state, counters, picker, history = dashboard.refresh(state, STORE)
    assert state.view == "dashboard"
    assert "| 0 | 1 | 2 |" in counters
    assert picker["choices"] == [("Hello World", 1), ("Sum of Two Numbers", 2)]
    assert "Current skill level: beginner" in history


def test_build_demo():
    import app

    assert isinstance(app.build_demo(STORE), gr.Blocks)
