import unittest
from datetime import datetime, timezone

from src.content import ContentStore
from src.session import (
    ClearCode,
    EditCode,
    Navigate,
    NextTutorialStep,
    PreviousTutorialStep,
    RunCode,
    SelectExercise,
    SessionState,
    SetSkillLevel,
    StartTutorial,
    update,
)

NOW = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)


class SessionUpdateTests(unittest.TestCase):
    def setUp(self):
        self.store = ContentStore()
        self.state = SessionState()

    def test_initial_state(self):
        self.assertEqual(self.state.view, "editor")
        self.assertEqual(self.state.code, "print('Hello, World!')")
        self.assertIsNone(self.state.report)
        self.assertEqual(self.state.skill_level, "beginner")

    def test_run_failed_code_counts_error_and_hints(self):
        state = update(self.state, EditCode("print('hi'"), self.store)
        state = update(state, RunCode(), self.store, now=NOW)
        self.assertFalse(state.report.ok)
        self.assertEqual(state.progress.total_errors, 1)
        self.assertEqual(state.progress.hints_used, 2)
        self.assertEqual(state.progress.last_attempt, NOW)
        # the previous value is untouched
        self.assertEqual(self.state.progress.total_errors, 0)

    def test_run_successful_code(self):
        state = update(self.state, RunCode(), self.store, now=NOW)
        self.assertTrue(state.report.ok)
        self.assertEqual(state.progress.total_errors, 0)
        self.assertEqual(state.progress.hints_used, 0)
        self.assertEqual(state.progress.exercises_completed, 0)

    def test_select_exercise_loads_template(self):
        state = update(self.state, Navigate("exercises"), self.store)
        state = update(state, SelectExercise(2), self.store)
        self.assertEqual(state.view, "editor")
        self.assertEqual(state.current_exercise_id, 2)
        self.assertTrue(state.code.startswith("def add(a, b):"))

    def test_select_unknown_exercise(self):
        with self.assertRaises(KeyError):
            update(self.state, SelectExercise(42), self.store)

    def test_template_with_pass_is_not_completed(self):
        state = update(self.state, SelectExercise(2), self.store)
        state = update(state, RunCode(), self.store)
        self.assertTrue(state.report.ok)
        self.assertEqual(state.progress.exercises_completed, 0)

    def test_solved_exercise_is_completed_once(self):
        state = update(self.state, SelectExercise(2), self.store)
        solution = "def add(a, b):\n    # sum\n    return a + b\n\nprint(add(3, 5))"
        state = update(state, EditCode(solution), self.store)
        state = update(state, RunCode(), self.store)
        state = update(state, RunCode(), self.store)
        self.assertEqual(state.progress.exercises_completed, 1)
        self.assertEqual(state.progress.completed_exercises, frozenset({2}))

    def test_untouched_template_is_not_completed(self):
        state = update(self.state, SelectExercise(1), self.store)
        state = update(state, RunCode(), self.store)
        self.assertTrue(state.report.ok)
        self.assertEqual(state.progress.exercises_completed, 0)
        state = update(state, EditCode("print('Hello, Python!')"), self.store)
        state = update(state, RunCode(), self.store)
        self.assertEqual(state.progress.completed_exercises, frozenset({1}))

    def test_clear_code(self):
        state = update(self.state, ClearCode(), self.store)
        self.assertEqual(state.code, "")

    def test_tutorial_cursor_is_clamped(self):
        state = update(self.state, StartTutorial(), self.store)
        self.assertEqual(state.view, "tutorials")
        state = update(state, PreviousTutorialStep(), self.store)
        self.assertEqual(state.tutorial_step, 0)
        for _ in range(10):
            state = update(state, NextTutorialStep(), self.store)
        self.assertEqual(state.tutorial_step, 4)

    def test_start_tutorial_resets_cursor(self):
        state = update(self.state, StartTutorial(0), self.store)
        state = update(state, NextTutorialStep(), self.store)
        state = update(state, StartTutorial(1), self.store)
        self.assertEqual((state.tutorial_index, state.tutorial_step), (1, 0))
        for _ in range(10):
            state = update(state, NextTutorialStep(), self.store)
        self.assertEqual(state.tutorial_step, 3)

    def test_start_unknown_tutorial(self):
        with self.assertRaises(IndexError):
            update(self.state, StartTutorial(5), self.store)

    def test_navigate(self):
        self.assertEqual(update(self.state, Navigate("dashboard"), self.store).view, "dashboard")
        with self.assertRaises(ValueError):
            update(self.state, Navigate("settings"), self.store)

    def test_skill_level(self):
        state = update(self.state, SetSkillLevel("intermediate"), self.store)
        self.assertEqual(state.skill_level, "intermediate")
        with self.assertRaises(ValueError):
            update(self.state, SetSkillLevel("expert"), self.store)

    def test_unknown_command(self):
        with self.assertRaises(TypeError):
            update(self.state, "run", self.store)


if __name__ == "__main__":
    unittest.main()
