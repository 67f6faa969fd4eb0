"""Exercise and tutorial content shown in the learning UI.

The built-in lists are always available.  An optional YAML file can replace
entries (same exercise id or tutorial title) or add new ones::

    exercises:
      - id: 5
        title: Fizz Buzz
        description: Print the numbers from 1 to 15 ...
        template: "for i in range(1, 16):\\n    # Your code here\\n    pass"
        difficulty: advanced
        category: loops
    tutorials:
      - title: Working with Lists
        steps:
          - "Lists hold ordered items: nums = [1, 2, 3]"
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

import yaml

logger = logging.getLogger(__name__)

DIFFICULTY_LEVELS: Tuple[str, ...] = ("beginner", "intermediate", "advanced")


@dataclass(frozen=True)
class ExerciseDescriptor:
    """One coding exercise with its starting template."""

    id: int
    title: str
    description: str
    template: str
    difficulty: str
    category: str


@dataclass(frozen=True)
class TutorialDescriptor:
    """Step-by-step tutorial."""

    title: str
    steps: Tuple[str, ...]


DEFAULT_EXERCISES: Tuple[ExerciseDescriptor, ...] = (
    ExerciseDescriptor(
        id=1,
        title="Hello World",
        description="Write a program that prints 'Hello, World!' to the console.",
        template="print('Hello, World!')",
        difficulty="beginner",
        category="basics",
    ),
    ExerciseDescriptor(
        id=2,
        title="Sum of Two Numbers",
        description="Create a function that takes two numbers and returns their sum.",
        template="def add(a, b):\n    # Your code here\n    pass\n\nresult = add(3, 5)\nprint(result)",
        difficulty="beginner",
        category="functions",
    ),
    ExerciseDescriptor(
        id=3,
        title="Factorial Calculator",
        description="Write a function that calculates the factorial of a number using recursion.",
        template="def factorial(n):\n    # Your code here\n    pass\n\nprint(factorial(5))",
        difficulty="intermediate",
        category="recursion",
    ),
    ExerciseDescriptor(
        id=4,
        title="List Manipulation",
        description="Create a program that filters even numbers from a list and squares them.",
        template="numbers = [1, 2, 3, 4, 5, 6, 7, 8, 9, 10]\n# Your code here",
        difficulty="intermediate",
        category="lists",
    ),
)

DEFAULT_TUTORIALS: Tuple[TutorialDescriptor, ...] = (
    TutorialDescriptor(
        title="Introduction to Python",
        steps=(
            "Welcome to Python! Let's start with the basics.",
            "Python uses print() to display output. Try: print('Hello World')",
            "Variables store data. Example: name = 'Alice'",
            "Conditionals: if name == 'Alice': print('Hello Alice!')",
            "Loops: for i in range(3): print(i)",
        ),
    ),
    TutorialDescriptor(
        title="Functions and Modules",
        steps=(
            "Functions are reusable code blocks. def greet(): print('Hello!')",
            "Parameters: def greet(name): print(f'Hello {name}!')",
            "Return values: def square(x): return x * x",
            "Import modules: import math\nprint(math.sqrt(16))",
        ),
    ),
)


def validate_difficulty(difficulty: str) -> str:
    """Return ``difficulty`` if it is a known tier, raise ``ValueError`` otherwise."""
    if difficulty not in DIFFICULTY_LEVELS:
        raise ValueError(
            f"Unknown difficulty '{difficulty}'. Expected one of: {', '.join(DIFFICULTY_LEVELS)}"
        )
    return difficulty


class ContentStore:
    """Read-only collection of exercises and tutorials."""

    def __init__(
        self,
        exercises: Tuple[ExerciseDescriptor, ...] = DEFAULT_EXERCISES,
        tutorials: Tuple[TutorialDescriptor, ...] = DEFAULT_TUTORIALS,
    ) -> None:
        self._exercises = tuple(exercises)
        self._tutorials = tuple(tutorials)
        self._by_id = {exercise.id: exercise for exercise in self._exercises}

    @property
    def exercises(self) -> Tuple[ExerciseDescriptor, ...]:
        return self._exercises

    @property
    def tutorials(self) -> Tuple[TutorialDescriptor, ...]:
        return self._tutorials

    def by_difficulty(self, difficulty: str) -> List[ExerciseDescriptor]:
        """Return the exercises of one tier, in declaration order."""
        validate_difficulty(difficulty)
        return [ex for ex in self._exercises if ex.difficulty == difficulty]

    def suggestions(self, difficulty: str, limit: int = 2) -> List[ExerciseDescriptor]:
        return self.by_difficulty(difficulty)[:limit]

    def get_exercise(self, exercise_id: int) -> ExerciseDescriptor:
        try:
            return self._by_id[exercise_id]
        except KeyError:
            raise KeyError(f"Unknown exercise id: {exercise_id}") from None

    def get_tutorial(self, index: int) -> TutorialDescriptor:
        if not 0 <= index < len(self._tutorials):
            raise IndexError(f"Unknown tutorial index: {index}")
        return self._tutorials[index]


def _require(raw: Dict[str, Any], key: str, kind: str) -> Any:
    if key not in raw or raw[key] is None:
        raise ValueError(f"{kind} {raw!r} is missing required field '{key}'")
    return raw[key]


def _exercise_from_dict(raw: Dict[str, Any]) -> ExerciseDescriptor:
    """Build an exercise from one YAML mapping."""
    if not isinstance(raw, dict):
        raise ValueError(f"Exercise entry must be a mapping, got {raw!r}")
    return ExerciseDescriptor(
        id=int(_require(raw, "id", "Exercise")),
        title=str(_require(raw, "title", "Exercise")),
        description=str(raw.get("description") or ""),
        template=str(raw.get("template") or ""),
        difficulty=validate_difficulty(str(_require(raw, "difficulty", "Exercise"))),
        category=str(raw.get("category") or ""),
    )


def _tutorial_from_dict(raw: Dict[str, Any]) -> TutorialDescriptor:
    """Build a tutorial from one YAML mapping."""
    if not isinstance(raw, dict):
        raise ValueError(f"Tutorial entry must be a mapping, got {raw!r}")
    title = str(_require(raw, "title", "Tutorial"))
    raw_steps = raw.get("steps") or []
    if not isinstance(raw_steps, list):
        raise ValueError(f"Tutorial '{title}' steps must be a list, got {raw_steps!r}")
    steps = tuple(str(step) for step in raw_steps)
    if not steps:
        raise ValueError(f"Tutorial '{title}' has no steps.")
    return TutorialDescriptor(title=title, steps=steps)


def load_content(path: Optional[Path | str] = None) -> ContentStore:
    """Return a :class:`ContentStore` with the defaults merged with ``path``.

    Parameters
    ----------
    path:
        Optional YAML file.  When it does not exist only the built-in content
        is returned.

    Raises
    ------
    ValueError
        If the file is malformed or an entry fails validation.
    """

    exercises: Dict[int, ExerciseDescriptor] = {ex.id: ex for ex in DEFAULT_EXERCISES}
    tutorials: Dict[str, TutorialDescriptor] = {tut.title: tut for tut in DEFAULT_TUTORIALS}

    if path is None or not Path(path).exists():
        if path is not None:
            logger.info("Content file %s not found, using built-in content", path)
        return ContentStore(tuple(exercises.values()), tuple(tutorials.values()))

    with open(path, "r", encoding="utf8") as fh:
        try:
            data = yaml.safe_load(fh) or {}
        except yaml.YAMLError as exc:
            raise ValueError(f"Invalid YAML in content file {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ValueError(f"Content file {path} must contain a mapping at the top level.")

    seen_ids = set()
    for raw in data.get("exercises") or []:
        exercise = _exercise_from_dict(raw)
        if exercise.id in seen_ids:
            raise ValueError(f"Duplicate exercise id in {path}: {exercise.id}")
        seen_ids.add(exercise.id)
        exercises[exercise.id] = exercise

    for raw in data.get("tutorials") or []:
        tutorial = _tutorial_from_dict(raw)
        tutorials[tutorial.title] = tutorial

    logger.info(
        "Loaded content from %s: %d exercises, %d tutorials",
        path,
        len(exercises),
        len(tutorials),
    )
    return ContentStore(tuple(exercises.values()), tuple(tutorials.values()))
