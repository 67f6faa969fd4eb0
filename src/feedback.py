"""Rule-based feedback for code typed in the editor.

There is no parser here: every check is a plain substring test over the text
(or over a single line for the style checks), so ``if`` also matches inside an
identifier such as ``gift``.  New checks can be added by extending
``STRUCTURAL_RULES`` or ``LOGIC_RULES``.

Structural rules are evaluated in order and every match overwrites the result
of the previous one, so the *last* matching rule decides the status message.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Sequence, Tuple, Union

MAX_LINE_LENGTH = 80
COMMENT_MARKER = "#"
SUCCESS_MESSAGE = "Code executed successfully!"
COMMENT_SUGGESTION = "Consider adding comments to explain your code"

SourceText = Union[str, Sequence[str], None]


@dataclass(frozen=True)
class Report:
    """Outcome of a single :func:`analyze` call."""

    style_notes: Tuple[str, ...] = ()
    logic_notes: Tuple[str, ...] = ()
    status_message: str = SUCCESS_MESSAGE
    ok: bool = True
    debug_hints: Tuple[str, ...] = ()


@dataclass(frozen=True)
class StructuralRule:
    """Flag text that contains ``trigger`` but never ``closer``."""

    trigger: str
    closer: str
    message: str
    hints: Tuple[str, ...] = field(default_factory=tuple)

    def check(self, text: str) -> Optional[Tuple[str, Tuple[str, ...]]]:
        if self.trigger in text and self.closer not in text:
            return self.message, self.hints
        return None


@dataclass(frozen=True)
class LogicRule:
    """Literal fragment and associated message."""

    fragment: str
    message: str


STRUCTURAL_RULES: List[StructuralRule] = [
    StructuralRule(
        "print(",
        ")",
        "Syntax Error: Missing closing parenthesis in print statement",
        (
            "Check that all parentheses are properly closed",
            "Make sure function calls have matching opening and closing parentheses",
        ),
    ),
    StructuralRule(
        "if",
        ":",
        "Syntax Error: Missing colon after if statement",
        (
            "Add a colon at the end of if statements: if condition:",
            "Remember that Python uses colons to start code blocks",
        ),
    ),
    StructuralRule(
        "def",
        ":",
        "Syntax Error: Missing colon after function definition",
        (
            "Function definitions need a colon: def my_function():",
            "The colon indicates the start of the function body",
        ),
    ),
]

LOGIC_RULES: List[LogicRule] = [
    LogicRule("pass", "Found 'pass' statement - consider implementing actual logic"),
    LogicRule("while True:", "Infinite loop detected - make sure there's a break condition"),
]


def _as_text(source: SourceText) -> str:
    if source is None:
        return ""
    if isinstance(source, str):
        return source
    return "\n".join(str(line) for line in source)


def style_notes(text: str) -> List[str]:
    """Return formatting suggestions for ``text``.

    Per-line notes come first in line order (length before tabs for the same
    line); the comment suggestion, when needed, is always last.
    """
    notes: List[str] = []
    for number, line in enumerate(text.split("\n"), start=1):
        if len(line) > MAX_LINE_LENGTH:
            notes.append(f"Line {number}: Line is too long ({len(line)} characters)")
        if "\t" in line:
            notes.append(f"Line {number}: Use spaces instead of tabs for indentation")
    if COMMENT_MARKER not in text:
        notes.append(COMMENT_SUGGESTION)
    return notes


def structural_error(
    text: str, rules: Iterable[StructuralRule] = STRUCTURAL_RULES
) -> Optional[Tuple[str, Tuple[str, ...]]]:
    """Return ``(message, hints)`` of the last matching rule, if any."""
    result = None
    for rule in rules:
        match = rule.check(text)
        if match is not None:
            result = match
    return result


def logic_notes(text: str, rules: Iterable[LogicRule] = LOGIC_RULES) -> List[str]:
    return [rule.message for rule in rules if rule.fragment in text]


def analyze(source: SourceText) -> Report:
    """Analyse ``source`` and return a fresh :class:`Report`.

    Parameters
    ----------
    source:
        Code typed by the learner, either as one string or as a sequence of
        lines.  ``None`` is treated as empty code.

    The function never raises for any text input: problems found in the code
    are reported with ``ok=False`` and a descriptive ``status_message``.
    """

    text = _as_text(source)
    notes = tuple(style_notes(text))

    error = structural_error(text)
    if error is not None:
        message, hints = error
        return Report(
            style_notes=notes,
            status_message=message,
            ok=False,
            debug_hints=tuple(hints),
        )

    return Report(
        style_notes=notes,
        logic_notes=tuple(logic_notes(text)),
        status_message=SUCCESS_MESSAGE,
        ok=True,
    )
