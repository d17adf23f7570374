"""Checks whether the entered text is complete or needs more lines."""

from __future__ import annotations

import enum
from abc import ABC, abstractmethod

_CLOSERS = {"{": "}", "[": "]", "(": ")"}


class ValidationResult(enum.Enum):
    """Whether the input is complete."""

    INCOMPLETE = "incomplete"
    COMPLETE = "complete"


class Validator(ABC):
    """Decides whether the current buffer is a complete input."""

    @abstractmethod
    def validate(self, line: str) -> ValidationResult:
        """Validate ``line``."""


def incomplete_brackets(line: str) -> bool:
    """True if some opening bracket in ``line`` is never closed."""
    expected: list[str] = []
    for ch in line:
        if ch in _CLOSERS:
            expected.append(_CLOSERS[ch])
        elif ch in "}])" and expected and expected[-1] == ch:
            expected.pop()
    return bool(expected)


class DefaultValidator(Validator):
    """Flags unbalanced double quotes and unclosed brackets as incomplete."""

    def validate(self, line: str) -> ValidationResult:
        if line.count('"') % 2 == 1 or incomplete_brackets(line):
            return ValidationResult.INCOMPLETE
        return ValidationResult.COMPLETE