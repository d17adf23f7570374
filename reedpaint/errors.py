"""Errors raised by the line editor."""

from __future__ import annotations


class ReedlineError(Exception):
    """Base class of every error the line editor raises."""


class HistoryDatabaseError(ReedlineError):
    """The history database reported a failure."""

    def __str__(self) -> str:
        detail = self.args[0] if self.args else ""
        return f"error within history database: {detail}"


class OtherHistoryError(ReedlineError):
    """A history failure that is not tied to the database."""

    def __str__(self) -> str:
        detail = self.args[0] if self.args else ""
        return f"error within history: {detail}"


class HistoryFeatureUnsupportedError(ReedlineError):
    """The history backend does not support a requested feature."""

    def __init__(self, history: str, feature: str) -> None:
        super().__init__(history, feature)
        self.history = history
        self.feature = feature

    def __str__(self) -> str:
        return f"the history {self.history} does not support feature {self.feature}"


class ReedlineIOError(ReedlineError):
    """An input/output operation failed."""

    def __str__(self) -> str:
        detail = self.args[0] if self.args else ""
        return f"I/O error: {detail}"