"""Text helpers for terminal output: line endings, ANSI codes and widths."""

from __future__ import annotations

import re

import regex
from wcwidth import wcwidth

_LONE_LF = re.compile(r"(?<!\r)\n")

_ANSI = re.compile(
    r"\x1b\[[0-?]*[ -/]*[@-~]"  # CSI sequences
    r"|\x1b\][^\x07\x1b]*(?:\x07|\x1b\\)"  # OSC sequences
    r"|\x1b[ -/]*[0-~]"  # other escape sequences
    r"|[\x00-\x08\x0b\x0c\x0e-\x1f\x7f]"  # stray control characters
)

_GRAPHEME = regex.compile(r"\X")


def _lines(text: str) -> list[str]:
    """Split on LF, dropping a trailing CR per line and a final empty line."""
    if not text:
        return []
    parts = text.split("\n")
    if text.endswith("\n"):
        parts.pop()
    return [part[:-1] if part.endswith("\r") else part for part in parts]


def coerce_crlf(text: str) -> str:
    """Replace every LF not already preceded by CR with CRLF."""
    return _LONE_LF.sub("\r\n", text)


def strip_ansi(text: str) -> str:
    """Return ``text`` with ANSI escape sequences removed."""
    return _ANSI.sub("", text)


def line_width(line: str) -> int:
    """Display width of ``line`` once its ANSI codes are removed."""
    return sum(max(wcwidth(ch), 0) for ch in strip_ansi(line))


def estimate_single_line_wraps(line: str, terminal_columns: int) -> int:
    """Additional rows needed because ``line`` wraps; 0 if it fits."""
    if terminal_columns <= 0:
        raise ValueError("terminal_columns must be positive")
    width = line_width(line)
    rows = (width + terminal_columns - 1) // terminal_columns
    return max(rows - 1, 0)


def estimate_required_lines(text: str, screen_width: int) -> int:
    """Rows needed to print ``text``, counting wrapping."""
    return sum(1 + estimate_single_line_wraps(line, screen_width) for line in _lines(text))


def remove_last_grapheme(text: str) -> str:
    """Return ``text`` without its last grapheme cluster."""
    graphemes = _GRAPHEME.findall(text)
    if not graphemes:
        return ""
    return text[: len(text) - len(graphemes[-1])]