"""Painting the prompt and the edited buffer on a terminal."""

from __future__ import annotations

import re
import sys
from typing import TextIO

from reedpaint.prompt import Prompt
from reedpaint.prompt_lines import PromptLines
from reedpaint.style import Color
from reedpaint.text import coerce_crlf, line_width

_CSI = "\x1b["
_HIDE_CURSOR = f"{_CSI}?25l"
_SHOW_CURSOR = f"{_CSI}?25h"
_SAVE_POSITION = "\x1b7"
_RESTORE_POSITION = "\x1b8"
_CLEAR_FROM_CURSOR_DOWN = f"{_CSI}J"
_CLEAR_ALL = f"{_CSI}2J"
_CLEAR_PURGE = f"{_CSI}3J"
_BOLD = f"{_CSI}1m"
_RESET_COLOR = f"{_CSI}0m"

_DEFAULT_SIZE = (80, 24)
_NEWLINE = re.compile("\n")


def _move_to(column: int, row: int) -> str:
    return f"{_CSI}{row + 1};{column + 1}H"


def _scroll_up(rows: int) -> str:
    return f"{_CSI}{rows}S" if rows else ""


def _move_up(rows: int) -> str:
    return f"{_CSI}{rows}A" if rows else ""


def _foreground(color: Color) -> str:
    return f"{_CSI}{color.fg_code()}m"


def _line_count(text: str) -> int:
    """Number of lines in ``text``, a final newline not starting a new one."""
    if not text:
        return 0
    return text.count("\n") + (0 if text.endswith("\n") else 1)


def skip_buffer_lines(text: str, skip: int, offset: int | None) -> str:
    """Drop the first ``skip`` lines of ``text``.

    With ``offset`` given, keep only ``offset + 1`` lines after the skipped ones.
    Trailing newlines are removed from the result.
    """
    newlines = [match.start() for match in _NEWLINE.finditer(text)]
    if skip == 0:
        start = 0
    elif skip - 1 < len(newlines):
        start = newlines[skip - 1] + 1
    else:
        start = len(text)

    if offset is not None and skip + offset < len(newlines):
        end = newlines[skip + offset]
    else:
        end = len(text)

    return text[start:end].rstrip("\n")


class Painter:
    """Draws the prompt and buffer and keeps track of where the prompt starts."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream if stream is not None else sys.stderr
        self._queue: list[str] = []
        self.prompt_start_row = 0
        self.terminal_size = (0, 0)
        self.last_required_lines = 0
        self.large_buffer = False

    def _put(self, *parts: str) -> None:
        self._queue.extend(parts)

    def _flush(self) -> None:
        self._stream.write("".join(self._queue))
        self._queue.clear()
        flush = getattr(self._stream, "flush", None)
        if flush is not None:
            flush()

    def screen_height(self) -> int:
        """Height of the terminal window."""
        return self.terminal_size[1]

    def screen_width(self) -> int:
        """Width of the terminal window."""
        return self.terminal_size[0]

    def remaining_lines(self) -> int:
        """Rows available from the prompt down."""
        return max(self.screen_height() - self.prompt_start_row, 0)

    def initialize_prompt_position(
        self, terminal_size: tuple[int, int], cursor_position: tuple[int, int]
    ) -> None:
        """Set the prompt origin and the screen size for a new editing session.

        ``cursor_position`` is the zero-based (column, row) of the cursor.
        """
        self.terminal_size = _DEFAULT_SIZE if tuple(terminal_size) == (0, 0) else tuple(terminal_size)
        column, row = cursor_position
        # Leave existing content on the current row intact.
        new_row = row + 1 if column > 0 else row
        if new_row == self.screen_height():
            self.print_crlf()
            new_row = max(new_row - 1, 0)
        self.prompt_start_row = new_row

    def repaint_buffer(self, prompt: Prompt, lines: PromptLines, use_ansi_coloring: bool) -> None:
        """Draw the prompt, the buffer and the hint, scrolling when needed."""
        self._put(_HIDE_CURSOR)

        screen_width = self.screen_width()
        screen_height = self.screen_height()
        remaining_lines = self.remaining_lines()
        required_lines = lines.required_lines(screen_width)

        self.large_buffer = required_lines >= screen_height

        if self.large_buffer:
            self.prompt_start_row = 0
        elif required_lines >= remaining_lines:
            extra = max(required_lines - remaining_lines, 0)
            self._put(_scroll_up(extra))
            self.prompt_start_row = max(self.prompt_start_row - extra, 0)

        self._put(_move_to(0, self.prompt_start_row), _CLEAR_FROM_CURSOR_DOWN)

        if self.large_buffer:
            self._print_large_buffer(prompt, lines, use_ansi_coloring)
        else:
            self._print_small_buffer(prompt, lines, use_ansi_coloring)

        self.last_required_lines = required_lines
        self._put(_RESTORE_POSITION, _SHOW_CURSOR)
        self._flush()

    def _print_right_prompt(self, lines: PromptLines) -> None:
        screen_width = self.screen_width()
        start_position = max(screen_width - line_width(lines.prompt_str_right), 0)
        input_width = lines.estimate_right_prompt_line_width(screen_width)

        row = self.prompt_start_row
        if lines.right_prompt_on_last_line:
            row += lines.prompt_lines_with_wrap(screen_width)

        if input_width <= start_position:
            self._put(
                _SAVE_POSITION,
                _move_to(start_position, row),
                coerce_crlf(lines.prompt_str_right),
                _RESTORE_POSITION,
            )

    def _print_small_buffer(self, prompt: Prompt, lines: PromptLines, use_ansi_coloring: bool) -> None:
        if use_ansi_coloring:
            self._put(_foreground(prompt.get_prompt_color()), _BOLD)
        self._put(coerce_crlf(lines.prompt_str_left))

        if use_ansi_coloring:
            self._put(_foreground(prompt.get_indicator_color()), _BOLD)
        self._put(coerce_crlf(lines.prompt_indicator))

        if use_ansi_coloring:
            self._put(_foreground(prompt.get_prompt_right_color()), _BOLD)
        self._print_right_prompt(lines)

        if use_ansi_coloring:
            self._put(_RESET_COLOR)

        self._put(lines.before_cursor, _SAVE_POSITION, lines.after_cursor, lines.hint)

    def _print_large_buffer(self, prompt: Prompt, lines: PromptLines, use_ansi_coloring: bool) -> None:
        screen_width = self.screen_width()
        screen_height = self.screen_height()
        cursor_distance = lines.distance_from_prompt(screen_width)
        remaining_lines = max(screen_height - cursor_distance, 0)

        prompt_lines = lines.prompt_lines_with_wrap(screen_width)
        indicator_lines = _line_count(lines.prompt_indicator)
        before_cursor_lines = _line_count(lines.before_cursor)
        # One prompt line is shared with the first line of the buffer.
        total_lines_before = max(prompt_lines + indicator_lines + before_cursor_lines - 1, 0)

        # Rows that fall above the visible area.
        extra_rows = max(total_lines_before - screen_height, 0)

        if use_ansi_coloring:
            self._put(_foreground(prompt.get_prompt_color()))

        self._put(coerce_crlf(skip_buffer_lines(lines.prompt_str_left, extra_rows, None)))

        if extra_rows == 0:
            self._print_right_prompt(lines)

        extra_rows = max(extra_rows - prompt_lines, 0)
        self._put(coerce_crlf(skip_buffer_lines(lines.prompt_indicator, extra_rows, None)))

        if use_ansi_coloring:
            self._put(_RESET_COLOR)

        self._put(skip_buffer_lines(lines.before_cursor, extra_rows, None), _SAVE_POSITION)

        # The cursor row counts as a remaining line; it is not part of the offset.
        offset = max(remaining_lines - 1, 0)
        self._put(
            skip_buffer_lines(lines.after_cursor, 0, offset),
            skip_buffer_lines(lines.hint, 0, offset),
        )

    def handle_resize(self, width: int, height: int) -> None:
        """Update the screen size and prompt origin after a resize."""
        prev_width, prev_height = self.terminal_size
        prev_row = self.prompt_start_row
        self.terminal_size = (width, height)

        if prev_row < height and height <= prev_height and width == prev_width:
            # Shorter, same width, prompt start still visible.
            return
        self.prompt_start_row = max(height - 1, 0)

    def paint_line(self, line: str) -> None:
        """Write ``line`` followed by CR LF."""
        self._put(line, "\r\n")
        self._flush()

    def print_crlf(self) -> None:
        """Go to the beginning of the next line, also in raw mode."""
        self._put("\r\n")
        self._flush()

    def clear_screen(self, terminal_size: tuple[int, int]) -> None:
        """Push old output off the screen and start again at the top row."""
        self._put(_HIDE_CURSOR)
        self._put("\n" * (2 * terminal_size[1]))
        self._put(_move_to(0, 0), _SHOW_CURSOR)
        self._flush()
        self.initialize_prompt_position(terminal_size, (0, 0))

    def clear_scrollback(self, terminal_size: tuple[int, int]) -> None:
        """Clear the screen and its scrollback, then start at the top row."""
        self._put(_CLEAR_ALL, _CLEAR_PURGE, _move_to(0, 0))
        self._flush()
        self.initialize_prompt_position(terminal_size, (0, 0))

    def move_cursor_to_end(self) -> None:
        """Move the cursor below the painted buffer, scrolling if needed."""
        last_row = self.screen_height() - 1
        final_row = self.prompt_start_row + self.last_required_lines
        scroll = max(final_row - last_row, 0)
        if scroll:
            self._put(_scroll_up(scroll))
        self._put(_move_to(0, min(final_row, last_row)))
        self._flush()

    def print_external_message(self, messages: list[str], buffer: str, prompt: Prompt) -> None:
        """Queue external messages above the prompt; nothing is flushed."""
        width = self.screen_width()
        # The first wrapped line also carries the prompt.
        prompt_len = len(prompt.render_prompt_right().encode("utf-8")) + 3
        buffer_num_lines = 0
        for index, line in enumerate(buffer.splitlines()):
            length = len(line.encode("utf-8"))
            if index == 0:
                length += prompt_len
            buffer_num_lines += length // width + 1
        if buffer_num_lines > 1:
            self._put(_move_up(buffer_num_lines - 1))

        erase_line = f"\r{' ' * width}\r"
        height = self.screen_height()
        for message in messages:
            self._put(erase_line, message, "\r\n")
            self.prompt_start_row = min(self.prompt_start_row + 1, height - 1)