"""The prompt and the edited buffer, split up for painting."""

from __future__ import annotations

from reedpaint.prompt import Prompt, PromptEditMode, PromptHistorySearch
from reedpaint.text import coerce_crlf, estimate_required_lines, line_width

_MAX_WIDTH = 0xFFFF


def _split_lines(text: str) -> list[str]:
    """Lines of ``text`` split on LF, without CR endings or a final empty line."""
    if not text:
        return []
    parts = text.split("\n")
    if text.endswith("\n"):
        parts.pop()
    return [part[:-1] if part.endswith("\r") else part for part in parts]


class PromptLines:
    """The prompt strings together with the text around the cursor and the hint."""

    def __init__(
        self,
        prompt: Prompt,
        prompt_mode: PromptEditMode,
        history_indicator: PromptHistorySearch | None,
        before_cursor: str,
        after_cursor: str,
        hint: str,
    ) -> None:
        self.prompt_str_left = prompt.render_prompt_left()
        self.prompt_str_right = prompt.render_prompt_right()
        if history_indicator is not None:
            self.prompt_indicator = prompt.render_prompt_history_search_indicator(
                history_indicator
            )
        else:
            self.prompt_indicator = prompt.render_prompt_indicator(prompt_mode)
        self.before_cursor = coerce_crlf(before_cursor)
        self.after_cursor = coerce_crlf(after_cursor)
        self.hint = coerce_crlf(hint)
        self.right_prompt_on_last_line = prompt.right_prompt_on_last_line()

    def required_lines(self, terminal_columns: int) -> int:
        """Rows needed to paint the prompt, the buffer and the hint."""
        text = (
            self.prompt_str_left
            + self.prompt_indicator
            + self.before_cursor
            + self.after_cursor
            + self.hint
        )
        return estimate_required_lines(text, terminal_columns)

    def distance_from_prompt(self, terminal_columns: int) -> int:
        """Rows between the start of the prompt and the cursor, with wrapping."""
        text = self.prompt_str_left + self.prompt_indicator + self.before_cursor
        return max(estimate_required_lines(text, terminal_columns) - 1, 0)

    def prompt_lines_with_wrap(self, screen_width: int) -> int:
        """Rows the prompt takes beyond its first, with wrapping."""
        text = self.prompt_str_left + self.prompt_indicator
        return max(estimate_required_lines(text, screen_width) - 1, 0)

    def estimate_right_prompt_line_width(self, terminal_columns: int) -> int:
        """Width already used on the row where the right prompt is drawn."""
        left_lines = _split_lines(self.prompt_str_left)
        input_lines = _split_lines(self.before_cursor + self.after_cursor + self.hint)
        first_input = input_lines[0] if input_lines else None

        estimate = 0
        if self.right_prompt_on_last_line:
            if left_lines:
                estimate += line_width(left_lines[-1])
                estimate += line_width(self.prompt_indicator)
                if first_input is not None:
                    estimate += line_width(first_input)
        else:
            required = estimate_required_lines(self.prompt_str_left, terminal_columns)
            if left_lines:
                estimate += line_width(left_lines[0])
            if required == 1:
                estimate += line_width(self.prompt_indicator)
                if first_input is not None:
                    estimate += line_width(first_input)

        return min(estimate, _MAX_WIDTH)