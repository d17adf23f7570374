"""A buffer of styled fragments used for syntax highlighting."""

from __future__ import annotations

from dataclasses import dataclass, field

from reedpaint.prompt import Prompt
from reedpaint.style import Style
from reedpaint.text import strip_ansi


def _render_fragment(style: Style, text: str, prompt_style: Style, multiline_prompt: str) -> str:
    continuation = prompt_style.paint(f"\n{multiline_prompt}")
    return continuation.join(style.paint(line) for line in text.split("\n"))


@dataclass
class StyledText:
    """Text made of (style, fragment) pairs."""

    buffer: list[tuple[Style, str]] = field(default_factory=list)

    def push(self, styled: tuple[Style, str]) -> None:
        """Append a styled fragment."""
        self.buffer.append(styled)

    def render_around_insertion_point(
        self, insertion_point: int, prompt: Prompt, use_ansi_coloring: bool
    ) -> tuple[str, str]:
        """Render the text split at ``insertion_point`` (a character index).

        Newlines are followed by the prompt's multiline indicator.
        """
        multiline_prompt = prompt.render_prompt_multiline_indicator()
        prompt_style = Style().with_fg(prompt.get_prompt_multiline_color())
        left: list[str] = []
        right: list[str] = []
        current = 0
        for style, text in self.buffer:
            end = current + len(text)
            if current >= insertion_point:
                right.append(_render_fragment(style, text, prompt_style, multiline_prompt))
            elif end <= insertion_point:
                left.append(_render_fragment(style, text, prompt_style, multiline_prompt))
            else:
                offset = insertion_point - current
                left.append(_render_fragment(style, text[:offset], prompt_style, multiline_prompt))
                right.append(_render_fragment(style, text[offset:], prompt_style, multiline_prompt))
            current = end

        left_string, right_string = "".join(left), "".join(right)
        if use_ansi_coloring:
            return left_string, right_string
        return strip_ansi(left_string), strip_ansi(right_string)

    def render_simple(self) -> str:
        """The whole text with its styles applied."""
        return "".join(style.paint(text) for style, text in self.buffer)

    def raw_string(self) -> str:
        """The text without any styling."""
        return "".join(text for _, text in self.buffer)