"""The prompt interface and the modes a prompt can be rendered in."""

from __future__ import annotations

import enum
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import ClassVar

from reedpaint.style import Color, fixed

DEFAULT_PROMPT_COLOR = Color.GREEN
DEFAULT_PROMPT_MULTILINE_COLOR = Color.LIGHT_BLUE
DEFAULT_INDICATOR_COLOR = Color.CYAN
DEFAULT_PROMPT_RIGHT_COLOR = fixed(5)

_EDIT_KINDS = ("Default", "Emacs", "Vi", "Custom")


class PromptHistorySearchStatus(enum.Enum):
    """Whether the history search currently finds a match."""

    PASSING = "passing"
    FAILING = "failing"


@dataclass
class PromptHistorySearch:
    """State of a history search shown in the prompt."""

    status: PromptHistorySearchStatus
    term: str


class PromptViMode(enum.Enum):
    """The vi sub-modes the prompt can show."""

    NORMAL = "Normal"
    INSERT = "Insert"


@dataclass(frozen=True)
class PromptEditMode:
    """The editing mode: Default, Emacs, Vi (with a sub-mode) or Custom."""

    kind: str
    vi_mode: PromptViMode | None = None
    custom: str = ""

    DEFAULT: ClassVar[PromptEditMode]
    EMACS: ClassVar[PromptEditMode]
    VI_NORMAL: ClassVar[PromptEditMode]
    VI_INSERT: ClassVar[PromptEditMode]

    def __post_init__(self) -> None:
        if self.kind not in _EDIT_KINDS:
            raise ValueError(f"unknown edit mode: {self.kind!r}")
        if self.kind == "Vi":
            if self.vi_mode is None:
                object.__setattr__(self, "vi_mode", PromptViMode.NORMAL)
        elif self.vi_mode is not None:
            raise ValueError("only the Vi edit mode carries a vi sub-mode")

    def __str__(self) -> str:
        if self.kind == "Vi":
            return "Vi_Normal\nVi_Insert"
        if self.kind == "Custom":
            return f"Custom_{self.custom}"
        return self.kind


PromptEditMode.DEFAULT = PromptEditMode("Default")
PromptEditMode.EMACS = PromptEditMode("Emacs")
PromptEditMode.VI_NORMAL = PromptEditMode("Vi", PromptViMode.NORMAL)
PromptEditMode.VI_INSERT = PromptEditMode("Vi", PromptViMode.INSERT)


def all_edit_modes() -> list[PromptEditMode]:
    """One representative of each edit mode variant."""
    return [
        PromptEditMode.DEFAULT,
        PromptEditMode.EMACS,
        PromptEditMode.VI_NORMAL,
        PromptEditMode("Custom"),
    ]


class Prompt(ABC):
    """Content displayed before the edited line."""

    @abstractmethod
    def render_prompt_left(self) -> str:
        """The left (main) prompt."""

    @abstractmethod
    def render_prompt_right(self) -> str:
        """The right prompt."""

    @abstractmethod
    def render_prompt_indicator(self, prompt_mode: PromptEditMode) -> str:
        """The indicator that follows the prompt and reflects the edit mode."""

    @abstractmethod
    def render_prompt_multiline_indicator(self) -> str:
        """The indicator shown before explicit new lines."""

    @abstractmethod
    def render_prompt_history_search_indicator(
        self, history_search: PromptHistorySearch
    ) -> str:
        """The indicator shown during reverse history search."""

    def get_prompt_color(self) -> Color:
        return DEFAULT_PROMPT_COLOR

    def get_prompt_multiline_color(self) -> Color:
        return DEFAULT_PROMPT_MULTILINE_COLOR

    def get_indicator_color(self) -> Color:
        return DEFAULT_INDICATOR_COLOR

    def get_prompt_right_color(self) -> Color:
        return DEFAULT_PROMPT_RIGHT_COLOR

    def right_prompt_on_last_line(self) -> bool:
        """Whether the right prompt goes on the last prompt line."""
        return False