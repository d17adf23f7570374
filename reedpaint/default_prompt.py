"""A ready-made prompt with configurable left and right segments."""

from __future__ import annotations

import datetime
import os
from dataclasses import dataclass
from typing import ClassVar

from reedpaint.prompt import (
    Prompt,
    PromptEditMode,
    PromptHistorySearch,
    PromptHistorySearchStatus,
    PromptViMode,
)

DEFAULT_PROMPT_INDICATOR = "〉"
DEFAULT_VI_INSERT_PROMPT_INDICATOR = ": "
DEFAULT_VI_NORMAL_PROMPT_INDICATOR = "〉"
DEFAULT_MULTILINE_INDICATOR = "::: "

_SEGMENT_KINDS = ("basic", "working_directory", "current_date_time", "empty")


def _working_dir() -> str:
    path = os.getcwd()
    home = os.environ.get("USERPROFILE")
    if home is None:
        home = os.environ.get("HOME", path)
    return path.replace(home, "~") if path != home else path


def _now() -> str:
    return datetime.datetime.now().strftime("%m/%d/%Y %I:%M:%S %p")


@dataclass(frozen=True)
class DefaultPromptSegment:
    """What one side of a DefaultPrompt shows."""

    kind: str
    text: str = ""

    WORKING_DIRECTORY: ClassVar[DefaultPromptSegment]
    CURRENT_DATE_TIME: ClassVar[DefaultPromptSegment]
    EMPTY: ClassVar[DefaultPromptSegment]

    def __post_init__(self) -> None:
        if self.kind not in _SEGMENT_KINDS:
            raise ValueError(f"unknown prompt segment: {self.kind!r}")

    def render(self) -> str:
        """The text this segment shows right now."""
        if self.kind == "basic":
            return self.text
        if self.kind == "working_directory":
            try:
                return _working_dir()
            except OSError:
                return "no path"
        if self.kind == "current_date_time":
            return _now()
        return ""


DefaultPromptSegment.WORKING_DIRECTORY = DefaultPromptSegment("working_directory")
DefaultPromptSegment.CURRENT_DATE_TIME = DefaultPromptSegment("current_date_time")
DefaultPromptSegment.EMPTY = DefaultPromptSegment("empty")


@dataclass
class DefaultPrompt(Prompt):
    """Prompt showing a left and a right segment."""

    left_prompt: DefaultPromptSegment = DefaultPromptSegment.WORKING_DIRECTORY
    right_prompt: DefaultPromptSegment = DefaultPromptSegment.CURRENT_DATE_TIME

    def render_prompt_left(self) -> str:
        return self.left_prompt.render()

    def render_prompt_right(self) -> str:
        return self.right_prompt.render()

    def render_prompt_indicator(self, prompt_mode: PromptEditMode) -> str:
        if prompt_mode.kind in ("Default", "Emacs"):
            return DEFAULT_PROMPT_INDICATOR
        if prompt_mode.kind == "Vi":
            if prompt_mode.vi_mode is PromptViMode.INSERT:
                return DEFAULT_VI_INSERT_PROMPT_INDICATOR
            return DEFAULT_VI_NORMAL_PROMPT_INDICATOR
        return f"({prompt_mode.custom})"

    def render_prompt_multiline_indicator(self) -> str:
        return DEFAULT_MULTILINE_INDICATOR

    def render_prompt_history_search_indicator(
        self, history_search: PromptHistorySearch
    ) -> str:
        prefix = "failing " if history_search.status is PromptHistorySearchStatus.FAILING else ""
        return f"({prefix}reverse-search: {history_search.term}) "