"""Prompt rendering, wrap estimation, validation and terminal painting for line editors."""

__version__ = "0.1.0"

__all__ = [
    "default_prompt",
    "errors",
    "painter",
    "prompt",
    "prompt_lines",
    "query",
    "style",
    "styled_text",
    "text",
    "validator",
]