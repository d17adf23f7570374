"""Names of the modifiers, edit modes and key codes the editor knows."""

from __future__ import annotations

from reedpaint.prompt import all_edit_modes

_KEYBINDING_MODIFIERS = (
    "Alt",
    "Control",
    "Shift",
    "None",
    "Shift_Alt",
    "Alt_Shift",
    "Control_Shift",
    "Shift_Control",
    "Control_Alt",
    "Alt_Control",
    "Control_Alt_Shift",
    "Control_Shift_Alt",
)

_KEYCODES = (
    "Backspace",
    "Enter",
    "Left",
    "Right",
    "Up",
    "Down",
    "Home",
    "End",
    "PageUp",
    "PageDown",
    "Tab",
    "BackTab",
    "Delete",
    "Insert",
    "F<number>",
    "Space",
    "Char_<letter>",
    "Null",
    "Esc",
)


def get_reedline_keybinding_modifiers() -> list[str]:
    """Names of the keybinding modifier combinations."""
    return list(_KEYBINDING_MODIFIERS)


def get_reedline_prompt_edit_modes() -> list[str]:
    """Names of the prompt edit modes."""
    return [str(mode) for mode in all_edit_modes()]


def get_reedline_keycodes() -> list[str]:
    """Names of the key codes usable in keybindings."""
    return list(_KEYCODES)