from reedpaint.query import (
    get_reedline_keybinding_modifiers,
    get_reedline_keycodes,
    get_reedline_prompt_edit_modes,
)


def test_keybinding_modifiers():
    modifiers = get_reedline_keybinding_modifiers()
    assert modifiers[:4] == ["Alt", "Control", "Shift", "None"]
    assert modifiers[-1] == "Control_Shift_Alt"
    assert len(modifiers) == len(set(modifiers))


def test_keybinding_modifiers_returns_fresh_list():
    first = get_reedline_keybinding_modifiers()
    first.clear()
    assert "Alt" in get_reedline_keybinding_modifiers()


def test_prompt_edit_modes():
    assert get_reedline_prompt_edit_modes() == [
        "Default",
        "Emacs",
        "Vi_Normal\nVi_Insert",
        "Custom_",
    ]


def test_keycodes_count_and_order():
    keycodes = get_reedline_keycodes()
    assert len(keycodes) == 19
    assert keycodes[0] == "Backspace"
    assert keycodes[-1] == "Esc"


def test_keycodes_contain_placeholders():
    keycodes = get_reedline_keycodes()
    assert "F<number>" in keycodes
    assert "Space" in keycodes
    assert "Char_<letter>" in keycodes
    assert keycodes.index("Space") < keycodes.index("Char_<letter>")


def test_keycodes_unique():
    keycodes = get_reedline_keycodes()
    assert len(set(keycodes)) == len(keycodes)