import pytest

from reedpaint.style import Color, Style, fixed
from reedpaint.text import strip_ansi


def test_basic_color_code():
    assert Color.GREEN.fg_code() == "32"


def test_fixed_color_code():
    assert fixed(5).fg_code() == "38;5;5"


@pytest.mark.parametrize("index", [-1, 256])
def test_fixed_out_of_range(index):
    with pytest.raises(ValueError):
        fixed(index)


def test_plain_style_leaves_text_alone():
    assert Style().paint("hello") == "hello"


def test_paint_round_trips_through_strip():
    style = Style(bold=True).with_fg(Color.LIGHT_BLUE)
    assert strip_ansi(style.paint("text here")) == "text here"


def test_paint_wraps_with_reset():
    painted = Style().with_fg(Color.RED).paint("hi")
    assert painted.endswith("\x1b[0m")
    assert Color.RED.fg_code() in painted


def test_with_fg_returns_new_style():
    base = Style()
    coloured = base.with_fg(Color.CYAN)
    assert base.foreground is None
    assert coloured.foreground == Color.CYAN