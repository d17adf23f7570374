import io

import pytest

from reedpaint.default_prompt import DefaultPrompt, DefaultPromptSegment
from reedpaint.painter import Painter, skip_buffer_lines
from reedpaint.prompt import PromptEditMode
from reedpaint.prompt_lines import PromptLines


def _prompt():
    return DefaultPrompt(DefaultPromptSegment("basic", "> "), DefaultPromptSegment.EMPTY)


def _painter(size=(80, 24), cursor=(0, 0)):
    stream = io.StringIO()
    painter = Painter(stream)
    painter.initialize_prompt_position(size, cursor)
    return painter, stream


def _lines(before, after="", hint=""):
    return PromptLines(_prompt(), PromptEditMode.DEFAULT, None, before, after, hint)


def test_skip_lines():
    text = "sentence1\nsentence2\nsentence3\n"
    assert skip_buffer_lines(text, 1, None) == "sentence2\nsentence3"
    assert skip_buffer_lines(text, 2, None) == "sentence3"
    assert skip_buffer_lines(text, 3, None) == ""
    assert skip_buffer_lines(text, 4, None) == ""


def test_skip_lines_no_newline():
    text = "sentence1"
    assert skip_buffer_lines(text, 0, None) == "sentence1"
    assert skip_buffer_lines(text, 1, None) == ""


@pytest.mark.parametrize(
    "skip, offset, expected",
    [
        (1, 1, "sentence2\nsentence3"),
        (1, 2, "sentence2\nsentence3\nsentence4"),
        (2, 1, "sentence3\nsentence4"),
        (1, 10, "sentence2\nsentence3\nsentence4\nsentence5"),
        (0, 1, "sentence1\nsentence2"),
        (0, 0, "sentence1"),
        (1, 0, "sentence2"),
    ],
)
def test_skip_lines_with_limit(skip, offset, expected):
    text = "sentence1\nsentence2\nsentence3\nsentence4\nsentence5"
    assert skip_buffer_lines(text, skip, offset) == expected


def test_initialize_uses_default_size_when_zero():
    painter, _ = _painter(size=(0, 0))
    assert (painter.screen_width(), painter.screen_height()) == (80, 24)


def test_initialize_advances_past_content():
    painter, _ = _painter(cursor=(5, 3))
    assert painter.prompt_start_row == 4
    assert painter.remaining_lines() == 20


def test_initialize_on_last_row_makes_room():
    painter, stream = _painter(cursor=(3, 23))
    assert painter.prompt_start_row == 23
    assert stream.getvalue() == "\r\n"


def test_handle_resize_keeps_visible_prompt():
    painter, _ = _painter(cursor=(0, 5))
    painter.handle_resize(80, 20)
    assert painter.prompt_start_row == 5
    assert painter.screen_height() == 20


def test_handle_resize_width_change_moves_prompt():
    painter, _ = _painter(cursor=(0, 5))
    painter.handle_resize(100, 20)
    assert painter.prompt_start_row == 19


def test_handle_resize_prompt_hidden():
    painter, _ = _painter(cursor=(0, 5))
    painter.handle_resize(80, 4)
    assert painter.prompt_start_row == 3


def test_paint_line():
    painter, stream = _painter()
    painter.paint_line("hello")
    assert stream.getvalue() == "hello\r\n"


def test_repaint_small_buffer():
    painter, stream = _painter()
    painter.repaint_buffer(_prompt(), _lines("abc", "def"), False)
    assert stream.getvalue() == (
        "\x1b[?25l\x1b[1;1H\x1b[J> 〉\x1b7\x1b[1;81H\x1b8abc\x1b7def\x1b8\x1b[?25h"
    )
    assert painter.last_required_lines == 1
    assert painter.large_buffer is False


def test_repaint_with_colors_resets():
    painter, stream = _painter()
    painter.repaint_buffer(_prompt(), _lines("abc"), True)
    output = stream.getvalue()
    assert "\x1b[32m\x1b[1m> " in output
    assert "\x1b[0mabc" in output


def test_repaint_scrolls_when_short_of_room():
    painter, stream = _painter(cursor=(0, 23))
    painter.repaint_buffer(_prompt(), _lines("a\nb\nc"), False)
    assert "\x1b[2S" in stream.getvalue()
    assert painter.prompt_start_row == 21
    assert painter.last_required_lines == 3


def test_move_cursor_to_end_scrolls():
    painter, stream = _painter(cursor=(0, 23))
    painter.repaint_buffer(_prompt(), _lines("a\nb\nc"), False)
    stream.seek(0)
    stream.truncate()
    painter.move_cursor_to_end()
    assert stream.getvalue() == "\x1b[1S\x1b[24;1H"


def test_repaint_large_buffer_skips_hidden_lines():
    painter, stream = _painter(size=(80, 3), cursor=(0, 1))
    painter.repaint_buffer(_prompt(), _lines("l1\nl2\nl3\nl4"), False)
    output = stream.getvalue()
    assert painter.large_buffer is True
    assert painter.prompt_start_row == 0
    assert "l1" not in output
    assert "l2\r\nl3\r\nl4\x1b7" in output


def test_clear_scrollback():
    painter, stream = _painter(cursor=(0, 10))
    painter.clear_scrollback((80, 24))
    assert stream.getvalue() == "\x1b[2J\x1b[3J\x1b[1;1H"
    assert painter.prompt_start_row == 0


def test_clear_screen():
    painter, stream = _painter(size=(80, 2), cursor=(0, 1))
    painter.clear_screen((80, 2))
    assert stream.getvalue() == "\x1b[?25l\n\n\n\n\x1b[1;1H\x1b[?25h"
    assert painter.prompt_start_row == 0


def test_external_message_advances_prompt():
    painter, stream = _painter(cursor=(0, 5))
    painter.print_external_message(["hi"], "abc", _prompt())
    assert stream.getvalue() == ""
    assert painter.prompt_start_row == 6
    painter.print_crlf()
    assert stream.getvalue() == "\r" + " " * 80 + "\rhi\r\n\r\n"


def test_external_message_stays_on_last_row():
    painter, _ = _painter(cursor=(0, 23))
    painter.print_external_message(["one", "two"], "abc", _prompt())
    assert painter.prompt_start_row == 23


def test_external_message_moves_up_for_multiline_buffer():
    painter, stream = _painter(cursor=(0, 5))
    painter.print_external_message(["hi"], "a\nb", _prompt())
    painter.print_crlf()
    assert stream.getvalue().startswith("\x1b[1A\r")