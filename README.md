# reedpaint

Building blocks for drawing an interactive prompt in a terminal: prompt
rendering, ANSI-aware width and wrap estimation, styled text, input
validation, and a painter that writes the prompt and buffer to a text
stream as ANSI escape sequences.

## Installation

```
pip install reedpaint
```

## What is inside

- `reedpaint.text`: `coerce_crlf` (lone LF becomes CRLF), `strip_ansi`,
  `line_width` (display width without escape codes), `estimate_single_line_wraps`,
  `estimate_required_lines` and `remove_last_grapheme`.
- `reedpaint.style`: `Color` with named constants such as `Color.GREEN` and
  `Color.LIGHT_BLUE`, `fixed(index)` for the 256-colour palette, and `Style`
  with `with_fg` and `paint`.
- `reedpaint.prompt`: the abstract `Prompt` class, `PromptEditMode`
  (`DEFAULT`, `EMACS`, `VI_NORMAL`, `VI_INSERT`, or `PromptEditMode("Custom", custom=...)`),
  `PromptViMode`, `PromptHistorySearch`, `PromptHistorySearchStatus` and
  `all_edit_modes`.
- `reedpaint.default_prompt`: `DefaultPrompt` built from two
  `DefaultPromptSegment`s: `DefaultPromptSegment("basic", text)`,
  `DefaultPromptSegment.WORKING_DIRECTORY` (home shown as `~`),
  `DefaultPromptSegment.CURRENT_DATE_TIME` or `DefaultPromptSegment.EMPTY`.
  By default the left side shows the working directory and the right side
  the date and time.
- `reedpaint.styled_text`: `StyledText`, a list of `(Style, str)` fragments
  with `push`, `render_simple`, `raw_string` and
  `render_around_insertion_point`, which splits the rendered text at a
  character index and puts the prompt's multiline indicator after each
  newline.
- `reedpaint.validator`: the abstract `Validator`, `DefaultValidator`
  (an odd number of double quotes or an unclosed bracket makes the input
  incomplete), `ValidationResult` and `incomplete_brackets`.
- `reedpaint.prompt_lines`: `PromptLines`, which gathers the prompt, the
  text before and after the cursor and the hint, and estimates how many
  terminal rows they take.
- `reedpaint.query`: `get_reedline_keybinding_modifiers`,
  `get_reedline_prompt_edit_modes` and `get_reedline_keycodes`, lists of names.
- `reedpaint.painter`: `Painter` and `skip_buffer_lines`.
- `reedpaint.errors`: `ReedlineError` and its subclasses
  `HistoryDatabaseError`, `OtherHistoryError`,
  `HistoryFeatureUnsupportedError` and `ReedlineIOError`.

## Example

```python
import sys

from reedpaint.default_prompt import DefaultPrompt, DefaultPromptSegment
from reedpaint.painter import Painter
from reedpaint.prompt import PromptEditMode
from reedpaint.prompt_lines import PromptLines
from reedpaint.validator import DefaultValidator, ValidationResult

prompt = DefaultPrompt(DefaultPromptSegment("basic", "demo"), DefaultPromptSegment.EMPTY)
lines = PromptLines(prompt, PromptEditMode.EMACS, None, "echo (hi", "", "")

painter = Painter(sys.stderr)
painter.initialize_prompt_position((80, 24), (0, 0))
painter.repaint_buffer(prompt, lines, True)

if DefaultValidator().validate("echo (hi") is ValidationResult.INCOMPLETE:
    painter.print_crlf()
```

`Painter()` writes to `sys.stderr` when no stream is given; any writable
text stream works, including `io.StringIO`.

## What it does not do

The package only draws. It does not read keys, put the terminal into raw
mode, or ask the terminal for its size or cursor position: the caller
passes these to `initialize_prompt_position`, `clear_screen`,
`clear_scrollback` and `handle_resize`. There are no keybindings, no edit
history storage, no completion menus and no cursor-shape changes, and the
package has no command to run.

## Running the tests

```
pip install -e ".[test]"
pytest
```