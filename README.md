# scratchpad

A minimal scratchpad text editor. It opens a resizable window holding a single
buffer of text. The text is drawn in black on a white background with pygame's
default font. A cursor blinks every half second.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Usage

Start the editor with:

```
scratchpad
```

A resizable 1600×1200 window opens, titled `scratchpad`. The command takes no
options apart from `--help`.

### Keys

| Key                 | Action                                   |
|---------------------|------------------------------------------|
| printable text      | inserted at the cursor                   |
| Space               | inserts a space                          |
| Enter / keypad Enter| inserts a newline                        |
| Backspace           | deletes the character before the cursor  |
| Delete              | deletes the character after the cursor   |
| Left / Right        | moves the cursor by one character        |
| Home / End          | moves the cursor to the start / end of the whole buffer |
| Escape              | quits                                    |

Held keys repeat. Closing the window also quits.

If the editor fails to start or to draw, it prints `error: ...` to standard
error and lists the underlying causes under `because:`. It then exits with
status 1.

## What it does not do

- It does not open, save or load files. The text is lost when the window closes.
- It has no selection, clipboard, undo or scrolling.
- Up and Down do nothing.
- Home and End move to the start and end of the whole buffer, not of the
  current line.
- The cursor is placed by a fixed character width, measured from the left
  margin on the first line. It does not follow the text onto later lines.

## Using it as a library

The editing logic in `scratchpad.app` works without opening a window:

```python
from scratchpad.app import App, ElementState, NamedKey

app = App()
app.handle_keyboard_input("hello", ElementState.PRESSED)
app.handle_keyboard_input(NamedKey.BACKSPACE, ElementState.PRESSED)
assert app.editor_content == "hell"
assert app.cursor_position == 4
```

Key releases (`ElementState.RELEASED`) leave the buffer unchanged.
`App.handle_event` takes a pygame event. It returns `False` when the editor
should stop, which happens on a window close or an Escape press.
`key_from_event` turns a pygame keyboard event into a `NamedKey`, a string, or
`None`.

`scratchpad.renderer.Renderer` draws a buffer onto any pygame surface.
`cursor_x` gives the horizontal position of the cursor for a given prefix of
text.

The errors the editor raises are in `scratchpad.errors`. They all derive from
`Error`, and `internal(message)` builds an `InternalError`.
`scratchpad.main.format_error` renders an error and its causes in the form
printed on failure.