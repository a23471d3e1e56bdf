# guart

guart is a small widget toolkit for text terminals and serial consoles. It draws
widgets with box-drawing characters and ANSI escape sequences. The widgets are
windows, labels, text boxes, lines, button boxes, toasts, modal windows, lists,
radio lists, check lists and sliders. Tab moves keyboard focus between the
focusable widgets.

It needs a POSIX system because it uses `termios` for raw keyboard input and for
serial ports.

## Installation

```
pip install .
```

To also install what the test suite needs:

```
pip install ".[test]"
```

## Demo

```
guart-demo
```

The demo draws a screen that holds two windows, two button boxes, a slider and a
check list. At the start, the windows, the second button box and the slider are
inactive and drawn dimmed.

- Tab moves focus.
- The arrow keys move inside the focused widget.
- Enter on a button shows a toast. Enter, Escape or Space closes the toast.
- In the check list, Enter on an item switches the widget of that name between
  active and inactive. Space ticks or clears the item's box.
- Ctrl+C or Ctrl+D quits and restores the terminal.

To draw to a serial device instead of standard output:

```
guart-demo --serial /dev/ttyUSB0
```

Keys are still read from the local terminal. If standard input is not a
terminal, the demo prints `Failed to initialize terminal input` and exits with
status 1.

## Usage

A `Screen` (`guart.screen`) writes to an `Output` (`guart.output`):

- `StreamOutput` wraps any text stream and defaults to `sys.stdout`.
- `SerialOutput` (`guart.serial_output`) writes to a serial device set to raw
  mode at 115200 baud, 8N1. It can be used as a context manager.

```python
import sys

from guart.basic_widgets import ButtonBox, Label, Toast, Window
from guart.geometry import Dimensions, Point
from guart.output import StreamOutput
from guart.screen import Screen
from guart.terminal import TerminalInput

screen = Screen(StreamOutput(sys.stdout))

window = Window(Point(10, 10), Dimensions(30, 10))
window.title = "Test Window"
window.add_widget(Label(Point(0, 0), "Hello World!"))

buttons = ButtonBox(Point(0, 2), Dimensions(20, 1), ["OK", "Cancel"])

def on_button(widget, action):
    screen.add_widget(Toast(Point(20, 20), f"Button clicked: {action}"))
    screen.invalidate()

buttons.on_action = on_button
window.add_widget(buttons)
screen.add_widget(window)
screen.invalidate()

with TerminalInput() as terminal:
    while screen.process_input(terminal.get_special_key()):
        pass
```

### Positions and the widget tree

Positions are `Point(x, y)` values in character cells. Sizes are
`Dimensions(width, height)`. A child's position is measured from its parent's
content position. A `Window` puts its content one cell inside its border.
Children that are added later are drawn on top. When a child gains focus, it is
moved to the top.

### Signals

Every widget has three signals: `on_action`, `on_focus` and `on_dispose`. Each
one is called as `callback(widget, text)`. The widgets fire `on_action` as
follows:

- `ButtonBox` and the lists fire it on Enter, with the active button or item.
- A `Slider` fires it whenever its highlight moves.
- A `Toast` fires it with `""` when it is dismissed.
- A `ModalWindow` passes on the action of its buttons.

### Focus and input

`Screen.process_input(key)` passes one key sequence to the focused widget and
returns `True` in most cases:

- Tab moves focus to the next widget, unless the focused widget is modal.
  `Toast` and `ModalWindow` are modal.
- Ctrl+C and Ctrl+D restore the output and make it return `False`.

Inactive widgets (`set_active(False)`) leave the focus ring.

`TerminalInput` (`guart.terminal`) puts a terminal descriptor in raw mode.
`get_special_key()` returns one key, either a single character or a whole escape
sequence. It returns `""` when nothing arrived.

### Lists

`guart.lists` provides four lists:

- `List` scrolls with the up and down arrows.
- `RadioList` lets Space select at most one item (`selected_index`,
  `selected_item`).
- `CheckList` lets Space toggle any number of items (`selected_indexes`,
  `selected_items`).
- `Slider` draws its items as a vertical scale.

### Drawing

`Screen` picks the drawer for each widget by the widget's `type_name`. The
drawers are in `guart.drawers`. Key sequences are in `guart.keys`. The border
characters, styles and symbols are in `guart.charset`.

## What it does not do

guart has no text-entry widget. It has no mouse support, no colours beyond the
dimmed and reverse styles, and no detection of the terminal's size. A screen is
always redrawn whole: it clears the terminal and draws every widget again. It
does not read input from a serial port. `SerialOutput` only writes.