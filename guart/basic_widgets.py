"""Windows, labels, lines, button boxes, toasts and modal windows."""

from __future__ import annotations

from collections.abc import Iterable

from guart import keys
from guart.geometry import Dimensions, Point
from guart.widget import Widget

_ENTER_KEYS = (keys.CR, keys.CR_NL, keys.NEW_LINE)


class Window(Widget):
    """A bordered area whose children are placed inside the border."""

    def __init__(self, position: Point, dimensions: Dimensions) -> None:
        super().__init__(position)
        self.dimensions = dimensions
        self.title = ""

    @property
    def type_name(self) -> str:
        return "Window"

    @property
    def content_position(self) -> Point:
        return self.position + Point(1, 1)

    def resize(self, dimensions: Dimensions) -> None:
        self.dimensions = dimensions


class Label(Widget):
    """A single piece of text."""

    def __init__(self, position: Point, text: str = "") -> None:
        super().__init__(position)
        self.text = text

    @property
    def type_name(self) -> str:
        return "Label"


class TextBox(Label):
    """Text that may span several lines separated by newlines."""

    @property
    def type_name(self) -> str:
        return "TextBox"


class Line(Widget):
    """A horizontal rule, single or double."""

    def __init__(self, position: Point, width: int, double: bool = False) -> None:
        super().__init__(position)
        self.width = width
        self.double = double

    @property
    def type_name(self) -> str:
        return "Line"


class ButtonBox(Widget):
    """A row of buttons; left and right move between them, Enter fires ``on_action``."""

    focusable = True

    def __init__(
        self,
        position: Point,
        dimensions: Dimensions,
        buttons: Iterable[str] = (),
        border: bool = True,
    ) -> None:
        super().__init__(position)
        self.dimensions = dimensions
        self.border = border
        self.title = ""
        self._buttons = list(buttons)
        self._active_index = 0 if self._buttons else -1

    @property
    def type_name(self) -> str:
        return "ButtonBox"

    @property
    def buttons(self) -> tuple[str, ...]:
        return tuple(self._buttons)

    @property
    def active_index(self) -> int:
        """Index of the highlighted button, ``-1`` when there are none."""
        return self._active_index

    def add_button(self, button: str) -> None:
        self._buttons.append(button)
        if self._active_index < 0:
            self._active_index = 0

    def set_active_button(self, index: int) -> None:
        """Highlight the button at ``index``; raise ``IndexError`` if there is none."""
        if not 0 <= index < len(self._buttons):
            raise IndexError(f"button index {index} out of range")
        self._active_index = index

    def process_key(self, key: str) -> None:
        if not key:
            return
        if key == keys.LEFT:
            if self._active_index > 0:
                self.set_active_button(self._active_index - 1)
                self.invalidate()
        elif key == keys.RIGHT:
            if self._active_index < len(self._buttons) - 1:
                self.set_active_button(self._active_index + 1)
                self.invalidate()
        elif key in _ENTER_KEYS:
            if self.on_action is not None and self._active_index >= 0:
                self.on_action(self, self._buttons[self._active_index])


class Toast(Widget):
    """A modal message dismissed by Enter, Escape or Space."""

    focusable = True
    modal = True

    _DISMISS_KEYS = (keys.CR, keys.ESC, keys.SPACE, keys.CR_NL, keys.NEW_LINE)

    def __init__(self, position: Point, message: str) -> None:
        super().__init__(position)
        self._message = message

    @property
    def type_name(self) -> str:
        return "Toast"

    @property
    def message(self) -> str:
        return self._message

    def process_key(self, key: str) -> None:
        if key in self._DISMISS_KEYS:
            if self.on_action is not None:
                self.on_action(self, "")
            self.dispose()


class ModalWindow(Window):
    """A window with a message and a row of buttons that keeps focus until answered."""

    focusable = True
    modal = True

    def __init__(
        self,
        position: Point,
        dimensions: Dimensions,
        message: str,
        buttons: Iterable[str],
    ) -> None:
        super().__init__(position, dimensions)

        text_box = TextBox(Point(1, 1), message)
        text_box.label = "textBox-modal"
        button_box = ButtonBox(
            Point(0, dimensions.height - 3),
            Dimensions(dimensions.width - 2, 1),
            buttons,
            False,
        )
        button_box.label = "buttonBox-modal"
        line = Line(Point(0, dimensions.height - 4), dimensions.width, False)
        line.label = "line-modal"

        self.add_widget(text_box)
        self.add_widget(button_box)
        self.add_widget(line)
        self._button_box = button_box

        def forward(_widget: Widget, action: str) -> None:
            if self.on_action is not None:
                self.on_action(self, action)

        button_box.on_action = forward

    @property
    def button_box(self) -> ButtonBox:
        return self._button_box

    def process_key(self, key: str) -> None:
        self._button_box.process_key(key)