"""The root of the widget tree: canvas, drawer registry and focus controller at once."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from guart.drawers import (
    BaseDrawer,
    ButtonBoxDrawer,
    CheckListDrawer,
    LabelDrawer,
    LineDrawer,
    ListDrawer,
    RadioListDrawer,
    SliderDrawer,
    TextBoxDrawer,
    ToastDrawer,
    WindowDrawer,
)
from guart.focus import FocusController
from guart.geometry import Point
from guart.output import Output
from guart.widget import Canvas, Drawable, Drawer, Parent

_HIDE_CURSOR = "\x1b[?25l"
_SHOW_CURSOR = "\x1b[?25h"
_CLEAR_SCREEN = "\x1b[2J"
_HOME = "\x1b[H"
_RESET_COLOURS = "\x1b[0m"


class Screen(Canvas, Drawer, FocusController, Parent):
    """A whole terminal: renders top-level widgets and routes keys to the focused one."""

    def __init__(self, output: Output) -> None:
        super().__init__()
        self._output = output
        self._focus_controller = self
        self._drawer = self
        drawer_types: dict[str, type[BaseDrawer]] = {
            "Label": LabelDrawer,
            "Window": WindowDrawer,
            "ButtonBox": ButtonBoxDrawer,
            "Toast": ToastDrawer,
            "TextBox": TextBoxDrawer,
            "Line": LineDrawer,
            "List": ListDrawer,
            "RadioList": RadioListDrawer,
            "CheckList": CheckListDrawer,
            "Slider": SliderDrawer,
        }
        self._drawers: dict[str, BaseDrawer] = {
            name: cls(self) for name, cls in drawer_types.items()
        }

    @property
    def type_name(self) -> str:
        return "Screen"

    @property
    def output(self) -> Output:
        return self._output

    @property
    def drawers(self) -> Mapping[str, BaseDrawer]:
        """Drawers keyed by the widget type name they render."""
        return MappingProxyType(self._drawers)

    def invalidate(self) -> None:
        """Clear the terminal and redraw every widget, bottom to top."""
        self.clear()
        for widget in self.children:
            widget.invalidate()

    def move_cursor(self, point: Point) -> None:
        out = self._output
        out.write(_HOME)
        out.flush()
        out.write(f"\x1b[{point.y};{point.x}H")
        out.flush()

    def clear(self) -> None:
        self._output.write(_HIDE_CURSOR)
        self._output.write(_CLEAR_SCREEN)
        self._output.write(_HOME)

    def draw(self, drawable: Drawable) -> None:
        """Render ``drawable`` with the drawer registered for its type, if there is one."""
        drawer = self._drawers.get(drawable.type_name)
        if drawer is not None:
            drawer.draw(drawable)

    def reset_output(self) -> None:
        out = self._output
        out.write(_SHOW_CURSOR)
        out.write(_RESET_COLOURS)
        out.write(_CLEAR_SCREEN)
        out.write(_HOME)
        out.flush()

    def process_key(self, key: str) -> None:
        """The screen itself ignores keys."""

    def focus_change_callback(self, focused: bool) -> None:
        """The screen itself does not react to focus changes."""