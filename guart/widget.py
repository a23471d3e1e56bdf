"""Drawing interfaces and the widget tree."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable, Optional

from guart.focus import FocusController, Focusable
from guart.geometry import Point
from guart.output import Output


class Canvas(ABC):
    """A surface that drawers position the cursor on and write to."""

    @property
    @abstractmethod
    def output(self) -> Output:
        """The output text is written to."""

    @abstractmethod
    def move_cursor(self, point: Point) -> None:
        """Place the cursor at ``point``."""

    @abstractmethod
    def clear(self) -> None:
        """Blank the whole surface."""


class Drawer(ABC):
    """Renders drawables."""

    @abstractmethod
    def draw(self, drawable: Drawable) -> None:
        """Render ``drawable``."""


class Drawable(ABC):
    """Something a drawer can render."""

    def __init__(self) -> None:
        super().__init__()
        self._drawer: Drawer | None = None
        self._active = True

    @property
    @abstractmethod
    def type_name(self) -> str:
        """The name a drawer is selected by."""

    @property
    def drawer(self) -> Drawer | None:
        return self._drawer

    @property
    def active(self) -> bool:
        return self._active

    def invalidate(self) -> None:
        """Redraw through the assigned drawer, if any."""
        if self._drawer is not None:
            self._drawer.draw(self)

    def set_drawer(self, drawer: Drawer | None) -> None:
        self._drawer = drawer

    def set_active(self, active: bool) -> None:
        self._active = active


class Parent(Drawable, Focusable):
    """A drawable, focusable node owning child widgets; later children lie on top."""

    def __init__(self) -> None:
        super().__init__()
        self._children: list[Widget] = []

    @property
    def children(self) -> list[Widget]:
        return self._children

    @property
    def content_position(self) -> Point:
        """Where children's positions are measured from."""
        return Point(0, 0)

    def add_widget(self, widget: Widget | None) -> None:
        if widget is None:
            return
        widget.parent = self
        if self._drawer is not None:
            widget.set_drawer(self._drawer)
        if self._focus_controller is not None:
            widget.set_focus_controller(self._focus_controller)
        self._children.append(widget)

    def remove_widget(self, child: Widget) -> None:
        self._children = [w for w in self._children if w is not child]
        self.invalidate()

    def dispose(self) -> None:
        """Leave the focus ring and dispose of every child."""
        if self._focus_controller is not None:
            self._focus_controller.remove_focusable(self)
        while self._children:
            self._children[0].dispose()

    def child_focused_callback(self, child: Widget | None) -> None:
        """Bring ``child`` to the top after it gained focus."""
        if child is None:
            return
        self.focus_change_callback(True)
        for index, widget in enumerate(self._children):
            if widget is child:
                self._children.append(self._children.pop(index))
                break
        self.invalidate()

    def invalidate(self) -> None:
        super().invalidate()
        for widget in self._children:
            widget.invalidate()

    def set_drawer(self, drawer: Drawer | None) -> None:
        super().set_drawer(drawer)
        for widget in self._children:
            widget.set_drawer(drawer)

    def set_active(self, active: bool) -> None:
        super().set_active(active)
        if self.focusable and self._focus_controller is not None:
            if active:
                self._focus_controller.add_focusable(self, False)
            else:
                self._focus_controller.remove_focusable(self)
        for widget in self._children:
            widget.set_active(active)

    def set_focus_controller(self, controller: FocusController | None) -> None:
        super().set_focus_controller(controller)
        for widget in self._children:
            widget.set_focus_controller(controller)

    def focus_change_callback(self, focused: bool) -> None:
        self.invalidate()


Signal = Callable[["Widget", str], None]


class Widget(Parent):
    """A positioned element of the tree with action, focus and dispose signals."""

    def __init__(self, position: Point, label: str = "") -> None:
        super().__init__()
        self._position = position
        self.label = label
        self.parent: Parent | None = None
        self.on_action: Optional[Signal] = None
        self.on_focus: Optional[Signal] = None
        self.on_dispose: Optional[Signal] = None

    @property
    def position(self) -> Point:
        """Absolute position on the screen."""
        if self.parent is not None:
            return self.parent.content_position + self._position
        return self._position

    @property
    def content_position(self) -> Point:
        return self.position

    def move_to(self, point: Point) -> None:
        """Set the position relative to the parent's content area."""
        self._position = point

    def dispose(self) -> None:
        if self.on_dispose is not None:
            self.on_dispose(self, "")
        super().dispose()
        if self.parent is not None:
            self.parent.remove_widget(self)

    def is_focused(self) -> bool:
        if super().is_focused():
            return True
        # A non-widget parent (the screen) never holds focus itself.
        parent = self.parent
        return isinstance(parent, Widget) and parent.is_focused()

    def focus_change_callback(self, focused: bool) -> None:
        if self.on_focus is not None:
            self.on_focus(self, "")
        if self.parent is not None and focused:
            self.parent.child_focused_callback(self)
        self.invalidate()