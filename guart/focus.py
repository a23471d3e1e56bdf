"""Keyboard focus: the ring of focusable elements and who holds focus."""

from __future__ import annotations

from abc import ABC, abstractmethod

from guart import keys


class FocusController(ABC):
    """Keeps an ordered ring of focusable elements and routes keys to the focused one."""

    def __init__(self) -> None:
        super().__init__()
        self._focusables: list[Focusable] = []
        self._focused: Focusable | None = None

    @property
    def focusables(self) -> tuple[Focusable, ...]:
        """The ring in its current order."""
        return tuple(self._focusables)

    @property
    def focused(self) -> Focusable | None:
        """The element holding focus, or ``None``."""
        return self._focused

    def _index(self, widget: Focusable) -> int | None:
        return next((i for i, w in enumerate(self._focusables) if w is widget), None)

    def _focused_index(self) -> int:
        if self._focused is None:
            return len(self._focusables)
        index = self._index(self._focused)
        return len(self._focusables) if index is None else index

    def add_focusable(self, widget: Focusable | None, set_focus: bool = True) -> None:
        """Add ``widget`` to the ring; modal elements and ``set_focus`` take focus."""
        if widget is None or self._index(widget) is not None:
            return
        if widget.modal:
            self._focusables.insert(self._focused_index(), widget)
            self._focused = widget
        elif set_focus:
            self._focusables.insert(0, widget)
            self._focused = widget
        else:
            self._focusables.insert(self._focused_index(), widget)

    def remove_focusable(self, widget: Focusable | None) -> None:
        """Drop ``widget`` from the ring, passing focus on if it held it."""
        if widget is None:
            return
        index = self._index(widget)
        if index is None:
            return
        if self._focused is widget:
            if len(self._focusables) == 1:
                self._focused = None
            elif index == len(self._focusables) - 1:
                self._focused = self._focusables[index - 1]
            else:
                self._focused = self._focusables[index + 1]
        del self._focusables[index]

    def is_focused(self, widget: Focusable | None) -> bool:
        return self._focused is not None and widget is self._focused

    def process_input(self, data: str) -> bool:
        """Handle one key sequence; return ``False`` when the application should quit."""
        if not data or not self._focusables:
            return True
        if data in (keys.CTRL_C, keys.CTRL_D):
            self.reset_output()
            return False
        current = self._focused
        if current is None:
            return True
        if data == keys.TAB:
            if current.modal:
                return True
            index = self._focused_index()
            following = self._focusables[(index + 1) % len(self._focusables)]
            self._focused = following
            current.focus_change_callback(False)
            following.focus_change_callback(True)
        else:
            current.process_key(data)
        return True

    @abstractmethod
    def reset_output(self) -> None:
        """Restore the output device before the application exits."""


class Focusable(ABC):
    """Something that can receive keyboard focus."""

    focusable = False
    modal = False

    def __init__(self) -> None:
        super().__init__()
        self._focus_controller: FocusController | None = None

    @property
    def focus_controller(self) -> FocusController | None:
        return self._focus_controller

    def set_focus_controller(self, controller: FocusController | None) -> None:
        if controller is None:
            return
        self._focus_controller = controller
        if self.focusable:
            controller.add_focusable(self)

    def is_focused(self) -> bool:
        if self._focus_controller is None:
            return False
        return self._focus_controller.is_focused(self)

    def process_key(self, key: str) -> None:
        """React to a key while focused; ignored by default."""

    @abstractmethod
    def focus_change_callback(self, focused: bool) -> None:
        """Called when focus arrives (``True``) or leaves (``False``)."""

    def release_focus(self) -> None:
        """Leave the focus ring of the controller this element belongs to."""
        if self.focusable and self._focus_controller is not None:
            self._focus_controller.remove_focusable(self)