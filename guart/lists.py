"""Scrollable lists: plain, single-choice, multiple-choice and sliders."""

from __future__ import annotations

from collections.abc import Iterable

from guart import keys
from guart.geometry import Dimensions, Point
from guart.widget import Widget

_ENTER_KEYS = (keys.CR, keys.CR_NL, keys.NEW_LINE)


class List(Widget):
    """A vertical list of items scrolled with the arrow keys."""

    focusable = True

    def __init__(
        self,
        position: Point,
        dimensions: Dimensions,
        items: Iterable[str] = (),
        border: bool = False,
    ) -> None:
        super().__init__(position)
        self.dimensions = dimensions
        self.border = border
        self.title = ""
        self._items: list[str] = []
        self._active_index = -1
        self._displayed_index = 0
        self.set_items(items)

    @property
    def type_name(self) -> str:
        return "List"

    @property
    def items(self) -> tuple[str, ...]:
        return tuple(self._items)

    @property
    def active_index(self) -> int:
        """Index of the highlighted item, ``-1`` when the list has never held one."""
        return self._active_index

    @property
    def displayed_index(self) -> int:
        """Index of the first item shown."""
        return self._displayed_index

    def add_item(self, item: str) -> None:
        self._items.append(item)
        if len(self._items) == 1:
            self._active_index = 0

    def set_items(self, items: Iterable[str]) -> None:
        self._items = list(items)
        if self._items:
            self._active_index = 0

    def set_active_index(self, index: int) -> None:
        """Highlight the item at ``index``; an index out of range is ignored."""
        if 0 <= index < len(self._items):
            self._active_index = index

    def process_key(self, key: str) -> None:
        if not key:
            return
        if key == keys.UP:
            if self._active_index > 0:
                self._active_index -= 1
                if self._active_index < self._displayed_index:
                    self._displayed_index = self._active_index
                self._on_active_index_change()
                self.invalidate()
        elif key == keys.DOWN:
            if self._active_index < len(self._items) - 1:
                self._active_index += 1
                height = self.dimensions.height
                if self._active_index >= height:
                    self._displayed_index = self._active_index - height + 1
                self._on_active_index_change()
                self.invalidate()
        elif key in _ENTER_KEYS:
            if self.on_action is not None and self._active_index >= 0:
                self.on_action(self, self._items[self._active_index])

    def _on_active_index_change(self) -> None:
        """Hook run after the highlighted item moved."""


class RadioList(List):
    """A list where Space selects at most one item."""

    def __init__(
        self,
        position: Point,
        dimensions: Dimensions,
        items: Iterable[str] = (),
        border: bool = False,
    ) -> None:
        super().__init__(position, dimensions, items, border)
        self._selected_index = -1

    @property
    def type_name(self) -> str:
        return "RadioList"

    @property
    def selected_index(self) -> int:
        """Index of the selected item, ``-1`` when none is selected."""
        return self._selected_index

    @property
    def selected_item(self) -> str | None:
        if self._selected_index == -1:
            return None
        return self._items[self._selected_index]

    def process_key(self, key: str) -> None:
        if not key:
            return
        super().process_key(key)
        if key == keys.SPACE:
            active = self.active_index
            self._selected_index = -1 if self._selected_index == active else active
            self.invalidate()


class CheckList(List):
    """A list where Space toggles each item's selection."""

    def __init__(
        self,
        position: Point,
        dimensions: Dimensions,
        items: Iterable[str] = (),
        border: bool = False,
    ) -> None:
        super().__init__(position, dimensions, items, border)
        self._selected_indexes: list[int] = []

    @property
    def type_name(self) -> str:
        return "CheckList"

    @property
    def selected_indexes(self) -> tuple[int, ...]:
        """Selected item indexes in ascending order."""
        return tuple(self._selected_indexes)

    @property
    def selected_items(self) -> list[str]:
        return [self._items[index] for index in self._selected_indexes]

    def process_key(self, key: str) -> None:
        if not key:
            return
        super().process_key(key)
        if key == keys.SPACE:
            active = self.active_index
            if active in self._selected_indexes:
                self._selected_indexes.remove(active)
            else:
                self._selected_indexes.append(active)
                self._selected_indexes.sort()
            self.invalidate()


class Slider(List):
    """A list that fires ``on_action`` with the new item whenever the highlight moves."""

    @property
    def type_name(self) -> str:
        return "Slider"

    def _on_active_index_change(self) -> None:
        if self.on_action is not None:
            self.on_action(self, self._items[self.active_index])