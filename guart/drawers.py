"""Drawers that render each kind of widget onto a canvas."""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, cast

from guart.charset import (
    BLACK_DOWN_POINTING_TRIANGLE,
    BLACK_HORIZONTAL_RECTANGLE,
    BLACK_UP_POINTING_TRIANGLE,
    BLACK_VERTICAL_RECTANGLE,
    RADIO_BUTTON_CHECKED,
    RADIO_BUTTON_UNCHECKED,
    BoldBorder,
    Border,
    Style,
)
from guart.geometry import Dimensions, Point
from guart.output import Output
from guart.widget import Canvas, Drawable, Drawer

if TYPE_CHECKING:
    from guart.basic_widgets import ButtonBox, Label, Line, TextBox, Toast, Window
    from guart.lists import CheckList, List, RadioList, Slider


class BaseDrawer(Drawer):
    """Common drawing logic: dimming of inactive widgets, borders and scroll bars."""

    def __init__(self, canvas: Canvas) -> None:
        self._canvas = canvas

    @property
    def canvas(self) -> Canvas:
        return self._canvas

    def draw(self, drawable: Drawable) -> None:
        out = self._canvas.output
        if not drawable.active:
            out.write(Style.DIMMER)
        self.draw_widget(drawable, self._canvas)
        if not drawable.active:
            out.write(Style.NORMAL)
        out.flush()

    @abstractmethod
    def draw_widget(self, drawable: Drawable, canvas: Canvas) -> None:
        """Render the widget-specific part of ``drawable``."""

    def _draw_frame(self, point: Point, dimensions: Dimensions, glyphs: type) -> None:
        canvas = self._canvas
        out = canvas.output
        width, height = dimensions.width, dimensions.height

        canvas.move_cursor(point)
        out.write(glyphs.TOP_LEFT + glyphs.HORIZONTAL * width + glyphs.TOP_RIGHT)
        for row in range(height):
            canvas.move_cursor(Point(point.x, point.y + row + 1))
            out.write(glyphs.VERTICAL + " " * width + glyphs.VERTICAL)
        canvas.move_cursor(Point(point.x, point.y + height + 1))
        out.write(glyphs.LOWER_LEFT + glyphs.HORIZONTAL * width + glyphs.LOWER_RIGHT)
        out.flush()

    def draw_border(self, point: Point, dimensions: Dimensions) -> None:
        """Draw a single-line frame enclosing ``dimensions`` cells, blanking the inside."""
        self._draw_frame(point, dimensions, Border)

    def draw_bold_border(self, point: Point, dimensions: Dimensions) -> None:
        """Draw a double-line frame enclosing ``dimensions`` cells, blanking the inside."""
        self._draw_frame(point, dimensions, BoldBorder)

    def draw_border_title(self, point: Point, dimensions: Dimensions, title: str) -> None:
        """Write ``title`` centred on the top edge of a frame."""
        if not title:
            return
        offset = dimensions.width // 2 - len(title) // 2
        self._canvas.move_cursor(Point(point.x + offset, point.y))
        out = self._canvas.output
        out.write(title)
        out.flush()

    def draw_scroll_bar(
        self,
        position: Point,
        dimensions: Dimensions,
        active_index: int,
        total_items: int,
    ) -> None:
        """Draw a scroll bar in the rightmost column when the items do not fit."""
        if total_items <= dimensions.height:
            return
        canvas = self._canvas
        out = canvas.output
        column = dimensions.width - 1

        canvas.move_cursor(position + Point(column, 0))
        out.write(BLACK_UP_POINTING_TRIANGLE)

        track = dimensions.height - 2
        ratio = active_index / (total_items - 1)
        marker = int(ratio * (track - 1))
        for row in range(track):
            canvas.move_cursor(position + Point(column, row + 1))
            out.write(BLACK_VERTICAL_RECTANGLE if row == marker else Border.VERTICAL)

        canvas.move_cursor(position + Point(column, dimensions.height - 1))
        out.write(BLACK_DOWN_POINTING_TRIANGLE)


class LabelDrawer(BaseDrawer):
    """Writes a label's text at its position."""

    def draw_widget(self, drawable: Drawable, canvas: Canvas) -> None:
        label = cast("Label", drawable)
        if not label.text:
            return
        canvas.move_cursor(label.position)
        canvas.output.write(label.text)


class WindowDrawer(BaseDrawer):
    """Draws a window's double frame and title."""

    def draw_widget(self, drawable: Drawable, canvas: Canvas) -> None:
        window = cast("Window", drawable)
        self.draw_bold_border(window.position, window.dimensions)
        self.draw_border_title(window.position, window.dimensions, window.title)


class ButtonBoxDrawer(BaseDrawer):
    """Draws a row of bracketed buttons, the active one reversed while focused."""

    def draw_widget(self, drawable: Drawable, canvas: Canvas) -> None:
        box = cast("ButtonBox", drawable)
        out = canvas.output
        if box.border:
            self.draw_border(box.position, box.dimensions)
            self.draw_border_title(box.position, box.dimensions, box.title)

        buttons = box.buttons
        if not buttons:
            return

        start = box.position
        canvas.move_cursor(Point(start.x + 1, start.y + 1))
        focused = box.is_focused()
        for index, button in enumerate(buttons):
            highlight = index == box.active_index and focused
            if highlight:
                out.write(Style.REVERSE)
            out.write(f"[{button}]")
            if highlight:
                out.write(Style.NORMAL)
            out.write(" ")


class ToastDrawer(BaseDrawer):
    """Draws a toast's message inside a double frame."""

    def draw_widget(self, drawable: Drawable, canvas: Canvas) -> None:
        toast = cast("Toast", drawable)
        width = len(toast.message) + 2
        self.draw_bold_border(toast.position, Dimensions(width, 1))
        canvas.move_cursor(toast.position + Point(2, 1))
        canvas.output.write(toast.message)


class TextBoxDrawer(BaseDrawer):
    """Writes multi-line text, each line starting in the same column."""

    def draw_widget(self, drawable: Drawable, canvas: Canvas) -> None:
        text_box = cast("TextBox", drawable)
        text = text_box.text
        if not text:
            return
        out = canvas.output
        position = text_box.position
        first, *rest = text.split("\n")
        canvas.move_cursor(position)
        out.write(first)
        for line in rest:
            position = Point(position.x, position.y + 1)
            canvas.move_cursor(position)
            out.write(line)


class LineDrawer(BaseDrawer):
    """Draws a horizontal rule."""

    def draw_widget(self, drawable: Drawable, canvas: Canvas) -> None:
        line = cast("Line", drawable)
        canvas.move_cursor(line.position)
        glyph = BoldBorder.HORIZONTAL if line.double else Border.HORIZONTAL
        canvas.output.write(glyph * line.width)


class ListDrawer(BaseDrawer):
    """Draws the visible window of a list, with a scroll bar when it overflows."""

    def draw_widget(self, drawable: Drawable, canvas: Canvas) -> None:
        widget = cast("List", drawable)
        out = canvas.output
        if widget.border:
            self.draw_border(widget.position, widget.dimensions)
            self.draw_border_title(widget.position, widget.dimensions, widget.title)

        items = widget.items
        position = widget.position + Point(1, 1)
        height = widget.dimensions.height

        if len(items) > height:
            self.draw_scroll_bar(position, widget.dimensions, widget.active_index, len(items))

        focused = widget.is_focused()
        visible = items[widget.displayed_index : widget.displayed_index + max(height, 0)]
        for row, item in enumerate(visible):
            index = widget.displayed_index + row
            canvas.move_cursor(Point(position.x, position.y + row))
            highlight = index == widget.active_index and focused
            if highlight:
                out.write(Style.REVERSE)
            self.draw_item(drawable, out, item, index)
            if highlight:
                out.write(Style.NORMAL)

    def draw_item(self, drawable: Drawable, out: Output, item: str, index: int) -> None:
        """Write one item at the cursor."""
        out.write(item)


class RadioListDrawer(ListDrawer):
    """Prefixes each item with a radio button."""

    def draw_item(self, drawable: Drawable, out: Output, item: str, index: int) -> None:
        widget = cast("RadioList", drawable)
        mark = RADIO_BUTTON_CHECKED if widget.selected_index == index else RADIO_BUTTON_UNCHECKED
        out.write(mark + " ")
        out.write(item)


class CheckListDrawer(ListDrawer):
    """Prefixes each item with a check box."""

    def draw_item(self, drawable: Drawable, out: Output, item: str, index: int) -> None:
        widget = cast("CheckList", drawable)
        out.write("[X] " if index in widget.selected_indexes else "[ ] ")
        out.write(item)


class SliderDrawer(BaseDrawer):
    """Draws a vertical scale with the active item marked."""

    def draw_widget(self, drawable: Drawable, canvas: Canvas) -> None:
        slider = cast("Slider", drawable)
        out = canvas.output
        if slider.border:
            self.draw_border(slider.position, slider.dimensions)
            self.draw_border_title(slider.position, slider.dimensions, slider.title)

        items = slider.items
        position = slider.position + Point(1, 1)
        shown = slider.dimensions.height // 2
        focused = slider.is_focused()
        last = len(items) - 1

        for index, item in enumerate(items[:shown]):
            canvas.move_cursor(Point(position.x, position.y + index * 2))

            if index == slider.active_index:
                mark = BLACK_HORIZONTAL_RECTANGLE
            elif index == last:
                mark = Border.HORIZONTAL_DOWN
            elif index == 0:
                mark = Border.HORIZONTAL_UP
            else:
                mark = Border.CROSS
            out.write(mark + " ")

            highlight = index == slider.active_index and focused
            if highlight:
                out.write(Style.REVERSE)
            out.write(item)
            if highlight:
                out.write(Style.NORMAL)

            if index < last:
                canvas.move_cursor(Point(position.x, position.y + index * 2 + 1))
                out.write(Border.VERTICAL)