"""Screen coordinates and sizes, measured in character cells."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Point:
    """A cell position; ``x`` is the column and ``y`` the row."""

    x: int
    y: int

    def __add__(self, other: Point) -> Point:
        if not isinstance(other, Point):
            return NotImplemented
        return Point(self.x + other.x, self.y + other.y)


@dataclass(frozen=True)
class Dimensions:
    """A size in cells."""

    width: int
    height: int