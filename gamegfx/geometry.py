"""Basic 2D geometry: vectors and axis-aligned rectangles."""

from __future__ import annotations

import math
from dataclasses import dataclass, replace
from typing import Callable, Iterator, Union

Number = Union[int, float]


def _half(value: Number) -> Number:
    """Halve a value, truncating towards zero for integers."""
    if isinstance(value, int):
        return value // 2 if value >= 0 else -((-value) // 2)
    return value / 2


@dataclass(frozen=True)
class Vec2:
    """An immutable two-dimensional vector."""

    x: Number = 0.0
    y: Number = 0.0

    def __iter__(self) -> Iterator[Number]:
        yield self.x
        yield self.y

    def __add__(self, other: Vec2 | Number) -> Vec2:
        if isinstance(other, Vec2):
            return Vec2(self.x + other.x, self.y + other.y)
        return Vec2(self.x + other, self.y + other)

    def __sub__(self, other: Vec2 | Number) -> Vec2:
        if isinstance(other, Vec2):
            return Vec2(self.x - other.x, self.y - other.y)
        return Vec2(self.x - other, self.y - other)

    def __mul__(self, other: Vec2 | Number) -> Vec2:
        if isinstance(other, Vec2):
            return Vec2(self.x * other.x, self.y * other.y)
        return Vec2(self.x * other, self.y * other)

    __rmul__ = __mul__

    def __truediv__(self, other: Vec2 | Number) -> Vec2:
        if isinstance(other, Vec2):
            return Vec2(self.x / other.x, self.y / other.y)
        return Vec2(self.x / other, self.y / other)

    def __neg__(self) -> Vec2:
        return Vec2(-self.x, -self.y)

    def rotate_z(self, angle: float) -> Vec2:
        """Return this vector rotated counter-clockwise by ``angle`` radians."""
        cos, sin = math.cos(angle), math.sin(angle)
        return Vec2(self.x * cos - self.y * sin, self.x * sin + self.y * cos)

    def map(self, func: Callable[[Number], Number]) -> Vec2:
        """Apply ``func`` to each component."""
        return Vec2(func(self.x), func(self.y))


@dataclass(frozen=True)
class Rectangle:
    """A rectangle given by its top-left corner, width and height."""

    x: Number = 0.0
    y: Number = 0.0
    width: Number = 0.0
    height: Number = 0.0

    @classmethod
    def row(cls, x: Number, y: Number, width: Number, height: Number) -> Iterator[Rectangle]:
        """Yield horizontally adjacent rectangles forever, moving along the X axis."""
        rect = cls(x, y, width, height)
        while True:
            yield rect
            rect = replace(rect, x=rect.x + rect.width)

    @classmethod
    def column(cls, x: Number, y: Number, width: Number, height: Number) -> Iterator[Rectangle]:
        """Yield vertically adjacent rectangles forever, moving along the Y axis."""
        rect = cls(x, y, width, height)
        while True:
            yield rect
            rect = replace(rect, y=rect.y + rect.height)

    def intersects(self, other: Rectangle) -> bool:
        """Return True if ``other`` overlaps this rectangle."""
        return (
            self.x < other.x + other.width
            and self.x + self.width > other.x
            and self.y < other.y + other.height
            and self.y + self.height > other.y
        )

    def contains(self, other: Rectangle) -> bool:
        """Return True if ``other`` lies entirely within this rectangle."""
        return (
            self.x <= other.x
            and other.x + other.width <= self.x + self.width
            and self.y <= other.y
            and other.y + other.height <= self.y + self.height
        )

    def contains_point(self, point: Vec2) -> bool:
        """Return True if ``point`` is inside; right and bottom edges are excluded."""
        return (
            self.x <= point.x < self.x + self.width
            and self.y <= point.y < self.y + self.height
        )

    def combine(self, other: Rectangle) -> Rectangle:
        """Return the smallest rectangle containing both rectangles."""
        x = min(self.x, other.x)
        y = min(self.y, other.y)
        right = max(self.right(), other.right())
        bottom = max(self.bottom(), other.bottom())
        return Rectangle(x, y, right - x, bottom - y)

    def left(self) -> Number:
        return self.x

    def right(self) -> Number:
        return self.x + self.width

    def top(self) -> Number:
        return self.y

    def bottom(self) -> Number:
        return self.y + self.height

    def center(self) -> Vec2:
        return Vec2(self.x + _half(self.width), self.y + _half(self.height))

    def top_left(self) -> Vec2:
        return Vec2(self.x, self.y)

    def top_right(self) -> Vec2:
        return Vec2(self.right(), self.y)

    def bottom_left(self) -> Vec2:
        return Vec2(self.x, self.bottom())

    def bottom_right(self) -> Vec2:
        return Vec2(self.right(), self.bottom())