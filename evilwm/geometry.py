"""Two-dimensional points, vectors, sizes and rectangles on the canvas."""

from __future__ import annotations

import math
import sys
from dataclasses import dataclass

_EPSILON = sys.float_info.epsilon


@dataclass(frozen=True)
class Vec2:
    """A displacement on the canvas."""

    x: float = 0.0
    y: float = 0.0

    def length(self) -> float:
        return math.hypot(self.x, self.y)

    def __add__(self, other: object) -> Vec2:
        if not isinstance(other, Vec2):
            return NotImplemented
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: object) -> Vec2:
        if not isinstance(other, Vec2):
            return NotImplemented
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, factor: object) -> Vec2:
        if not isinstance(factor, (int, float)):
            return NotImplemented
        return Vec2(self.x * factor, self.y * factor)

    def __truediv__(self, divisor: object) -> Vec2:
        """Divide both components; a divisor that is effectively zero yields a zero vector."""
        if not isinstance(divisor, (int, float)):
            return NotImplemented
        if abs(divisor) <= _EPSILON:
            return Vec2(0.0, 0.0)
        return Vec2(self.x / divisor, self.y / divisor)


@dataclass(frozen=True)
class Point:
    """A position on the canvas."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: object) -> Point:
        if not isinstance(other, Vec2):
            return NotImplemented
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: object) -> Point | Vec2:
        """Subtract a vector to get a point, or a point to get the vector between them."""
        if isinstance(other, Vec2):
            return Point(self.x - other.x, self.y - other.y)
        if isinstance(other, Point):
            return Vec2(self.x - other.x, self.y - other.y)
        return NotImplemented


@dataclass(frozen=True)
class Size:
    """A width and a height."""

    w: float = 0.0
    h: float = 0.0


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle given by its top-left origin and size."""

    origin: Point = Point()
    size: Size = Size()

    @classmethod
    def from_xywh(cls, x: float, y: float, w: float, h: float) -> Rect:
        return cls(Point(x, y), Size(w, h))

    def center(self) -> Point:
        return Point(self.origin.x + self.size.w / 2.0, self.origin.y + self.size.h / 2.0)