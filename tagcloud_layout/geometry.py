"""Axis-aligned geometry primitives used by the cloud layouter."""

from __future__ import annotations

import math
import numbers
from dataclasses import dataclass
from typing import Optional, Tuple, Union

Number = Union[int, float]


@dataclass(frozen=True)
class Point:
    x: Number
    y: Number

    def __add__(self, other: "Point") -> "Point":
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Point") -> "Point":
        return Point(self.x - other.x, self.y - other.y)

    def as_tuple(self) -> Tuple[Number, Number]:
        return self.x, self.y


@dataclass(frozen=True)
class Size:
    """Width/height pair.

    Sizes are not validated on construction; the layouter rejects
    non-positive sides at its own boundary.
    """

    width: Number
    height: Number

    @property
    def is_positive(self) -> bool:
        return self.width > 0 and self.height > 0

    @property
    def area(self) -> Number:
        return self.width * self.height

    def half(self) -> Point:
        """Return the offset from a rectangle's center to its top-left corner."""

        if isinstance(self.width, numbers.Integral) and isinstance(self.height, numbers.Integral):
            return Point(self.width // 2, self.height // 2)
        return Point(self.width / 2, self.height / 2)


@dataclass(frozen=True)
class Rectangle:
    """Rectangle given by its top-left corner and size (y grows downwards)."""

    location: Point
    size: Size

    @classmethod
    def from_center(cls, center: Point, size: Size) -> "Rectangle":
        return cls(center - size.half(), size)

    @property
    def left(self) -> Number:
        return self.location.x

    @property
    def top(self) -> Number:
        return self.location.y

    @property
    def right(self) -> Number:
        return self.location.x + self.size.width

    @property
    def bottom(self) -> Number:
        return self.location.y + self.size.height

    @property
    def width(self) -> Number:
        return self.size.width

    @property
    def height(self) -> Number:
        return self.size.height

    @property
    def area(self) -> Number:
        return self.size.area

    @property
    def center(self) -> Point:
        return self.location + self.size.half()

    def corners(self) -> Tuple[Point, Point, Point, Point]:
        return (
            Point(self.left, self.top),
            Point(self.right, self.top),
            Point(self.right, self.bottom),
            Point(self.left, self.bottom),
        )

    def intersects_with(self, other: "Rectangle") -> bool:
        return intersects(self, other)

    def to_dict(self) -> dict:
        return {"x": self.left, "y": self.top, "width": self.width, "height": self.height}


def intersects(a: Rectangle, b: Rectangle) -> bool:
    """Return ``True`` when ``a`` and ``b`` share a region of positive area.

    Rectangles that only touch along an edge or a corner do not intersect.
    """

    return a.left < b.right and b.left < a.right and a.top < b.bottom and b.top < a.bottom


def intersection(a: Rectangle, b: Rectangle) -> Optional[Rectangle]:
    if not intersects(a, b):
        return None
    left = max(a.left, b.left)
    top = max(a.top, b.top)
    right = min(a.right, b.right)
    bottom = min(a.bottom, b.bottom)
    return Rectangle(Point(left, top), Size(right - left, bottom - top))


def intersection_area(a: Rectangle, b: Rectangle) -> Number:
    overlap = intersection(a, b)
    return overlap.area if overlap is not None else 0


def distance(p: Point, q: Point) -> float:
    return math.hypot(p.x - q.x, p.y - q.y)


__all__ = [
    "Number",
    "Point",
    "Size",
    "Rectangle",
    "intersects",
    "intersection",
    "intersection_area",
    "distance",
]
