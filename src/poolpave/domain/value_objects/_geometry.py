"""Planar geometry value objects."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Iterable


@dataclass(frozen=True)
class Point:
    """2D point in millimetres (or canvas units, consistently).

    Screen convention: x grows to the right and y grows downward.
    """

    x: float
    y: float

    @classmethod
    def of(cls, value: Any) -> "Point":
        """Coerce a Point, an ``(x, y)`` pair or an ``{"x", "y"}`` mapping."""
        if isinstance(value, Point):
            return value
        if isinstance(value, dict):
            return cls(float(value["x"]), float(value["y"]))
        x, y = value
        return cls(float(x), float(y))

    def __add__(self, other: "Point") -> "Point":
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Point") -> "Point":
        return Point(self.x - other.x, self.y - other.y)

    def scaled(self, factor: float) -> "Point":
        return Point(self.x * factor, self.y * factor)

    def distance_to(self, other: "Point") -> float:
        return math.hypot(self.x - other.x, self.y - other.y)

    def as_tuple(self) -> tuple[float, float]:
        return (self.x, self.y)


def as_points(values: Iterable[Any]) -> list[Point]:
    """Coerce an iterable of point-like values into a list of Points."""
    return [Point.of(v) for v in values]


@dataclass(frozen=True)
class BoundingBox:
    """Axis-aligned bounding box of a point set."""

    min_x: float
    min_y: float
    max_x: float
    max_y: float

    @classmethod
    def of_points(cls, points: Iterable[Point]) -> "BoundingBox":
        pts = list(points)
        if not pts:
            return cls(0.0, 0.0, 0.0, 0.0)
        xs = [p.x for p in pts]
        ys = [p.y for p in pts]
        return cls(min(xs), min(ys), max(xs), max(ys))

    @property
    def width(self) -> float:
        return self.max_x - self.min_x

    @property
    def height(self) -> float:
        return self.max_y - self.min_y

    def to_rect(self) -> "Rect":
        return Rect(self.min_x, self.min_y, self.width, self.height)


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle anchored at its top-left (min x, min y) corner."""

    x: float
    y: float
    width: float
    height: float

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError("Rect dimensions must be non-negative")

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    @property
    def area(self) -> float:
        return self.width * self.height

    @property
    def center(self) -> Point:
        return Point(self.x + self.width / 2, self.y + self.height / 2)

    def corners(self) -> tuple[Point, Point, Point, Point]:
        """Corners clockwise (y-down) from the top-left."""
        return (
            Point(self.x, self.y),
            Point(self.right, self.y),
            Point(self.right, self.bottom),
            Point(self.x, self.bottom),
        )

    def to_polygon(self) -> list[Point]:
        return list(self.corners())

    def inset(self, amount: float, min_size: float = 1.0) -> "Rect":
        """Shrink the rectangle on every side, keeping at least ``min_size``."""
        width = max(min_size, self.width - 2 * amount)
        height = max(min_size, self.height - 2 * amount)
        return Rect(
            self.x + (self.width - width) / 2,
            self.y + (self.height - height) / 2,
            width,
            height,
        )

    def translated(self, dx: float, dy: float) -> "Rect":
        return Rect(self.x + dx, self.y + dy, self.width, self.height)

    def contains_point(self, p: Point, strict: bool = True) -> bool:
        if strict:
            return self.x < p.x < self.right and self.y < p.y < self.bottom
        return self.x <= p.x <= self.right and self.y <= p.y <= self.bottom

    def overlap_extents(self, other: "Rect") -> tuple[float, float]:
        """Overlap along x and y (zero or negative when disjoint)."""
        dx = min(self.right, other.right) - max(self.x, other.x)
        dy = min(self.bottom, other.bottom) - max(self.y, other.y)
        return dx, dy

    def overlap_area(self, other: "Rect") -> float:
        dx, dy = self.overlap_extents(other)
        if dx <= 0 or dy <= 0:
            return 0.0
        return dx * dy

    def bounding_box(self) -> BoundingBox:
        return BoundingBox(self.x, self.y, self.right, self.bottom)
