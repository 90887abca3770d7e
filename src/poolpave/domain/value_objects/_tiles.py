"""Tile value objects and the enums that classify them."""

from __future__ import annotations

import math
from dataclasses import dataclass, replace
from enum import Enum

from ._geometry import BoundingBox, Point, Rect


class Side(str, Enum):
    """Cardinal side of a tiled region."""

    TOP = "top"
    RIGHT = "right"
    BOTTOM = "bottom"
    LEFT = "left"


class TileOrigin(str, Enum):
    """Where a tile came from."""

    BASE = "base"
    USER_ADDED = "user_added"
    AUTO_EXTENDED = "auto_extended"


class CornerType(str, Enum):
    """Classification of a polygon vertex for coping.

    STANDARD corners are convex; ARMPIT corners are reflex (interior angle
    greater than 180 degrees).
    """

    STANDARD = "standard"
    ARMPIT = "armpit"


class CutStrategy(str, Enum):
    """Where the leftover cut lands along a coping edge."""

    START = "START"
    END = "END"
    MIDDLE = "MIDDLE"

    def flipped(self) -> "CutStrategy":
        """Strategy for the same edge traversed in the opposite direction."""
        if self is CutStrategy.START:
            return CutStrategy.END
        if self is CutStrategy.END:
            return CutStrategy.START
        return self


class PoolShapeKind(str, Enum):
    """Known pool outlines with their own default strategy tables."""

    RECTANGULAR = "rectangular"
    T_SHAPED = "t_shaped"
    CUSTOM = "custom"


class GridAnchor(str, Enum):
    """Corner the paving grid is aligned to."""

    BOUNDS = "bounds"
    TOP_LEFT = "top_left"
    TOP_RIGHT = "top_right"
    BOTTOM_LEFT = "bottom_left"
    BOTTOM_RIGHT = "bottom_right"


@dataclass(frozen=True)
class Tile:
    """A placed tile or paver.

    The tile is a ``width`` x ``height`` rectangle anchored at its top-left
    corner ``(x, y)`` in its own frame, rotated by ``angle`` degrees about
    that anchor. Paving and extension tiles are axis-aligned (angle 0).

    Attributes:
        x: Anchor x coordinate.
        y: Anchor y coordinate.
        width: Footprint width along the tile's local x axis.
        height: Footprint height along the tile's local y axis.
        is_partial: True when the footprint is smaller than nominal because
            of a boundary or exclusion cut.
        id: Stable identifier within one solver run.
        side: Coping edge index, or the cardinal side an extension tile grew
            from.
        angle: Rotation in degrees.
        origin: Which process created the tile.
        cut_percentage: Share of the nominal tile that was cut away (0-100).
        actual_area: Area actually laid after clipping; None means the full
            rectangle.
    """

    x: float
    y: float
    width: float
    height: float
    is_partial: bool
    id: str
    side: int | Side | None = None
    angle: float = 0.0
    origin: TileOrigin = TileOrigin.BASE
    cut_percentage: int = 0
    actual_area: float | None = None

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError("Tile dimensions must be positive")
        if not 0 <= self.cut_percentage <= 100:
            raise ValueError("Cut percentage must be between 0 and 100")

    @property
    def area(self) -> float:
        """Laid area in square units."""
        if self.actual_area is not None:
            return self.actual_area
        return self.width * self.height

    @property
    def rect(self) -> Rect:
        """Unrotated rectangle at the anchor."""
        return Rect(self.x, self.y, self.width, self.height)

    def footprint(self) -> list[Point]:
        """World-space corners, clockwise (y-down) from the anchor."""
        if self.angle == 0:
            return self.rect.to_polygon()
        rad = math.radians(self.angle)
        ux, uy = math.cos(rad), math.sin(rad)
        vx, vy = -uy, ux
        w, h = self.width, self.height
        return [
            Point(self.x, self.y),
            Point(self.x + ux * w, self.y + uy * w),
            Point(self.x + ux * w + vx * h, self.y + uy * w + vy * h),
            Point(self.x + vx * h, self.y + vy * h),
        ]

    def bounds(self) -> Rect:
        """Axis-aligned bounds of the rotated footprint."""
        if self.angle == 0:
            return self.rect
        box = BoundingBox.of_points(self.footprint())
        # Snap away float noise from 90-degree rotations
        return Rect(
            round(box.min_x, 6),
            round(box.min_y, 6),
            round(box.width, 6),
            round(box.height, 6),
        )

    def with_origin(self, origin: TileOrigin) -> "Tile":
        return replace(self, origin=origin)
