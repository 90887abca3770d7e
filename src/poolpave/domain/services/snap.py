"""Coordinate quantisation for the canvas and for stored geometry."""

from __future__ import annotations

import math

from ..value_objects import Point, Rect

__all__ = [
    "GRID_SNAP",
    "MM_PER_CANVAS_UNIT",
    "canvas_to_mm",
    "mm_to_canvas",
    "round_half",
    "snap_point",
    "snap_rect_px",
    "snap_to_grid",
]

# One canvas unit is 10 mm
MM_PER_CANVAS_UNIT = 10.0

# Default snap grid in canvas units (100 mm)
GRID_SNAP = 10.0


def _round_half_up(value: float) -> float:
    return math.floor(value + 0.5)


def snap_to_grid(value: float, grid: float = GRID_SNAP, enabled: bool = True) -> float:
    """Round ``value`` to the nearest multiple of ``grid``.

    Halves round up, so 5 snaps to 10 on a grid of 10. Disabled snapping or a
    non-positive grid returns the value untouched.
    """
    if not enabled or grid <= 0:
        return value
    return _round_half_up(value / grid) * grid


def snap_point(p: Point, grid: float = GRID_SNAP, enabled: bool = True) -> Point:
    return Point(snap_to_grid(p.x, grid, enabled), snap_to_grid(p.y, grid, enabled))


def round_half(px: float) -> float:
    """Move a pixel coordinate onto the nearest half pixel for crisp 1px lines."""
    return math.floor(px) + 0.5


def snap_rect_px(x_mm: float, y_mm: float, w_mm: float, h_mm: float, scale: float) -> Rect:
    """Project a millimetre rectangle to pixels with both edges on half pixels.

    Each edge is snapped independently, so tiles that share an edge in
    millimetres share it in pixels too. The size is never below 1px.
    """
    x1 = round_half(x_mm * scale)
    y1 = round_half(y_mm * scale)
    x2 = round_half((x_mm + w_mm) * scale)
    y2 = round_half((y_mm + h_mm) * scale)
    return Rect(x1, y1, max(1.0, x2 - x1), max(1.0, y2 - y1))


def mm_to_canvas(value_mm: float) -> float:
    return value_mm / MM_PER_CANVAS_UNIT


def canvas_to_mm(value_units: float) -> float:
    return value_units * MM_PER_CANVAS_UNIT
