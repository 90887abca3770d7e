"""Paving fill for arbitrary boundaries.

This module provides boundary validation and a grid fill that classifies
every paver as full, cut or excluded:
- Boundary validation (point count, self-intersection, area, paver fit)
- Grid generation anchored at a configurable origin or boundary corner
- Clipping against the boundary and subtraction of exclude zones
- Statistics with wastage-adjusted order quantities
"""

from __future__ import annotations

import logging
import math
from functools import lru_cache
from itertools import combinations
from typing import Sequence

from ..value_objects import (
    BoundingBox,
    ExcludeZone,
    FillOutcome,
    GridAnchor,
    MAX_PAVING_AREA_MM2,
    PavingConfig,
    PavingResult,
    Point,
    Rect,
    Tile,
    ValidationResult,
)
from .geometry import (
    bounding_box,
    has_self_intersections,
    intersect_convex_pieces,
    pieces_area,
    polygon_area,
    rect_fully_inside_polygon,
    rect_intersects_polygon,
    simplify_polygon,
    triangulate_polygon,
)
from .statistics import MM2_PER_M2, calculate_statistics

logger = logging.getLogger(__name__)

__all__ = [
    "PavingFillService",
    "fill_area",
    "grid_origin",
    "laid_area",
    "validate_boundary",
]

# Cut pavers with less laid area than this (mm²) only touch the boundary
MIN_TILE_AREA = 1.0

# Tolerance when picking the extreme vertex for a corner anchor
ANCHOR_TOLERANCE = 1.0


def validate_boundary(
    points: Sequence[Point], config: PavingConfig | None = None
) -> ValidationResult:
    """Check a paving boundary before filling it.

    Without a config only the shape is checked. With one, the boundary must
    also be large enough to hold at least one paver.
    """
    if len(points) < 3:
        return ValidationResult.fail("Need at least 3 points")

    cleaned = simplify_polygon(points)
    if len(cleaned) < 3 or polygon_area(cleaned) <= 0:
        return ValidationResult.fail("Boundary has no area")

    if has_self_intersections(cleaned):
        return ValidationResult.fail("Boundary lines cannot cross each other")

    area = polygon_area(cleaned)
    max_area = config.max_area_mm2 if config else MAX_PAVING_AREA_MM2
    if area > max_area:
        return ValidationResult.fail(
            f"Area too large (maximum {max_area / MM2_PER_M2:,.0f} m²)"
        )

    if config is None:
        return ValidationResult.ok()

    box = bounding_box(cleaned)
    if box.width < config.paver_width or box.height < config.paver_height:
        return ValidationResult.fail(
            f"Area too small to fit {config.size_label} pavers "
            f"(needs at least {config.paver_width:g}×{config.paver_height:g}mm)"
        )

    if area < config.min_area_mm2:
        return ValidationResult.fail(
            f"Area too small (minimum {config.min_area_mm2 / MM2_PER_M2:g} m²)"
        )
    return ValidationResult.ok()


def grid_origin(points: Sequence[Point], config: PavingConfig) -> Point:
    """Point the paving grid is aligned to.

    An explicit ``config.origin`` wins. Otherwise BOUNDS aligns to the
    bounding box's top-left, and corner anchors align paver edges to the
    boundary vertex that is extreme on both axes (top-most first, then
    left- or right-most).
    """
    if config.origin is not None:
        return config.origin

    box = bounding_box(points)
    if config.anchor is GridAnchor.BOUNDS or not points:
        return Point(box.min_x, box.min_y)

    top = config.anchor in (GridAnchor.TOP_LEFT, GridAnchor.TOP_RIGHT)
    left = config.anchor in (GridAnchor.TOP_LEFT, GridAnchor.BOTTOM_LEFT)
    edge_y = box.min_y if top else box.max_y
    candidates = [p for p in points if abs(p.y - edge_y) <= ANCHOR_TOLERANCE]
    vertex = (min if left else max)(candidates, key=lambda p: p.x)

    x = vertex.x if left else vertex.x - config.paver_width
    y = vertex.y if top else vertex.y - config.paver_height
    return Point(x, y)


@lru_cache(maxsize=128)
def _triangles(points: tuple[Point, ...]) -> tuple[tuple[Point, ...], ...]:
    return tuple(tuple(t) for t in triangulate_polygon(points))


def laid_area(
    rect: Rect,
    boundary: Sequence[Point],
    zones: Sequence[ExcludeZone] = (),
    *,
    inside: bool = False,
) -> float:
    """Area of ``rect`` inside ``boundary`` and outside every exclude zone.

    Zones are subtracted only where they overlap the laid part of the
    rectangle, and overlapping zones are counted once (inclusion-exclusion
    over the zones touching the rectangle).

    Args:
        rect: Paver rectangle.
        boundary: Paving boundary; may be concave.
        zones: Exclude zones touching the rectangle.
        inside: Skip clipping when the rectangle is known to be inside.
    """
    cell = [rect.to_polygon()]
    laid = cell if inside else intersect_convex_pieces(cell, _triangles(tuple(boundary)))
    area = pieces_area(laid)

    zone_pieces = [
        pieces
        for pieces in (
            intersect_convex_pieces(cell, _triangles(tuple(z.outline))) for z in zones
        )
        if pieces
    ]
    covered = 0.0
    for count in range(1, len(zone_pieces) + 1):
        sign = 1.0 if count % 2 else -1.0
        for combo in combinations(zone_pieces, count):
            pieces = laid
            for zone in combo:
                pieces = intersect_convex_pieces(pieces, zone)
                if not pieces:
                    break
            covered += sign * pieces_area(pieces)
    return max(0.0, area - covered)


class PavingFillService:
    """Fills a boundary with a paver grid.

    Attributes:
        config: Paver size, grid alignment and ordering rules.
    """

    def __init__(self, config: PavingConfig) -> None:
        self.config = config

    def validate(self, boundary: Sequence[Point]) -> ValidationResult:
        return validate_boundary(boundary, self.config)

    def grid_cells(self, points: Sequence[Point]) -> list[tuple[int, int, Rect]]:
        """Candidate paver rectangles covering the boundary's bounding box."""
        cfg = self.config
        box: BoundingBox = bounding_box(points)
        origin = grid_origin(points, cfg)
        step_x = cfg.paver_width + cfg.grout_width
        step_y = cfg.paver_height + cfg.grout_width

        start_x = origin.x + math.floor(round((box.min_x - origin.x) / step_x, 9)) * step_x
        start_y = origin.y + math.floor(round((box.min_y - origin.y) / step_y, 9)) * step_y
        cols = max(0, math.ceil(round((box.max_x - start_x) / step_x, 9)))
        rows = max(0, math.ceil(round((box.max_y - start_y) / step_y, 9)))

        return [
            (r, c, Rect(start_x + c * step_x, start_y + r * step_y, cfg.paver_width, cfg.paver_height))
            for r in range(rows)
            for c in range(cols)
        ]

    def classify(
        self,
        rect: Rect,
        points: Sequence[Point],
        zones: Sequence[ExcludeZone],
        tile_id: str,
    ) -> Tile | None:
        """Turn a grid cell into a full or cut paver, or None when not laid."""
        if not rect_intersects_polygon(rect, points):
            return None

        touching: list[ExcludeZone] = []
        for zone in zones:
            if not rect_intersects_polygon(rect, zone.outline):
                continue
            if rect_fully_inside_polygon(rect, zone.outline):
                return None
            touching.append(zone)

        nominal = rect.area
        inside = rect_fully_inside_polygon(rect, points)
        if inside and not touching:
            return Tile(rect.x, rect.y, rect.width, rect.height, False, tile_id)

        actual = min(nominal, laid_area(rect, points, touching, inside=inside))
        if actual <= MIN_TILE_AREA:
            return None
        if actual >= nominal - MIN_TILE_AREA:
            return Tile(rect.x, rect.y, rect.width, rect.height, False, tile_id)

        return Tile(
            rect.x,
            rect.y,
            rect.width,
            rect.height,
            True,
            tile_id,
            cut_percentage=max(0, min(100, round((1 - actual / nominal) * 100))),
            actual_area=actual,
        )

    def fill(
        self, boundary: Sequence[Point], exclude_zones: Sequence[ExcludeZone] = ()
    ) -> PavingResult:
        """Fill ``boundary`` with pavers, avoiding ``exclude_zones``.

        Returns:
            PavingResult. An invalid boundary yields outcome INVALID with the
            validation error; a valid boundary with nothing laid yields EMPTY.
        """
        validation = self.validate(boundary)
        if not validation.valid:
            logger.info("Paving boundary rejected: %s", validation.error)
            return PavingResult(
                tiles=(),
                statistics=calculate_statistics((), self.config.wastage_percent),
                outcome=FillOutcome.INVALID,
                validation=validation,
            )

        points = simplify_polygon(boundary)
        tiles: list[Tile] = []
        for row, col, rect in self.grid_cells(points):
            tile = self.classify(rect, points, exclude_zones, f"paver-{row}-{col}")
            if tile is None:
                continue
            if tile.is_partial and not self.config.include_edge_pavers:
                continue
            tiles.append(tile)

        stats = calculate_statistics(
            tiles,
            wastage_percent=self.config.wastage_percent,
            count_partial=self.config.count_edge_pavers,
        )
        outcome = FillOutcome.OK if tiles else FillOutcome.EMPTY
        logger.debug(
            "Paving fill: %d full, %d cut, %.3f m²",
            stats.full_count,
            stats.partial_count,
            stats.total_area_m2,
        )
        return PavingResult(
            tiles=tuple(tiles),
            statistics=stats,
            outcome=outcome,
            validation=validation,
        )


def fill_area(
    boundary: Sequence[Point],
    config: PavingConfig,
    exclude_zones: Sequence[ExcludeZone] = (),
) -> PavingResult:
    """Fill a boundary with pavers using ``config``."""
    return PavingFillService(config).fill(boundary, exclude_zones)
