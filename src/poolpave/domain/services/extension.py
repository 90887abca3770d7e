"""Boundary auto-extension of an existing tiling.

When a user drags a boundary vertex after a coping or paving layout already
exists, the layout is grown rather than recomputed, so user-added tiles
survive. Each cardinal side's outermost row is continued outward on a
``tile_depth + grout`` grid while it still meets the edited boundary, gaps
between the row's tiles included, then the four corner quadrants are
in-filled on the same grid.
"""

from __future__ import annotations

import logging
import math
from collections import defaultdict
from typing import Iterable, Sequence

from ..value_objects import (
    CopingConfig,
    ExtensionResult,
    Point,
    Rect,
    Side,
    Tile,
    TileOrigin,
)
from .geometry import (
    bounding_box,
    rect_fully_inside_polygon,
    rect_intersects_polygon,
    rect_polygon_intersection_area,
    simplify_polygon,
)
from .statistics import calculate_statistics

logger = logging.getLogger(__name__)

__all__ = [
    "AutoExtensionService",
    "TileReservation",
    "boundary_key",
    "extend_tiles",
    "is_default_boundary",
]

# Boundaries within this distance of their default count as unedited
DEFAULT_BOUNDARY_EPSILON = 1.0

# Slack beyond one grout joint when collecting a side's outer row
OUTER_ROW_TOLERANCE = 0.5

# Overlap (per axis) above which a candidate collides with a reserved tile
OVERLAP_TOLERANCE = 1.0

# Intersections smaller than this only touch the boundary line
MIN_OVERLAP_AREA = 1.0

# Gaps in an outer row narrower than this (after grout) are left open
MIN_GAP_SPAN = 1.0

_SIDE_ORDER = (Side.TOP, Side.RIGHT, Side.BOTTOM, Side.LEFT)


def _outer_edge(row: Sequence[Rect], side: Side) -> float:
    if side is Side.TOP:
        return min(r.y for r in row)
    if side is Side.BOTTOM:
        return max(r.bottom for r in row)
    if side is Side.LEFT:
        return min(r.x for r in row)
    return max(r.right for r in row)


def boundary_key(points: Iterable[Point], precision: int = 1) -> str:
    """Rounded-coordinate key for memoising work on a boundary."""
    return ";".join(f"{round(p.x, precision)},{round(p.y, precision)}" for p in points)


def is_default_boundary(
    boundary: Sequence[Point],
    default: Sequence[Point],
    eps: float = DEFAULT_BOUNDARY_EPSILON,
) -> bool:
    """True if ``boundary`` matches ``default`` vertex-for-vertex within ``eps``."""
    current = simplify_polygon(boundary)
    reference = simplify_polygon(default)
    if len(current) != len(reference):
        return False
    return all(
        abs(a.x - b.x) <= eps and abs(a.y - b.y) <= eps
        for a, b in zip(current, reference)
    )


class TileReservation:
    """Spatial hash of occupied rectangles.

    Rectangles are bucketed into square cells so a collision query only
    inspects rectangles in the cells the candidate covers.
    """

    def __init__(self, cell_size: float) -> None:
        self.cell_size = max(cell_size, 1.0)
        self._cells: dict[tuple[int, int], list[Rect]] = defaultdict(list)
        self._count = 0

    def __len__(self) -> int:
        return self._count

    def _cell_range(self, rect: Rect) -> Iterable[tuple[int, int]]:
        size = self.cell_size
        x0 = math.floor(rect.x / size)
        x1 = math.floor(rect.right / size)
        y0 = math.floor(rect.y / size)
        y1 = math.floor(rect.bottom / size)
        for cx in range(x0, x1 + 1):
            for cy in range(y0, y1 + 1):
                yield cx, cy

    def reserve(self, rect: Rect) -> None:
        for cell in self._cell_range(rect):
            self._cells[cell].append(rect)
        self._count += 1

    def conflicts(self, rect: Rect, tolerance: float = OVERLAP_TOLERANCE) -> bool:
        """True if ``rect`` overlaps a reserved rectangle by more than ``tolerance``."""
        for cell in self._cell_range(rect):
            for other in self._cells.get(cell, ()):
                dx, dy = rect.overlap_extents(other)
                if dx > tolerance and dy > tolerance:
                    return True
        return False


class AutoExtensionService:
    """Grows a base tiling outward toward an edited boundary.

    Attributes:
        config: Tile dimensions; rows advance by ``tile_depth + grout_width``.
    """

    def __init__(self, config: CopingConfig | None = None) -> None:
        self.config = config or CopingConfig()

    # -------------------------------------------------------------------------
    # Candidate tests
    # -------------------------------------------------------------------------

    @staticmethod
    def _meets(rect: Rect, poly: Sequence[Point] | None) -> bool:
        if poly is None:
            return True
        return (
            rect_intersects_polygon(rect, poly)
            and rect_polygon_intersection_area(rect, poly) > MIN_OVERLAP_AREA
        )

    @staticmethod
    def _blocked_by_interior(rect: Rect, interior: Sequence[Point] | None) -> bool:
        if not interior:
            return False
        return (
            rect_intersects_polygon(rect, interior)
            and rect_polygon_intersection_area(rect, interior) > MIN_OVERLAP_AREA
        )

    def _make_tile(
        self,
        rect: Rect,
        tile_id: str,
        side: Side | None,
        boundary: Sequence[Point],
        global_boundary: Sequence[Point] | None,
    ) -> Tile:
        """Extension tile for ``rect``, cut where it crosses a boundary.

        A tile is partial when it is clipped by a boundary or when it grew
        from a seed narrower than a nominal tile.
        """
        inside = rect_fully_inside_polygon(rect, boundary) and (
            global_boundary is None or rect_fully_inside_polygon(rect, global_boundary)
        )
        if inside:
            actual = rect.area
        else:
            actual = rect_polygon_intersection_area(rect, boundary)
            if global_boundary is not None:
                actual = min(actual, rect_polygon_intersection_area(rect, global_boundary))
            actual = min(actual, rect.area)

        nominal = self.config.tile_width * self.config.tile_depth
        is_partial = not inside or actual < nominal - MIN_OVERLAP_AREA
        cut = max(0, min(100, round((1 - actual / nominal) * 100))) if is_partial else 0
        return Tile(
            rect.x,
            rect.y,
            rect.width,
            rect.height,
            is_partial,
            tile_id,
            side=side,
            origin=TileOrigin.AUTO_EXTENDED,
            cut_percentage=cut,
            actual_area=None if inside else actual,
        )

    # -------------------------------------------------------------------------
    # Sweeps
    # -------------------------------------------------------------------------

    def outer_row(self, rects: Sequence[Rect], side: Side) -> list[Rect]:
        """Rectangles forming the outermost row on ``side``, in scan order.

        A tile belongs to the row when its outer edge is within one grout
        joint of the extremum, so corner tiles that run past a neighbouring
        band do not hide that band.
        """
        if not rects:
            return []
        tol = self.config.grout_width + OUTER_ROW_TOLERANCE
        edge = _outer_edge(rects, side)
        if side is Side.TOP:
            row = [r for r in rects if abs(r.y - edge) <= tol]
        elif side is Side.BOTTOM:
            row = [r for r in rects if abs(r.bottom - edge) <= tol]
        elif side is Side.LEFT:
            row = [r for r in rects if abs(r.x - edge) <= tol]
        else:
            row = [r for r in rects if abs(r.right - edge) <= tol]

        if side in (Side.TOP, Side.BOTTOM):
            return sorted(row, key=lambda r: (r.x, r.y))
        return sorted(row, key=lambda r: (r.y, r.x))

    def _row_spans(self, row: Sequence[Rect], side: Side) -> list[tuple[float, float]]:
        """Cross-axis spans to continue outward, including gaps between seeds.

        A gap wider than two grout joints (such as the strip left open at a
        pool corner) becomes extra spans of at most one tile width, so the
        continued rows have no holes.
        """
        horizontal = side in (Side.TOP, Side.BOTTOM)
        grout = self.config.grout_width
        width = self.config.tile_width
        spans: list[tuple[float, float]] = []
        reach: float | None = None
        for rect in row:
            start, end = (rect.x, rect.right) if horizontal else (rect.y, rect.bottom)
            if reach is not None:
                gap_start, gap_end = reach + grout, start - grout
                while gap_end - gap_start > MIN_GAP_SPAN:
                    piece_end = min(gap_start + width, gap_end)
                    spans.append((gap_start, piece_end))
                    gap_start = piece_end + grout
            spans.append((start, end))
            reach = end if reach is None else max(reach, end)
        return spans

    def _row_cell(self, side: Side, edge: float, n: int, start: float, end: float) -> Rect:
        """Cell ``n`` rows beyond ``edge``, on the ``tile_depth + grout`` grid."""
        depth = self.config.tile_depth
        offset = self.config.grout_width + (n - 1) * self.config.row_step
        length = end - start
        if side is Side.TOP:
            return Rect(start, edge - offset - depth, length, depth)
        if side is Side.BOTTOM:
            return Rect(start, edge + offset, length, depth)
        if side is Side.LEFT:
            return Rect(edge - offset - depth, start, depth, length)
        return Rect(edge + offset, start, depth, length)

    def sweep_side(
        self,
        side: Side,
        base: Sequence[Rect],
        boundary: Sequence[Point],
        global_boundary: Sequence[Point] | None,
        interior: Sequence[Point] | None,
        reserved: TileReservation,
    ) -> list[Tile]:
        """Continue the outer row on ``side`` while it still meets the boundaries.

        New rows sit on the same ``tile_depth + grout_width`` grid as the
        corner infill, measured from the row's outer edge, and keep the
        cross-axis extent of the tile (or gap) they continue.
        """
        row = self.outer_row(base, side)
        if not row:
            return []
        edge = _outer_edge(row, side)
        tiles: list[Tile] = []
        for start, end in self._row_spans(row, side):
            n = 1
            while True:
                candidate = self._row_cell(side, edge, n, start, end)
                if not (
                    self._meets(candidate, boundary)
                    and self._meets(candidate, global_boundary)
                ):
                    break
                if not self._blocked_by_interior(candidate, interior) and not reserved.conflicts(candidate):
                    reserved.reserve(candidate)
                    tiles.append(
                        self._make_tile(
                            candidate,
                            f"ext-{side.value}-{len(tiles)}",
                            side,
                            boundary,
                            global_boundary,
                        )
                    )
                n += 1
        return tiles

    def infill_corners(
        self,
        base: Sequence[Rect],
        boundary: Sequence[Point],
        global_boundary: Sequence[Point] | None,
        interior: Sequence[Point] | None,
        reserved: TileReservation,
    ) -> list[Tile]:
        """Fill the four corner quadrants the per-side sweeps cannot reach.

        Cells are ``tile_depth`` square and advance by ``tile_depth +
        grout_width`` on both axes, matching the rows laid by the sweeps.
        """
        depth = self.config.tile_depth
        step = self.config.row_step
        inner = bounding_box([c for r in base for c in r.corners()])
        outer = bounding_box(boundary)

        # (name, x of the first cell, y of the first cell, x direction, y direction)
        corners = (
            ("top_left", inner.min_x - step, inner.min_y - step, -1, -1),
            ("top_right", inner.max_x - depth + step, inner.min_y - step, 1, -1),
            ("bottom_right", inner.max_x - depth + step, inner.max_y - depth + step, 1, 1),
            ("bottom_left", inner.min_x - step, inner.max_y - depth + step, -1, 1),
        )

        tiles: list[Tile] = []
        for name, x0, y0, sx, sy in corners:
            reach_x = (inner.min_x - outer.min_x) if sx < 0 else (outer.max_x - inner.max_x)
            reach_y = (inner.min_y - outer.min_y) if sy < 0 else (outer.max_y - inner.max_y)
            cols = max(0, math.ceil(reach_x / step))
            rows = max(0, math.ceil(reach_y / step))
            count = 0
            for j in range(rows):
                for i in range(cols):
                    candidate = Rect(x0 + sx * i * step, y0 + sy * j * step, depth, depth)
                    if not (
                        self._meets(candidate, boundary)
                        and self._meets(candidate, global_boundary)
                    ):
                        continue
                    if self._blocked_by_interior(candidate, interior) or reserved.conflicts(candidate):
                        continue
                    reserved.reserve(candidate)
                    tiles.append(
                        self._make_tile(
                            candidate,
                            f"ext-corner-{name}-{count}",
                            None,
                            boundary,
                            global_boundary,
                        )
                    )
                    count += 1
        return tiles

    # -------------------------------------------------------------------------
    # Entry point
    # -------------------------------------------------------------------------

    def extend(
        self,
        base_tiles: Sequence[Tile],
        boundary: Sequence[Point],
        *,
        default_boundary: Sequence[Point] | None = None,
        global_boundary: Sequence[Point] | None = None,
        interior: Sequence[Point] | None = None,
        added: Sequence[Tile] = (),
    ) -> ExtensionResult:
        """Grow ``base_tiles`` toward ``boundary``.

        Args:
            base_tiles: The existing tiling; rotated tiles use their bounds.
            boundary: The user-edited outer boundary.
            default_boundary: The boundary before any edit. While ``boundary``
                still matches it, no tiles are produced.
            global_boundary: Optional containing boundary, such as the site.
            interior: Optional cavity no tile may enter, such as the pool.
            added: Tiles placed by hand; reserved like base tiles.

        Returns:
            ExtensionResult with only the newly added tiles.
        """
        empty = calculate_statistics(())
        points = simplify_polygon(boundary)
        if len(points) < 3 or not base_tiles:
            logger.info("Auto-extension skipped: degenerate boundary or no base tiles")
            return ExtensionResult(tiles=(), statistics=empty, skipped_reason="degenerate")

        if default_boundary is not None and is_default_boundary(points, default_boundary):
            logger.info("Auto-extension skipped: boundary matches its default")
            return ExtensionResult(tiles=(), statistics=empty, skipped_reason="unedited")

        global_points = simplify_polygon(global_boundary) if global_boundary else None
        if global_points is not None and len(global_points) < 3:
            global_points = None
        interior_points = simplify_polygon(interior) if interior else None

        base = [t.bounds() for t in base_tiles]
        reserved = TileReservation(self.config.row_step)
        for rect in base:
            reserved.reserve(rect)
        for tile in added:
            reserved.reserve(tile.bounds())

        tiles: list[Tile] = []
        for side in _SIDE_ORDER:
            tiles.extend(
                self.sweep_side(side, base, points, global_points, interior_points, reserved)
            )
        tiles.extend(
            self.infill_corners(base, points, global_points, interior_points, reserved)
        )

        logger.debug(
            "Auto-extension added %d tiles (%d reserved)", len(tiles), len(reserved)
        )
        return ExtensionResult(tiles=tuple(tiles), statistics=calculate_statistics(tiles))


def extend_tiles(
    base_tiles: Sequence[Tile],
    boundary: Sequence[Point],
    config: CopingConfig | None = None,
    *,
    default_boundary: Sequence[Point] | None = None,
    global_boundary: Sequence[Point] | None = None,
    interior: Sequence[Point] | None = None,
    added: Sequence[Tile] = (),
) -> ExtensionResult:
    """Grow a tiling toward an edited boundary. See :class:`AutoExtensionService`."""
    return AutoExtensionService(config).extend(
        base_tiles,
        boundary,
        default_boundary=default_boundary,
        global_boundary=global_boundary,
        interior=interior,
        added=added,
    )
