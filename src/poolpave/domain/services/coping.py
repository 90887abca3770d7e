"""Coping layout around a closed pool outline.

Coping is the single row of edge tiles laid around a pool. For every edge
of the outline this module decides how far the tile run reaches past each
corner, where the leftover cut lands, and which tiles are cut.

Corner hierarchy:
    Horizontal edges extend outward past STANDARD (convex) corners and stop
    flush at ARMPIT (reflex) corners. Other edges shrink inward at STANDARD
    corners and stay flush at ARMPIT corners. The extension magnitude is
    ``tile_depth + grout_width``.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Sequence

from ..value_objects import (
    CopingConfig,
    CopingResult,
    CornerType,
    CutStrategy,
    ExcludeZone,
    Point,
    PoolShapeKind,
    Tile,
)
from .geometry import (
    normalize_winding,
    offset_polygon_per_edge,
    polygon_area,
    simplify_polygon,
)
from .statistics import calculate_statistics

logger = logging.getLogger(__name__)

__all__ = [
    "CopingLayoutService",
    "EdgeSpan",
    "T_SHAPED_STRATEGIES",
    "calculate_pool_coping",
    "classify_corner",
    "coping_exclude_zone",
    "coping_outer_boundary",
    "default_strategies",
    "rows_from_drag_distance",
]

# Edges with |dy| below this are horizontal
HORIZONTAL_TOLERANCE = 1.0

# Cross products above this are convex corners
CORNER_EPSILON = -1e-6

# Spans and cut tiles narrower than this are dropped
MIN_CUT_WIDTH = 1.0

# Width deviation beyond which a tile counts as cut
PARTIAL_TOLERANCE = 1.0

# Smallest depth worth laying as a final cut row at a boundary
MIN_BOUNDARY_CUT_ROW_MM = 100.0

# Default table for the 8-vertex T-shaped pool, in outline edge order
T_SHAPED_STRATEGIES: tuple[CutStrategy, ...] = (
    CutStrategy.END,
    CutStrategy.START,
    CutStrategy.MIDDLE,
    CutStrategy.END,
    CutStrategy.START,
    CutStrategy.MIDDLE,
    CutStrategy.MIDDLE,
    CutStrategy.MIDDLE,
)


def classify_corner(prev: Point, curr: Point, nxt: Point) -> CornerType:
    """Classify the corner at ``curr`` of a clockwise (y-down) outline."""
    v1x, v1y = curr.x - prev.x, curr.y - prev.y
    v2x, v2y = nxt.x - curr.x, nxt.y - curr.y
    cross = v1x * v2y - v1y * v2x
    return CornerType.STANDARD if cross > CORNER_EPSILON else CornerType.ARMPIT


def infer_shape_kind(vertex_count: int) -> PoolShapeKind:
    """Guess the pool shape from its simplified vertex count."""
    if vertex_count == 8:
        return PoolShapeKind.T_SHAPED
    return PoolShapeKind.RECTANGULAR


def default_strategies(
    vertex_count: int, shape_kind: PoolShapeKind | None = None
) -> list[CutStrategy]:
    """Default per-edge strategies for a known shape.

    The T-shaped table only applies to outlines with exactly 8 edges; every
    other case (and any edge the table does not cover) uses MIDDLE.
    """
    kind = shape_kind or infer_shape_kind(vertex_count)
    if kind is PoolShapeKind.T_SHAPED and vertex_count == len(T_SHAPED_STRATEGIES):
        return list(T_SHAPED_STRATEGIES)
    return [CutStrategy.MIDDLE] * vertex_count


@dataclass(frozen=True)
class EdgeSpan:
    """Tile run along one outline edge, in distance along the edge.

    Attributes:
        index: Edge index in the caller's outline order.
        start: Point the edge starts at.
        direction: Unit vector along the edge.
        length: Edge length.
        start_corner: Corner type at ``start``.
        end_corner: Corner type at the edge's end.
        effective_start: Where the tile run starts (negative extends back).
        effective_end: Where the tile run ends (beyond ``length`` extends on).
    """

    index: int
    start: Point
    direction: Point
    length: float
    start_corner: CornerType
    end_corner: CornerType
    effective_start: float
    effective_end: float

    @property
    def span(self) -> float:
        return self.effective_end - self.effective_start

    @property
    def angle(self) -> float:
        return math.degrees(math.atan2(self.direction.y, self.direction.x))

    @property
    def outward(self) -> Point:
        """Unit normal pointing away from the pool (clockwise y-down)."""
        return Point(self.direction.y, -self.direction.x)


class CopingLayoutService:
    """Lays coping tiles edge by edge around a pool outline.

    Outlines are simplified and normalised to clockwise (y-down) order before
    solving. When an outline had to be reversed, per-edge strategies are
    remapped (and START/END swapped) so callers can index strategies and read
    ``Tile.side`` against their own vertex order.

    Attributes:
        config: Tile dimensions and strategy overrides.
    """

    def __init__(self, config: CopingConfig | None = None) -> None:
        self.config = config or CopingConfig()

    def resolve_strategies(self, edge_count: int) -> list[CutStrategy]:
        """Strategies per edge of the simplified outline, caller order."""
        explicit = self.config.strategies
        if explicit is None:
            return default_strategies(edge_count, self.config.shape_kind)

        strategies = list(explicit[:edge_count])
        if len(explicit) != edge_count:
            logger.warning(
                "Got %d cut strategies for %d edges; padding with MIDDLE",
                len(explicit),
                edge_count,
            )
            strategies.extend([CutStrategy.MIDDLE] * (edge_count - len(strategies)))
        return strategies

    def edge_spans(self, outline: Sequence[Point]) -> list[EdgeSpan]:
        """Effective tile runs for each edge of a simplified outline."""
        points, reversed_ = normalize_winding(outline)
        n = len(points)
        ext = self.config.tile_depth + self.config.grout_width
        spans: list[EdgeSpan] = []

        for i in range(n):
            prev = points[i - 1]
            curr = points[i]
            nxt = points[(i + 1) % n]
            nxt_next = points[(i + 2) % n]

            length = curr.distance_to(nxt)
            if length == 0:
                continue
            direction = Point((nxt.x - curr.x) / length, (nxt.y - curr.y) / length)
            start_corner = classify_corner(prev, curr, nxt)
            end_corner = classify_corner(curr, nxt, nxt_next)

            horizontal = abs(nxt.y - curr.y) < HORIZONTAL_TOLERANCE
            start_ext = 0.0
            end_ext = 0.0
            if horizontal:
                if start_corner is CornerType.STANDARD:
                    start_ext = -ext
                if end_corner is CornerType.STANDARD:
                    end_ext = ext
            else:
                if start_corner is CornerType.STANDARD:
                    start_ext = ext
                if end_corner is CornerType.STANDARD:
                    end_ext = -ext

            spans.append(
                EdgeSpan(
                    index=(n - 1 - i) if reversed_ else i,
                    start=curr,
                    direction=direction,
                    length=length,
                    start_corner=start_corner,
                    end_corner=end_corner,
                    effective_start=start_ext,
                    effective_end=length + end_ext,
                )
            )
        return spans

    def anchor_offset(self, span: float, strategy: CutStrategy) -> float:
        """Offset of the tile grid from the start of the effective span.

        ``leftover`` is what remains once whole tile-plus-grout steps fill
        ``span + grout`` (n tiles need only n - 1 joints). END leaves it at
        the far end, START moves it to the near end and MIDDLE splits it so
        both end cuts are equal.
        """
        step = self.config.step
        leftover = math.fmod(span + self.config.grout_width, step)
        if leftover < MIN_CUT_WIDTH or step - leftover < MIN_CUT_WIDTH:
            return 0.0
        if strategy is CutStrategy.START:
            return leftover
        if strategy is CutStrategy.MIDDLE:
            return leftover / 2
        return 0.0

    def lay_edge(self, span: EdgeSpan, strategy: CutStrategy) -> list[Tile]:
        """Tiles along one edge span."""
        if span.span <= MIN_CUT_WIDTH:
            logger.debug("Skipping edge %d: span %.2f too short", span.index, span.span)
            return []

        step = self.config.step
        width = self.config.tile_width
        depth = self.config.tile_depth
        anchor = span.effective_start + self.anchor_offset(span.span, strategy)
        k_min = math.floor((span.effective_start - anchor) / step)
        k_max = math.ceil((span.effective_end - anchor) / step)

        outward = span.outward
        tiles: list[Tile] = []
        for k in range(k_min, k_max + 1):
            tile_start = anchor + k * step
            cut_start = max(tile_start, span.effective_start)
            cut_end = min(tile_start + width, span.effective_end)
            cut_width = cut_end - cut_start
            if cut_width < MIN_CUT_WIDTH:
                continue

            # Anchor at the outer corner so the tile's local y runs back to the edge
            x = span.start.x + span.direction.x * cut_start + outward.x * depth
            y = span.start.y + span.direction.y * cut_start + outward.y * depth
            tiles.append(
                Tile(
                    x=x,
                    y=y,
                    width=cut_width,
                    height=depth,
                    is_partial=abs(cut_width - width) > PARTIAL_TOLERANCE,
                    id=f"seg{span.index}-t{len(tiles)}",
                    side=span.index,
                    angle=span.angle,
                    cut_percentage=_cut_percentage(cut_width, width),
                )
            )
        return tiles

    def solve(self, outline: Sequence[Point]) -> CopingResult:
        """Lay coping around ``outline``.

        Args:
            outline: Closed pool outline in either winding. A repeated closing
                point is ignored.

        Returns:
            CopingResult with tiles in edge order.
        """
        points = _solvable_outline(outline)
        if not points:
            logger.info("Coping skipped: outline encloses no area")
            return CopingResult(tiles=(), statistics=calculate_statistics(()))

        strategies = self.resolve_strategies(len(points))
        tiles: list[Tile] = []
        spans = sorted(self.edge_spans(points), key=lambda s: s.index)
        _, reversed_ = normalize_winding(points)
        for span in spans:
            strategy = strategies[span.index]
            if reversed_:
                strategy = strategy.flipped()
            tiles.extend(self.lay_edge(span, strategy))

        logger.debug(
            "Laid %d coping tiles on %d edges (%s winding)",
            len(tiles),
            len(points),
            "reversed" if reversed_ else "clockwise",
        )
        return CopingResult(
            tiles=tuple(tiles),
            statistics=calculate_statistics(tiles),
            strategies=tuple(strategies),
            outline=tuple(points),
        )


def _solvable_outline(outline: Sequence[Point]) -> list[Point]:
    """Simplified outline, or an empty list when it encloses no area."""
    points = simplify_polygon(outline)
    if len(points) < 3 or polygon_area(points) < 1e-9:
        return []
    return points


def _cut_percentage(cut_width: float, nominal: float) -> int:
    if nominal <= 0:
        return 0
    return max(0, min(100, round((1 - cut_width / nominal) * 100)))


def calculate_pool_coping(
    outline: Sequence[Point], config: CopingConfig | None = None
) -> CopingResult:
    """Lay coping around a pool outline with the given configuration."""
    return CopingLayoutService(config).solve(outline)


def coping_outer_boundary(
    outline: Sequence[Point],
    config: CopingConfig | None = None,
    rows: int = 1,
    rows_per_edge: Sequence[int] | None = None,
) -> list[Point]:
    """Outer edge of the coping band, as a polygon.

    Each edge is pushed outward by its row count times ``tile_depth +
    grout_width``. ``rows_per_edge`` is indexed like the simplified outline,
    so a deep end can carry an extra row. This is the default boundary an
    auto-extension compares against, and the footprint paving must avoid.
    """
    config = config or CopingConfig()
    points = _solvable_outline(outline)
    if not points:
        return simplify_polygon(outline)

    counts = list(rows_per_edge) if rows_per_edge is not None else [rows] * len(points)
    counts.extend([rows] * (len(points) - len(counts)))
    distances = [count * config.row_step for count in counts[: len(points)]]

    ordered, reversed_ = normalize_winding(points)
    if reversed_:
        distances = [distances[-1 - j] for j in range(len(distances))]
    return offset_polygon_per_edge(ordered, distances)


def coping_exclude_zone(
    outline: Sequence[Point], config: CopingConfig | None = None, rows: int = 1
) -> ExcludeZone:
    """The pool plus its coping band as an exclude zone for paving."""
    return ExcludeZone(
        outline=tuple(coping_outer_boundary(outline, config, rows=rows)),
        zone_id="coping",
    )


def rows_from_drag_distance(
    distance: float,
    row_depth: float,
    grout_width: float = 5.0,
    reached_boundary: bool = False,
    min_cut_row: float = MIN_BOUNDARY_CUT_ROW_MM,
) -> tuple[int, float | None]:
    """Whole coping rows a drag of ``distance`` buys, plus an optional cut row.

    A trailing cut row is only laid when the drag reached a boundary and
    the leftover depth is at least ``min_cut_row``.

    Returns:
        Tuple of (full_rows, cut_row_depth or None).
    """
    if distance <= 0 or row_depth <= 0:
        return 0, None

    step = row_depth + grout_width
    full_rows = int((distance + grout_width) // step)
    leftover = distance - full_rows * step
    if reached_boundary and leftover >= min_cut_row:
        return full_rows, min(leftover, row_depth)
    return full_rows, None
