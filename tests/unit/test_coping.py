"""Unit tests for the coping layout solver.

These tests verify:
- Corner classification and default strategy tables
- Symmetric MIDDLE cuts on a rectangular pool
- START and END strategies put the cut at one end
- Counter-clockwise outlines give the same layout with caller-order indices
- Outer-corner anchoring and sequential ids per edge
- Outer boundary, exclude zone and drag-distance helpers
"""

import logging

import pytest

from poolpave.domain.services import (
    CopingLayoutService,
    T_SHAPED_STRATEGIES,
    calculate_pool_coping,
    classify_corner,
    coping_exclude_zone,
    coping_outer_boundary,
    default_strategies,
    rows_from_drag_distance,
)
from poolpave.domain.value_objects import (
    CopingConfig,
    CornerType,
    CutStrategy,
    Point,
    PoolShapeKind,
)


def _edge_tiles(result, index: int):
    return [t for t in result.tiles if t.side == index]


class TestClassifyCorner:
    """Tests for classify_corner."""

    def test_convex_corner_is_standard(self) -> None:
        assert classify_corner(Point(0, 0), Point(100, 0), Point(100, 100)) is CornerType.STANDARD

    def test_reflex_corner_is_armpit(self) -> None:
        assert classify_corner(Point(200, 100), Point(100, 100), Point(100, 200)) is CornerType.ARMPIT


class TestDefaultStrategies:
    """Tests for default_strategies."""

    def test_rectangle_is_all_middle(self) -> None:
        assert default_strategies(4) == [CutStrategy.MIDDLE] * 4

    def test_eight_vertices_infer_t_shape(self) -> None:
        assert default_strategies(8) == list(T_SHAPED_STRATEGIES)

    def test_explicit_rectangular_kind_overrides_inference(self) -> None:
        assert default_strategies(8, PoolShapeKind.RECTANGULAR) == [CutStrategy.MIDDLE] * 8

    def test_t_table_needs_eight_edges(self) -> None:
        assert default_strategies(6, PoolShapeKind.T_SHAPED) == [CutStrategy.MIDDLE] * 6


class TestResolveStrategies:
    """Tests for explicit strategy tables."""

    def test_short_table_padded_with_middle(self, caplog: pytest.LogCaptureFixture) -> None:
        service = CopingLayoutService(CopingConfig(strategies=(CutStrategy.START,)))
        with caplog.at_level(logging.WARNING):
            strategies = service.resolve_strategies(4)
        assert strategies == [
            CutStrategy.START,
            CutStrategy.MIDDLE,
            CutStrategy.MIDDLE,
            CutStrategy.MIDDLE,
        ]
        assert "padding with MIDDLE" in caplog.text

    def test_long_table_truncated(self) -> None:
        service = CopingLayoutService(CopingConfig(strategies=(CutStrategy.END,) * 6))
        assert service.resolve_strategies(4) == [CutStrategy.END] * 4


# =============================================================================
# Rectangular pool
# =============================================================================


class TestRectangularPool:
    """Coping around a 6000 x 3000 pool with 400mm tiles and 5mm grout."""

    def test_tile_counts(self, pool_6x3: list[Point]) -> None:
        result = calculate_pool_coping(pool_6x3)
        assert len(result.tiles) == 50
        assert result.statistics.full_count == 42
        assert result.statistics.partial_count == 8

    def test_middle_cuts_are_symmetric(self, pool_6x3: list[Point]) -> None:
        result = calculate_pool_coping(pool_6x3)
        for index in range(4):
            tiles = _edge_tiles(result, index)
            assert tiles[0].is_partial and tiles[-1].is_partial
            assert tiles[0].width == pytest.approx(tiles[-1].width)

    def test_cut_widths(self, pool_6x3: list[Point]) -> None:
        result = calculate_pool_coping(pool_6x3)
        top = _edge_tiles(result, 0)
        right = _edge_tiles(result, 1)
        assert top[0].width == pytest.approx(162.5)
        assert right[0].width == pytest.approx(80)
        assert len(top) == 18
        assert len(right) == 7

    def test_horizontal_edge_runs_past_convex_corners(self, pool_6x3: list[Point]) -> None:
        top = _edge_tiles(calculate_pool_coping(pool_6x3), 0)
        assert top[0].x == pytest.approx(-405)
        assert top[-1].x + top[-1].width == pytest.approx(6405)

    def test_tiles_sit_outside_the_pool(self, pool_6x3: list[Point]) -> None:
        """Every tile lies in the band between the pool and the outer edge."""
        for tile in calculate_pool_coping(pool_6x3).tiles:
            b = tile.bounds()
            outside = b.bottom <= 0 or b.y >= 3000 or b.right <= 0 or b.x >= 6000
            assert outside, tile.id

    def test_tile_metadata(self, pool_6x3: list[Point]) -> None:
        result = calculate_pool_coping(pool_6x3)
        first = result.tiles[0]
        assert first.id == "seg0-t0"
        assert first.side == 0
        assert first.angle == pytest.approx(0)
        assert first.cut_percentage == 59
        right = _edge_tiles(result, 1)[1]
        assert right.angle == pytest.approx(90)
        assert not right.is_partial
        assert right.cut_percentage == 0

    def test_result_carries_outline_and_strategies(self, pool_6x3: list[Point]) -> None:
        result = calculate_pool_coping(pool_6x3)
        assert result.outline == tuple(pool_6x3)
        assert result.strategies == (CutStrategy.MIDDLE,) * 4

    def test_start_strategy_cuts_first_tile(self, pool_6x3: list[Point]) -> None:
        config = CopingConfig(strategies=(CutStrategy.START,) * 4)
        top = _edge_tiles(calculate_pool_coping(pool_6x3, config), 0)
        assert top[0].is_partial
        assert top[0].width == pytest.approx(330)
        assert not top[-1].is_partial

    def test_end_strategy_cuts_last_tile(self, pool_6x3: list[Point]) -> None:
        config = CopingConfig(strategies=(CutStrategy.END,) * 4)
        top = _edge_tiles(calculate_pool_coping(pool_6x3, config), 0)
        assert not top[0].is_partial
        assert top[-1].is_partial
        assert top[-1].width == pytest.approx(330)

    def test_exact_fit_has_no_cuts(self) -> None:
        """An edge whose span is a whole number of steps is laid uncut."""
        # Top span: 3640 + 2 * 405 = 4450 = 11 steps minus one grout joint
        outline = [Point(0, 0), Point(3640, 0), Point(3640, 3000), Point(0, 3000)]
        top = _edge_tiles(calculate_pool_coping(outline), 0)
        assert len(top) == 11
        assert not any(t.is_partial for t in top)


class TestTilePlacement:
    """Grid anchoring, tile anchoring and ids."""

    @pytest.mark.parametrize(
        "strategy, offset",
        [(CutStrategy.END, 0.0), (CutStrategy.START, 335.0), (CutStrategy.MIDDLE, 167.5)],
    )
    def test_anchor_offset_uses_leftover_after_joints(
        self, strategy: CutStrategy, offset: float
    ) -> None:
        """A 6810mm run of 400mm tiles and 5mm joints leaves 335mm over."""
        service = CopingLayoutService(CopingConfig())
        assert service.anchor_offset(6810, strategy) == pytest.approx(offset)

    def test_exact_fit_has_no_offset(self) -> None:
        service = CopingLayoutService(CopingConfig())
        assert service.anchor_offset(4045, CutStrategy.START) == 0.0

    def test_tiles_anchored_at_outer_corner(self, pool_6x3: list[Point]) -> None:
        result = calculate_pool_coping(pool_6x3)
        top = _edge_tiles(result, 0)
        assert all(t.y == pytest.approx(-400) for t in top)
        right = _edge_tiles(result, 1)
        assert all(t.x == pytest.approx(6400) for t in right)
        assert all(t.bounds().x == pytest.approx(6000) for t in right)

    def test_ids_count_laid_tiles(self, pool_6x3: list[Point]) -> None:
        result = calculate_pool_coping(pool_6x3)
        for index in range(4):
            ids = [t.id for t in _edge_tiles(result, index)]
            assert ids == [f"seg{index}-t{n}" for n in range(len(ids))]

    def test_no_overlapping_tiles(self, pool_6x3: list[Point]) -> None:
        rects = [t.bounds() for t in calculate_pool_coping(pool_6x3).tiles]
        for i, a in enumerate(rects):
            for b in rects[i + 1:]:
                dx, dy = a.overlap_extents(b)
                assert not (dx > 1 and dy > 1), (a, b)

    def test_repeatable(self, t_pool: list[Point]) -> None:
        assert calculate_pool_coping(t_pool) == calculate_pool_coping(t_pool)


class TestOutlineHandling:
    """Winding, simplification and degenerate outlines."""

    def test_counter_clockwise_gives_same_tiles(self, pool_6x3: list[Point]) -> None:
        ccw = [pool_6x3[0], pool_6x3[3], pool_6x3[2], pool_6x3[1]]
        result = calculate_pool_coping(ccw)
        assert len(result.tiles) == 50
        assert result.statistics.partial_count == 8

    def test_counter_clockwise_keeps_caller_indices(self, pool_6x3: list[Point]) -> None:
        """Edge 0 of a counter-clockwise outline is its left side."""
        ccw = [pool_6x3[0], pool_6x3[3], pool_6x3[2], pool_6x3[1]]
        left = _edge_tiles(calculate_pool_coping(ccw), 0)
        assert len(left) == 7
        assert all(t.bounds().right <= 0 + 1e-6 for t in left)

    def test_counter_clockwise_flips_start_and_end(self, pool_6x3: list[Point]) -> None:
        """START on a reversed edge still cuts at the caller's start vertex."""
        ccw = [pool_6x3[0], pool_6x3[3], pool_6x3[2], pool_6x3[1]]
        config = CopingConfig(strategies=(CutStrategy.MIDDLE,) * 3 + (CutStrategy.START,))
        top = sorted(
            _edge_tiles(calculate_pool_coping(ccw, config), 3), key=lambda t: t.bounds().x
        )
        # Caller edge 3 runs from (6000, 0) to (0, 0): its start is on the right
        assert top[-1].is_partial
        assert not top[0].is_partial

    def test_redundant_points_ignored(self, pool_6x3: list[Point]) -> None:
        noisy = [pool_6x3[0], Point(3000, 0), *pool_6x3[1:], pool_6x3[0]]
        result = calculate_pool_coping(noisy)
        assert len(result.tiles) == 50

    def test_degenerate_outline_yields_no_tiles(self) -> None:
        result = calculate_pool_coping([Point(0, 0), Point(100, 0), Point(200, 0)])
        assert result.tiles == ()
        assert result.statistics.total_count == 0

    def test_t_shaped_pool_lays_every_edge(self, t_pool: list[Point]) -> None:
        result = calculate_pool_coping(t_pool)
        assert result.strategies == T_SHAPED_STRATEGIES
        assert {t.side for t in result.tiles} == set(range(8))


# =============================================================================
# Helpers
# =============================================================================


class TestOuterBoundary:
    """Tests for coping_outer_boundary and coping_exclude_zone."""

    def test_one_row(self, pool_6x3: list[Point]) -> None:
        outer = coping_outer_boundary(pool_6x3, CopingConfig())
        expected = [(-405, -405), (6405, -405), (6405, 3405), (-405, 3405)]
        for p, (x, y) in zip(outer, expected):
            assert p.x == pytest.approx(x)
            assert p.y == pytest.approx(y)

    def test_rows_per_edge(self, pool_6x3: list[Point]) -> None:
        outer = coping_outer_boundary(pool_6x3, CopingConfig(), rows_per_edge=[1, 1, 2, 1])
        assert max(p.y for p in outer) == pytest.approx(3810)
        assert min(p.y for p in outer) == pytest.approx(-405)

    def test_rows_per_edge_follow_caller_order(self, pool_6x3: list[Point]) -> None:
        ccw = [pool_6x3[0], pool_6x3[3], pool_6x3[2], pool_6x3[1]]
        # Caller edge 0 of the reversed outline is the left side
        outer = coping_outer_boundary(ccw, CopingConfig(), rows_per_edge=[2, 1, 1, 1])
        assert min(p.x for p in outer) == pytest.approx(-810)
        assert max(p.x for p in outer) == pytest.approx(6405)

    def test_exclude_zone(self, pool_6x3: list[Point]) -> None:
        zone = coping_exclude_zone(pool_6x3)
        assert zone.zone_id == "coping"
        assert len(zone.outline) == 4


class TestRowsFromDragDistance:
    """Tests for rows_from_drag_distance."""

    def test_whole_rows(self) -> None:
        assert rows_from_drag_distance(810, 400) == (2, None)

    def test_short_drag(self) -> None:
        assert rows_from_drag_distance(200, 400) == (0, None)

    def test_cut_row_at_boundary(self) -> None:
        rows, cut = rows_from_drag_distance(1000, 400, reached_boundary=True)
        assert rows == 2
        assert cut == pytest.approx(190)

    def test_cut_row_too_thin(self) -> None:
        assert rows_from_drag_distance(860, 400, reached_boundary=True) == (2, None)

    def test_non_positive_input(self) -> None:
        assert rows_from_drag_distance(0, 400) == (0, None)
        assert rows_from_drag_distance(100, 0) == (0, None)
