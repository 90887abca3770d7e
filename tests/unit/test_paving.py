"""Unit tests for the paving fill engine.

These tests verify:
- Boundary validation messages, in the order they are checked
- Full and cut pavers on aligned and unaligned boundaries
- Edge paver inclusion and counting rules
- Exclude zones and empty fills
- Grid anchoring
- Exact cut areas and whole-layout properties
"""

import pytest

from poolpave.domain.services import (
    PavingFillService,
    fill_area,
    grid_origin,
    laid_area,
    validate_boundary,
)
from poolpave.domain.value_objects import (
    ExcludeZone,
    FillOutcome,
    GridAnchor,
    PavingConfig,
    Point,
    Rect,
)


def _rect(x: float, y: float, w: float, h: float) -> list[Point]:
    return [Point(x, y), Point(x + w, y), Point(x + w, y + h), Point(x, y + h)]


@pytest.fixture
def pavers_400() -> PavingConfig:
    return PavingConfig(paver_width=400, paver_height=400)


# =============================================================================
# Validation
# =============================================================================


class TestValidateBoundary:
    """Tests for validate_boundary."""

    def test_too_few_points(self) -> None:
        result = validate_boundary([Point(0, 0), Point(10, 0)])
        assert not result.valid
        assert result.error == "Need at least 3 points"

    def test_no_area(self) -> None:
        result = validate_boundary([Point(0, 0), Point(100, 0), Point(200, 0)])
        assert result.error == "Boundary has no area"

    def test_crossing_lines(self) -> None:
        bowtie = [Point(0, 0), Point(1000, 1000), Point(1000, 0), Point(0, 2000)]
        assert validate_boundary(bowtie).error == "Boundary lines cannot cross each other"

    def test_too_large(self) -> None:
        result = validate_boundary(_rect(0, 0, 200_000, 200_000))
        assert result.error == "Area too large (maximum 10,000 m²)"

    def test_too_small_for_paver(self, pavers_400: PavingConfig) -> None:
        result = validate_boundary(_rect(0, 0, 300, 300), pavers_400)
        assert result.error == (
            "Area too small to fit 400×400 pavers (needs at least 400×400mm)"
        )

    def test_below_minimum_area(self) -> None:
        config = PavingConfig(paver_width=10, paver_height=10)
        result = validate_boundary(_rect(0, 0, 100, 50), config)
        assert result.error == "Area too small (minimum 0.01 m²)"

    def test_shape_only_check_without_config(self) -> None:
        assert validate_boundary(_rect(0, 0, 300, 300)).valid

    def test_valid_boundary(self, square_4m: list[Point], pavers_400: PavingConfig) -> None:
        result = validate_boundary(square_4m, pavers_400)
        assert result.valid
        assert result.error is None


# =============================================================================
# Filling
# =============================================================================


class TestFill:
    """Tests for PavingFillService.fill."""

    def test_aligned_square_is_all_full(
        self, square_4m: list[Point], pavers_400: PavingConfig
    ) -> None:
        result = fill_area(square_4m, pavers_400)
        assert result.outcome is FillOutcome.OK
        assert result.statistics.full_count == 100
        assert result.statistics.partial_count == 0
        assert result.statistics.total_area_m2 == pytest.approx(16.0)

    def test_unaligned_square_has_edge_pavers(self, pavers_400: PavingConfig) -> None:
        result = fill_area(_rect(0, 0, 4100, 4100), pavers_400)
        stats = result.statistics
        assert stats.full_count == 100
        assert stats.partial_count == 21
        partial_area = sum(t.area for t in result.tiles if t.is_partial)
        assert partial_area / 1_000_000 == pytest.approx(0.81)
        assert stats.total_area_m2 == pytest.approx(16.81)

    def test_edge_paver_cut_percentage(self, pavers_400: PavingConfig) -> None:
        result = fill_area(_rect(0, 0, 4100, 4100), pavers_400)
        corner = next(t for t in result.tiles if t.id == "paver-10-10")
        assert corner.is_partial
        assert corner.actual_area == pytest.approx(10_000)
        assert corner.cut_percentage == 94

    def test_exclude_edge_pavers(self) -> None:
        config = PavingConfig(paver_width=400, paver_height=400, include_edge_pavers=False)
        result = fill_area(_rect(0, 0, 4100, 4100), config)
        assert len(result.tiles) == 100
        assert not any(t.is_partial for t in result.tiles)

    def test_edge_pavers_not_counted(self) -> None:
        config = PavingConfig(paver_width=400, paver_height=400, count_edge_pavers=False)
        stats = fill_area(_rect(0, 0, 4100, 4100), config).statistics
        assert stats.partial_count == 21
        assert stats.subtotal == 100

    def test_wastage_order_quantity(self, square_4m: list[Point]) -> None:
        config = PavingConfig(paver_width=400, paver_height=400, wastage_percent=15)
        stats = fill_area(square_4m, config).statistics
        assert stats.subtotal == 100
        assert stats.order_quantity == 115

    def test_grout_spacing(self) -> None:
        config = PavingConfig(paver_width=400, paver_height=400, grout_width=10)
        result = fill_area(_rect(0, 0, 4100, 4100), config)
        xs = sorted({t.x for t in result.tiles})
        assert xs[1] - xs[0] == pytest.approx(410)
        assert result.statistics.full_count == 100

    def test_invalid_boundary(self, pavers_400: PavingConfig) -> None:
        result = fill_area(_rect(0, 0, 300, 300), pavers_400)
        assert result.outcome is FillOutcome.INVALID
        assert result.tiles == ()
        assert result.message.startswith("Area too small to fit")

    def test_concave_boundary(self, pavers_400: PavingConfig) -> None:
        """Pavers are not laid in the notch of an L-shaped boundary."""
        boundary = [
            Point(0, 0),
            Point(2000, 0),
            Point(2000, 2000),
            Point(4000, 2000),
            Point(4000, 4000),
            Point(0, 4000),
        ]
        result = fill_area(boundary, pavers_400)
        assert result.statistics.full_count == 75
        assert result.statistics.partial_count == 0
        assert not any(t.x >= 2000 and t.y < 2000 for t in result.tiles)


class TestExcludeZones:
    """Tests for exclude zones."""

    def test_zone_removes_covered_pavers(
        self, square_4m: list[Point], pavers_400: PavingConfig
    ) -> None:
        zone = ExcludeZone(outline=tuple(_rect(800, 800, 1200, 1200)), zone_id="pool")
        result = fill_area(square_4m, pavers_400, [zone])
        assert result.statistics.full_count == 91
        assert result.statistics.partial_count == 0

    def test_zone_cuts_straddling_pavers(
        self, square_4m: list[Point], pavers_400: PavingConfig
    ) -> None:
        zone = ExcludeZone(outline=tuple(_rect(1000, 1000, 400, 400)))
        result = fill_area(square_4m, pavers_400, [zone])
        cut = [t for t in result.tiles if t.is_partial]
        assert len(cut) == 4
        assert all(t.actual_area == pytest.approx(120_000) for t in cut)

    def test_zone_covering_everything_is_empty(
        self, square_4m: list[Point], pavers_400: PavingConfig
    ) -> None:
        zone = ExcludeZone(outline=tuple(_rect(-10, -10, 4020, 4020)))
        result = fill_area(square_4m, pavers_400, [zone])
        assert result.outcome is FillOutcome.EMPTY
        assert result.is_empty
        assert result.message == "No pavers fit inside the boundary"


class TestGridOrigin:
    """Tests for grid_origin."""

    def test_bounds_anchor(self, pavers_400: PavingConfig) -> None:
        assert grid_origin(_rect(100, 200, 4100, 4100), pavers_400) == Point(100, 200)

    def test_top_right_anchor(self) -> None:
        config = PavingConfig(paver_width=400, paver_height=400, anchor=GridAnchor.TOP_RIGHT)
        assert grid_origin(_rect(0, 0, 4100, 4100), config) == Point(3700, 0)

    def test_bottom_left_anchor(self) -> None:
        config = PavingConfig(paver_width=400, paver_height=400, anchor=GridAnchor.BOTTOM_LEFT)
        assert grid_origin(_rect(0, 0, 4100, 4100), config) == Point(0, 3700)

    def test_explicit_origin_wins(self) -> None:
        config = PavingConfig(
            paver_width=400,
            paver_height=400,
            origin=Point(50, 50),
            anchor=GridAnchor.TOP_RIGHT,
        )
        assert grid_origin(_rect(0, 0, 4100, 4100), config) == Point(50, 50)

    def test_right_anchor_puts_cuts_on_the_left(self) -> None:
        config = PavingConfig(paver_width=400, paver_height=400, anchor=GridAnchor.TOP_RIGHT)
        result = PavingFillService(config).fill(_rect(0, 0, 4100, 4000))
        cut = [t for t in result.tiles if t.is_partial]
        assert len(cut) == 10
        assert all(t.x < 0 for t in cut)


# =============================================================================
# Cut areas
# =============================================================================


class TestLaidArea:
    """Tests for exact cut areas against boundaries and zones."""

    def test_zone_only_subtracted_inside_boundary(self, pavers_400: PavingConfig) -> None:
        """A zone overhanging the boundary only removes the laid part."""
        zone = ExcludeZone(outline=tuple(_rect(3900, 0, 600, 200)), zone_id="step")
        result = fill_area(_rect(0, 0, 4100, 4100), pavers_400, [zone])
        tiles = {t.id: t for t in result.tiles}
        assert "paver-0-10" in tiles
        paver = tiles["paver-0-10"]
        assert paver.is_partial
        assert paver.actual_area == pytest.approx(20_000)
        assert paver.cut_percentage == 88

    def test_overlapping_zones_counted_once(
        self, square_4m: list[Point], pavers_400: PavingConfig
    ) -> None:
        zones = [
            ExcludeZone(outline=tuple(_rect(0, 0, 200, 400)), zone_id="a"),
            ExcludeZone(outline=tuple(_rect(100, 0, 200, 400)), zone_id="b"),
        ]
        result = fill_area(square_4m, pavers_400, zones)
        paver = next(t for t in result.tiles if t.id == "paver-0-0")
        assert paver.actual_area == pytest.approx(40_000)
        assert paver.cut_percentage == 75

    def test_concave_boundary_corner(self) -> None:
        boundary = [
            Point(0, 0),
            Point(2000, 0),
            Point(2000, 2000),
            Point(4000, 2000),
            Point(4000, 4000),
            Point(0, 4000),
        ]
        assert laid_area(Rect(1800, 1800, 400, 400), boundary) == pytest.approx(120_000)

    def test_inside_skips_boundary_clip(self) -> None:
        zone = ExcludeZone(outline=tuple(_rect(0, 0, 100, 400)))
        area = laid_area(Rect(0, 0, 400, 400), _rect(0, 0, 4000, 4000), [zone], inside=True)
        assert area == pytest.approx(120_000)


# =============================================================================
# Layout properties
# =============================================================================


class TestFillProperties:
    """Whole-layout properties of the paving fill."""

    @pytest.fixture
    def irregular(self) -> list[Point]:
        return [
            Point(0, 0),
            Point(3300, 150),
            Point(3900, 2600),
            Point(1800, 2100),
            Point(300, 3700),
        ]

    @pytest.fixture
    def grouted(self) -> PavingConfig:
        return PavingConfig(paver_width=600, paver_height=300, grout_width=5)

    def test_no_overlaps(self, irregular: list[Point], grouted: PavingConfig) -> None:
        zone = ExcludeZone(outline=tuple(_rect(1200, 600, 700, 500)))
        result = fill_area(irregular, grouted, [zone])
        assert result.tiles
        rects = [t.rect for t in result.tiles]
        for i, a in enumerate(rects):
            for b in rects[i + 1:]:
                dx, dy = a.overlap_extents(b)
                assert not (dx > 0 and dy > 0), (a, b)

    def test_repeatable(self, irregular: list[Point], grouted: PavingConfig) -> None:
        zone = ExcludeZone(outline=tuple(_rect(1200, 600, 700, 500)))
        assert fill_area(irregular, grouted, [zone]) == fill_area(irregular, grouted, [zone])
