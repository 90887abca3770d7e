"""Unit tests for the planar geometry kernel.

These tests verify:
- Point-in-polygon and inclusive boundary tests
- Segment intersection including collinear touching
- Rectangle vs polygon intersection, containment and clipped area
- Winding normalisation, simplification, transforms and offsets
- Clip containment and exact areas through triangulation
"""

import math

import pytest

from poolpave.domain.services import (
    clamp_point_to_polygon,
    clip_polygon,
    has_self_intersections,
    intersect_convex_pieces,
    is_point_near_polygon_boundary,
    normalize_winding,
    offset_polygon,
    offset_polygon_per_edge,
    pieces_area,
    point_in_or_on_polygon,
    point_in_polygon,
    polygon_area,
    rect_fully_inside_polygon,
    rect_intersects_polygon,
    rect_polygon_intersection_area,
    segments_intersect,
    signed_area,
    simplify_polygon,
    transform_outline,
    triangulate_polygon,
)
from poolpave.domain.value_objects import Point, Rect


def _square(size: float = 1000) -> list[Point]:
    return [Point(0, 0), Point(size, 0), Point(size, size), Point(0, size)]


def _l_shape() -> list[Point]:
    """L-shaped outline with the notch at the top right."""
    return [
        Point(0, 0),
        Point(1000, 0),
        Point(1000, 1000),
        Point(2000, 1000),
        Point(2000, 2000),
        Point(0, 2000),
    ]


# =============================================================================
# Point tests
# =============================================================================


class TestPointInPolygon:
    """Tests for point_in_polygon and its inclusive variants."""

    def test_center_is_inside(self) -> None:
        assert point_in_polygon(Point(500, 500), _square())

    def test_outside_point(self) -> None:
        assert not point_in_polygon(Point(1500, 500), _square())

    def test_degenerate_polygon_contains_nothing(self) -> None:
        assert not point_in_polygon(Point(0, 0), [Point(0, 0), Point(10, 0)])

    def test_concave_notch_is_outside(self) -> None:
        """A point in the L-shape's notch is not inside."""
        assert not point_in_polygon(Point(1500, 500), _l_shape())
        assert point_in_polygon(Point(1500, 1500), _l_shape())

    def test_near_boundary_within_tolerance(self) -> None:
        assert is_point_near_polygon_boundary(Point(1001, 500), _square())
        assert not is_point_near_polygon_boundary(Point(1010, 500), _square())

    def test_inclusive_test_accepts_edge_points(self) -> None:
        assert point_in_or_on_polygon(Point(1000, 500), _square())
        assert point_in_or_on_polygon(Point(1001, 500), _square())
        assert not point_in_or_on_polygon(Point(1002, 500), _square())

    def test_clamp_inside_point_unchanged(self) -> None:
        p = Point(200, 300)
        assert clamp_point_to_polygon(p, _square()) == p

    def test_clamp_outside_point_to_nearest_edge(self) -> None:
        clamped = clamp_point_to_polygon(Point(1500, 400), _square())
        assert clamped.x == pytest.approx(1000)
        assert clamped.y == pytest.approx(400)


class TestSegmentsIntersect:
    """Tests for segments_intersect."""

    def test_crossing_segments(self) -> None:
        assert segments_intersect(Point(0, 0), Point(10, 10), Point(0, 10), Point(10, 0))

    def test_parallel_segments(self) -> None:
        assert not segments_intersect(Point(0, 0), Point(10, 0), Point(0, 5), Point(10, 5))

    def test_touching_endpoint_counts(self) -> None:
        assert segments_intersect(Point(0, 0), Point(10, 0), Point(10, 0), Point(10, 10))

    def test_collinear_overlap_counts(self) -> None:
        assert segments_intersect(Point(0, 0), Point(10, 0), Point(5, 0), Point(15, 0))

    def test_collinear_disjoint(self) -> None:
        assert not segments_intersect(Point(0, 0), Point(10, 0), Point(11, 0), Point(20, 0))


# =============================================================================
# Rectangle tests
# =============================================================================


class TestRectIntersectsPolygon:
    """Tests for rect_intersects_polygon."""

    def test_rect_inside(self) -> None:
        assert rect_intersects_polygon(Rect(100, 100, 200, 200), _square())

    def test_rect_straddling_edge(self) -> None:
        assert rect_intersects_polygon(Rect(900, 100, 200, 200), _square())

    def test_rect_far_outside(self) -> None:
        assert not rect_intersects_polygon(Rect(2000, 2000, 100, 100), _square())

    def test_polygon_vertex_inside_rect(self) -> None:
        """A rectangle covering a polygon corner intersects it."""
        assert rect_intersects_polygon(Rect(950, 950, 100, 100), _square())

    def test_small_polygon_inside_large_rect(self) -> None:
        small = _square(10)
        assert rect_intersects_polygon(Rect(-100, -100, 500, 500), small)


class TestRectFullyInsidePolygon:
    """Tests for rect_fully_inside_polygon."""

    def test_rect_sharing_boundary_edges(self) -> None:
        """Rectangles flush with the boundary still count as inside."""
        assert rect_fully_inside_polygon(Rect(0, 0, 1000, 1000), _square())

    def test_rect_crossing_boundary(self) -> None:
        assert not rect_fully_inside_polygon(Rect(900, 0, 200, 200), _square())

    def test_rect_spanning_concave_notch(self) -> None:
        """All corners inside but a reflex vertex pokes into the rectangle."""
        rect = Rect(500, 500, 1000, 1000)
        poly = [
            Point(0, 0),
            Point(2000, 0),
            Point(2000, 2000),
            Point(1000, 1000),
            Point(0, 2000),
        ]
        corners_inside = all(point_in_or_on_polygon(c, poly) for c in rect.corners())
        assert corners_inside
        assert not rect_fully_inside_polygon(rect, poly)

    def test_degenerate_polygon(self) -> None:
        assert not rect_fully_inside_polygon(Rect(0, 0, 1, 1), [Point(0, 0), Point(1, 1)])


class TestIntersectionArea:
    """Tests for rect_polygon_intersection_area."""

    def test_full_overlap(self) -> None:
        assert rect_polygon_intersection_area(Rect(0, 0, 400, 400), _square()) == pytest.approx(
            160_000
        )

    def test_partial_overlap(self) -> None:
        area = rect_polygon_intersection_area(Rect(800, 0, 400, 400), _square())
        assert area == pytest.approx(80_000)

    def test_concave_polygon(self) -> None:
        """Area against an L-shape excludes the notch."""
        area = rect_polygon_intersection_area(Rect(500, 500, 1000, 1000), _l_shape())
        assert area == pytest.approx(750_000)

    def test_disjoint(self) -> None:
        assert rect_polygon_intersection_area(Rect(2000, 0, 10, 10), _square()) == 0.0


# =============================================================================
# Polygon tests
# =============================================================================


class TestAreaAndWinding:
    """Tests for signed_area and normalize_winding."""

    def test_clockwise_screen_outline_is_positive(self) -> None:
        assert signed_area(_square()) == pytest.approx(1_000_000)

    def test_reversed_outline_is_negative(self) -> None:
        assert signed_area(list(reversed(_square()))) == pytest.approx(-1_000_000)

    def test_polygon_area_is_absolute(self) -> None:
        assert polygon_area(list(reversed(_square()))) == pytest.approx(1_000_000)

    def test_normalize_keeps_clockwise(self) -> None:
        points, reversed_ = normalize_winding(_square())
        assert not reversed_
        assert points == _square()

    def test_normalize_reverses_keeping_first_vertex(self) -> None:
        ccw = [Point(0, 0), Point(0, 1000), Point(1000, 1000), Point(1000, 0)]
        points, reversed_ = normalize_winding(ccw)
        assert reversed_
        assert points == [Point(0, 0), Point(1000, 0), Point(1000, 1000), Point(0, 1000)]


class TestSelfIntersection:
    """Tests for has_self_intersections."""

    def test_simple_polygon(self) -> None:
        assert not has_self_intersections(_l_shape())

    def test_bowtie(self) -> None:
        bowtie = [Point(0, 0), Point(1000, 1000), Point(1000, 0), Point(0, 2000)]
        assert has_self_intersections(bowtie)

    def test_triangle_never_self_intersects(self) -> None:
        assert not has_self_intersections([Point(0, 0), Point(10, 0), Point(0, 10)])


class TestClipPolygon:
    """Tests for clip_polygon."""

    def test_clip_square_by_square(self) -> None:
        clipped = clip_polygon(_square(), Rect(500, 500, 1000, 1000).to_polygon())
        assert polygon_area(clipped) == pytest.approx(250_000)

    def test_clip_orientation_independent(self) -> None:
        clip = list(reversed(Rect(500, 500, 1000, 1000).to_polygon()))
        assert polygon_area(clip_polygon(_square(), clip)) == pytest.approx(250_000)

    def test_disjoint_clip_is_empty(self) -> None:
        assert clip_polygon(_square(), Rect(5000, 5000, 10, 10).to_polygon()) == []

    def test_degenerate_input_returned_unclipped(self) -> None:
        line = [Point(0, 0), Point(10, 0)]
        assert clip_polygon(line, _square()) == line


class TestSimplifyPolygon:
    """Tests for simplify_polygon."""

    def test_drops_duplicate_closing_point(self) -> None:
        closed = _square() + [Point(0, 0)]
        assert simplify_polygon(closed) == _square()

    def test_drops_collinear_points(self) -> None:
        poly = [Point(0, 0), Point(500, 0), Point(1000, 0), Point(1000, 1000), Point(0, 1000)]
        assert simplify_polygon(poly) == [
            Point(0, 0),
            Point(1000, 0),
            Point(1000, 1000),
            Point(0, 1000),
        ]

    def test_idempotent(self) -> None:
        poly = [Point(0, 0), Point(500, 0), Point(1000, 0), Point(1000, 1000), Point(0, 1000)]
        once = simplify_polygon(poly)
        assert simplify_polygon(once) == once

    def test_all_collinear_returns_deduplicated_points(self) -> None:
        line = [Point(0, 0), Point(0, 0), Point(100, 0), Point(200, 0)]
        assert simplify_polygon(line) == [Point(0, 0), Point(100, 0), Point(200, 0)]


class TestTransformsAndOffsets:
    """Tests for transform_outline and the offset helpers."""

    def test_transform_scales_then_rotates_then_translates(self) -> None:
        out = transform_outline([Point(1000, 0)], position=Point(5, 5), rotation_deg=90, scale=0.1)
        assert out[0].x == pytest.approx(5)
        assert out[0].y == pytest.approx(105)

    def test_identity_transform(self) -> None:
        assert transform_outline(_square()) == _square()

    def test_offset_square_outward(self) -> None:
        grown = offset_polygon(_square(), 100)
        assert grown[0].x == pytest.approx(-100)
        assert grown[0].y == pytest.approx(-100)
        assert polygon_area(grown) == pytest.approx(1200 * 1200)

    def test_offset_independent_of_winding(self) -> None:
        grown = offset_polygon(list(reversed(_square())), 100)
        assert polygon_area(grown) == pytest.approx(1200 * 1200)

    def test_offset_per_edge(self) -> None:
        """Only the bottom edge (index 2) moves."""
        grown = offset_polygon_per_edge(_square(), [0, 0, 250, 0])
        ys = sorted({round(p.y, 6) for p in grown})
        xs = sorted({round(p.x, 6) for p in grown})
        assert ys == [0, 1250]
        assert xs == [0, 1000]

    def test_offset_distance_is_perpendicular(self) -> None:
        triangle = [Point(0, 0), Point(1000, 0), Point(0, 1000)]
        grown = offset_polygon(triangle, 10)
        assert grown[0].x == pytest.approx(-10)
        assert grown[0].y == pytest.approx(-10)
        assert polygon_area(grown) > polygon_area(triangle)
        assert not math.isnan(grown[1].x)


def _star(outer: float = 1000, inner: float = 400, points: int = 5) -> list[Point]:
    """Concave star centred on the origin."""
    verts = []
    for i in range(points * 2):
        radius = outer if i % 2 == 0 else inner
        angle = math.pi * i / points - math.pi / 2
        verts.append(Point(radius * math.cos(angle), radius * math.sin(angle)))
    return verts


class TestClipContainment:
    """Clipping a concave subject by a convex clip stays inside the clip."""

    @pytest.mark.parametrize(
        "clip",
        [
            [Point(0, -700), Point(700, 0), Point(0, 700), Point(-700, 0)],
            [Point(-900, -200), Point(600, -800), Point(300, 900)],
            Rect(-300, -1200, 500, 1500).to_polygon(),
        ],
        ids=["diamond", "triangle", "rect"],
    )
    def test_every_point_inside_clip(self, clip: list[Point]) -> None:
        subject = _star()
        clipped = clip_polygon(subject, clip)
        assert len(clipped) >= 3
        for p in clipped:
            assert point_in_or_on_polygon(p, clip)
        assert polygon_area(clipped) <= min(polygon_area(subject), polygon_area(clip)) + 1e-6

    def test_l_shape_by_diamond(self) -> None:
        diamond = [Point(1000, 0), Point(2000, 1000), Point(1000, 2000), Point(0, 1000)]
        clipped = clip_polygon(_l_shape(), diamond)
        assert all(point_in_or_on_polygon(p, diamond) for p in clipped)


class TestTriangulation:
    """Tests for triangulate_polygon and convex-piece intersection."""

    def test_l_shape_area_preserved(self) -> None:
        triangles = triangulate_polygon(_l_shape())
        assert len(triangles) == 4
        assert all(polygon_area(t) > 0 for t in triangles)
        assert pieces_area(triangles) == pytest.approx(polygon_area(_l_shape()))

    def test_either_winding(self) -> None:
        triangles = triangulate_polygon(list(reversed(_l_shape())))
        assert pieces_area(triangles) == pytest.approx(3_000_000)

    def test_star_area_preserved(self) -> None:
        assert pieces_area(triangulate_polygon(_star())) == pytest.approx(
            polygon_area(_star())
        )

    def test_collinear_points_ignored(self) -> None:
        square = [Point(0, 0), Point(500, 0), Point(1000, 0), Point(1000, 1000), Point(0, 1000)]
        assert pieces_area(triangulate_polygon(square)) == pytest.approx(1_000_000)

    def test_degenerate(self) -> None:
        assert triangulate_polygon([Point(0, 0), Point(10, 0), Point(20, 0)]) == []

    def test_concave_overlap(self) -> None:
        """Two L-shapes overlap only where both are solid."""
        shifted = transform_outline(_l_shape(), Point(500, 0))
        overlap = intersect_convex_pieces(
            triangulate_polygon(_l_shape()), triangulate_polygon(shifted)
        )
        # Bottom bar 1500 x 1000 plus the upright strip 500 x 1000
        assert pieces_area(overlap) == pytest.approx(2_000_000)
