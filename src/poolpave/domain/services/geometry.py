"""Planar geometry kernel for tile layout.

This module provides the pure, stateless primitives every solver builds on:
- Point-in-polygon and boundary proximity tests
- Segment intersection with collinear/touching handling
- Rectangle-vs-polygon intersection and containment
- Sutherland-Hodgman clipping and polygon simplification
- Ear-clipping triangulation for exact areas of concave overlaps
- Area, winding, outline transforms and edge offsetting

All functions are total: degenerate input (too few points, zero-length
edges, collinear outlines) yields a conservative answer instead of raising.
"""

from __future__ import annotations

import math
from typing import Sequence

from ..value_objects import BoundingBox, Point, Rect

__all__ = [
    "BOUNDARY_TOLERANCE",
    "CORNER_TOLERANCE",
    "bounding_box",
    "clamp_point_to_polygon",
    "clip_polygon",
    "closest_point_on_segment",
    "distance_to_segment",
    "has_self_intersections",
    "intersect_convex_pieces",
    "is_point_near_polygon_boundary",
    "normalize_winding",
    "offset_polygon",
    "offset_polygon_per_edge",
    "pieces_area",
    "on_segment",
    "orientation",
    "point_in_or_on_polygon",
    "point_in_polygon",
    "polygon_area",
    "rect_fully_inside_polygon",
    "rect_intersects_polygon",
    "rect_polygon_intersection_area",
    "segments_intersect",
    "signed_area",
    "simplify_polygon",
    "transform_outline",
    "triangulate_polygon",
]

# Orientation values below this magnitude are treated as collinear
COLLINEAR_EPSILON = 1e-9

# Slack when checking that a collinear point lies within a segment's extent
ON_SEGMENT_TOLERANCE = 1e-6

# Default distance for "near the boundary"
BOUNDARY_TOLERANCE = 2.0

# Distance at which a rectangle corner counts as on the boundary
CORNER_TOLERANCE = 1.5

# Inset applied before a containment test so shared edges still count
CONTAINMENT_INSET = 0.5

# Points closer than this are duplicates in clipping output
DEDUP_EPSILON = 1e-6


# =============================================================================
# Point and segment primitives
# =============================================================================


def orientation(p: Point, q: Point, r: Point) -> int:
    """Orientation of the ordered triple (p, q, r).

    Returns:
        0 when collinear, 1 for one turning direction and 2 for the other.
    """
    val = (q.y - p.y) * (r.x - q.x) - (q.x - p.x) * (r.y - q.y)
    if abs(val) < COLLINEAR_EPSILON:
        return 0
    return 1 if val > 0 else 2


def on_segment(p: Point, q: Point, r: Point) -> bool:
    """True if q lies within the bounding extent of segment pr."""
    tol = ON_SEGMENT_TOLERANCE
    return (
        min(p.x, r.x) - tol <= q.x <= max(p.x, r.x) + tol
        and min(p.y, r.y) - tol <= q.y <= max(p.y, r.y) + tol
    )


def segments_intersect(a1: Point, a2: Point, b1: Point, b2: Point) -> bool:
    """True if segment a1a2 intersects segment b1b2, touching included."""
    o1 = orientation(a1, a2, b1)
    o2 = orientation(a1, a2, b2)
    o3 = orientation(b1, b2, a1)
    o4 = orientation(b1, b2, a2)

    if o1 != o2 and o3 != o4:
        return True

    # Collinear cases
    if o1 == 0 and on_segment(a1, b1, a2):
        return True
    if o2 == 0 and on_segment(a1, b2, a2):
        return True
    if o3 == 0 and on_segment(b1, a1, b2):
        return True
    if o4 == 0 and on_segment(b1, a2, b2):
        return True
    return False


def closest_point_on_segment(p: Point, a: Point, b: Point) -> Point:
    """Nearest point to p on segment ab."""
    dx = b.x - a.x
    dy = b.y - a.y
    length_sq = dx * dx + dy * dy
    if length_sq < 1e-12:
        return a
    t = ((p.x - a.x) * dx + (p.y - a.y) * dy) / length_sq
    t = max(0.0, min(1.0, t))
    return Point(a.x + t * dx, a.y + t * dy)


def distance_to_segment(p: Point, a: Point, b: Point) -> float:
    """Euclidean distance from p to segment ab."""
    return p.distance_to(closest_point_on_segment(p, a, b))


def _edges(poly: Sequence[Point]):
    n = len(poly)
    for i in range(n):
        yield poly[i], poly[(i + 1) % n]


# =============================================================================
# Point vs polygon
# =============================================================================


def point_in_polygon(p: Point, poly: Sequence[Point]) -> bool:
    """Ray-casting parity test.

    Points exactly on the boundary may land either way; combine with
    :func:`is_point_near_polygon_boundary` for inclusive tests.
    """
    n = len(poly)
    if n < 3:
        return False

    inside = False
    j = n - 1
    for i in range(n):
        xi, yi = poly[i].x, poly[i].y
        xj, yj = poly[j].x, poly[j].y
        if (yi > p.y) != (yj > p.y):
            dy = (yj - yi) or 1e-9
            x_cross = (xj - xi) * (p.y - yi) / dy + xi
            if p.x < x_cross:
                inside = not inside
        j = i
    return inside


def is_point_near_polygon_boundary(
    p: Point, poly: Sequence[Point], tol: float = BOUNDARY_TOLERANCE
) -> bool:
    """True if p lies within ``tol`` of any polygon edge."""
    for a, b in _edges(poly):
        dx = b.x - a.x
        dy = b.y - a.y
        if dx * dx + dy * dy < 1e-6:
            continue
        if distance_to_segment(p, a, b) <= tol:
            return True
    return False


def point_in_or_on_polygon(
    p: Point, poly: Sequence[Point], tol: float = CORNER_TOLERANCE
) -> bool:
    """Inclusive containment: inside, or within ``tol`` of the boundary."""
    return point_in_polygon(p, poly) or is_point_near_polygon_boundary(p, poly, tol)


def clamp_point_to_polygon(p: Point, poly: Sequence[Point]) -> Point:
    """Return p if inside (or on) the polygon, else the nearest boundary point."""
    if not poly:
        return p
    if len(poly) >= 3 and point_in_or_on_polygon(p, poly, ON_SEGMENT_TOLERANCE):
        return p

    best = poly[0]
    best_dist = math.inf
    for a, b in _edges(poly):
        candidate = closest_point_on_segment(p, a, b)
        dist = p.distance_to(candidate)
        if dist < best_dist:
            best, best_dist = candidate, dist
    return best


# =============================================================================
# Rectangle vs polygon
# =============================================================================


def rect_intersects_polygon(rect: Rect, poly: Sequence[Point]) -> bool:
    """True if the rectangle meaningfully intersects the polygon.

    Meaningful means at least two corners inside or on the boundary, any
    polygon vertex strictly inside the rectangle, or any edge crossing.
    """
    if len(poly) < 3:
        return False

    corners = rect.corners()
    inside = sum(1 for c in corners if point_in_or_on_polygon(c, poly))
    if inside >= 2:
        return True

    if any(rect.contains_point(v) for v in poly):
        return True

    rect_edges = list(_edges(corners))
    for a, b in _edges(poly):
        for c, d in rect_edges:
            if segments_intersect(a, b, c, d):
                return True
    return False


def rect_fully_inside_polygon(rect: Rect, poly: Sequence[Point]) -> bool:
    """True if the rectangle lies inside the polygon.

    The rectangle is inset by half a unit (never below one unit in size) so
    that rectangles sharing an edge with the boundary still count. Concave
    polygons are handled by also rejecting any vertex poking into the rect.
    """
    if len(poly) < 3:
        return False

    inner = rect.inset(CONTAINMENT_INSET)
    if not all(point_in_or_on_polygon(c, poly) for c in inner.corners()):
        return False
    return not any(inner.contains_point(v) for v in poly)


def rect_polygon_intersection_area(rect: Rect, poly: Sequence[Point]) -> float:
    """Area of rect ∩ polygon. The polygon may be concave."""
    if len(poly) < 3 or rect.area <= 0:
        return 0.0
    return polygon_area(clip_polygon(poly, rect.to_polygon()))


# =============================================================================
# Area, bounds and winding
# =============================================================================


def signed_area(poly: Sequence[Point]) -> float:
    """Shoelace signed area.

    Positive for clockwise outlines in screen (y-down) coordinates.
    """
    n = len(poly)
    if n < 3:
        return 0.0
    total = 0.0
    for a, b in _edges(poly):
        total += a.x * b.y - b.x * a.y
    return total / 2.0


def polygon_area(poly: Sequence[Point]) -> float:
    return abs(signed_area(poly))


def bounding_box(poly: Sequence[Point]) -> BoundingBox:
    return BoundingBox.of_points(poly)


def normalize_winding(poly: Sequence[Point]) -> tuple[list[Point], bool]:
    """Return the outline in clockwise (y-down) order.

    Reversal keeps the first vertex in place, so edge ``j`` of the result
    is edge ``n - 1 - j`` of the input traversed backwards.

    Returns:
        Tuple of (points, reversed).
    """
    points = list(poly)
    if signed_area(points) >= 0:
        return points, False
    return [points[0]] + points[:0:-1], True


def has_self_intersections(poly: Sequence[Point]) -> bool:
    """True if any two non-adjacent edges intersect."""
    n = len(poly)
    if n < 4:
        return False
    edges = list(_edges(poly))
    for i in range(n):
        for j in range(i + 1, n):
            # Adjacent edges share a vertex
            if j == i + 1 or (i == 0 and j == n - 1):
                continue
            a1, a2 = edges[i]
            b1, b2 = edges[j]
            if segments_intersect(a1, a2, b1, b2):
                return True
    return False


# =============================================================================
# Clipping and simplification
# =============================================================================


def _cross(o: Point, a: Point, b: Point) -> float:
    return (a.x - o.x) * (b.y - o.y) - (a.y - o.y) * (b.x - o.x)


def _line_intersection(s: Point, e: Point, a: Point, b: Point) -> Point:
    """Intersection of segment se with the infinite line ab."""
    den = (s.x - e.x) * (a.y - b.y) - (s.y - e.y) * (a.x - b.x)
    if abs(den) < 1e-12:
        den = 1e-12
    t = ((s.x - a.x) * (a.y - b.y) - (s.y - a.y) * (a.x - b.x)) / den
    return Point(s.x + t * (e.x - s.x), s.y + t * (e.y - s.y))


def _same_point(a: Point, b: Point, eps: float) -> bool:
    return abs(a.x - b.x) <= eps and abs(a.y - b.y) <= eps


def _dedupe(points: list[Point], eps: float = DEDUP_EPSILON) -> list[Point]:
    result: list[Point] = []
    for p in points:
        if not result or not _same_point(result[-1], p, eps):
            result.append(p)
    if len(result) > 1 and _same_point(result[0], result[-1], eps):
        result.pop()
    return result


def clip_polygon(subject: Sequence[Point], clip: Sequence[Point]) -> list[Point]:
    """Clip ``subject`` by the convex polygon ``clip`` (Sutherland-Hodgman).

    The clip orientation is detected from its signed area. When either
    polygon has fewer than 3 points the subject is returned unclipped.
    """
    if len(clip) < 3 or len(subject) < 3:
        return list(subject)

    positive = signed_area(clip) > 0

    def inside(p: Point, a: Point, b: Point) -> bool:
        c = _cross(a, b, p)
        return c >= 0 if positive else c <= 0

    output = list(subject)
    for a, b in _edges(clip):
        if not output:
            break
        candidates = output
        output = []
        prev = candidates[-1]
        for curr in candidates:
            if inside(curr, a, b):
                if not inside(prev, a, b):
                    output.append(_line_intersection(prev, curr, a, b))
                output.append(curr)
            elif inside(prev, a, b):
                output.append(_line_intersection(prev, curr, a, b))
            prev = curr

    return _dedupe(output)


def simplify_polygon(poly: Sequence[Point], eps: float = 1e-6) -> list[Point]:
    """Drop duplicate and collinear points.

    Collinearity uses a scale-invariant test, ``|cross| <= eps * (|ab| + |bc|)``.
    The result is idempotent. If every point collapses onto a line the
    de-duplicated points are returned unchanged.
    """
    deduped = _dedupe(list(poly), eps)
    if len(deduped) < 3:
        return deduped

    points = deduped
    changed = True
    while changed and len(points) >= 3:
        changed = False
        kept: list[Point] = []
        n = len(points)
        for i in range(n):
            a = kept[-1] if kept else points[i - 1]
            b = points[i]
            c = points[(i + 1) % n]
            cross = _cross(a, b, c)
            if abs(cross) <= eps * (a.distance_to(b) + b.distance_to(c)):
                changed = True
                continue
            kept.append(b)
        points = kept

    if len(points) < 3:
        return deduped
    return points


# =============================================================================
# Triangulation and region areas
# =============================================================================


def _point_in_triangle(p: Point, a: Point, b: Point, c: Point) -> bool:
    """True if ``p`` lies inside or on triangle abc, in either winding."""
    d1 = _cross(a, b, p)
    d2 = _cross(b, c, p)
    d3 = _cross(c, a, p)
    has_neg = d1 < 0 or d2 < 0 or d3 < 0
    has_pos = d1 > 0 or d2 > 0 or d3 > 0
    return not (has_neg and has_pos)


def triangulate_polygon(poly: Sequence[Point]) -> list[list[Point]]:
    """Split a simple polygon into triangles by ear clipping.

    Zero-area triangles are dropped, so the triangle areas sum to the
    polygon's area. A polygon with no ear left (it crosses itself) has its
    remainder fanned from the first remaining vertex.
    """
    points = simplify_polygon(poly)
    if len(points) < 3 or polygon_area(points) <= 0:
        return []

    sign = 1.0 if signed_area(points) > 0 else -1.0
    remaining = list(points)
    triangles: list[list[Point]] = []
    while len(remaining) > 3:
        n = len(remaining)
        for i in range(n):
            a, b, c = remaining[i - 1], remaining[i], remaining[(i + 1) % n]
            cross = _cross(a, b, c)
            if abs(cross) <= COLLINEAR_EPSILON * (a.distance_to(b) + b.distance_to(c)):
                # Collinear vertex left behind by an earlier ear
                del remaining[i]
                break
            if cross * sign < 0:
                continue
            if any(
                _point_in_triangle(p, a, b, c) for p in remaining if p not in (a, b, c)
            ):
                continue
            triangles.append([a, b, c])
            del remaining[i]
            break
        else:
            triangles.extend(
                [remaining[0], remaining[j], remaining[j + 1]]
                for j in range(1, len(remaining) - 1)
            )
            remaining = []
    if len(remaining) == 3:
        triangles.append(remaining)
    return [t for t in triangles if polygon_area(t) > 0]


def intersect_convex_pieces(
    a: Sequence[Sequence[Point]], b: Sequence[Sequence[Point]]
) -> list[list[Point]]:
    """Intersection of two regions, each given as disjoint convex pieces.

    The result is again a list of disjoint convex pieces.
    """
    result: list[list[Point]] = []
    for pa in a:
        for pb in b:
            piece = clip_polygon(pa, pb)
            if len(piece) >= 3 and polygon_area(piece) > 0:
                result.append(piece)
    return result


def pieces_area(pieces: Sequence[Sequence[Point]]) -> float:
    return sum(polygon_area(p) for p in pieces)


# =============================================================================
# Outline transforms and offsets
# =============================================================================


def transform_outline(
    outline: Sequence[Point],
    position: Point = Point(0.0, 0.0),
    rotation_deg: float = 0.0,
    scale: float = 1.0,
) -> list[Point]:
    """Scale, then rotate about the origin, then translate an outline.

    Typical use converts a millimetre template into canvas units with
    ``scale=0.1`` and places it at ``position``.
    """
    rad = math.radians(rotation_deg)
    cos_r, sin_r = math.cos(rad), math.sin(rad)
    result = []
    for p in outline:
        x, y = p.x * scale, p.y * scale
        result.append(
            Point(
                x * cos_r - y * sin_r + position.x,
                x * sin_r + y * cos_r + position.y,
            )
        )
    return result


def offset_polygon(poly: Sequence[Point], distance: float) -> list[Point]:
    """Push every edge outward by ``distance``."""
    return offset_polygon_per_edge(poly, [distance] * len(poly))


def offset_polygon_per_edge(
    poly: Sequence[Point], distances: Sequence[float]
) -> list[Point]:
    """Push edge ``i`` outward along its normal by ``distances[i]``.

    Each new vertex is the intersection of its two neighbouring offset
    lines. Parallel neighbours fall back to the shifted vertex. Negative
    distances move an edge inward.
    """
    points = list(poly)
    n = len(points)
    if n < 3:
        return points

    sign = 1.0 if signed_area(points) >= 0 else -1.0
    lines: list[tuple[Point, Point]] = []
    for i in range(n):
        a = points[i]
        b = points[(i + 1) % n]
        length = a.distance_to(b) or 1.0
        dx, dy = (b.x - a.x) / length, (b.y - a.y) / length
        d = distances[i] if i < len(distances) else 0.0
        # Outward normal: right-hand side for positive signed area
        nx, ny = dy * sign * d, -dx * sign * d
        lines.append((Point(a.x + nx, a.y + ny), Point(dx, dy)))

    result = []
    for i in range(n):
        p, d = lines[i - 1]
        q, e = lines[i]
        denom = d.x * e.y - d.y * e.x
        if abs(denom) < COLLINEAR_EPSILON:
            result.append(q)
            continue
        t = ((q.x - p.x) * e.y - (q.y - p.y) * e.x) / denom
        result.append(Point(p.x + d.x * t, p.y + d.y * t))
    return result
