"""Domain services for tile layout.

This package provides the layout kernel:
- Geometry primitives (containment, intersection, clipping)
- Coping layout around pool outlines
- Paving fill with exclude zones and boundary validation
- Boundary auto-extension of an existing tiling
- Snapping, statistics and preview state
"""

from .coping import (
    CopingLayoutService,
    EdgeSpan,
    T_SHAPED_STRATEGIES,
    calculate_pool_coping,
    classify_corner,
    coping_exclude_zone,
    coping_outer_boundary,
    default_strategies,
    rows_from_drag_distance,
)
from .extension import (
    AutoExtensionService,
    TileReservation,
    boundary_key,
    extend_tiles,
    is_default_boundary,
)
from .geometry import (
    bounding_box,
    clamp_point_to_polygon,
    clip_polygon,
    closest_point_on_segment,
    distance_to_segment,
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
from .paving import (
    PavingFillService,
    fill_area,
    grid_origin,
    laid_area,
    validate_boundary,
)
from .preview import LayoutSession
from .snap import (
    canvas_to_mm,
    mm_to_canvas,
    round_half,
    snap_point,
    snap_rect_px,
    snap_to_grid,
)
from .statistics import calculate_statistics, order_quantity

__all__ = [
    # Coping
    "CopingLayoutService",
    "EdgeSpan",
    "T_SHAPED_STRATEGIES",
    "calculate_pool_coping",
    "classify_corner",
    "coping_exclude_zone",
    "coping_outer_boundary",
    "default_strategies",
    "rows_from_drag_distance",
    # Extension
    "AutoExtensionService",
    "TileReservation",
    "boundary_key",
    "extend_tiles",
    "is_default_boundary",
    # Geometry
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
    # Paving
    "PavingFillService",
    "fill_area",
    "grid_origin",
    "laid_area",
    "validate_boundary",
    # Preview
    "LayoutSession",
    # Snap
    "canvas_to_mm",
    "mm_to_canvas",
    "round_half",
    "snap_point",
    "snap_rect_px",
    "snap_to_grid",
    # Statistics
    "calculate_statistics",
    "order_quantity",
]
