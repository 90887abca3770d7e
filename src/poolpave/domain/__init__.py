"""Domain layer - tile-layout kernel."""

from .services import (
    calculate_pool_coping,
    extend_tiles,
    fill_area,
    validate_boundary,
)
from .value_objects import (
    CopingConfig,
    ExcludeZone,
    PavingConfig,
    Point,
    Rect,
    Statistics,
    Tile,
)

__all__ = [
    "CopingConfig",
    "ExcludeZone",
    "PavingConfig",
    "Point",
    "Rect",
    "Statistics",
    "Tile",
    "calculate_pool_coping",
    "extend_tiles",
    "fill_area",
    "validate_boundary",
]
