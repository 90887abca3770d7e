"""Value objects for the tile-layout domain.

This module provides immutable data types used throughout the layout
kernel. All classes are re-exported from sub-modules for convenience.
"""

from __future__ import annotations

# Planar geometry
from ._geometry import (
    BoundingBox,
    Point,
    Rect,
    as_points,
)

# Tiles and classification enums
from ._tiles import (
    CornerType,
    CutStrategy,
    GridAnchor,
    PoolShapeKind,
    Side,
    Tile,
    TileOrigin,
)

# Solver configuration
from ._config import (
    DEFAULT_GROUT_MM,
    MAX_PAVING_AREA_MM2,
    MIN_PAVING_AREA_MM2,
    CopingConfig,
    ExcludeZone,
    PavingConfig,
)

# Solver results
from ._results import (
    CopingResult,
    ExtensionResult,
    FillOutcome,
    PavingResult,
    Statistics,
    ValidationResult,
)

__all__ = [
    # Geometry
    "BoundingBox",
    "Point",
    "Rect",
    "as_points",
    # Tiles
    "CornerType",
    "CutStrategy",
    "GridAnchor",
    "PoolShapeKind",
    "Side",
    "Tile",
    "TileOrigin",
    # Config
    "DEFAULT_GROUT_MM",
    "MAX_PAVING_AREA_MM2",
    "MIN_PAVING_AREA_MM2",
    "CopingConfig",
    "ExcludeZone",
    "PavingConfig",
    # Results
    "CopingResult",
    "ExtensionResult",
    "FillOutcome",
    "PavingResult",
    "Statistics",
    "ValidationResult",
]
