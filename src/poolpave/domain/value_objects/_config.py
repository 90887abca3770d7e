"""Solver configuration value objects."""

from __future__ import annotations

from dataclasses import dataclass

from ._geometry import Point
from ._tiles import CutStrategy, GridAnchor, PoolShapeKind

# Default grout joint between coping tiles, in millimetres
DEFAULT_GROUT_MM = 5.0

# Largest paving area accepted (10,000 m2 in mm2)
MAX_PAVING_AREA_MM2 = 1e10

# Smallest paving area accepted (0.01 m2 in mm2)
MIN_PAVING_AREA_MM2 = 10_000.0


@dataclass(frozen=True)
class CopingConfig:
    """Coping tile dimensions and per-edge cut strategies.

    Attributes:
        tile_width: Tile length along the pool edge.
        tile_depth: Tile depth away from the pool edge.
        grout_width: Joint between adjacent tiles.
        strategies: Optional per-edge cut strategies, indexed by edge of the
            simplified outline. Supplying them makes the shape CUSTOM.
        shape_kind: Known outline kind used to pick default strategies. When
            None the kind is inferred from the vertex count.
    """

    tile_width: float = 400.0
    tile_depth: float = 400.0
    grout_width: float = DEFAULT_GROUT_MM
    strategies: tuple[CutStrategy, ...] | None = None
    shape_kind: PoolShapeKind | None = None

    def __post_init__(self) -> None:
        if self.tile_width <= 0 or self.tile_depth <= 0:
            raise ValueError("Coping tile dimensions must be positive")
        if self.grout_width < 0:
            raise ValueError("Grout width must be non-negative")

    @property
    def step(self) -> float:
        """Distance between consecutive tile starts along an edge."""
        return self.tile_width + self.grout_width

    @property
    def row_step(self) -> float:
        """Distance between consecutive rows away from the edge."""
        return self.tile_depth + self.grout_width


@dataclass(frozen=True)
class PavingConfig:
    """Paver size, grid alignment and ordering rules.

    Attributes:
        paver_width: Paver size along x.
        paver_height: Paver size along y.
        include_edge_pavers: Keep cut pavers along the boundary.
        wastage_percent: Extra stock to order, as a percentage.
        grout_width: Joint between pavers.
        origin: Explicit grid origin; overrides ``anchor``.
        anchor: Boundary corner the grid aligns to when no origin is given.
        count_edge_pavers: Include cut pavers in the order subtotal.
        min_area_mm2: Smallest boundary area accepted.
        max_area_mm2: Largest boundary area accepted.
    """

    paver_width: float
    paver_height: float
    include_edge_pavers: bool = True
    wastage_percent: float = 0.0
    grout_width: float = 0.0
    origin: Point | None = None
    anchor: GridAnchor = GridAnchor.BOUNDS
    count_edge_pavers: bool = True
    min_area_mm2: float = MIN_PAVING_AREA_MM2
    max_area_mm2: float = MAX_PAVING_AREA_MM2

    def __post_init__(self) -> None:
        if self.paver_width <= 0 or self.paver_height <= 0:
            raise ValueError("Paver dimensions must be positive")
        if self.wastage_percent < 0:
            raise ValueError("Wastage percent must be non-negative")
        if self.grout_width < 0:
            raise ValueError("Grout width must be non-negative")

    @property
    def size_label(self) -> str:
        """Human-readable paver size, e.g. ``400×400``."""
        return f"{self.paver_width:g}×{self.paver_height:g}"

    @property
    def nominal_area(self) -> float:
        return self.paver_width * self.paver_height


@dataclass(frozen=True)
class ExcludeZone:
    """Read-only polygon that no tile may overlap, such as a pool footprint."""

    outline: tuple[Point, ...]
    zone_id: str = ""

    def __post_init__(self) -> None:
        if len(self.outline) < 3:
            raise ValueError("Exclude zone needs at least 3 points")
