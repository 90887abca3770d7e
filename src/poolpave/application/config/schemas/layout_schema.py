"""Coping, paving and extension section schemas."""

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    field_validator,
    model_validator,
)

from poolpave.application.config.schemas.base import (
    CutStrategy,
    GridAnchor,
    OutlineTransformConfig,
    PointConfig,
    PoolShapeKind,
)

__all__ = [
    "CopingConfigSchema",
    "ExcludeZoneConfig",
    "ExtensionConfigSchema",
    "PavingConfigSchema",
]


class CopingConfigSchema(BaseModel):
    """Configuration for coping around a pool outline.

    Attributes:
        outline: Pool outline in millimetres, either winding.
        transform: Optional placement applied to the outline first.
        tile_width: Tile length along the pool edge.
        tile_depth: Tile depth away from the pool edge.
        grout_width: Joint between tiles.
        shape: Known pool shape for default cut strategies.
        strategies: Explicit per-edge cut strategies.
        rows: Rows of coping reserved around the pool when paving excludes
            the coping. The extension boundary default is always one row.
    """

    model_config = ConfigDict(extra="forbid")

    outline: list[PointConfig] = Field(..., min_length=3)
    transform: OutlineTransformConfig | None = None
    tile_width: float = Field(default=400.0, gt=0, le=2000)
    tile_depth: float = Field(default=400.0, gt=0, le=2000)
    grout_width: float = Field(default=5.0, ge=0, le=50)
    shape: PoolShapeKind | None = None
    strategies: list[CutStrategy] | None = None
    rows: int = Field(default=1, ge=1, le=10)

    @model_validator(mode="after")
    def validate_custom_strategies(self) -> "CopingConfigSchema":
        """A custom shape must bring its own strategy table."""
        if self.shape is PoolShapeKind.CUSTOM and not self.strategies:
            raise ValueError("strategies are required when shape is 'custom'")
        return self


class ExcludeZoneConfig(BaseModel):
    """A polygon pavers must avoid."""

    model_config = ConfigDict(extra="forbid")

    id: str = Field(default="", max_length=100)
    outline: list[PointConfig] = Field(..., min_length=3)


class PavingConfigSchema(BaseModel):
    """Configuration for a paving fill.

    Attributes:
        boundary: Area to pave, in millimetres.
        paver_width: Paver size along x.
        paver_height: Paver size along y.
        grout_width: Joint between pavers.
        include_edge_pavers: Keep cut pavers along the boundary.
        count_edge_pavers: Count cut pavers in the order subtotal.
        wastage_percent: Extra stock to order.
        anchor: Boundary corner the grid aligns to.
        origin: Explicit grid origin (overrides anchor).
        exclude_zones: Polygons to keep clear.
        exclude_coping: Also keep clear of the coping section's pool and band.
    """

    model_config = ConfigDict(extra="forbid")

    boundary: list[PointConfig]
    paver_width: float = Field(..., gt=0, le=3000)
    paver_height: float = Field(..., gt=0, le=3000)
    grout_width: float = Field(default=0.0, ge=0, le=50)
    include_edge_pavers: bool = True
    count_edge_pavers: bool = True
    wastage_percent: float = Field(default=0.0, ge=0, le=100)
    anchor: GridAnchor = GridAnchor.BOUNDS
    origin: PointConfig | None = None
    exclude_zones: list[ExcludeZoneConfig] = Field(default_factory=list)
    exclude_coping: bool = False


class ExtensionConfigSchema(BaseModel):
    """Configuration for growing the coping toward an edited boundary.

    Attributes:
        boundary: The edited outer boundary.
        global_boundary: Optional containing site boundary.
    """

    model_config = ConfigDict(extra="forbid")

    boundary: list[PointConfig] = Field(..., min_length=3)
    global_boundary: list[PointConfig] | None = None

    @field_validator("global_boundary")
    @classmethod
    def validate_global_boundary(
        cls, v: list[PointConfig] | None
    ) -> list[PointConfig] | None:
        """Validate the global boundary is a polygon when given."""
        if v is not None and len(v) < 3:
            raise ValueError("global_boundary needs at least 3 points")
        return v
