"""Pydantic response schemas for the REST API."""

from typing import Any

from pydantic import BaseModel, Field


class TileSchema(BaseModel):
    """A single laid tile."""

    id: str = Field(..., description="Tile identifier")
    x: float = Field(..., description="Anchor x in mm")
    y: float = Field(..., description="Anchor y in mm")
    width: float = Field(..., description="Width in mm")
    height: float = Field(..., description="Height in mm")
    angle: float = Field(default=0.0, description="Rotation in degrees")
    is_partial: bool = Field(..., description="Whether the tile is cut")
    side: int | str | None = Field(default=None, description="Edge index or side")
    origin: str = Field(..., description="base, user_added or auto_extended")
    cut_percentage: float = Field(default=0, description="Share of the tile cut away")
    area_mm2: float = Field(..., description="Laid area in mm²")


class StatisticsSchema(BaseModel):
    """Counts and order quantities for a tile set."""

    full_count: int = Field(..., description="Tiles laid at nominal size")
    partial_count: int = Field(..., description="Cut tiles")
    total_area_m2: float = Field(..., description="Laid area in m²")
    subtotal: int = Field(..., description="Tiles counted towards the order")
    order_quantity: int = Field(..., description="Subtotal plus wastage")
    wastage_percent: float = Field(..., description="Wastage applied")


class LayoutResponseSchema(BaseModel):
    """Response for a coping, paving or extension run."""

    kind: str = Field(..., description="Which solver produced the layout")
    is_valid: bool = Field(..., description="Whether the run succeeded")
    errors: list[str] = Field(default_factory=list, description="Error messages")
    warnings: list[str] = Field(default_factory=list, description="Warnings")
    statistics: StatisticsSchema = Field(..., description="Tile statistics")
    tiles: list[TileSchema] = Field(default_factory=list, description="Laid tiles")


class BoundaryValidationSchema(BaseModel):
    """Response for a paving boundary check."""

    valid: bool = Field(..., description="Whether the boundary can be paved")
    error: str | None = Field(default=None, description="Why it cannot")


class ValidationResultSchema(BaseModel):
    """Response for configuration validation."""

    is_valid: bool = Field(..., description="Whether configuration is valid")
    errors: list[dict[str, Any]] = Field(
        default_factory=list, description="Validation errors"
    )
    warnings: list[dict[str, Any]] = Field(
        default_factory=list, description="Validation warnings"
    )


class ErrorResponseSchema(BaseModel):
    """Standard error response."""

    error: str = Field(..., description="Error message")
    error_type: str = Field(..., description="Error type identifier")
    details: list[dict[str, Any]] | dict[str, Any] | None = Field(
        default=None, description="Additional error details"
    )
