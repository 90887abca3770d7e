"""Base enums and shared models for layout configuration schemas.

Enums are imported from the domain layer; they are ``(str, Enum)`` so
JSON values validate against them directly.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

from poolpave.domain.value_objects import (
    CutStrategy,
    GridAnchor,
    PoolShapeKind,
)

# Supported schema versions for configuration files
# Version 1.0: Coping, paving and auto-extension sections
SUPPORTED_VERSIONS: frozenset[str] = frozenset({"1.0"})

__all__ = [
    "CutStrategy",
    "GridAnchor",
    "OutlineTransformConfig",
    "PointConfig",
    "PoolShapeKind",
    "SUPPORTED_VERSIONS",
]


class PointConfig(BaseModel):
    """A point in millimetres.

    Accepts either an ``[x, y]`` pair or an ``{"x": ..., "y": ...}`` object.
    """

    model_config = ConfigDict(extra="forbid")

    x: float
    y: float

    @model_validator(mode="before")
    @classmethod
    def coerce_pair(cls, data: Any) -> Any:
        """Turn a two-element list into x/y fields."""
        if isinstance(data, (list, tuple)):
            if len(data) != 2:
                raise ValueError("Point must have exactly 2 coordinates")
            return {"x": data[0], "y": data[1]}
        return data


class OutlineTransformConfig(BaseModel):
    """Placement of a template outline: scale, then rotate, then translate."""

    model_config = ConfigDict(extra="forbid")

    position: PointConfig = Field(
        default_factory=lambda: PointConfig(x=0.0, y=0.0),
        description="Translation applied last",
    )
    rotation: float = Field(
        default=0.0, ge=-360.0, le=360.0, description="Rotation in degrees"
    )
    scale: float = Field(default=1.0, gt=0.0, le=100.0, description="Uniform scale")
