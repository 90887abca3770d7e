"""Pydantic request schemas for the REST API.

Layout requests carry the same section models as a configuration file, so
a body that works here also works as a section of a JSON config.
"""

from typing import Any

from pydantic import BaseModel, Field

from poolpave.application.config import (
    CopingConfigSchema,
    ExtensionConfigSchema,
    PavingConfigSchema,
    PointConfig,
)


class CopingRequest(BaseModel):
    """Request for laying coping around a pool outline."""

    coping: CopingConfigSchema = Field(..., description="Coping section")


class PavingFillRequest(BaseModel):
    """Request for filling a paving boundary."""

    paving: PavingConfigSchema = Field(..., description="Paving section")
    coping: CopingConfigSchema | None = Field(
        default=None, description="Coping section, needed for exclude_coping"
    )


class BoundaryValidateRequest(BaseModel):
    """Request for checking a paving boundary without filling it."""

    boundary: list[PointConfig] = Field(..., description="Boundary points in mm")
    paver_width: float | None = Field(
        default=None, gt=0, description="Paver width; enables the size check"
    )
    paver_height: float | None = Field(
        default=None, gt=0, description="Paver height; enables the size check"
    )


class ExtensionRequest(BaseModel):
    """Request for growing coping toward an edited boundary."""

    coping: CopingConfigSchema = Field(..., description="Coping section")
    extension: ExtensionConfigSchema = Field(..., description="Extension section")


class ConfigValidateRequest(BaseModel):
    """Request for validating a configuration."""

    config: dict[str, Any] = Field(..., description="Layout configuration JSON")
