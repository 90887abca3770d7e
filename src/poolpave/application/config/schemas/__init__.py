"""Pydantic schemas for layout configuration files."""

from poolpave.application.config.schemas.base import (
    SUPPORTED_VERSIONS,
    OutlineTransformConfig,
    PointConfig,
)
from poolpave.application.config.schemas.layout_schema import (
    CopingConfigSchema,
    ExcludeZoneConfig,
    ExtensionConfigSchema,
    PavingConfigSchema,
)
from poolpave.application.config.schemas.root import LayoutConfiguration

__all__ = [
    "CopingConfigSchema",
    "ExcludeZoneConfig",
    "ExtensionConfigSchema",
    "LayoutConfiguration",
    "OutlineTransformConfig",
    "PavingConfigSchema",
    "PointConfig",
    "SUPPORTED_VERSIONS",
]
