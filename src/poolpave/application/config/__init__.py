"""Configuration schema and loading system for layout files.

This package provides JSON-based configuration loading and validation for
coping, paving and auto-extension runs. It includes Pydantic models for
schema validation, a loader with comprehensive error handling, and
adapters to domain value objects.

Example:
    >>> from pathlib import Path
    >>> from poolpave.application.config import load_config, ConfigError
    >>>
    >>> try:
    ...     config = load_config(Path("my-pool.json"))
    ... except ConfigError as e:
    ...     print(f"Error: {e}")
"""

from poolpave.application.config.adapter import (
    config_to_coping,
    config_to_exclude_zones,
    config_to_extension,
    config_to_outline,
    config_to_paving,
    config_to_points,
)
from poolpave.application.config.loader import (
    ConfigError,
    load_config,
    load_config_from_dict,
)
from poolpave.application.config.schemas import (
    SUPPORTED_VERSIONS,
    CopingConfigSchema,
    ExcludeZoneConfig,
    ExtensionConfigSchema,
    LayoutConfiguration,
    OutlineTransformConfig,
    PavingConfigSchema,
    PointConfig,
)
from poolpave.application.config.validator import (
    ConfigValidationResult,
    ValidationError,
    ValidationWarning,
    validate_config,
)

__all__ = [
    # Loader
    "ConfigError",
    "load_config",
    "load_config_from_dict",
    # Schemas
    "SUPPORTED_VERSIONS",
    "CopingConfigSchema",
    "ExcludeZoneConfig",
    "ExtensionConfigSchema",
    "LayoutConfiguration",
    "OutlineTransformConfig",
    "PavingConfigSchema",
    "PointConfig",
    # Adapters
    "config_to_coping",
    "config_to_exclude_zones",
    "config_to_extension",
    "config_to_outline",
    "config_to_paving",
    "config_to_points",
    # Validator
    "ConfigValidationResult",
    "ValidationError",
    "ValidationWarning",
    "validate_config",
]
