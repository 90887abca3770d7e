"""Validation structures and geometric checks for layout configurations.

Pydantic already enforces the schema. This module adds the checks that need
geometry: crossing boundaries, boundaries too small for a paver, strategy
tables that do not match the outline, and extension boundaries that were
never edited.
"""

from dataclasses import dataclass, field
from typing import Any

from poolpave.application.config.adapter import (
    config_to_coping,
    config_to_extension,
    config_to_paving,
)
from poolpave.application.config.schemas import LayoutConfiguration
from poolpave.domain.services import (
    coping_outer_boundary,
    is_default_boundary,
    polygon_area,
    simplify_polygon,
    validate_boundary,
)


@dataclass
class ValidationError:
    """A blocking validation error.

    Attributes:
        path: JSON path to the invalid field (e.g., "paving.boundary")
        message: Human-readable description of the error
        value: The invalid value that caused the error
    """

    path: str
    message: str
    value: Any = None


@dataclass
class ValidationWarning:
    """A non-blocking validation warning.

    Attributes:
        path: JSON path to the concerning field
        message: Human-readable description of the concern
        suggestion: Optional suggested remediation
    """

    path: str
    message: str
    suggestion: str | None = None


@dataclass
class ConfigValidationResult:
    """Container for configuration errors and warnings."""

    errors: list[ValidationError] = field(default_factory=list)
    warnings: list[ValidationWarning] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        """Check if the configuration has no blocking errors."""
        return len(self.errors) == 0

    @property
    def has_warnings(self) -> bool:
        return len(self.warnings) > 0

    @property
    def exit_code(self) -> int:
        """CLI exit code: 0 valid, 1 errors, 2 valid with warnings."""
        if self.errors:
            return 1
        if self.warnings:
            return 2
        return 0

    def add_error(
        self, path: str, message: str, value: Any = None
    ) -> "ConfigValidationResult":
        self.errors.append(ValidationError(path=path, message=message, value=value))
        return self

    def add_warning(
        self, path: str, message: str, suggestion: str | None = None
    ) -> "ConfigValidationResult":
        self.warnings.append(
            ValidationWarning(path=path, message=message, suggestion=suggestion)
        )
        return self


def _check_coping(config: LayoutConfiguration, result: ConfigValidationResult) -> None:
    outline, coping_config = config_to_coping(config.coping)
    points = simplify_polygon(outline)
    edges = len(points)
    if edges < 3 or polygon_area(points) <= 0:
        result.add_error("coping.outline", "Outline encloses no area")
    elif coping_config.strategies is not None and len(coping_config.strategies) != edges:
        result.add_warning(
            "coping.strategies",
            f"{len(coping_config.strategies)} strategies for {edges} edges",
            suggestion="Missing edges use MIDDLE; extra entries are ignored",
        )


def _check_paving(config: LayoutConfiguration, result: ConfigValidationResult) -> None:
    boundary, paving_config, _ = config_to_paving(config.paving, config.coping)
    check = validate_boundary(boundary, paving_config)
    if not check.valid:
        result.add_error("paving.boundary", check.error or "Invalid boundary")


def _check_extension(config: LayoutConfiguration, result: ConfigValidationResult) -> None:
    boundary, global_boundary = config_to_extension(config.extension)
    check = validate_boundary(boundary)
    if not check.valid:
        result.add_error("extension.boundary", check.error or "Invalid boundary")
    if global_boundary is not None:
        check = validate_boundary(global_boundary)
        if not check.valid:
            result.add_error("extension.global_boundary", check.error or "Invalid boundary")

    outline, coping_config = config_to_coping(config.coping)
    default = coping_outer_boundary(outline, coping_config)
    if is_default_boundary(boundary, default):
        result.add_warning(
            "extension.boundary",
            "Boundary matches the default coping edge; nothing to extend",
            suggestion="Move a boundary vertex outward to grow the coping",
        )


def validate_config(config: LayoutConfiguration) -> ConfigValidationResult:
    """Run geometric checks on a schema-valid configuration.

    Args:
        config: A LayoutConfiguration instance (already validated by Pydantic)

    Returns:
        ConfigValidationResult containing any errors or warnings
    """
    result = ConfigValidationResult()
    if config.coping is not None:
        _check_coping(config, result)
    if config.paving is not None:
        _check_paving(config, result)
    if config.extension is not None and config.coping is not None:
        _check_extension(config, result)
    return result
