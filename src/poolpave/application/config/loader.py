"""Configuration file loader with comprehensive error handling.

This module loads and parses JSON layout configuration files. It turns
file system errors, JSON parsing errors and Pydantic validation errors into
a single ConfigError with clear, actionable messages.
"""

import json
from pathlib import Path
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from poolpave.application.config.schemas import LayoutConfiguration


class ConfigError(Exception):
    """Exception raised for configuration-related errors.

    Attributes:
        message: The primary error message
        error_type: Category of error (file_not_found, permission_denied,
            file_read_error, json_parse, validation)
        path: Path to the configuration file (if applicable)
        details: Additional error details (line/column for JSON, validation errors, etc.)
    """

    def __init__(
        self,
        message: str,
        error_type: str = "unknown",
        path: Path | None = None,
        details: list[dict[str, Any]] | None = None,
    ) -> None:
        self.message = message
        self.error_type = error_type
        self.path = path
        self.details = details or []
        super().__init__(message)

    def __str__(self) -> str:
        """Format error message for display."""
        return self.message


def _format_json_path(loc: tuple[str | int, ...]) -> str:
    """Format a Pydantic location tuple as a JSON path string.

    Examples:
        >>> _format_json_path(("paving", "paver_width"))
        'paving.paver_width'
        >>> _format_json_path(("coping", "outline", 0, "x"))
        'coping.outline[0].x'
    """
    parts: list[str] = []
    for segment in loc:
        if isinstance(segment, int):
            if parts:
                parts[-1] = f"{parts[-1]}[{segment}]"
            else:
                parts.append(f"[{segment}]")
        else:
            parts.append(str(segment))
    return ".".join(parts)


def _extract_validation_errors(
    error: PydanticValidationError,
) -> list[dict[str, Any]]:
    """Extract path, message, value and error_type from each validation error."""
    details: list[dict[str, Any]] = []
    for err in error.errors():
        details.append(
            {
                "path": _format_json_path(err["loc"]),
                "message": err["msg"],
                "value": err.get("input"),
                "error_type": err["type"],
            }
        )
    return details


def _format_validation_error_message(details: list[dict[str, Any]]) -> str:
    lines = ["Configuration validation failed:"]
    for detail in details:
        path = detail["path"] or "(root)"
        value = detail.get("value")
        if value is not None and not isinstance(value, (dict, list)):
            lines.append(f"  - {path}: {detail['message']} (got: {value!r})")
        else:
            lines.append(f"  - {path}: {detail['message']}")
    return "\n".join(lines)


def load_config(path: Path) -> LayoutConfiguration:
    """Load and validate a layout configuration from a JSON file.

    Args:
        path: Path to the JSON configuration file

    Returns:
        A validated LayoutConfiguration instance

    Raises:
        ConfigError: If the file cannot be loaded or validated. The
            error_type attribute indicates the specific category.
    """
    if not path.exists():
        raise ConfigError(
            message=f"Config file not found: {path}",
            error_type="file_not_found",
            path=path,
        )

    try:
        content = path.read_text(encoding="utf-8")
    except PermissionError:
        raise ConfigError(
            message=f"Permission denied reading config file: {path}",
            error_type="permission_denied",
            path=path,
        )
    except OSError as e:
        raise ConfigError(
            message=f"Error reading config file: {path}: {e}",
            error_type="file_read_error",
            path=path,
        )

    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        raise ConfigError(
            message=f"Invalid JSON in config file: {path} (line {e.lineno}, column {e.colno}): {e.msg}",
            error_type="json_parse",
            path=path,
            details=[
                {
                    "line": e.lineno,
                    "column": e.colno,
                    "message": e.msg,
                }
            ],
        )

    return _validate(data, path)


def load_config_from_dict(data: dict[str, Any]) -> LayoutConfiguration:
    """Load and validate a layout configuration from a dictionary.

    Useful for API requests or programmatic configuration.

    Raises:
        ConfigError: If validation fails (error_type is "validation").
    """
    return _validate(data, None)


def _validate(data: Any, path: Path | None) -> LayoutConfiguration:
    try:
        return LayoutConfiguration.model_validate(data)
    except PydanticValidationError as e:
        details = _extract_validation_errors(e)
        raise ConfigError(
            message=_format_validation_error_message(details),
            error_type="validation",
            path=path,
            details=details,
        )
