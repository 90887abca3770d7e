"""Conversions between API schemas and application objects."""

from pydantic import BaseModel

from poolpave.application import LayoutOutput
from poolpave.application.config import LayoutConfiguration, load_config_from_dict
from poolpave.infrastructure.exporters import statistics_to_dict, tile_to_dict
from poolpave.web.schemas.responses import (
    LayoutResponseSchema,
    StatisticsSchema,
    TileSchema,
)

API_SCHEMA_VERSION = "1.0"


def request_to_configuration(request: BaseModel) -> LayoutConfiguration:
    """Build a LayoutConfiguration from a request carrying config sections.

    The sections go through the same loader as a configuration file, so
    cross-section rules (such as ``exclude_coping`` needing coping) apply.

    Raises:
        ConfigError: If the combined sections do not validate.
    """
    data = request.model_dump(mode="json", exclude_none=True)
    data["schema_version"] = API_SCHEMA_VERSION
    return load_config_from_dict(data)


def layout_output_to_schema(output: LayoutOutput) -> LayoutResponseSchema:
    """Convert LayoutOutput to response schema."""
    return LayoutResponseSchema(
        kind=output.kind,
        is_valid=output.is_valid,
        errors=list(output.errors),
        warnings=list(output.warnings),
        statistics=StatisticsSchema(**statistics_to_dict(output.statistics)),
        tiles=[TileSchema(**tile_to_dict(tile)) for tile in output.tiles],
    )
