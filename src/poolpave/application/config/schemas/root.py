"""Root configuration schema.

This module contains the root LayoutConfiguration model, the top-level
structure of a layout configuration file.
"""

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    field_validator,
    model_validator,
)

from poolpave.application.config.schemas.base import SUPPORTED_VERSIONS
from poolpave.application.config.schemas.layout_schema import (
    CopingConfigSchema,
    ExtensionConfigSchema,
    PavingConfigSchema,
)

__all__ = ["LayoutConfiguration"]


class LayoutConfiguration(BaseModel):
    """Root configuration model for a layout file.

    Attributes:
        schema_version: Version string in format "major.minor" (e.g., "1.0")
        coping: Optional coping around a pool outline
        paving: Optional paving fill
        extension: Optional auto-extension of the coping (needs coping)

    Example:
        >>> config = LayoutConfiguration(
        ...     schema_version="1.0",
        ...     coping=CopingConfigSchema(outline=[[0, 0], [6000, 0], [6000, 3000], [0, 3000]]),
        ... )
    """

    model_config = ConfigDict(extra="forbid")

    schema_version: str = Field(..., pattern=r"^\d+\.\d+$")
    coping: CopingConfigSchema | None = Field(
        default=None, description="Coping around a pool outline"
    )
    paving: PavingConfigSchema | None = Field(
        default=None, description="Paving fill"
    )
    extension: ExtensionConfigSchema | None = Field(
        default=None, description="Auto-extension of the coping"
    )

    @field_validator("schema_version")
    @classmethod
    def validate_supported_version(cls, v: str) -> str:
        """Validate that schema version is supported.

        Newer minor versions within a supported major version are accepted
        for forward compatibility.
        """
        if v in SUPPORTED_VERSIONS:
            return v

        major_version = int(v.split(".")[0])
        supported_majors = {int(sv.split(".")[0]) for sv in SUPPORTED_VERSIONS}
        if major_version in supported_majors:
            return v

        raise ValueError(
            f"Unsupported schema version '{v}'. "
            f"Supported versions: {sorted(SUPPORTED_VERSIONS)}"
        )

    @model_validator(mode="after")
    def validate_sections(self) -> "LayoutConfiguration":
        """Require at least one section, and coping wherever it is referenced."""
        if self.coping is None and self.paving is None and self.extension is None:
            raise ValueError("Configuration needs a coping, paving or extension section")
        if self.extension is not None and self.coping is None:
            raise ValueError("extension requires a coping section")
        if self.paving is not None and self.paving.exclude_coping and self.coping is None:
            raise ValueError("paving.exclude_coping requires a coping section")
        return self
