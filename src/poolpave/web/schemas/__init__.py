"""Pydantic schemas for the REST API."""

from poolpave.web.schemas.requests import (
    BoundaryValidateRequest,
    ConfigValidateRequest,
    CopingRequest,
    ExtensionRequest,
    PavingFillRequest,
)
from poolpave.web.schemas.responses import (
    BoundaryValidationSchema,
    ErrorResponseSchema,
    LayoutResponseSchema,
    StatisticsSchema,
    TileSchema,
    ValidationResultSchema,
)

__all__ = [
    # Requests
    "BoundaryValidateRequest",
    "ConfigValidateRequest",
    "CopingRequest",
    "ExtensionRequest",
    "PavingFillRequest",
    # Responses
    "BoundaryValidationSchema",
    "ErrorResponseSchema",
    "LayoutResponseSchema",
    "StatisticsSchema",
    "TileSchema",
    "ValidationResultSchema",
]
