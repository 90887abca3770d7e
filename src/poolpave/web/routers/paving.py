"""Paving fill and boundary check endpoints."""

from fastapi import APIRouter

from poolpave.application.config import config_to_points
from poolpave.domain.services import validate_boundary
from poolpave.domain.value_objects import PavingConfig
from poolpave.web.converters import layout_output_to_schema, request_to_configuration
from poolpave.web.dependencies import LayoutCommandDep
from poolpave.web.schemas.requests import BoundaryValidateRequest, PavingFillRequest
from poolpave.web.schemas.responses import (
    BoundaryValidationSchema,
    LayoutResponseSchema,
)

router = APIRouter(prefix="/paving", tags=["paving"])


@router.post("/fill", response_model=LayoutResponseSchema)
async def fill_paving(
    request: PavingFillRequest,
    command: LayoutCommandDep,
) -> LayoutResponseSchema:
    """Fill a boundary with pavers.

    An invalid boundary is not an HTTP error: the response carries
    ``is_valid=false`` and the reason in ``errors``.
    """
    config = request_to_configuration(request)
    return layout_output_to_schema(command.execute_paving(config))


@router.post("/validate", response_model=BoundaryValidationSchema)
async def validate_paving_boundary(
    request: BoundaryValidateRequest,
) -> BoundaryValidationSchema:
    """Check a boundary without laying any pavers."""
    config = None
    if request.paver_width is not None and request.paver_height is not None:
        config = PavingConfig(
            paver_width=request.paver_width, paver_height=request.paver_height
        )
    result = validate_boundary(config_to_points(request.boundary), config)
    return BoundaryValidationSchema(valid=result.valid, error=result.error)
