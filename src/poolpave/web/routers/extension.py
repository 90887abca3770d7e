"""Coping auto-extension endpoints."""

from fastapi import APIRouter

from poolpave.web.converters import layout_output_to_schema, request_to_configuration
from poolpave.web.dependencies import LayoutCommandDep
from poolpave.web.schemas.requests import ExtensionRequest
from poolpave.web.schemas.responses import LayoutResponseSchema

router = APIRouter(prefix="/extension", tags=["extension"])


@router.post("", response_model=LayoutResponseSchema)
async def extend_coping(
    request: ExtensionRequest,
    command: LayoutCommandDep,
) -> LayoutResponseSchema:
    """Grow the coping toward an edited outer boundary.

    Only the added tiles are returned. An unedited boundary yields no tiles
    and a warning.
    """
    config = request_to_configuration(request)
    return layout_output_to_schema(command.execute_extension(config))
