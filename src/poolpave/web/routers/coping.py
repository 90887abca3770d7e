"""Coping layout endpoints."""

from fastapi import APIRouter

from poolpave.web.converters import layout_output_to_schema, request_to_configuration
from poolpave.web.dependencies import LayoutCommandDep
from poolpave.web.schemas.requests import CopingRequest
from poolpave.web.schemas.responses import LayoutResponseSchema

router = APIRouter(prefix="/coping", tags=["coping"])


@router.post("", response_model=LayoutResponseSchema)
async def lay_coping(
    request: CopingRequest,
    command: LayoutCommandDep,
) -> LayoutResponseSchema:
    """Lay one row of coping around a pool outline.

    Args:
        request: Coping section with outline, tile size and strategies.
        command: Injected layout command.

    Returns:
        Coping tiles and their statistics.
    """
    config = request_to_configuration(request)
    return layout_output_to_schema(command.execute_coping(config))
