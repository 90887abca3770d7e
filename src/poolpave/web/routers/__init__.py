"""API routers for the REST API."""

from poolpave.web.routers.coping import router as coping_router
from poolpave.web.routers.extension import router as extension_router
from poolpave.web.routers.paving import router as paving_router
from poolpave.web.routers.validate import router as validate_router

__all__ = [
    "coping_router",
    "extension_router",
    "paving_router",
    "validate_router",
]
