"""Error handlers for the REST API."""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from poolpave.application.config import ConfigError
from poolpave.web.schemas.responses import ErrorResponseSchema


def register_exception_handlers(app: FastAPI) -> None:
    """Register custom exception handlers with the FastAPI app."""

    @app.exception_handler(ConfigError)
    async def config_error_handler(request: Request, exc: ConfigError) -> JSONResponse:
        details = [
            {"path": d.get("path", ""), "message": d.get("message", "")}
            for d in exc.details
        ]
        body = ErrorResponseSchema(
            error="Invalid layout configuration",
            error_type=exc.error_type,
            details=details or None,
        )
        return JSONResponse(status_code=422, content=body.model_dump())
