"""Exception handlers shared by the shortener and the log relay."""

import time

from fastapi import FastAPI, HTTPException, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from loguru import logger

from shorturls.core.config import Settings


def register_exception_handlers(app: FastAPI, settings: Settings) -> None:
    """Attach JSON error handlers to ``app``."""

    @app.exception_handler(HTTPException)
    async def http_exception_handler(request: Request, exc: HTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content={"detail": exc.detail},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        """Handle validation errors with detailed information."""
        logger.error(f"Request validation error on {request.method} {request.url.path}")
        return JSONResponse(
            status_code=422,
            content={"detail": "Validation error", "errors": jsonable_encoder(exc.errors())}
        )

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        """Global exception handler to catch and log all unhandled exceptions."""
        error_id = f"error-{time.time()}"

        logger.opt(exception=exc).error(
            "Unhandled exception in {location}",
            location=f"{request.method} {request.url.path}",
            error_id=error_id,
            url=str(request.url),
            client_host=request.client.host if request.client else None
        )

        return JSONResponse(
            status_code=500,
            content={
                "detail": "Internal server error occurred",
                "error_id": error_id,
                "message": str(exc) if settings.DEBUG else "Internal server error"
            }
        )
