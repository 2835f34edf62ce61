"""Main application module.

This module builds the FastAPI application for the shortener service: it owns
the URL registry, includes routes, and configures middleware and exception
handlers.

Run with ``uvicorn shorturls.main:app --port 5000``.
"""

from contextlib import asynccontextmanager
from typing import Callable, Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from loguru import logger

from shorturls.api import build_api_router
from shorturls.api.handlers import register_exception_handlers
from shorturls.clients.evaluation import EvaluationServiceClient
from shorturls.core.config import Settings, settings as default_settings
from shorturls.core.logging import setup_logging
from shorturls.core.url_logger import setup_url_logging
from shorturls.middleware.logging import LoggingMiddleware
from shorturls.models.url import current_timestamp
from shorturls.repositories.url_repository import URLRepository


def create_app(
    settings: Optional[Settings] = None,
    url_repository: Optional[URLRepository] = None,
    clock: Optional[Callable[[], int]] = None,
    evaluation_client: Optional[EvaluationServiceClient] = None,
) -> FastAPI:
    """
    Build the shortener application.

    Args:
        settings: Application settings; the module singleton by default
        url_repository: The URL registry; a fresh empty one by default
        clock: Returns the current Unix time in seconds
        evaluation_client: Client used by /auth/accessToken

    Returns:
        FastAPI: The configured application
    """
    settings = settings or default_settings
    setup_logging(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info(f"Starting {settings.APP_NAME} v{settings.APP_VERSION}")
        logger.info(f"Environment: {settings.ENVIRONMENT.value}")
        logger.info(f"Debug mode: {settings.DEBUG}")
        if settings.URL_ACCESS_LOG_ENABLED:
            setup_url_logging(settings)
            logger.info("URL access logging initialized")
        yield
        logger.info(f"Shutting down {settings.APP_NAME}")

    app = FastAPI(
        title=settings.APP_NAME,
        description=settings.APP_DESCRIPTION,
        version=settings.APP_VERSION,
        docs_url="/docs" if settings.DEBUG else None,
        redoc_url="/redoc" if settings.DEBUG else None,
        lifespan=lifespan,
    )

    app.state.settings = settings
    app.state.url_repository = url_repository if url_repository is not None else URLRepository()
    app.state.clock = clock or current_timestamp
    app.state.evaluation_client = evaluation_client or EvaluationServiceClient(settings=settings)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    if settings.REQUEST_LOGGING_ENABLED:
        app.add_middleware(LoggingMiddleware)

    @app.get("/", response_class=PlainTextResponse, include_in_schema=False)
    async def index():
        return "Hello"

    app.include_router(build_api_router(settings))
    register_exception_handlers(app, settings)

    return app


app = create_app()
