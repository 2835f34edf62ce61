"""Log relay application.

A small standalone service that accepts structured log lines and forwards
them to the evaluation service using a token fetched from the shortener.

Run with ``uvicorn shorturls.relay:app --port 6000``.
"""

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger

from shorturls.api import relay_router
from shorturls.api.handlers import register_exception_handlers
from shorturls.clients.evaluation import EvaluationServiceClient
from shorturls.core.config import Settings, settings as default_settings
from shorturls.core.logging import setup_logging
from shorturls.middleware.logging import LoggingMiddleware


def create_relay_app(
    settings: Optional[Settings] = None,
    evaluation_client: Optional[EvaluationServiceClient] = None,
) -> FastAPI:
    """Build the log relay application."""
    settings = settings or default_settings
    setup_logging(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info(f"Starting {settings.RELAY_APP_NAME}, token source {settings.RELAY_TOKEN_URL}")
        yield
        logger.info(f"Shutting down {settings.RELAY_APP_NAME}")

    app = FastAPI(
        title=settings.RELAY_APP_NAME,
        version=settings.APP_VERSION,
        docs_url="/docs" if settings.DEBUG else None,
        redoc_url=None,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.evaluation_client = evaluation_client or EvaluationServiceClient(settings=settings)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )
    if settings.REQUEST_LOGGING_ENABLED:
        app.add_middleware(LoggingMiddleware)

    app.include_router(relay_router)
    register_exception_handlers(app, settings)

    return app


app = create_relay_app()
