"""API dependencies for FastAPI.

This module provides dependency injection functions for FastAPI endpoints.
The registry, clock, settings and evaluation client are owned by the app
(see ``create_app``) and read from ``app.state`` so each app instance is
isolated.
"""

from fastapi import Depends, Request

from shorturls.clients.evaluation import EvaluationServiceClient
from shorturls.core.config import Settings
from shorturls.repositories.url_repository import URLRepository
from shorturls.services.shortener import ShortenedURLService
from shorturls.services.stats import StatsService


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_url_repository(request: Request) -> URLRepository:
    """Get the app's URL registry."""
    return request.app.state.url_repository


def get_shortener_service(
    request: Request,
    url_repo: URLRepository = Depends(get_url_repository),
    settings: Settings = Depends(get_settings),
) -> ShortenedURLService:
    """Get an instance of the URL shortening service."""
    return ShortenedURLService(
        url_repository=url_repo,
        settings=settings,
        clock=request.app.state.clock,
    )


def get_stats_service(
    request: Request,
    url_repo: URLRepository = Depends(get_url_repository),
) -> StatsService:
    """Get an instance of the statistics service."""
    return StatsService(url_repository=url_repo, clock=request.app.state.clock)


def get_evaluation_client(request: Request) -> EvaluationServiceClient:
    return request.app.state.evaluation_client
