"""Routes package initialization.

This module assembles the routers for the shortener service and the log relay.
"""

from fastapi import APIRouter

from shorturls.api.routes import auth, health, redirect, relay, shortener
from shorturls.core.config import Settings


def build_api_router(settings: Settings) -> APIRouter:
    """Build the shortener service's root router."""
    api_router = APIRouter()

    # Listing and stats before redirect so /allurls and /stats/... are not taken as codes
    api_router.include_router(
        shortener.router,
        prefix=settings.SHORT_URL_PREFIX
    )
    api_router.include_router(
        redirect.router,
        prefix=settings.SHORT_URL_PREFIX
    )
    api_router.include_router(
        auth.router,
        prefix="/auth"
    )
    api_router.include_router(
        health.router,
        prefix=settings.API_PREFIX
    )
    return api_router


relay_router = APIRouter()
relay_router.include_router(relay.router)

__all__ = ["build_api_router", "relay_router"]
