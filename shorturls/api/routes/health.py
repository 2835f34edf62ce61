"""Health check endpoints for monitoring application status."""

import time

from fastapi import APIRouter, Depends, status

from shorturls.api.dependencies import get_settings, get_url_repository
from shorturls.core.config import Settings
from shorturls.repositories.url_repository import URLRepository

router = APIRouter(tags=["health"])


@router.get(
    "/health",
    status_code=status.HTTP_200_OK,
    summary="Get system health status",
    response_description="Health status of all system components"
)
async def health_check(
    url_repo: URLRepository = Depends(get_url_repository),
    settings: Settings = Depends(get_settings),
):
    """Check health of all system components."""
    return {
        "status": "healthy",
        "version": settings.APP_VERSION,
        "environment": settings.ENVIRONMENT,
        "timestamp": time.time(),
        "components": {
            "registry": {
                "status": "healthy",
                "url_count": url_repo.count(),
            }
        }
    }


@router.get(
    "/health/ready",
    status_code=status.HTTP_200_OK,
    summary="Readiness probe",
    response_description="Application readiness status"
)
async def readiness_probe(url_repo: URLRepository = Depends(get_url_repository)):
    """Check if application is ready to handle requests."""
    components_status = {"api": True, "registry": url_repo is not None}
    return {
        "ready": all(components_status.values()),
        "components": components_status
    }


@router.get(
    "/health/live",
    status_code=status.HTTP_200_OK,
    summary="Liveness probe",
    response_description="Application liveness status"
)
async def liveness_probe():
    """Simple check that application is running."""
    return {"alive": True}
