from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Path, status

from shorturls.api import schemas
from shorturls.api.dependencies import get_settings, get_shortener_service, get_stats_service
from shorturls.core.config import Settings
from shorturls.services.exceptions import (
    CustomCodeAlreadyExistsError,
    CustomCodeValidationError,
    InvalidURLError,
    InvalidValidityError,
    ShortCodeGenerationError,
    URLExpiredError,
    URLNotFoundError,
)
from shorturls.services.shortener import ShortenedURLService
from shorturls.services.stats import StatsService

router = APIRouter(tags=["shortener"])


@router.post(
    "",
    response_model=schemas.URLCreateResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {"model": schemas.ErrorResponse, "description": "Invalid URL, shortcode or validity"},
        409: {"model": schemas.ErrorResponse, "description": "Shortcode already exists"},
        500: {"model": schemas.ErrorResponse, "description": "No unique shortcode could be generated"},
    }
)
async def create_short_url(
    url_data: Optional[schemas.URLCreateRequest] = None,
    shortener_service: ShortenedURLService = Depends(get_shortener_service),
    settings: Settings = Depends(get_settings),
):
    # No body or a JSON null is treated like {}, which fails on the missing url
    if url_data is None:
        url_data = schemas.URLCreateRequest()

    try:
        url = shortener_service.create_short_url(
            original_url=url_data.url,
            validity_minutes=url_data.validity,
            custom_code=url_data.shortcode,
        )
    except (InvalidURLError, CustomCodeValidationError, InvalidValidityError) as e:
        raise HTTPException(status_code=400, detail=str(e))
    except CustomCodeAlreadyExistsError as e:
        raise HTTPException(status_code=409, detail=str(e))
    except ShortCodeGenerationError as e:
        raise HTTPException(status_code=500, detail=str(e))

    return schemas.URLCreateResponse(
        short_link=settings.short_link(url.short_code),
        expiry=schemas.to_iso(url.expires_at),
    )


@router.get(
    "/allurls",
    response_model=schemas.URLListResponse
)
async def list_urls(
    stats_service: StatsService = Depends(get_stats_service),
    settings: Settings = Depends(get_settings),
):
    """List every short URL, newest first, with active and expired counts."""
    overview = stats_service.get_urls_overview()
    return schemas.URLListResponse(
        urls=[
            schemas.URLSummaryResponse.from_summary(summary, settings.short_link(summary.short_code))
            for summary in overview.urls
        ],
        total_urls=overview.total_urls,
        active_urls=overview.active_urls,
        expired_urls=overview.expired_urls,
    )


@router.get(
    "/stats/{short_code}",
    response_model=schemas.URLSummaryResponse,
    responses={
        404: {"model": schemas.ErrorResponse, "description": "URL not found"},
        410: {"model": schemas.ErrorResponse, "description": "URL has expired"}
    }
)
async def get_url_stats(
    short_code: str = Path(..., description="The short code of the URL"),
    stats_service: StatsService = Depends(get_stats_service),
    settings: Settings = Depends(get_settings),
):
    try:
        summary = stats_service.get_url_stats(short_code)
    except URLNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except URLExpiredError as e:
        raise HTTPException(status_code=410, detail=str(e))
    return schemas.URLSummaryResponse.from_summary(summary, settings.short_link(short_code))
