"""URL redirection endpoint with click tracking."""

from fastapi import APIRouter, Depends, HTTPException, Request, status
from starlette.responses import RedirectResponse

from shorturls.api.dependencies import get_settings, get_shortener_service
from shorturls.core.config import Settings
from shorturls.core.url_logger import log_url_access
from shorturls.models.url import DIRECT_SOURCE
from shorturls.services.exceptions import URLExpiredError, URLNotFoundError
from shorturls.services.shortener import ShortenedURLService

router = APIRouter(tags=["redirect"])


@router.get(
    "/{short_code}",
    response_class=RedirectResponse,
    status_code=status.HTTP_302_FOUND,
    responses={
        404: {"description": "URL not found"},
        410: {"description": "URL has expired"}
    }
)
async def redirect_to_original_url(
    request: Request,
    short_code: str,
    shortener_service: ShortenedURLService = Depends(get_shortener_service),
    settings: Settings = Depends(get_settings),
):
    """Record the click and redirect to the original URL."""
    referer = request.headers.get("referer")
    try:
        url = shortener_service.resolve_short_url(short_code, referer=referer)
    except URLNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except URLExpiredError as e:
        raise HTTPException(status_code=410, detail=str(e))

    if settings.URL_ACCESS_LOG_ENABLED:
        log_url_access(short_code=short_code, source=referer or DIRECT_SOURCE)

    return RedirectResponse(url=url.original_url, status_code=status.HTTP_302_FOUND)
