"""API request and response schemas.

This module contains Pydantic models for API request validation
and response serialization. Field names are snake_case in Python and
camelCase on the wire.
"""

from datetime import datetime, timezone
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from shorturls.models.url import ShortURLSummary


def to_iso(timestamp: int) -> str:
    """Render a Unix timestamp as ISO-8601 UTC with milliseconds and a Z suffix."""
    moment = datetime.fromtimestamp(timestamp, tz=timezone.utc)
    return moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class URLCreateRequest(BaseModel):
    """Request schema for creating a shortened URL.

    Fields are deliberately untyped: type and range checks belong to the
    service so that bad input maps onto its 400/409 errors instead of 422.
    """
    url: Any = None
    validity: Any = Field(None, description="Minutes until expiry (default 30)")
    shortcode: Any = Field(None, description="Custom short code, 4-10 characters")


class URLCreateResponse(CamelModel):
    """Response schema for a created short URL."""
    short_link: str
    expiry: str


class ClickData(BaseModel):
    """Schema for click event data."""
    timestamp: int
    source: str
    location: str


class URLSummaryResponse(CamelModel):
    """Response schema for URL statistics."""
    shortcode: str
    original_url: str
    short_link: str
    created_at: str
    expiry_date: str
    total_clicks: int
    click_data: List[ClickData]
    is_expired: bool
    time_remaining: int

    @classmethod
    def from_summary(cls, summary: ShortURLSummary, short_link: str) -> "URLSummaryResponse":
        return cls(
            shortcode=summary.short_code,
            original_url=summary.original_url,
            short_link=short_link,
            created_at=to_iso(summary.created_at),
            expiry_date=to_iso(summary.expires_at),
            total_clicks=summary.click_count,
            click_data=[ClickData(**click.model_dump()) for click in summary.clicks],
            is_expired=summary.is_expired,
            time_remaining=summary.time_remaining,
        )


class URLListResponse(CamelModel):
    """Response schema for listing every URL."""
    urls: List[URLSummaryResponse]
    total_urls: int
    active_urls: int
    expired_urls: int


class AccessTokenResponse(CamelModel):
    access_token: str


class LogEntryRequest(BaseModel):
    """A log line to forward to the evaluation service."""
    stack: str
    level: str
    package: str
    message: str


class LogRelayResponse(BaseModel):
    success: bool = True
    data: Any = None


class ErrorResponse(BaseModel):
    """Response schema for errors."""
    detail: str
    error_id: Optional[str] = None
