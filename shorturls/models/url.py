"""Short URL data models.

This module defines the ShortURL record kept in the registry, the ClickEvent
appended on every redirect, and the read-side summary shapes.
"""

import math
import time
from datetime import datetime, timezone
from typing import List

from pydantic import BaseModel, Field

DIRECT_SOURCE = "Direct"
WEB_LOCATION = "Web"

# Latest instant a datetime can render (9999-12-31T23:59:59Z)
MAX_TIMESTAMP = int(datetime.max.replace(tzinfo=timezone.utc).timestamp())


def current_timestamp() -> int:
    """Current Unix time in whole seconds."""
    return int(time.time())


class ClickEvent(BaseModel):
    """One resolution of a short code."""

    timestamp: int = Field(description="Unix time (seconds) of the redirect")
    source: str = Field(
        default=DIRECT_SOURCE,
        description="Referring origin, or 'Direct' when none was sent"
    )
    location: str = Field(
        default=WEB_LOCATION,
        description="Coarse location; no geolocation is performed"
    )


class ShortURL(BaseModel):
    """
    Registry record mapping a short code to its target.

    created_at and expires_at never change after creation. click_count and
    clicks are only changed together, by the repository, under its lock.
    """

    short_code: str = Field(description="Unique code for the shortened URL")
    original_url: str = Field(description="The original (long) URL to redirect to")
    created_at: int = Field(description="Unix time (seconds) of creation")
    expires_at: int = Field(description="Unix time (seconds) after which the code is expired")
    click_count: int = Field(default=0, description="Counter for the number of clicks")
    clicks: List[ClickEvent] = Field(default_factory=list)

    def is_expired(self, now: int) -> bool:
        """Check if the short URL has expired at ``now``."""
        return now > self.expires_at

    def time_remaining(self, now: int) -> int:
        return max(0, self.expires_at - now)

    @classmethod
    def generate_expiration(cls, created_at: int, validity_minutes: float) -> int:
        """Compute the expiry timestamp for a validity window in minutes.

        Fractional windows are rounded up to the next whole second so that
        expires_at is always strictly after created_at.

        Raises:
            OverflowError: If the window in seconds is not a finite number
        """
        return created_at + max(1, math.ceil(validity_minutes * 60))


class ShortURLSummary(BaseModel):
    """Read-side view of a record at a given instant."""

    short_code: str
    original_url: str
    created_at: int
    expires_at: int
    click_count: int
    clicks: List[ClickEvent]
    is_expired: bool
    time_remaining: int

    @classmethod
    def from_record(cls, record: ShortURL, now: int) -> "ShortURLSummary":
        return cls(
            short_code=record.short_code,
            original_url=record.original_url,
            created_at=record.created_at,
            expires_at=record.expires_at,
            click_count=record.click_count,
            clicks=[click.model_copy() for click in record.clicks],
            is_expired=record.is_expired(now),
            time_remaining=record.time_remaining(now),
        )


class ShortURLOverview(BaseModel):
    """All records, newest first, with active/expired counts."""

    urls: List[ShortURLSummary]
    total_urls: int
    active_urls: int
    expired_urls: int
