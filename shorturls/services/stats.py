"""Stats service for the URL shortener application.

This module contains the StatsService class which implements the read side of
the registry: the newest-first overview of every short URL and the per-code
statistics view.
"""

import logging
from typing import Callable

from shorturls.models.url import ShortURLOverview, ShortURLSummary, current_timestamp
from shorturls.repositories.url_repository import URLRepository
from shorturls.services.exceptions import URLExpiredError, URLNotFoundError

logger = logging.getLogger(__name__)


class StatsService:
    """
    Service for URL click statistics.

    Expiry is evaluated against the clock on every call; records are never
    removed, so an expired code still appears in the overview.
    """

    def __init__(self, url_repository: URLRepository, clock: Callable[[], int] = current_timestamp):
        """
        Initialize the stats service.

        Args:
            url_repository: Registry of short URL records
            clock: Returns the current Unix time in seconds
        """
        self.url_repository = url_repository
        self.clock = clock

    def get_urls_overview(self) -> ShortURLOverview:
        """
        Summarize every record, newest first.

        Returns:
            ShortURLOverview with the summaries and total/active/expired counts
        """
        now = self.clock()
        summaries = [
            ShortURLSummary.from_record(url, now)
            for url in self.url_repository.get_all_urls()
        ]
        summaries.sort(key=lambda summary: summary.created_at, reverse=True)

        expired = sum(1 for summary in summaries if summary.is_expired)
        return ShortURLOverview(
            urls=summaries,
            total_urls=len(summaries),
            active_urls=len(summaries) - expired,
            expired_urls=expired,
        )

    def get_url_stats(self, short_code: str) -> ShortURLSummary:
        """
        Get click statistics for a single short code.

        Args:
            short_code: The short code to look up

        Returns:
            ShortURLSummary: The record summary with its click events

        Raises:
            URLNotFoundError: If no URL with this code exists
            URLExpiredError: If the URL has expired
        """
        now = self.clock()
        url = self.url_repository.get_by_short_code(short_code)
        if url is None:
            raise URLNotFoundError(f"Short URL '{short_code}' not found")
        if url.is_expired(now):
            raise URLExpiredError(f"Short URL '{short_code}' has expired")

        logger.debug(f"Stats viewed for {short_code}: {url.click_count} clicks")
        return ShortURLSummary.from_record(url, now)
