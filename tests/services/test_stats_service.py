"""Tests for the stats service."""

import pytest

from shorturls.models.url import ClickEvent
from shorturls.services.exceptions import URLExpiredError, URLNotFoundError
from tests.utils import create_test_url


@pytest.mark.service
class TestStatsService:

    def test_empty_overview(self, stats_service):
        overview = stats_service.get_urls_overview()

        assert overview.urls == []
        assert overview.total_urls == 0
        assert overview.active_urls == 0
        assert overview.expired_urls == 0

    def test_overview_newest_first(self, stats_service, url_repository, clock):
        create_test_url(url_repository, short_code="first", created_at=clock.now - 30)
        create_test_url(url_repository, short_code="third", created_at=clock.now - 10)
        create_test_url(url_repository, short_code="second", created_at=clock.now - 20)

        overview = stats_service.get_urls_overview()

        assert [summary.short_code for summary in overview.urls] == ["third", "second", "first"]

    def test_overview_counts_and_expiry(self, stats_service, url_repository, clock):
        create_test_url(url_repository, short_code="live", created_at=clock.now, expires_at=clock.now + 100)
        create_test_url(url_repository, short_code="dead", created_at=clock.now - 200, expires_at=clock.now - 1)

        overview = stats_service.get_urls_overview()
        by_code = {summary.short_code: summary for summary in overview.urls}

        assert overview.total_urls == 2
        assert overview.active_urls == 1
        assert overview.expired_urls == 1
        assert by_code["live"].is_expired is False
        assert by_code["live"].time_remaining == 100
        assert by_code["dead"].is_expired is True
        assert by_code["dead"].time_remaining == 0

    def test_get_url_stats(self, stats_service, url_repository, clock):
        create_test_url(url_repository, original_url="https://a.test", short_code="abcd", created_at=clock.now)
        url_repository.record_click("abcd", ClickEvent(timestamp=clock.now, source="https://ref.test"))

        summary = stats_service.get_url_stats("abcd")

        assert summary.original_url == "https://a.test"
        assert summary.click_count == 1
        assert len(summary.clicks) == summary.click_count
        assert summary.clicks[0].source == "https://ref.test"
        assert summary.is_expired is False

    def test_get_url_stats_not_found(self, stats_service):
        with pytest.raises(URLNotFoundError):
            stats_service.get_url_stats("missing")

    def test_get_url_stats_expired(self, stats_service, url_repository, clock):
        create_test_url(url_repository, short_code="abcd", created_at=clock.now, expires_at=clock.now + 60)
        clock.advance(61)

        with pytest.raises(URLExpiredError):
            stats_service.get_url_stats("abcd")

        # Still listed even though stats are refused
        assert stats_service.get_urls_overview().expired_urls == 1
