"""Test fixtures for the URL shortener application."""

import os
import tempfile

# Settings are read at import time; point logs somewhere disposable first
os.environ.setdefault("ENVIRONMENT", "testing")
os.environ.setdefault("LOG_DIR", tempfile.mkdtemp(prefix="shorturls-logs-"))

from typing import Generator  # noqa: E402

import pytest  # noqa: E402
from fastapi import FastAPI  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from shorturls.core.config import Settings  # noqa: E402
from shorturls.main import create_app  # noqa: E402
from shorturls.repositories.url_repository import URLRepository  # noqa: E402
from shorturls.services.shortener import ShortenedURLService  # noqa: E402
from shorturls.services.stats import StatsService  # noqa: E402


class FakeClock:
    """Manually advanced clock returning whole Unix seconds."""

    def __init__(self, start: int = 1_700_000_000):
        self.now = start

    def __call__(self) -> int:
        return self.now

    def advance(self, seconds: int) -> None:
        self.now += seconds


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def test_settings() -> Settings:
    """Settings with the URL access log switched off."""
    return Settings(
        BASE_URL="http://localhost:5000",
        URL_ACCESS_LOG_ENABLED=False,
    )


@pytest.fixture
def url_repository() -> URLRepository:
    """Return an empty, isolated registry."""
    return URLRepository()


@pytest.fixture
def shortener_service(url_repository, test_settings, clock) -> ShortenedURLService:
    return ShortenedURLService(url_repository=url_repository, settings=test_settings, clock=clock)


@pytest.fixture
def stats_service(url_repository, clock) -> StatsService:
    return StatsService(url_repository=url_repository, clock=clock)


@pytest.fixture
def test_app(test_settings, url_repository, clock) -> FastAPI:
    """Create a FastAPI app around the test registry and clock."""
    return create_app(settings=test_settings, url_repository=url_repository, clock=clock)


@pytest.fixture
def client(test_app) -> Generator[TestClient, None, None]:
    """Return FastAPI TestClient instance."""
    with TestClient(test_app) as test_client:
        yield test_client
