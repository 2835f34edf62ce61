"""Test utilities for URL shortener tests."""

import random
import string
from typing import Optional

from shorturls.models.url import ShortURL
from shorturls.repositories.url_repository import URLRepository


def random_string(length: int = 10) -> str:
    """Generate a random lowercase alphanumeric string."""
    return ''.join(random.choice(string.ascii_lowercase + string.digits) for _ in range(length))


def random_url() -> str:
    """Generate a random URL for testing."""
    domain = f"{random_string(8)}.com"
    path = random_string(12)
    return f"https://{domain}/{path}"


def create_test_url(
    url_repository: URLRepository,
    original_url: Optional[str] = None,
    short_code: Optional[str] = None,
    created_at: int = 1_700_000_000,
    expires_at: Optional[int] = None,
) -> ShortURL:
    """Insert a ShortURL straight into the registry."""
    url = ShortURL(
        original_url=original_url or random_url(),
        short_code=short_code or random_string(6),
        created_at=created_at,
        expires_at=expires_at if expires_at is not None else created_at + 30 * 60,
    )
    return url_repository.create_short_url(url)
