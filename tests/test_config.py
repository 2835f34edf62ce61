"""Tests for application settings."""

import pytest
from pydantic import ValidationError

from shorturls.core.config import Settings


def test_defaults():
    settings = Settings()

    assert settings.DEFAULT_VALIDITY_MINUTES == 30
    assert settings.URL_CODE_LENGTH == 6
    assert settings.URL_CODE_MAX_ATTEMPTS == 10
    assert set(settings.URL_CODE_CHARS) == set("abcdefghijklmnopqrstuvwxyz0123456789")


def test_short_link():
    settings = Settings(BASE_URL="https://sho.rt/")
    assert settings.short_link("abcd") == "https://sho.rt/shorturls/abcd"


def test_cors_origins_from_string():
    assert Settings(CORS_ORIGINS="https://a.test, https://b.test").CORS_ORIGINS == ["https://a.test", "https://b.test"]
    assert Settings(CORS_ORIGINS="*").CORS_ORIGINS == ["*"]


def test_custom_code_bounds_must_be_ordered():
    with pytest.raises(ValidationError):
        Settings(URL_CUSTOM_CODE_MIN_LENGTH=8, URL_CUSTOM_CODE_MAX_LENGTH=4)


def test_environment_override(monkeypatch):
    monkeypatch.setenv("DEFAULT_VALIDITY_MINUTES", "45")
    assert Settings().DEFAULT_VALIDITY_MINUTES == 45
