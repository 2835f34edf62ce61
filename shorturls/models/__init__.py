"""
Data models for the URL shortener application.

This module exports the registry record and read-side models.
"""

from shorturls.models.url import (
    ClickEvent,
    ShortURL,
    ShortURLOverview,
    ShortURLSummary,
    current_timestamp,
)

__all__ = [
    "ClickEvent",
    "ShortURL",
    "ShortURLOverview",
    "ShortURLSummary",
    "current_timestamp",
]
