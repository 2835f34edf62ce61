"""Repository layer for the URL shortener application.

This module provides repository classes that abstract the in-memory store
and implement the Repository pattern for clean separation of concerns.
"""

from shorturls.repositories.base import (
    BaseRepository,
    RepositoryError,
    EntityNotFoundError,
    DuplicateEntityError
)
from shorturls.repositories.url_repository import URLRepository

__all__ = [
    # Base classes and exceptions
    "BaseRepository",
    "RepositoryError",
    "EntityNotFoundError",
    "DuplicateEntityError",

    # Concrete repositories
    "URLRepository",
]
