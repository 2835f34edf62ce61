"""URL Repository for the URL shortener application.

This module provides the URLRepository class, the process-wide registry of
short-code records. Following the Repository pattern, it hides the in-memory
store and its locking from the service layer.
"""

from typing import List, Optional

from shorturls.models.url import ClickEvent, ShortURL
from shorturls.repositories.base import BaseRepository


class URLRepository(BaseRepository[ShortURL]):
    """
    Repository for ShortURL records.

    Records are keyed by short code. Creation never overwrites an existing
    record, and a click is recorded by appending the event and bumping the
    counter in one locked step.
    """

    def __init__(self):
        """Initialize the repository with the ShortURL model type."""
        super().__init__(ShortURL, key_field="short_code")

    def create_short_url(self, url: ShortURL) -> ShortURL:
        """
        Insert a new short URL record.

        Raises:
            DuplicateEntityError: If the short code already exists
        """
        return self.create(url)

    def get_by_short_code(self, short_code: str) -> Optional[ShortURL]:
        """Find a record by its short code."""
        return self.get_by_id(short_code)

    def check_short_code_exists(self, short_code: str) -> bool:
        return self.exists(short_code)

    def get_all_urls(self) -> List[ShortURL]:
        return self.get_all()

    def record_click(self, short_code: str, click: ClickEvent) -> ShortURL:
        """
        Append a click event and increment the click counter atomically.

        Args:
            short_code: Code that was resolved
            click: Event to append

        Returns:
            The updated record

        Raises:
            EntityNotFoundError: If the short code does not exist
        """
        def _apply(url: ShortURL) -> None:
            url.clicks.append(click.model_copy())
            url.click_count += 1

        return self.update(short_code, _apply)
