"""URL shortening service for the URL shortener application.

This module contains the ShortenedURLService class which implements business logic
for URL shortening and redirect resolution.
"""

import logging
import math
import random
from typing import Any, Callable, Optional

from shorturls.core.config import Settings, settings as default_settings
from shorturls.models.url import (
    DIRECT_SOURCE,
    MAX_TIMESTAMP,
    ClickEvent,
    ShortURL,
    current_timestamp,
)
from shorturls.repositories.base import DuplicateEntityError, EntityNotFoundError
from shorturls.repositories.url_repository import URLRepository
from shorturls.services.exceptions import (
    CustomCodeAlreadyExistsError,
    CustomCodeValidationError,
    InvalidURLError,
    InvalidValidityError,
    ShortCodeGenerationError,
    URLExpiredError,
    URLNotFoundError,
)

logger = logging.getLogger(__name__)


class ShortenedURLService:
    """
    Service for URL shortening business logic.

    This service handles the two mutating operations on the registry: creating
    a short URL (validation, short code selection, insertion) and resolving a
    short code for a redirect (expiry check, click recording).
    """

    def __init__(
        self,
        url_repository: URLRepository,
        settings: Optional[Settings] = None,
        clock: Callable[[], int] = current_timestamp,
    ):
        """
        Initialize the URL shortening service.

        Args:
            url_repository: Registry of short URL records
            settings: Code length, alphabet and validity defaults
            clock: Returns the current Unix time in seconds
        """
        self.url_repository = url_repository
        self.settings = settings or default_settings
        self.clock = clock

    def create_short_url(
        self,
        original_url: Any,
        validity_minutes: Any = None,
        custom_code: Any = None,
    ) -> ShortURL:
        """
        Create a shortened URL with optional custom code and validity window.

        Inputs are checked in order (URL, custom code, validity) and the first
        failure is raised. Nothing is stored unless every check passes.

        Args:
            original_url: The original URL to shorten
            validity_minutes: Minutes until expiry; the configured default when None
            custom_code: Optional caller-chosen short code

        Returns:
            ShortURL: The created record

        Raises:
            InvalidURLError: If the URL is missing or not a string
            CustomCodeValidationError: If the custom code has the wrong type or length,
                or names a reserved route segment
            CustomCodeAlreadyExistsError: If the custom code is already in use
            InvalidValidityError: If validity is not a positive number, or
                expires past the last representable date
            ShortCodeGenerationError: If a unique short code cannot be generated
        """
        if not isinstance(original_url, str) or not original_url:
            raise InvalidURLError(
                "Invalid URL parameter. URL is required and must be a string."
            )

        if custom_code is not None and custom_code != "":
            if not self._is_valid_custom_code(custom_code):
                raise CustomCodeValidationError(
                    f"Shortcode must be a string between "
                    f"{self.settings.URL_CUSTOM_CODE_MIN_LENGTH}-"
                    f"{self.settings.URL_CUSTOM_CODE_MAX_LENGTH} characters"
                )
            if custom_code in self.settings.URL_RESERVED_CODES:
                raise CustomCodeValidationError(
                    f"Shortcode '{custom_code}' is reserved. Please choose a different one."
                )
            if self.url_repository.check_short_code_exists(custom_code):
                raise CustomCodeAlreadyExistsError(
                    f"Shortcode '{custom_code}' already exists. Please choose a different one."
                )
        else:
            custom_code = None

        if validity_minutes is None:
            validity_minutes = self.settings.DEFAULT_VALIDITY_MINUTES
        elif not self._is_valid_validity(validity_minutes):
            raise InvalidValidityError("Validity must be a positive number")

        created_at = self.clock()
        try:
            expires_at = ShortURL.generate_expiration(created_at, validity_minutes)
        except OverflowError:
            raise InvalidValidityError("Validity is too large")
        if expires_at > MAX_TIMESTAMP:
            raise InvalidValidityError("Validity is too large")

        if custom_code is not None:
            try:
                url = self.url_repository.create_short_url(ShortURL(
                    short_code=custom_code,
                    original_url=original_url,
                    created_at=created_at,
                    expires_at=expires_at,
                ))
            except DuplicateEntityError:
                # Taken between the check above and the insert
                raise CustomCodeAlreadyExistsError(
                    f"Shortcode '{custom_code}' already exists. Please choose a different one."
                )
        else:
            url = self._create_with_generated_code(original_url, created_at, expires_at)

        logger.info(f"Created short URL {url.short_code} -> {url.original_url} (expires {url.expires_at})")
        return url

    def resolve_short_url(self, short_code: str, referer: Optional[str] = None) -> ShortURL:
        """
        Resolve a short code for redirection and record the click.

        Args:
            short_code: The short code being followed
            referer: Referring origin, if the client sent one

        Returns:
            ShortURL: The record after the click was recorded

        Raises:
            URLNotFoundError: If no URL with this code exists
            URLExpiredError: If the URL exists but has expired
        """
        now = self.clock()
        url = self.url_repository.get_by_short_code(short_code)
        if url is None:
            raise URLNotFoundError(f"Short URL '{short_code}' not found")
        if url.is_expired(now):
            raise URLExpiredError(f"Short URL '{short_code}' has expired")

        click = ClickEvent(timestamp=now, source=referer or DIRECT_SOURCE)
        try:
            return self.url_repository.record_click(short_code, click)
        except EntityNotFoundError:
            raise URLNotFoundError(f"Short URL '{short_code}' not found")

    def _create_with_generated_code(self, original_url: str, created_at: int, expires_at: int) -> ShortURL:
        """
        Insert a record under a freshly generated code, retrying on collision.

        Raises:
            ShortCodeGenerationError: If every attempt collided
        """
        max_attempts = self.settings.URL_CODE_MAX_ATTEMPTS
        for attempt in range(1, max_attempts + 1):
            candidate_code = self._generate_short_code(self.settings.URL_CODE_LENGTH)
            if (
                candidate_code in self.settings.URL_RESERVED_CODES
                or self.url_repository.check_short_code_exists(candidate_code)
            ):
                logger.debug(f"Short code collision on attempt {attempt}: {candidate_code}")
                continue
            try:
                return self.url_repository.create_short_url(ShortURL(
                    short_code=candidate_code,
                    original_url=original_url,
                    created_at=created_at,
                    expires_at=expires_at,
                ))
            except DuplicateEntityError:
                logger.debug(f"Short code taken during insert on attempt {attempt}: {candidate_code}")

        logger.error(f"Failed to generate a unique short code after {max_attempts} attempts")
        raise ShortCodeGenerationError(
            "Unable to generate unique short code, please try again"
        )

    def _generate_short_code(self, length: int = 6) -> str:
        """
        Generate a random short code of specified length.

        Args:
            length: Length of the code to generate

        Returns:
            str: A random short code
        """
        chars = self.settings.URL_CODE_CHARS
        return ''.join(random.choice(chars) for _ in range(length))

    def _is_valid_custom_code(self, code: Any) -> bool:
        if not isinstance(code, str):
            return False
        return (
            self.settings.URL_CUSTOM_CODE_MIN_LENGTH
            <= len(code)
            <= self.settings.URL_CUSTOM_CODE_MAX_LENGTH
        )

    def _is_valid_validity(self, validity: Any) -> bool:
        # bool is an int subclass; JSON true/false is not a duration
        if isinstance(validity, bool) or not isinstance(validity, (int, float)):
            return False
        if isinstance(validity, float) and not math.isfinite(validity):
            return False
        return validity > 0
