"""Exceptions for the URL shortener service layer.

This module contains the exception hierarchy for the service layer,
providing domain-specific exceptions that abstract underlying implementation details.
"""


class ServiceError(Exception):
    """Base exception for all service-level errors."""
    pass


class URLError(ServiceError):
    """Base exception for URL-related errors."""
    pass


class URLValidationError(URLError):
    """Create request failed validation checks."""
    pass


class InvalidURLError(URLValidationError):
    """The URL is missing or not a string."""
    pass


class CustomCodeValidationError(URLValidationError):
    """The requested custom code doesn't meet requirements."""
    pass


class InvalidValidityError(URLValidationError):
    """The validity window is not a positive number of minutes."""
    pass


class URLCreationError(URLError):
    """Error occurred during URL creation."""
    pass


class CustomCodeAlreadyExistsError(URLCreationError):
    """The requested custom code is already in use."""
    pass


class ShortCodeGenerationError(URLCreationError):
    """Failed to generate a unique short code."""
    pass


class URLNotFoundError(URLError):
    """URL with the specified short code was not found."""
    pass


class URLExpiredError(URLError):
    """URL has expired and is no longer valid."""
    pass


class ExternalServiceError(ServiceError):
    """Base exception for calls to the external evaluation service."""
    pass


class AccessTokenError(ExternalServiceError):
    """Credentials could not be exchanged for an access token."""
    pass


class LogSubmissionError(ExternalServiceError):
    """A log entry could not be forwarded."""
    pass
