"""HTTP middleware for the URL shortener."""

from shorturls.middleware.logging import LoggingMiddleware, request_id_var

__all__ = ["LoggingMiddleware", "request_id_var"]
