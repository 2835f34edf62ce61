"""
Request logging middleware for FastAPI using Loguru.

Each request gets an id (echoed in the X-Request-ID response header) and one
REQUEST-level log line with method, path, status and latency.
"""

import time
import uuid
from contextvars import ContextVar

from fastapi import Request, Response
from loguru import logger
from starlette.middleware.base import BaseHTTPMiddleware

# Context variable to store request ID across async context
request_id_var: ContextVar[str] = ContextVar("request_id", default="")


def _client_ip(request: Request) -> str:
    if "X-Forwarded-For" in request.headers:
        forwarded_ips = request.headers["X-Forwarded-For"].split(",")
        if forwarded_ips and forwarded_ips[0].strip():
            return forwarded_ips[0].strip()
    return request.client.host if request.client else "unknown"


class LoggingMiddleware(BaseHTTPMiddleware):
    """Log one line per request and tag the response with its request id."""

    async def dispatch(self, request: Request, call_next) -> Response:
        request_id = str(uuid.uuid4())
        request_id_var.set(request_id)
        start_time = time.perf_counter()

        response = await call_next(request)

        response.headers["X-Request-ID"] = request_id
        process_time_ms = round((time.perf_counter() - start_time) * 1000, 2)

        logger.log(
            "REQUEST",
            "{method} {path} {status_code} {process_time_ms}ms",
            request_id=request_id,
            client_ip=_client_ip(request),
            method=request.method,
            path=request.url.path,
            status_code=response.status_code,
            process_time_ms=process_time_ms,
        )
        return response
