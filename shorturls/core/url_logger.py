"""URL access logging using Loguru's built-in async features."""

import os
from datetime import datetime, timezone
from typing import Optional

from loguru import logger

from shorturls.core.config import Settings, settings as default_settings

url_access_logger = None
_sink_ids: list = []


def setup_url_logging(settings: Optional[Settings] = None):
    """Configure the URL access logger with queued (non-blocking) sinks."""
    global url_access_logger
    settings = settings or default_settings

    os.makedirs(settings.LOG_DIR, exist_ok=True)

    url_access_logger = logger.bind(event_type="url_access")

    while _sink_ids:
        try:
            logger.remove(_sink_ids.pop())
        except ValueError:
            pass

    _sink_ids.append(logger.add(
        os.path.join(settings.LOG_DIR, "url_access.log"),
        format="{time:YYYY-MM-DD HH:mm:ss.SSS} | {level} | Code:{extra[short_code]} | Source:{extra[source]} | {message}",
        rotation=settings.LOG_ROTATION,
        retention=settings.LOG_RETENTION,
        enqueue=True,
        level="INFO",
        backtrace=False,
        diagnose=False,
        filter=lambda record: record["extra"].get("event_type") == "url_access"
    ))

    return url_access_logger


def log_url_access(short_code: str, source: str):
    """
    Log a redirect through a short code.

    Args:
        short_code: The short code that was resolved
        source: Referring origin, or "Direct"
    """
    if url_access_logger is None:
        setup_url_logging()

    url_access_logger.bind(
        short_code=short_code,
        source=source,
        timestamp=datetime.now(timezone.utc).isoformat()
    ).info(f"URL accessed: {short_code}")
