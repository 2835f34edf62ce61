"""
Core logging module.

This module configures the application logging with Loguru.
"""

import logging
import os
import sys
from typing import Optional

from loguru import logger

from shorturls.core.config import Settings, settings as default_settings

# Handler ids added by setup_logging, so a second call replaces them
_handler_ids: list = []


class InterceptHandler(logging.Handler):
    """
    Intercept standard logging and redirect to loguru.

    This handler intercepts all standard library logging calls
    and redirects them to loguru's more powerful logging system.
    """

    def emit(self, record: logging.LogRecord) -> None:
        # Try to get corresponding Loguru level or use level number
        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        # Find caller from where the logged message originated
        frame, depth = logging.currentframe(), 2
        while frame and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(
            level, record.getMessage()
        )


def _register_request_level() -> None:
    try:
        logger.level("REQUEST")
    except ValueError:
        logger.level("REQUEST", no=25, color="<green>")


def setup_logging(settings: Optional[Settings] = None):
    """
    Configure application logging using Loguru.

    This sets up Loguru with proper formatting, log levels, and handlers,
    and also intercepts standard library logging. Safe to call more than
    once; earlier handlers are replaced.
    """
    settings = settings or default_settings
    os.makedirs(settings.LOG_DIR, exist_ok=True)

    # Remove default handler and anything a previous call added
    if not _handler_ids:
        logger.remove()
    while _handler_ids:
        try:
            logger.remove(_handler_ids.pop())
        except ValueError:
            pass

    if settings.DEBUG:
        _handler_ids.append(logger.add(
            sys.stderr,
            level=settings.LOG_LEVEL.upper(),
            format=settings.LOG_FORMAT,
            backtrace=True,
            diagnose=True,
        ))

    log_file_path = os.path.join(settings.LOG_DIR, settings.LOG_FILENAME)

    if settings.LOG_JSON:
        _handler_ids.append(logger.add(
            log_file_path,
            level=settings.LOG_LEVEL.upper(),
            serialize=True,
            rotation=settings.LOG_ROTATION,
            retention=settings.LOG_RETENTION,
            compression="gz",
        ))
    else:
        _handler_ids.append(logger.add(
            log_file_path,
            level=settings.LOG_LEVEL.upper(),
            format=settings.LOG_FORMAT,
            rotation=settings.LOG_ROTATION,
            retention=settings.LOG_RETENTION,
            compression="gz",
        ))

    # Custom level for request logs
    _register_request_level()

    # Intercept standard library logging
    logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)

    for name in logging.root.manager.loggerDict.keys():
        logging.getLogger(name).handlers = []
        logging.getLogger(name).propagate = True

    for log_name in ["uvicorn", "uvicorn.access", "uvicorn.error", "fastapi"]:
        logging_logger = logging.getLogger(log_name)
        logging_logger.handlers = [InterceptHandler()]
        logging_logger.propagate = False

    return logger
