"""Structured logging configuration."""

import logging
import sys

import structlog

from src.core.config import settings


def setup_logging(level: str | None = None, format_type: str | None = None) -> None:
    """
    Configure structlog and the standard library root logger.

    Args:
        level: Log level name, defaults to settings.log_level
        format_type: "json" or "console", defaults to settings.log_format
    """
    log_level = getattr(logging, (level or settings.log_level).upper(), logging.INFO)
    format_type = format_type or settings.log_format

    if format_type == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer()

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stdout),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=log_level,
        force=True,
    )

    # Reduce noise from external libraries
    logging.getLogger("sqlalchemy.engine").setLevel(
        logging.INFO if settings.debug else logging.WARNING
    )
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
