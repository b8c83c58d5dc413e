"""Structured logging configuration using structlog."""

import logging
import sys

import structlog

from credit_ledger.core.config import settings


def setup_logging(level: str | None = None, log_format: str | None = None) -> None:
    """
    Configure structlog and the stdlib root logger.

    Args:
        level: Log level name, defaults to settings.log_level
        log_format: "json" or "console", defaults to settings.log_format
    """
    level_name = (level or settings.log_level).upper()
    log_level = getattr(logging, level_name, logging.INFO)
    fmt = log_format or settings.log_format

    # Route stdlib records (uvicorn, sqlalchemy) to stdout as well
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=log_level,
        force=True,
    )
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)

    if fmt == "json":
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
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )
