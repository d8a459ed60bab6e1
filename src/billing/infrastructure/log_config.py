"""structlog setup for the CLI process."""

from __future__ import annotations

import logging
import sys

import structlog

from billing.infrastructure.settings import Settings


def configure_logging(settings: Settings) -> None:
    """Route structlog events to stderr at the configured level."""
    level = logging.getLevelName(settings.log_level.value)

    renderer: structlog.types.Processor
    if settings.log_json:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=False)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )
