"""Logging configuration for bloomcodec.

bloomcodec logs through structlog on top of standard library loggers, so an
application embedding the codec keeps control: its own logging levels and
handlers decide where events go. Standalone tools call configure_logging()
once at startup.
"""

from __future__ import annotations

import logging
import sys
from typing import Any, Optional

import structlog


def configure_logging(
    level: str = "WARNING",
    format_json: bool = False,
    include_timestamp: bool = True,
    extra_processors: Optional[list[Any]] = None,
    cache_loggers: bool = True,
) -> None:
    """Configure structlog and the standard library root handler.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_json: If True, render JSON lines; otherwise human-readable
        include_timestamp: Include an ISO timestamp in each event
        extra_processors: Additional structlog processors to run before rendering
        cache_loggers: Freeze each logger's configuration on first use

    Raises:
        ValueError: If level is not a known logging level name
    """
    log_level = logging.getLevelName(level.upper())
    if not isinstance(log_level, int):
        raise ValueError(f"Unknown log level: {level}")

    # Log output goes to stderr so it never mixes with CLI results on stdout
    logging.basicConfig(level=log_level, stream=sys.stderr, format="%(message)s", force=True)

    processors: list[Any] = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    if include_timestamp:
        processors.append(structlog.processors.TimeStamper(fmt="iso"))

    if extra_processors:
        processors.extend(extra_processors)

    if format_json:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=cache_loggers,
    )


def get_logger(name: str) -> Any:
    """Get a structlog logger backed by the stdlib logger ``name`` (typically __name__).

    Without configure_logging(), events are rendered by structlog's default
    processors and handed to the stdlib logger. With no handlers installed,
    Python drops anything below WARNING and writes the rest to stderr.
    """
    return structlog.wrap_logger(logging.getLogger(name))
