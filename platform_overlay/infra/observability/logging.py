"""
Structured Logging with structlog

Provides structured, contextual logging for build pipelines using the overlay.
"""

import logging
import sys
from typing import Any

import structlog
from structlog.contextvars import merge_contextvars


def setup_logging(
    level: str = "INFO",
    format: str = "console",  # "json" or "console"
    include_timestamp: bool = True,
    cache_loggers: bool = True,
) -> None:
    """
    Setup structured logging for the application.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format: Output format ("json" for CI logs, "console" for development)
        include_timestamp: Include timestamp in logs
        cache_loggers: Freeze loggers on first use (disable when reconfiguring, e.g. in tests)
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)

    # Diagnostics go to stderr so `cat` output stays clean
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=numeric_level,
        force=True,
    )

    shared_processors = [
        merge_contextvars,
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
    ]

    if include_timestamp:
        shared_processors.append(structlog.processors.TimeStamper(fmt="iso"))

    shared_processors.extend(
        [
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
        ]
    )

    if format == "json":
        output_processors = [
            structlog.processors.EventRenamer("message"),
            structlog.processors.JSONRenderer(),
        ]
    else:
        output_processors = [structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())]

    structlog.configure(
        processors=shared_processors + output_processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=cache_loggers,
    )


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """
    Get a structured logger instance.

    Args:
        name: Logger name (usually __name__ from calling module)

    Example:
        ```python
        logger = get_logger(__name__)
        logger.debug("platform_override_resolved", path="app.ts", resolved="app.ios.ts")
        ```
    """
    return structlog.get_logger(name)


def add_context(**kwargs: Any) -> None:
    """
    Add contextual data to all subsequent log messages in current context.

    This uses contextvars so it's safe for async and multi-threaded code.

    Example:
        ```python
        add_context(platform="ios")
        logger.info("build_started")  # Will include platform
        ```
    """
    structlog.contextvars.bind_contextvars(**kwargs)


def clear_context(*keys: str) -> None:
    """
    Clear specific keys from logging context.

    If no keys provided, clears all context.
    """
    if not keys:
        structlog.contextvars.clear_contextvars()
    else:
        structlog.contextvars.unbind_contextvars(*keys)
