"""
Centralized logging configuration using structlog
"""

import logging
import sys
from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Any

import structlog

# Context variables for resolution tracking
field_ctx: ContextVar[str | None] = ContextVar("field", default=None)
type_name_ctx: ContextVar[str | None] = ContextVar("type_name", default=None)


class ResolutionContextFilter:
    """Add the field and type being resolved to log records."""

    def __call__(self, logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:
        """Add resolution context to the event dict."""
        # Suppress unused parameter warnings - these are required by structlog interface
        _ = logger, method_name

        field = field_ctx.get()
        type_name = type_name_ctx.get()

        if field:
            event_dict.setdefault("field", field)

        if type_name:
            event_dict.setdefault("type_name", type_name)

        return event_dict


def configure_logging(debug: bool = False, log_level: str = "INFO") -> None:
    """Configure structlog with appropriate processors and formatters.

    Args:
        debug: If True, use human-readable console output. If False, use JSON.
        log_level: Level name used when not in debug mode.
    """

    level = logging.DEBUG if debug else logging.getLevelName(log_level.upper())

    # Configure stdlib logging
    logging.basicConfig(
        level=level,
        stream=sys.stdout,
        format="%(message)s",
        force=True,
    )

    processors = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        ResolutionContextFilter(),
        structlog.processors.TimeStamper(fmt="ISO", utc=True),
        # Perform %-style string formatting
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    if debug:
        # Development: human-readable console output
        processors.append(structlog.dev.ConsoleRenderer(colors=True))
    else:
        # Production: JSON output
        processors.append(structlog.processors.JSONRenderer())

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        context_class=dict,
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structlog logger instance.

    Events always go to the stdlib logger ``name``, so nothing below WARNING
    is emitted until the host application configures logging (for example
    with ``configure_logging``).

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger
    """
    return structlog.wrap_logger(
        logging.getLogger(name), wrapper_class=structlog.stdlib.BoundLogger
    )


@contextmanager
def resolution_context(type_name: str, field: str | None = None) -> Iterator[None]:
    """Bind the type (and field, if any) being resolved for the duration of a block."""
    type_token = type_name_ctx.set(type_name)
    field_token = field_ctx.set(field)
    try:
        yield
    finally:
        field_ctx.reset(field_token)
        type_name_ctx.reset(type_token)


def get_field() -> str | None:
    """Get the field currently being resolved."""
    return field_ctx.get()


def get_type_name() -> str | None:
    """Get the type currently being resolved."""
    return type_name_ctx.get()
