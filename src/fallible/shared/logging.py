"""Structured logging for the fallible logger.

Uses structlog on top of the stdlib ``fallible`` logger. Loggers are wrapped
individually instead of through ``structlog.configure``, and handlers are only
ever attached to the ``fallible`` logger, so a host application's structlog
configuration and root logger are left alone.
"""
from __future__ import annotations

import logging
import sys
from typing import Any

import structlog

LIBRARY_LOGGER = "fallible"

_SHARED_PROCESSORS: list[Any] = [
    structlog.contextvars.merge_contextvars,
    structlog.processors.add_log_level,
    structlog.processors.StackInfoRenderer(),
    structlog.dev.set_exc_info,
    structlog.processors.TimeStamper(fmt="iso"),
]

_configured = False


def configure_logging(
    level: str = "WARNING",
    log_format: str = "console",
    log_file: str | None = None,
) -> None:
    """Attach output handlers to the fallible logger.

    Records stop at the fallible logger (no propagation to the root logger),
    so they are not printed twice by the host's handlers. Calling this again
    after a successful call does nothing.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_format: Output format ("json" or "console")
        log_file: Optional log file path

    Raises:
        OSError: If log_file cannot be opened; no handler is attached then
    """
    global _configured
    if _configured:
        return

    if log_format == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=False)

    formatter = structlog.stdlib.ProcessorFormatter(
        processor=renderer,
        foreign_pre_chain=_SHARED_PROCESSORS,
    )

    # Open everything first: a failing FileHandler must not leave a
    # half-configured logger behind.
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file))

    library_logger = logging.getLogger(LIBRARY_LOGGER)
    for handler in handlers:
        handler.setFormatter(formatter)
        library_logger.addHandler(handler)
    library_logger.setLevel(getattr(logging, level.upper()))
    library_logger.propagate = False

    _configured = True


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a structured logger below the fallible logger.

    Configures the fallible logger from settings on first use.

    Args:
        name: Logger name (typically __name__ of a fallible module)

    Returns:
        Bound structured logger
    """
    if not _configured:
        from fallible.shared.config import get_settings

        settings = get_settings()
        configure_logging(
            level=settings.log_level,
            log_format=settings.log_format,
            log_file=settings.log_file,
        )

    return structlog.wrap_logger(
        logging.getLogger(name or LIBRARY_LOGGER),
        processors=[
            *_SHARED_PROCESSORS,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
    )
