"""Structured logging for placeholder-tiles.

Modules log through ``logger``. Request handling binds per-request fields onto
a copy of it and stores that copy in a context variable, so code further down
the call chain can pick it up with ``get_context_logger``.
"""

import contextvars
import logging
import sys

import structlog

logger = structlog.get_logger("placeholder-tiles")

_context_logger: contextvars.ContextVar = contextvars.ContextVar(
    "placeholder_tiles_logger", default=logger
)


def get_context_logger():
    return _context_logger.get()


def set_context_logger(bound_logger) -> None:
    _context_logger.set(bound_logger)


def configure_logging(level: str = "INFO") -> None:
    """Configure structlog and the stdlib root logger at ``level``."""
    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        raise ValueError(f"Unknown log level: {level!r}")

    logging.basicConfig(format="%(message)s", stream=sys.stderr, level=numeric_level)
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
    )
