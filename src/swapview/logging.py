"""Structured logging for swapview.

Modules call ``get_logger(__name__)`` and log key/value events; hosts call
``configure_logging`` once at startup. Output goes straight to stdout, pretty
in development and one JSON object per line otherwise.
"""

import logging
from os import getenv
from typing import Any

import structlog


def _resolve_level(log_level: str | None) -> int:
    name = (log_level or getenv("LOG_LEVEL", "INFO")).upper()
    level = logging.getLevelName(name)
    # getLevelName() hands back a "Level X" string for unknown names
    return level if isinstance(level, int) else logging.INFO


def configure_logging(development: bool | None = None, log_level: str | None = None) -> None:
    """Configure structlog for a swapview host.

    Args:
        development: Pretty console output when True, JSON when False. If None,
            anything but ``ENVIRONMENT=production`` counts as development.
        log_level: Minimum level name. If None, read from ``LOG_LEVEL``
            (default INFO). Unknown names fall back to INFO.
    """
    if development is None:
        development = getenv("ENVIRONMENT", "development").lower() != "production"
    level = _resolve_level(log_level)

    renderer = structlog.dev.ConsoleRenderer() if development else structlog.processors.JSONRenderer()
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=False,
    )

    # arcade and its pyglet backend log through the stdlib and are chatty at INFO
    for name in ("arcade", "pyglet"):
        logging.getLogger(name).setLevel(max(level, logging.WARNING))


def get_logger(name: str | None = None) -> Any:
    return structlog.get_logger(name)
