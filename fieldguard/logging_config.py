"""Structured logging setup for applications embedding fieldguard."""

import logging

import structlog

from fieldguard.config import get_settings


def configure_logging() -> None:
    """Configure structlog from settings.

    Console output when DEBUG is on, JSON lines otherwise. Events below
    LOG_LEVEL are filtered out before rendering.
    """
    settings = get_settings()
    level = logging.getLevelName(settings.LOG_LEVEL.upper())
    if not isinstance(level, int):
        level = logging.INFO

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer() if settings.DEBUG else structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
    )


def ensure_logging_configured() -> None:
    """Apply configure_logging() unless the host application already configured structlog."""
    if not structlog.is_configured():
        configure_logging()
