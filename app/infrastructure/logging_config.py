"""Structured logging setup.

Configures structlog once at startup so every module can simply call
``structlog.get_logger()`` and log key-value events.
"""

import logging

import structlog

from app.infrastructure.config import settings


def configure_logging(level: str | None = None, json_output: bool | None = None) -> None:
    """Configure structlog processors and level filtering.

    Args:
        level: Log level name (defaults to ``settings.log_level``).
        json_output: Render JSON lines instead of console output
            (defaults to ``settings.log_json``).
    """
    level_name = (level or settings.log_level).upper()
    min_level = logging.getLevelName(level_name)
    if not isinstance(min_level, int):
        min_level = logging.INFO

    render_json = settings.log_json if json_output is None else json_output
    renderer = (
        structlog.processors.JSONRenderer()
        if render_json
        else structlog.dev.ConsoleRenderer()
    )

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(min_level),
        cache_logger_on_first_use=True,
    )
