"""
Structured logging configuration.

Uses structlog with request-scoped context variables. Output is JSON
lines when ``log_json`` is set, a console renderer otherwise.
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, Any

import structlog

if TYPE_CHECKING:
    from payments_service.config import Settings


def add_app_context(settings: Settings) -> Any:
    """Build a processor that stamps app name and environment on each event."""

    def processor(logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:
        event_dict.setdefault("app_name", settings.app_name)
        event_dict.setdefault("app_env", settings.app_env)
        return event_dict

    return processor


def setup_logging(settings: Settings) -> None:
    """
    Configure structlog and the standard library root logger.

    Sets up:
    - Context variable merging (request ids bound by the API middleware)
    - Level filtering from settings.log_level
    - ISO timestamps and exception formatting
    - JSON or console rendering
    """
    level = getattr(logging, settings.log_level)

    renderer: Any
    if settings.log_json:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=False)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            add_app_context(settings),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(sys.stderr),
        cache_logger_on_first_use=True,
    )

    # Route stdlib loggers (uvicorn, asyncio) to the same stream and level
    logging.basicConfig(level=level, stream=sys.stderr, format="%(message)s", force=True)

    structlog.get_logger(__name__).info(
        "logging_configured",
        log_level=settings.log_level,
        log_json=settings.log_json,
    )
