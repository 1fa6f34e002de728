"""Structured logging for Holded Bridge.

Every log line emitted while a Holded call is in flight carries the
``holded_operation`` it belongs to (see ``holded_operation_context``).
Upstream error bodies are shortened and credential-like keys are masked
before rendering.
"""

import logging
import sys
from collections.abc import MutableMapping
from contextlib import AbstractContextManager
from typing import Any, cast

import structlog

from holded_bridge.config import get_settings

LOGGED_BODY_LIMIT = 200
REDACTED = "***"
SENSITIVE_KEYS = frozenset({"api_key", "key", "token", "service_token", "host_service_token"})
QUIET_LOGGERS = ("uvicorn.access", "httpx", "httpcore")


def _scrub(value: Any) -> Any:
    if isinstance(value, dict):
        scrubbed: dict[str, Any] = {}
        for key, item in value.items():
            if key in SENSITIVE_KEYS and item:
                scrubbed[key] = REDACTED
            elif key == "body" and isinstance(item, str) and len(item) > LOGGED_BODY_LIMIT:
                scrubbed[key] = f"{item[:LOGGED_BODY_LIMIT]}... ({len(item)} chars)"
            else:
                scrubbed[key] = _scrub(item)
        return scrubbed
    return value


def scrub_event(
    logger: Any, method_name: str, event_dict: MutableMapping[str, Any]
) -> MutableMapping[str, Any]:
    """Mask credentials and shorten Holded error bodies, at any nesting depth."""
    return _scrub(dict(event_dict))


def holded_operation_context(operation: str) -> AbstractContextManager[Any]:
    """Bind ``holded_operation`` to every log line inside the block."""
    return structlog.contextvars.bound_contextvars(holded_operation=operation)


def setup_logging() -> None:
    """Configure structlog: console output in development, JSON lines elsewhere."""
    settings = get_settings()

    renderers: list[Any]
    if settings.is_development:
        renderers = [structlog.dev.ConsoleRenderer(colors=True)]
    else:
        renderers = [structlog.processors.format_exc_info, structlog.processors.JSONRenderer()]

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.TimeStamper(fmt="iso"),
            scrub_event,
            *renderers,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=logging.DEBUG if settings.app_debug else logging.INFO,
    )

    # httpx logs full request URLs at INFO
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    return cast(structlog.stdlib.BoundLogger, structlog.get_logger(name))
