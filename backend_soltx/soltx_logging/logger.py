"""
Structured JSON logging: timestamp, level, event_type, request_id.

structlog with ISO timestamps and consistent keys for aggregation. Request
context is carried in contextvars so every log line emitted while serving a
request carries its request_id.

Level comes from LOG_LEVEL after the project .env is loaded, so a level set only in
.env applies here as well as to uvicorn. Imports only backend_soltx.config.env,
which has no logging dependency.
"""

from __future__ import annotations

import logging
import sys
from datetime import datetime, timezone
from typing import Any

import structlog

from backend_soltx.config.env import get_env, load_soltx_env


def resolve_log_level() -> int:
    """Return the numeric level for LOG_LEVEL (env or .env), INFO when unset or unknown."""
    load_soltx_env()
    level = getattr(logging, get_env("LOG_LEVEL", "INFO").upper(), None)
    return level if isinstance(level, int) else logging.INFO


def resolve_log_format() -> str:
    """JSON output for production (LOG_FORMAT=json); human-readable otherwise."""
    load_soltx_env()
    return get_env("LOG_FORMAT", "json").lower()


def _add_timestamp(
    logger: Any,
    method_name: str,
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    """Ensure timestamp is always present (ISO 8601, UTC)."""
    if "timestamp" not in event_dict:
        event_dict["timestamp"] = datetime.now(timezone.utc).isoformat()
    return event_dict


def _normalize_event(
    logger: Any,
    method_name: str,
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    """Rename structlog 'event' to event_type; keep message if present."""
    if "event" in event_dict and "event_type" not in event_dict:
        event_dict["event_type"] = event_dict.pop("event")
    if "message" not in event_dict and "event_type" in event_dict:
        event_dict["message"] = str(event_dict["event_type"])
    return event_dict


def configure_structlog() -> None:
    """Configure structlog once at import: contextvars, level, timestamp, renderer."""
    shared_processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        _add_timestamp,
        _normalize_event,
    ]
    if resolve_log_format() == "json":
        shared_processors.append(structlog.processors.JSONRenderer(default=str))
    else:
        shared_processors.append(
            structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())
        )
    structlog.configure(
        processors=shared_processors,
        wrapper_class=structlog.make_filtering_bound_logger(resolve_log_level()),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stdout),
        cache_logger_on_first_use=True,
    )


if not structlog.is_configured():
    configure_structlog()


def get_logger(name: str) -> structlog.BoundLogger:
    """
    Return a structured logger for the given module name.

        logger = get_logger(__name__)
        logger.info("transactions_by_date_found", date="2024-01-02", count=2)

    Output (JSON): {"event_type": "transactions_by_date_found", "date": "2024-01-02",
    "count": 2, "timestamp": "...", "level": "info", "logger": "module.name"}
    """
    return structlog.get_logger(name).bind(logger=name)


def bind_request(request_id: str, **fields: Any) -> None:
    """Bind request_id (and extra fields) to every log line of the current request."""
    structlog.contextvars.clear_contextvars()
    structlog.contextvars.bind_contextvars(request_id=request_id, **fields)


def clear_request() -> None:
    """Drop request context once the response is written."""
    structlog.contextvars.clear_contextvars()
