"""
Structured logging for the gateway: one JSON (or console) line per event.

Every line carries event_type, level, ISO timestamp, the module logger name
and, inside a request, the request_id bound by the HTTP middleware.

A default configuration is applied on import from LOG_LEVEL/LOG_FORMAT in the
process env. The app and main() call configure_structlog() again with values
from Settings, which include the project .env. Loggers returned by get_logger()
stay lazy until their first call, so module-level loggers pick up the later
configuration.

Uses only Python stdlib logging and structlog; no solana_gateway imports to avoid circular imports.
"""

from __future__ import annotations

import logging
import os
import sys
from datetime import datetime, timezone
from typing import Any

import structlog

DEFAULT_LEVEL = "INFO"
DEFAULT_FORMAT = "json"


def resolve_level(name: str | None) -> int:
    """Map a level name (INFO, warn, ...) to its logging value; unknown names give INFO."""
    value = getattr(logging, (name or DEFAULT_LEVEL).strip().upper(), None)
    return value if isinstance(value, int) else logging.INFO


def _add_timestamp(
    logger: Any,
    method_name: str,
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    if "timestamp" not in event_dict:
        event_dict["timestamp"] = datetime.now(timezone.utc).isoformat()
    return event_dict


def _normalize_event(
    logger: Any,
    method_name: str,
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    """structlog's 'event' key is emitted as event_type."""
    if "event" in event_dict and "event_type" not in event_dict:
        event_dict["event_type"] = event_dict.pop("event")
    return event_dict


def _renderer(fmt: str) -> Any:
    if fmt == "console":
        return structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())
    return structlog.processors.JSONRenderer()


def configure_structlog(level: str | None = None, fmt: str | None = None) -> None:
    """
    (Re)configure structlog.

    level: logging level name; fmt: "json" (default) or "console".
    Both default to the LOG_LEVEL / LOG_FORMAT env vars.
    """
    level = level or os.getenv("LOG_LEVEL", DEFAULT_LEVEL)
    fmt = (fmt or os.getenv("LOG_FORMAT", DEFAULT_FORMAT)).strip().lower()
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            _add_timestamp,
            _normalize_event,
            _renderer(fmt),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(resolve_level(level)),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stdout),
        cache_logger_on_first_use=True,
    )


if not structlog.is_configured():
    configure_structlog()


def get_logger(name: str) -> Any:
    """
    Return a lazy structured logger for the given module name.

        logger = get_logger(__name__)
        logger.info("keypair_generated", public_key=short_key(pubkey))
    """
    return structlog.get_logger(name, logger=name)


def short_key(value: str, keep: int = 8) -> str:
    """Truncate a base58 key for log fields."""
    value = value or ""
    return value if len(value) <= keep else value[:keep] + "..."
