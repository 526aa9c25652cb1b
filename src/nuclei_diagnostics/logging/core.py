"""
Structured logging for the library's own operational events.

Loggers built on the `Logger` abstraction report failures, rotations and
similar events here, never through the sinks they manage.

Library: structlog + orjson for JSON rendering.
"""

from __future__ import annotations

import logging
import sys
from datetime import datetime, timezone
from typing import Any, TextIO

import orjson
import structlog
from structlog.typing import EventDict, Processor, WrappedLogger

from .formatters import ConsoleFormatter
from .levels import LevelToLog


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a structured logger instance."""
    return structlog.get_logger(_name=name or "nuclei_diagnostics")


# =============================================================================
# Structlog Processors
# =============================================================================


def add_timestamp(logger: WrappedLogger, method_name: str, event_dict: EventDict) -> EventDict:
    """Add ISO 8601 timestamp to log event."""
    event_dict["timestamp"] = datetime.now(timezone.utc).isoformat()
    return event_dict


def add_logger_name(logger: WrappedLogger, method_name: str, event_dict: EventDict) -> EventDict:
    """Add logger name to log event."""
    event_dict["logger"] = event_dict.pop("_name", "nuclei_diagnostics")
    return event_dict


def rename_event_key(logger: WrappedLogger, method_name: str, event_dict: EventDict) -> EventDict:
    """Rename 'event' to 'message'."""
    if "event" in event_dict:
        event_dict["message"] = event_dict.pop("event")
    return event_dict


def orjson_dumps(v: Any, *, default: Any = None) -> str:
    """Fast JSON serialization using orjson."""
    return orjson.dumps(v, default=default, option=orjson.OPT_UTC_Z | orjson.OPT_NAIVE_UTC).decode()


def render_json(logger: WrappedLogger, method_name: str, event_dict: EventDict) -> str:
    return orjson_dumps(event_dict, default=str)


_console_formatter = ConsoleFormatter()


def render_console(logger: WrappedLogger, method_name: str, event_dict: EventDict) -> str:
    return _console_formatter.format_event(event_dict)


# =============================================================================
# Configuration
# =============================================================================


_STDLIB_LEVELS = {
    LevelToLog.TRACE: logging.DEBUG,
    LevelToLog.DEBUG: logging.DEBUG,
    LevelToLog.INFO: logging.INFO,
    LevelToLog.WARN: logging.WARNING,
    LevelToLog.ERROR: logging.ERROR,
    LevelToLog.FATAL: logging.CRITICAL,
}


def drop_event(logger: WrappedLogger, method_name: str, event_dict: EventDict) -> EventDict:
    """Discard every event; installed when the threshold is NONE."""
    raise structlog.DropEvent


def configure_logging(
    *,
    level: str | LevelToLog | None = None,
    fmt: str | None = None,
    stream: TextIO | None = None,
) -> None:
    """
    Configure structlog for the library's internal events.

    Args:
        level: Log level name or `LevelToLog` (default: settings.log_level)
        fmt: Output format, console or json (default: settings.log_format)
        stream: Destination stream (default: stderr)
    """
    from ..config import get_settings

    settings = get_settings()
    threshold = LevelToLog.parse(settings.log_level if level is None else level)
    fmt = settings.log_format.value if fmt is None else fmt
    renderer: Processor = render_json if fmt.lower() == "json" else render_console

    shared_processors: list[Processor] = [
        structlog.stdlib.add_log_level,
        add_timestamp,
        add_logger_name,
        rename_event_key,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]
    if threshold == LevelToLog.NONE:
        shared_processors.insert(0, drop_event)

    structlog.configure(
        processors=shared_processors + [renderer],
        wrapper_class=structlog.make_filtering_bound_logger(_STDLIB_LEVELS.get(threshold, logging.CRITICAL)),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=stream or sys.stderr),
        cache_logger_on_first_use=False,
    )
