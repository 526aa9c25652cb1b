"""
Concrete `Logger` implementations.

- ConsoleLogger: text lines on a stream (template or aligned console format)
- FileLogger: JSON lines in a local file with size-based rotation
- StructlogLogger: forwards into a structlog logger
- CallbackLogger: forwards rendered text to a ``(level, text)`` callable
"""

from __future__ import annotations

import sys
import threading
from pathlib import Path
from typing import Any, Callable, Optional, TextIO

import structlog

from ..config import get_settings
from .base import ThresholdLogger
from .core import get_logger, orjson_dumps
from .exceptions import LoggingError, ValidationError
from .formatters import ConsoleFormatter
from .levels import LevelToLog
from .message import LogMessage
from .templates import Clock, LogTemplate, utc_now

_logger = get_logger(__name__)


def _initial_level(level: Optional[LevelToLog], template: Optional[LogTemplate]) -> LevelToLog:
    if level is not None:
        return LevelToLog.parse(level)
    if template is not None:
        return template.default_log_level()
    return get_settings().default_log_level


class ConsoleLogger(ThresholdLogger):
    """Writes one line per message to a text stream.

    Args:
        template: Renders each message; without one the aligned console
            format is used.
        stream: Output stream (default: stderr)
        level: Threshold; defaults to the template's default level, else the
            configured `default_log_level`.
    """

    def __init__(
        self,
        template: Optional[LogTemplate] = None,
        stream: Optional[TextIO] = None,
        level: Optional[LevelToLog] = None,
        name: str = "console",
    ) -> None:
        super().__init__(_initial_level(level, template))
        self._template = template
        self._stream = stream or sys.stderr
        self._name = name
        self._formatter = ConsoleFormatter()

    def _format(self, message: LogMessage) -> str:
        if self._template is not None:
            return self._template.translate(message)
        use_color = bool(getattr(self._stream, "isatty", lambda: False)())
        return self._formatter.format_message(message, self._name, use_color=use_color)

    def _write(self, message: LogMessage) -> None:
        try:
            line = self._format(message)
            self._stream.write(line + "\n")
            self._stream.flush()
        except (OSError, ValueError) as exc:
            raise LoggingError(f"Failed to write to the console stream: {exc}") from exc


class FileLogger(ThresholdLogger):
    """Local file sink with rotation (JSON lines).

    `path`, `max_bytes` and `backup_count` default to the `log_file_path`,
    `file_max_bytes` and `file_backup_count` settings.
    """

    def __init__(
        self,
        path: str | Path | None = None,
        template: Optional[LogTemplate] = None,
        level: Optional[LevelToLog] = None,
        max_bytes: Optional[int] = None,
        backup_count: Optional[int] = None,
        clock: Optional[Clock] = None,
    ) -> None:
        super().__init__(_initial_level(level, template))
        settings = get_settings()
        self._path = Path(path if path is not None else settings.log_file_path)
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._template = template
        self._max_bytes = max_bytes if max_bytes is not None else settings.file_max_bytes
        self._backup_count = backup_count if backup_count is not None else settings.file_backup_count
        self._clock = clock or utc_now
        self._lock = threading.Lock()
        self._file: Optional[TextIO] = open(self._path, "a", encoding="utf-8")

    @property
    def path(self) -> Path:
        return self._path

    def _record(self, message: LogMessage) -> dict[str, Any]:
        record: dict[str, Any] = {
            "timestamp": self._clock().isoformat(),
            "level": message.level.name,
            "message": message.render(),
        }
        if message.has_additional_information:
            record["properties"] = dict(message.properties)
        if self._template is not None:
            record["line"] = self._template.translate(message)
        return record

    def _write(self, message: LogMessage) -> None:
        json_str = orjson_dumps(self._record(message), default=str)
        with self._lock:
            if self._file is None:
                raise LoggingError(f"Cannot write to closed log file '{self._path}'.")
            try:
                self._file.write(json_str + "\n")
                self._file.flush()
                self._maybe_rotate()
            except OSError as exc:
                raise LoggingError(f"Failed to write to log file '{self._path}': {exc}") from exc

    def _backup_path(self, index: int) -> Path:
        return self._path.with_name(f"{self._path.stem}.{index}{self._path.suffix}")

    def _maybe_rotate(self) -> None:
        if self._path.stat().st_size <= self._max_bytes:
            return
        handle, self._file = self._file, None
        handle.close()
        # Truncate only when no backups are kept; after a failed shift keep appending.
        mode = "a" if self._backup_count > 0 else "w"
        try:
            for i in range(self._backup_count - 1, 0, -1):
                src = self._backup_path(i)
                if src.exists():
                    src.replace(self._backup_path(i + 1))
            if self._backup_count > 0:
                self._path.replace(self._backup_path(1))
        finally:
            self._file = open(self._path, mode, encoding="utf-8")
        _logger.info("log_file_rotated", path=str(self._path), backups=self._backup_count)

    def close(self) -> None:
        with self._lock:
            if self._file is not None:
                self._file.close()
                self._file = None
        super().close()


_STRUCTLOG_METHODS = {
    LevelToLog.TRACE: "debug",
    LevelToLog.DEBUG: "debug",
    LevelToLog.INFO: "info",
    LevelToLog.WARN: "warning",
    LevelToLog.ERROR: "error",
    LevelToLog.FATAL: "critical",
}


class StructlogLogger(ThresholdLogger):
    """Forwards messages into structlog, properties become bound key/values."""

    def __init__(
        self,
        logger: Optional[structlog.stdlib.BoundLogger] = None,
        level: Optional[LevelToLog] = None,
    ) -> None:
        super().__init__(_initial_level(level, None))
        self._logger = logger if logger is not None else get_logger("application")

    def _write(self, message: LogMessage) -> None:
        bound = self._logger.bind(**message.properties) if message.has_additional_information else self._logger
        method = getattr(bound, _STRUCTLOG_METHODS[message.level])
        try:
            method(message.render(), template=message.text)
        except Exception as exc:
            raise LoggingError(f"structlog rejected the message: {exc}") from exc


class CallbackLogger(ThresholdLogger):
    """Adapts a ``(level, text)`` callable into a `Logger`.

    Exceptions raised by the callback propagate unchanged.
    """

    def __init__(
        self,
        callback: Callable[[LevelToLog, str], None],
        level: Optional[LevelToLog] = None,
    ) -> None:
        if callback is None:
            raise ValidationError("A logging callback must be provided.", argument="callback")
        super().__init__(_initial_level(level, None))
        self._callback = callback

    def _write(self, message: LogMessage) -> None:
        self._callback(message.level, message.render())
