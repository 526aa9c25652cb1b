"""
Aligned console lines: ``timestamp | level | logger | text key=value ...``.

Used by `ConsoleLogger` for `LogMessage` output and by the console renderer
for the library's own structlog events, so both read the same on a terminal.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import TYPE_CHECKING, Any, Callable, Mapping, Optional

if TYPE_CHECKING:
    from .message import LogMessage


class ConsoleFormatter:
    """Renders fixed-width columns, optionally with ANSI colors."""

    RESET = "\x1b[0m"
    LEVEL_COLORS = {
        "TRACE": "\x1b[2m",
        "DEBUG": "\x1b[36m",
        "INFO": "\x1b[32m",
        "WARN": "\x1b[33m",
        "WARNING": "\x1b[33m",
        "ERROR": "\x1b[31m",
        "FATAL": "\x1b[1;31m",
        "CRITICAL": "\x1b[1;31m",
    }
    TIMESTAMP_COLOR = "\x1b[90m"
    LOGGER_COLOR = "\x1b[35m"
    KEY_COLOR = "\x1b[34m"
    VALUE_COLOR = "\x1b[2m"

    # Keys structlog adds that already have their own column.
    EVENT_KEYS = frozenset({"level", "message", "event", "logger", "timestamp", "_name"})

    TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"
    LEVEL_WIDTH = 7
    LOGGER_WIDTH = 24
    SEPARATOR = " | "

    def __init__(self, clock: Optional[Callable[[], datetime]] = None) -> None:
        self._clock = clock or (lambda: datetime.now(timezone.utc))

    @staticmethod
    def _fit_right(text: str, width: int) -> str:
        if width <= 0:
            return text
        if len(text) > width:
            text = text[-width:] if width <= 3 else "..." + text[-(width - 3) :]
        return f"{text:>{width}}"

    def _parse_timestamp(self, raw: Any) -> datetime:
        if isinstance(raw, str):
            try:
                parsed = datetime.fromisoformat(raw.replace("Z", "+00:00"))
            except ValueError:
                return self._clock()
            return parsed if parsed.tzinfo else parsed.replace(tzinfo=timezone.utc)
        return self._clock()

    @classmethod
    def _paint(cls, text: str, color: Optional[str], use_color: bool) -> str:
        if not use_color or not color:
            return text
        return f"{color}{text}{cls.RESET}"

    def _line(
        self,
        timestamp: datetime,
        level: str,
        logger_name: str,
        text: str,
        extras: Mapping[str, Any],
        use_color: bool,
    ) -> str:
        pairs = [
            f"{self._paint(str(k), self.KEY_COLOR, use_color)}={self._paint(str(v), self.VALUE_COLOR, use_color)}"
            for k, v in extras.items()
        ]
        if pairs:
            text = " ".join([text, *pairs])

        stamp = timestamp.astimezone().strftime(self.TIMESTAMP_FORMAT)
        return self.SEPARATOR.join(
            [
                self._paint(stamp, self.TIMESTAMP_COLOR, use_color),
                self._paint(self._fit_right(level, self.LEVEL_WIDTH), self.LEVEL_COLORS.get(level), use_color),
                self._paint(self._fit_right(logger_name, self.LOGGER_WIDTH), self.LOGGER_COLOR, use_color),
                text,
            ]
        )

    def format_message(self, message: "LogMessage", logger_name: str, *, use_color: bool = False) -> str:
        """Render a `LogMessage`; its properties follow the text as key=value pairs."""
        return self._line(
            self._clock(),
            message.level.name,
            logger_name,
            message.render(),
            message.properties,
            use_color,
        )

    def format_event(self, event_dict: Mapping[str, Any], *, use_color: bool = False) -> str:
        """Render a structlog event dict."""
        extras = {k: v for k, v in event_dict.items() if k not in self.EVENT_KEYS}
        return self._line(
            self._parse_timestamp(event_dict.get("timestamp")),
            str(event_dict.get("level", "info")).upper(),
            str(event_dict.get("logger", "nuclei_diagnostics")),
            str(event_dict.get("message", event_dict.get("event", ""))),
            extras,
            use_color,
        )
