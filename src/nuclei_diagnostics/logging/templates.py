"""
Log templates turn a `LogMessage` into a line of text and supply the
default threshold for the sinks that use them.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime, timezone
from typing import Callable, Optional

from ..config.keys import Configuration, DiagnosticsConfigurationKeys
from .levels import LevelToLog
from .message import LogMessage

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class LogTemplate(ABC):
    """Renders log messages. Templates are equal when type and name match."""

    @property
    @abstractmethod
    def name(self) -> str: ...

    @abstractmethod
    def default_log_level(self) -> LevelToLog: ...

    @abstractmethod
    def translate(self, message: LogMessage) -> str: ...

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if other is None or type(other) is not type(self):
            return False
        return self.name == other.name

    def __hash__(self) -> int:
        return hash((type(self), self.name))


class DebugLogTemplate(LogTemplate):
    """Verbose template for development: timestamp, level and rendered text.

    The default threshold comes from the `DefaultLogLevel` configuration key,
    falling back to `TRACE` when it is not configured.
    """

    DEBUG_LOG_FORMAT = "{0} {1} - {2}"
    TIMESTAMP_FORMAT = "%Y/%m/%dT%H:%M:%S.%f %z"

    def __init__(self, configuration: Configuration, clock: Optional[Clock] = None) -> None:
        self._configuration = configuration
        self._clock = clock or utc_now

    @property
    def name(self) -> str:
        return "DebugLogTemplate"

    def default_log_level(self) -> LevelToLog:
        key = DiagnosticsConfigurationKeys.DEFAULT_LOG_LEVEL
        if self._configuration.has_value_for(key):
            return LevelToLog.parse(self._configuration.value(key))
        return LevelToLog.TRACE

    def translate(self, message: LogMessage) -> str:
        text = self.DEBUG_LOG_FORMAT.format(
            self._clock().strftime(self.TIMESTAMP_FORMAT),
            message.level.name,
            message.render(),
        )
        if message.has_additional_information:
            pairs = " ".join(f"{k}={v}" for k, v in message.properties.items())
            text = f"{text} {pairs}"
        return text
