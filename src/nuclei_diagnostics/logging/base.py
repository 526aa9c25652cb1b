"""
Logger abstraction implemented by every sink.

Design Pattern: Strategy Pattern; the fan-out logger composes strategies.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from .levels import LevelToLog
from .message import LogMessage


def is_loggable(message: Optional[LogMessage]) -> bool:
    """A message is loggable when it exists and does not carry `NONE`."""
    if message is None:
        return False
    return message.level != LevelToLog.NONE


class Logger(ABC):
    """Destination for log messages.

    Contract:
    - `should_log(m)` is true iff the threshold is not `NONE` and
      `m.level >= level`.
    - `log(m)` is only meaningful when `should_log(m)` is true and raises
      `LoggingError` when the message could not be written.
    - `close()` may be called any number of times, even if nothing was logged.
    """

    @property
    @abstractmethod
    def level(self) -> LevelToLog: ...

    @level.setter
    @abstractmethod
    def level(self, value: LevelToLog) -> None: ...

    @abstractmethod
    def should_log(self, message: Optional[LogMessage]) -> bool: ...

    @abstractmethod
    def log(self, message: LogMessage) -> None: ...

    @abstractmethod
    def close(self) -> None: ...

    def __enter__(self) -> "Logger":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


class ThresholdLogger(Logger):
    """Base for concrete sinks: stores the threshold and filters on it.

    Subclasses implement `_write`; `log` drops messages the threshold rejects.
    """

    def __init__(self, level: LevelToLog = LevelToLog.INFO) -> None:
        self._level = LevelToLog.parse(level)
        self._closed = False

    @property
    def level(self) -> LevelToLog:
        return self._level

    @level.setter
    def level(self, value: LevelToLog) -> None:
        self._level = LevelToLog.parse(value)

    @property
    def closed(self) -> bool:
        return self._closed

    def should_log(self, message: Optional[LogMessage]) -> bool:
        if not is_loggable(message):
            return False
        if self._level == LevelToLog.NONE:
            return False
        return message.level >= self._level

    def log(self, message: LogMessage) -> None:
        if not self.should_log(message):
            return
        self._write(message)

    @abstractmethod
    def _write(self, message: LogMessage) -> None:
        """Write an accepted message to the destination."""
        ...

    def close(self) -> None:
        self._closed = True
