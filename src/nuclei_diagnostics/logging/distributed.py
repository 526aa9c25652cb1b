"""
Fan-out logger presenting several loggers as one.
"""

from __future__ import annotations

from typing import Iterable, Optional

from .base import Logger, is_loggable
from .core import get_logger
from .exceptions import LoggingError, ValidationError
from .levels import LevelToLog, threshold_rank
from .message import LogMessage

_logger = get_logger(__name__)


class DistributedLogger(Logger):
    """Sends each `LogMessage` to every member logger that accepts it.

    The member collection is fixed at construction. Dispatch is sequential
    in collection order. A `LoggingError` from one member does not stop the
    others; all such failures are raised together afterwards as a single
    `LoggingError`. Any other exception propagates immediately.
    """

    def __init__(self, loggers: Optional[Iterable[Logger]]) -> None:
        if loggers is None:
            raise ValidationError("A collection of loggers must be provided.", argument="loggers")
        self._loggers: tuple[Logger, ...] = tuple(loggers)

    @property
    def loggers(self) -> tuple[Logger, ...]:
        return self._loggers

    @property
    def level(self) -> LevelToLog:
        """Least restrictive member threshold; `NONE` when no member logs anything."""
        result = LevelToLog.NONE
        for logger in self._loggers:
            if threshold_rank(logger.level) < threshold_rank(result):
                result = logger.level
        return result

    @level.setter
    def level(self, value: LevelToLog) -> None:
        for logger in self._loggers:
            logger.level = value

    def should_log(self, message: Optional[LogMessage]) -> bool:
        if not is_loggable(message):
            return False

        # Thresholds are compared directly so the message is not re-validated per member.
        for logger in self._loggers:
            if logger.level != LevelToLog.NONE and message.level >= logger.level:
                return True
        return False

    def log(self, message: Optional[LogMessage]) -> None:
        if not is_loggable(message):
            return

        failures: list[LoggingError] = []
        for logger in self._loggers:
            if not logger.should_log(message):
                continue
            try:
                logger.log(message)
            except LoggingError as exc:
                _logger.debug("sink_log_failed", sink=type(logger).__name__, error=str(exc))
                failures.append(exc)

        if failures:
            _logger.warning("distributed_log_failed", failed=len(failures), total=len(self._loggers))
            raise LoggingError(causes=failures)

    def close(self) -> None:
        for logger in self._loggers:
            logger.close()
