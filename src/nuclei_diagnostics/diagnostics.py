"""
Convenience entry point for application code.

`SystemDiagnostics` binds a severity, a template and its arguments into a
`LogMessage` and hands it to a `Logger`. Where no logger abstraction is
available it can wrap a plain ``(severity, text)`` callback instead, in which
case it renders the text itself.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Optional, Sequence, Union

from .logging.base import Logger
from .logging.exceptions import ValidationError
from .logging.formatting import INVARIANT_CULTURE, FormatProvider
from .logging.levels import LevelToLog
from .logging.message import LogMessage
from .metrics import MetricsCollector

LogCallback = Callable[[LevelToLog, str], None]

PREFIX_FORMAT = "{0} - {1}"


@dataclass(frozen=True)
class SinkTarget:
    """Delivers through a `Logger` as a `LogMessage`."""

    logger: Logger

    def deliver(
        self,
        severity: LevelToLog,
        text: str,
        args: Sequence[Any],
        provider: Optional[FormatProvider],
    ) -> None:
        self.logger.log(LogMessage(severity, text, args, provider))


@dataclass(frozen=True)
class CallbackTarget:
    """Delivers rendered text to a ``(severity, text)`` callback.

    The call is validated as a `LogMessage` first, exactly as for a logger.
    """

    callback: LogCallback

    def deliver(
        self,
        severity: LevelToLog,
        text: str,
        args: Sequence[Any],
        provider: Optional[FormatProvider],
    ) -> None:
        message = LogMessage(severity, text, args, provider)
        self.callback(message.level, message.render())


LogTarget = Union[SinkTarget, CallbackTarget]


def _to_target(target: Union[Logger, LogCallback, None]) -> LogTarget:
    if target is None:
        raise ValidationError("A logger or logging callback must be provided.", argument="logger")
    if isinstance(target, Logger):
        return SinkTarget(target)
    if callable(target):
        return CallbackTarget(target)
    raise ValidationError(
        f"Expected a Logger or a callable, got {type(target).__name__}.",
        argument="logger",
    )


class SystemDiagnostics:
    """Diagnostics facade over a logger or callback plus an optional metrics handle.

    Args:
        logger: A `Logger`, or a callable taking ``(LevelToLog, str)``.
        metrics: Optional metrics collector, exposed unchanged via `metrics`.

    Raises:
        ValidationError: If `logger` is None or neither a Logger nor callable.
    """

    def __init__(
        self,
        logger: Union[Logger, LogCallback, None],
        metrics: Optional[MetricsCollector] = None,
    ) -> None:
        self._target = _to_target(logger)
        self._metrics = metrics

    @property
    def target(self) -> LogTarget:
        return self._target

    @property
    def metrics(self) -> Optional[MetricsCollector]:
        return self._metrics

    def log(
        self,
        severity: LevelToLog,
        text: str,
        *args: Any,
        provider: Optional[FormatProvider] = None,
    ) -> None:
        """Log `text`, a template when `args` are given, at `severity`.

        Examples:
            diagnostics.log(LevelToLog.INFO, "Started")
            diagnostics.log(LevelToLog.WARN, "Retrying {0} of {1}", attempt, limit)
        """
        self._target.deliver(severity, text, args, provider)

    def log_with_prefix(self, severity: LevelToLog, prefix: str, message: str) -> None:
        """Log ``"{prefix} - {message}"`` using invariant formatting."""
        self._target.deliver(severity, PREFIX_FORMAT, (prefix, message), INVARIANT_CULTURE)
