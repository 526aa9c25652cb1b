"""
Exception hierarchy for the diagnostics package.

Two kinds matter to callers:
- `ValidationError`: an argument was missing or invalid (also a `ValueError`).
- `LoggingError`: writing to a sink failed. The fan-out logger raises a single
  `LoggingError` whose `causes` holds every per-sink failure of one dispatch.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, Optional

LOGGING_FAILURE_MESSAGE = "Failed to log the message."


class DiagnosticsError(Exception):
    """Root of all diagnostics exceptions."""

    def __init__(
        self,
        message: str,
        *,
        code: str,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.details = details or {}


class ValidationError(DiagnosticsError, ValueError):
    """Raised when a required argument is absent or carries an invalid value."""

    def __init__(self, message: str, *, argument: str) -> None:
        super().__init__(message, code="INVALID_ARGUMENT", details={"argument": argument})
        self.argument = argument


class LoggingError(DiagnosticsError):
    """Raised when a log message could not be written.

    A sink raises it for its own failure (optionally chained from the
    underlying error). An aggregating logger raises one instance wrapping
    all collected failures, in the order they occurred.
    """

    def __init__(
        self,
        message: str = LOGGING_FAILURE_MESSAGE,
        causes: Iterable[BaseException] = (),
    ) -> None:
        self.causes: tuple[BaseException, ...] = tuple(causes)
        super().__init__(
            message,
            code="LOGGING_FAILURE",
            details={"cause_count": len(self.causes)},
        )

    def __str__(self) -> str:
        base = super().__str__()
        if not self.causes:
            return base
        inner = "; ".join(f"{type(c).__name__}: {c}" for c in self.causes)
        return f"{base} ({inner})"
