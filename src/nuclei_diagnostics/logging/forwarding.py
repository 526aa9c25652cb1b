"""
Pass-through adapter for log calls that arrive from another process.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Optional, Protocol, runtime_checkable

from .exceptions import ValidationError
from .formatting import FormatProvider
from .levels import LevelToLog

if TYPE_CHECKING:
    from ..diagnostics import SystemDiagnostics


@runtime_checkable
class LogMessagesFromRemoteProcesses(Protocol):
    """Receiving end for log calls made on the far side of a process boundary."""

    def log(
        self,
        severity: LevelToLog,
        text: str,
        *args: Any,
        provider: Optional[FormatProvider] = None,
    ) -> None: ...


class LogForwardingPipe:
    """Forwards remote log calls into a local `SystemDiagnostics`.

    Satisfies `LogMessagesFromRemoteProcesses`.
    """

    def __init__(self, diagnostics: Optional["SystemDiagnostics"]) -> None:
        if diagnostics is None:
            raise ValidationError("A diagnostics instance must be provided.", argument="diagnostics")
        self._diagnostics = diagnostics

    def log(
        self,
        severity: LevelToLog,
        text: str,
        *args: Any,
        provider: Optional[FormatProvider] = None,
    ) -> None:
        self._diagnostics.log(severity, text, *args, provider=provider)
