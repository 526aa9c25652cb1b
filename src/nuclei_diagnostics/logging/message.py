"""
The immutable log message passed between the facade, loggers and sinks.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping, Optional, Sequence

from .exceptions import ValidationError
from .formatting import INVARIANT_CULTURE, FormatProvider
from .levels import LevelToLog


@dataclass(frozen=True, eq=False)
class LogMessage:
    """A single message to be logged.

    `text` is a format template rendered with `format_parameters` through
    `format_provider`. `properties` carries structured data that sinks may
    attach to the output; it is copied at construction and exposed read-only.

    Raises:
        ValidationError: If `level` is `LevelToLog.NONE` or `text` is None.
    """

    level: LevelToLog
    text: str
    format_parameters: Sequence[Any] = ()
    format_provider: Optional[FormatProvider] = None
    properties: Optional[Mapping[str, Any]] = field(default=None)

    def __post_init__(self) -> None:
        if self.level is None or LevelToLog.parse(self.level) == LevelToLog.NONE:
            raise ValidationError(
                "Cannot create a log message with the log level set to NONE.",
                argument="level",
            )
        if self.text is None:
            raise ValidationError("The message text must be provided.", argument="text")

        object.__setattr__(self, "level", LevelToLog.parse(self.level))
        params = self.format_parameters
        if isinstance(params, (str, bytes)):
            params = (params,)
        object.__setattr__(self, "format_parameters", tuple(params or ()))
        object.__setattr__(self, "format_provider", self.format_provider or INVARIANT_CULTURE)
        object.__setattr__(self, "properties", MappingProxyType(dict(self.properties or {})))

    @property
    def has_additional_information(self) -> bool:
        return len(self.properties) > 0

    def render(self) -> str:
        """Return the text with its format parameters applied."""
        return self.format_provider.format(self.text, self.format_parameters)

    def __repr__(self) -> str:
        return f"LogMessage(level={self.level.name}, text={self.text!r})"
