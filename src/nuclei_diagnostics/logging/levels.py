"""
Severity levels for log messages and logger thresholds.
"""

from __future__ import annotations

from enum import IntEnum
from typing import Any


class LevelToLog(IntEnum):
    """Ordered severity of a log message.

    `NONE` is only valid as a logger threshold, where it means that the
    logger accepts nothing. A message can never carry `NONE`.
    """

    NONE = 0
    TRACE = 1  # Fine-grained execution detail
    DEBUG = 2  # Developer diagnostics
    INFO = 3  # Normal operation
    WARN = 4  # Unexpected but recoverable
    ERROR = 5  # Operation failed, process continues
    FATAL = 6  # Process integrity at risk

    @classmethod
    def parse(cls, value: Any) -> "LevelToLog":
        """Convert a member, an integer or a level name into a `LevelToLog`.

        Names are case-insensitive and the stdlib spellings `WARNING` and
        `CRITICAL` are accepted as aliases for `WARN` and `FATAL`.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, int):
            return cls(value)
        if isinstance(value, str):
            name = value.strip().upper()
            if name.isdigit():
                return cls(int(name))
            name = _ALIASES.get(name, name)
            try:
                return cls[name]
            except KeyError:
                pass
        raise ValueError(f"'{value}' is not a valid {cls.__name__}")


_ALIASES = {
    "WARNING": "WARN",
    "CRITICAL": "FATAL",
}


def threshold_rank(level: LevelToLog) -> int:
    """Rank used when comparing thresholds: `NONE` sorts above every real level."""
    return len(LevelToLog) if level == LevelToLog.NONE else int(level)
