"""
Logging abstractions for Nuclei Diagnostics.

- LogMessage: immutable message (level, template, arguments, properties)
- Logger: contract every sink implements
- DistributedLogger: fan-out over several loggers with aggregated failures

Design Pattern: Strategy Pattern for sinks, Composite for the fan-out logger.
Library: structlog + orjson for the package's own events.
"""

from .base import Logger, ThresholdLogger
from .core import configure_logging, get_logger
from .distributed import DistributedLogger
from .exceptions import DiagnosticsError, LoggingError, ValidationError
from .formatting import INVARIANT_CULTURE, FormatProvider, InvariantFormatProvider
from .levels import LevelToLog
from .message import LogMessage

__all__ = [
    "DiagnosticsError",
    "DistributedLogger",
    "FormatProvider",
    "INVARIANT_CULTURE",
    "InvariantFormatProvider",
    "LevelToLog",
    "LogMessage",
    "Logger",
    "LoggingError",
    "ThresholdLogger",
    "ValidationError",
    "configure_logging",
    "get_logger",
]
