"""
Nuclei Diagnostics: a logging abstraction layer decoupling application code
from concrete log sinks.

Usage:
    from nuclei_diagnostics import (
        DistributedLogger, FileLogger, ConsoleLogger, LevelToLog, SystemDiagnostics,
    )

    logger = DistributedLogger([ConsoleLogger(level=LevelToLog.INFO), FileLogger("logs/app.log")])
    diagnostics = SystemDiagnostics(logger)
    diagnostics.log(LevelToLog.INFO, "Loaded {0} plugins", 3)
"""

from .config import DiagnosticsConfigurationKeys, DiagnosticsSettings, SettingsConfiguration, get_settings
from .diagnostics import SystemDiagnostics
from .logging import (
    DiagnosticsError,
    DistributedLogger,
    LevelToLog,
    LogMessage,
    Logger,
    LoggingError,
    ThresholdLogger,
    ValidationError,
)
from .logging.forwarding import LogForwardingPipe
from .logging.sinks import CallbackLogger, ConsoleLogger, FileLogger, StructlogLogger
from .logging.templates import DebugLogTemplate, LogTemplate
from .metrics import MetricsCollector

__all__ = [
    "CallbackLogger",
    "ConsoleLogger",
    "DebugLogTemplate",
    "DiagnosticsConfigurationKeys",
    "DiagnosticsError",
    "DiagnosticsSettings",
    "DistributedLogger",
    "FileLogger",
    "LevelToLog",
    "LogForwardingPipe",
    "LogMessage",
    "LogTemplate",
    "Logger",
    "LoggingError",
    "MetricsCollector",
    "SettingsConfiguration",
    "StructlogLogger",
    "SystemDiagnostics",
    "ThresholdLogger",
    "ValidationError",
    "get_settings",
]
