"""
Diagnostics Configuration Module.

Settings are read from `NUCLEI_DIAG_*` environment variables and `.env`.

Usage:
    from nuclei_diagnostics.config import get_settings

    get_settings().default_log_level  # LevelToLog.INFO
"""

from functools import lru_cache

from .diagnostics import DiagnosticsSettings, LogFormat
from .keys import (
    Configuration,
    ConfigurationKey,
    DiagnosticsConfigurationKeys,
    SettingsConfiguration,
)


@lru_cache(maxsize=1)
def get_settings() -> DiagnosticsSettings:
    """Process-wide settings, created on first use."""
    return DiagnosticsSettings()


__all__ = [
    "Configuration",
    "ConfigurationKey",
    "DiagnosticsConfigurationKeys",
    "DiagnosticsSettings",
    "LogFormat",
    "SettingsConfiguration",
    "get_settings",
]
