"""
Typed configuration keys and the lookup protocol consumed by templates and sinks.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, Protocol, TypeVar

from ..logging.levels import LevelToLog
from .diagnostics import DiagnosticsSettings

T = TypeVar("T")


@dataclass(frozen=True)
class ConfigurationKey(Generic[T]):
    """Name of a configuration value together with its expected type."""

    name: str
    value_type: type


class Configuration(Protocol):
    """Key/value lookup for configuration values."""

    def has_value_for(self, key: ConfigurationKey[Any]) -> bool: ...

    def value(self, key: ConfigurationKey[T]) -> T: ...


class DiagnosticsConfigurationKeys:
    """Configuration keys understood by the diagnostics package."""

    DEFAULT_LOG_LEVEL: ConfigurationKey[LevelToLog] = ConfigurationKey("DefaultLogLevel", LevelToLog)

    @classmethod
    def to_collection(cls) -> list[ConfigurationKey[Any]]:
        return [cls.DEFAULT_LOG_LEVEL]


class SettingsConfiguration:
    """Exposes `DiagnosticsSettings` through the `Configuration` protocol.

    Only values that were explicitly supplied (environment, .env file or
    constructor arguments) are reported by `has_value_for`.
    """

    _FIELDS = {
        DiagnosticsConfigurationKeys.DEFAULT_LOG_LEVEL.name: "default_log_level",
    }

    def __init__(self, settings: DiagnosticsSettings | None = None) -> None:
        self._settings = settings or DiagnosticsSettings()

    def has_value_for(self, key: ConfigurationKey[Any]) -> bool:
        field = self._FIELDS.get(key.name)
        return field is not None and field in self._settings.model_fields_set

    def value(self, key: ConfigurationKey[T]) -> T:
        field = self._FIELDS.get(key.name)
        if field is None:
            raise KeyError(key.name)
        return getattr(self._settings, field)
