"""
Diagnostics Configuration.
"""

from enum import Enum
from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..logging.levels import LevelToLog


class LogFormat(str, Enum):
    CONSOLE = "console"
    JSON = "json"


class DiagnosticsSettings(BaseSettings):
    """Logging thresholds and sink parameters."""

    model_config = SettingsConfigDict(
        env_prefix="NUCLEI_DIAG_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    default_log_level: LevelToLog = Field(
        default=LevelToLog.INFO,
        description="Threshold used to seed sinks that have no explicit level",
    )
    log_level: LevelToLog = Field(default=LevelToLog.INFO, description="Threshold for the library's own events")
    log_format: LogFormat = Field(default=LogFormat.CONSOLE, description="Output format for library events")
    log_file_path: str = Field(default="logs/nuclei_diagnostics.log", description="Path for the file sink")
    file_max_bytes: int = Field(default=10 * 1024 * 1024, gt=0, description="Rotate the file sink above this size")
    file_backup_count: int = Field(default=5, ge=0, description="Rotated files to keep")

    @field_validator("default_log_level", "log_level", mode="before")
    @classmethod
    def _parse_level(cls, value: Any) -> LevelToLog:
        return LevelToLog.parse(value)
