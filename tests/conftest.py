from __future__ import annotations

import typing as t
from unittest.mock import MagicMock

import pytest

from nuclei_diagnostics.logging import LevelToLog, Logger, LogMessage, ThresholdLogger


class RecordingLogger(ThresholdLogger):
    """In-memory logger that keeps every accepted message."""

    def __init__(self, level: LevelToLog = LevelToLog.TRACE) -> None:
        super().__init__(level)
        self.messages: list[LogMessage] = []
        self.close_calls = 0

    def _write(self, message: LogMessage) -> None:
        self.messages.append(message)

    def close(self) -> None:
        self.close_calls += 1
        super().close()


@pytest.fixture
def recording_logger() -> RecordingLogger:
    return RecordingLogger()


@pytest.fixture
def sub_logger() -> t.Callable[..., MagicMock]:
    """
    Factory for mocked member loggers.

    The mock reports `level`, answers `should_log` from that level and either
    records the logged message in `received` or raises `error`.
    """

    def _make(level: LevelToLog, *, error: BaseException | None = None) -> MagicMock:
        logger = MagicMock(spec=Logger)
        logger.level = level
        logger.received = []
        logger.should_log.side_effect = lambda m: m.level >= level
        if error is not None:
            logger.log.side_effect = error
        else:
            logger.log.side_effect = logger.received.append
        return logger

    return _make


@pytest.fixture
def settings_env(monkeypatch, tmp_path) -> t.Iterator[pytest.MonkeyPatch]:
    """
    Fresh process-wide settings read from a clean environment in `tmp_path`.

    Set `NUCLEI_DIAG_*` variables on the returned monkeypatch before the code
    under test first calls `get_settings()`.
    """
    from nuclei_diagnostics.config import DiagnosticsSettings, get_settings

    monkeypatch.chdir(tmp_path)
    for name in DiagnosticsSettings.model_fields:
        monkeypatch.delenv(f"NUCLEI_DIAG_{name.upper()}", raising=False)
    get_settings.cache_clear()
    yield monkeypatch
    get_settings.cache_clear()
