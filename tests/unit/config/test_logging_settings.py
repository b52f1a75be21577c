"""Unit tests for settings loaders and LoggingSettings."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import ClassVar

import pytest

from logbridge.config import (
    ConfigError,
    DotenvSettingsLoader,
    EnvSettingsLoader,
    InvalidSettingValueError,
    LoggingSettings,
    MissingRequiredSettingError,
    Settings,
)

_LOG_VARS = ("LOG_LEVEL", "LOG_RENDERER", "LOG_LOGGER_NAME")


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for key in _LOG_VARS:
        monkeypatch.delenv(key, raising=False)


@dataclass
class WorkerSettings(Settings):
    _prefix: ClassVar[str] = "WORKER"

    queue: str
    concurrency: int = 4
    ratio: float = 0.5
    verbose: bool = False
    tags: list[str] = field(default_factory=list)


# ---------------------------------------------------------------------------
# LoggingSettings
# ---------------------------------------------------------------------------


class TestLoggingSettings:
    def test_defaults(self) -> None:
        settings = LoggingSettings()
        assert settings.level == "INFO"
        assert settings.renderer == "json"
        assert settings.logger_name == "logbridge"
        assert settings.level_no == logging.INFO

    def test_normalises_case(self) -> None:
        settings = LoggingSettings(level="debug", renderer="CONSOLE")
        assert settings.level == "DEBUG"
        assert settings.renderer == "console"
        assert settings.level_no == logging.DEBUG

    def test_rejects_unknown_level(self) -> None:
        with pytest.raises(InvalidSettingValueError) as exc_info:
            LoggingSettings(level="LOUD")
        assert exc_info.value.setting_name == "level"

    def test_rejects_unknown_renderer(self) -> None:
        with pytest.raises(InvalidSettingValueError):
            LoggingSettings(renderer="xml")

    def test_invalid_value_is_config_error(self) -> None:
        with pytest.raises(ConfigError):
            LoggingSettings(level="nope")


# ---------------------------------------------------------------------------
# EnvSettingsLoader
# ---------------------------------------------------------------------------


class TestEnvSettingsLoader:
    def test_loads_logging_settings(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LOG_LEVEL", "warning")
        monkeypatch.setenv("LOG_RENDERER", "console")
        monkeypatch.setenv("LOG_LOGGER_NAME", "api")
        settings = EnvSettingsLoader().load(LoggingSettings)
        assert settings.level == "WARNING"
        assert settings.renderer == "console"
        assert settings.logger_name == "api"

    def test_defaults_when_env_absent(self) -> None:
        assert EnvSettingsLoader().load(LoggingSettings) == LoggingSettings()

    def test_invalid_env_value(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LOG_LEVEL", "LOUD")
        with pytest.raises(InvalidSettingValueError):
            EnvSettingsLoader().load(LoggingSettings)

    def test_coerces_types(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("WORKER_QUEUE", "jobs")
        monkeypatch.setenv("WORKER_CONCURRENCY", "8")
        monkeypatch.setenv("WORKER_RATIO", "0.25")
        monkeypatch.setenv("WORKER_VERBOSE", "yes")
        monkeypatch.setenv("WORKER_TAGS", "a, b,,c")
        settings = EnvSettingsLoader().load(WorkerSettings)
        assert settings == WorkerSettings(
            queue="jobs", concurrency=8, ratio=0.25, verbose=True, tags=["a", "b", "c"]
        )

    def test_missing_required(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("WORKER_QUEUE", raising=False)
        with pytest.raises(MissingRequiredSettingError) as exc_info:
            EnvSettingsLoader().load(WorkerSettings)
        assert exc_info.value.setting_name == "WORKER_QUEUE"

    def test_uncoercible_value(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("WORKER_QUEUE", "jobs")
        monkeypatch.setenv("WORKER_CONCURRENCY", "many")
        with pytest.raises(InvalidSettingValueError) as exc_info:
            EnvSettingsLoader().load(WorkerSettings)
        assert exc_info.value.setting_name == "WORKER_CONCURRENCY"


# ---------------------------------------------------------------------------
# DotenvSettingsLoader
# ---------------------------------------------------------------------------


class TestDotenvSettingsLoader:
    def test_loads_from_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        pytest.importorskip("dotenv")
        env_file = tmp_path / ".env"
        env_file.write_text("LOG_LEVEL=error\nLOG_LOGGER_NAME=billing\n")
        # load_dotenv writes straight to os.environ; register for cleanup
        monkeypatch.setenv("LOG_LEVEL", "")
        monkeypatch.setenv("LOG_LOGGER_NAME", "")
        monkeypatch.delenv("LOG_LEVEL")
        monkeypatch.delenv("LOG_LOGGER_NAME")
        settings = DotenvSettingsLoader(str(env_file)).load(LoggingSettings)
        assert settings.level == "ERROR"
        assert settings.logger_name == "billing"

    def test_environment_wins_without_override(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        pytest.importorskip("dotenv")
        env_file = tmp_path / ".env"
        env_file.write_text("LOG_LEVEL=error\n")
        monkeypatch.setenv("LOG_LEVEL", "debug")
        settings = DotenvSettingsLoader(str(env_file)).load(LoggingSettings)
        assert settings.level == "DEBUG"


# ---------------------------------------------------------------------------
# Settings.load / error details
# ---------------------------------------------------------------------------


class TestSettingsLoad:
    def test_defaults_to_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LOG_RENDERER", "console")
        assert LoggingSettings.load().renderer == "console"

    def test_explicit_loader(self) -> None:
        class FixedLoader(EnvSettingsLoader):
            def load(self, settings_class):  # type: ignore[no-untyped-def, override]
                return settings_class(level="ERROR")

        assert LoggingSettings.load(FixedLoader()).level == "ERROR"

    def test_error_detail(self) -> None:
        with pytest.raises(InvalidSettingValueError) as exc_info:
            LoggingSettings(level="LOUD")
        assert exc_info.value.to_dict()["detail"]["setting"] == "level"
        assert exc_info.value.code == "invalid_setting_value"
