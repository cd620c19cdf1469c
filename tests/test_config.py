"""Tests for environment-variable configuration."""

from __future__ import annotations

import importlib
import logging
from typing import Any, Iterator

import pytest

from metrics_engine import config


@pytest.fixture
def reload_config(monkeypatch: pytest.MonkeyPatch) -> Iterator[pytest.MonkeyPatch]:
    """Yield monkeypatch; restore the environment and module settings afterwards."""
    yield monkeypatch
    monkeypatch.undo()
    importlib.reload(config)


class TestEnvHelpers:
    def test_env_int_default_when_unset(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("METRICS_TEST_INT", raising=False)
        assert config._env_int("METRICS_TEST_INT", 7) == 7

    def test_env_int_value(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("METRICS_TEST_INT", "12")
        assert config._env_int("METRICS_TEST_INT", 7) == 12

    def test_env_int_invalid_logs_warning(
        self, monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture
    ) -> None:
        monkeypatch.setenv("METRICS_TEST_INT", "many")
        with caplog.at_level(logging.WARNING, logger="metrics_engine.config"):
            assert config._env_int("METRICS_TEST_INT", 7) == 7
        assert "METRICS_TEST_INT" in caplog.text

    @pytest.mark.parametrize("raw, expected", [("1", True), ("true", True), ("YES", True), ("0", False), ("off", False)])
    def test_env_bool(self, monkeypatch: pytest.MonkeyPatch, raw: str, expected: bool) -> None:
        monkeypatch.setenv("METRICS_TEST_BOOL", raw)
        assert config._env_bool("METRICS_TEST_BOOL") is expected

    def test_env_bool_default(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("METRICS_TEST_BOOL", raising=False)
        assert config._env_bool("METRICS_TEST_BOOL", default=True) is True


class TestSettings:
    def test_settings_read_from_environment(self, reload_config: pytest.MonkeyPatch) -> None:
        reload_config.setenv("METRICS_LOG_LEVEL", "debug")
        reload_config.setenv("METRICS_CACHE_MAX_ENTRIES", "32")
        reload_config.setenv("METRICS_EXCLUDE_STRETCHING", "true")
        reload_config.setenv("METRICS_STRETCHING_AUTO_EXCLUDE_MIN", "6")
        importlib.reload(config)
        assert config.LOG_LEVEL == "DEBUG"
        assert config.CACHE_MAX_ENTRIES == 32
        assert config.EXCLUDE_STRETCHING is True
        assert config.STRETCHING_AUTO_EXCLUDE_MIN == 6

    def test_defaults(self, reload_config: pytest.MonkeyPatch) -> None:
        for name in (
            "METRICS_LOG_LEVEL",
            "METRICS_CACHE_MAX_ENTRIES",
            "METRICS_EXCLUDE_STRETCHING",
            "METRICS_STRETCHING_AUTO_EXCLUDE_MIN",
        ):
            reload_config.delenv(name, raising=False)
        importlib.reload(config)
        assert config.LOG_LEVEL == "INFO"
        assert config.CACHE_MAX_ENTRIES == 256
        assert config.EXCLUDE_STRETCHING is False
        assert config.STRETCHING_AUTO_EXCLUDE_MIN == 4


class TestConfigureLogging:
    def test_uses_configured_format(self, monkeypatch: pytest.MonkeyPatch) -> None:
        calls: list[dict[str, Any]] = []
        monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))
        config.configure_logging("WARNING")
        assert calls == [{"level": "WARNING", "format": config.LOG_FORMAT}]
