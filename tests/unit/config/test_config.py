"""Unit tests for loading configuration."""

import os

import pytest

from voltlock.config import (
    DEFAULT_CONFIG,
    ConfigValidationError,
    LogFormat,
    LogLevel,
    VoltConfig,
    load_config,
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for key in list(os.environ):
        if key == "VOLTPATH" or key.startswith("VOLT_"):
            monkeypatch.delenv(key)


class TestLoadConfig:
    def test_defaults(self) -> None:
        config = load_config()

        assert config == VoltConfig()
        assert config.volt_path == ""
        assert config.logging.level is LogLevel.WARNING
        assert config.logging.format is LogFormat.TEXT
        assert config.logging.file == ""

    def test_environment_overrides_defaults(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("VOLTPATH", "/data/volt")
        monkeypatch.setenv("VOLT_LOGGING__LEVEL", "debug")

        config = load_config()

        assert config.volt_path == "/data/volt"
        assert config.logging.level is LogLevel.DEBUG

    def test_overrides_take_precedence_over_environment(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("VOLT_LOGGING__FORMAT", "json")

        config = load_config({"logging": {"format": "text"}})

        assert config.logging.format is LogFormat.TEXT

    def test_environment_can_be_excluded(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("VOLTPATH", "/data/volt")

        config = load_config(include_env=False)

        assert config.volt_path == ""

    def test_invalid_value_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("VOLT_LOGGING__LEVEL", "chatty")

        with pytest.raises(ConfigValidationError) as exc_info:
            load_config()

        assert exc_info.value.key == "logging.level"
        assert exc_info.value.value == "chatty"

    def test_default_config_is_not_mutated(self) -> None:
        _ = load_config({"logging": {"level": "error"}})

        assert DEFAULT_CONFIG["logging"]["level"] == "warning"

    def test_config_is_frozen(self) -> None:
        config = load_config()

        with pytest.raises(ValueError, match="frozen"):
            config.volt_path = "/elsewhere"  # pyright: ignore[reportAttributeAccessIssue]
