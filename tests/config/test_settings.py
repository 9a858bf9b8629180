"""Tests for src/config/settings.py - Settings and logging setup."""

import logging

import pytest
from pydantic import ValidationError

from src.config.settings import Settings, configure_logging


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep host environment variables out of Settings."""
    for key in (
        "DEBUG",
        "LOG_LEVEL",
        "ENABLE_SOUNDS",
        "ENABLE_VIBRATION",
        "DEFAULT_PLAYER_COUNT",
        "ROLLING_DELAY",
    ):
        monkeypatch.delenv(key, raising=False)


class TestSettings:
    def test_defaults(self):
        settings = Settings(_env_file=None)
        assert settings.debug is False
        assert settings.log_level == "INFO"
        assert settings.default_player_count == 2
        assert settings.rolling_delay == pytest.approx(0.6)
        assert settings.enable_sounds is True
        assert settings.enable_vibration is True

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("DEFAULT_PLAYER_COUNT", "4")
        monkeypatch.setenv("ENABLE_SOUNDS", "false")
        settings = Settings(_env_file=None)
        assert settings.default_player_count == 4
        assert settings.enable_sounds is False

    @pytest.mark.parametrize("count", ["1", "7"])
    def test_player_count_bounds(self, monkeypatch, count):
        monkeypatch.setenv("DEFAULT_PLAYER_COUNT", count)
        with pytest.raises(ValidationError):
            Settings(_env_file=None)

    def test_log_level_case_insensitive(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "warning")
        assert Settings(_env_file=None).log_level == "WARNING"

    @pytest.mark.parametrize("level", ["verbose", "TRACE", ""])
    def test_unknown_log_level_rejected(self, monkeypatch, level):
        monkeypatch.setenv("LOG_LEVEL", level)
        with pytest.raises(ValidationError):
            Settings(_env_file=None)


class TestConfigureLogging:
    def test_sets_level(self):
        configure_logging(Settings(_env_file=None, log_level="warning"))
        assert logging.getLogger().level == logging.WARNING

    def test_debug_forces_debug_level(self):
        configure_logging(Settings(_env_file=None, debug=True, log_level="ERROR"))
        assert logging.getLogger().level == logging.DEBUG
