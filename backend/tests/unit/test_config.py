"""Unit tests for settings and logging setup."""

import pytest
import structlog

from cars.config import Settings, get_settings
from cars.log_config import configure_logging


@pytest.fixture
def reset_structlog():
    yield
    structlog.reset_defaults()


class TestSettings:
    """Test Settings loading."""

    def test_defaults(self, monkeypatch):
        for name in ("DEBUG", "LOG_LEVEL", "TIMEZONE"):
            monkeypatch.delenv(name, raising=False)
        settings = Settings(_env_file=None)
        assert settings.DEBUG is False
        assert settings.LOG_LEVEL == "info"
        assert settings.TIMEZONE == "America/Sao_Paulo"

    def test_environment_override(self, monkeypatch):
        monkeypatch.setenv("TIMEZONE", "UTC")
        monkeypatch.setenv("DEBUG", "true")
        settings = Settings(_env_file=None)
        assert settings.TIMEZONE == "UTC"
        assert settings.DEBUG is True

    def test_get_settings_cached(self):
        assert get_settings() is get_settings()


class TestConfigureLogging:
    """Test structlog configuration."""

    def test_configures_structlog(self, reset_structlog):
        configure_logging(Settings(_env_file=None, LOG_LEVEL="warning"))
        assert structlog.is_configured()

    def test_level_filter_applied(self, reset_structlog, capsys):
        configure_logging(Settings(_env_file=None, LOG_LEVEL="warning"))
        logger = structlog.get_logger()
        logger.info("hidden_event")
        logger.warning("shown_event")
        out = capsys.readouterr().out
        assert "shown_event" in out
        assert "hidden_event" not in out

    def test_unknown_level_falls_back_to_info(self, reset_structlog, capsys):
        configure_logging(Settings(_env_file=None, LOG_LEVEL="verbose"))
        structlog.get_logger().info("info_event")
        assert "info_event" in capsys.readouterr().out
