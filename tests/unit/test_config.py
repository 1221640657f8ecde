"""Unit tests for settings and logging setup."""

import structlog

from paramcheck.config import Settings, get_settings
from paramcheck.logging_config import configure_logging


def test_default_limits():
    settings = Settings()

    assert settings.MAX_STR_LEN == 64
    assert settings.MIN_OFFSET == 0
    assert settings.MIN_LIMIT == 1
    assert settings.MAX_LIMIT == 1000
    assert settings.SUBNET_MIN_IPV4 == 8
    assert settings.SUBNET_MIN_IPV6 == 8


def test_environment_overrides(settings_env):
    settings_env.setenv("PARAMCHECK_MAX_LIMIT", "250")
    settings_env.setenv("PARAMCHECK_DEBUG", "true")

    settings = get_settings()

    assert settings.MAX_LIMIT == 250
    assert settings.DEBUG is True
    assert get_settings() is settings


def test_configure_logging_filters_below_level(capsys):
    configure_logging(Settings(LOG_LEVEL="warning"))
    try:
        logger = structlog.get_logger()
        logger.info("hidden_event")
        logger.warning("shown_event", field="ip")

        out = capsys.readouterr().out
        assert "hidden_event" not in out
        assert "shown_event" in out
        assert '"field": "ip"' in out
    finally:
        configure_logging()
