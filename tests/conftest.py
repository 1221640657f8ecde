"""Shared pytest fixtures for paramcheck test suites."""

from collections.abc import Generator

import pytest

from paramcheck.config import get_settings
from paramcheck.logging_config import configure_logging


@pytest.fixture(scope="session", autouse=True)
def _logging() -> None:
    """Configure structlog the way a host service would."""
    configure_logging()


@pytest.fixture
def settings_env(monkeypatch: pytest.MonkeyPatch) -> Generator[pytest.MonkeyPatch, None, None]:
    """Allow a test to override PARAMCHECK_* variables; settings reload around it."""
    get_settings.cache_clear()
    yield monkeypatch
    monkeypatch.undo()
    get_settings.cache_clear()
