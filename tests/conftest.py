"""Shared fixtures for credhelper tests."""

import pytest

from credhelper.config import reset_settings


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch: pytest.MonkeyPatch):
    """Start each test with default settings and no CREDHELPER_* env vars."""
    for name in [
        "CREDHELPER_LOG_LEVEL",
        "CREDHELPER_LOG_COLORS",
        "CREDHELPER_LOG_TIMEZONE",
        "CREDHELPER_STRICT_PARSING",
        "CREDHELPER_USE_HTTP_PATH",
    ]:
        monkeypatch.delenv(name, raising=False)
    reset_settings()
    yield
    reset_settings()
