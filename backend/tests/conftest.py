"""Root conftest — shared test configuration."""

import os

import pytest

from httpbench.config import get_settings


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch):
    """Drop HTTPBENCH_* env vars and the settings cache around every test."""
    for key in list(os.environ):
        if key.upper().startswith("HTTPBENCH_"):
            monkeypatch.delenv(key, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
