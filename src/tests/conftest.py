"""Pytest configuration and fixtures for unicon tests."""

import pytest

from src.utils.config import reset_config
from src.utils.constants import ENV_LOG_LEVEL, ENV_ROUND_PLACES


@pytest.fixture(autouse=True)
def clean_config(monkeypatch):
    """Give every test a fresh configuration built from a clean environment."""
    monkeypatch.delenv(ENV_ROUND_PLACES, raising=False)
    monkeypatch.delenv(ENV_LOG_LEVEL, raising=False)
    reset_config()
    yield
    reset_config()
