"""
Root-level shared test fixtures.
"""

from __future__ import annotations

import pytest

from dsvault.config import reset_config
from dsvault.registry import reset_registry


@pytest.fixture
def clean_env(monkeypatch):
    """Remove dsvault env vars that leak between tests."""
    for key in [
        "DSVAULT_ENDPOINT",
        "DSVAULT_COLLECTION",
        "DSVAULT_API_KEY",
        "DSVAULT_LOG_LEVEL",
    ]:
        monkeypatch.delenv(key, raising=False)
    reset_config()
    yield
    reset_config()


@pytest.fixture(autouse=True)
def clean_registry():
    """Fresh process-wide resolver registry for each test."""
    reset_registry()
    yield
    reset_registry()
