"""
Common pytest fixtures.
"""

import logging

import pytest
import structlog


@pytest.fixture(autouse=True)
def reset_logging():
    """Undo configure_logging() between tests."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    structlog.reset_defaults()
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def api_env(monkeypatch):
    """Minimal environment for a valid service configuration."""
    monkeypatch.setenv("API_KEY", "test-api-key")
    monkeypatch.delenv("REFRESH_INTERVAL_SECS", raising=False)
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    monkeypatch.delenv("LOG_FORMAT", raising=False)
