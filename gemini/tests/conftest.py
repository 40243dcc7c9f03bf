"""Shared fixtures for Gemini client tests."""

import pytest
from unittest.mock import Mock

from gemini.config import GeminiSettings
from gemini.api.base import Transport
from gemini.auth.session_registry import SessionRegistry
from gemini.client import GeminiClient
from gemini.metrics import Metrics


@pytest.fixture
def settings():
    """Settings isolated from the environment and .env files."""
    return GeminiSettings(
        _env_file=None,
        api_key=None,
        api_secret=None,
        use_sandbox=False,
        enable_metrics=False,
        log_requests=True,
    )


@pytest.fixture
def registry():
    """Fresh registry per test (no cross-test contamination)."""
    return SessionRegistry()


@pytest.fixture
def transport():
    """Transport mock returning an ok body unless overridden."""
    mock = Mock(spec=Transport)
    mock.send.return_value = b'{"result":"ok"}'
    mock.get.return_value = b'[]'
    return mock


@pytest.fixture
def client(settings, registry, transport):
    """Client wired to the mocked transport."""
    return GeminiClient(
        settings=settings,
        registry=registry,
        transport=transport,
        metrics=Metrics(enabled=True)
    )
