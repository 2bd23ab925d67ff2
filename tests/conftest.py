"""Pytest configuration and shared fixtures for parts-sdk tests."""

from unittest.mock import patch

import httpx
import pytest

from parts_sdk.builder import PartsAPIClientBuilder
from parts_sdk.testing import RecordingHandler
from parts_sdk.transport.httpx_client import HttpxHttpClient

BASE_URL = "https://api.example.com/v1"


@pytest.fixture(autouse=True)
def clear_env(monkeypatch):
    """Auto-cleanup: Clear test-related environment variables before each test.

    This prevents test pollution when testing configuration and credential resolution.
    """
    import os

    test_prefixes = ("TEST_", "PARTS_API_")

    for key in list(os.environ.keys()):
        if any(key.startswith(prefix) for prefix in test_prefixes):
            monkeypatch.delenv(key, raising=False)

    yield


@pytest.fixture
def sleep_delays():
    """Replace asyncio.sleep with a no-op and record the requested delays."""
    delays: list[float] = []

    async def fake_sleep(delay, *args, **kwargs):
        delays.append(delay)

    with patch("asyncio.sleep", side_effect=fake_sleep):
        yield delays


@pytest.fixture
def make_client():
    """Build a client whose transport replays scripted outcomes.

    Returns ``(client, handler)``; pass a configured builder to change strategies.
    """

    def _make(outcomes, builder: PartsAPIClientBuilder | None = None):
        handler = RecordingHandler(outcomes)
        http_client = HttpxHttpClient(transport=httpx.MockTransport(handler))
        builder = builder or PartsAPIClientBuilder()
        client = builder.set_base_url(BASE_URL).set_http_client(http_client).build()
        return client, handler

    return _make
