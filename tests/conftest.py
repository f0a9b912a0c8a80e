"""Shared pytest fixtures for transport-level tests."""

from __future__ import annotations

from collections.abc import Awaitable, Callable

import httpx
import pytest

from algoliasearch_client.config import get_settings

Handler = Callable[[httpx.Request], Awaitable[httpx.Response]]


@pytest.fixture(autouse=True)
def _clear_settings_cache(monkeypatch):
    for name in ("ALGOLIA_APPLICATION_ID", "ALGOLIA_API_KEY", "ALGOLIA_TIMEOUT", "ALGOLIA_DEBUG"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def make_agent():
    """Build an ``httpx.AsyncClient`` answering through ``handler``."""

    def _factory(handler: Handler) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(handler))

    return _factory
