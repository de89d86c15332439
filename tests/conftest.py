"""Pytest configuration and fixtures."""

import os
import sys
import typing as t

import pytest
from fastapi.testclient import TestClient

sys.path.insert(
    0,
    os.path.abspath(os.path.join(os.path.dirname(__file__), "..")),
)

# Import after path setup - pylint: disable=wrong-import-position
from newsscript.cache import TTLCache  # noqa: E402
from newsscript.deps import get_news_service  # noqa: E402
from newsscript.main import app  # noqa: E402
from newsscript.news import NewsService  # noqa: E402
from fakes import Clock, FakeProvider  # noqa: E402


@pytest.fixture(autouse=True)
def _api_key(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("GEMINI_API_KEY", "test-key-0123456789")


@pytest.fixture
def clock() -> Clock:
    """Provide a controllable clock starting at t=1000."""
    return Clock()


@pytest.fixture
def provider() -> FakeProvider:
    """Provide a fake provider returning one story."""
    return FakeProvider()


@pytest.fixture
def service(provider: FakeProvider, clock: Clock) -> NewsService:
    """Provide a news service wired to the fake provider and clock."""
    return NewsService(provider=provider, cache=TTLCache(4 * 60 * 60, clock=clock))


@pytest.fixture
def client(service: NewsService) -> t.Generator[TestClient, None, None]:
    """Provide test client for API testing.

    :return: Test client generator.
    """
    app.dependency_overrides[get_news_service] = lambda: service
    with TestClient(app, raise_server_exceptions=False) as c:
        yield c
    app.dependency_overrides.clear()
