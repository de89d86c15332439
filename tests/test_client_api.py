"""Tests for the news HTTP client."""

import asyncio

import httpx
import pytest

from newsscript.client import NewsClient, NewsClientError

STORY = {
    "id": "Asia-0",
    "title": "T",
    "summary": "S",
    "continent": "Asia",
    "ideology": "Pride",
    "scripture": {"reference": "Prov 16:18", "text": "Pride...", "application": "A"},
}


def _client(handler) -> NewsClient:
    return NewsClient("http://api.test/api/news", transport=httpx.MockTransport(handler))


def test_fetch_news_success() -> None:
    """Test query params and parsed response."""
    seen: dict = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["params"] = dict(request.url.params)
        return httpx.Response(200, json={"stories": [STORY], "sources": []})

    resp = asyncio.run(_client(handler).fetch_news("Asia"))
    assert seen["params"] == {"continent": "Asia"}
    assert resp.stories[0].id == "Asia-0"
    assert resp.stories[0].scripture.reference == "Prov 16:18"


def test_fetch_news_force_refresh_param() -> None:
    """Test that forced refresh is passed to the server."""
    seen: dict = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["params"] = dict(request.url.params)
        return httpx.Response(200, json={"stories": [], "sources": []})

    asyncio.run(_client(handler).fetch_news("Europe", force_refresh=True))
    assert seen["params"] == {"continent": "Europe", "refresh": "true"}


def test_fetch_news_http_error() -> None:
    """Test that error statuses raise with status and body."""

    def handler(_: httpx.Request) -> httpx.Response:
        return httpx.Response(500, json={"error": "Missing GEMINI_API_KEY on server"})

    with pytest.raises(NewsClientError) as exc:
        asyncio.run(_client(handler).fetch_news("Asia"))
    assert exc.value.status_code == 500
    assert exc.value.body == {"error": "Missing GEMINI_API_KEY on server"}


def test_fetch_news_transport_error() -> None:
    """Test that connection failures raise NewsClientError."""

    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("down", request=request)

    with pytest.raises(NewsClientError) as exc:
        asyncio.run(_client(handler).fetch_news("Asia"))
    assert exc.value.status_code is None


def test_fetch_news_bad_body() -> None:
    """Test that a body not matching the schema raises NewsClientError."""

    def handler(_: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"items": []})

    with pytest.raises(NewsClientError):
        asyncio.run(_client(handler).fetch_news("Asia"))
