"""Tests for the reader service (``GET /read``).

The shared ``Mercury`` client is replaced by a mock whose ``parse`` is an
``AsyncMock``; no network calls are made.
"""

from __future__ import annotations

import asyncio
from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi.testclient import TestClient

from mercury.api.app import create_app
from mercury.config import settings
from mercury.errors import ApiError, DecodeError, TransportError
from mercury.models import Article, ContentFormat, ParseOptions


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture()
def mercury() -> MagicMock:
    mock = MagicMock()
    mock.parse = AsyncMock(
        return_value=Article(
            url="https://example.com/story",
            content="<p>Body</p>",
            title="Headline",
            author="Ada",
        )
    )
    return mock


@pytest.fixture()
def client(mercury: MagicMock):
    app = create_app(mercury=mercury)
    with TestClient(app, raise_server_exceptions=True) as c:
        yield c


# ---------------------------------------------------------------------------
# Tests
# ---------------------------------------------------------------------------

class TestHealth:
    def test_health(self, client: TestClient) -> None:
        resp = client.get("/health")
        assert resp.status_code == 200
        assert resp.json() == {"status": "ok"}


class TestRead:
    def test_returns_article_json(self, client: TestClient, mercury: MagicMock) -> None:
        resp = client.get("/read", params={"url": "https://example.com/story"})

        assert resp.status_code == 200
        data = resp.json()
        assert data["title"] == "Headline"
        assert data["author"] == "Ada"
        assert data["content"] == "<p>Body</p>"
        assert data["direction"] == "ltr"
        mercury.parse.assert_awaited_once()
        assert mercury.parse.await_args.args[0] == "https://example.com/story"

    def test_forwards_options(self, client: TestClient, mercury: MagicMock) -> None:
        resp = client.get(
            "/read",
            params={"url": "https://x", "format": "markdown", "fetch_all_pages": "true"},
        )

        assert resp.status_code == 200
        options = mercury.parse.await_args.args[1]
        assert isinstance(options, ParseOptions)
        assert options.content_format is ContentFormat.MARKDOWN
        assert options.fetch_all_pages is True

    def test_missing_url_is_422(self, client: TestClient) -> None:
        resp = client.get("/read")
        assert resp.status_code == 422

    def test_unknown_format_is_422(self, client: TestClient) -> None:
        resp = client.get("/read", params={"url": "https://x", "format": "pdf"})
        assert resp.status_code == 422

    def test_blank_url_is_422(self, client: TestClient, mercury: MagicMock) -> None:
        mercury.parse.side_effect = ValueError("target url must not be empty")
        resp = client.get("/read", params={"url": " "})
        assert resp.status_code == 422
        assert "must not be empty" in resp.json()["detail"]

    def test_api_error_is_502_with_upstream_status(
        self, client: TestClient, mercury: MagicMock
    ) -> None:
        mercury.parse.side_effect = ApiError(401, "Invalid API key")
        resp = client.get("/read", params={"url": "https://x"})

        assert resp.status_code == 502
        assert "401" in resp.json()["detail"]
        assert "Invalid API key" in resp.json()["detail"]

    @pytest.mark.parametrize(
        "exc",
        [TransportError("connection refused"), DecodeError("response body is not valid JSON")],
    )
    def test_other_failures_are_502(
        self, client: TestClient, mercury: MagicMock, exc: Exception
    ) -> None:
        mercury.parse.side_effect = exc
        resp = client.get("/read", params={"url": "https://x"})
        assert resp.status_code == 502

    def test_slow_parse_is_504(
        self, client: TestClient, mercury: MagicMock, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        async def _slow(*args, **kwargs):
            await asyncio.sleep(5)

        mercury.parse.side_effect = _slow
        monkeypatch.setattr(settings, "reader_timeout", 0.05)

        resp = client.get("/read", params={"url": "https://x"})
        assert resp.status_code == 504


class TestLifespan:
    def test_builds_and_closes_own_client(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(settings, "api_key", "from-settings")
        app = create_app()

        with TestClient(app) as c:
            mercury = c.app.state.mercury
            assert mercury.endpoint == settings.endpoint
            assert mercury._client.is_closed is False

        assert mercury._client.is_closed is True
