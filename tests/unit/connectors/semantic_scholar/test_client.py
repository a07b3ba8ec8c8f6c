"""Precise unit tests for the Semantic Scholar clients."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from scholars.graph.connectors.semantic_scholar import (
    SemanticScholarAsyncClient,
    SemanticScholarClient,
)
from scholars.graph.connectors.semantic_scholar.config import API_KEY_ENV, BASE_URL
from scholars.graph.runtime.rest import BlockingHTTPClient, HTTPClient


class TestSemanticScholarClient:
    """Test client configuration."""

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv(API_KEY_ENV, raising=False)
        client = SemanticScholarClient()
        assert client.base_url == BASE_URL
        assert client._headers == {}
        assert client._http.timeout == 30.0

    def test_api_key_argument(self, monkeypatch):
        monkeypatch.delenv(API_KEY_ENV, raising=False)
        client = SemanticScholarClient(api_key="secret", timeout=5.0)
        assert client._headers == {"x-api-key": "secret"}
        assert client._http.timeout == 5.0

    def test_api_key_from_environment(self, monkeypatch):
        monkeypatch.setenv(API_KEY_ENV, "from-env")
        assert SemanticScholarClient()._headers == {"x-api-key": "from-env"}

    def test_explicit_api_key_wins(self, monkeypatch):
        monkeypatch.setenv(API_KEY_ENV, "from-env")
        assert SemanticScholarClient(api_key="explicit")._headers == {"x-api-key": "explicit"}


class TestSemanticScholarAsyncClient:
    """Test async client configuration."""

    @pytest.mark.asyncio
    async def test_defaults(self, monkeypatch):
        monkeypatch.setenv(API_KEY_ENV, "k")
        async with SemanticScholarAsyncClient(base_url="https://example.org/graph/v1/") as client:
            assert client.base_url == "https://example.org/graph/v1/"
            assert client._headers == {"x-api-key": "k"}
            assert client._http.timeout.total == 30.0


class TestPrebuiltHTTPClient:
    """Test clients built around a caller-supplied HTTP client."""

    def test_blocking_requests_go_to_base_url(self, monkeypatch):
        monkeypatch.delenv(API_KEY_ENV, raising=False)
        raw = MagicMock(status_code=200, content=b"{}", url=f"{BASE_URL}paper/x", headers={})
        http = BlockingHTTPClient(timeout=5.0)
        http._session = MagicMock()
        http._session.request = MagicMock(return_value=raw)

        client = SemanticScholarClient(http=http)
        client.request("GET", "paper/x")

        assert client.base_url == BASE_URL
        http._session.request.assert_called_once_with(
            "GET", f"{BASE_URL}paper/x", params=None, headers=None, timeout=5.0
        )

    @pytest.mark.asyncio
    async def test_async_client_binds_base_url(self):
        async with SemanticScholarAsyncClient(http=HTTPClient()) as client:
            assert client.base_url == BASE_URL
