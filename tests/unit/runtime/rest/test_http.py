"""Precise unit tests for HTTPClient and BlockingHTTPClient.

Tests focus on session management, URL joining and wrapping of client
errors into TransportError.
"""

from __future__ import annotations

import asyncio
from unittest.mock import MagicMock

import aiohttp
import pytest
import requests

from scholars.graph.core import TransportError
from scholars.graph.runtime.rest import BlockingHTTPClient, HTTPClient, HTTPResponse
from scholars.graph.runtime.rest.http_client import join_url


class TestJoinUrl:
    """Test join_url."""

    @pytest.mark.parametrize(
        "base,url,expected",
        [
            ("https://api.example.com/graph/v1/", "paper/1", "https://api.example.com/graph/v1/paper/1"),
            ("https://api.example.com/graph/v1", "/paper/1", "https://api.example.com/graph/v1/paper/1"),
            (None, "paper/1", "paper/1"),
            ("https://api.example.com", "https://other.example.com/x", "https://other.example.com/x"),
        ],
    )
    def test_join(self, base, url, expected):
        assert join_url(base, url) == expected


class TestHTTPResponse:
    """Test HTTPResponse."""

    @pytest.mark.parametrize("status,ok", [(200, True), (204, True), (301, False), (404, False), (500, False)])
    def test_ok(self, status, ok):
        assert HTTPResponse(status=status, body=b"", url="u").ok is ok


class TestHTTPClientSessionManagement:
    """Test HTTPClient session management."""

    def test_init(self):
        """Test HTTPClient initialization."""
        client = HTTPClient(timeout=10.0)
        assert client.timeout.total == 10.0
        assert client._session is None

    def test_init_with_base_url(self):
        client = HTTPClient(base_url="https://api.example.com", timeout=30.0)
        assert client.base_url == "https://api.example.com"

    @pytest.mark.asyncio
    async def test_session_property_creates_session(self):
        client = HTTPClient()
        session = client.session
        assert isinstance(session, aiohttp.ClientSession)
        assert client._session is session
        await client.close()

    @pytest.mark.asyncio
    async def test_session_property_recreates_closed_session(self):
        client = HTTPClient()
        session1 = client.session
        await session1.close()

        session2 = client.session
        assert session1 is not session2
        assert not session2.closed
        await client.close()

    @pytest.mark.asyncio
    async def test_close_idempotent(self):
        client = HTTPClient()
        await client.close()
        await client.close()

    @pytest.mark.asyncio
    async def test_context_manager(self):
        async with HTTPClient() as client:
            assert client.session is not None

        assert client._session is None or client._session.closed


class TestHTTPClientErrors:
    """Test HTTPClient error wrapping."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "error",
        [aiohttp.ClientConnectionError("connection reset"), asyncio.TimeoutError()],
    )
    async def test_client_errors_become_transport_errors(self, error):
        client = HTTPClient(base_url="https://api.example.com/graph/v1/")
        session = MagicMock()
        session.closed = False
        session.request = MagicMock(side_effect=error)
        client._session = session

        with pytest.raises(TransportError) as exc_info:
            await client.request("GET", "paper/1")

        assert exc_info.value.url == "https://api.example.com/graph/v1/paper/1"
        assert exc_info.value.__cause__ is error


class TestBlockingHTTPClient:
    """Test BlockingHTTPClient."""

    def test_session_created_lazily(self):
        client = BlockingHTTPClient(base_url="https://api.example.com")
        assert client._session is None
        assert isinstance(client.session, requests.Session)
        client.close()
        assert client._session is None

    def test_request_reads_response(self):
        client = BlockingHTTPClient(base_url="https://api.example.com/graph/v1/", timeout=5.0)
        raw = MagicMock()
        raw.status_code = 200
        raw.content = b'{"ok": true}'
        raw.url = "https://api.example.com/graph/v1/paper/1?fields=title"
        raw.headers = {"Content-Type": "application/json"}
        session = MagicMock()
        session.request = MagicMock(return_value=raw)
        client._session = session

        response = client.request("GET", "paper/1", params={"fields": "title"})

        assert response.status == 200
        assert response.body == b'{"ok": true}'
        assert response.url == raw.url
        session.request.assert_called_once_with(
            "GET",
            "https://api.example.com/graph/v1/paper/1",
            params={"fields": "title"},
            headers=None,
            timeout=5.0,
        )

    def test_request_exception_becomes_transport_error(self):
        client = BlockingHTTPClient(base_url="https://api.example.com")
        error = requests.ConnectionError("refused")
        session = MagicMock()
        session.request = MagicMock(side_effect=error)
        client._session = session

        with pytest.raises(TransportError) as exc_info:
            client.request("GET", "paper/1")
        assert exc_info.value.__cause__ is error

    def test_context_manager_closes(self):
        with BlockingHTTPClient() as client:
            session = client.session
        assert client._session is None
        assert session is not None
