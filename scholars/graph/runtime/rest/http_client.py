"""HTTP client helpers."""

from __future__ import annotations

import asyncio
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

import aiohttp
import requests

from ...core.exceptions import TransportError


@dataclass(frozen=True)
class HTTPResponse:
    """Raw response of one HTTP exchange.

    Attributes:
        status: HTTP status code
        body: Raw body bytes
        url: Final request URL, query string included
        headers: Response headers
    """

    status: int
    body: bytes
    url: str
    headers: Mapping[str, str] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300


def join_url(base_url: Optional[str], url: str) -> str:
    """Combine base_url and a relative url."""
    if not base_url or url.startswith("http"):
        return url
    return f"{base_url.rstrip('/')}/{url.lstrip('/')}"


class HTTPClient:
    """Async HTTP client wrapper."""

    def __init__(self, base_url: Optional[str] = None, timeout: float = 30.0) -> None:
        self.base_url = base_url
        self.timeout = aiohttp.ClientTimeout(total=timeout)
        self._session: Optional[aiohttp.ClientSession] = None

    @property
    def session(self) -> aiohttp.ClientSession:
        """Get or create session."""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(timeout=self.timeout)
        return self._session

    async def request(
        self,
        method: str,
        url: str,
        params: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> HTTPResponse:
        """Perform one request and read the whole body.

        Raises:
            TransportError: If the exchange could not be completed
        """
        url = join_url(self.base_url, url)
        try:
            async with self.session.request(
                method, url, params=params, headers=headers
            ) as response:
                body = await response.read()
                return HTTPResponse(
                    status=response.status,
                    body=body,
                    url=str(response.url),
                    headers=dict(response.headers),
                )
        except (aiohttp.ClientError, asyncio.TimeoutError) as exc:
            raise TransportError(f"client error: {exc!r}", url=url) from exc

    async def close(self) -> None:
        """Close session."""
        if self._session and not self._session.closed:
            await self._session.close()

    async def __aenter__(self) -> "HTTPClient":
        """Context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit."""
        await self.close()


class BlockingHTTPClient:
    """Blocking HTTP client wrapper backed by a requests session."""

    def __init__(self, base_url: Optional[str] = None, timeout: float = 30.0) -> None:
        self.base_url = base_url
        self.timeout = timeout
        self._session: Optional[requests.Session] = None

    @property
    def session(self) -> requests.Session:
        """Get or create session."""
        if self._session is None:
            self._session = requests.Session()
        return self._session

    def request(
        self,
        method: str,
        url: str,
        params: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> HTTPResponse:
        """Perform one request and read the whole body.

        Raises:
            TransportError: If the exchange could not be completed
        """
        url = join_url(self.base_url, url)
        try:
            response = self.session.request(
                method, url, params=params, headers=headers, timeout=self.timeout
            )
        except requests.RequestException as exc:
            raise TransportError(f"client error: {exc!r}", url=url) from exc
        return HTTPResponse(
            status=response.status_code,
            body=response.content,
            url=response.url,
            headers=dict(response.headers),
        )

    def close(self) -> None:
        """Close session."""
        if self._session is not None:
            self._session.close()
            self._session = None

    def __enter__(self) -> "BlockingHTTPClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
