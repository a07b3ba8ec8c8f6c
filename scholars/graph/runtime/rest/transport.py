"""REST transports: base URL, default headers and session ownership."""

from __future__ import annotations

from typing import Any

from .http_client import BlockingHTTPClient, HTTPClient, HTTPResponse


def _bind_base_url(http: Any, base_url: str) -> Any:
    """Give a pre-built HTTP client the transport base URL.

    Raises:
        ValueError: If the client is already bound to another base URL
    """
    if http.base_url is None:
        http.base_url = base_url
    elif http.base_url.rstrip("/") != base_url.rstrip("/"):
        raise ValueError(
            f"HTTP client base_url {http.base_url!r} does not match {base_url!r}"
        )
    return http


def _merge_headers(
    defaults: dict[str, str], headers: dict[str, str] | None
) -> dict[str, str] | None:
    if not defaults and not headers:
        return None
    return {**defaults, **(headers or {})}


class RESTTransport:
    """Async REST transport.

    Instances may be shared by any number of concurrent queries; the
    underlying aiohttp session handles connection pooling.
    """

    def __init__(
        self,
        base_url: str,
        *,
        timeout: float = 30.0,
        headers: dict[str, str] | None = None,
        http: HTTPClient | None = None,
    ) -> None:
        self._http = (
            _bind_base_url(http, base_url)
            if http is not None
            else HTTPClient(base_url=base_url, timeout=timeout)
        )
        self._headers = dict(headers or {})

    @property
    def base_url(self) -> str | None:
        return self._http.base_url

    async def request(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> HTTPResponse:
        return await self._http.request(
            method, path, params=params, headers=_merge_headers(self._headers, headers)
        )

    async def close(self) -> None:
        await self._http.close()

    async def __aenter__(self) -> RESTTransport:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()


class BlockingRESTTransport:
    """Blocking REST transport, every request blocks the calling thread."""

    def __init__(
        self,
        base_url: str,
        *,
        timeout: float = 30.0,
        headers: dict[str, str] | None = None,
        http: BlockingHTTPClient | None = None,
    ) -> None:
        self._http = (
            _bind_base_url(http, base_url)
            if http is not None
            else BlockingHTTPClient(base_url=base_url, timeout=timeout)
        )
        self._headers = dict(headers or {})

    @property
    def base_url(self) -> str | None:
        return self._http.base_url

    def request(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> HTTPResponse:
        return self._http.request(
            method, path, params=params, headers=_merge_headers(self._headers, headers)
        )

    def close(self) -> None:
        self._http.close()

    def __enter__(self) -> BlockingRESTTransport:
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
