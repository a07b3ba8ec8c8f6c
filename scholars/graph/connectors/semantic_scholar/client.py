"""Semantic Scholar clients.

Both clients are REST transports preconfigured with the Academic Graph base
URL and, when available, the API key header. They may be shared by any
number of endpoints and pagination engines; close them when done, or use
them as context managers.
"""

from __future__ import annotations

import os

from scholars.graph.runtime.rest import (
    BlockingHTTPClient,
    BlockingRESTTransport,
    HTTPClient,
    RESTTransport,
)

from .config import API_KEY_ENV, API_KEY_HEADER, BASE_URL, DEFAULT_TIMEOUT


def _auth_headers(api_key: str | None) -> dict[str, str]:
    key = api_key if api_key is not None else os.environ.get(API_KEY_ENV)
    return {API_KEY_HEADER: key} if key else {}


class SemanticScholarClient(BlockingRESTTransport):
    """Blocking client backed by a requests session."""

    def __init__(
        self,
        *,
        base_url: str = BASE_URL,
        api_key: str | None = None,
        timeout: float = DEFAULT_TIMEOUT,
        http: BlockingHTTPClient | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            base_url: Academic Graph base URL
            api_key: API key, read from SEMANTIC_SCHOLAR_API_KEY when omitted
            timeout: Request timeout in seconds
            http: Pre-built HTTP client, e.g. to share a session
        """
        super().__init__(base_url, timeout=timeout, headers=_auth_headers(api_key), http=http)


class SemanticScholarAsyncClient(RESTTransport):
    """Async client backed by an aiohttp session."""

    def __init__(
        self,
        *,
        base_url: str = BASE_URL,
        api_key: str | None = None,
        timeout: float = DEFAULT_TIMEOUT,
        http: HTTPClient | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            base_url: Academic Graph base URL
            api_key: API key, read from SEMANTIC_SCHOLAR_API_KEY when omitted
            timeout: Request timeout in seconds
            http: Pre-built HTTP client, e.g. to share a session
        """
        super().__init__(base_url, timeout=timeout, headers=_auth_headers(api_key), http=http)
