"""REST request runners using endpoint specs and response adapters.

Both runners perform exactly one request/response cycle and share the
decoding and error classification in ``decode_response``; they only differ
in how the transport call suspends.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any

from pydantic import ValidationError

from ...core.exceptions import DecodeError, RateLimitError, ResponseError
from ...models.error import ErrorBody
from .http_client import HTTPResponse
from .transport import BlockingRESTTransport, RESTTransport

logger = logging.getLogger(__name__)

DEFAULT_RETRY_AFTER = 60


@dataclass(frozen=True)
class RestEndpointSpec:
    id: str
    method: str  # "GET"
    build_path: Callable[[dict[str, Any]], str]
    build_query: Callable[[dict[str, Any]], dict[str, Any]] | None = None
    build_headers: Callable[[dict[str, Any]], dict[str, str]] | None = None


class ResponseAdapter:
    def parse(self, response: Any, params: dict[str, Any]) -> Any:
        return response

    @property
    def typename(self) -> str:
        """Name of the type ``parse`` decodes into, for diagnostics."""
        return type(self).__name__


def _header(headers: Mapping[str, str], name: str) -> str | None:
    lowered = name.lower()
    for key, value in headers.items():
        if key.lower() == lowered:
            return value
    return None


def _retry_after(headers: Mapping[str, str]) -> int:
    value = _header(headers, "Retry-After")
    try:
        return int(value) if value is not None else DEFAULT_RETRY_AFTER
    except ValueError:
        return DEFAULT_RETRY_AFTER


def decode_response(response: HTTPResponse, adapter: ResponseAdapter, params: dict[str, Any]) -> Any:
    """Decode a raw response into the adapter's type or raise a typed error.

    Args:
        response: Raw response from the transport
        adapter: Adapter for the success payload
        params: Request parameters, forwarded to the adapter

    Returns:
        Parsed response from the adapter

    Raises:
        ResponseError: Non-success status with a decodable error body
        RateLimitError: Status 429 with a decodable error body
        DecodeError: Body is not JSON, or does not match the expected shape
    """
    try:
        payload = json.loads(response.body)
    except ValueError as exc:
        raise DecodeError(
            f"could not parse JSON response: {exc}", typename="JSON", url=response.url
        ) from exc

    if not response.ok:
        try:
            body = ErrorBody.model_validate(payload)
        except ValidationError as exc:
            raise DecodeError(
                f"could not parse ErrorBody data from JSON: {exc}",
                typename=ErrorBody.__name__,
                url=response.url,
            ) from exc
        message = f"response returned an error ({response.status}): {body}"
        if response.status == 429:
            raise RateLimitError(
                message, url=response.url, error=body, retry_after=_retry_after(response.headers)
            )
        raise ResponseError(message, status_code=response.status, url=response.url, error=body)

    try:
        return adapter.parse(payload, params)
    except ValidationError as exc:
        raise DecodeError(
            f"could not parse {adapter.typename} data from JSON: {exc}",
            typename=adapter.typename,
            url=response.url,
        ) from exc


def _prepare(
    spec: RestEndpointSpec, params: dict[str, Any]
) -> tuple[str, dict[str, Any] | None, dict[str, str] | None]:
    path = spec.build_path(params)
    query = spec.build_query(params) if spec.build_query else None
    headers = spec.build_headers(params) if spec.build_headers else None
    logger.debug(
        "querying Semantic Scholar API",
        extra={"endpoint_id": spec.id, "path": path, "query": query},
    )
    return path, query, headers


class RestRunner:
    def __init__(self, transport: RESTTransport) -> None:
        self._t = transport

    async def run(
        self, *, spec: RestEndpointSpec, adapter: ResponseAdapter, params: dict[str, Any]
    ) -> Any:
        path, query, headers = _prepare(spec, params)
        response = await self._t.request(spec.method, path, params=query, headers=headers)
        return decode_response(response, adapter, params)


class BlockingRestRunner:
    def __init__(self, transport: BlockingRESTTransport) -> None:
        self._t = transport

    def run(
        self, *, spec: RestEndpointSpec, adapter: ResponseAdapter, params: dict[str, Any]
    ) -> Any:
        path, query, headers = _prepare(spec, params)
        response = self._t.request(spec.method, path, params=query, headers=headers)
        return decode_response(response, adapter, params)
