"""Pagination engine over single-page queries.

This module provides EndpointIter (blocking) and EndpointStream (async).
Both drive the same state machine: while items remain in the current page
they are returned one at a time; when the page is drained the engine checks
the requested cap, advances the endpoint's Page and dispatches exactly one
query for the next page.

Errors raised by a page query (transport, response or decode errors) are
propagated to the caller without stopping the engine: calling ``next`` again
retries the same page. An endpoint that fails forever therefore fails forever;
callers wanting fail-fast behavior simply stop at the first error, which is
what ``list(...)`` or a plain ``for`` loop do.
"""

from __future__ import annotations

from collections import deque
from collections.abc import AsyncIterator, Iterator
from time import perf_counter
from typing import Any, Generic, Protocol, TypeVar

from ...core.exceptions import ApiError, PaginationError
from ...models.batch import Batch, SearchBatch
from .definitions import Page, Results
from .telemetry import (
    log_page_completed,
    log_page_error,
    log_page_requested,
    log_pagination_exhausted,
)

T = TypeVar("T")


class PagedEndpoint(Protocol):
    """Endpoint the engine can drive: a Paged object with single-page queries."""

    def set_limit(self, limit: int) -> None: ...

    def next_page(self, next_offset: int) -> None: ...

    def get_offset(self) -> int: ...

    def get_limit(self) -> int: ...

    def query(self, client: Any) -> Batch[Any]: ...

    async def query_async(self, client: Any) -> Batch[Any]: ...


class _PaginationState(Generic[T]):
    """Paging state shared by the blocking and async front-ends."""

    def __init__(self, endpoint: PagedEndpoint, results: Results) -> None:
        self.endpoint = endpoint
        self.results = results
        self.endpoint_id: str = getattr(endpoint, "endpoint_id", "unknown")
        self.buffer: deque[T] = deque()
        # The first request targets the page the endpoint was built with.
        self.next_offset: int | None = endpoint.get_offset()
        self.count = 0
        self.pages = 0
        self.total: int | None = None
        self.exhausted = False
        self._started_at = 0.0

    def advance(self) -> bool:
        """Prepare the endpoint for the next page request.

        Returns:
            False when the iteration is over, True when a request must be sent
        """
        if self.exhausted:
            return False

        cap = self.results.cap
        if cap is not None:
            if self.count >= cap:
                return self._exhaust("cap_reached")
            remaining = cap - self.count
            if remaining <= self.endpoint.get_limit():
                try:
                    self.endpoint.set_limit(remaining)
                except PaginationError:
                    return self._exhaust("limit_rejected")

        if self.next_offset is None:
            return self._exhaust("no_next")
        try:
            self.endpoint.next_page(self.next_offset)
        except PaginationError:
            return self._exhaust("range_ceiling")

        log_page_requested(
            endpoint_id=self.endpoint_id,
            page_index=self.pages,
            offset=self.endpoint.get_offset(),
            limit=self.endpoint.get_limit(),
        )
        self._started_at = perf_counter()
        return True

    def update(self, batch: Batch[T]) -> bool:
        """Buffer a freshly decoded page.

        Returns:
            False if the page was empty, which ends the iteration
        """
        items = list(batch.data)
        if self.results.cap is not None:
            items = items[: max(self.results.cap - self.count, 0)]
        self.count += len(items)
        self.next_offset = batch.next
        if isinstance(batch, SearchBatch):
            self.total = batch.total
        self.buffer.extend(items)

        log_page_completed(
            endpoint_id=self.endpoint_id,
            page_index=self.pages,
            items=len(items),
            next_offset=batch.next,
            total=self.total,
            latency_ms=(perf_counter() - self._started_at) * 1000.0,
        )
        self.pages += 1

        if not items:
            return self._exhaust("empty_page")
        return True

    def error(self, exc: ApiError) -> None:
        log_page_error(
            endpoint_id=self.endpoint_id,
            page_index=self.pages,
            error_type=type(exc).__name__,
            error_message=str(exc),
        )

    def size_hint(self) -> tuple[int, int | None]:
        buffered = len(self.buffer)
        if self.exhausted:
            return buffered, buffered

        bounds = []
        if self.total is not None:
            bounds.append(max(min(self.total, Page.RANGE_CEILING) - self.count, 0))
        if self.results.cap is not None:
            bounds.append(max(self.results.cap - self.count, 0))
        if not bounds:
            return buffered, None
        return buffered, buffered + min(bounds)

    def _exhaust(self, reason: str) -> bool:
        self.exhausted = True
        log_pagination_exhausted(
            endpoint_id=self.endpoint_id, reason=reason, count=self.count, pages=self.pages
        )
        return False


class _EngineBase(Generic[T]):
    def __init__(self, endpoint: PagedEndpoint, results: Results, client: Any) -> None:
        self._state: _PaginationState[T] = _PaginationState(endpoint, results)
        self._client = client

    @property
    def total(self) -> int | None:
        """Total matches reported by a search endpoint, None until known."""
        return self._state.total

    @property
    def count(self) -> int:
        """Number of items fetched so far, buffered ones included."""
        return self._state.count

    def size_hint(self) -> tuple[int, int | None]:
        """Bounds on the number of items left to yield.

        The lower bound is the number of buffered items. The upper bound is
        only known for search endpoints (from the reported total, capped at
        the server range ceiling) or when a cap was requested; it is an upper
        bound, not an exact count.
        """
        return self._state.size_hint()


class EndpointIter(_EngineBase[T], Iterator[T]):
    """Blocking iterator over every item of a paged endpoint.

    Each page request blocks the calling thread until the transport returns.
    """

    def __iter__(self) -> EndpointIter[T]:
        return self

    def __next__(self) -> T:
        state = self._state
        if not state.buffer:
            if not state.advance():
                raise StopIteration
            try:
                batch = state.endpoint.query(self._client)
            except ApiError as exc:
                state.error(exc)
                raise
            if not state.update(batch):
                raise StopIteration
        return state.buffer.popleft()

    def __length_hint__(self) -> int:
        return self._state.size_hint()[0]


class EndpointStream(_EngineBase[T], AsyncIterator[T]):
    """Async iterator over every item of a paged endpoint.

    Suspends only while awaiting the transport; one request is in flight at a
    time. Cancelling the awaiting task aborts the in-flight request.
    """

    def __aiter__(self) -> EndpointStream[T]:
        return self

    async def __anext__(self) -> T:
        state = self._state
        if not state.buffer:
            if not state.advance():
                raise StopAsyncIteration
            try:
                batch = await state.endpoint.query_async(self._client)
            except ApiError as exc:
                state.error(exc)
                raise
            if not state.update(batch):
                raise StopAsyncIteration
        return state.buffer.popleft()
