"""Property-based tests for Page arithmetic and the pagination engine."""

from __future__ import annotations

import pytest
from hypothesis import given, settings, strategies as st

from scholars.graph.core import LimitBoundsError, RangeBoundsError
from scholars.graph.models import SearchBatch
from scholars.graph.runtime.pagination import EndpointIter, Page, Paged, Results

CEILING = Page.RANGE_CEILING

offsets = st.integers(min_value=0, max_value=CEILING + 200)
limits = st.integers(min_value=-5, max_value=120)


class SearchCorpus(Paged):
    """Search endpoint over ``range(size)`` reporting ``total=size``."""

    endpoint_id = "search_corpus"

    def __init__(self, size: int, page: Page) -> None:
        self.size = size
        self.requests: list[tuple[int, int]] = []
        self._page = page

    @property
    def page(self) -> Page:
        return self._page

    def query(self, client: object) -> SearchBatch[int]:
        offset, limit = self._page.get_offset(), self._page.get_limit()
        self.requests.append((offset, limit))
        end = min(offset + limit, self.size)
        next_offset = end if end < self.size else None
        return SearchBatch[int](
            offset=offset, next=next_offset, data=list(range(offset, end)), total=self.size
        )

    async def query_async(self, client: object) -> SearchBatch[int]:
        return self.query(client)


@st.composite
def valid_pages(draw) -> Page:
    offset = draw(st.integers(min_value=0, max_value=CEILING - 1))
    limit = draw(st.integers(min_value=1, max_value=min(100, CEILING - offset)))
    return Page(offset, limit)


@given(offsets, limits)
def test_page_accepts_exactly_the_valid_window(offset: int, limit: int) -> None:
    if not 1 <= limit <= 100:
        with pytest.raises(LimitBoundsError):
            Page(offset, limit)
    elif offset + limit > CEILING:
        with pytest.raises(RangeBoundsError) as exc_info:
            Page(offset, limit)
        assert exc_info.value.available == min(max(0, CEILING - offset), 100)
    else:
        page = Page(offset, limit)
        assert page.to_query() == {"offset": offset, "limit": limit}


@given(valid_pages(), offsets)
def test_next_page_clamps_or_fails_at_ceiling(page: Page, next_offset: int) -> None:
    limit = page.get_limit()
    if next_offset >= CEILING:
        with pytest.raises(RangeBoundsError):
            page.next_page(next_offset)
        return
    page.next_page(next_offset)
    assert page.get_offset() == next_offset
    assert page.get_limit() == min(limit, CEILING - next_offset)
    assert page.get_offset() + page.get_limit() <= CEILING


@settings(max_examples=150, deadline=None)
@given(
    size=st.integers(min_value=0, max_value=400),
    limit=st.integers(min_value=1, max_value=100),
    cap=st.one_of(st.none(), st.integers(min_value=0, max_value=450)),
)
def test_engine_yields_min_of_cap_and_corpus_in_order(
    size: int, limit: int, cap: int | None
) -> None:
    endpoint = SearchCorpus(size, Page(0, limit))
    results = Results.all() if cap is None else Results.limit(cap)

    items = list(EndpointIter(endpoint, results, client=None))

    expected = size if cap is None else min(cap, size)
    assert items == list(range(expected))
    for offset, request_limit in endpoint.requests:
        assert 1 <= request_limit <= limit
        assert offset + request_limit <= CEILING


@settings(max_examples=100, deadline=None)
@given(
    size=st.integers(min_value=1, max_value=300),
    limit=st.integers(min_value=1, max_value=100),
    cap=st.one_of(st.none(), st.integers(min_value=1, max_value=350)),
)
def test_size_hint_brackets_remaining_items(size: int, limit: int, cap: int | None) -> None:
    endpoint = SearchCorpus(size, Page(0, limit))
    results = Results.all() if cap is None else Results.limit(cap)
    engine = EndpointIter(endpoint, results, client=None)
    remaining = size if cap is None else min(cap, size)

    for _ in engine:
        remaining -= 1
        lower, upper = engine.size_hint()
        assert lower <= remaining
        assert upper is not None and upper >= remaining
    assert remaining == 0
