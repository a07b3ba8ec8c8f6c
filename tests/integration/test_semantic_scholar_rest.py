"""Integration tests against the live Academic Graph API."""

import os

import pytest

from scholars.graph import (
    AuthorSearchParams,
    BasePaper,
    BasePaperField,
    GetAuthor,
    GetPaper,
    GetPaperCitations,
    GetPaperSearch,
    Page,
    PaperParams,
    PaperSearchParams,
    Results,
    SemanticScholarAsyncClient,
    SemanticScholarClient,
)
from scholars.graph.connectors.semantic_scholar import GetAuthorSearch

pytestmark = pytest.mark.skipif(
    os.environ.get("RUN_SCHOLARS_NETWORK_TESTS") != "1",
    reason="Requires network access to the Semantic Scholar API",
)

PAPER_ID = "649def34f8be52c8b66281af98ae884c09aef38b"
AUTHOR_ID = "1741101"


class TestBlockingQueries:
    """Test single requests with the blocking client."""

    def test_get_paper(self):
        with SemanticScholarClient() as client:
            paper = GetPaper(PAPER_ID, PaperParams(["title", "year", "tldr"])).query(client)
        assert paper.paper_id == PAPER_ID
        assert paper.year == 2018

    def test_get_author(self):
        with SemanticScholarClient() as client:
            author = GetAuthor(AUTHOR_ID).query(client)
        assert author.author_id == AUTHOR_ID
        assert author.name


class TestBlockingPaging:
    """Test paged iteration with the blocking client."""

    def test_paper_search_with_cap(self):
        search = GetPaperSearch(
            PaperSearchParams("literature graph", [BasePaperField.TITLE], Page(0, 50))
        )
        with SemanticScholarClient() as client:
            iterator = search.paged(Results.limit(68), client)
            papers = list(iterator)
        assert len(papers) == 68
        assert all(isinstance(p, BasePaper) for p in papers)
        assert iterator.total >= 68

    def test_paper_citations(self):
        with SemanticScholarClient() as client:
            citations = list(GetPaperCitations(PAPER_ID).paged(Results.limit(15), client))
        assert len(citations) == 15


class TestAsyncPaging:
    """Test paged iteration with the async client."""

    @pytest.mark.asyncio
    async def test_author_search(self):
        search = GetAuthorSearch(AuthorSearchParams("etzioni", ["name"], Page(0, 5)))
        async with SemanticScholarAsyncClient() as client:
            authors = [a async for a in search.paged_async(Results.limit(12), client)]
        assert len(authors) == 12
        assert all(a.name for a in authors)
