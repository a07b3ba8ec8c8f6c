"""Precise unit tests for query parameter objects."""

from __future__ import annotations

import pytest

from scholars.graph.parameters import (
    AuthorPapersParams,
    AuthorParams,
    AuthorSearchParams,
    BasePaperField,
    PaperCitationsParams,
    PaperField,
    PaperParams,
    PaperSearchParams,
    papers,
)
from scholars.graph.runtime.pagination import Page, Paged


class TestFieldsParams:
    """Test single-record parameters."""

    def test_no_fields(self):
        assert AuthorParams().to_query() == {}
        assert PaperParams(None).to_query() == {}

    def test_fields_comma_joined(self):
        params = AuthorParams(["name", "hIndex", papers(), "name"])
        assert params.to_query() == {"fields": "name,hIndex,papers.title"}

    def test_equality(self):
        assert PaperParams(["title"]) == PaperParams([BasePaperField.TITLE])
        assert PaperParams(["title"]) != PaperParams(["year"])

    def test_not_paged(self):
        assert not isinstance(AuthorParams(), Paged)


class TestPagedParams:
    """Test paged parameters."""

    def test_default_page(self):
        params = AuthorPapersParams()
        assert params.page == Page()
        assert params.to_query() == {"offset": 0, "limit": 10}

    def test_key_order(self):
        params = PaperCitationsParams([PaperField.CONTEXTS, PaperField.TITLE], Page(20, 5))
        query = params.to_query()
        assert list(query) == ["offset", "limit", "fields"]
        assert query == {"offset": 20, "limit": 5, "fields": "contexts,title"}

    def test_paged_capability(self):
        params = AuthorPapersParams(page=Page(0, 50))
        assert isinstance(params, Paged)

        params.set_limit(18)
        params.next_page(50)
        assert params.get_offset() == 50
        assert params.get_limit() == 18
        assert params.to_query()["offset"] == 50


class TestSearchParams:
    """Test search parameters."""

    def test_key_order(self):
        params = PaperSearchParams("literature graph", [BasePaperField.TITLE], Page(10, 20))
        query = params.to_query()
        assert list(query) == ["offset", "limit", "query", "fields"]
        assert query["query"] == "literature graph"
        assert query["fields"] == "title"

    def test_fields_omitted(self):
        assert AuthorSearchParams("etzioni").to_query() == {
            "offset": 0,
            "limit": 10,
            "query": "etzioni",
        }

    @pytest.mark.parametrize("params_type", [AuthorSearchParams, PaperSearchParams])
    def test_empty_query_rejected(self, params_type):
        with pytest.raises(ValueError):
            params_type("")
