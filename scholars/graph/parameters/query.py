"""Query parameter objects.

Each endpoint takes one parameter object. Paged endpoints embed a Page and
expose it through the Paged capability so the pagination engine can move
the window without knowing the other parameters.

Serialized key order is ``offset``, ``limit``, ``query``, ``fields``;
``fields`` is omitted when no field was selected.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from ..runtime.pagination.definitions import Page, Paged
from .fields import FieldLike, normalize_fields


class FieldsParams:
    """Parameters holding only a field selection."""

    def __init__(self, fields: Iterable[FieldLike] | None = None) -> None:
        self.fields = normalize_fields(fields)

    def to_query(self) -> dict[str, Any]:
        if not self.fields:
            return {}
        return {"fields": ",".join(self.fields)}

    def __eq__(self, other: Any) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.to_query() == other.to_query()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.to_query()!r})"


class PagedFieldsParams(FieldsParams, Paged):
    """Field selection plus a result window."""

    def __init__(
        self, fields: Iterable[FieldLike] | None = None, page: Page | None = None
    ) -> None:
        super().__init__(fields)
        self._page = page if page is not None else Page()

    @property
    def page(self) -> Page:
        return self._page

    def to_query(self) -> dict[str, Any]:
        return {**self._page.to_query(), **super().to_query()}


class SearchParams(PagedFieldsParams):
    """Plain-text search query, field selection and result window.

    No special query syntax is supported by the API.

    Raises:
        ValueError: If query is empty
    """

    def __init__(
        self,
        query: str,
        fields: Iterable[FieldLike] | None = None,
        page: Page | None = None,
    ) -> None:
        if not query:
            raise ValueError("search query must not be empty")
        super().__init__(fields, page)
        self.query = query

    def to_query(self) -> dict[str, Any]:
        q: dict[str, Any] = self._page.to_query()
        q["query"] = self.query
        if self.fields:
            q["fields"] = ",".join(self.fields)
        return q


class AuthorParams(FieldsParams):
    """Single author lookup. Fields: AuthorField and ``papers(...)`` selectors."""


class PaperParams(FieldsParams):
    """Single paper lookup.

    Fields: BasePaperField, FullPaperField and the ``authors(...)``,
    ``citations(...)`` and ``references(...)`` selectors.
    """


class AuthorPapersParams(PagedFieldsParams):
    """Papers of an author. Fields: BasePaperField and link selectors."""


class PaperAuthorsParams(PagedFieldsParams):
    """Authors of a paper. Fields: AuthorField and ``papers(...)`` selectors."""


class PaperCitationsParams(PagedFieldsParams):
    """Citations of a paper. Fields: PaperField."""


class PaperReferencesParams(PagedFieldsParams):
    """References of a paper. Fields: PaperField."""


class AuthorSearchParams(SearchParams):
    """Author search. Fields: AuthorField and ``papers(...)`` selectors."""


class PaperSearchParams(SearchParams):
    """Paper search. Fields: BasePaperField."""
