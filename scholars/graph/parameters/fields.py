"""Field selection for the ``fields`` query parameter.

The API returns only the fields listed in ``fields``; nested fields of
linked records are selected with a dotted prefix (``papers.title``,
``authors.name``, ``citations.year`` ...).

Enums:
    - PaperInfoField: Identity fields of a paper
    - BasePaperField: PaperInfoField plus counters and metadata
    - PaperField: BasePaperField plus citation context fields
    - FullPaperField: Fields only served by the single paper endpoint
    - AuthorInfoField: Identity fields of an author
    - AuthorField: AuthorInfoField plus profile fields

Selectors (papers, authors, citations, references) build dotted names.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from enum import Enum


class PaperInfoField(str, Enum):
    PAPER_ID = "paperId"
    URL = "url"
    TITLE = "title"
    VENUE = "venue"
    YEAR = "year"
    AUTHORS = "authors"

    def __str__(self) -> str:
        return self.value


class BasePaperField(str, Enum):
    """Paper fields selectable everywhere a paper is returned."""

    PAPER_ID = "paperId"
    URL = "url"
    TITLE = "title"
    VENUE = "venue"
    YEAR = "year"
    AUTHORS = "authors"
    EXTERNAL_IDS = "externalIds"
    ABSTRACT = "abstract"
    REFERENCE_COUNT = "referenceCount"
    CITATION_COUNT = "citationCount"
    INFLUENTIAL_CITATION_COUNT = "influentialCitationCount"
    IS_OPEN_ACCESS = "isOpenAccess"
    FIELDS_OF_STUDY = "fieldsOfStudy"

    def __str__(self) -> str:
        return self.value


class PaperField(str, Enum):
    """Fields of citation and reference records.

    CONTEXTS, INTENTS and IS_INFLUENTIAL describe the link itself; the other
    members select fields of the linked paper.
    """

    PAPER_ID = "paperId"
    URL = "url"
    TITLE = "title"
    VENUE = "venue"
    YEAR = "year"
    AUTHORS = "authors"
    EXTERNAL_IDS = "externalIds"
    ABSTRACT = "abstract"
    REFERENCE_COUNT = "referenceCount"
    CITATION_COUNT = "citationCount"
    INFLUENTIAL_CITATION_COUNT = "influentialCitationCount"
    IS_OPEN_ACCESS = "isOpenAccess"
    FIELDS_OF_STUDY = "fieldsOfStudy"
    CONTEXTS = "contexts"
    INTENTS = "intents"
    IS_INFLUENTIAL = "isInfluential"

    def __str__(self) -> str:
        return self.value


class FullPaperField(str, Enum):
    EMBEDDING = "embedding"
    TLDR = "tldr"

    def __str__(self) -> str:
        return self.value


class AuthorInfoField(str, Enum):
    AUTHOR_ID = "authorId"
    NAME = "name"

    def __str__(self) -> str:
        return self.value


class AuthorField(str, Enum):
    AUTHOR_ID = "authorId"
    NAME = "name"
    EXTERNAL_IDS = "externalIds"
    URL = "url"
    ALIASES = "aliases"
    AFFILIATIONS = "affiliations"
    HOMEPAGE = "homepage"
    PAPER_COUNT = "paperCount"
    CITATION_COUNT = "citationCount"
    H_INDEX = "hIndex"

    def __str__(self) -> str:
        return self.value


FieldLike = str | Enum


def field_name(field: FieldLike) -> str:
    """Wire name of a field, enum member or plain string."""
    if isinstance(field, Enum):
        return str(field.value)
    return str(field)


def _nested(prefix: str, field: FieldLike | None) -> str:
    if field is None:
        return prefix
    return f"{prefix}.{field_name(field)}"


def papers(field: FieldLike | None = None) -> str:
    """Select a field of an author's papers.

    A bare ``papers`` selection makes the API answer 500 Internal Server
    Error, so the default selects ``papers.title``, which returns the same
    payload the bare selection is documented to return.
    """
    return _nested("papers", field if field is not None else BasePaperField.TITLE)


def authors(field: FieldLike | None = None) -> str:
    return _nested("authors", field)


def citations(field: FieldLike | None = None) -> str:
    return _nested("citations", field)


def references(field: FieldLike | None = None) -> str:
    return _nested("references", field)


def normalize_fields(fields: Iterable[FieldLike] | None) -> list[str]:
    """Wire names of ``fields``, de-duplicated in first-seen order."""
    if fields is None:
        return []
    if isinstance(fields, (str, Enum)):
        fields = [fields]
    seen: dict[str, None] = {}
    for field in fields:
        seen.setdefault(field_name(field), None)
    return list(seen)


def all_author_info_fields() -> Iterator[AuthorInfoField]:
    yield from AuthorInfoField


def all_author_fields() -> Iterator[AuthorField]:
    yield from AuthorField


def all_paper_info_fields() -> Iterator[PaperInfoField]:
    yield from PaperInfoField


def all_base_paper_fields() -> Iterator[BasePaperField]:
    yield from BasePaperField


def all_paper_fields() -> Iterator[PaperField]:
    yield from PaperField


def all_author_with_papers_fields() -> Iterator[str]:
    """Every selectable field of an author including nested paper fields."""
    for field in AuthorField:
        yield field.value
    for field in BasePaperField:
        yield papers(field)


def all_paper_with_links_fields() -> Iterator[str]:
    """Every selectable field of a paper with its authors, citations and references."""
    for field in BasePaperField:
        if field is not BasePaperField.AUTHORS:
            yield field.value
    for field in AuthorInfoField:
        yield authors(field)
    for field in PaperInfoField:
        yield references(field)
    for field in PaperInfoField:
        yield citations(field)


def all_full_paper_fields() -> Iterator[str]:
    """Every selectable field of the single paper endpoint."""
    for field in FullPaperField:
        yield field.value
    for field in AuthorField:
        yield authors(field)
    for field in BasePaperField:
        if field is not BasePaperField.AUTHORS:
            yield field.value
    for field in PaperInfoField:
        yield citations(field)
    for field in PaperInfoField:
        yield references(field)
