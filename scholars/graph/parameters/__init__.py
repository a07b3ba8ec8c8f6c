"""Query parameters and field selection."""

from .fields import (
    AuthorField,
    AuthorInfoField,
    BasePaperField,
    FullPaperField,
    PaperField,
    PaperInfoField,
    all_author_fields,
    all_author_info_fields,
    all_author_with_papers_fields,
    all_base_paper_fields,
    all_full_paper_fields,
    all_paper_fields,
    all_paper_info_fields,
    all_paper_with_links_fields,
    authors,
    citations,
    field_name,
    normalize_fields,
    papers,
    references,
)
from .query import (
    AuthorPapersParams,
    AuthorParams,
    AuthorSearchParams,
    FieldsParams,
    PagedFieldsParams,
    PaperAuthorsParams,
    PaperCitationsParams,
    PaperParams,
    PaperReferencesParams,
    PaperSearchParams,
    SearchParams,
)

__all__ = [
    "PaperInfoField",
    "BasePaperField",
    "PaperField",
    "FullPaperField",
    "AuthorInfoField",
    "AuthorField",
    "papers",
    "authors",
    "citations",
    "references",
    "field_name",
    "normalize_fields",
    "all_author_info_fields",
    "all_author_fields",
    "all_paper_info_fields",
    "all_base_paper_fields",
    "all_paper_fields",
    "all_author_with_papers_fields",
    "all_paper_with_links_fields",
    "all_full_paper_fields",
    "FieldsParams",
    "PagedFieldsParams",
    "SearchParams",
    "AuthorParams",
    "PaperParams",
    "AuthorPapersParams",
    "PaperAuthorsParams",
    "PaperCitationsParams",
    "PaperReferencesParams",
    "AuthorSearchParams",
    "PaperSearchParams",
]
