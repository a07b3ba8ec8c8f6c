"""Semantic Scholar REST endpoints and wrappers."""

from .operations import (
    BaseEndpoint,
    GetAuthor,
    GetAuthorPapers,
    GetAuthorSearch,
    GetPaper,
    GetPaperAuthors,
    GetPaperCitations,
    GetPaperReferences,
    GetPaperSearch,
    ListEndpoint,
)

__all__ = [
    "BaseEndpoint",
    "ListEndpoint",
    "GetAuthor",
    "GetAuthorPapers",
    "GetAuthorSearch",
    "GetPaper",
    "GetPaperAuthors",
    "GetPaperCitations",
    "GetPaperReferences",
    "GetPaperSearch",
]
