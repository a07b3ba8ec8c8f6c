"""Semantic Scholar Academic Graph connector."""

from .client import SemanticScholarAsyncClient, SemanticScholarClient
from .rest import (
    GetAuthor,
    GetAuthorPapers,
    GetAuthorSearch,
    GetPaper,
    GetPaperAuthors,
    GetPaperCitations,
    GetPaperReferences,
    GetPaperSearch,
)

__all__ = [
    "SemanticScholarClient",
    "SemanticScholarAsyncClient",
    "GetAuthor",
    "GetAuthorPapers",
    "GetAuthorSearch",
    "GetPaper",
    "GetPaperAuthors",
    "GetPaperCitations",
    "GetPaperReferences",
    "GetPaperSearch",
]
