"""Data models for Academic Graph payloads.

Architecture:
    This module exports the Pydantic v2 models decoded from API responses.
    All models are immutable (frozen=True) and ignore unknown keys, so a
    narrower model (e.g. AuthorInfo) can be decoded from a wider payload
    (e.g. an author with papers).

Model Categories:
    - Authors: AuthorInfo, Author, AuthorExternalIds, AuthorWithPapers
    - Papers: PaperInfo, BasePaper, PaperExternalIds, PaperWithLinks, FullPaper
    - Links: Citation, Reference
    - Extras: Embedding, Tldr
    - Paging: Batch, SearchBatch
    - Errors: ErrorBody
"""

from .author import Author, AuthorExternalIds, AuthorInfo, AuthorWithPapers
from .batch import Batch, SearchBatch
from .citation import Citation, Reference
from .error import ErrorBody
from .paper import (
    BasePaper,
    Embedding,
    FullPaper,
    PaperExternalIds,
    PaperInfo,
    PaperWithLinks,
    Tldr,
)

__all__ = [
    "AuthorInfo",
    "Author",
    "AuthorExternalIds",
    "AuthorWithPapers",
    "PaperInfo",
    "BasePaper",
    "PaperExternalIds",
    "PaperWithLinks",
    "FullPaper",
    "Citation",
    "Reference",
    "Embedding",
    "Tldr",
    "Batch",
    "SearchBatch",
    "ErrorBody",
]
