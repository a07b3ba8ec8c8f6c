"""Scholars Graph - typed client for the Semantic Scholar Academic Graph API."""

from .connectors.semantic_scholar import (
    GetAuthor,
    GetAuthorPapers,
    GetAuthorSearch,
    GetPaper,
    GetPaperAuthors,
    GetPaperCitations,
    GetPaperReferences,
    GetPaperSearch,
    SemanticScholarAsyncClient,
    SemanticScholarClient,
)
from .core import (
    ApiError,
    DecodeError,
    LimitBoundsError,
    PaginationError,
    RangeBoundsError,
    RateLimitError,
    ResponseError,
    ScholarsError,
    TransportError,
)
from .models import (
    Author,
    AuthorExternalIds,
    AuthorInfo,
    AuthorWithPapers,
    BasePaper,
    Batch,
    Citation,
    Embedding,
    ErrorBody,
    FullPaper,
    PaperExternalIds,
    PaperInfo,
    PaperWithLinks,
    Reference,
    SearchBatch,
    Tldr,
)
from .parameters import (
    AuthorField,
    AuthorInfoField,
    AuthorPapersParams,
    AuthorParams,
    AuthorSearchParams,
    BasePaperField,
    FullPaperField,
    PaperAuthorsParams,
    PaperCitationsParams,
    PaperField,
    PaperInfoField,
    PaperParams,
    PaperReferencesParams,
    PaperSearchParams,
    authors,
    citations,
    papers,
    references,
)
from .runtime.pagination import EndpointIter, EndpointStream, Page, Paged, Results

__version__ = "0.1.0"

__all__ = [
    # Clients
    "SemanticScholarClient",
    "SemanticScholarAsyncClient",
    # Endpoints
    "GetAuthor",
    "GetAuthorPapers",
    "GetAuthorSearch",
    "GetPaper",
    "GetPaperAuthors",
    "GetPaperCitations",
    "GetPaperReferences",
    "GetPaperSearch",
    # Pagination
    "Page",
    "Paged",
    "Results",
    "EndpointIter",
    "EndpointStream",
    # Parameters
    "AuthorParams",
    "AuthorPapersParams",
    "AuthorSearchParams",
    "PaperParams",
    "PaperAuthorsParams",
    "PaperCitationsParams",
    "PaperReferencesParams",
    "PaperSearchParams",
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
    # Models
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
    # Exceptions
    "ScholarsError",
    "PaginationError",
    "RangeBoundsError",
    "LimitBoundsError",
    "ApiError",
    "TransportError",
    "ResponseError",
    "RateLimitError",
    "DecodeError",
]
