"""Pagination windows and the pagination engine."""

from .definitions import Bounds, Page, Paged, Results
from .executors import EndpointIter, EndpointStream, PagedEndpoint

__all__ = [
    "Bounds",
    "Page",
    "Paged",
    "Results",
    "PagedEndpoint",
    "EndpointIter",
    "EndpointStream",
]
