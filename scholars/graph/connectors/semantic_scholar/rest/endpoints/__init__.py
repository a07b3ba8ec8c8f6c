"""Semantic Scholar REST endpoint registry.

This module discovers and exports all endpoint specifications and adapters
from the modular endpoint structure.
"""

from __future__ import annotations

from scholars.graph.runtime.rest import ResponseAdapter, RestEndpointSpec

from .author.details import SPEC as AuthorSpec  # noqa: N811
from .author.details import Adapter as AuthorAdapter
from .author.papers import SPEC as AuthorPapersSpec  # noqa: N811
from .author.papers import Adapter as AuthorPapersAdapter
from .author.search import SPEC as AuthorSearchSpec  # noqa: N811
from .author.search import Adapter as AuthorSearchAdapter
from .paper.authors import SPEC as PaperAuthorsSpec  # noqa: N811
from .paper.authors import Adapter as PaperAuthorsAdapter
from .paper.citations import SPEC as PaperCitationsSpec  # noqa: N811
from .paper.citations import Adapter as PaperCitationsAdapter
from .paper.details import SPEC as PaperSpec  # noqa: N811
from .paper.details import Adapter as PaperAdapter
from .paper.references import SPEC as PaperReferencesSpec  # noqa: N811
from .paper.references import Adapter as PaperReferencesAdapter
from .paper.search import SPEC as PaperSearchSpec  # noqa: N811
from .paper.search import Adapter as PaperSearchAdapter

# Registry mapping endpoint IDs to specs and adapters
_ENDPOINT_REGISTRY: dict[str, tuple[RestEndpointSpec, type[ResponseAdapter]]] = {
    "author": (AuthorSpec, AuthorAdapter),
    "author_papers": (AuthorPapersSpec, AuthorPapersAdapter),
    "author_search": (AuthorSearchSpec, AuthorSearchAdapter),
    "paper": (PaperSpec, PaperAdapter),
    "paper_authors": (PaperAuthorsSpec, PaperAuthorsAdapter),
    "paper_citations": (PaperCitationsSpec, PaperCitationsAdapter),
    "paper_references": (PaperReferencesSpec, PaperReferencesAdapter),
    "paper_search": (PaperSearchSpec, PaperSearchAdapter),
}


def get_endpoint_spec(endpoint_id: str) -> RestEndpointSpec | None:
    """Get endpoint specification by ID.

    Args:
        endpoint_id: Endpoint identifier (e.g., "author", "paper_search")

    Returns:
        RestEndpointSpec if found, None otherwise
    """
    entry = _ENDPOINT_REGISTRY.get(endpoint_id)
    return entry[0] if entry else None


def get_endpoint_adapter(endpoint_id: str) -> type[ResponseAdapter] | None:
    """Get endpoint adapter class by ID.

    Args:
        endpoint_id: Endpoint identifier (e.g., "author", "paper_search")

    Returns:
        Adapter class if found, None otherwise
    """
    entry = _ENDPOINT_REGISTRY.get(endpoint_id)
    return entry[1] if entry else None


def list_endpoints() -> list[str]:
    return list(_ENDPOINT_REGISTRY)


__all__ = [
    "get_endpoint_spec",
    "get_endpoint_adapter",
    "list_endpoints",
]
