"""Citation and reference data models."""

from __future__ import annotations

from .base import GraphModel
from .paper import BasePaper


class Citation(GraphModel):
    """A paper citing the queried paper."""

    citing_paper: BasePaper | None = None
    contexts: list[str] | None = None
    intents: list[str] | None = None
    # See https://www.semanticscholar.org/faq#influential-citations
    is_influential: bool | None = None


class Reference(GraphModel):
    """A paper cited by the queried paper."""

    cited_paper: BasePaper | None = None
    contexts: list[str] | None = None
    intents: list[str] | None = None
    is_influential: bool | None = None
