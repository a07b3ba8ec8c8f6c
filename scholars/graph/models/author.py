"""Author data models."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from pydantic import Field, field_validator

from .base import GraphModel

if TYPE_CHECKING:
    from .paper import BasePaper


class AuthorInfo(GraphModel):
    """Author identity as embedded in paper payloads."""

    author_id: str | None = None
    name: str | None = None

    @field_validator("author_id", mode="before")
    @classmethod
    def validate_author_id(cls, v: Any) -> Any:
        """Accept numeric identifiers."""
        if isinstance(v, int) and not isinstance(v, bool):
            return str(v)
        return v


class AuthorExternalIds(GraphModel):
    """External identifiers of an author."""

    dblp: list[str] | None = Field(None, alias="DBLP")
    orcid: str | None = Field(None, alias="ORCID")


class Author(AuthorInfo):
    """Author details."""

    external_ids: AuthorExternalIds | None = None
    url: str | None = None
    aliases: list[str] | None = None
    affiliations: list[str] | None = None
    homepage: str | None = None
    paper_count: int | None = None
    citation_count: int | None = None
    h_index: int | None = None


class AuthorWithPapers(Author):
    """Author details along the author's papers."""

    papers: list[BasePaper] | None = None
