"""Paper data models."""

from __future__ import annotations

from pydantic import Field

from .author import Author, AuthorInfo, AuthorWithPapers
from .base import GraphModel


class Embedding(GraphModel):
    """Paper embedding vector."""

    model: str | None = None
    vector: list[float] | None = None


class Tldr(GraphModel):
    """Auto-generated paper summary."""

    model: str | None = None
    text: str | None = None


class PaperExternalIds(GraphModel):
    """External identifiers of a paper."""

    ar_xiv: str | None = Field(None, alias="ArXiv")
    mag: str | None = Field(None, alias="MAG")
    acl: str | None = Field(None, alias="ACL")
    pub_med: str | None = Field(None, alias="PubMed")
    medline: str | None = Field(None, alias="Medline")
    pub_med_central: str | None = Field(None, alias="PubMedCentral")
    dblp: str | None = Field(None, alias="DBLP")
    doi: str | None = Field(None, alias="DOI")
    corpus_id: int | None = Field(None, alias="CorpusId")


class PaperInfo(GraphModel):
    """Paper identity as embedded in other payloads."""

    paper_id: str | None = None
    url: str | None = None
    title: str | None = None
    venue: str | None = None
    year: int | None = None
    authors: list[AuthorInfo] | None = None


class BasePaper(PaperInfo):
    """Paper details without links to other papers."""

    external_ids: PaperExternalIds | None = None
    abstract: str | None = None
    reference_count: int | None = None
    citation_count: int | None = None
    influential_citation_count: int | None = None
    is_open_access: bool | None = None
    fields_of_study: list[str] | None = None


class PaperWithLinks(BasePaper):
    """Paper details with its authors, citations and references."""

    authors: list[AuthorInfo] = Field(default_factory=list)
    citations: list[PaperInfo] = Field(default_factory=list)
    references: list[PaperInfo] = Field(default_factory=list)


class FullPaper(BasePaper):
    """Every detail the paper endpoint can return."""

    authors: list[Author] = Field(default_factory=list)
    citations: list[PaperInfo] = Field(default_factory=list)
    references: list[PaperInfo] = Field(default_factory=list)
    embedding: Embedding | None = None
    tldr: Tldr | None = None


# AuthorWithPapers refers to BasePaper, declared after it.
AuthorWithPapers.model_rebuild()
