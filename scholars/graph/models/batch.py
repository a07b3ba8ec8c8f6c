"""Page-of-results containers."""

from __future__ import annotations

from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field

T = TypeVar("T")


class Batch(BaseModel, Generic[T]):
    """One decoded page of results.

    Attributes:
        offset: Offset of the first item of this page
        next: Offset of the next page, None when the server has no more results
        data: Page items in server order
    """

    offset: int = Field(ge=0)
    next: int | None = Field(None, ge=0)
    data: list[T] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True, extra="ignore")

    @property
    def items(self) -> list[T]:
        return self.data

    def __len__(self) -> int:
        return len(self.data)


class SearchBatch(Batch[T], Generic[T]):
    """Page of a search result set.

    ``total`` is the number of matches reported by the server. It stays the
    same across all pages of one search.
    """

    total: int = Field(ge=0)
