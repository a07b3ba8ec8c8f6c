"""Building blocks shared by the Semantic Scholar endpoint modules."""

from __future__ import annotations

from typing import Any
from urllib.parse import quote

from pydantic import BaseModel

from scholars.graph.models import Batch, SearchBatch
from scholars.graph.runtime.rest import ResponseAdapter


def encode_id(value: Any) -> str:
    """Percent-encode a path identifier.

    ``:`` and ``/`` are kept so prefixed identifiers such as
    ``DOI:10.18653/v1/N18-3011`` or ``arXiv:2106.15928`` reach the API as
    documented.
    """
    return quote(str(value), safe=":/")


def build_query(params: dict[str, Any]) -> dict[str, Any]:
    """Serialize the parameter object stored under ``params``."""
    query_params = params.get("params")
    if query_params is None:
        return {}
    return query_params.to_query()


class ModelAdapter(ResponseAdapter):
    """Adapter decoding a single record into a pydantic model.

    Subclasses set ``default_model``; callers may decode into another model,
    e.g. a narrower one, by passing ``model``.
    """

    default_model: type[BaseModel] = BaseModel

    def __init__(self, model: type[BaseModel] | None = None) -> None:
        self.model = model or self.default_model

    @property
    def typename(self) -> str:
        return self.model.__name__

    def parse(self, response: Any, params: dict[str, Any]) -> Any:
        return self.model.model_validate(response)


class BatchAdapter(ModelAdapter):
    """Adapter decoding one page of records into ``Batch[model]``."""

    container: type[Batch] = Batch

    @property
    def typename(self) -> str:
        return f"{self.container.__name__}[{self.model.__name__}]"

    def parse(self, response: Any, params: dict[str, Any]) -> Batch[Any]:
        return self.container[self.model].model_validate(response)


class SearchBatchAdapter(BatchAdapter):
    """Adapter decoding one page of search results into ``SearchBatch[model]``."""

    container = SearchBatch
