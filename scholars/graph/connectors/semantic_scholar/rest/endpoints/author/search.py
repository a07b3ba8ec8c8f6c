"""Semantic Scholar author search endpoint definition and adapter.

Response shape:
{"total": 490, "offset": 0, "next": 10, "data": [{authorId, name, ...}, ...]}
"""

from __future__ import annotations

from typing import Any

from scholars.graph.models import AuthorWithPapers
from scholars.graph.runtime.rest import RestEndpointSpec

from ....config import URL_TEMPLATES
from ...shared import SearchBatchAdapter, build_query


def build_path(params: dict[str, Any]) -> str:
    return URL_TEMPLATES["author_search"]


SPEC = RestEndpointSpec(
    id="author_search",
    method="GET",
    build_path=build_path,
    build_query=build_query,
)


class Adapter(SearchBatchAdapter):
    """Adapter for author search pages, carrying the reported total."""

    default_model = AuthorWithPapers
