"""Semantic Scholar paper search endpoint definition and adapter.

The API serves at most the first 10_000 matches of a search, whatever
``total`` reports.
"""

from __future__ import annotations

from typing import Any

from scholars.graph.models import BasePaper
from scholars.graph.runtime.rest import RestEndpointSpec

from ....config import URL_TEMPLATES
from ...shared import SearchBatchAdapter, build_query


def build_path(params: dict[str, Any]) -> str:
    return URL_TEMPLATES["paper_search"]


SPEC = RestEndpointSpec(
    id="paper_search",
    method="GET",
    build_path=build_path,
    build_query=build_query,
)


class Adapter(SearchBatchAdapter):
    default_model = BasePaper
