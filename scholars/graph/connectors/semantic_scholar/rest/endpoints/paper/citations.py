"""Semantic Scholar paper citations endpoint definition and adapter.

Each item describes one citing paper and the citation context:
{"contexts": [...], "intents": [...], "isInfluential": false, "citingPaper": {...}}
"""

from __future__ import annotations

from typing import Any

from scholars.graph.models import Citation
from scholars.graph.runtime.rest import RestEndpointSpec

from ....config import URL_TEMPLATES
from ...shared import BatchAdapter, build_query, encode_id


def build_path(params: dict[str, Any]) -> str:
    return URL_TEMPLATES["paper_citations"].format(paper_id=encode_id(params["paper_id"]))


SPEC = RestEndpointSpec(
    id="paper_citations",
    method="GET",
    build_path=build_path,
    build_query=build_query,
)


class Adapter(BatchAdapter):
    default_model = Citation
