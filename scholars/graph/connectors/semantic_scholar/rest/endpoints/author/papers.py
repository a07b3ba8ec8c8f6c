"""Semantic Scholar author papers endpoint definition and adapter.

Pages through the papers of one author. Response shape:
{"offset": 0, "next": 10, "data": [{paperId, title, ...}, ...]}
"""

from __future__ import annotations

from typing import Any

from scholars.graph.models import PaperWithLinks
from scholars.graph.runtime.rest import RestEndpointSpec

from ....config import URL_TEMPLATES
from ...shared import BatchAdapter, build_query, encode_id


def build_path(params: dict[str, Any]) -> str:
    return URL_TEMPLATES["author_papers"].format(author_id=encode_id(params["author_id"]))


SPEC = RestEndpointSpec(
    id="author_papers",
    method="GET",
    build_path=build_path,
    build_query=build_query,
)


class Adapter(BatchAdapter):
    default_model = PaperWithLinks
