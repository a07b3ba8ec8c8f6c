"""Semantic Scholar paper authors endpoint definition and adapter."""

from __future__ import annotations

from typing import Any

from scholars.graph.models import AuthorWithPapers
from scholars.graph.runtime.rest import RestEndpointSpec

from ....config import URL_TEMPLATES
from ...shared import BatchAdapter, build_query, encode_id


def build_path(params: dict[str, Any]) -> str:
    return URL_TEMPLATES["paper_authors"].format(paper_id=encode_id(params["paper_id"]))


SPEC = RestEndpointSpec(
    id="paper_authors",
    method="GET",
    build_path=build_path,
    build_query=build_query,
)


class Adapter(BatchAdapter):
    default_model = AuthorWithPapers
