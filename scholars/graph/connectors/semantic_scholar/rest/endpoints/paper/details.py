"""Semantic Scholar paper details endpoint definition and adapter.

This is the only endpoint serving ``embedding`` and ``tldr``.
"""

from __future__ import annotations

from typing import Any

from scholars.graph.models import FullPaper
from scholars.graph.runtime.rest import RestEndpointSpec

from ....config import URL_TEMPLATES
from ...shared import ModelAdapter, build_query, encode_id


def build_path(params: dict[str, Any]) -> str:
    return URL_TEMPLATES["paper"].format(paper_id=encode_id(params["paper_id"]))


SPEC = RestEndpointSpec(
    id="paper",
    method="GET",
    build_path=build_path,
    build_query=build_query,
)


class Adapter(ModelAdapter):
    default_model = FullPaper
