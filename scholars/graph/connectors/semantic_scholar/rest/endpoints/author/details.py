"""Semantic Scholar author details endpoint definition and adapter."""

from __future__ import annotations

from typing import Any

from scholars.graph.models import AuthorWithPapers
from scholars.graph.runtime.rest import RestEndpointSpec

from ....config import URL_TEMPLATES
from ...shared import ModelAdapter, build_query, encode_id


def build_path(params: dict[str, Any]) -> str:
    return URL_TEMPLATES["author"].format(author_id=encode_id(params["author_id"]))


SPEC = RestEndpointSpec(
    id="author",
    method="GET",
    build_path=build_path,
    build_query=build_query,
)


class Adapter(ModelAdapter):
    """Adapter for one author, decoded as AuthorWithPapers by default."""

    default_model = AuthorWithPapers
