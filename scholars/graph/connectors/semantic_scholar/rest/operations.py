"""Semantic Scholar endpoint wrappers.

Each wrapper binds one URL template to its parameter object. Building a
wrapper performs no I/O. ``query``/``query_async`` run one request; list
endpoints also offer ``paged``/``paged_async``, which page through every
result with the pagination engine.

Example:
    >>> with SemanticScholarClient() as client:
    ...     search = GetPaperSearch(PaperSearchParams("graph neural networks"))
    ...     for paper in search.paged(Results.limit(25), client):
    ...         print(paper.title)
"""

from __future__ import annotations

import copy
from typing import Any, ClassVar, Generic, TypeVar

from pydantic import BaseModel

from scholars.graph.parameters import (
    AuthorPapersParams,
    AuthorParams,
    AuthorSearchParams,
    FieldsParams,
    PagedFieldsParams,
    PaperAuthorsParams,
    PaperCitationsParams,
    PaperParams,
    PaperReferencesParams,
    PaperSearchParams,
)
from scholars.graph.runtime.pagination import EndpointIter, EndpointStream, Page, Paged, Results
from scholars.graph.runtime.rest import (
    BlockingRestRunner,
    BlockingRESTTransport,
    ResponseAdapter,
    RestEndpointSpec,
    RestRunner,
    RESTTransport,
)

from .endpoints import get_endpoint_adapter, get_endpoint_spec

P = TypeVar("P", bound=FieldsParams)


class BaseEndpoint(Generic[P]):
    """One endpoint bound to its path identifiers and parameter object."""

    endpoint_id: ClassVar[str]
    params_type: ClassVar[type[FieldsParams]] = FieldsParams

    def __init__(
        self,
        params: P | None = None,
        *,
        model: type[BaseModel] | None = None,
        **path_params: str,
    ) -> None:
        spec = get_endpoint_spec(self.endpoint_id)
        adapter_cls = get_endpoint_adapter(self.endpoint_id)
        if spec is None or adapter_cls is None:
            raise ValueError(f"Unknown endpoint: {self.endpoint_id}")
        self.spec: RestEndpointSpec = spec
        self.adapter: ResponseAdapter = adapter_cls(model)
        self.query_params: P = params if params is not None else self.params_type()
        self.path_params = path_params

    @property
    def params(self) -> dict[str, Any]:
        return {**self.path_params, "params": self.query_params}

    @property
    def path(self) -> str:
        return self.spec.build_path(self.params)

    def query(self, client: BlockingRESTTransport) -> Any:
        """Run one blocking request.

        Raises:
            TransportError: If the HTTP exchange failed
            ResponseError: If the API answered with an error status
            DecodeError: If the body could not be decoded
        """
        return BlockingRestRunner(client).run(
            spec=self.spec, adapter=self.adapter, params=self.params
        )

    async def query_async(self, client: RESTTransport) -> Any:
        """Run one request on the event loop; same errors as ``query``."""
        return await RestRunner(client).run(
            spec=self.spec, adapter=self.adapter, params=self.params
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}(path={self.path!r}, params={self.query_params!r})"


class ListEndpoint(BaseEndpoint[P], Paged):
    """Endpoint returning one page of records per request."""

    params_type: ClassVar[type[FieldsParams]] = PagedFieldsParams

    @property
    def page(self) -> Page:
        return self.query_params.page

    def paged(self, results: Results | None, client: BlockingRESTTransport) -> EndpointIter[Any]:
        """Iterate over every record, blocking on each page request.

        The iteration starts at the current page and runs on a copy of this
        endpoint, so the wrapper can be paged again from the same start.
        Errors are raised from ``next`` and repeat for as long as the API
        keeps failing; see EndpointIter.
        """
        return EndpointIter(copy.deepcopy(self), results or Results.all(), client)

    def paged_async(self, results: Results | None, client: RESTTransport) -> EndpointStream[Any]:
        """Async counterpart of ``paged``, to be consumed with ``async for``."""
        return EndpointStream(copy.deepcopy(self), results or Results.all(), client)


class GetAuthor(BaseEndpoint[AuthorParams]):
    """Details of one author, decoded as AuthorWithPapers by default."""

    endpoint_id = "author"
    params_type = AuthorParams

    def __init__(
        self,
        author_id: str,
        params: AuthorParams | None = None,
        *,
        model: type[BaseModel] | None = None,
    ) -> None:
        super().__init__(params, model=model, author_id=author_id)


class GetAuthorPapers(ListEndpoint[AuthorPapersParams]):
    """Papers of one author, decoded as PaperWithLinks by default."""

    endpoint_id = "author_papers"
    params_type = AuthorPapersParams

    def __init__(
        self,
        author_id: str,
        params: AuthorPapersParams | None = None,
        *,
        model: type[BaseModel] | None = None,
    ) -> None:
        super().__init__(params, model=model, author_id=author_id)


class GetAuthorSearch(ListEndpoint[AuthorSearchParams]):
    """Author search. Pages are SearchBatch instances carrying ``total``."""

    endpoint_id = "author_search"

    def __init__(self, params: AuthorSearchParams, *, model: type[BaseModel] | None = None) -> None:
        super().__init__(params, model=model)


class GetPaper(BaseEndpoint[PaperParams]):
    """Details of one paper, decoded as FullPaper by default."""

    endpoint_id = "paper"
    params_type = PaperParams

    def __init__(
        self,
        paper_id: str,
        params: PaperParams | None = None,
        *,
        model: type[BaseModel] | None = None,
    ) -> None:
        super().__init__(params, model=model, paper_id=paper_id)


class GetPaperAuthors(ListEndpoint[PaperAuthorsParams]):
    endpoint_id = "paper_authors"
    params_type = PaperAuthorsParams

    def __init__(
        self,
        paper_id: str,
        params: PaperAuthorsParams | None = None,
        *,
        model: type[BaseModel] | None = None,
    ) -> None:
        super().__init__(params, model=model, paper_id=paper_id)


class GetPaperCitations(ListEndpoint[PaperCitationsParams]):
    endpoint_id = "paper_citations"
    params_type = PaperCitationsParams

    def __init__(
        self,
        paper_id: str,
        params: PaperCitationsParams | None = None,
        *,
        model: type[BaseModel] | None = None,
    ) -> None:
        super().__init__(params, model=model, paper_id=paper_id)


class GetPaperReferences(ListEndpoint[PaperReferencesParams]):
    endpoint_id = "paper_references"
    params_type = PaperReferencesParams

    def __init__(
        self,
        paper_id: str,
        params: PaperReferencesParams | None = None,
        *,
        model: type[BaseModel] | None = None,
    ) -> None:
        super().__init__(params, model=model, paper_id=paper_id)


class GetPaperSearch(ListEndpoint[PaperSearchParams]):
    """Paper search, decoded as BasePaper by default."""

    endpoint_id = "paper_search"

    def __init__(self, params: PaperSearchParams, *, model: type[BaseModel] | None = None) -> None:
        super().__init__(params, model=model)
