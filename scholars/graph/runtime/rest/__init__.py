"""REST runtime abstractions."""

from .http_client import BlockingHTTPClient, HTTPClient, HTTPResponse
from .runner import (
    BlockingRestRunner,
    ResponseAdapter,
    RestEndpointSpec,
    RestRunner,
    decode_response,
)
from .transport import BlockingRESTTransport, RESTTransport

__all__ = [
    "HTTPClient",
    "BlockingHTTPClient",
    "HTTPResponse",
    "RESTTransport",
    "BlockingRESTTransport",
    "RestRunner",
    "BlockingRestRunner",
    "RestEndpointSpec",
    "ResponseAdapter",
    "decode_response",
]
