"""Core components."""

from .exceptions import (
    ApiError,
    DecodeError,
    LimitBoundsError,
    PaginationError,
    RangeBoundsError,
    RateLimitError,
    ResponseError,
    ScholarsError,
    TransportError,
)

__all__ = [
    "ScholarsError",
    "PaginationError",
    "RangeBoundsError",
    "LimitBoundsError",
    "ApiError",
    "TransportError",
    "ResponseError",
    "RateLimitError",
    "DecodeError",
]
