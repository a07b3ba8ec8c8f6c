"""Custom exception hierarchy."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..models.error import ErrorBody


class ScholarsError(Exception):
    """Base exception for all library errors."""

    pass


class PaginationError(ScholarsError, ValueError):
    """Page offset/limit outside the server accepted window.

    Raised when building or mutating a Page directly. Never retried.
    """

    pass


class RangeBoundsError(PaginationError):
    """The sum of offset and limit exceeds the server result window.

    Attributes:
        offset: Offered offset
        limit: Offered limit
        available: Largest limit still valid for ``offset`` (0 if none)
    """

    def __init__(self, offset: int, limit: int, available: int, ceiling: int) -> None:
        super().__init__(
            f"`offset` and `limit` sum must be lower or equal to {ceiling}, "
            f"but provided: offset={offset} and limit={limit}"
        )
        self.offset = offset
        self.limit = limit
        self.available = available


class LimitBoundsError(PaginationError):
    """Page limit outside the per-page window."""

    def __init__(self, limit: int, minimum: int, maximum: int) -> None:
        super().__init__(
            f"limit must be greater or equal to {minimum} and lower or equal to {maximum}, "
            f"but provided: limit={limit}"
        )
        self.limit = limit


class ApiError(ScholarsError):
    """Error raised while querying the remote API.

    Attributes:
        url: Request URL, when known
    """

    def __init__(self, message: str, url: str | None = None) -> None:
        super().__init__(message)
        self.url = url


class TransportError(ApiError):
    """The HTTP exchange could not be completed.

    The underlying client error is chained as ``__cause__``.
    """

    pass


class ResponseError(ApiError):
    """The API answered with a non-success status and an error body."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int,
        url: str | None = None,
        error: ErrorBody | None = None,
    ) -> None:
        super().__init__(message, url=url)
        self.status_code = status_code
        self.error = error


class RateLimitError(ResponseError):
    """API rate limit exceeded."""

    def __init__(
        self,
        message: str,
        *,
        url: str | None = None,
        error: ErrorBody | None = None,
        retry_after: int = 60,
    ) -> None:
        super().__init__(message, status_code=429, url=url, error=error)
        self.retry_after = retry_after


class DecodeError(ApiError):
    """Response body could not be decoded into the expected shape.

    Attributes:
        typename: Name of the type the body was decoded into
    """

    def __init__(self, message: str, *, typename: str, url: str | None = None) -> None:
        super().__init__(message, url=url)
        self.typename = typename
