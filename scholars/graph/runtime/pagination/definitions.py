"""Pagination window definitions.

This module defines the data structures used to describe one window of
remote results (Page), the caller requested cap (Results), and the Paged
capability that lets the pagination engine drive any parameter object that
embeds a Page.

Server contracts:
    - The per-page limit must be in [1, 100].
    - The API returns at most the first 10_000 results of any query: the sum
      of offset and limit must be lower or equal to 9_999.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any

from ...core.exceptions import LimitBoundsError, RangeBoundsError


@dataclass(frozen=True)
class Bounds:
    """Runtime validated integer window.

    Attributes:
        minimum: Minimum inclusive value
        maximum: Maximum inclusive value
        default: Default value, must satisfy minimum <= default <= maximum
    """

    minimum: int
    maximum: int
    default: int

    def __post_init__(self) -> None:
        """Validate bounds configuration."""
        if self.minimum > self.maximum:
            raise ValueError("Bounds minimum must be lower or equal to maximum")
        if not self.minimum <= self.default <= self.maximum:
            raise ValueError("Bounds default must be within [minimum, maximum]")

    def contains(self, value: int) -> bool:
        return self.minimum <= value <= self.maximum

    def validate(self, value: int) -> int:
        """Return ``value`` if within bounds.

        Raises:
            LimitBoundsError: If value is outside [minimum, maximum]
        """
        if not self.contains(value):
            raise LimitBoundsError(value, self.minimum, self.maximum)
        return value

    def available(self, value: int) -> int | None:
        """Largest in-bounds value not greater than ``value``.

        Returns None when ``value`` is below the minimum, ``maximum`` when
        ``value`` exceeds it.
        """
        if value < self.minimum:
            return None
        return min(value, self.maximum)


@dataclass(frozen=True)
class Results:
    """Caller requested cap on the number of items returned by an iteration.

    Examples:
        # Return everything the server is willing to serve
        Results.all()

        # Stop after 68 items across all pages
        Results.limit(68)
    """

    cap: int | None = None

    def __post_init__(self) -> None:
        if self.cap is not None and self.cap < 0:
            raise ValueError("Results cap cannot be negative")

    @classmethod
    def all(cls) -> Results:
        return cls()

    @classmethod
    def limit(cls, cap: int) -> Results:
        return cls(cap=cap)

    @property
    def is_all(self) -> bool:
        return self.cap is None


class Page:
    """One bounds-checked window of remote results.

    ``Page.next_page`` clamps the limit when the window approaches the server
    ceiling: moving to an offset where ``offset + limit`` would exceed
    ``RANGE_CEILING`` silently shrinks the limit to the largest value still
    available, so callers may observe a smaller limit than the one requested.
    Only when no positive limit remains does it raise RangeBoundsError, which
    the pagination engine treats as the end of the results.

    Examples:
        >>> page = Page(9940, 50)
        >>> page.next_page(9990)
        >>> page.limit
        9
    """

    RANGE_CEILING = 9_999
    RANGE_LIMIT = RANGE_CEILING + 1
    LIMIT_BOUNDS = Bounds(minimum=1, maximum=100, default=10)
    LIMIT_MAX = LIMIT_BOUNDS.maximum
    OFFSET_DEFAULT = 0

    __slots__ = ("_offset", "_limit")

    def __init__(self, offset: int = OFFSET_DEFAULT, limit: int = LIMIT_BOUNDS.default) -> None:
        """Create a page.

        Args:
            offset: Zero-based offset of the first result
            limit: Number of results in the window

        Raises:
            LimitBoundsError: If limit is outside [1, 100]
            RangeBoundsError: If offset + limit exceeds RANGE_CEILING
        """
        self.LIMIT_BOUNDS.validate(limit)
        self._check_range(offset, limit)
        self._offset = offset
        self._limit = limit

    @classmethod
    def with_offset(cls, offset: int) -> Page:
        return cls(offset, cls.LIMIT_BOUNDS.default)

    @classmethod
    def with_limit(cls, limit: int) -> Page:
        return cls(cls.OFFSET_DEFAULT, limit)

    @property
    def offset(self) -> int:
        return self._offset

    @property
    def limit(self) -> int:
        return self._limit

    def get_offset(self) -> int:
        return self._offset

    def get_limit(self) -> int:
        return self._limit

    def set_offset(self, offset: int) -> None:
        """Move the window keeping the current limit.

        Raises:
            RangeBoundsError: If offset + limit exceeds RANGE_CEILING
        """
        self._check_range(offset, self._limit)
        self._offset = offset

    def set_limit(self, limit: int) -> None:
        """Change the limit keeping the current offset.

        Raises:
            LimitBoundsError: If limit is outside [1, 100]
            RangeBoundsError: If offset + limit exceeds RANGE_CEILING
        """
        self.LIMIT_BOUNDS.validate(limit)
        self._check_range(self._offset, limit)
        self._limit = limit

    def next_page(self, next_offset: int) -> None:
        """Move to ``next_offset``, clamping the limit near the ceiling.

        Args:
            next_offset: Offset of the next window (the server ``next`` value)

        Raises:
            RangeBoundsError: If no positive limit is available at next_offset
        """
        try:
            self.set_offset(next_offset)
        except RangeBoundsError as err:
            if not err.available:
                raise
            self._check_range(next_offset, err.available)
            self._offset = next_offset
            self._limit = err.available

    def to_query(self) -> dict[str, int]:
        return {"offset": self._offset, "limit": self._limit}

    @classmethod
    def available_limit(cls, offset: int) -> int:
        """Largest valid limit for ``offset``, 0 if the ceiling is reached."""
        if offset < 0:
            return 0
        return cls.LIMIT_BOUNDS.available(cls.RANGE_CEILING - offset) or 0

    @classmethod
    def _check_range(cls, offset: int, limit: int) -> None:
        # The API answers `offset + limit must be < 10000` otherwise.
        if offset < 0 or offset + limit > cls.RANGE_CEILING:
            raise RangeBoundsError(offset, limit, cls.available_limit(offset), cls.RANGE_CEILING)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Page):
            return NotImplemented
        return (self._offset, self._limit) == (other._offset, other._limit)

    def __repr__(self) -> str:
        return f"Page(offset={self._offset}, limit={self._limit})"


class Paged(ABC):
    """Capability of a parameter object that embeds a Page.

    The pagination engine reads and mutates paging state through these
    methods without knowing the other fields of the parameter object.
    """

    @property
    @abstractmethod
    def page(self) -> Page:
        """The embedded page."""

    def set_limit(self, limit: int) -> None:
        self.page.set_limit(limit)

    def next_page(self, next_offset: int) -> None:
        self.page.next_page(next_offset)

    def get_offset(self) -> int:
        return self.page.get_offset()

    def get_limit(self) -> int:
        return self.page.get_limit()
