"""Structured logging for pagination.

This module provides telemetry hooks for the pagination engine, emitting
structured logs keyed by endpoint id.
"""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


def log_page_requested(*, endpoint_id: str, page_index: int, offset: int, limit: int) -> None:
    """Log dispatch of one page request.

    Args:
        endpoint_id: Endpoint identifier
        page_index: Zero-based index of the page within the iteration
        offset: Requested offset
        limit: Requested limit
    """
    logger.debug(
        "page_requested",
        extra={
            "endpoint_id": endpoint_id,
            "page_index": page_index,
            "offset": offset,
            "limit": limit,
        },
    )


def log_page_completed(
    *,
    endpoint_id: str,
    page_index: int,
    items: int,
    next_offset: int | None,
    total: int | None = None,
    latency_ms: float | None = None,
) -> None:
    """Log completion of one page request.

    Args:
        endpoint_id: Endpoint identifier
        page_index: Zero-based index of the page within the iteration
        items: Number of items buffered from this page
        next_offset: Continuation offset reported by the server
        total: Total matches reported by a search endpoint
        latency_ms: Latency in milliseconds (optional)
    """
    logger.info(
        "page_completed",
        extra={
            "endpoint_id": endpoint_id,
            "page_index": page_index,
            "items": items,
            "next_offset": next_offset,
            "total": total,
            "latency_ms": latency_ms,
        },
    )


def log_page_error(
    *,
    endpoint_id: str,
    page_index: int,
    error_type: str,
    error_message: str,
) -> None:
    """Log a failed page request.

    Args:
        endpoint_id: Endpoint identifier
        page_index: Zero-based index of the page that failed
        error_type: Type of error (e.g., "TransportError", "DecodeError")
        error_message: Error message
    """
    logger.error(
        "page_error",
        extra={
            "endpoint_id": endpoint_id,
            "page_index": page_index,
            "error_type": error_type,
            "error_message": error_message,
        },
    )


def log_pagination_exhausted(*, endpoint_id: str, reason: str, count: int, pages: int) -> None:
    """Log the end of an iteration.

    Args:
        endpoint_id: Endpoint identifier
        reason: Why the iteration stopped (cap_reached, no_next, range_ceiling, ...)
        count: Number of items fetched
        pages: Number of pages fetched
    """
    logger.info(
        "pagination_exhausted",
        extra={
            "endpoint_id": endpoint_id,
            "reason": reason,
            "count": count,
            "pages": pages,
        },
    )
