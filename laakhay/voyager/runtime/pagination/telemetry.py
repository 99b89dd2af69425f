"""Structured logging for paginated collection."""

from __future__ import annotations

import logging

from .definitions import PageResult

logger = logging.getLogger(__name__)


def log_page_fetched(
    *,
    endpoint_id: str,
    offset: int,
    items_returned: int,
    items_kept: int,
    latency_ms: float | None = None,
) -> None:
    """Log a single fetched page.

    Args:
        endpoint_id: Endpoint identifier
        offset: Offset the page was requested at
        items_returned: Items extracted from the page
        items_kept: Items appended after dedupe and limit truncation
        latency_ms: Fetch latency in milliseconds (optional)
    """
    logger.info(
        "page_fetched",
        extra={
            "endpoint_id": endpoint_id,
            "offset": offset,
            "items_returned": items_returned,
            "items_kept": items_kept,
            "latency_ms": latency_ms,
        },
    )


def log_pagination_complete(*, endpoint_id: str, result: PageResult) -> None:
    """Log the end of a collection."""
    logger.info(
        "pagination_complete",
        extra={
            "endpoint_id": endpoint_id,
            "pages_fetched": result.pages_fetched,
            "total_items": result.total_items,
            "stop_reason": result.stop_reason.value,
        },
    )


def log_pagination_error(
    *,
    endpoint_id: str,
    offset: int,
    error_type: str,
    error_message: str,
) -> None:
    """Log a failed page fetch."""
    logger.error(
        "pagination_error",
        extra={
            "endpoint_id": endpoint_id,
            "offset": offset,
            "error_type": error_type,
            "error_message": error_message,
        },
    )
