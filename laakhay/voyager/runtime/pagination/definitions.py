"""Pagination metadata definitions and policy structures.

This module defines the data structures that describe how an offset-paged
endpoint is collected: page size and request ceiling, optional dedupe hints,
and the collection result.
"""

from __future__ import annotations

from collections.abc import Callable, Hashable
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from ...config import MAX_REPEATED_REQUESTS


class StopReason(str, Enum):
    """Why a collection ended."""

    EXHAUSTED = "exhausted"  # empty page
    LIMIT_REACHED = "limit_reached"
    REQUEST_CEILING = "request_ceiling"
    DUPLICATE_PAGE = "duplicate_page"


@dataclass(frozen=True)
class PagePolicy:
    """Paging policy for an endpoint.

    Attributes:
        page_size: Offset increment between pages (also the upstream ``count``)
        max_requests: Ceiling on page fetches for one collection
    """

    page_size: int
    max_requests: int = MAX_REPEATED_REQUESTS

    def __post_init__(self) -> None:
        """Validate paging policy."""
        if self.page_size <= 0:
            raise ValueError("page_size must be positive")
        if self.max_requests <= 0:
            raise ValueError("max_requests must be positive")


@dataclass(frozen=True)
class PageHint:
    """Hints for deduplicating items across pages.

    Attributes:
        dedupe_key: Maps an item to a hashable key; items whose key was
            already collected are dropped. ``None`` disables deduplication.
    """

    dedupe_key: Callable[[Any], Hashable] | None = None


@dataclass
class PageResult:
    """Result of a paginated collection.

    Attributes:
        items: Collected items, never more than the requested limit
        pages_fetched: Number of fetch calls made
        stop_reason: Why collection ended
    """

    items: list[Any] = field(default_factory=list)
    pages_fetched: int = 0
    stop_reason: StopReason = StopReason.EXHAUSTED

    @property
    def total_items(self) -> int:
        return len(self.items)


def extract_page_policy(spec: Any, params: dict[str, Any] | None = None) -> PagePolicy | None:
    """Extract page policy from an endpoint specification.

    The spec's ``page_policy`` may be a ``PagePolicy`` or a factory taking the
    request params.

    Args:
        spec: REST endpoint specification
        params: Optional request params for dynamic policy creation

    Returns:
        PagePolicy if the endpoint is paged, None otherwise
    """
    policy = getattr(spec, "page_policy", None)
    if policy is None:
        return None
    if callable(policy) and not isinstance(policy, PagePolicy):
        return policy(params or {})
    return policy


def extract_page_hint(spec: Any) -> PageHint:
    """Extract page hints from an endpoint specification (default: no dedupe)."""
    hint = getattr(spec, "page_hint", None)
    return hint if hint is not None else PageHint()
