"""Page collection logic for offset-paged endpoints.

This module provides the PageCollector class that repeatedly fetches pages,
extracts items, and aggregates them until the data runs out, the requested
limit is reached, or the request ceiling trips.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Hashable, Sequence
from time import perf_counter
from typing import Any

from .definitions import PageHint, PagePolicy, PageResult, StopReason
from .telemetry import log_page_fetched, log_pagination_complete, log_pagination_error


class PageCollector:
    """Collects items across offset-paged responses.

    Stop conditions, checked after every page:
        - the page yields no items (natural end of data)
        - every item on the page was already collected (duplicate page)
        - the collected total reached ``limit``
        - ``len(items) // page_size`` or the number of fetches reached
          ``max_requests``

    A failed fetch is never re-issued; the exception propagates.
    """

    def __init__(self, policy: PagePolicy, hint: PageHint | None = None) -> None:
        """Initialize page collector.

        Args:
            policy: Page size and request ceiling
            hint: Optional dedupe hints
        """
        self._policy = policy
        self._hint = hint or PageHint()

    async def collect(
        self,
        *,
        fetch_page: Callable[[int], Awaitable[Any]],
        extract: Callable[[Any], Sequence[Any]] | None = None,
        limit: int | None = None,
        endpoint_id: str = "unknown",
    ) -> PageResult:
        """Fetch pages and aggregate their items.

        Args:
            fetch_page: Async function taking the offset and returning a page
            extract: Maps a page to its items (default: the page is the items)
            limit: Maximum number of items to return (None = unbounded)
            endpoint_id: Identifier used in telemetry

        Returns:
            PageResult with collected items and metadata

        Raises:
            ValueError: If limit is negative
        """
        if limit is not None and limit < 0:
            raise ValueError(f"limit must be non-negative, got {limit}")

        result = PageResult()
        if limit == 0:
            result.stop_reason = StopReason.LIMIT_REACHED
            log_pagination_complete(endpoint_id=endpoint_id, result=result)
            return result

        page_size = self._policy.page_size
        max_requests = self._policy.max_requests
        seen: set[Hashable] = set()
        offset = 0

        while True:
            page_start = perf_counter()
            try:
                page = await fetch_page(offset)
            except Exception as e:
                log_pagination_error(
                    endpoint_id=endpoint_id,
                    offset=offset,
                    error_type=type(e).__name__,
                    error_message=str(e),
                )
                raise
            result.pages_fetched += 1
            latency_ms = (perf_counter() - page_start) * 1000.0

            items = list(extract(page)) if extract else list(page or [])
            if not items:
                result.stop_reason = StopReason.EXHAUSTED
                break

            fresh = self._deduplicate(items, seen)
            if not fresh:
                result.stop_reason = StopReason.DUPLICATE_PAGE
                break

            if limit is not None:
                fresh = fresh[: limit - len(result.items)]
            result.items.extend(fresh)

            log_page_fetched(
                endpoint_id=endpoint_id,
                offset=offset,
                items_returned=len(items),
                items_kept=len(fresh),
                latency_ms=latency_ms,
            )

            if limit is not None and len(result.items) >= limit:
                result.stop_reason = StopReason.LIMIT_REACHED
                break

            if (
                len(result.items) // page_size >= max_requests
                or result.pages_fetched >= max_requests
            ):
                result.stop_reason = StopReason.REQUEST_CEILING
                break

            offset += page_size

        log_pagination_complete(endpoint_id=endpoint_id, result=result)
        return result

    def _deduplicate(self, items: list[Any], seen: set[Hashable]) -> list[Any]:
        """Drop items whose dedupe key was already collected.

        Args:
            items: Items extracted from the current page
            seen: Keys collected so far (updated in place)

        Returns:
            Items not seen before, in page order
        """
        key = self._hint.dedupe_key
        if key is None:
            return items

        fresh = []
        for item in items:
            k = key(item)
            if k in seen:
                continue
            seen.add(k)
            fresh.append(item)
        return fresh
