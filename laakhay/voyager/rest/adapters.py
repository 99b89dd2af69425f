"""Response adapters for Voyager REST endpoints."""

from __future__ import annotations

from typing import Any

from ..core.exceptions import RateLimitError, RequestFailedError
from ..models import ActionResult, RawResponse
from ..runtime.rest import ResponseAdapter
from ..utils.jsonpath import dig_int, dig_list

WVMP_VIEWERS_CARD = "com.linkedin.voyager.identity.me.wvmpOverview.WvmpViewersCard"
WVMP_SUMMARY_CARD = "com.linkedin.voyager.identity.me.wvmpOverview.WvmpSummaryInsightCard"


def raise_for_status(response: RawResponse, endpoint_id: str) -> None:
    """Raise for a non-200 page; 429 maps to RateLimitError."""
    if response.status == 200:
        return
    if response.status == 429:
        retry_after = next(
            (v for k, v in response.headers.items() if k.lower() == "retry-after"), ""
        )
        raise RateLimitError(
            f"{endpoint_id}: rate limited",
            retry_after=int(retry_after) if retry_after.isdigit() else 60,
        )
    raise RequestFailedError(
        f"{endpoint_id}: request failed with status {response.status}",
        status_code=response.status,
    )


class SearchResultsAdapter(ResponseAdapter):
    """Flattens ``data.elements[*].elements[*]`` of a blended search page."""

    def parse(self, response: RawResponse, params: dict[str, Any]) -> list[Any]:
        raise_for_status(response, "search")
        data = response.json()
        out: list[Any] = []
        for cluster in dig_list(data, "data", "elements"):
            out.extend(dig_list(cluster, "elements"))
        return out


class FeedUpdatesAdapter(ResponseAdapter):
    def parse(self, response: RawResponse, params: dict[str, Any]) -> list[Any]:
        raise_for_status(response, "feed_updates")
        return dig_list(response.json(), "elements")


class ProfileViewsAdapter(ResponseAdapter):
    """Extracts ``numViews``; any missing node or non-200 degrades to 0."""

    def parse(self, response: RawResponse, params: dict[str, Any]) -> int:
        if response.status != 200:
            return 0
        return dig_int(
            response.json(),
            "elements",
            0,
            "value",
            WVMP_VIEWERS_CARD,
            "insightCards",
            0,
            "value",
            WVMP_SUMMARY_CARD,
            "numViews",
        )


class ActionResultAdapter(ResponseAdapter):
    SUCCESS_STATUSES = frozenset({200, 201, 204})

    def parse(self, response: RawResponse, params: dict[str, Any]) -> ActionResult:
        return ActionResult(
            ok=response.status in self.SUCCESS_STATUSES,
            status_code=response.status,
        )
