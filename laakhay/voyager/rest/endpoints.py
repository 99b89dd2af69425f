"""Voyager REST endpoint specs."""

from __future__ import annotations

import json
from collections.abc import Callable
from typing import Any

from ..config import MAX_SEARCH_COUNT, MAX_UPDATE_COUNT
from ..runtime.pagination import PageHint, PagePolicy
from ..runtime.rest import RestEndpointSpec
from ..utils.jsonpath import dig_str

SEARCH_QUERY_CONTEXT = (
    "List(spellCorrectionEnabled->true,relatedSearchesEnabled->true,kcardTypes->PROFILE|COMPANY)"
)


def search_count(limit: int | None) -> int:
    """Per-page count for blended search: the limit, capped at 49."""
    return min(limit or MAX_SEARCH_COUNT, MAX_SEARCH_COUNT)


def urn_key(*fields: str) -> Callable[[Any], str]:
    """Dedupe key: the first non-empty URN field, else the item's canonical JSON."""

    def key(item: Any) -> str:
        for name in fields:
            urn = dig_str(item, name)
            if urn:
                return urn
        return json.dumps(item, sort_keys=True)

    return key


def search_spec() -> RestEndpointSpec:
    def build_query(params: dict[str, Any]) -> dict[str, Any]:
        q: dict[str, Any] = {
            "count": params["count"],
            "filters": "List()",
            "origin": "GLOBAL_SEARCH_HEADER",
            "q": "all",
            "queryContext": SEARCH_QUERY_CONTEXT,
        }
        q.update(params.get("search_params") or {})
        q["start"] = params["start"]
        return q

    return RestEndpointSpec(
        id="search",
        method="GET",
        build_path=lambda _: "/search/blended",
        build_query=build_query,
        page_policy=lambda p: PagePolicy(page_size=p["count"]),
        page_hint=PageHint(dedupe_key=urn_key("entityUrn", "targetUrn")),
    )


def _updates_spec(endpoint_id: str, id_param: str, finder: str) -> RestEndpointSpec:
    def build_query(params: dict[str, Any]) -> dict[str, Any]:
        return {
            id_param: params["id"],
            "q": finder,
            "moduleKey": "member-share",
            "count": MAX_UPDATE_COUNT,
            "start": params["start"],
        }

    return RestEndpointSpec(
        id=endpoint_id,
        method="GET",
        build_path=lambda _: "/feed/updates",
        build_query=build_query,
        page_policy=PagePolicy(page_size=MAX_UPDATE_COUNT),
        page_hint=PageHint(dedupe_key=urn_key("urn", "updateUrn", "entityUrn")),
    )


def company_updates_spec() -> RestEndpointSpec:
    return _updates_spec("company_updates", "companyUniversalName", "companyFeedByUniversalName")


def profile_updates_spec() -> RestEndpointSpec:
    return _updates_spec("profile_updates", "profileId", "memberShareFeed")


def profile_views_spec() -> RestEndpointSpec:
    return RestEndpointSpec(
        id="profile_views",
        method="GET",
        build_path=lambda _: "/identity/wvmpCards",
    )


def _message_event(body: str) -> dict[str, Any]:
    return {
        "eventCreate": {
            "value": {
                "com.linkedin.voyager.messaging.create.MessageCreate": {
                    "body": body,
                    "attachments": [],
                    "attributedBody": {"text": body, "attributes": []},
                    "mediaAttachments": [],
                }
            }
        }
    }


def send_message_spec() -> RestEndpointSpec:
    """Reply in an existing conversation, or open one with ``recipients``."""

    def build_path(params: dict[str, Any]) -> str:
        if params.get("conversation_urn_id"):
            return f"/messaging/conversations/{params['conversation_urn_id']}/events"
        return "/messaging/conversations"

    def build_body(params: dict[str, Any]) -> dict[str, Any]:
        event = _message_event(params["message_body"])
        if params.get("conversation_urn_id"):
            return event
        event["recipients"] = list(params["recipients"])
        event["subtype"] = "MEMBER_TO_MEMBER"
        return {"keyVersion": "LEGACY_INBOX", "conversationCreate": event}

    return RestEndpointSpec(
        id="send_message",
        method="POST",
        build_path=build_path,
        build_query=lambda _: {"action": "create"},
        build_body=build_body,
    )


def mark_conversation_seen_spec() -> RestEndpointSpec:
    return RestEndpointSpec(
        id="mark_conversation_as_seen",
        method="POST",
        build_path=lambda p: f"/messaging/conversations/{p['conversation_urn_id']}",
        build_body=lambda _: {"patch": {"$set": {"read": True}}},
    )
