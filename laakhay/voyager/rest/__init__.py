"""Voyager endpoint specs and response adapters."""

from .adapters import (
    ActionResultAdapter,
    FeedUpdatesAdapter,
    ProfileViewsAdapter,
    SearchResultsAdapter,
    raise_for_status,
)
from .endpoints import (
    company_updates_spec,
    mark_conversation_seen_spec,
    profile_updates_spec,
    profile_views_spec,
    search_count,
    search_spec,
    send_message_spec,
    urn_key,
)

__all__ = [
    "ActionResultAdapter",
    "FeedUpdatesAdapter",
    "ProfileViewsAdapter",
    "SearchResultsAdapter",
    "raise_for_status",
    "company_updates_spec",
    "mark_conversation_seen_spec",
    "profile_updates_spec",
    "profile_views_spec",
    "search_count",
    "search_spec",
    "send_message_spec",
    "urn_key",
]
