"""VoyagerClient facade.

The client wires the session layer (CookieStore, Authenticator) to the
request layer (EvasiveDispatcher, RestRunner) and exposes the endpoint
methods built on top of them.

Architecture:
    - CookieStore: owns the jar shared by the HTTP session, plus its file
    - Authenticator: runs once per client (cookie reuse or login)
    - EvasiveDispatcher: paced, CSRF-stamped GET/POST
    - RestRunner: endpoint specs and adapters over the dispatcher, with
      PageCollector for paged endpoints

Example:
    >>> identity = Identity(username="me@example.com", password="...")
    >>> async with await VoyagerClient.create(identity) as client:
    ...     people = await client.search({"keywords": "python"}, limit=25)
"""

from __future__ import annotations

import logging
from typing import Any

from .config import VoyagerConfig
from .core.exceptions import InvalidInputError
from .models import ActionResult, Identity, RawResponse
from .rest import (
    ActionResultAdapter,
    FeedUpdatesAdapter,
    ProfileViewsAdapter,
    SearchResultsAdapter,
    company_updates_spec,
    mark_conversation_seen_spec,
    profile_updates_spec,
    profile_views_spec,
    search_count,
    search_spec,
    send_message_spec,
)
from .runtime.dispatcher import EvasiveDispatcher
from .runtime.rest import RestRunner
from .session import Authenticator, AuthState, CookieStore
from .utils.http import HTTPClient

logger = logging.getLogger(__name__)


class VoyagerClient:
    """Client for the LinkedIn Voyager API.

    Use :meth:`create` to get an authenticated client; constructing the class
    directly leaves it UNAUTHENTICATED until :meth:`authenticate` runs.
    """

    def __init__(
        self,
        identity: Identity,
        *,
        config: VoyagerConfig | None = None,
        http: HTTPClient | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            identity: Credentials, borrowed for the client's lifetime
            config: Client configuration (default: ``VoyagerConfig.from_env()``)
            http: Optional transport (created over the cookie store's jar if omitted)
        """
        self._identity = identity
        self._config = config or VoyagerConfig.from_env()
        self._store = CookieStore(self._config.cookie_path, self._config.base_url)
        self._http = http or HTTPClient(
            cookie_jar=lambda: self._store.jar,
            headers=self._config.request_headers,
        )
        self._auth = Authenticator(self._http, self._store, self._config)
        self._dispatcher = EvasiveDispatcher(self._http, self._store, self._config)
        self._runner = RestRunner(self._dispatcher)

    @classmethod
    async def create(
        cls,
        identity: Identity,
        refresh_cookies: bool = False,
        config: VoyagerConfig | None = None,
    ) -> VoyagerClient:
        """Build a client and authenticate it once."""
        client = cls(identity, config=config)
        try:
            await client.authenticate(force_refresh=refresh_cookies)
        except BaseException:
            await client.close()
            raise
        return client

    @property
    def state(self) -> AuthState:
        return self._auth.state

    @property
    def cookie_store(self) -> CookieStore:
        return self._store

    async def authenticate(self, force_refresh: bool = False) -> None:
        """Authenticate with the client's identity. See :class:`Authenticator`."""
        await self._auth.authenticate(self._identity, force_refresh=force_refresh)

    async def get(self, path: str) -> RawResponse:
        """Raw paced GET relative to the API base URL."""
        return await self._dispatcher.get(path)

    async def post(self, path: str, json_body: Any) -> RawResponse:
        """Raw paced POST relative to the API base URL."""
        return await self._dispatcher.post(path, json_body)

    async def search(
        self, params: dict[str, Any] | None = None, limit: int | None = None
    ) -> list[Any]:
        """Blended search, scrolled 49 results at a time.

        Args:
            params: Query parameters overriding the defaults (``start`` is
                always controlled by the scroll)
            limit: Maximum number of results (None = until exhausted)

        Returns:
            Raw result elements
        """
        result = await self._runner.run_paged(
            spec=search_spec(),
            adapter=SearchResultsAdapter(),
            params={"search_params": dict(params or {}), "count": search_count(limit)},
            limit=limit,
        )
        return result.items

    async def get_company_updates(
        self,
        public_id: str | None = None,
        urn_id: str | None = None,
        max_results: int | None = None,
    ) -> list[Any]:
        """Company feed updates, 100 per page."""
        return await self._updates(company_updates_spec(), public_id, urn_id, max_results)

    async def get_profile_updates(
        self,
        public_id: str | None = None,
        urn_id: str | None = None,
        max_results: int | None = None,
    ) -> list[Any]:
        """Member feed updates, 100 per page."""
        return await self._updates(profile_updates_spec(), public_id, urn_id, max_results)

    async def _updates(
        self,
        spec: Any,
        public_id: str | None,
        urn_id: str | None,
        max_results: int | None,
    ) -> list[Any]:
        feed_id = public_id or urn_id
        if not feed_id:
            raise InvalidInputError("Either public_id or urn_id must be provided")
        result = await self._runner.run_paged(
            spec=spec,
            adapter=FeedUpdatesAdapter(),
            params={"id": feed_id},
            limit=max_results,
        )
        return result.items

    async def get_current_profile_views(self) -> int:
        """Profile view count; 0 when the card is missing or the call fails."""
        return await self._runner.run(
            spec=profile_views_spec(), adapter=ProfileViewsAdapter(), params={}
        )

    async def send_message(
        self,
        message_body: str,
        conversation_urn_id: str | None = None,
        recipients: list[str] | None = None,
    ) -> ActionResult:
        """Send a message to a conversation or open one with ``recipients``.

        Raises:
            InvalidInputError: Empty body, or neither conversation nor recipients
        """
        if not message_body:
            raise InvalidInputError("message_body cannot be empty")
        if not conversation_urn_id and not recipients:
            raise InvalidInputError("Either conversation_urn_id or recipients must be provided")
        return await self._runner.run(
            spec=send_message_spec(),
            adapter=ActionResultAdapter(),
            params={
                "message_body": message_body,
                "conversation_urn_id": conversation_urn_id,
                "recipients": recipients or [],
            },
        )

    async def mark_conversation_as_seen(self, conversation_urn_id: str) -> ActionResult:
        """Mark a conversation read."""
        if not conversation_urn_id:
            raise InvalidInputError("conversation_urn_id must be provided")
        return await self._runner.run(
            spec=mark_conversation_seen_spec(),
            adapter=ActionResultAdapter(),
            params={"conversation_urn_id": conversation_urn_id},
        )

    async def close(self) -> None:
        """Close the HTTP session."""
        await self._http.close()

    async def __aenter__(self) -> VoyagerClient:
        """Context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit."""
        await self.close()
