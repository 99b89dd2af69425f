"""Evasive request dispatcher.

Every data request goes through :class:`EvasiveDispatcher`, which

    1. sleeps for a random delay in ``[min_delay, max_delay]`` seconds,
    2. reads the session id from the cookie store and sends it verbatim as
       the ``csrf-token`` header,
    3. issues the call against the API base URL and returns the raw response.

Status codes are not interpreted and nothing is retried; transport errors
propagate immediately.
"""

from __future__ import annotations

import asyncio
import logging
import random
from collections.abc import Awaitable, Callable
from typing import Any

from ..config import CSRF_HEADER, VoyagerConfig
from ..models.response import RawResponse
from ..session.cookies import CookieStore
from ..utils.http import HTTPClient

logger = logging.getLogger(__name__)


class EvasiveDispatcher:
    """Paced, CSRF-stamped GET/POST over the API base URL."""

    def __init__(
        self,
        http: HTTPClient,
        store: CookieStore,
        config: VoyagerConfig,
        *,
        sleep: Callable[[float], Awaitable[Any]] = asyncio.sleep,
        rng: random.Random | None = None,
    ) -> None:
        """Initialize dispatcher.

        Args:
            http: Transport whose session shares the store's jar
            store: Source of the session id used as CSRF token
            config: Delay bounds and API base URL
            sleep: Awaitable sleep, injectable for tests
            rng: Random source for the delay
        """
        self._http = http
        self._store = store
        self._config = config
        self._sleep = sleep
        self._rng = rng or random.Random()

    async def evade(self) -> float:
        """Sleep for a uniformly sampled delay and return it."""
        delay = self._rng.uniform(self._config.min_delay, self._config.max_delay)
        await self._sleep(delay)
        return delay

    async def _csrf_headers(self) -> dict[str, str]:
        async with self._store.lock:
            return {CSRF_HEADER: self._store.current_session_id()}

    def _url(self, path: str) -> str:
        return f"{self._config.api_base_url}{path}"

    async def get(self, path: str) -> RawResponse:
        """GET ``path`` relative to the API base URL."""
        delay = await self.evade()
        headers = await self._csrf_headers()
        response = await self._http.get(self._url(path), headers=headers)
        logger.debug(
            "request_dispatched",
            extra={"method": "GET", "path": path, "status": response.status, "delay": delay},
        )
        return response

    async def post(self, path: str, json_body: Any) -> RawResponse:
        """POST ``json_body`` to ``path`` relative to the API base URL."""
        delay = await self.evade()
        headers = await self._csrf_headers()
        headers["content-type"] = "application/json"
        response = await self._http.post(self._url(path), json=json_body, headers=headers)
        logger.debug(
            "request_dispatched",
            extra={"method": "POST", "path": path, "status": response.status, "delay": delay},
        )
        return response
