"""HTTP client helper."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import aiohttp
from aiohttp.abc import AbstractCookieJar

from ..core.exceptions import TransportError
from ..models.response import RawResponse


class HTTPClient:
    """Async HTTP client wrapper.

    Responses are read fully and returned as ``RawResponse`` without any
    status interpretation. No timeout is applied unless one is given.
    """

    def __init__(
        self,
        base_url: str | None = None,
        *,
        cookie_jar: Callable[[], AbstractCookieJar] | None = None,
        headers: dict[str, str] | None = None,
        timeout: float | None = None,
    ) -> None:
        self.base_url = base_url
        self.headers = dict(headers or {})
        self.timeout = aiohttp.ClientTimeout(total=timeout)
        # Jar factory: aiohttp cookie jars must be created inside a running loop
        self._cookie_jar = cookie_jar
        self._session: aiohttp.ClientSession | None = None

    @property
    def session(self) -> aiohttp.ClientSession:
        """Get or create session."""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(
                timeout=self.timeout,
                headers=self.headers,
                cookie_jar=self._cookie_jar() if self._cookie_jar else None,
            )
        return self._session

    def resolve(self, url: str) -> str:
        """Join relative URLs to ``base_url``; absolute URLs pass through."""
        if self.base_url and not url.startswith("http"):
            return f"{self.base_url}{url}"
        return url

    async def get(
        self,
        url: str,
        headers: dict[str, str] | None = None,
    ) -> RawResponse:
        """GET request."""
        url = self.resolve(url)
        try:
            async with self.session.get(url, headers=headers) as response:
                return await self._read(response)
        except aiohttp.ClientError as e:
            raise TransportError(f"GET {url} failed: {e}") from e

    async def post(
        self,
        url: str,
        data: Any = None,
        json: Any = None,
        headers: dict[str, str] | None = None,
    ) -> RawResponse:
        """POST request with either form ``data`` or a ``json`` body."""
        url = self.resolve(url)
        try:
            async with self.session.post(url, data=data, json=json, headers=headers) as response:
                return await self._read(response)
        except aiohttp.ClientError as e:
            raise TransportError(f"POST {url} failed: {e}") from e

    @staticmethod
    async def _read(response: aiohttp.ClientResponse) -> RawResponse:
        body = await response.read()
        return RawResponse(
            status=response.status,
            url=str(response.url),
            headers={k: v for k, v in response.headers.items()},
            body=body,
        )

    async def close(self) -> None:
        """Close session."""
        if self._session and not self._session.closed:
            await self._session.close()

    async def __aenter__(self) -> HTTPClient:
        """Context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit."""
        await self.close()
