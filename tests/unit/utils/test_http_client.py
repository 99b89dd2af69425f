"""Precise unit tests for HTTPClient.

Tests focus on session management, URL resolution and response capture.
"""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock

import aiohttp
import pytest

from laakhay.voyager.core import TransportError
from laakhay.voyager.models import RawResponse
from laakhay.voyager.utils import HTTPClient


def _mock_response(status: int = 200, body: bytes = b"{}", headers: dict | None = None):
    response = AsyncMock()
    response.status = status
    response.url = "https://api.example.com/test"
    response.headers = headers or {"Content-Type": "application/json"}
    response.read = AsyncMock(return_value=body)
    response.__aenter__ = AsyncMock(return_value=response)
    response.__aexit__ = AsyncMock(return_value=None)
    return response


def _mock_session(response) -> MagicMock:
    session = MagicMock()
    session.closed = False
    session.get = MagicMock(return_value=response)
    session.post = MagicMock(return_value=response)
    return session


class TestHTTPClientSessionManagement:
    """Test HTTPClient session management."""

    def test_init(self):
        """Test HTTPClient initialization (no timeout by default)."""
        client = HTTPClient()
        assert client.timeout.total is None
        assert client._session is None

    def test_init_with_timeout_and_headers(self):
        """Test explicit timeout and default headers."""
        client = HTTPClient(base_url="https://api.example.com", headers={"a": "b"}, timeout=10.0)
        assert client.base_url == "https://api.example.com"
        assert client.timeout.total == 10.0
        assert client.headers == {"a": "b"}

    @pytest.mark.asyncio
    async def test_session_uses_cookie_jar_factory(self):
        """Test the session is created over the jar from the factory."""
        jar = aiohttp.CookieJar()
        client = HTTPClient(cookie_jar=lambda: jar)
        try:
            assert client.session.cookie_jar is jar
        finally:
            await client.close()

    @pytest.mark.asyncio
    async def test_session_property_recreates_closed_session(self):
        """Test session property recreates closed session."""
        client = HTTPClient()
        session1 = client.session
        await session1.close()

        session2 = client.session
        assert session1 is not session2
        assert not session2.closed
        await client.close()

    @pytest.mark.asyncio
    async def test_close_idempotent(self):
        """Test close() can be called multiple times."""
        client = HTTPClient()
        await client.close()
        await client.close()

    @pytest.mark.asyncio
    async def test_context_manager(self):
        """Test HTTPClient as async context manager."""
        async with HTTPClient() as client:
            assert client.session is not None

        assert client._session is None or client._session.closed


class TestHTTPClientRequests:
    """Test request issuing."""

    def test_resolve(self):
        """Test relative URLs are joined and absolute ones pass through."""
        client = HTTPClient(base_url="https://api.example.com")
        assert client.resolve("/me") == "https://api.example.com/me"
        assert client.resolve("https://other.example.com/x") == "https://other.example.com/x"
        assert HTTPClient().resolve("/me") == "/me"

    @pytest.mark.asyncio
    async def test_get_returns_raw_response(self):
        """Test GET reads the full body without interpreting status."""
        client = HTTPClient(base_url="https://api.example.com")
        response = _mock_response(status=404, body=b'{"status": 404}')
        client._session = _mock_session(response)

        result = await client.get("/test", headers={"csrf-token": "abc"})

        assert isinstance(result, RawResponse)
        assert result.status == 404
        assert result.body == b'{"status": 404}'
        assert result.headers == {"Content-Type": "application/json"}
        client._session.get.assert_called_once_with(
            "https://api.example.com/test", headers={"csrf-token": "abc"}
        )

    @pytest.mark.asyncio
    async def test_post_form_and_json(self):
        """Test POST forwards form data and JSON bodies."""
        client = HTTPClient()
        client._session = _mock_session(_mock_response(status=201))

        await client.post("https://x.example.com/a", data={"k": "v"})
        await client.post("https://x.example.com/b", json={"j": 1}, headers={"h": "1"})

        calls = client._session.post.call_args_list
        assert calls[0].args == ("https://x.example.com/a",)
        assert calls[0].kwargs == {"data": {"k": "v"}, "json": None, "headers": None}
        assert calls[1].kwargs == {"data": None, "json": {"j": 1}, "headers": {"h": "1"}}

    @pytest.mark.asyncio
    async def test_client_error_wrapped(self):
        """Test aiohttp.ClientError becomes TransportError with the cause chained."""
        client = HTTPClient()
        session = MagicMock()
        session.closed = False
        session.get = MagicMock(side_effect=aiohttp.ClientConnectionError("boom"))
        client._session = session

        with pytest.raises(TransportError) as exc_info:
            await client.get("https://x.example.com/a")
        assert isinstance(exc_info.value.__cause__, aiohttp.ClientConnectionError)
