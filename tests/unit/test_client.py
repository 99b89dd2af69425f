"""Unit tests for the VoyagerClient facade."""

from __future__ import annotations

import json
from unittest.mock import AsyncMock, MagicMock

import pytest

from laakhay.voyager import (
    ActionResult,
    AuthState,
    Identity,
    InvalidInputError,
    RawResponse,
    RequestFailedError,
    VoyagerClient,
    VoyagerConfig,
)
from laakhay.voyager.config import API_BASE_URL
from laakhay.voyager.utils import HTTPClient


def _json(payload, status: int = 200) -> RawResponse:
    return RawResponse(status=status, body=json.dumps(payload).encode())


@pytest.fixture
def config(tmp_path):
    return VoyagerConfig(cookie_path=str(tmp_path / ".cookies.json"), min_delay=0, max_delay=0)


@pytest.fixture
def identity():
    return Identity(username="me@example.com", password="secret")


@pytest.fixture
def http():
    client = MagicMock(spec=HTTPClient)
    client.get = AsyncMock(return_value=_json({}))
    client.post = AsyncMock(return_value=_json({"login_result": "PASS"}))
    client.close = AsyncMock()
    return client


@pytest.fixture
def client(identity, config, http):
    return VoyagerClient(identity, config=config, http=http)


def _search_page(start: int, n: int) -> RawResponse:
    people = [{"targetUrn": f"urn:li:fs_miniProfile:p{i}"} for i in range(start, start + n)]
    return _json({"data": {"elements": [{"elements": people}]}})


def _paths(mock: AsyncMock) -> list[str]:
    return [c.args[0].removeprefix(API_BASE_URL) for c in mock.await_args_list]


class TestLifecycle:
    """Test construction, authentication and cleanup."""

    @pytest.mark.asyncio
    async def test_starts_unauthenticated(self, client):
        """Test direct construction does not authenticate."""
        assert client.state is AuthState.UNAUTHENTICATED

    @pytest.mark.asyncio
    async def test_authenticate_logs_in(self, client, http):
        """Test authenticate runs the handshake and persists cookies."""
        await client.authenticate()
        assert client.state is AuthState.AUTHENTICATED
        assert client.cookie_store.path.exists()
        http.post.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_create_reuses_cookie_file(self, identity, config, tmp_path):
        """Test create() authenticates from persisted cookies without a request."""
        (tmp_path / ".cookies.json").write_text(json.dumps(["li_at=AQED", "JSESSIONID=ajax:1"]))

        async with await VoyagerClient.create(identity, config=config) as client:
            assert client.state is AuthState.AUTHENTICATED
            assert client.cookie_store.current_session_id() == "ajax:1"

    @pytest.mark.asyncio
    async def test_context_manager_closes_transport(self, client, http):
        """Test leaving the context closes the HTTP client."""
        async with client:
            pass
        http.close.assert_awaited_once()


class TestRawAccess:
    """Test raw get/post passthrough."""

    @pytest.mark.asyncio
    async def test_get_and_post(self, client, http):
        """Test raw calls go through the dispatcher unchanged."""
        http.get.return_value = _json({"x": 1}, status=404)
        response = await client.get("/me")
        assert response.status == 404

        await client.post("/x", {"a": 1})
        assert http.post.call_args.kwargs["json"] == {"a": 1}
        assert http.get.call_args.args[0] == f"{API_BASE_URL}/me"


class TestSearch:
    """Test blended search scrolling."""

    @pytest.mark.asyncio
    async def test_search_limit(self, client, http):
        """Test search scrolls pages of the limit-capped count and truncates."""

        http.get.side_effect = [_search_page(0, 49), _search_page(49, 49), _search_page(98, 49)]
        results = await client.search({"keywords": "python"}, limit=60)

        assert len(results) == 60
        paths = _paths(http.get)
        assert len(paths) == 2
        assert paths[0].startswith("/search/blended?")
        assert "count=49" in paths[0] and "start=0" in paths[0]
        assert "start=49" in paths[1]
        assert "keywords=python" in paths[0]

    @pytest.mark.asyncio
    async def test_search_until_empty(self, client, http):
        """Test search without a limit stops on an empty page."""
        http.get.side_effect = [
            _json({"data": {"elements": [{"elements": [1, 2]}]}}),
            _json({"data": {"elements": []}}),
        ]
        assert await client.search() == [1, 2]

    @pytest.mark.asyncio
    async def test_search_error_page(self, client, http):
        """Test a failed page raises instead of returning partial results."""
        http.get.side_effect = [_json({}, status=403)]
        with pytest.raises(RequestFailedError):
            await client.search({"keywords": "x"})

    @pytest.mark.asyncio
    async def test_search_stops_on_repeated_page(self, client, http):
        """Test an upstream that ignores the offset ends the scroll after one repeat."""
        http.get.return_value = _search_page(0, 2)
        results = await client.search({"keywords": "x"})

        assert results == [
            {"targetUrn": "urn:li:fs_miniProfile:p0"},
            {"targetUrn": "urn:li:fs_miniProfile:p1"},
        ]
        assert http.get.await_count == 2

    @pytest.mark.asyncio
    async def test_search_drops_duplicates_across_pages(self, client, http):
        """Test results already collected on an earlier page are not repeated."""
        http.get.side_effect = [
            _search_page(0, 2),
            _search_page(1, 2),
            _json({"data": {"elements": []}}),
        ]
        results = await client.search()
        assert [r["targetUrn"][-2:] for r in results] == ["p0", "p1", "p2"]


class TestUpdates:
    """Test feed update scrolling."""

    @pytest.mark.asyncio
    async def test_company_updates(self, client, http):
        """Test company updates page by 100 and respect max_results."""
        http.get.side_effect = [
            _json({"elements": list(range(start, start + 100))}) for start in (0, 100, 200)
        ]
        results = await client.get_company_updates(public_id="acme", max_results=150)

        assert results == list(range(150))
        paths = _paths(http.get)
        assert paths[0] == (
            "/feed/updates?companyUniversalName=acme&q=companyFeedByUniversalName"
            "&moduleKey=member-share&count=100&start=0"
        )
        assert paths[1].endswith("start=100")

    @pytest.mark.asyncio
    async def test_profile_updates_by_urn(self, client, http):
        """Test profile updates accept a URN id."""
        http.get.side_effect = [_json({"elements": [1]}), _json({"elements": []})]
        assert await client.get_profile_updates(urn_id="ACoA1") == [1]
        assert "profileId=ACoA1" in _paths(http.get)[0]

    @pytest.mark.asyncio
    async def test_updates_stop_on_repeated_page(self, client, http):
        """Test a feed that keeps returning the same updates ends after one repeat."""
        http.get.return_value = _json({"elements": [{"urn": "urn:li:activity:1"}]})
        results = await client.get_profile_updates(public_id="jane")

        assert results == [{"urn": "urn:li:activity:1"}]
        assert http.get.await_count == 2

    @pytest.mark.asyncio
    async def test_updates_require_id(self, client, http):
        """Test missing identifiers raise InvalidInputError without a request."""
        with pytest.raises(InvalidInputError):
            await client.get_company_updates()
        with pytest.raises(InvalidInputError):
            await client.get_profile_updates()
        http.get.assert_not_called()


class TestMessaging:
    """Test mutating endpoints."""

    @pytest.mark.asyncio
    async def test_send_message(self, client, http):
        """Test a 201 reply is reported as success."""
        http.post.return_value = RawResponse(status=201)
        result = await client.send_message("hello", conversation_urn_id="2-abc")

        assert result == ActionResult(ok=True, status_code=201)
        assert _paths(http.post) == ["/messaging/conversations/2-abc/events?action=create"]

    @pytest.mark.asyncio
    async def test_send_message_failure(self, client, http):
        """Test an error status is reported as failure, not raised."""
        http.post.return_value = RawResponse(status=400)
        result = await client.send_message("hello", recipients=["ACoA1"])
        assert not result.ok
        assert _paths(http.post) == ["/messaging/conversations?action=create"]

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "kwargs",
        [
            {"message_body": "", "conversation_urn_id": "2-abc"},
            {"message_body": "hi"},
            {"message_body": "hi", "recipients": []},
        ],
    )
    async def test_send_message_invalid(self, client, http, kwargs):
        """Test invalid arguments raise before any request."""
        with pytest.raises(InvalidInputError):
            await client.send_message(**kwargs)
        http.post.assert_not_called()

    @pytest.mark.asyncio
    async def test_mark_conversation_as_seen(self, client, http):
        """Test mark-as-seen posts the read patch."""
        http.post.return_value = RawResponse(status=200)
        result = await client.mark_conversation_as_seen("2-abc")

        assert result.ok
        assert http.post.call_args.kwargs["json"] == {"patch": {"$set": {"read": True}}}


class TestProfileViews:
    """Test profile view count."""

    @pytest.mark.asyncio
    async def test_degrades_on_error(self, client, http):
        """Test a failed call yields 0."""
        http.get.return_value = RawResponse(status=500)
        assert await client.get_current_profile_views() == 0
