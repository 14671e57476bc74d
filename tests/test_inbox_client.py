"""Tests for InboxClient — token lifecycle and request building."""

import asyncio

import httpx
import pytest

from conftest import RecordingTransport, body_of, inbox_responder
from helpscout_mcp import inbox_client as inbox_module
from helpscout_mcp.exceptions import ApiError, OAuthError
from helpscout_mcp.inbox_client import AccessToken, InboxClient


class FakeClock:
    def __init__(self, now_ms: int = 1_700_000_000_000) -> None:
        self.now_ms = now_ms

    def __call__(self) -> int:
        return self.now_ms

    def advance(self, seconds: float) -> None:
        self.now_ms += int(seconds * 1000)


@pytest.fixture
def clock(monkeypatch: pytest.MonkeyPatch) -> FakeClock:
    c = FakeClock()
    monkeypatch.setattr(inbox_module, "_now_ms", c)
    return c


def _client(rec: RecordingTransport) -> InboxClient:
    return InboxClient("app-id", "app-secret", transport=rec.transport)


# ── construction ──────────────────────────────────────────────────────────────


@pytest.mark.parametrize("app_id,app_secret", [("", "s"), ("i", "")])
def test_missing_credentials_rejected(app_id: str, app_secret: str) -> None:
    with pytest.raises(ValueError):
        InboxClient(app_id, app_secret)


# ── AccessToken ───────────────────────────────────────────────────────────────


class TestAccessToken:
    def test_valid_strictly_before_expiry(self) -> None:
        token = AccessToken("t", expires_at_ms=1000)
        assert token.is_valid(999)
        assert not token.is_valid(1000)
        assert not token.is_valid(1001)


# ── token acquisition ─────────────────────────────────────────────────────────


async def test_token_exchange_payload(inbox: InboxClient, inbox_recorder: RecordingTransport) -> None:
    await inbox.list_tags()
    [token_req] = inbox_recorder.token_requests
    assert token_req.method == "POST"
    assert str(token_req.url) == "https://api.helpscout.net/v2/oauth2/token"
    assert body_of(token_req) == {
        "grant_type": "client_credentials",
        "client_id": "app-id",
        "client_secret": "app-secret",
    }


async def test_token_reused_within_validity(inbox: InboxClient, inbox_recorder: RecordingTransport) -> None:
    await inbox.list_mailboxes()
    await inbox.get_mailbox(7)
    assert len(inbox_recorder.token_requests) == 1
    assert len(inbox_recorder.api_requests) == 2
    assert all(r.headers["Authorization"] == "Bearer tok-1" for r in inbox_recorder.api_requests)


async def test_token_renewal_boundary(clock: FakeClock) -> None:
    rec = RecordingTransport(inbox_responder(expires_in=3600))
    client = _client(rec)

    await client.list_users()
    assert len(rec.token_requests) == 1

    # valid strictly before t0 + (3600 - 60) seconds
    clock.now_ms += 3_539_999
    await client.list_users()
    assert len(rec.token_requests) == 1

    clock.now_ms += 1
    await client.list_users()
    assert len(rec.token_requests) == 2


async def test_renewal_overwrites_token(clock: FakeClock) -> None:
    tokens = iter(["first", "second"])

    def respond(request: httpx.Request) -> httpx.Response:
        if request.url.path == "/v2/oauth2/token":
            return httpx.Response(200, json={"access_token": next(tokens), "expires_in": 120})
        return httpx.Response(200, json={})

    rec = RecordingTransport(respond)
    client = _client(rec)
    await client.list_tags()
    clock.advance(60)
    await client.list_tags()
    assert [r.headers["Authorization"] for r in rec.api_requests] == ["Bearer first", "Bearer second"]


@pytest.mark.parametrize("lifetime", [60, 30])
async def test_short_lifetime_forces_reacquisition(clock: FakeClock, lifetime: int) -> None:
    rec = RecordingTransport(inbox_responder(expires_in=lifetime))
    client = _client(rec)
    await client.list_tags()
    await client.list_tags()
    assert len(rec.token_requests) == 2


async def test_oauth_failure_raises_and_skips_api_call() -> None:
    calls = {"token": 0}

    def respond(request: httpx.Request) -> httpx.Response:
        if request.url.path == "/v2/oauth2/token":
            calls["token"] += 1
            if calls["token"] == 1:
                return httpx.Response(401, text='{"error": "invalid_client"}')
            return httpx.Response(200, json={"access_token": "tok", "expires_in": 7200})
        return httpx.Response(200, json={"ok": True})

    rec = RecordingTransport(respond)
    client = _client(rec)

    with pytest.raises(OAuthError) as exc_info:
        await client.list_conversations()
    assert exc_info.value.status_code == 401
    assert "401" in str(exc_info.value)
    assert "invalid_client" in str(exc_info.value)
    assert rec.api_requests == []

    # no automatic retry; the next call starts acquisition from scratch
    assert await client.list_conversations() == {"ok": True}
    assert len(rec.token_requests) == 2


async def test_token_response_without_access_token() -> None:
    def respond(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"expires_in": 7200})

    client = _client(RecordingTransport(respond))
    with pytest.raises(OAuthError):
        await client.list_tags()


async def test_instances_have_independent_caches() -> None:
    rec = RecordingTransport(inbox_responder())
    a, b = _client(rec), _client(rec)
    await a.list_tags()
    await b.list_tags()
    await a.list_tags()
    assert len(rec.token_requests) == 2


async def test_concurrent_calls_without_token_all_succeed() -> None:
    rec = RecordingTransport(inbox_responder())
    client = _client(rec)
    results = await asyncio.gather(client.list_tags(), client.list_users(), client.list_mailboxes())
    assert results == [{"ok": True}] * 3
    assert 1 <= len(rec.token_requests) <= 3
    assert len(rec.api_requests) == 3


# ── end-to-end: reply ─────────────────────────────────────────────────────────


async def test_create_reply(inbox: InboxClient, inbox_recorder: RecordingTransport) -> None:
    await inbox.create_reply_thread(42, {"text": "hello"})

    assert inbox_recorder.requests[0].url.path == "/v2/oauth2/token"
    req = inbox_recorder.last
    assert req.method == "POST"
    assert req.url.path == "/v2/conversations/42/reply"
    assert req.headers["Authorization"] == "Bearer tok-1"
    assert body_of(req) == {"text": "hello"}


@pytest.mark.parametrize(
    "method,suffix",
    [
        ("create_reply_thread", "reply"),
        ("create_note_thread", "notes"),
        ("create_phone_thread", "phones"),
    ],
)
async def test_thread_endpoints(
    inbox: InboxClient, inbox_recorder: RecordingTransport, method: str, suffix: str
) -> None:
    await getattr(inbox, method)(9, {"text": "t"})
    assert inbox_recorder.last.url.path == f"/v2/conversations/9/{suffix}"


# ── request building ──────────────────────────────────────────────────────────


async def test_update_conversation_is_single_patch(inbox: InboxClient, inbox_recorder: RecordingTransport) -> None:
    await inbox.update_conversation(42, "replace", "/status", "closed")
    req = inbox_recorder.last
    assert req.method == "PATCH"
    assert req.url.path == "/v2/conversations/42"
    assert req.headers["Content-Type"] == "application/json"
    assert body_of(req) == {"op": "replace", "path": "/status", "value": "closed"}


async def test_list_conversations_omits_unset_filters(
    inbox: InboxClient, inbox_recorder: RecordingTransport
) -> None:
    await inbox.list_conversations(
        mailbox=12, status="active", tag="", assigned_to=None, modified_since="2024-01-01T00:00:00Z",
        sort_field="modifiedAt", sort_order="desc", page=None, query=None,
    )
    assert dict(inbox_recorder.last.url.params) == {
        "mailbox": "12",
        "status": "active",
        "modifiedSince": "2024-01-01T00:00:00Z",
        "sortField": "modifiedAt",
        "sortOrder": "desc",
    }


async def test_list_customers_query_keys(inbox: InboxClient, inbox_recorder: RecordingTransport) -> None:
    await inbox.list_customers(first_name="Ada", email="", page=2)
    assert dict(inbox_recorder.last.url.params) == {"firstName": "Ada", "page": "2"}


async def test_get_conversation_embed(inbox: InboxClient, inbox_recorder: RecordingTransport) -> None:
    await inbox.get_conversation(5)
    assert "embed" not in inbox_recorder.last.url.params
    await inbox.get_conversation(5, embed="threads")
    assert inbox_recorder.last.url.params.get("embed") == "threads"


async def test_resource_owner_path(inbox: InboxClient, inbox_recorder: RecordingTransport) -> None:
    await inbox.get_resource_owner()
    assert inbox_recorder.last.url.path == "/v2/users/me"


async def test_delete_returns_empty_dict() -> None:
    rec = RecordingTransport(inbox_responder(lambda request: httpx.Response(204)))
    assert await _client(rec).delete_conversation(3) == {}


async def test_api_error_carries_status_and_body() -> None:
    rec = RecordingTransport(inbox_responder(lambda request: httpx.Response(404, text="no such customer")))
    with pytest.raises(ApiError) as exc_info:
        await _client(rec).get_customer(1)
    assert exc_info.value.status_code == 404
    assert str(exc_info.value) == "Help Scout Inbox API error 404: no such customer"
