"""Shared pytest fixtures."""

import json
from typing import Any, Callable

import httpx
import pytest

from helpscout_mcp.docs_client import DocsClient
from helpscout_mcp.inbox_client import InboxClient

TOKEN_PATH = "/v2/oauth2/token"


class RecordingTransport:
    """An ``httpx.MockTransport`` that records every request it serves."""

    def __init__(self, responder: Callable[[httpx.Request], httpx.Response] | None = None) -> None:
        self.requests: list[httpx.Request] = []
        self.responder = responder or (lambda request: httpx.Response(200, json={"ok": True}))
        self.transport = httpx.MockTransport(self._handle)

    def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.responder(request)

    @property
    def token_requests(self) -> list[httpx.Request]:
        return [r for r in self.requests if r.url.path == TOKEN_PATH]

    @property
    def api_requests(self) -> list[httpx.Request]:
        return [r for r in self.requests if r.url.path != TOKEN_PATH]

    @property
    def last(self) -> httpx.Request:
        return self.api_requests[-1]


def body_of(request: httpx.Request) -> Any:
    return json.loads(request.content)


def inbox_responder(
    api: Callable[[httpx.Request], httpx.Response] | None = None,
    *,
    token: str = "tok-1",
    expires_in: int = 7200,
) -> Callable[[httpx.Request], httpx.Response]:
    """Answer token exchanges with *token* and delegate everything else to *api*."""

    def respond(request: httpx.Request) -> httpx.Response:
        if request.url.path == TOKEN_PATH:
            return httpx.Response(200, json={"access_token": token, "expires_in": expires_in})
        if api is not None:
            return api(request)
        return httpx.Response(200, json={"ok": True})

    return respond


class FakeMCP:
    """Stand-in for FastMCP that keeps the decorated tool functions by name."""

    def __init__(self) -> None:
        self.tools: dict[str, Callable[..., Any]] = {}

    def tool(self, *args: Any, **kwargs: Any) -> Callable:
        def decorator(fn: Callable[..., Any]) -> Callable[..., Any]:
            self.tools[kwargs.get("name") or fn.__name__] = fn
            return fn

        return decorator


@pytest.fixture
def recorder() -> RecordingTransport:
    return RecordingTransport()


@pytest.fixture
def inbox_recorder() -> RecordingTransport:
    return RecordingTransport(inbox_responder())


@pytest.fixture
def docs(recorder: RecordingTransport) -> DocsClient:
    return DocsClient("docs-key", transport=recorder.transport)


@pytest.fixture
def inbox(inbox_recorder: RecordingTransport) -> InboxClient:
    return InboxClient("app-id", "app-secret", transport=inbox_recorder.transport)
