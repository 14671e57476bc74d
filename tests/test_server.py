"""Tests for scope resolution and client construction."""

import pytest

from helpscout_mcp.clients import HelpScoutClients, build_clients
from helpscout_mcp.docs_client import DocsClient
from helpscout_mcp.inbox_client import InboxClient
from helpscout_mcp.server import _resolve_scopes
from helpscout_mcp.tools import SCOPE_REGISTRY


class TestResolveScopes:
    def test_defaults_to_all(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("HELPSCOUT_SCOPES", raising=False)
        assert _resolve_scopes(None) == list(SCOPE_REGISTRY)

    def test_env_var(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("HELPSCOUT_SCOPES", "articles, team")
        assert _resolve_scopes(None) == ["articles", "team"]

    def test_cli_wins_over_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("HELPSCOUT_SCOPES", "articles")
        assert _resolve_scopes(["customers"]) == ["customers"]

    def test_unknown_scope_exits(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            _resolve_scopes(["tickets"])
        assert exc_info.value.code == 1


class TestBuildClients:
    def test_neither_configured(self) -> None:
        clients = build_clients(api_key=None, app_id=None, app_secret=None)
        assert clients == HelpScoutClients()
        assert clients.enabled_apis == []

    def test_docs_only(self) -> None:
        clients = build_clients(api_key="k", app_id=None, app_secret=None)
        assert isinstance(clients.docs, DocsClient)
        assert clients.inbox is None
        assert clients.enabled_apis == ["Docs API"]

    def test_inbox_requires_both_values(self) -> None:
        assert build_clients(api_key=None, app_id="id", app_secret=None).inbox is None
        assert build_clients(api_key=None, app_id=None, app_secret="secret").inbox is None

    def test_both_configured(self) -> None:
        clients = build_clients(api_key="k", app_id="id", app_secret="secret")
        assert isinstance(clients.docs, DocsClient)
        assert isinstance(clients.inbox, InboxClient)
        assert clients.enabled_apis == ["Docs API", "Inbox API"]
