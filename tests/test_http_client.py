"""Tests for the shared request helpers and result envelopes."""

import base64

import httpx
import pytest

from helpscout_mcp.config import SortOrder, Visibility
from helpscout_mcp.exceptions import ApiError, OAuthError
from helpscout_mcp.http_client import (
    basic_auth_header,
    build_query,
    compact,
    handle_error,
    not_configured,
    ok,
    ok_message,
    parse_body,
)


# ── basic_auth_header ─────────────────────────────────────────────────────────


def test_basic_auth_uses_key_and_placeholder_password() -> None:
    header = basic_auth_header("secret-key")
    assert header.startswith("Basic ")
    assert base64.b64decode(header[len("Basic "):]).decode() == "secret-key:X"


# ── build_query ───────────────────────────────────────────────────────────────


class TestBuildQuery:
    def test_drops_none_and_empty_string(self) -> None:
        assert build_query({"siteId": None, "sort": "", "order": "asc"}) == {"order": "asc"}

    def test_keeps_falsy_values_that_are_set(self) -> None:
        assert build_query({"page": 0, "draft": False}) == {"page": "0", "draft": "false"}

    def test_stringifies_numbers_and_booleans(self) -> None:
        assert build_query({"page": 3, "draft": True}) == {"page": "3", "draft": "true"}

    def test_uses_enum_values(self) -> None:
        assert build_query({"visibility": Visibility.PUBLIC, "order": SortOrder.DESC}) == {
            "visibility": "public",
            "order": "desc",
        }

    def test_none_mapping(self) -> None:
        assert build_query(None) == {}


def test_compact_drops_only_none() -> None:
    assert compact({"a": None, "b": "", "c": 0, "d": [], "e": Visibility.PRIVATE}) == {
        "b": "",
        "c": 0,
        "d": [],
        "e": "private",
    }


# ── parse_body ────────────────────────────────────────────────────────────────


class TestParseBody:
    def test_no_content_is_empty_dict(self) -> None:
        assert parse_body(httpx.Response(204)) == {}

    def test_zero_content_length_is_empty_dict(self) -> None:
        assert parse_body(httpx.Response(200, headers={"content-length": "0"})) == {}

    def test_empty_text_is_empty_dict(self) -> None:
        assert parse_body(httpx.Response(200, content=b"")) == {}

    def test_json_body_is_decoded(self) -> None:
        assert parse_body(httpx.Response(200, json={"site": {"id": "s1"}})) == {"site": {"id": "s1"}}


# ── envelopes ─────────────────────────────────────────────────────────────────


class TestEnvelopes:
    def test_ok(self) -> None:
        assert ok({"id": 1}) == {"success": True, "data": {"id": 1}}

    def test_ok_message(self) -> None:
        assert ok_message("Site s1 deleted") == {"success": True, "message": "Site s1 deleted"}

    def test_not_configured(self) -> None:
        assert not_configured("X not configured") == {"success": False, "error": "X not configured"}

    def test_api_error_with_json_body(self) -> None:
        out = handle_error(ApiError(404, '{"error": "Not found"}'), "get site")
        assert out["success"] is False
        assert "Failed to get site" in out["error"]
        assert "404" in out["error"]
        assert out["status_code"] == 404
        assert out["details"] == {"error": "Not found"}

    def test_api_error_with_text_body(self) -> None:
        out = handle_error(ApiError(500, "Internal Server Error", "Inbox"), "list tags")
        assert "Help Scout Inbox API error 500: Internal Server Error" in out["error"]
        assert out["details"] == "Internal Server Error"

    def test_oauth_error(self) -> None:
        out = handle_error(OAuthError(401, "invalid_client"), "list users")
        assert "Help Scout OAuth error 401: invalid_client" in out["error"]
        assert out["status_code"] == 401

    def test_unexpected_error(self) -> None:
        out = handle_error(httpx.ConnectError("connection refused"), "list sites")
        assert out == {
            "success": False,
            "error": "Unexpected error during list sites: connection refused",
        }


@pytest.mark.parametrize("status", [400, 404, 500])
def test_api_error_message_includes_status_and_body(status: int) -> None:
    err = ApiError(status, "boom")
    assert str(err) == f"Help Scout Docs API error {status}: boom"
    assert err.status_code == status
    assert err.body == "boom"
