"""
Client for the Help Scout Inbox (Mailbox) API (v2).

This module defines :class:`InboxClient`, which authenticates with the
OAuth2 client-credentials grant and performs requests against the Inbox
API.  The access token is cached on the instance and reused until
:data:`~helpscout_mcp.config.TOKEN_EXPIRY_MARGIN` seconds before the
server would reject it, at which point the next call fetches a new one.

Token exchange is not guarded by a lock.  Two calls that both find the
cache empty will each hit the token endpoint; the exchange is idempotent
and whichever token is stored last is equally valid.
"""
import logging
import time
from dataclasses import dataclass
from typing import Any, Dict, Optional

import httpx

from .config import (
    HELPSCOUT_TIMEOUT,
    INBOX_BASE_URL,
    INBOX_TOKEN_URL,
    TOKEN_EXPIRY_MARGIN,
)
from .exceptions import ApiError, OAuthError
from .http_client import build_query, parse_body

log = logging.getLogger(__name__)


def _now_ms() -> int:
    return int(time.time() * 1000)


@dataclass(frozen=True)
class AccessToken:
    token: str
    expires_at_ms: int

    def is_valid(self, now_ms: int) -> bool:
        return now_ms < self.expires_at_ms


class InboxClient:
    """Async client for the Inbox API.

    Parameters
    ----------
    app_id : str
        OAuth application id.
    app_secret : str
        OAuth application secret.
    base_url, token_url : str, optional
        Override the API and token endpoints.
    timeout : float, optional
        Seconds; applies to API requests and to the token exchange.
    transport : httpx.AsyncBaseTransport, optional
        Passed to ``httpx.AsyncClient``; tests use ``httpx.MockTransport``.
    """

    def __init__(
        self,
        app_id: str,
        app_secret: str,
        *,
        base_url: str = INBOX_BASE_URL,
        token_url: str = INBOX_TOKEN_URL,
        timeout: Optional[float] = HELPSCOUT_TIMEOUT,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        if not app_id:
            raise ValueError("app_id must be provided")
        if not app_secret:
            raise ValueError("app_secret must be provided")
        self._app_id = app_id
        self._app_secret = app_secret
        self.base_url = base_url.rstrip("/")
        self.token_url = token_url
        self._timeout = timeout
        self._transport = transport
        self._token: Optional[AccessToken] = None

    def _http(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(timeout=self._timeout, transport=self._transport)

    # ------------------------------------------------------------------
    # Authentication
    # ------------------------------------------------------------------
    async def _refresh_access_token(self) -> AccessToken:
        """Exchange the app credentials for a new access token.

        The stored expiry is the server-declared lifetime minus the safety
        margin, so a lifetime of 60 seconds or less yields a token that is
        already expired and will be replaced on the next call.
        """
        payload = {
            "grant_type": "client_credentials",
            "client_id": self._app_id,
            "client_secret": self._app_secret,
        }
        async with self._http() as client:
            resp = await client.post(self.token_url, json=payload)

        if not resp.is_success:
            log.warning("Help Scout token exchange failed with status %s", resp.status_code)
            raise OAuthError(resp.status_code, resp.text)

        data: Dict[str, Any] = resp.json()
        access_token = data.get("access_token")
        if not access_token:
            raise OAuthError(resp.status_code, "token response did not contain an access_token")
        expires_in = data.get("expires_in")
        if not isinstance(expires_in, (int, float)):
            expires_in = 0

        token = AccessToken(
            token=access_token,
            expires_at_ms=_now_ms() + int((expires_in - TOKEN_EXPIRY_MARGIN) * 1000),
        )
        self._token = token
        log.info("Obtained Help Scout access token (expires in %ss)", expires_in)
        return token

    async def _get_access_token(self) -> str:
        token = self._token
        if token is None or not token.is_valid(_now_ms()):
            token = await self._refresh_access_token()
        return token.token

    # ------------------------------------------------------------------
    # HTTP request helper
    # ------------------------------------------------------------------
    async def _request(
        self,
        method: str,
        path: str,
        body: Optional[Dict[str, Any]] = None,
        params: Optional[Dict[str, Any]] = None,
    ) -> Any:
        token = await self._get_access_token()
        headers = {
            "Authorization": f"Bearer {token}",
            "Accept": "application/json",
        }
        kwargs: Dict[str, Any] = {"params": build_query(params) or None}
        if body is not None and method in ("POST", "PUT", "PATCH"):
            headers["Content-Type"] = "application/json"
            kwargs["json"] = body

        log.debug("Inbox API %s %s", method, path)
        async with self._http() as client:
            resp = await client.request(method, f"{self.base_url}{path}", headers=headers, **kwargs)

        if not resp.is_success:
            raise ApiError(resp.status_code, resp.text, "Inbox")
        return parse_body(resp)

    # ── Conversations ─────────────────────────────────────────────────

    async def list_conversations(
        self,
        mailbox: Optional[int] = None,
        status: Optional[str] = None,
        tag: Optional[str] = None,
        assigned_to: Optional[int] = None,
        modified_since: Optional[str] = None,
        sort_field: Optional[str] = None,
        sort_order: Optional[str] = None,
        page: Optional[int] = None,
        query: Optional[str] = None,
    ) -> Any:
        params = {
            "mailbox": mailbox,
            "status": status,
            "tag": tag,
            "assigned_to": assigned_to,
            "modifiedSince": modified_since,
            "sortField": sort_field,
            "sortOrder": sort_order,
            "page": page,
            "query": query,
        }
        return await self._request("GET", "/conversations", params=params)

    async def get_conversation(self, conversation_id: int, embed: Optional[str] = None) -> Any:
        return await self._request(
            "GET", f"/conversations/{conversation_id}", params={"embed": embed}
        )

    async def create_conversation(self, data: Dict[str, Any]) -> Any:
        return await self._request("POST", "/conversations", data)

    async def update_conversation(self, conversation_id: int, op: str, path: str, value: Any) -> Any:
        """Apply a single JSON-Patch style operation to a conversation."""
        return await self._request(
            "PATCH",
            f"/conversations/{conversation_id}",
            {"op": op, "path": path, "value": value},
        )

    async def delete_conversation(self, conversation_id: int) -> Any:
        return await self._request("DELETE", f"/conversations/{conversation_id}")

    # ── Threads ───────────────────────────────────────────────────────

    async def list_threads(self, conversation_id: int) -> Any:
        return await self._request("GET", f"/conversations/{conversation_id}/threads")

    async def create_reply_thread(self, conversation_id: int, data: Dict[str, Any]) -> Any:
        return await self._request("POST", f"/conversations/{conversation_id}/reply", data)

    async def create_note_thread(self, conversation_id: int, data: Dict[str, Any]) -> Any:
        return await self._request("POST", f"/conversations/{conversation_id}/notes", data)

    async def create_phone_thread(self, conversation_id: int, data: Dict[str, Any]) -> Any:
        return await self._request("POST", f"/conversations/{conversation_id}/phones", data)

    # ── Customers ─────────────────────────────────────────────────────

    async def list_customers(
        self,
        first_name: Optional[str] = None,
        last_name: Optional[str] = None,
        email: Optional[str] = None,
        modified_since: Optional[str] = None,
        sort_field: Optional[str] = None,
        sort_order: Optional[str] = None,
        page: Optional[int] = None,
        query: Optional[str] = None,
    ) -> Any:
        params = {
            "firstName": first_name,
            "lastName": last_name,
            "email": email,
            "modifiedSince": modified_since,
            "sortField": sort_field,
            "sortOrder": sort_order,
            "page": page,
            "query": query,
        }
        return await self._request("GET", "/customers", params=params)

    async def get_customer(self, customer_id: int) -> Any:
        return await self._request("GET", f"/customers/{customer_id}")

    async def create_customer(self, data: Dict[str, Any]) -> Any:
        return await self._request("POST", "/customers", data)

    async def update_customer(self, customer_id: int, data: Dict[str, Any]) -> Any:
        return await self._request("PUT", f"/customers/{customer_id}", data)

    # ── Mailboxes ─────────────────────────────────────────────────────

    async def list_mailboxes(self, page: Optional[int] = None) -> Any:
        return await self._request("GET", "/mailboxes", params={"page": page})

    async def get_mailbox(self, mailbox_id: int) -> Any:
        return await self._request("GET", f"/mailboxes/{mailbox_id}")

    # ── Users ─────────────────────────────────────────────────────────

    async def list_users(self, page: Optional[int] = None) -> Any:
        return await self._request("GET", "/users", params={"page": page})

    async def get_user(self, user_id: int) -> Any:
        return await self._request("GET", f"/users/{user_id}")

    async def get_resource_owner(self) -> Any:
        return await self._request("GET", "/users/me")

    # ── Tags ──────────────────────────────────────────────────────────

    async def list_tags(self, page: Optional[int] = None) -> Any:
        return await self._request("GET", "/tags", params={"page": page})
