"""
Client for the Help Scout Docs API (v1).

Authentication is HTTP Basic with the API key as the username and a
placeholder password.  The header is derived from the key on every
request, so the client holds no state beyond its credentials.

Every create and update call appends ``?reload=true`` so the server
echoes the full resource instead of a bare acknowledgement.
"""
import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

import httpx

from .config import DOCS_BASE_URL, HELPSCOUT_TIMEOUT, ParentType
from .exceptions import ApiError
from .http_client import basic_auth_header, build_query, parse_body

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class ArticleParent:
    """The collection or category whose articles are being listed."""

    kind: ParentType
    id: str

    @property
    def articles_path(self) -> str:
        if self.kind is ParentType.COLLECTION:
            return f"/collections/{self.id}/articles"
        if self.kind is ParentType.CATEGORY:
            return f"/categories/{self.id}/articles"
        raise ValueError(f"Unknown parent type {self.kind!r}")


class DocsClient:
    """Async client for the Docs API.

    *transport* is handed to ``httpx.AsyncClient`` and exists so tests can
    substitute an ``httpx.MockTransport``.
    """

    def __init__(
        self,
        api_key: str,
        *,
        base_url: str = DOCS_BASE_URL,
        timeout: Optional[float] = HELPSCOUT_TIMEOUT,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        if not api_key:
            raise ValueError("api_key must be provided")
        self._api_key = api_key
        self.base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._transport = transport

    def _headers(self) -> Dict[str, str]:
        return {
            "Authorization": basic_auth_header(self._api_key),
            "Accept": "application/json",
        }

    async def _request(
        self,
        method: str,
        path: str,
        body: Optional[Dict[str, Any]] = None,
        params: Optional[Dict[str, Any]] = None,
    ) -> Any:
        headers = self._headers()
        kwargs: Dict[str, Any] = {"params": build_query(params) or None}
        if body is not None and method in ("POST", "PUT"):
            headers["Content-Type"] = "application/json"
            kwargs["json"] = body

        log.debug("Docs API %s %s", method, path)
        async with httpx.AsyncClient(timeout=self._timeout, transport=self._transport) as client:
            resp = await client.request(method, f"{self.base_url}{path}", headers=headers, **kwargs)

        if not resp.is_success:
            raise ApiError(resp.status_code, resp.text, "Docs")
        return parse_body(resp)

    # ── Sites ─────────────────────────────────────────────────────────

    async def list_sites(self, page: int = 1) -> Any:
        return await self._request("GET", "/sites", params={"page": page})

    async def get_site(self, site_id: str) -> Any:
        return await self._request("GET", f"/sites/{site_id}")

    async def create_site(self, data: Dict[str, Any]) -> Any:
        return await self._request("POST", "/sites?reload=true", data)

    async def update_site(self, site_id: str, data: Dict[str, Any]) -> Any:
        return await self._request("PUT", f"/sites/{site_id}?reload=true", data)

    async def delete_site(self, site_id: str) -> Any:
        return await self._request("DELETE", f"/sites/{site_id}")

    # ── Collections ───────────────────────────────────────────────────

    async def list_collections(
        self,
        page: Optional[int] = None,
        site_id: Optional[str] = None,
        visibility: Optional[str] = None,
        sort: Optional[str] = None,
        order: Optional[str] = None,
    ) -> Any:
        params = {
            "page": page,
            "siteId": site_id,
            "visibility": visibility,
            "sort": sort,
            "order": order,
        }
        return await self._request("GET", "/collections", params=params)

    async def get_collection(self, collection_id: str) -> Any:
        return await self._request("GET", f"/collections/{collection_id}")

    async def create_collection(self, data: Dict[str, Any]) -> Any:
        return await self._request("POST", "/collections?reload=true", data)

    async def update_collection(self, collection_id: str, data: Dict[str, Any]) -> Any:
        return await self._request("PUT", f"/collections/{collection_id}?reload=true", data)

    async def delete_collection(self, collection_id: str) -> Any:
        return await self._request("DELETE", f"/collections/{collection_id}")

    # ── Categories ────────────────────────────────────────────────────

    async def list_categories(
        self,
        collection_id: str,
        page: Optional[int] = None,
        sort: Optional[str] = None,
        order: Optional[str] = None,
    ) -> Any:
        params = {"page": page, "sort": sort, "order": order}
        return await self._request("GET", f"/collections/{collection_id}/categories", params=params)

    async def get_category(self, category_id: str) -> Any:
        return await self._request("GET", f"/categories/{category_id}")

    async def create_category(self, data: Dict[str, Any]) -> Any:
        return await self._request("POST", "/categories?reload=true", data)

    async def update_category(self, category_id: str, data: Dict[str, Any]) -> Any:
        return await self._request("PUT", f"/categories/{category_id}?reload=true", data)

    async def update_category_order(self, collection_id: str, categories: List[Dict[str, Any]]) -> Any:
        """Reorder categories in one batch request.

        *categories* is a list of ``{"id": ..., "order": ...}`` pairs.
        """
        return await self._request(
            "PUT", f"/collections/{collection_id}/categories", {"categories": categories}
        )

    async def delete_category(self, category_id: str) -> Any:
        return await self._request("DELETE", f"/categories/{category_id}")

    # ── Articles ──────────────────────────────────────────────────────

    async def list_articles(
        self,
        parent: ArticleParent,
        page: Optional[int] = None,
        status: Optional[str] = None,
        sort: Optional[str] = None,
        order: Optional[str] = None,
        page_size: Optional[int] = None,
    ) -> Any:
        params = {
            "page": page,
            "status": status,
            "sort": sort,
            "order": order,
            "pageSize": page_size,
        }
        return await self._request("GET", parent.articles_path, params=params)

    async def search_articles(
        self,
        query: str,
        collection_id: Optional[str] = None,
        site_id: Optional[str] = None,
        status: Optional[str] = None,
        visibility: Optional[str] = None,
        page: Optional[int] = None,
    ) -> Any:
        params = {
            "query": query,
            "collectionId": collection_id,
            "siteId": site_id,
            "status": status,
            "visibility": visibility,
            "page": page,
        }
        return await self._request("GET", "/search/articles", params=params)

    async def get_article(self, article_id_or_number: str, draft: bool = False) -> Any:
        """Fetch an article by id or by number; the server tells them apart."""
        params = {"draft": "true"} if draft else None
        return await self._request("GET", f"/articles/{article_id_or_number}", params=params)

    async def create_article(self, data: Dict[str, Any]) -> Any:
        return await self._request("POST", "/articles?reload=true", data)

    async def update_article(self, article_id: str, data: Dict[str, Any]) -> Any:
        return await self._request("PUT", f"/articles/{article_id}?reload=true", data)

    async def delete_article(self, article_id: str) -> Any:
        return await self._request("DELETE", f"/articles/{article_id}")

    async def list_related_articles(self, article_id: str, page: Optional[int] = None) -> Any:
        return await self._request("GET", f"/articles/{article_id}/related", params={"page": page})

    async def list_revisions(self, article_id: str, page: Optional[int] = None) -> Any:
        return await self._request("GET", f"/articles/{article_id}/revisions", params={"page": page})

    async def get_revision(self, revision_id: str) -> Any:
        return await self._request("GET", f"/revisions/{revision_id}")

    async def save_article_draft(self, article_id: str, text: str) -> Any:
        return await self._request("PUT", f"/articles/{article_id}/drafts", {"text": text})

    async def delete_article_draft(self, article_id: str) -> Any:
        return await self._request("DELETE", f"/articles/{article_id}/drafts")

    async def update_view_count(self, article_id: str, count: int) -> Any:
        return await self._request("PUT", f"/articles/{article_id}/views", {"count": count})

    # ── Redirects ─────────────────────────────────────────────────────

    async def list_redirects(self, site_id: str, page: Optional[int] = None) -> Any:
        return await self._request("GET", f"/redirects/site/{site_id}", params={"page": page})

    async def get_redirect(self, redirect_id: str) -> Any:
        return await self._request("GET", f"/redirects/{redirect_id}")

    async def find_redirect(self, site_id: str, url: str) -> Any:
        return await self._request("GET", f"/redirects/site/{site_id}", params={"url": url})

    async def create_redirect(self, data: Dict[str, Any]) -> Any:
        return await self._request("POST", "/redirects?reload=true", data)

    async def update_redirect(self, redirect_id: str, data: Dict[str, Any]) -> Any:
        return await self._request("PUT", f"/redirects/{redirect_id}?reload=true", data)

    async def delete_redirect(self, redirect_id: str) -> Any:
        return await self._request("DELETE", f"/redirects/{redirect_id}")
