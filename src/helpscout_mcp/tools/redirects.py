"""Help Scout MCP — Docs URL redirect tools.

  • docs_list_redirects / docs_get_redirect / docs_find_redirect
  • docs_create_redirect / docs_update_redirect / docs_delete_redirect
"""
from typing import Any, Dict, Optional

from ..clients import HelpScoutClients
from ..config import DOCS_NOT_CONFIGURED
from ..http_client import compact, handle_error, not_configured, ok, ok_message


def register_redirects_tools(mcp, clients: HelpScoutClients) -> None:
    """Register Docs redirect tools on *mcp*."""
    docs = clients.docs

    @mcp.tool()
    async def docs_list_redirects(site_id: str, page: Optional[int] = None) -> Dict[str, Any]:
        """List URL redirects for a Docs site.

        Args:
            site_id: The site ID
            page: Page number (default: 1)
        """
        if docs is None:
            return not_configured(DOCS_NOT_CONFIGURED)
        try:
            return ok(await docs.list_redirects(site_id, page=page))
        except Exception as e:
            return handle_error(e, "list redirects")

    @mcp.tool()
    async def docs_get_redirect(redirect_id: str) -> Dict[str, Any]:
        """Get a specific URL redirect by ID.

        Args:
            redirect_id: The redirect ID
        """
        if docs is None:
            return not_configured(DOCS_NOT_CONFIGURED)
        try:
            return ok(await docs.get_redirect(redirect_id))
        except Exception as e:
            return handle_error(e, "get redirect")

    @mcp.tool()
    async def docs_find_redirect(site_id: str, url: str) -> Dict[str, Any]:
        """Find the redirect configured for an old URL on a Docs site.

        Args:
            site_id: The site ID
            url: The old URL path to look up
        """
        if docs is None:
            return not_configured(DOCS_NOT_CONFIGURED)
        try:
            return ok(await docs.find_redirect(site_id, url))
        except Exception as e:
            return handle_error(e, "find redirect")

    @mcp.tool()
    async def docs_create_redirect(site_id: str, url_mapping: str, redirect: str) -> Dict[str, Any]:
        """Create a URL redirect for a Docs site.

        Args:
            site_id: The site ID
            url_mapping: The old URL path to redirect from
            redirect: The target URL to redirect to
        """
        if docs is None:
            return not_configured(DOCS_NOT_CONFIGURED)
        data = {"siteId": site_id, "urlMapping": url_mapping, "redirect": redirect}
        try:
            return ok(await docs.create_redirect(data))
        except Exception as e:
            return handle_error(e, "create redirect")

    @mcp.tool()
    async def docs_update_redirect(
        redirect_id: str,
        url_mapping: Optional[str] = None,
        redirect: Optional[str] = None,
    ) -> Dict[str, Any]:
        """Update a URL redirect.

        Args:
            redirect_id: The redirect ID to update
            url_mapping: The old URL path to redirect from
            redirect: The target URL to redirect to
        """
        if docs is None:
            return not_configured(DOCS_NOT_CONFIGURED)
        data = compact({"urlMapping": url_mapping, "redirect": redirect})
        try:
            return ok(await docs.update_redirect(redirect_id, data))
        except Exception as e:
            return handle_error(e, "update redirect")

    @mcp.tool()
    async def docs_delete_redirect(redirect_id: str) -> Dict[str, Any]:
        """Delete a URL redirect.

        Args:
            redirect_id: The redirect ID to delete
        """
        if docs is None:
            return not_configured(DOCS_NOT_CONFIGURED)
        try:
            await docs.delete_redirect(redirect_id)
            return ok_message(f"Redirect {redirect_id} deleted")
        except Exception as e:
            return handle_error(e, "delete redirect")
