"""Help Scout MCP — Docs sites tools.

  • docs_list_sites / docs_get_site
  • docs_create_site / docs_update_site / docs_delete_site
"""
from typing import Any, Dict, Optional

from ..clients import HelpScoutClients
from ..config import DOCS_NOT_CONFIGURED
from ..http_client import compact, handle_error, not_configured, ok, ok_message


def register_sites_tools(mcp, clients: HelpScoutClients) -> None:
    """Register Docs site tools on *mcp*."""
    docs = clients.docs

    @mcp.tool()
    async def docs_list_sites(page: int = 1) -> Dict[str, Any]:
        """List all Docs sites in Help Scout.

        Args:
            page: Page number (default: 1)
        """
        if docs is None:
            return not_configured(DOCS_NOT_CONFIGURED)
        try:
            return ok(await docs.list_sites(page))
        except Exception as e:
            return handle_error(e, "list sites")

    @mcp.tool()
    async def docs_get_site(site_id: str) -> Dict[str, Any]:
        """Get a specific Docs site by ID.

        Args:
            site_id: The site ID
        """
        if docs is None:
            return not_configured(DOCS_NOT_CONFIGURED)
        try:
            return ok(await docs.get_site(site_id))
        except Exception as e:
            return handle_error(e, "get site")

    @mcp.tool()
    async def docs_create_site(
        sub_domain: str,
        title: str,
        company_name: Optional[str] = None,
        home_url: Optional[str] = None,
        home_link_text: Optional[str] = None,
        bg_color: Optional[str] = None,
        description: Optional[str] = None,
        has_contact_form: Optional[bool] = None,
        mailbox_id: Optional[int] = None,
    ) -> Dict[str, Any]:
        """Create a new Docs site.

        Args:
            sub_domain: Subdomain for the site
            title: Site title
            company_name: Company name
            home_url: Home URL
            home_link_text: Home link text
            bg_color: Background color hex
            description: Site description
            has_contact_form: Enable contact form
            mailbox_id: Mailbox ID for contact form
        """
        if docs is None:
            return not_configured(DOCS_NOT_CONFIGURED)
        data = compact({
            "subDomain": sub_domain,
            "title": title,
            "companyName": company_name,
            "homeUrl": home_url,
            "homeLinkText": home_link_text,
            "bgColor": bg_color,
            "description": description,
            "hasContactForm": has_contact_form,
            "mailboxId": mailbox_id,
        })
        try:
            return ok(await docs.create_site(data))
        except Exception as e:
            return handle_error(e, "create site")

    @mcp.tool()
    async def docs_update_site(
        site_id: str,
        title: Optional[str] = None,
        company_name: Optional[str] = None,
        home_url: Optional[str] = None,
        home_link_text: Optional[str] = None,
        bg_color: Optional[str] = None,
        description: Optional[str] = None,
        has_contact_form: Optional[bool] = None,
    ) -> Dict[str, Any]:
        """Update a Docs site.

        Args:
            site_id: The site ID to update
            title: Site title
            company_name: Company name
            home_url: Home URL
            home_link_text: Home link text
            bg_color: Background color hex
            description: Site description
            has_contact_form: Enable contact form
        """
        if docs is None:
            return not_configured(DOCS_NOT_CONFIGURED)
        data = compact({
            "title": title,
            "companyName": company_name,
            "homeUrl": home_url,
            "homeLinkText": home_link_text,
            "bgColor": bg_color,
            "description": description,
            "hasContactForm": has_contact_form,
        })
        try:
            return ok(await docs.update_site(site_id, data))
        except Exception as e:
            return handle_error(e, "update site")

    @mcp.tool()
    async def docs_delete_site(site_id: str) -> Dict[str, Any]:
        """Delete a Docs site. WARNING: This permanently deletes the site and all its collections.

        Args:
            site_id: The site ID to delete
        """
        if docs is None:
            return not_configured(DOCS_NOT_CONFIGURED)
        try:
            await docs.delete_site(site_id)
            return ok_message(f"Site {site_id} deleted")
        except Exception as e:
            return handle_error(e, "delete site")
