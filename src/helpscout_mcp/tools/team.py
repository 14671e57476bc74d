"""Help Scout MCP — Inbox mailboxes, users & tags tools.

  • inbox_list_mailboxes / inbox_get_mailbox
  • inbox_list_users / inbox_get_user / inbox_get_me
  • inbox_list_tags
"""
from typing import Any, Dict, Optional

from ..clients import HelpScoutClients
from ..config import INBOX_NOT_CONFIGURED
from ..http_client import handle_error, not_configured, ok


def register_team_tools(mcp, clients: HelpScoutClients) -> None:
    """Register mailbox, user and tag tools on *mcp*."""
    inbox = clients.inbox

    # ── mailboxes ──
    @mcp.tool()
    async def inbox_list_mailboxes(page: Optional[int] = None) -> Dict[str, Any]:
        """List all mailboxes in Help Scout.

        Args:
            page: Page number
        """
        if inbox is None:
            return not_configured(INBOX_NOT_CONFIGURED)
        try:
            return ok(await inbox.list_mailboxes(page))
        except Exception as e:
            return handle_error(e, "list mailboxes")

    @mcp.tool()
    async def inbox_get_mailbox(mailbox_id: int) -> Dict[str, Any]:
        """Get a specific mailbox by ID.

        Args:
            mailbox_id: The mailbox ID
        """
        if inbox is None:
            return not_configured(INBOX_NOT_CONFIGURED)
        try:
            return ok(await inbox.get_mailbox(mailbox_id))
        except Exception as e:
            return handle_error(e, "get mailbox")

    # ── users ──
    @mcp.tool()
    async def inbox_list_users(page: Optional[int] = None) -> Dict[str, Any]:
        """List all users (team members) in Help Scout.

        Args:
            page: Page number
        """
        if inbox is None:
            return not_configured(INBOX_NOT_CONFIGURED)
        try:
            return ok(await inbox.list_users(page))
        except Exception as e:
            return handle_error(e, "list users")

    @mcp.tool()
    async def inbox_get_user(user_id: int) -> Dict[str, Any]:
        """Get a specific user by ID.

        Args:
            user_id: The user ID
        """
        if inbox is None:
            return not_configured(INBOX_NOT_CONFIGURED)
        try:
            return ok(await inbox.get_user(user_id))
        except Exception as e:
            return handle_error(e, "get user")

    @mcp.tool()
    async def inbox_get_me() -> Dict[str, Any]:
        """Get the authenticated user (resource owner)."""
        if inbox is None:
            return not_configured(INBOX_NOT_CONFIGURED)
        try:
            return ok(await inbox.get_resource_owner())
        except Exception as e:
            return handle_error(e, "get resource owner")

    # ── tags ──
    @mcp.tool()
    async def inbox_list_tags(page: Optional[int] = None) -> Dict[str, Any]:
        """List all tags in Help Scout.

        Args:
            page: Page number
        """
        if inbox is None:
            return not_configured(INBOX_NOT_CONFIGURED)
        try:
            return ok(await inbox.list_tags(page))
        except Exception as e:
            return handle_error(e, "list tags")
