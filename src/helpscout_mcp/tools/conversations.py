"""Help Scout MCP — Inbox conversations & threads tools.

  • inbox_list_conversations / inbox_get_conversation
  • inbox_create_conversation / inbox_update_conversation / inbox_delete_conversation
  • inbox_list_threads
  • inbox_create_reply / inbox_create_note / inbox_create_phone

Replies, notes and phone calls are separate endpoints because the API
expects a different payload for each thread type.
"""
from typing import Any, Dict, List, Literal, Optional

from ..clients import HelpScoutClients
from ..config import (
    INBOX_NOT_CONFIGURED,
    ConversationStatus,
    ConversationType,
    PatchOp,
    SortOrder,
)
from ..http_client import compact, handle_error, not_configured, ok, ok_message
from ..models import ConversationThread, CustomerRef, ThreadCustomer, dump, dump_all

ConversationSort = Literal["createdAt", "modifiedAt", "number", "status", "subject"]


def register_conversations_tools(mcp, clients: HelpScoutClients) -> None:
    """Register Inbox conversation and thread tools on *mcp*."""
    inbox = clients.inbox

    # ------------------------------------------------------------------ #
    #  conversations                                                      #
    # ------------------------------------------------------------------ #
    @mcp.tool()
    async def inbox_list_conversations(
        mailbox: Optional[int] = None,
        status: Optional[ConversationStatus] = None,
        tag: Optional[str] = None,
        assigned_to: Optional[int] = None,
        modified_since: Optional[str] = None,
        sort_field: Optional[ConversationSort] = None,
        sort_order: Optional[SortOrder] = None,
        page: Optional[int] = None,
        query: Optional[str] = None,
    ) -> Dict[str, Any]:
        """List conversations from the Help Scout Inbox. Supports filtering by mailbox, status, tag, assignee.

        Args:
            mailbox: Mailbox ID to filter by
            status: Conversation status filter ('active', 'all', 'closed', 'open', 'pending', 'spam')
            tag: Tag name to filter by
            assigned_to: User ID of assignee
            modified_since: ISO 8601 date to filter by modification date
            sort_field: Sort field
            sort_order: Sort order ('asc' or 'desc')
            page: Page number
            query: Search query string
        """
        if inbox is None:
            return not_configured(INBOX_NOT_CONFIGURED)
        try:
            return ok(await inbox.list_conversations(
                mailbox=mailbox,
                status=status,
                tag=tag,
                assigned_to=assigned_to,
                modified_since=modified_since,
                sort_field=sort_field,
                sort_order=sort_order,
                page=page,
                query=query,
            ))
        except Exception as e:
            return handle_error(e, "list conversations")

    @mcp.tool()
    async def inbox_get_conversation(
        conversation_id: int,
        embed: Optional[Literal["threads"]] = None,
    ) -> Dict[str, Any]:
        """Get a specific conversation by ID with full details.

        Args:
            conversation_id: The conversation ID
            embed: 'threads' to embed threads in the response
        """
        if inbox is None:
            return not_configured(INBOX_NOT_CONFIGURED)
        try:
            return ok(await inbox.get_conversation(conversation_id, embed=embed))
        except Exception as e:
            return handle_error(e, "get conversation")

    @mcp.tool()
    async def inbox_create_conversation(
        subject: str,
        customer: CustomerRef,
        mailbox_id: int,
        type: Optional[ConversationType] = None,
        status: Optional[Literal["active", "closed", "open", "pending", "spam"]] = None,
        threads: Optional[List[ConversationThread]] = None,
        tags: Optional[List[str]] = None,
    ) -> Dict[str, Any]:
        """Create a new conversation in Help Scout Inbox.

        Args:
            subject: Conversation subject
            customer: Customer details (email, optional first_name / last_name)
            mailbox_id: Mailbox ID
            type: Conversation type ('email', 'phone', 'chat')
            status: Status
            threads: Initial threads, each {type, text, customer?}
            tags: Tags to apply
        """
        if inbox is None:
            return not_configured(INBOX_NOT_CONFIGURED)
        data = compact({
            "subject": subject,
            "customer": dump(customer),
            "mailboxId": mailbox_id,
            "type": type,
            "status": status,
            "threads": dump_all(threads),
            "tags": tags,
        })
        try:
            return ok(await inbox.create_conversation(data))
        except Exception as e:
            return handle_error(e, "create conversation")

    @mcp.tool()
    async def inbox_update_conversation(
        conversation_id: int,
        op: PatchOp,
        path: str,
        value: Any = None,
    ) -> Dict[str, Any]:
        """Apply one JSON-Patch style change to a conversation.

        Args:
            conversation_id: The conversation ID
            op: Patch operation ('add', 'remove', 'replace', 'move')
            path: Target property, e.g. '/subject', '/status', '/assignTo', '/mailboxId'
            value: New value for the property
        """
        if inbox is None:
            return not_configured(INBOX_NOT_CONFIGURED)
        try:
            result = await inbox.update_conversation(conversation_id, PatchOp(op).value, path, value)
            return ok(result)
        except Exception as e:
            return handle_error(e, "update conversation")

    @mcp.tool()
    async def inbox_delete_conversation(conversation_id: int) -> Dict[str, Any]:
        """Delete a conversation. WARNING: This permanently deletes the conversation.

        Args:
            conversation_id: The conversation ID to delete
        """
        if inbox is None:
            return not_configured(INBOX_NOT_CONFIGURED)
        try:
            await inbox.delete_conversation(conversation_id)
            return ok_message(f"Conversation {conversation_id} deleted")
        except Exception as e:
            return handle_error(e, "delete conversation")

    # ------------------------------------------------------------------ #
    #  threads                                                            #
    # ------------------------------------------------------------------ #
    @mcp.tool()
    async def inbox_list_threads(conversation_id: int) -> Dict[str, Any]:
        """List all threads in a conversation.

        Args:
            conversation_id: The conversation ID
        """
        if inbox is None:
            return not_configured(INBOX_NOT_CONFIGURED)
        try:
            return ok(await inbox.list_threads(conversation_id))
        except Exception as e:
            return handle_error(e, "list threads")

    @mcp.tool()
    async def inbox_create_reply(
        conversation_id: int,
        text: str,
        customer: Optional[ThreadCustomer] = None,
        draft: Optional[bool] = None,
    ) -> Dict[str, Any]:
        """Send a reply in a conversation.

        Args:
            conversation_id: The conversation ID
            text: Reply text (HTML supported)
            customer: Customer to send to
            draft: If true, saves as draft instead of sending
        """
        if inbox is None:
            return not_configured(INBOX_NOT_CONFIGURED)
        data = compact({"text": text, "customer": dump(customer), "draft": draft})
        try:
            return ok(await inbox.create_reply_thread(conversation_id, data))
        except Exception as e:
            return handle_error(e, "create reply")

    @mcp.tool()
    async def inbox_create_note(conversation_id: int, text: str) -> Dict[str, Any]:
        """Add an internal note to a conversation.

        Args:
            conversation_id: The conversation ID
            text: Note text (HTML supported)
        """
        if inbox is None:
            return not_configured(INBOX_NOT_CONFIGURED)
        try:
            return ok(await inbox.create_note_thread(conversation_id, {"text": text}))
        except Exception as e:
            return handle_error(e, "create note")

    @mcp.tool()
    async def inbox_create_phone(
        conversation_id: int,
        text: str,
        customer: Optional[ThreadCustomer] = None,
    ) -> Dict[str, Any]:
        """Log a phone call on a conversation.

        Args:
            conversation_id: The conversation ID
            text: Summary of the call
            customer: Customer who was on the call
        """
        if inbox is None:
            return not_configured(INBOX_NOT_CONFIGURED)
        data = compact({"text": text, "customer": dump(customer)})
        try:
            return ok(await inbox.create_phone_thread(conversation_id, data))
        except Exception as e:
            return handle_error(e, "create phone thread")
