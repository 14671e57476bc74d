"""Help Scout MCP — Inbox customers tools.

  • inbox_list_customers / inbox_get_customer
  • inbox_create_customer / inbox_update_customer
"""
from typing import Any, Dict, List, Literal, Optional

from ..clients import HelpScoutClients
from ..config import INBOX_NOT_CONFIGURED, SortOrder
from ..http_client import compact, handle_error, not_configured, ok
from ..models import EmailEntry, PhoneEntry, dump_all

CustomerSort = Literal["firstName", "lastName", "modifiedAt", "score"]


def register_customers_tools(mcp, clients: HelpScoutClients) -> None:
    """Register Inbox customer tools on *mcp*."""
    inbox = clients.inbox

    @mcp.tool()
    async def inbox_list_customers(
        first_name: Optional[str] = None,
        last_name: Optional[str] = None,
        email: Optional[str] = None,
        modified_since: Optional[str] = None,
        sort_field: Optional[CustomerSort] = None,
        sort_order: Optional[SortOrder] = None,
        page: Optional[int] = None,
        query: Optional[str] = None,
    ) -> Dict[str, Any]:
        """List customers in Help Scout. Supports filtering and search.

        Args:
            first_name: Filter by first name
            last_name: Filter by last name
            email: Filter by email
            modified_since: ISO 8601 date filter
            sort_field: Sort field
            sort_order: Sort order ('asc' or 'desc')
            page: Page number
            query: Search query
        """
        if inbox is None:
            return not_configured(INBOX_NOT_CONFIGURED)
        try:
            return ok(await inbox.list_customers(
                first_name=first_name,
                last_name=last_name,
                email=email,
                modified_since=modified_since,
                sort_field=sort_field,
                sort_order=sort_order,
                page=page,
                query=query,
            ))
        except Exception as e:
            return handle_error(e, "list customers")

    @mcp.tool()
    async def inbox_get_customer(customer_id: int) -> Dict[str, Any]:
        """Get a specific customer by ID.

        Args:
            customer_id: The customer ID
        """
        if inbox is None:
            return not_configured(INBOX_NOT_CONFIGURED)
        try:
            return ok(await inbox.get_customer(customer_id))
        except Exception as e:
            return handle_error(e, "get customer")

    @mcp.tool()
    async def inbox_create_customer(
        first_name: Optional[str] = None,
        last_name: Optional[str] = None,
        emails: Optional[List[EmailEntry]] = None,
        phones: Optional[List[PhoneEntry]] = None,
        company: Optional[str] = None,
        job_title: Optional[str] = None,
    ) -> Dict[str, Any]:
        """Create a new customer in Help Scout.

        Args:
            first_name: Customer first name
            last_name: Customer last name
            emails: Customer email addresses, each {value, type?}
            phones: Customer phone numbers, each {value, type?}
            company: Company name
            job_title: Job title
        """
        if inbox is None:
            return not_configured(INBOX_NOT_CONFIGURED)
        data = compact({
            "firstName": first_name,
            "lastName": last_name,
            "emails": dump_all(emails),
            "phones": dump_all(phones),
            "organization": company,
            "jobTitle": job_title,
        })
        try:
            return ok(await inbox.create_customer(data))
        except Exception as e:
            return handle_error(e, "create customer")

    @mcp.tool()
    async def inbox_update_customer(
        customer_id: int,
        first_name: Optional[str] = None,
        last_name: Optional[str] = None,
        company: Optional[str] = None,
        job_title: Optional[str] = None,
        location: Optional[str] = None,
        background: Optional[str] = None,
    ) -> Dict[str, Any]:
        """Update a customer's profile fields.

        Args:
            customer_id: The customer ID
            first_name: Customer first name
            last_name: Customer last name
            company: Company name
            job_title: Job title
            location: Location
            background: Background notes about the customer
        """
        if inbox is None:
            return not_configured(INBOX_NOT_CONFIGURED)
        data = compact({
            "firstName": first_name,
            "lastName": last_name,
            "organization": company,
            "jobTitle": job_title,
            "location": location,
            "background": background,
        })
        try:
            return ok(await inbox.update_customer(customer_id, data))
        except Exception as e:
            return handle_error(e, "update customer")
