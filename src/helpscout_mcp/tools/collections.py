"""Help Scout MCP — Docs collections tools.

  • docs_list_collections / docs_get_collection
  • docs_create_collection / docs_update_collection / docs_delete_collection
"""
from typing import Any, Dict, Literal, Optional

from ..clients import HelpScoutClients
from ..config import DOCS_NOT_CONFIGURED, SortOrder, Visibility
from ..http_client import compact, handle_error, not_configured, ok, ok_message

CollectionSort = Literal["number", "visibility", "order", "name", "createdAt", "updatedAt"]


def register_collections_tools(mcp, clients: HelpScoutClients) -> None:
    """Register Docs collection tools on *mcp*."""
    docs = clients.docs

    @mcp.tool()
    async def docs_list_collections(
        page: Optional[int] = None,
        site_id: Optional[str] = None,
        visibility: Optional[Visibility] = None,
        sort: Optional[CollectionSort] = None,
        order: Optional[SortOrder] = None,
    ) -> Dict[str, Any]:
        """List all Docs collections. Optionally filter by site, visibility, or sort.

        Args:
            page: Page number (default: 1)
            site_id: Filter by site ID
            visibility: Filter by visibility ('all', 'public', 'private')
            sort: Sort field
            order: Sort order ('asc' or 'desc')
        """
        if docs is None:
            return not_configured(DOCS_NOT_CONFIGURED)
        try:
            return ok(await docs.list_collections(
                page=page, site_id=site_id, visibility=visibility, sort=sort, order=order,
            ))
        except Exception as e:
            return handle_error(e, "list collections")

    @mcp.tool()
    async def docs_get_collection(collection_id: str) -> Dict[str, Any]:
        """Get a specific Docs collection by ID.

        Args:
            collection_id: The collection ID
        """
        if docs is None:
            return not_configured(DOCS_NOT_CONFIGURED)
        try:
            return ok(await docs.get_collection(collection_id))
        except Exception as e:
            return handle_error(e, "get collection")

    @mcp.tool()
    async def docs_create_collection(
        site_id: str,
        name: str,
        visibility: Optional[Literal["public", "private"]] = None,
        order: Optional[int] = None,
        description: Optional[str] = None,
    ) -> Dict[str, Any]:
        """Create a new Docs collection.

        Args:
            site_id: Site ID to create the collection in
            name: Collection name (must be unique)
            visibility: Visibility (default: public)
            order: Display order
            description: Description (up to 45 chars)
        """
        if docs is None:
            return not_configured(DOCS_NOT_CONFIGURED)
        data = compact({
            "siteId": site_id,
            "name": name,
            "visibility": visibility,
            "order": order,
            "description": description,
        })
        try:
            return ok(await docs.create_collection(data))
        except Exception as e:
            return handle_error(e, "create collection")

    @mcp.tool()
    async def docs_update_collection(
        collection_id: str,
        name: Optional[str] = None,
        visibility: Optional[Literal["public", "private"]] = None,
        order: Optional[int] = None,
        description: Optional[str] = None,
        site_id: Optional[str] = None,
    ) -> Dict[str, Any]:
        """Update a Docs collection.

        Args:
            collection_id: The collection ID to update
            name: New name (must be unique)
            visibility: Visibility
            order: Display order
            description: Description (up to 45 chars)
            site_id: Move to a different site
        """
        if docs is None:
            return not_configured(DOCS_NOT_CONFIGURED)
        data = compact({
            "name": name,
            "visibility": visibility,
            "order": order,
            "description": description,
            "siteId": site_id,
        })
        try:
            return ok(await docs.update_collection(collection_id, data))
        except Exception as e:
            return handle_error(e, "update collection")

    @mcp.tool()
    async def docs_delete_collection(collection_id: str) -> Dict[str, Any]:
        """Delete a Docs collection. WARNING: This permanently deletes the collection and all its articles.

        Args:
            collection_id: The collection ID to delete
        """
        if docs is None:
            return not_configured(DOCS_NOT_CONFIGURED)
        try:
            await docs.delete_collection(collection_id)
            return ok_message(f"Collection {collection_id} deleted")
        except Exception as e:
            return handle_error(e, "delete collection")
