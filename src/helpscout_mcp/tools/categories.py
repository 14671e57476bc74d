"""Help Scout MCP — Docs categories tools.

  • docs_list_categories / docs_get_category
  • docs_create_category / docs_update_category / docs_delete_category
  • docs_update_category_order — reorder a collection's categories in one batch
"""
from typing import Any, Dict, List, Literal, Optional

from ..clients import HelpScoutClients
from ..config import DOCS_NOT_CONFIGURED, SortOrder
from ..http_client import compact, handle_error, not_configured, ok, ok_message
from ..models import CategoryOrder, dump_all

CategorySort = Literal["number", "order", "name", "articleCount", "createdAt", "updatedAt"]


def register_categories_tools(mcp, clients: HelpScoutClients) -> None:
    """Register Docs category tools on *mcp*."""
    docs = clients.docs

    @mcp.tool()
    async def docs_list_categories(
        collection_id: str,
        page: Optional[int] = None,
        sort: Optional[CategorySort] = None,
        order: Optional[SortOrder] = None,
    ) -> Dict[str, Any]:
        """List categories in a Docs collection.

        Args:
            collection_id: The collection ID
            page: Page number (default: 1)
            sort: Sort field
            order: Sort order ('asc' or 'desc')
        """
        if docs is None:
            return not_configured(DOCS_NOT_CONFIGURED)
        try:
            return ok(await docs.list_categories(collection_id, page=page, sort=sort, order=order))
        except Exception as e:
            return handle_error(e, "list categories")

    @mcp.tool()
    async def docs_get_category(category_id: str) -> Dict[str, Any]:
        """Get a specific Docs category by ID.

        Args:
            category_id: The category ID
        """
        if docs is None:
            return not_configured(DOCS_NOT_CONFIGURED)
        try:
            return ok(await docs.get_category(category_id))
        except Exception as e:
            return handle_error(e, "get category")

    @mcp.tool()
    async def docs_create_category(
        collection_id: str,
        name: str,
        slug: Optional[str] = None,
        visibility: Optional[Literal["public", "private"]] = None,
        order: Optional[int] = None,
        default_sort: Optional[Literal["popularity", "name"]] = None,
    ) -> Dict[str, Any]:
        """Create a new category in a Docs collection.

        Args:
            collection_id: Collection ID to create category in
            name: Category name (unique per collection)
            slug: SEO-friendly URL slug
            visibility: Visibility (default: public)
            order: Display order
            default_sort: Default article sort
        """
        if docs is None:
            return not_configured(DOCS_NOT_CONFIGURED)
        data = compact({
            "collectionId": collection_id,
            "name": name,
            "slug": slug,
            "visibility": visibility,
            "order": order,
            "defaultSort": default_sort,
        })
        try:
            return ok(await docs.create_category(data))
        except Exception as e:
            return handle_error(e, "create category")

    @mcp.tool()
    async def docs_update_category(
        category_id: str,
        name: Optional[str] = None,
        slug: Optional[str] = None,
        visibility: Optional[Literal["public", "private"]] = None,
        order: Optional[int] = None,
        default_sort: Optional[Literal["popularity", "name"]] = None,
    ) -> Dict[str, Any]:
        """Update a Docs category.

        Args:
            category_id: The category ID to update
            name: New name (unique per collection)
            slug: SEO-friendly URL slug
            visibility: Visibility
            order: Display order
            default_sort: Default article sort
        """
        if docs is None:
            return not_configured(DOCS_NOT_CONFIGURED)
        data = compact({
            "name": name,
            "slug": slug,
            "visibility": visibility,
            "order": order,
            "defaultSort": default_sort,
        })
        try:
            return ok(await docs.update_category(category_id, data))
        except Exception as e:
            return handle_error(e, "update category")

    @mcp.tool()
    async def docs_update_category_order(
        collection_id: str,
        categories: List[CategoryOrder],
    ) -> Dict[str, Any]:
        """Reorder categories in a Docs collection.

        Args:
            collection_id: The collection ID
            categories: List of {id, order} pairs, submitted as one batch
        """
        if docs is None:
            return not_configured(DOCS_NOT_CONFIGURED)
        try:
            return ok(await docs.update_category_order(collection_id, dump_all(categories)))
        except Exception as e:
            return handle_error(e, "update category order")

    @mcp.tool()
    async def docs_delete_category(category_id: str) -> Dict[str, Any]:
        """Delete a Docs category. Articles in this category become uncategorized.

        Args:
            category_id: The category ID to delete
        """
        if docs is None:
            return not_configured(DOCS_NOT_CONFIGURED)
        try:
            await docs.delete_category(category_id)
            return ok_message(f"Category {category_id} deleted")
        except Exception as e:
            return handle_error(e, "delete category")
