"""Help Scout MCP — Docs articles tools.

  • docs_list_articles / docs_search_articles / docs_get_article
  • docs_create_article / docs_update_article / docs_delete_article
  • docs_list_related_articles / docs_list_revisions / docs_get_revision
  • docs_save_draft / docs_delete_draft / docs_update_view_count
"""
from typing import Any, Dict, List, Literal, Optional

from ..clients import HelpScoutClients
from ..config import DOCS_NOT_CONFIGURED, ArticleStatus, ParentType, SortOrder, Visibility
from ..docs_client import ArticleParent
from ..http_client import compact, handle_error, not_configured, ok, ok_message

ArticleSort = Literal["number", "status", "name", "popularity", "createdAt", "updatedAt", "order"]
ClearableField = Literal["categories", "related", "keywords"]


def register_articles_tools(mcp, clients: HelpScoutClients) -> None:
    """Register Docs article tools on *mcp*."""
    docs = clients.docs

    # ------------------------------------------------------------------ #
    #  reading                                                            #
    # ------------------------------------------------------------------ #
    @mcp.tool()
    async def docs_list_articles(
        parent_id: str,
        parent_type: ParentType,
        page: Optional[int] = None,
        status: Optional[ArticleStatus] = None,
        sort: Optional[ArticleSort] = None,
        order: Optional[SortOrder] = None,
        page_size: Optional[int] = None,
    ) -> Dict[str, Any]:
        """List articles in a Docs collection or category. Returns ArticleRef objects (not full article text).

        Args:
            parent_id: Collection ID or Category ID
            parent_type: Whether parent_id is a 'collection' or a 'category'
            page: Page number (default: 1)
            status: Filter by status ('all', 'published', 'notpublished')
            sort: Sort field
            order: Sort order ('asc' or 'desc')
            page_size: Results per page (max 100, default 50)
        """
        if docs is None:
            return not_configured(DOCS_NOT_CONFIGURED)
        try:
            parent = ArticleParent(ParentType(parent_type), parent_id)
            return ok(await docs.list_articles(
                parent, page=page, status=status, sort=sort, order=order, page_size=page_size,
            ))
        except Exception as e:
            return handle_error(e, "list articles")

    @mcp.tool()
    async def docs_search_articles(
        query: str,
        collection_id: Optional[str] = None,
        site_id: Optional[str] = None,
        status: Optional[ArticleStatus] = None,
        visibility: Optional[Visibility] = None,
        page: Optional[int] = None,
    ) -> Dict[str, Any]:
        """Search for Docs articles by query string. Returns ArticleSearch objects with preview text.

        Args:
            query: Search query
            collection_id: Filter by collection ID
            site_id: Filter by site ID
            status: Filter by status
            visibility: Filter by collection visibility
            page: Page number (default: 1)
        """
        if docs is None:
            return not_configured(DOCS_NOT_CONFIGURED)
        try:
            return ok(await docs.search_articles(
                query,
                collection_id=collection_id,
                site_id=site_id,
                status=status,
                visibility=visibility,
                page=page,
            ))
        except Exception as e:
            return handle_error(e, "search articles")

    @mcp.tool()
    async def docs_get_article(article_id_or_number: str, draft: bool = False) -> Dict[str, Any]:
        """Get a full Docs article by ID or number, including its text content.

        Args:
            article_id_or_number: Article ID or article number
            draft: If true, return the draft version instead of published
        """
        if docs is None:
            return not_configured(DOCS_NOT_CONFIGURED)
        try:
            return ok(await docs.get_article(article_id_or_number, draft=draft))
        except Exception as e:
            return handle_error(e, "get article")

    # ------------------------------------------------------------------ #
    #  writing                                                            #
    # ------------------------------------------------------------------ #
    @mcp.tool()
    async def docs_create_article(
        collection_id: str,
        name: str,
        text: str,
        status: Optional[Literal["published", "notpublished"]] = None,
        slug: Optional[str] = None,
        categories: Optional[List[str]] = None,
        related: Optional[List[str]] = None,
        keywords: Optional[List[str]] = None,
    ) -> Dict[str, Any]:
        """Create a new Docs article in a collection.

        Args:
            collection_id: Collection ID to create the article in
            name: Article name (unique per collection)
            text: Article content (plain text or HTML)
            status: Article status (default: notpublished)
            slug: SEO-friendly URL slug
            categories: Category IDs
            related: Related article IDs
            keywords: Keyword strings
        """
        if docs is None:
            return not_configured(DOCS_NOT_CONFIGURED)
        data = compact({
            "collectionId": collection_id,
            "name": name,
            "text": text,
            "status": status,
            "slug": slug,
            "categories": categories,
            "related": related,
            "keywords": keywords,
        })
        try:
            return ok(await docs.create_article(data))
        except Exception as e:
            return handle_error(e, "create article")

    @mcp.tool()
    async def docs_update_article(
        article_id: str,
        name: Optional[str] = None,
        text: Optional[str] = None,
        status: Optional[Literal["published", "notpublished"]] = None,
        slug: Optional[str] = None,
        categories: Optional[List[str]] = None,
        related: Optional[List[str]] = None,
        keywords: Optional[List[str]] = None,
        clear: Optional[List[ClearableField]] = None,
    ) -> Dict[str, Any]:
        """Update an existing Docs article.

        Args:
            article_id: The article ID to update
            name: New article name
            text: New article content (plain text or HTML)
            status: Article status
            slug: SEO-friendly URL slug
            categories: Category IDs
            related: Related article IDs
            keywords: Keywords
            clear: Fields to send as null: 'categories' uncategorizes the
                article, 'related' and 'keywords' empty those lists
        """
        if docs is None:
            return not_configured(DOCS_NOT_CONFIGURED)
        data = compact({
            "name": name,
            "text": text,
            "status": status,
            "slug": slug,
            "categories": categories,
            "related": related,
            "keywords": keywords,
        })
        for field in clear or []:
            data[field] = None
        try:
            return ok(await docs.update_article(article_id, data))
        except Exception as e:
            return handle_error(e, "update article")

    @mcp.tool()
    async def docs_delete_article(article_id: str) -> Dict[str, Any]:
        """Delete a Docs article. WARNING: This permanently deletes the article.

        Args:
            article_id: The article ID to delete
        """
        if docs is None:
            return not_configured(DOCS_NOT_CONFIGURED)
        try:
            await docs.delete_article(article_id)
            return ok_message(f"Article {article_id} deleted")
        except Exception as e:
            return handle_error(e, "delete article")

    # ------------------------------------------------------------------ #
    #  related, revisions, drafts, views                                  #
    # ------------------------------------------------------------------ #
    @mcp.tool()
    async def docs_list_related_articles(article_id: str, page: Optional[int] = None) -> Dict[str, Any]:
        """List articles related to a specific Docs article.

        Args:
            article_id: The article ID
            page: Page number (default: 1)
        """
        if docs is None:
            return not_configured(DOCS_NOT_CONFIGURED)
        try:
            return ok(await docs.list_related_articles(article_id, page=page))
        except Exception as e:
            return handle_error(e, "list related articles")

    @mcp.tool()
    async def docs_list_revisions(article_id: str, page: Optional[int] = None) -> Dict[str, Any]:
        """List all revisions of a Docs article.

        Args:
            article_id: The article ID
            page: Page number (default: 1)
        """
        if docs is None:
            return not_configured(DOCS_NOT_CONFIGURED)
        try:
            return ok(await docs.list_revisions(article_id, page=page))
        except Exception as e:
            return handle_error(e, "list revisions")

    @mcp.tool()
    async def docs_get_revision(revision_id: str) -> Dict[str, Any]:
        """Get a specific article revision by revision ID.

        Args:
            revision_id: The revision ID
        """
        if docs is None:
            return not_configured(DOCS_NOT_CONFIGURED)
        try:
            return ok(await docs.get_revision(revision_id))
        except Exception as e:
            return handle_error(e, "get revision")

    @mcp.tool()
    async def docs_save_draft(article_id: str, text: str) -> Dict[str, Any]:
        """Save or update a draft version of a Docs article without affecting the published version.

        Args:
            article_id: The article ID
            text: Draft article text content
        """
        if docs is None:
            return not_configured(DOCS_NOT_CONFIGURED)
        try:
            await docs.save_article_draft(article_id, text)
            return ok_message(f"Draft saved for article {article_id}")
        except Exception as e:
            return handle_error(e, "save draft")

    @mcp.tool()
    async def docs_delete_draft(article_id: str) -> Dict[str, Any]:
        """Delete the draft version of a Docs article.

        Args:
            article_id: The article ID
        """
        if docs is None:
            return not_configured(DOCS_NOT_CONFIGURED)
        try:
            await docs.delete_article_draft(article_id)
            return ok_message(f"Draft deleted for article {article_id}")
        except Exception as e:
            return handle_error(e, "delete draft")

    @mcp.tool()
    async def docs_update_view_count(article_id: str, count: int) -> Dict[str, Any]:
        """Increase the view count of a Docs article.

        Args:
            article_id: The article ID
            count: Number of views to add
        """
        if docs is None:
            return not_configured(DOCS_NOT_CONFIGURED)
        try:
            await docs.update_view_count(article_id, count)
            return ok_message(f"View count updated for article {article_id}")
        except Exception as e:
            return handle_error(e, "update view count")
