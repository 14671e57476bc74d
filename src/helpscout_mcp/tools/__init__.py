"""Help Scout MCP — tools package.

Each sub-module exposes a ``register_*_tools(mcp, clients)`` function.
"""

from .articles import register_articles_tools
from .categories import register_categories_tools
from .collections import register_collections_tools
from .conversations import register_conversations_tools
from .customers import register_customers_tools
from .redirects import register_redirects_tools
from .sites import register_sites_tools
from .team import register_team_tools

# Mapping from scope name → registration function.
# Used by server.py to selectively load tool modules.
SCOPE_REGISTRY: dict[str, callable] = {
    "sites": register_sites_tools,
    "collections": register_collections_tools,
    "categories": register_categories_tools,
    "articles": register_articles_tools,
    "redirects": register_redirects_tools,
    "conversations": register_conversations_tools,
    "customers": register_customers_tools,
    "team": register_team_tools,
}

__all__ = [
    "SCOPE_REGISTRY",
    "register_articles_tools",
    "register_categories_tools",
    "register_collections_tools",
    "register_conversations_tools",
    "register_customers_tools",
    "register_redirects_tools",
    "register_sites_tools",
    "register_team_tools",
]
