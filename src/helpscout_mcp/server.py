"""Help Scout MCP Server — slim entry-point.

All tools live in ``helpscout_mcp.tools.*`` sub-modules.
This file creates the FastMCP instance, builds the API clients from the
environment, loads the requested scopes, and starts the server.

Usage:
    helpscout-mcp                                 # loads all scopes
    helpscout-mcp --scope articles conversations  # loads only those scopes
    HELPSCOUT_SCOPES=articles,conversations helpscout-mcp  # env-var alternative
"""

import argparse
import logging
import os
import sys

from mcp.server.fastmcp import FastMCP

from .clients import HelpScoutClients, build_clients
from .tools import SCOPE_REGISTRY


# ── logging ────────────────────────────────────────────────────────────────
logging.basicConfig(level=logging.INFO)
log = logging.getLogger(__name__)


# ── scope resolution ──────────────────────────────────────────────────────
def _resolve_scopes(cli_scopes: list[str] | None) -> list[str]:
    """Return the list of scope names to load.

    Priority: CLI args > HELPSCOUT_SCOPES env-var > all.
    """
    if cli_scopes:
        scopes = cli_scopes
    else:
        env = os.getenv("HELPSCOUT_SCOPES", "").strip()
        scopes = [s.strip() for s in env.split(",") if s.strip()] if env else list(SCOPE_REGISTRY)

    invalid = [s for s in scopes if s not in SCOPE_REGISTRY]
    if invalid:
        log.error(
            "Unknown scope(s): %s — valid scopes: %s",
            ", ".join(invalid),
            ", ".join(SCOPE_REGISTRY),
        )
        sys.exit(1)
    return scopes


def create_server(clients: HelpScoutClients, scopes: list[str] | None = None) -> FastMCP:
    """Build a FastMCP instance with the tools of *scopes* registered."""
    mcp = FastMCP("helpscout_mcp")
    for scope in scopes or list(SCOPE_REGISTRY):
        SCOPE_REGISTRY[scope](mcp, clients)
        log.info("Registered scope: %s", scope)
    return mcp


# ── main ───────────────────────────────────────────────────────────────────
def main() -> None:
    parser = argparse.ArgumentParser(
        description="Help Scout MCP Server (Docs API + Inbox API)",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=f"Available scopes: {', '.join(SCOPE_REGISTRY)}",
    )
    parser.add_argument(
        "--scope",
        nargs="*",
        metavar="SCOPE",
        help="Load only these tool scopes (default: all). "
        "Can also be set via HELPSCOUT_SCOPES env-var (comma-separated).",
    )

    args, _unknown = parser.parse_known_args()
    scopes = _resolve_scopes(args.scope)

    try:
        clients = build_clients()
        if not clients.enabled_apis:
            log.warning(
                "No Help Scout credentials configured. Set HELPSCOUT_API_KEY for Docs API "
                "and/or HELPSCOUT_APP_ID + HELPSCOUT_APP_SECRET for Inbox API."
            )
        else:
            log.info("Enabled: %s", ", ".join(clients.enabled_apis))

        mcp = create_server(clients, scopes)
        total = len(mcp._tool_manager._tools) if hasattr(mcp, "_tool_manager") else "?"
        log.info("Help Scout MCP server starting — %s tools loaded (scopes: %s)", total, ", ".join(scopes))
        mcp.run(transport="stdio")
    except Exception:
        log.exception("Fatal error")
        sys.exit(1)


if __name__ == "__main__":
    main()
