"""Help Scout MCP server: Docs API and Inbox API tools."""
