"""MCP tools for magnet links."""

from .magnet_tools import register_magnet_tools


def register_all_tools(mcp) -> None:
    """Register all MCP tools with the server."""
    register_magnet_tools(mcp)
