"""
MCP server package for magnet links.

Exposes magnet parsing and building via the Model Context Protocol.
"""

from .server import mcp

__all__ = ["mcp"]
