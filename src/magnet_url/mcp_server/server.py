"""
Main MCP server setup and entry point.

This module initializes the FastMCP server and registers all tools and resources.
"""

import argparse

from fastmcp import FastMCP

from ..config import configure_logging
from .resources import register_resources
from .tools import register_all_tools

# Initialize FastMCP server
mcp = FastMCP(
    "Magnet URL",
    instructions="An MCP server for working with magnet links. "
    "Use the available tools to parse magnet links, build new ones from their fields, and normalize them.",
)

# Register all tools and resources
register_all_tools(mcp)
register_resources(mcp)


def main() -> None:
    """Run the MCP server."""
    parser = argparse.ArgumentParser(prog="magnet-url-mcp", description="Run the magnet link MCP server")
    parser.add_argument("--transport", choices=["stdio", "streamable-http"], default="stdio")
    parser.add_argument("--port", type=int, default=8000, help="Port for the HTTP transport (default: 8000)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable verbose logging")
    args = parser.parse_args()

    configure_logging(args.verbose)
    if args.transport == "stdio":
        mcp.run()
    else:
        mcp.run(transport=args.transport, port=args.port)


if __name__ == "__main__":
    main()
