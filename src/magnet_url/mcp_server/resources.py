"""MCP resources describing the magnet link format."""

from ..serializer import CANONICAL_ORDER

PARAMETER_DESCRIPTIONS = {
    "xt": "Exact topic, `urn:<hash_type>:<hash>`",
    "dn": "Display name",
    "xl": "Exact length in bytes",
    "tr": "Tracker URL (repeatable, order kept)",
    "ws": "Web seed URL (repeatable)",
    "xs": "Exact source",
    "kt": "Keyword topic, '+'-joined",
    "as": "Acceptable source",
    "mt": "Manifest topic",
}


def describe_parameters() -> str:
    """List the supported magnet parameters in canonical order."""
    lines = ["# Magnet Parameters\n"]
    for key in CANONICAL_ORDER:
        lines.append(f"- **{key}**: {PARAMETER_DESCRIPTIONS[key]}")
    return "\n".join(lines)


def register_resources(mcp) -> None:
    """Register all MCP resources with the server."""
    mcp.resource("magnet://parameters")(describe_parameters)
