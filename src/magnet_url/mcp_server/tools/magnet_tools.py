"""Magnet link parsing and building tools."""

from ...builder import MagnetBuilder
from ...magnet import MagnetError, is_magnet_link
from ...parser import parse
from ..models import MagnetInfo


def parse_magnet_link(
    magnet_uri: str,
) -> MagnetInfo:
    """
    Parse a magnet link and extract its information.

    Magnet links are URIs that identify content by hash rather than location.
    They contain the exact topic (hash type and hash) and optionally a display
    name, size, tracker URLs, web seeds and alternative sources.

    Args:
        magnet_uri: The magnet URI to parse (starts with "magnet:?").

    Returns:
        Parsed magnet link information with every field decoded.
    """
    try:
        return MagnetInfo.from_magnet(parse(magnet_uri))
    except MagnetError as e:
        raise ValueError(f"Failed to parse magnet link: {e}") from e


def build_magnet_link(
    hash: str,
    hash_type: str = "btih",
    display_name: str | None = None,
    length: int | None = None,
    trackers: list[str] | None = None,
    web_seeds: list[str] | None = None,
    keyword_topic: str | None = None,
    exact_source: str | None = None,
    acceptable_source: str | None = None,
    manifest_topic: str | None = None,
) -> MagnetInfo:
    """
    Build a magnet link from its fields.

    Args:
        hash: Hex or base32 digest identifying the content.
        hash_type: Hash algorithm tag. Defaults to "btih" (BitTorrent v1).
        display_name: Name shown by clients before metadata is available.
        length: Content size in bytes.
        trackers: Tracker URLs in preference order.
        web_seeds: HTTP(S) URLs serving the content directly.
        keyword_topic: '+'-joined search keywords.
        exact_source: Direct P2P source or .torrent location.
        acceptable_source: Fall-back web download.
        manifest_topic: Link to a manifest of magnet links.

    Returns:
        The assembled magnet link and its fields.
    """
    if not hash or not hash_type:
        raise ValueError("hash and hash_type must not be empty")
    if length is not None and length < 0:
        raise ValueError("length must be a non-negative integer")

    builder = MagnetBuilder().exact_topic(hash_type, hash)
    builder.add_trackers(trackers or []).add_web_seeds(web_seeds or [])
    if display_name is not None:
        builder.display_name(display_name)
    if length is not None:
        builder.length(length)
    if keyword_topic is not None:
        builder.keyword_topic(keyword_topic)
    if exact_source is not None:
        builder.exact_source(exact_source)
    if acceptable_source is not None:
        builder.acceptable_source(acceptable_source)
    if manifest_topic is not None:
        builder.manifest_topic(manifest_topic)

    return MagnetInfo.from_magnet(builder.build())


def normalize_magnet_link(
    magnet_uri: str,
) -> str:
    """
    Rewrite a magnet link in canonical form.

    Parameters are reordered (xt, dn, xl, tr, ws, xs, kt, as, mt), unknown
    parameters are dropped and every value is consistently percent-encoded.

    Args:
        magnet_uri: The magnet URI to normalize.

    Returns:
        The canonical magnet URI.
    """
    try:
        return parse(magnet_uri).to_uri()
    except MagnetError as e:
        raise ValueError(f"Failed to parse magnet link: {e}") from e


def is_magnet(
    uri: str,
) -> bool:
    """
    Check if a string is a magnet link.

    Args:
        uri: The string to check.

    Returns:
        True if the string is a magnet link, False otherwise.
    """
    return is_magnet_link(uri)


def register_magnet_tools(mcp) -> None:
    """Register magnet-related tools with the MCP server."""
    for tool in (parse_magnet_link, build_magnet_link, normalize_magnet_link, is_magnet):
        mcp.tool(tool)
