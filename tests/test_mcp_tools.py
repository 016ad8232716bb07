"""Tests for the MCP tool and resource functions."""

import pytest

from magnet_url.mcp_server.resources import describe_parameters
from magnet_url.mcp_server.tools.magnet_tools import (
    build_magnet_link,
    is_magnet,
    normalize_magnet_link,
    parse_magnet_link,
)


class TestMagnetTools:
    """Tests for the magnet tools exposed over MCP."""

    def test_parse_magnet_link(self) -> None:
        """Test that parsing returns every decoded field."""
        info = parse_magnet_link("magnet:?xt=urn:btih:AAAA&dn=My%20Torrent&xl=5&tr=udp://a&ws=http://w")

        assert info.hash_type == "btih"
        assert info.hash == "AAAA"
        assert info.display_name == "My Torrent"
        assert info.length == 5
        assert info.trackers == ["udp://a"]
        assert info.web_seeds == ["http://w"]
        assert info.uri == "magnet:?xt=urn:btih:AAAA&dn=My%20Torrent&xl=5&tr=udp%3A%2F%2Fa&ws=http%3A%2F%2Fw"

    def test_parse_invalid_magnet(self) -> None:
        """Test that parse errors surface as ValueError."""
        with pytest.raises(ValueError, match="Failed to parse magnet link"):
            parse_magnet_link("http://example.com/file.torrent")

    def test_build_magnet_link(self) -> None:
        """Test building a magnet from tool arguments."""
        info = build_magnet_link(
            hash="AAAA",
            display_name="x",
            trackers=["udp://a", "udp://b"],
            keyword_topic="a+b",
            exact_source="http://xs",
            acceptable_source="http://as",
            manifest_topic="http://mt",
        )

        assert info.hash_type == "btih"
        assert info.trackers == ["udp://a", "udp://b"]
        assert info.uri.startswith("magnet:?xt=urn:btih:AAAA&dn=x&tr=")
        assert parse_magnet_link(info.uri) == info

    def test_build_negative_length(self) -> None:
        """Test that a negative length is rejected."""
        with pytest.raises(ValueError, match="non-negative"):
            build_magnet_link(hash="AAAA", length=-1)

    def test_build_empty_hash(self) -> None:
        """Test that an empty hash or hash type is rejected instead of dropping xt."""
        with pytest.raises(ValueError, match="must not be empty"):
            build_magnet_link(hash="")
        with pytest.raises(ValueError, match="must not be empty"):
            build_magnet_link(hash="AAAA", hash_type="")

    def test_normalize_magnet_link(self) -> None:
        """Test canonical reordering."""
        assert normalize_magnet_link("magnet:?tr=udp://a&xt=urn:btih:AAAA") == (
            "magnet:?xt=urn:btih:AAAA&tr=udp%3A%2F%2Fa"
        )

    def test_normalize_invalid(self) -> None:
        """Test that malformed magnets surface as ValueError."""
        with pytest.raises(ValueError, match="malformed 'xt' parameter"):
            normalize_magnet_link("magnet:?xt=btih")

    def test_is_magnet(self) -> None:
        """Test magnet detection."""
        assert is_magnet("magnet:?xt=urn:btih:abc") is True
        assert is_magnet("/path/to/file.torrent") is False


class TestMagnetResources:
    """Tests for the MCP resources."""

    def test_describe_parameters(self) -> None:
        """Test that every parameter is listed in canonical order."""
        text = describe_parameters()

        keys = ["xt", "dn", "xl", "tr", "ws", "xs", "kt", "as", "mt"]
        positions = [text.index(f"**{key}**") for key in keys]
        assert positions == sorted(positions)
