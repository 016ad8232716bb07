"""Tests for MagnetBuilder."""

import pytest
from pydantic import ValidationError

from magnet_url import Magnet, MagnetBuilder, parse

HASH = "1234567890abcdef1234567890abcdef12345678"


class TestMagnetBuilder:
    """Tests for building magnets field by field."""

    def test_build_all_fields(self) -> None:
        """Test that every setter lands in the built magnet."""
        magnet = (
            MagnetBuilder()
            .display_name("Test")
            .hash_type("btih")
            .hash(HASH)
            .length(12345)
            .add_tracker("udp://tracker1.example.com:6969")
            .add_tracker("udp://tracker2.example.com:6969")
            .keyword_topic("test+keywords")
            .add_web_seed("https://example.com/seed")
            .acceptable_source("https://example.com/download")
            .manifest_topic("https://example.com/manifest")
            .exact_source("https://example.com/source")
            .build()
        )

        assert magnet.display_name == "Test"
        assert magnet.hash_type == "btih"
        assert magnet.hash == HASH
        assert magnet.length == 12345
        assert magnet.trackers == ("udp://tracker1.example.com:6969", "udp://tracker2.example.com:6969")
        assert magnet.keyword_topic == "test+keywords"
        assert magnet.web_seeds == ("https://example.com/seed",)
        assert magnet.acceptable_source == "https://example.com/download"
        assert magnet.manifest_topic == "https://example.com/manifest"
        assert magnet.exact_source == "https://example.com/source"

    def test_add_trackers(self) -> None:
        """Test adding several trackers at once."""
        trackers = ["udp://tracker1.example.com:6969", "udp://tracker2.example.com:6969"]
        magnet = MagnetBuilder().exact_topic("btih", HASH).add_trackers(trackers).build()

        assert magnet.trackers == tuple(trackers)

    def test_add_web_seeds(self) -> None:
        """Test adding several web seeds at once, after a single one."""
        magnet = MagnetBuilder().add_web_seed("https://a").add_web_seeds(["https://b", "https://a"]).build()

        assert magnet.web_seeds == ("https://a", "https://b", "https://a")

    def test_single_value_setters_overwrite(self) -> None:
        """Test that setting a single-valued field twice keeps the last value."""
        magnet = MagnetBuilder().display_name("first").display_name("second").build()

        assert magnet.display_name == "second"

    def test_minimal_round_trip(self) -> None:
        """Test that a magnet with only the hash pair round-trips."""
        magnet = MagnetBuilder().hash_type("btih").hash(HASH).build()
        parsed = parse(magnet.to_uri())

        assert parsed == magnet
        assert parsed.display_name is None
        assert parsed.length is None
        assert parsed.trackers == ()

    def test_empty_builder(self) -> None:
        """Test that building with no fields is allowed."""
        assert MagnetBuilder().build() == Magnet()

    def test_hash_without_type_has_no_exact_topic(self) -> None:
        """Test that half of the hash pair does not produce an exact topic."""
        assert MagnetBuilder().hash(HASH).build().exact_topic is None
        assert MagnetBuilder().hash_type("btih").build().exact_topic is None
        assert MagnetBuilder().hash_type("").hash(HASH).build().exact_topic is None

    def test_build_returns_independent_values(self) -> None:
        """Test that later builder calls do not affect earlier builds."""
        builder = MagnetBuilder().add_tracker("udp://a")
        first = builder.build()
        builder.add_tracker("udp://b").display_name("later")
        second = builder.build()

        assert first.trackers == ("udp://a",)
        assert first.display_name is None
        assert second.trackers == ("udp://a", "udp://b")

    def test_from_magnet(self) -> None:
        """Test seeding a builder from an existing magnet."""
        original = parse("magnet:?xt=urn:btih:AAAA&dn=x&tr=udp://a&xl=3")
        rebuilt = MagnetBuilder.from_magnet(original).add_tracker("udp://b").build()

        assert rebuilt.hash == "AAAA"
        assert rebuilt.display_name == "x"
        assert rebuilt.length == 3
        assert rebuilt.trackers == ("udp://a", "udp://b")
        assert original.trackers == ("udp://a",)

    def test_from_magnet_unchanged(self) -> None:
        """Test that an untouched seeded builder reproduces the magnet."""
        original = parse("magnet:?xt=urn:btih:AAAA&kt=a+b&ws=http://w&as=http://as&mt=http://mt&xs=http://xs")

        assert MagnetBuilder.from_magnet(original).build() == original


class TestBuilderSetterValidation:
    """Tests that setters refuse bad input so build() always succeeds."""

    def test_negative_length_rejected_at_setter(self) -> None:
        """Test that a negative length fails at length(), not at build()."""
        builder = MagnetBuilder().exact_topic("btih", HASH)

        with pytest.raises(ValidationError):
            builder.length(-1)

        assert builder.build().length is None

    def test_oversized_length_rejected_at_setter(self) -> None:
        """Test that a length beyond 64 bits fails at length()."""
        with pytest.raises(ValidationError):
            MagnetBuilder().length(2**64)

    def test_surrogate_rejected_at_setter(self) -> None:
        """Test that text which cannot be UTF-8 encoded fails at the setter."""
        builder = MagnetBuilder().exact_topic("btih", HASH)

        with pytest.raises(ValidationError):
            builder.display_name("\ud800")
        with pytest.raises(ValidationError):
            builder.add_tracker("\ud800")
        with pytest.raises(ValidationError):
            builder.add_web_seeds(["https://ok", "\ud800"])

        magnet = builder.build()
        assert magnet.display_name is None
        assert magnet.trackers == ()
        assert magnet.web_seeds == ()

    def test_colon_in_hash_type_rejected_at_setter(self) -> None:
        """Test that a hash type containing ':' fails at hash_type()."""
        with pytest.raises(ValidationError):
            MagnetBuilder().hash_type("a:b")

    def test_add_trackers_rejects_string(self) -> None:
        """Test that a bare string is not split into characters."""
        with pytest.raises(TypeError, match="trackers"):
            MagnetBuilder().add_trackers("udp://a")
        with pytest.raises(TypeError, match="web_seeds"):
            MagnetBuilder().add_web_seeds("https://w")
