"""
Magnet link data model.

A Magnet is an immutable, fully decoded view of a magnet URI. Field updates
go through the ``with_*``/``add_*`` methods, which return a new validated
instance and leave the receiver untouched.
"""

from __future__ import annotations

import base64
import binascii
from collections.abc import Iterable
from typing import Annotated, Any

from pydantic import AfterValidator, BaseModel, ConfigDict, Field, computed_field

MAGNET_PREFIX = "magnet:?"
MAX_LENGTH = 2**64 - 1


def require_utf8(text: str) -> str:
    try:
        text.encode("utf-8")
    except UnicodeEncodeError as e:
        raise ValueError("text must be encodable as UTF-8") from e
    return text


def check_length(length: int) -> int:
    if length > MAX_LENGTH:
        raise ValueError(f"length must not exceed {MAX_LENGTH}")
    return length


def text_tuple(values: Iterable[str], name: str) -> tuple[str, ...]:
    """Collect ``values`` into a tuple, refusing a bare string."""
    if isinstance(values, str):
        raise TypeError(f"{name} must be an iterable of strings, not a single string")
    return tuple(values)


# Text that can be percent-encoded as UTF-8 (no lone surrogates)
WireText = Annotated[str, AfterValidator(require_utf8)]
HashType = Annotated[str, Field(min_length=1, pattern=r"^[^:]+$"), AfterValidator(require_utf8)]
HashText = Annotated[str, Field(min_length=1), AfterValidator(require_utf8)]
Length = Annotated[int, Field(ge=0, strict=True), AfterValidator(check_length)]


class MagnetError(Exception):
    """Base exception for magnet link errors."""

    pass


class NotAMagnetURLError(MagnetError):
    """Raised when a string does not carry the ``magnet:?`` scheme prefix."""

    def __init__(self, text: str) -> None:
        self.text = text
        super().__init__("provided link is not a valid magnet URL")


class MalformedParameterError(MagnetError):
    """Raised when a recognized parameter cannot be decoded."""

    def __init__(self, key: str, value: str, reason: str) -> None:
        self.key = key
        self.value = value
        self.reason = reason
        super().__init__(f"malformed '{key}' parameter: {reason}")


class ExactTopic(BaseModel):
    """The ``urn:<hash_type>:<hash>`` pair carried by the ``xt`` parameter."""

    hash_type: HashType = Field(description="Hash algorithm tag, e.g. btih or btmh")
    hash: HashText = Field(description="Hex or base32 digest")

    model_config = ConfigDict(frozen=True)

    @property
    def urn(self) -> str:
        return f"urn:{self.hash_type}:{self.hash}"

    def info_hash_bytes(self) -> bytes:
        """
        Decode a BitTorrent v1 info hash into its 20 raw bytes.

        Returns:
            The SHA-1 info hash

        Raises:
            MagnetError: If the topic is not a btih, or the digest is neither
                40 hex characters nor 32 base32 characters
        """
        if self.hash_type.lower() != "btih":
            raise MagnetError(f"Cannot decode info hash for hash type '{self.hash_type}'")

        # Handle both hex (40 chars) and base32 (32 chars) encoding
        if len(self.hash) == 40:
            try:
                return bytes.fromhex(self.hash)
            except ValueError as e:
                raise MagnetError(f"Invalid hex info hash: {self.hash}") from e
        if len(self.hash) == 32:
            try:
                return base64.b32decode(self.hash.upper())
            except binascii.Error as e:
                raise MagnetError(f"Invalid base32 info hash: {self.hash}") from e
        raise MagnetError(f"Invalid info hash length: {len(self.hash)}")


class Magnet(BaseModel):
    """Parsed magnet link data."""

    display_name: WireText | None = Field(default=None, description="(dn) Display name")
    exact_topic: ExactTopic | None = Field(default=None, description="(xt) Hash type and hash")
    length: Length | None = Field(default=None, description="(xl) Content size in bytes")
    trackers: tuple[WireText, ...] = Field(default=(), description="(tr) Tracker URLs, in preference order")
    keyword_topic: WireText | None = Field(default=None, description="(kt) '+'-joined search keywords")
    web_seeds: tuple[WireText, ...] = Field(default=(), description="(ws) Web seed URLs")
    exact_source: WireText | None = Field(default=None, description="(xs) P2P source or .torrent location")
    acceptable_source: WireText | None = Field(default=None, description="(as) Fall-back web download")
    manifest_topic: WireText | None = Field(default=None, description="(mt) Link to a manifest of magnets")

    model_config = ConfigDict(frozen=True)

    @computed_field
    @property
    def hash_type(self) -> str | None:
        """Hash type of the exact topic, if any."""
        return self.exact_topic.hash_type if self.exact_topic else None

    @computed_field
    @property
    def hash(self) -> str | None:
        """Digest of the exact topic, if any."""
        return self.exact_topic.hash if self.exact_topic else None

    @property
    def keywords(self) -> tuple[str, ...]:
        """Search keywords from the keyword topic."""
        if not self.keyword_topic:
            return ()
        return tuple(word for word in self.keyword_topic.split("+") if word)

    @classmethod
    def parse(cls, magnet_uri: str) -> Magnet:
        """Parse a magnet URI; see :func:`magnet_url.parser.parse`."""
        from .parser import parse

        return parse(magnet_uri)

    def to_uri(self) -> str:
        """Convert back to a magnet URI; see :func:`magnet_url.serializer.to_string`."""
        from .serializer import to_string

        return to_string(self)

    def __str__(self) -> str:
        return self.to_uri()

    def _replace(self, **changes: Any) -> Magnet:
        return type(self).model_validate({**dict(self), **changes})

    def with_display_name(self, display_name: str | None) -> Magnet:
        return self._replace(display_name=display_name)

    def with_exact_topic(self, hash_type: str, hash: str) -> Magnet:
        return self._replace(exact_topic=ExactTopic(hash_type=hash_type, hash=hash))

    def without_exact_topic(self) -> Magnet:
        return self._replace(exact_topic=None)

    def with_length(self, length: int | None) -> Magnet:
        return self._replace(length=length)

    def with_trackers(self, trackers: Iterable[str]) -> Magnet:
        return self._replace(trackers=text_tuple(trackers, "trackers"))

    def add_tracker(self, tracker: str) -> Magnet:
        """Append one tracker, keeping duplicates and order."""
        return self._replace(trackers=(*self.trackers, tracker))

    def with_web_seeds(self, web_seeds: Iterable[str]) -> Magnet:
        return self._replace(web_seeds=text_tuple(web_seeds, "web_seeds"))

    def add_web_seed(self, web_seed: str) -> Magnet:
        return self._replace(web_seeds=(*self.web_seeds, web_seed))

    def with_keyword_topic(self, keyword_topic: str | None) -> Magnet:
        return self._replace(keyword_topic=keyword_topic)

    def with_exact_source(self, exact_source: str | None) -> Magnet:
        return self._replace(exact_source=exact_source)

    def with_acceptable_source(self, acceptable_source: str | None) -> Magnet:
        return self._replace(acceptable_source=acceptable_source)

    def with_manifest_topic(self, manifest_topic: str | None) -> Magnet:
        return self._replace(manifest_topic=manifest_topic)


def is_magnet_link(uri: str) -> bool:
    """
    Check if a string is a magnet link.

    Args:
        uri: String to check

    Returns:
        True if it's a magnet link
    """
    return uri.startswith(MAGNET_PREFIX)
