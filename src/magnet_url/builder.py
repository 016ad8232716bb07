"""
Fluent builder for magnet links.

Example:
    >>> magnet = (
    ...     MagnetBuilder()
    ...     .display_name("My Torrent")
    ...     .hash_type("btih")
    ...     .hash("1234567890abcdef1234567890abcdef12345678")
    ...     .add_tracker("udp://tracker.example.com:6969")
    ...     .build()
    ... )
    >>> magnet.to_uri()
    'magnet:?xt=urn:btih:1234567890abcdef1234567890abcdef12345678&dn=My%20Torrent&tr=udp%3A%2F%2Ftracker.example.com%3A6969'
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Annotated

from pydantic import AfterValidator, Field, TypeAdapter

from .magnet import ExactTopic, Length, Magnet, WireText, require_utf8, text_tuple

# setter input types; build() only sees values that passed these
_TEXT = TypeAdapter(WireText)
_TEXTS = TypeAdapter(tuple[WireText, ...])
_HASH_TYPE = TypeAdapter(Annotated[str, Field(pattern=r"^[^:]*$"), AfterValidator(require_utf8)])
_LENGTH = TypeAdapter(Length)


class MagnetBuilder:
    """
    Accumulates magnet fields and produces immutable Magnet values.

    Each setter raises pydantic's ValidationError for a value of the wrong
    type (a negative length, text that is not UTF-8 encodable, a hash type
    containing ':'); once a value is accepted, build() cannot fail.
    """

    def __init__(self) -> None:
        self._display_name: str | None = None
        self._hash_type: str | None = None
        self._hash: str | None = None
        self._length: int | None = None
        self._trackers: list[str] = []
        self._keyword_topic: str | None = None
        self._web_seeds: list[str] = []
        self._exact_source: str | None = None
        self._acceptable_source: str | None = None
        self._manifest_topic: str | None = None

    @classmethod
    def from_magnet(cls, magnet: Magnet) -> MagnetBuilder:
        """Start a builder pre-filled with the fields of an existing magnet."""
        builder = cls()
        builder._display_name = magnet.display_name
        builder._hash_type = magnet.hash_type
        builder._hash = magnet.hash
        builder._length = magnet.length
        builder._trackers = list(magnet.trackers)
        builder._keyword_topic = magnet.keyword_topic
        builder._web_seeds = list(magnet.web_seeds)
        builder._exact_source = magnet.exact_source
        builder._acceptable_source = magnet.acceptable_source
        builder._manifest_topic = magnet.manifest_topic
        return builder

    def display_name(self, name: str) -> MagnetBuilder:
        self._display_name = _TEXT.validate_python(name)
        return self

    def hash_type(self, hash_type: str) -> MagnetBuilder:
        self._hash_type = _HASH_TYPE.validate_python(hash_type)
        return self

    def hash(self, hash: str) -> MagnetBuilder:
        self._hash = _TEXT.validate_python(hash)
        return self

    def exact_topic(self, hash_type: str, hash: str) -> MagnetBuilder:
        """Set the hash type and hash together."""
        return self.hash_type(hash_type).hash(hash)

    def length(self, length: int) -> MagnetBuilder:
        self._length = _LENGTH.validate_python(length)
        return self

    def add_tracker(self, tracker: str) -> MagnetBuilder:
        self._trackers.append(_TEXT.validate_python(tracker))
        return self

    def add_trackers(self, trackers: Iterable[str]) -> MagnetBuilder:
        self._trackers.extend(_TEXTS.validate_python(text_tuple(trackers, "trackers")))
        return self

    def keyword_topic(self, keywords: str) -> MagnetBuilder:
        self._keyword_topic = _TEXT.validate_python(keywords)
        return self

    def add_web_seed(self, web_seed: str) -> MagnetBuilder:
        self._web_seeds.append(_TEXT.validate_python(web_seed))
        return self

    def add_web_seeds(self, web_seeds: Iterable[str]) -> MagnetBuilder:
        self._web_seeds.extend(_TEXTS.validate_python(text_tuple(web_seeds, "web_seeds")))
        return self

    def exact_source(self, source: str) -> MagnetBuilder:
        self._exact_source = _TEXT.validate_python(source)
        return self

    def acceptable_source(self, source: str) -> MagnetBuilder:
        self._acceptable_source = _TEXT.validate_python(source)
        return self

    def manifest_topic(self, manifest: str) -> MagnetBuilder:
        self._manifest_topic = _TEXT.validate_python(manifest)
        return self

    def build(self) -> Magnet:
        """
        Finalize the accumulated fields into a Magnet.

        No magnet-level validation happens here. The exact topic is only
        set when both a hash type and a hash were provided.

        Returns:
            A new Magnet; later builder calls do not affect it
        """
        exact_topic = None
        if self._hash_type and self._hash:
            exact_topic = ExactTopic(hash_type=self._hash_type, hash=self._hash)

        return Magnet(
            display_name=self._display_name,
            exact_topic=exact_topic,
            length=self._length,
            trackers=tuple(self._trackers),
            keyword_topic=self._keyword_topic,
            web_seeds=tuple(self._web_seeds),
            exact_source=self._exact_source,
            acceptable_source=self._acceptable_source,
            manifest_topic=self._manifest_topic,
        )
