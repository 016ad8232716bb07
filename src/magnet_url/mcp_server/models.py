"""Pydantic models for the MCP server."""

from __future__ import annotations

from pydantic import BaseModel

from ..magnet import Magnet


class MagnetInfo(BaseModel):
    """Information parsed from a magnet link."""

    uri: str
    hash_type: str | None = None
    hash: str | None = None
    display_name: str | None = None
    length: int | None = None
    trackers: list[str] = []
    web_seeds: list[str] = []
    keyword_topic: str | None = None
    exact_source: str | None = None
    acceptable_source: str | None = None
    manifest_topic: str | None = None

    @classmethod
    def from_magnet(cls, magnet: Magnet) -> MagnetInfo:
        return cls(
            uri=magnet.to_uri(),
            hash_type=magnet.hash_type,
            hash=magnet.hash,
            display_name=magnet.display_name,
            length=magnet.length,
            trackers=list(magnet.trackers),
            web_seeds=list(magnet.web_seeds),
            keyword_topic=magnet.keyword_topic,
            exact_source=magnet.exact_source,
            acceptable_source=magnet.acceptable_source,
            manifest_topic=magnet.manifest_topic,
        )
