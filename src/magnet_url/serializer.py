"""
Magnet URI serializer.

Parameters are always written in the order xt, dn, xl, tr, ws, xs, kt, as, mt,
so serializing the same value twice yields the same string.
"""

from __future__ import annotations

import urllib.parse

from .magnet import MAGNET_PREFIX, Magnet

CANONICAL_ORDER = ("xt", "dn", "xl", "tr", "ws", "xs", "kt", "as", "mt")


def percent_encode(text: str, safe: str = "") -> str:
    """Escape everything except ASCII letters, digits, ``-_.~`` and ``safe``."""
    return urllib.parse.quote(text, safe=safe)


def to_string(magnet: Magnet) -> str:
    """
    Convert a Magnet to its canonical URI.

    Args:
        magnet: The value to serialize

    Returns:
        Magnet URI string
    """
    params: list[str] = []

    if magnet.exact_topic is not None:
        # colons stay literal in the hash (urn:tree:tiger:...)
        hash_type = percent_encode(magnet.exact_topic.hash_type)
        hash = percent_encode(magnet.exact_topic.hash, safe=":")
        params.append(f"xt=urn:{hash_type}:{hash}")

    if magnet.display_name is not None:
        params.append(f"dn={percent_encode(magnet.display_name)}")

    if magnet.length is not None:
        params.append(f"xl={magnet.length}")

    for tracker in magnet.trackers:
        params.append(f"tr={percent_encode(tracker)}")

    for ws in magnet.web_seeds:
        params.append(f"ws={percent_encode(ws)}")

    for key, value in (
        ("xs", magnet.exact_source),
        ("kt", magnet.keyword_topic),
        ("as", magnet.acceptable_source),
        ("mt", magnet.manifest_topic),
    ):
        if value is not None:
            params.append(f"{key}={percent_encode(value)}")

    return MAGNET_PREFIX + "&".join(params)
