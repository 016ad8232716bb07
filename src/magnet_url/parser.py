"""
Magnet URI parser.

Decomposes a ``magnet:?`` URI into a :class:`~magnet_url.magnet.Magnet`.
Single-valued parameters follow last-occurrence-wins; ``tr`` and ``ws``
accumulate in the order they appear. Unknown keys and tokens without ``=``
are skipped so that newer magnet extensions still parse.
"""

from __future__ import annotations

import logging
import re
import urllib.parse
from typing import Any

from .magnet import MAGNET_PREFIX, MAX_LENGTH, ExactTopic, Magnet, MalformedParameterError, NotAMagnetURLError

logger = logging.getLogger(__name__)

# wire key -> Magnet field
SINGLE_VALUED_KEYS = {
    "dn": "display_name",
    "kt": "keyword_topic",
    "xs": "exact_source",
    "as": "acceptable_source",
    "mt": "manifest_topic",
}
MULTI_VALUED_KEYS = {
    "tr": "trackers",
    "ws": "web_seeds",
}

_BAD_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")


def percent_decode(key: str, raw: str) -> str:
    """
    Strictly percent-decode a raw parameter value.

    Args:
        key: Parameter key, used for error reporting
        raw: Value as it appears on the wire

    Returns:
        Decoded text. ``+`` is kept as a literal plus.

    Raises:
        MalformedParameterError: On a ``%`` not followed by two hex digits,
            or escapes that do not form valid UTF-8
    """
    bad = _BAD_ESCAPE.search(raw)
    if bad is not None:
        raise MalformedParameterError(key, raw, f"invalid percent-escape at offset {bad.start()}")
    try:
        return urllib.parse.unquote_to_bytes(raw).decode("utf-8")
    except UnicodeDecodeError as e:
        raise MalformedParameterError(key, raw, "percent-escapes do not decode to UTF-8") from e


def parse_exact_topic(raw: str) -> ExactTopic:
    """
    Parse the raw value of an ``xt`` parameter.

    The hash type and hash are split on literal colons before decoding, so
    escaped colons inside the hash survive; the hash type may not contain
    one. A fully percent-encoded urn (no literal colon at all) is decoded
    first and split afterwards.
    """
    if ":" in raw:
        scheme, _, rest = raw.partition(":")
        raw_type, sep, raw_hash = rest.partition(":")
        scheme = percent_decode("xt", scheme)
        hash_type = percent_decode("xt", raw_type)
        hash = percent_decode("xt", raw_hash)
    else:
        decoded = percent_decode("xt", raw)
        scheme, _, rest = decoded.partition(":")
        hash_type, sep, hash = rest.partition(":")

    if scheme.lower() != "urn" or not sep or not hash_type or not hash:
        raise MalformedParameterError("xt", raw, "expected urn:<hash_type>:<hash>")
    if ":" in hash_type:
        raise MalformedParameterError("xt", raw, "hash type may not contain ':'")
    return ExactTopic(hash_type=hash_type, hash=hash)


def parse_length(raw: str) -> int:
    value = percent_decode("xl", raw)
    if not value.isascii() or not value.isdigit():
        raise MalformedParameterError("xl", raw, "expected a non-negative decimal integer")
    # checked before int() so huge inputs never reach the int conversion limit
    if len(value.lstrip("0")) > len(str(MAX_LENGTH)):
        raise MalformedParameterError("xl", raw, f"length exceeds {MAX_LENGTH}")
    length = int(value)
    if length > MAX_LENGTH:
        raise MalformedParameterError("xl", raw, f"length exceeds {MAX_LENGTH}")
    return length


def parse(magnet_uri: str) -> Magnet:
    """
    Parse a magnet URI.

    Args:
        magnet_uri: The magnet URI to parse

    Returns:
        Magnet object with parsed data

    Raises:
        NotAMagnetURLError: If the URI does not start with 'magnet:?'
        MalformedParameterError: If a recognized parameter cannot be decoded
    """
    if not magnet_uri.startswith(MAGNET_PREFIX):
        raise NotAMagnetURLError(magnet_uri)

    fields: dict[str, Any] = {}
    multi: dict[str, list[str]] = {field: [] for field in MULTI_VALUED_KEYS.values()}

    for token in magnet_uri[len(MAGNET_PREFIX) :].split("&"):
        if not token:
            continue
        key, sep, raw = token.partition("=")
        if not sep:
            logger.debug("Ignoring magnet token without '=': %r", token)
            continue

        if key == "xt":
            fields["exact_topic"] = parse_exact_topic(raw)
        elif key == "xl":
            fields["length"] = parse_length(raw)
        elif key in SINGLE_VALUED_KEYS:
            fields[SINGLE_VALUED_KEYS[key]] = percent_decode(key, raw)
        elif key in MULTI_VALUED_KEYS:
            multi[MULTI_VALUED_KEYS[key]].append(percent_decode(key, raw))
        else:
            logger.debug("Ignoring unknown magnet parameter %r", key)

    magnet = Magnet(**fields, **multi)
    logger.debug("Parsed magnet %s with %d tracker(s)", magnet.hash or "<no xt>", len(magnet.trackers))
    return magnet
