"""
Parse and build magnet URIs.

Exposes the immutable Magnet model, the parser, the serializer and a fluent
builder.
"""

from .builder import MagnetBuilder
from .magnet import (
    MAGNET_PREFIX,
    ExactTopic,
    MalformedParameterError,
    Magnet,
    MagnetError,
    NotAMagnetURLError,
    is_magnet_link,
)
from .parser import parse
from .serializer import percent_encode, to_string

__all__ = [
    "MAGNET_PREFIX",
    "ExactTopic",
    "Magnet",
    "MagnetBuilder",
    "MagnetError",
    "MalformedParameterError",
    "NotAMagnetURLError",
    "is_magnet_link",
    "parse",
    "percent_encode",
    "to_string",
]
