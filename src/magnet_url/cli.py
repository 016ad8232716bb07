"""
Command-line interface for parsing and building magnet links.
"""

from __future__ import annotations

import argparse
import sys

from pydantic import ValidationError

from .builder import MagnetBuilder
from .config import configure_logging
from .magnet import Magnet, MagnetError
from .parser import parse

FIELD_LABELS = (
    ("hash_type", "Hash type"),
    ("hash", "Hash"),
    ("display_name", "Name"),
    ("length", "Length"),
    ("keyword_topic", "Keywords"),
    ("exact_source", "Exact source"),
    ("acceptable_source", "Acceptable source"),
    ("manifest_topic", "Manifest"),
)


def format_magnet(magnet: Magnet) -> str:
    """Render a magnet's fields as aligned 'label: value' lines."""
    lines = []
    for field, label in FIELD_LABELS:
        value = getattr(magnet, field)
        if value is not None:
            lines.append(f"{label + ':':<19}{value}")
    for tracker in magnet.trackers:
        lines.append(f"{'Tracker:':<19}{tracker}")
    for ws in magnet.web_seeds:
        lines.append(f"{'Web seed:':<19}{ws}")
    return "\n".join(lines)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="magnet-url", description="Parse and build magnet links")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable verbose logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    parse_cmd = subparsers.add_parser("parse", help="Show the fields of a magnet link")
    parse_cmd.add_argument("uri", type=str, help="Magnet link to parse")
    parse_cmd.add_argument("--json", action="store_true", help="Print the parsed fields as JSON")

    normalize_cmd = subparsers.add_parser("normalize", help="Rewrite a magnet link in canonical form")
    normalize_cmd.add_argument("uri", type=str, help="Magnet link to normalize")

    build_cmd = subparsers.add_parser("build", help="Assemble a magnet link from its fields")
    build_cmd.add_argument("--hash-type", type=str, default="btih", help="Hash type (default: btih)")
    build_cmd.add_argument("--hash", type=str, required=True, help="Hex or base32 digest")
    build_cmd.add_argument("--name", type=str, help="Display name")
    build_cmd.add_argument("--length", type=int, help="Content size in bytes")
    build_cmd.add_argument("--tracker", action="append", default=[], help="Tracker URL (repeatable)")
    build_cmd.add_argument("--web-seed", action="append", default=[], help="Web seed URL (repeatable)")
    build_cmd.add_argument("--keywords", type=str, help="'+'-joined search keywords")
    build_cmd.add_argument("--exact-source", type=str, help="Exact source URL")
    build_cmd.add_argument("--acceptable-source", type=str, help="Acceptable source URL")
    build_cmd.add_argument("--manifest", type=str, help="Manifest topic URL")

    return parser


def build_from_args(args: argparse.Namespace) -> Magnet:
    if args.length is not None and args.length < 0:
        raise MagnetError("--length must be a non-negative integer")

    builder = MagnetBuilder().exact_topic(args.hash_type, args.hash)
    builder.add_trackers(args.tracker).add_web_seeds(args.web_seed)

    optional = (
        (args.name, builder.display_name),
        (args.length, builder.length),
        (args.keywords, builder.keyword_topic),
        (args.exact_source, builder.exact_source),
        (args.acceptable_source, builder.acceptable_source),
        (args.manifest, builder.manifest_topic),
    )
    for value, setter in optional:
        if value is not None:
            setter(value)

    return builder.build()


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)

    try:
        if args.command == "parse":
            magnet = parse(args.uri)
            print(magnet.model_dump_json(indent=2) if args.json else format_magnet(magnet))
        elif args.command == "normalize":
            print(parse(args.uri).to_uri())
        else:
            print(build_from_args(args).to_uri())
    except (MagnetError, ValidationError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
