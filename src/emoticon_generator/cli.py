# src/emoticon_generator/cli.py
"""Command line entry: list every emoticon, or print the tile distribution tables."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv

from .generation import generate_all, generate_by_source
from .generation.catalog import DEFAULT_CATALOG, Catalog, load_catalog
from .generation.general.utils import (
    ConfigFileNotFound,
    ConfigParseError,
    ConfigTypeError,
    DataDirNotFound,
    reload_topics,
)
from .tiles import build_distribution

log = logging.getLogger(__name__)

CONFIG_ERRORS = (DataDirNotFound, ConfigFileNotFound, ConfigParseError, ConfigTypeError)


def render_listing(emoticons: list[str]) -> str:
    """Does: One emoticon per line, each followed by a newline."""
    return "".join(f"{e}\n" for e in emoticons)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="emoticon-generator",
        description="Enumerate text emoticons and derive a tile distribution from their characters.",
    )
    parser.add_argument(
        "--catalog",
        default=None,
        help="Custom catalog JSON file in the data directory (default: built-in catalog)",
    )
    parser.add_argument(
        "--data-dir",
        type=Path,
        default=None,
        dest="data_dir",
        help="Directory holding catalog files (default: $DATA_DIR or ./data)",
    )
    parser.add_argument(
        "--allow-comments",
        action="store_true",
        dest="allow_comments",
        help="Parse the catalog file as JSON5 (comments, trailing commas)",
    )
    parser.add_argument("--debug", action="store_true", help="Verbose debug logs")

    sub = parser.add_subparsers(dest="command", required=True)

    p_list = sub.add_parser("list", help="Print every emoticon, sorted")
    p_list.add_argument("--format", choices=("text", "json"), default="text")
    p_list.add_argument(
        "--count", action="store_true", help="Print only the number of emoticons"
    )

    p_tiles = sub.add_parser("tiles", help="Print tile counts, scores and alphabet")
    p_tiles.add_argument(
        "--only",
        choices=("tiles", "scores", "alphabet"),
        default=None,
        help="Print a single block without its header",
    )
    return parser


def _resolve_catalog(args: argparse.Namespace) -> Catalog:
    if not args.catalog:
        return DEFAULT_CATALOG
    return load_catalog(
        args.catalog, base_dir=args.data_dir, allow_comments=args.allow_comments
    )


def _run_list(args: argparse.Namespace, catalog: Catalog) -> None:
    if args.count:
        total = 0
        for source, emoticons in generate_by_source(catalog).items():
            log.debug("%s: %d", source, len(emoticons))
            total += len(emoticons)
        print(total)
        return

    emoticons = generate_all(catalog)
    if args.format == "json":
        print(json.dumps(emoticons, indent=2, ensure_ascii=False))
    else:
        sys.stdout.write(render_listing(emoticons))


def _run_tiles(args: argparse.Namespace, catalog: Catalog) -> None:
    blocks = build_distribution(catalog=catalog).as_dict()
    if args.only:
        sys.stdout.write(blocks[args.only])
        if args.only == "alphabet":
            sys.stdout.write("\n")
        return

    print("// Tile counts")
    sys.stdout.write(blocks["tiles"])
    print("\n// Scores")
    sys.stdout.write(blocks["scores"])
    print("\n// Alphabet")
    print(blocks["alphabet"])


def main(argv: list[str] | None = None) -> int:
    """Parse arguments, run the selected command, return the exit status."""
    load_dotenv()
    reload_topics()

    args = build_parser().parse_args(argv)
    if args.debug:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    try:
        catalog = _resolve_catalog(args)
    except CONFIG_ERRORS as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.command == "list":
        _run_list(args, catalog)
    else:
        _run_tiles(args, catalog)
    return 0


if __name__ == "__main__":
    sys.exit(main())
