"""Command-line interface for inheritree."""

from __future__ import annotations

import argparse
import logging
import re
import sys
from pathlib import Path

from inheritree.config import read_settings
from inheritree.errors import InheritreeError
from inheritree.pipeline import run

logger = logging.getLogger(__name__)


def _root_path(text: str) -> str | int:
    """``0`` and negative integers such as ``-1`` count folders up from the root class.

    Anything else, including all-digit names like ``2024``, is a folder.
    """
    if re.fullmatch(r"-\d+|0", text):
        return int(text)
    return text


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="inheritree",
        description="Map every subclass of a Python class found below a folder.",
    )
    parser.add_argument(
        "root_class",
        help="Class whose subclasses are listed (dotted path, or plain name with --static)",
    )
    parser.add_argument(
        "root_path",
        nargs="?",
        type=_root_path,
        default=0,
        help=(
            "Folder to search, or 0 / -N for the root class folder or N folders above it"
            " (default: 0); write ./0 for a folder named 0"
        ),
    )
    parser.add_argument(
        "--static",
        action="store_true",
        help="Parse sources instead of importing them",
    )
    parser.add_argument(
        "-s",
        "--search-path",
        action="append",
        type=Path,
        default=[],
        dest="search_paths",
        help="Where classes are resolved from: indexed with --static, put on sys.path otherwise (default: .)",
    )
    parser.add_argument(
        "--exclude",
        action="append",
        default=[],
        help="Glob of folder names to skip (repeatable)",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        default=None,
        help="Write the edge table (.json, .csv) or save the graph (.png, .svg, .pdf)",
    )
    parser.add_argument(
        "--table",
        action="store_true",
        help="Print the edge table instead of showing the graph",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose (debug) output",
    )

    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.WARNING, format="%(message)s")
    if args.verbose:
        logging.getLogger("inheritree").setLevel(logging.DEBUG)

    settings = read_settings(Path.cwd())

    try:
        run(
            args.root_class,
            args.root_path,
            static=args.static,
            search_paths=args.search_paths or settings.search_paths,
            exclude=settings.exclude + args.exclude,
            output=args.output,
            table=args.table,
        )
    except (InheritreeError, ValueError) as e:
        logger.error("%s", e)
        sys.exit(1)


if __name__ == "__main__":
    main()
