#!/usr/bin/env python3
"""Command-line entry point for Markdown → HTML conversion."""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from services import (
    MarkdownInputError,
    convert_markdown_to_html,
    decode_markdown_bytes,
)

__version__ = "1.0.0"

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="markdown-preview",
        description="Convert line-oriented Markdown to an HTML fragment",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  markdown-preview notes.md
  markdown-preview notes.md -o notes.html --stats
  echo "# Title" | markdown-preview
        """,
    )
    parser.add_argument(
        "input",
        nargs="?",
        default="-",
        help="Markdown file to convert. Default: read from stdin",
    )
    parser.add_argument(
        "-o",
        "--output",
        dest="output_file",
        type=str,
        help="Write HTML to this file instead of stdout",
    )
    parser.add_argument(
        "--stats",
        action="store_true",
        help="Print per-kind block counts to stderr",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    parser.add_argument("--version", action="version", version=__version__)
    return parser


def read_input(source: str) -> str:
    """Read markdown from a path, or from stdin when ``source`` is ``-``."""
    if source == "-":
        return decode_markdown_bytes(sys.stdin.buffer.read())

    path = Path(source)
    if not path.is_file():
        raise MarkdownInputError(f"Input file '{source}' does not exist.")
    try:
        payload = path.read_bytes()
    except OSError as exc:
        raise MarkdownInputError(f"Cannot read '{source}': {exc.strerror}") from exc
    return decode_markdown_bytes(payload)


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )

    try:
        markdown = read_input(args.input)
        outcome = convert_markdown_to_html(
            markdown,
            original_filename=None if args.input == "-" else args.input,
        )
    except MarkdownInputError as exc:
        print(f"Error: {exc.message}", file=sys.stderr)
        return 1

    if args.output_file:
        try:
            Path(args.output_file).write_text(outcome.html, encoding="utf-8")
        except OSError as exc:
            print(f"Error: Cannot write '{args.output_file}': {exc.strerror}", file=sys.stderr)
            return 1
        logger.info("Wrote %s", args.output_file)
    else:
        sys.stdout.write(outcome.html)
        sys.stdout.write("\n")

    if args.stats:
        print(f"lines: {outcome.line_count}", file=sys.stderr)
        for kind, count in sorted(outcome.block_counts.items()):
            print(f"{kind}: {count}", file=sys.stderr)

    return 0


if __name__ == "__main__":
    sys.exit(main())
