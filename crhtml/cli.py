"""Command that turns a rules text file into a directory of HTML pages."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from crhtml.errors import ParseError
from crhtml.pages import generate_web_pages
from crhtml.rulebook import parse_rulebook


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="crhtml", description="Generate HTML pages from a rules text file."
    )
    parser.add_argument("-i", "--input", default="in/mcr_slice.txt", type=Path)
    parser.add_argument("-o", "--output", default="dist", type=Path)
    parser.add_argument(
        "-s", "--stylesheet", type=Path, default=None,
        help="CSS file copied to css/rules.css (empty when omitted)",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Parse the rules file and write the pages; return the exit status."""
    args = _parser().parse_args(argv)
    try:
        contents = args.input.read_text(encoding="utf-8").lstrip("\ufeff")
        stylesheet = (
            args.stylesheet.read_text(encoding="utf-8") if args.stylesheet else ""
        )
        rulebook = parse_rulebook(contents)
        generate_web_pages(rulebook, args.output, stylesheet)
    except (ParseError, OSError) as err:
        print(f"Error: {err}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())