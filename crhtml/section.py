"""Top-level numbered sections of a rulebook."""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from crhtml.errors import ParseError
from crhtml.subsection import (
    SUBSECTION_HEADER_MESSAGE,
    Subsection,
    parse_subsection,
)

_CAPTURE_SECTION = re.compile(r"^\d{1,2}\.\s(.+)([\s\S]*)")
_SPLIT_SUBSECTION = re.compile(r"\n\d{3}\.\s.+")
_MATCH_SUBSECTION = re.compile(r"^\d{3}\.\s")

SECTION_HEADER_MESSAGE = (
    "Each section must begin with a 1 or 2 digit section number and a title "
    "like so:\n1. Game Concepts"
)


@dataclass
class Section:
    """A numbered section and its subsections."""

    number: int
    title: str
    subsections: list[Subsection] = field(default_factory=list)


def split_before(pattern: re.Pattern[str], text: str) -> list[str]:
    """Split ``text`` so that each piece after the first begins with a match."""
    starts = [0, *(m.start() for m in pattern.finditer(text)), len(text)]
    return [text[start:end] for start, end in zip(starts, starts[1:])] or [text]


def parse_section(number: int, text: str) -> Section:
    """Parse a section that starts with a header such as ``1. Game Concepts``."""
    match = _CAPTURE_SECTION.match(text)
    if match is None:
        raise ParseError(text, SECTION_HEADER_MESSAGE)
    title, body = match.groups()

    pieces = [piece.strip() for piece in split_before(_SPLIT_SUBSECTION, body.strip())]
    if len(pieces) == 1 and not pieces[0]:
        raise ParseError(text, "Each section must contain at least one subsection.")
    if not _MATCH_SUBSECTION.match(pieces[0]):
        raise ParseError(text, SUBSECTION_HEADER_MESSAGE)

    try:
        subsections = [parse_subsection(piece) for piece in pieces]
    except ParseError as err:
        raise ParseError(f"Section: {number} > {err.culprit}", err.message) from err
    return Section(number=number, title=title, subsections=subsections)