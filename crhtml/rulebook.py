"""A whole rulebook made of numbered sections."""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from crhtml.errors import ParseError
from crhtml.section import SECTION_HEADER_MESSAGE, Section, parse_section, split_before

_SPLIT_SECTION = re.compile(r"\n(\d{1,2}\.\s.+)")
_MATCH_SECTION_HEADER = re.compile(r"^(\d{1,2}\.\s)")


@dataclass
class Rulebook:
    """All sections of a rulebook, in order."""

    sections: list[Section] = field(default_factory=list)


def parse_rulebook(text: str) -> Rulebook:
    """Parse the full rules text; sections are numbered from 1 in order."""
    if not text:
        raise ParseError(text, "The rulebook is empty")

    pieces = [piece.strip() for piece in split_before(_SPLIT_SECTION, text)]
    if len(pieces) == 1 and not _MATCH_SECTION_HEADER.match(pieces[0]):
        raise ParseError(pieces[0], SECTION_HEADER_MESSAGE)

    return Rulebook(
        sections=[
            parse_section(number, piece) for number, piece in enumerate(pieces, start=1)
        ]
    )