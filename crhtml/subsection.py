"""Numbered subsections of a rulebook section."""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from crhtml.errors import ParseError
from crhtml.rule import Rule, parse_rules

_CAPTURE_SUBSECTION = re.compile(r"^(\d{3})\.\s(.+)([\s\S]*)")

SUBSECTION_HEADER_MESSAGE = (
    "Each subsection must begin with a 3-digit subsection number and a title "
    "like so:\n111. Tokens"
)


@dataclass
class Subsection:
    """A three-digit numbered subsection and its rules."""

    number: int
    title: str
    rules: list[Rule] = field(default_factory=list)


def parse_subsection(text: str) -> Subsection:
    """Parse a subsection that starts with a header such as ``111. Tokens``."""
    match = _CAPTURE_SUBSECTION.match(text)
    if match is None:
        raise ParseError(text, SUBSECTION_HEADER_MESSAGE)
    number_text, title, body = match.groups()
    try:
        rules = parse_rules(body.strip())
    except ParseError as err:
        raise ParseError(
            f"Subsection: {number_text} > {err.culprit}", err.message
        ) from err
    return Subsection(number=int(number_text), title=title, rules=rules)