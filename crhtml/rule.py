"""Rules, subrules and their examples."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Iterator

from crhtml.errors import ParseError

_BASE_RULE = re.compile(r"(^\d{3}\.\d+\.)\s(.+)$")
_SUBRULE = re.compile(r"(^\d{3}\.\d+[a-z]+)\s(.+)$")
_EXAMPLE = re.compile(r"Example:\s(.+)$")

_SYNTAX_HELP = (
    "rules text should be one of the following:\n"
    "A Rule: 100.1. These Magic rules apply to any Magic game with two or more "
    "players, including two-player games and multiplayer games.\n"
    "A Subrule: 100.1a These Magic rules apply to Magic: the Gathering games with "
    "two or more players, including two-player games and multiplayer games.\n"
    'An Example: Example: "This creature can\u2019t block" is an ability."'
)


@dataclass
class ChildRule:
    """A single numbered rule line with the examples that follow it."""

    code: str
    contents: str
    examples: list[str] = field(default_factory=list)


@dataclass
class Rule:
    """A base rule and the lettered subrules beneath it."""

    rule: ChildRule
    subrules: list[ChildRule] = field(default_factory=list)


def _lines(text: str) -> Iterator[str]:
    """Yield lines split on newlines, dropping a final empty line and trailing CR."""
    parts = text.split("\n")
    if parts[-1] == "":
        parts.pop()
    for part in parts:
        yield part[:-1] if part.endswith("\r") else part


def parse_rules(text: str) -> list[Rule]:
    """Parse the body of a subsection into its rules.

    Lines before the first rule must be empty; unrecognised lines after a
    rule are ignored.
    """
    rules: list[Rule] = []
    for line_no, line in enumerate(_lines(text), start=1):
        if match := _BASE_RULE.search(line):
            rules.append(Rule(ChildRule(match[1], match[2])))
        elif rules:
            current = rules[-1]
            if match := _SUBRULE.search(line):
                current.subrules.append(ChildRule(match[1], match[2]))
            elif match := _EXAMPLE.search(line):
                target = current.subrules[-1] if current.subrules else current.rule
                target.examples.append(match[1])
        elif line:
            raise ParseError(
                f"Last Valid Rule: None > {line}",
                f"Unexpected syntax on line {line_no}, {_SYNTAX_HELP}",
            )
    return rules