"""HTML fragments for rules, subsections and the section sidebar."""

from __future__ import annotations

from crhtml.rule import ChildRule, Rule
from crhtml.rulebook import Rulebook
from crhtml.subsection import Subsection

_ESCAPES = str.maketrans({"&": "&amp;", "<": "&lt;", ">": "&gt;", '"': "&quot;"})


def escape(text: object) -> str:
    """Escape text for use in element content or a quoted attribute value."""
    return str(text).translate(_ESCAPES)


def render_child_rule(rule: ChildRule) -> str:
    """Render a rule line followed by one article per example."""
    examples = "".join(
        "<article><header><strong>Example</strong></header>"
        f"{escape(example)}</article>"
        for example in rule.examples
    )
    return (
        f"<p><strong>{escape(rule.code)}</strong> {escape(rule.contents)}</p>"
        f"{examples}"
    )


def render_rule(rule: Rule) -> str:
    """Render a base rule and, if it has any, a list of its subrules."""
    html = render_child_rule(rule.rule)
    if rule.subrules:
        items = "".join(
            f"<li>{render_child_rule(subrule)}</li>" for subrule in rule.subrules
        )
        html += f"<ul>{items}</ul>"
    return html


def render_subsection(subsection: Subsection) -> str:
    """Render a subsection heading followed by all of its rules."""
    heading = f"<h2>{escape(subsection.number)}. {escape(subsection.title)}</h2>"
    return heading + "".join(render_rule(rule) for rule in subsection.rules)


def _render_sidebar_link(name: str, current: bool) -> str:
    if current:
        return f"<li><a>{escape(name)}</a></li>"
    return f'<li><a href="">{escape(name)}</a></li>'


def render_sidebar(rulebook: Rulebook, section_index: int, subsection_index: int) -> str:
    """Render navigation for every section; the current subsection has no link."""
    navs = []
    for s_index, section in enumerate(rulebook.sections):
        nav = (
            f"<nav><p><bold>{escape(section.number)}. "
            f"{escape(section.title)}</bold></p>"
        )
        if section.subsections:
            items = "".join(
                _render_sidebar_link(
                    f"{subsection.number}. {subsection.title}",
                    s_index == section_index and sub_index == subsection_index,
                )
                for sub_index, subsection in enumerate(section.subsections)
            )
            nav += f"<ul>{items}</ul>"
        navs.append(nav + "</nav>")
    return f"<aside>{''.join(navs)}</aside>"