import pytest

from crhtml.render import (
    escape,
    render_child_rule,
    render_rule,
    render_sidebar,
    render_subsection,
)
from crhtml.rule import ChildRule, Rule
from crhtml.rulebook import parse_rulebook
from crhtml.subsection import Subsection

RULEBOOK_TEXT = (
    "1. Game Concepts\n"
    "100. General\n"
    "\n"
    "100.1. These rules apply.\n"
    "100.1a Subrule here.\n"
    "Example: an example.\n"
    "101. Tokens\n"
    "\n"
    "101.1. Tokens exist.\n"
    "2. Parts of a Card\n"
    "200. General\n"
    "\n"
    "200.1. Cards have parts."
)


@pytest.fixture
def rulebook():
    return parse_rulebook(RULEBOOK_TEXT)


def test_child_rule_without_examples():
    rendered = render_child_rule(ChildRule("100.1.", "Rules apply."))
    assert rendered == "<p><strong>100.1.</strong> Rules apply.</p>"


def test_child_rule_escapes_contents():
    rendered = render_child_rule(ChildRule("100.1.", "a < b & c"))
    assert "a &lt; b &amp; c" in rendered
    assert "a < b" not in rendered


def test_child_rule_one_article_per_example():
    rule = ChildRule("100.1a", "Sub.", ["first", "second", "third"])
    rendered = render_child_rule(rule)
    assert rendered.count("<article>") == len(rule.examples)
    assert rendered.count("</article>") == len(rule.examples)
    for example in rule.examples:
        assert example in rendered


def test_rule_without_subrules_equals_child_rule():
    child = ChildRule("100.1.", "Rules apply.", ["ex"])
    assert render_rule(Rule(child)) == render_child_rule(child)


def test_rule_with_subrules_lists_them():
    subrules = [ChildRule("100.1a", "A."), ChildRule("100.1b", "B.")]
    rule = Rule(ChildRule("100.1.", "Base."), subrules)
    rendered = render_rule(rule)
    assert rendered.startswith(render_child_rule(rule.rule))
    assert rendered.count("<li>") == len(subrules)
    for subrule in subrules:
        assert f"<li>{render_child_rule(subrule)}</li>" in rendered


def test_subsection_heading_then_rules():
    rules = [Rule(ChildRule("111.1.", "One.")), Rule(ChildRule("111.2.", "Two."))]
    subsection = Subsection(111, "Tokens", rules)
    rendered = render_subsection(subsection)
    assert rendered.startswith("<h2>111. Tokens</h2>")
    body = rendered[len("<h2>111. Tokens</h2>"):]
    assert body == "".join(render_rule(rule) for rule in rules)


def test_sidebar_lists_every_section(rulebook):
    rendered = render_sidebar(rulebook, 0, 0)
    assert rendered.count("<nav>") == len(rulebook.sections)
    for section in rulebook.sections:
        assert f"{section.number}. {section.title}" in rendered


def test_sidebar_current_subsection_has_no_link(rulebook):
    total = sum(len(section.subsections) for section in rulebook.sections)
    rendered = render_sidebar(rulebook, 0, 1)
    assert rendered.count('href=""') == total - 1
    current = rulebook.sections[0].subsections[1]
    assert f"<a>{current.number}. {current.title}</a>" in rendered


def test_sidebar_out_of_range_selection_links_everything(rulebook):
    total = sum(len(section.subsections) for section in rulebook.sections)
    rendered = render_sidebar(rulebook, 5, 5)
    assert rendered.count('href=""') == total


def test_escape_quotes():
    assert escape('say "hi"') == "say &quot;hi&quot;"