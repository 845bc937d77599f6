# crhtml

`crhtml` turns a plain-text comprehensive rules document into a small static
website: one HTML page per subsection, each with a sidebar listing every
section and subsection, plus a stylesheet file that every page links to.

## Installing

```
pip install .
```

For running the test suite:

```
pip install ".[test]"
pytest
```

## Input format

The rules text is made of numbered sections, each holding numbered
subsections, each holding rules:

```
1. Game Concepts
111. Tokens

111.1. Some effects put tokens onto the battlefield.
111.1a A token is not a card.
Example: A token leaves no trace once it ceases to exist.
```

- A section starts with a one- or two-digit number and a title: `1. Game Concepts`.
  Sections are numbered 1, 2, 3, ... in the order they appear.
- A subsection starts with a three-digit number and a title: `111. Tokens`.
- A rule starts with a code such as `111.1.`; a subrule with a code such as `111.1a`.
- A line containing `Example:` attaches to the most recent subrule, or to the
  rule itself when it has no subrules yet.
- Only empty lines may come before the first rule of a subsection; other
  unrecognised lines after a rule are ignored.

Text that does not fit this shape raises `crhtml.errors.ParseError`. Its
`culprit` attribute shows where parsing stopped, for example
`Section: 1 > Subsection: 111 > Last Valid Rule: None > some stray text`,
and its `message` explains the expected syntax. `str(err)` combines both.

## Command line

```
crhtml [-i INPUT] [-o OUTPUT] [-s STYLESHEET]
```

- `-i`, `--input`: the rules text file (default `in/mcr_slice.txt`). A leading
  byte-order mark is ignored.
- `-o`, `--output`: the directory to write into (default `dist`).
- `-s`, `--stylesheet`: a CSS file copied to `css/rules.css`. Without it,
  `css/rules.css` is written empty.

The command writes:

- `<output>/<section-title>/<subsection-title>/index.html` for every
  subsection, with titles in kebab case (`Game Concepts` becomes
  `game-concepts`; commas and slashes are dropped);
- `<output>/css/rules.css`.

On a parse error or a file error it prints `Error: ...` to standard error and
exits with status 1.

## Library use

```python
from pathlib import Path

from crhtml.rulebook import parse_rulebook
from crhtml.pages import RulesPage, generate_web_pages

rulebook = parse_rulebook(Path("rules.txt").read_text(encoding="utf-8"))

for section in rulebook.sections:
    print(section.number, section.title, len(section.subsections))

page = RulesPage(rulebook, 0, 0)
print(page.file_path())   # e.g. "game-concepts/tokens/index.html"
html = page.render()

paths = generate_web_pages(rulebook, Path("site"), stylesheet="main { display: flex; }")
```

`RulesPage.write(dir_path)` writes a single page and returns its path;
`generate_web_pages` writes every page and the stylesheet and returns the page
paths.

The parsing steps are also available on their own:
`crhtml.rule.parse_rules`, `crhtml.subsection.parse_subsection`,
`crhtml.section.parse_section` and `crhtml.rulebook.parse_rulebook`, returning
the dataclasses `Rule`/`ChildRule`, `Subsection`, `Section` and `Rulebook`.
The HTML fragments come from `crhtml.render`: `render_child_rule`,
`render_rule`, `render_subsection` and `render_sidebar`, with `escape` for
HTML-escaping text.

## Limitations

- No stylesheet ships with the package; pages get styling only from the
  linked Pico CSS and whatever CSS is passed with `--stylesheet`.
- Sidebar entries for other subsections have an empty `href`, so they do not
  navigate between pages.
- There is no server; open or host the generated files yourself.