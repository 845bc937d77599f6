"""Whole HTML pages for each subsection, and writing them to disk."""

from __future__ import annotations

from pathlib import Path

from crhtml.render import escape, render_sidebar, render_subsection
from crhtml.rulebook import Rulebook
from crhtml.section import Section
from crhtml.subsection import Subsection

PICO_CSS = "https://cdn.jsdelivr.net/npm/@picocss/pico@2/css/pico.min.css"
STYLESHEET_PATH = "css/rules.css"


def to_kebab_case(text: str) -> str:
    """Lower-case ``text``, turn spaces into dashes and drop commas and slashes."""
    return text.lower().replace(" ", "-").replace(",", "").replace("/", "")


class RulesPage:
    """The page showing one subsection of a rulebook."""

    def __init__(self, rulebook: Rulebook, section_index: int, subsection_index: int) -> None:
        self.rulebook = rulebook
        self.section_index = section_index
        self.subsection_index = subsection_index

    def section(self) -> Section:
        return self.rulebook.sections[self.section_index]

    def subsection(self) -> Subsection:
        return self.section().subsections[self.subsection_index]

    def render(self) -> str:
        """Return the complete HTML document."""
        sidebar = render_sidebar(self.rulebook, self.section_index, self.subsection_index)
        heading = (
            f"MTG Rules: {escape(self.section().title)} - "
            f"{escape(self.subsection().title)}"
        )
        return (
            "<!DOCTYPE html>"
            '<html lang="en"><head>'
            '<meta charset="UTF-8">'
            "<title>MTG Rules</title>"
            '<meta name="viewport" content="width=device-width,initial-scale=1">'
            '<meta name="description" content="">'
            f'<link rel="stylesheet" href="{PICO_CSS}">'
            f'<link rel="stylesheet" href="/{STYLESHEET_PATH}">'
            "</head><body>"
            '<main class="with-sidebar">'
            f"{sidebar}"
            '<section class="container">'
            f"<h1>{heading}</h1>"
            f"{render_subsection(self.subsection())}"
            "</section></main></body></html>"
        )

    def file_path(self) -> str:
        """Path of the page relative to the output directory."""
        return (
            f"{to_kebab_case(self.section().title)}/"
            f"{to_kebab_case(self.subsection().title)}/index.html"
        )

    def write(self, dir_path: str | Path) -> Path:
        """Write the page below ``dir_path``, creating directories; return its path."""
        path = Path(dir_path) / self.file_path()
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(self.render(), encoding="utf-8")
        return path


def generate_web_pages(rulebook: Rulebook, dir_path: str | Path, stylesheet: str) -> list[Path]:
    """Write a page per subsection and the stylesheet; return the page paths."""
    pages = [
        RulesPage(rulebook, i, j).write(dir_path)
        for i, section in enumerate(rulebook.sections)
        for j, _ in enumerate(section.subsections)
    ]
    css_path = Path(dir_path) / STYLESHEET_PATH
    css_path.parent.mkdir(parents=True, exist_ok=True)
    css_path.write_text(stylesheet, encoding="utf-8")
    return pages