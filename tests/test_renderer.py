"""Unit tests for Markdown conversion and template rendering."""

from __future__ import annotations

import typing as typ

import pytest
from bs4 import BeautifulSoup
from markdown import Markdown

from mdsite._constants import BUNDLED_TEMPLATES
from mdsite.errors import RenderError
from mdsite.menu import MenuItem
from mdsite.pagination import pagination_markup
from mdsite.renderer import MarkdownRenderer, PageRenderer

if typ.TYPE_CHECKING:
    from pathlib import Path

MENU = [
    MenuItem(title="Home", link="/", section="1-home"),
    MenuItem(title="Blog", link="/2-blog", section="2-blog"),
]


def test_markdown_renders_headings_and_paragraphs() -> None:
    """Plain Markdown becomes HTML."""
    html = MarkdownRenderer().convert("# Title\n\nSome *text*.")
    soup = BeautifulSoup(html, "html.parser")
    assert soup.h1 is not None
    assert soup.h1.get_text() == "Title"
    assert soup.em is not None


def test_markdown_blank_input_renders_nothing() -> None:
    """Whitespace-only content produces an empty string."""
    assert MarkdownRenderer().convert("  \n\n") == ""


def test_markdown_code_blocks_carry_language() -> None:
    """Fenced code is highlighted and tagged with its language."""
    html = MarkdownRenderer().convert("```python\nprint('hi')\n```\n")
    soup = BeautifulSoup(html, "html.parser")
    block = soup.select_one("div.codehilite")
    assert block is not None, f"expected a highlighted block in {html!r}"
    assert block["data-language"] == "python"


def test_markdown_passes_pagination_markup_through() -> None:
    """The raw pagination list survives conversion untouched."""
    markup = pagination_markup("2-blog", 1, 2)
    html = MarkdownRenderer().convert(f"Intro paragraph.\n\n{markup}")
    soup = BeautifulSoup(html, "html.parser")
    links = [a["href"] for a in soup.select("ul.pagination a")]
    assert links == ["/2-blog", "/2-blog/2"]


def test_stylesheet_targets_codehilite() -> None:
    """The Pygments stylesheet is scoped to highlighted blocks."""
    assert ".codehilite" in MarkdownRenderer().stylesheet


def test_bundled_template_renders_menu_and_content() -> None:
    """The default template shows the menu, marks the current item, and embeds content."""
    renderer = PageRenderer(BUNDLED_TEMPLATES)
    html = renderer.render("# Hello <b>world</b>", menu=MENU, current=MENU[1])
    soup = BeautifulSoup(html, "html.parser")
    assert [a["href"] for a in soup.select("nav a")] == ["/", "/2-blog"]
    active = soup.select("nav li.active a")
    assert [a.get_text() for a in active] == ["Blog"]
    heading = soup.select_one("main h1")
    assert heading is not None
    assert heading.b is not None, "converted HTML must not be escaped"
    assert soup.title is not None
    assert soup.title.get_text() == "Blog"


def test_bundled_template_without_current_item() -> None:
    """A section missing from the menu renders with no active entry."""
    html = PageRenderer(BUNDLED_TEMPLATES).render("text", menu=MENU, current=None)
    soup = BeautifulSoup(html, "html.parser")
    assert soup.select("nav li.active") == []
    assert html.endswith("\n")


def test_custom_template_receives_context(tmp_path: Path) -> None:
    """User templates get content, menu, and currentMenu."""
    (tmp_path / "template.html").write_text(
        "{{ currentMenu.title }}|{% for m in menu %}{{ m.section }},{% endfor %}|"
        "{{ content }}",
        encoding="utf-8",
    )
    html = PageRenderer(tmp_path).render("plain", menu=MENU, current=MENU[0])
    assert html == "Home|1-home,2-blog,|<p>plain</p>\n"


def test_missing_template_is_a_render_error(tmp_path: Path) -> None:
    """A template folder without template.html cannot render pages."""
    with pytest.raises(RenderError, match=r"template\.html"):
        PageRenderer(tmp_path).render("text", menu=MENU, current=None)


def test_broken_template_is_a_render_error(tmp_path: Path) -> None:
    """Template syntax errors surface as RenderError."""
    (tmp_path / "template.html").write_text("{% for %}", encoding="utf-8")
    with pytest.raises(RenderError):
        PageRenderer(tmp_path).render("text", menu=MENU, current=None)


def test_markdown_failures_are_not_relabelled(monkeypatch: pytest.MonkeyPatch) -> None:
    """Converter bugs propagate as themselves instead of becoming RenderError."""

    def _broken(self: Markdown, source: str) -> str:
        msg = "converter bug"
        raise AttributeError(msg)

    monkeypatch.setattr(Markdown, "convert", _broken)
    with pytest.raises(AttributeError, match="converter bug"):
        PageRenderer(BUNDLED_TEMPLATES).render("# Title", menu=MENU, current=None)
