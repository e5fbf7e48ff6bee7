"""Markdown conversion and page template rendering.

:class:`MarkdownRenderer` turns document Markdown into HTML with fenced code,
tables, and Pygments highlighting. :class:`PageRenderer` wraps the site's
``template.html`` and fills it with the converted content and the menu.
Template failures surface as :class:`~mdsite.errors.RenderError`.
"""

from __future__ import annotations

import re
import typing as typ
from html import escape

from jinja2 import Environment, FileSystemLoader, TemplateError, select_autoescape
from markdown import Markdown
from markupsafe import Markup
from pygments.formatters.html import HtmlFormatter

from mdsite._constants import TEMPLATE_NAME
from mdsite.errors import RenderError

if typ.TYPE_CHECKING:
    from pathlib import Path

    from jinja2 import Template

    from mdsite.menu import MenuItem

CODE_BLOCK_PATTERN = re.compile(r"```([A-Za-z0-9_+#.-]+)?[^\n]*\n(.*?)```", re.DOTALL)
CODEHILITE_OPEN_TAG = re.compile(r'<div class="codehilite">')
MARKDOWN_EXTENSIONS = ["fenced_code", "codehilite", "tables", "sane_lists"]


class MarkdownRenderer:
    """Render Markdown into HTML with consistently styled code blocks."""

    def __init__(self, pygments_style: str = "monokai") -> None:
        self.pygments_style = pygments_style
        self._formatter = HtmlFormatter(style=pygments_style, cssclass="codehilite")

    @property
    def stylesheet(self) -> str:
        """Return the CSS used for highlighted code blocks."""
        return self._formatter.get_style_defs(".codehilite")

    def convert(self, text: str) -> str:
        """Render ``text`` into HTML.

        Raw HTML blocks, such as the pagination list appended to listings,
        pass through unchanged. Blank input yields an empty string.
        """
        if not text.strip():
            return ""
        md = Markdown(
            extensions=MARKDOWN_EXTENSIONS,
            extension_configs={
                "codehilite": {
                    "linenums": False,
                    "guess_lang": False,
                    "css_class": "codehilite",
                    "pygments_style": self.pygments_style,
                }
            },
            output_format="html",
        )
        html = md.convert(text)
        return self._annotate_codehilite(html, text)

    @staticmethod
    def _annotate_codehilite(html: str, source_markdown: str) -> str:
        """Attach ``data-language`` metadata to each highlighted block."""
        languages = [
            match.group(1) or "text"
            for match in CODE_BLOCK_PATTERN.finditer(source_markdown)
        ]
        if not languages:
            return html
        lang_iter = iter(languages)

        def _repl(match: re.Match[str]) -> str:
            lang = next(lang_iter, "text")
            return (
                f'<div class="codehilite" data-language="{escape(lang, quote=True)}">'
            )

        return CODEHILITE_OPEN_TAG.sub(_repl, html, len(languages))


class PageRenderer:
    """Fill the site template with rendered content and navigation."""

    def __init__(
        self,
        templates_dir: Path,
        *,
        markdown_renderer: MarkdownRenderer | None = None,
    ) -> None:
        """Initialize the Jinja environment for ``templates_dir``.

        Parameters
        ----------
        templates_dir : Path
            Directory containing ``template.html``. The template is looked up
            on every render, so edits show up without a restart.
        markdown_renderer : MarkdownRenderer, optional
            Converter for document bodies; a default instance is created when
            omitted.
        """
        self.templates_dir = templates_dir
        self.markdown = markdown_renderer or MarkdownRenderer()
        self.env = Environment(
            loader=FileSystemLoader(str(templates_dir)),
            autoescape=select_autoescape(["html", "xml"]),
            trim_blocks=True,
            lstrip_blocks=True,
        )

    def render(
        self,
        markdown_text: str,
        *,
        menu: typ.Sequence[MenuItem],
        current: MenuItem | None,
    ) -> str:
        """Convert ``markdown_text`` and render it inside the site template.

        Parameters
        ----------
        markdown_text : str
            Document body or listing Markdown.
        menu : Sequence[MenuItem]
            Ordered navigation menu, exposed to the template as ``menu``.
        current : MenuItem or None
            Active section, exposed as ``currentMenu``; ``None`` when the
            requested section is not part of the menu.

        Returns
        -------
        str
            The rendered page, always ending with a newline.

        Raises
        ------
        RenderError
            If the template is missing, invalid, or fails while rendering.
        """
        content = Markup(self.markdown.convert(markdown_text))  # noqa: S704 - converted HTML
        context = {
            "content": content,
            "menu": list(menu),
            "currentMenu": current,
            "pygments_css": self.markdown.stylesheet,
        }
        try:
            html = self._template().render(**context)
        except TemplateError as exc:
            msg = f"Template rendering failed: {exc}"
            raise RenderError(msg) from exc
        if not html.endswith("\n"):
            html += "\n"
        return html

    def _template(self) -> Template:
        return self.env.get_template(TEMPLATE_NAME)


__all__ = ["CODE_BLOCK_PATTERN", "MarkdownRenderer", "PageRenderer"]
