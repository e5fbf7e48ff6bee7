"""Request-level orchestration of menu, listings, and single pages.

:class:`SiteService` is what the Flask views and the ``render`` CLI command
call. Each call rebuilds the menu and rereads the content folder, so the only
state kept between calls is the immutable configuration and the Jinja
environment.

Typical usage:

>>> from pathlib import Path
>>> from mdsite.config import load_site_config
>>> from mdsite.site import SiteService
>>> service = SiteService(load_site_config(Path("config.json")))  # doctest: +SKIP
>>> html = service.render_section(None)  # doctest: +SKIP
"""

from __future__ import annotations

import re
import typing as typ

from mdsite._constants import DOCUMENT_SLUG_PATTERN
from mdsite.articles import build_listing, load_document
from mdsite.errors import DocumentNotFound, SectionUnreadable
from mdsite.menu import build_menu, current_menu_item, home_section
from mdsite.renderer import PageRenderer

if typ.TYPE_CHECKING:
    from mdsite.config import SiteConfig
    from mdsite.menu import MenuItem

SECTION_PATTERN = re.compile(r"^[A-Za-z0-9-]+$")


class SiteService:
    """Render listing and document pages for one site configuration."""

    def __init__(
        self, config: SiteConfig, *, renderer: PageRenderer | None = None
    ) -> None:
        self.config = config
        self.renderer = renderer or PageRenderer(config.template_folder)

    def menu(self) -> list[MenuItem]:
        """Return the navigation menu derived from the content folder."""
        return build_menu(self.config.content_folder)

    def render_section(self, section: str | None, page_number: int = 1) -> str:
        """Render listing page ``page_number`` of ``section``.

        An empty or missing ``section`` selects the first menu entry.

        Raises
        ------
        ContentRootUnreadable, NoSectionsConfigured
            If the menu cannot be built or is empty when it is needed.
        SectionUnreadable, PageOutOfRange, DocumentNotFound
            If the listing cannot be produced.
        RenderError
            If the template fails to render.
        """
        menu = self.menu()
        target = section or home_section(menu)
        _check_section(target)
        listing = build_listing(self.config, target, page_number)
        return self.renderer.render(
            listing, menu=menu, current=current_menu_item(menu, target)
        )

    def render_document(self, section: str, slug: str) -> str:
        """Render the single document ``<section>/<slug>.md``.

        Raises
        ------
        ContentRootUnreadable
            If the menu cannot be built.
        SectionUnreadable, DocumentNotFound
            If either path segment is malformed or the file is missing.
        RenderError
            If the template fails to render.
        """
        menu = self.menu()
        _check_section(section)
        if not DOCUMENT_SLUG_PATTERN.match(slug):
            msg = f"'{slug}' is not a valid page name."
            raise DocumentNotFound(msg)
        body = load_document(self.config.content_folder, section, slug)
        return self.renderer.render(
            body, menu=menu, current=current_menu_item(menu, section)
        )


def _check_section(section: str) -> None:
    """Reject section names that are not a single safe path segment."""
    if not SECTION_PATTERN.match(section):
        msg = f"'{section}' is not a valid section name."
        raise SectionUnreadable(msg)


__all__ = ["SECTION_PATTERN", "SiteService"]
