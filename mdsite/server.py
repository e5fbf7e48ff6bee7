"""Flask application exposing the site over HTTP.

Routes
------
- ``GET /`` and ``GET /<section>``: first listing page of a section; ``/``
  serves the first menu entry.
- ``GET /<section>/<int:page_number>``: a later listing page.
- ``GET /<section>/<page_slug>``: a single document.

Errors raised by the content engine are turned into plain-text responses with
the status code recorded on the exception class: 404 for missing content, 500
for configuration problems, and 501 for menu or rendering failures.
"""

from __future__ import annotations

import logging
import typing as typ
from http import HTTPStatus

from flask import Flask, current_app

from mdsite.errors import RenderError, SiteError
from mdsite.site import SiteService

if typ.TYPE_CHECKING:
    from mdsite.config import SiteConfig

logger = logging.getLogger(__name__)

EXTENSION_KEY = "mdsite"
TEXT_HEADERS = {"Content-Type": "text/plain; charset=utf-8"}


def create_app(config: SiteConfig, *, service: SiteService | None = None) -> Flask:
    """Build the Flask application serving ``config``'s content.

    Parameters
    ----------
    config : SiteConfig
        Settings loaded once at startup; the app never rereads the file.
    service : SiteService, optional
        Preconstructed service, mainly for tests; built from ``config`` when
        omitted.

    Returns
    -------
    Flask
        Application with the content routes and error handlers registered.
    """
    app = Flask(__name__)
    app.extensions[EXTENSION_KEY] = service or SiteService(config)

    app.add_url_rule("/", "section", view_section, defaults={"section": None})
    app.add_url_rule("/<section>", "section", view_section)
    app.add_url_rule("/<section>/<int:page_number>", "listing", view_listing)
    app.add_url_rule("/<section>/<page_slug>", "document", view_document)
    app.register_error_handler(SiteError, handle_site_error)
    return app


def _service() -> SiteService:
    return current_app.extensions[EXTENSION_KEY]


def view_section(section: str | None) -> str:
    """Serve the first listing page of ``section`` (or of the home section)."""
    return _service().render_section(section, 1)


def view_listing(section: str, page_number: int) -> str:
    """Serve listing page ``page_number`` of ``section``."""
    return _service().render_section(section, page_number)


def view_document(section: str, page_slug: str) -> str:
    """Serve a single document."""
    return _service().render_document(section, page_slug)


def handle_site_error(error: SiteError) -> tuple[str, int, dict[str, str]]:
    """Translate a content engine error into a plain-text response."""
    status = int(error.status_code)
    body = error.public_message
    if isinstance(error, RenderError):
        body = f"{body} {error}"
    if status >= HTTPStatus.INTERNAL_SERVER_ERROR:
        logger.error("%s: %s", type(error).__name__, error)
    else:
        logger.info("%s: %s", type(error).__name__, error)
    return body, status, TEXT_HEADERS


__all__ = ["create_app"]
