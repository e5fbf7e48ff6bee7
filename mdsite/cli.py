"""Cyclopts CLI entrypoint for serving and inspecting an mdsite content tree.

The ``mdsite`` console script loads the configuration file once and either
serves the site over HTTP or prints what a request would produce. Typical usage
is ``mdsite serve`` next to a ``config.json``; ``mdsite menu`` and
``mdsite render`` help check a content folder without starting a server.

Examples
--------
Serve the site described by the default configuration:

>>> from mdsite.cli import main
>>> main()  # doctest: +SKIP

Print the second listing page of a section:

>>> from mdsite.cli import app
>>> app(["render", "2-blog", "2", "--config", "site/config.json"])  # doctest: +SKIP
"""

from __future__ import annotations

import logging
import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter

from ._constants import DEFAULT_CONFIG_PATH
from .config import load_site_config, split_bind_address
from .server import create_app
from .site import SiteService

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"

app = App(name="mdsite", config=cyclopts.config.Env("MDSITE_", command=False))  # type: ignore[unknown-argument]

ConfigOption = typ.Annotated[
    Path, Parameter(help="Path to the site config", env_var="MDSITE_CONFIG")
]


@app.command(help="Serve the content folder over HTTP.")
def serve(
    *,
    config: ConfigOption = DEFAULT_CONFIG_PATH,
    bind: typ.Annotated[
        str | None,
        Parameter(help="Override ServerIp (host:port)", env_var="MDSITE_BIND"),
    ] = None,
    debug: bool = False,
    log_level: typ.Annotated[
        str, Parameter(help="Logging level", env_var="MDSITE_LOG_LEVEL")
    ] = "INFO",
) -> None:
    """Load the configuration once and run the Flask server.

    Parameters
    ----------
    config : Path, optional
        Path to ``config.json``; overridable via ``MDSITE_CONFIG``.
    bind : str or None, optional
        ``host:port`` overriding the configured ``ServerIp``.
    debug : bool, optional
        Enable Flask's debugger and reloader.
    log_level : str, optional
        Name of the root logging level, such as ``"DEBUG"``.

    Raises
    ------
    ConfigurationError
        If the configuration file or bind address is invalid; the server does
        not start.
    """
    logging.basicConfig(level=log_level.upper(), format=LOG_FORMAT)
    site_config = load_site_config(config)
    host, port = split_bind_address(bind or site_config.server_ip)
    logging.getLogger(__name__).info(
        "serving %s on %s:%d", site_config.content_folder, host, port
    )
    create_app(site_config).run(host=host, port=port, debug=debug)


@app.command(help="Print the navigation menu derived from the content folder.")
def menu(*, config: ConfigOption = DEFAULT_CONFIG_PATH) -> None:
    """Print one ``link<TAB>title`` line per menu entry."""
    service = SiteService(load_site_config(config))
    for item in service.menu():
        print(f"{item.link}\t{item.title}")


@app.command(help="Print the HTML a request for a section or page would return.")
def render(
    section: str,
    page: str | None = None,
    /,
    *,
    config: ConfigOption = DEFAULT_CONFIG_PATH,
) -> None:
    """Render a listing page or single document to stdout.

    Parameters
    ----------
    section : str
        Section directory name.
    page : str or None, optional
        A page number for listings, or a document slug. Defaults to the first
        listing page.
    config : Path, optional
        Path to ``config.json``; overridable via ``MDSITE_CONFIG``.
    """
    service = SiteService(load_site_config(config))
    if page is None or (page.isascii() and page.isdigit()):
        html = service.render_section(section, int(page or 1))
    else:
        html = service.render_document(section, page)
    print(html, end="")


def main() -> None:
    """Invoke the Cyclopts application that powers the ``mdsite`` command."""
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
