"""Serve a folder of Markdown documents as a small paginated website.

Top-level directories of the content folder become navigation sections,
Markdown files inside them become articles listed newest first, and a Jinja
template wraps every page.

Exports
-------
- ``app``: Cyclopts application entry for subcommands.
- ``main``: Convenience function that invokes the Cyclopts app.
- ``create_app``: Flask application factory.

Examples
--------
>>> from mdsite import main
>>> main()  # doctest: +SKIP
"""

from __future__ import annotations

from .cli import app, main
from .server import create_app

__all__ = ["app", "create_app", "main"]
