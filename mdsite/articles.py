"""List, excerpt, and paginate the documents of a section.

A section directory holds Markdown documents named ``<slug>.md``. Listings
show them newest first, ``articles_per_page`` at a time. When a section holds
more than one file, each document is cut down to an excerpt followed by a
"read more" link; a section with a single file shows it in full, which is how
plain pages differ from blog-style listings.

Example
-------
>>> from pathlib import Path
>>> from mdsite.articles import build_listing
>>> from mdsite.config import load_site_config
>>> config = load_site_config(Path("config.json"))  # doctest: +SKIP
>>> print(build_listing(config, "2-blog", 1))  # doctest: +SKIP
"""

from __future__ import annotations

import dataclasses as dc
import datetime as dt
import typing as typ

from mdsite._constants import DOCUMENT_SLUG_PATTERN, DOCUMENT_SUFFIX
from mdsite.errors import DocumentNotFound, SectionUnreadable
from mdsite.pagination import page_window, pagination_markup

if typ.TYPE_CHECKING:
    from pathlib import Path

    from mdsite.config import SiteConfig

EXCERPT_SEGMENTS = 3


@dc.dataclass(frozen=True, slots=True)
class Document:
    """A file inside a section directory.

    Attributes
    ----------
    section : str
        Name of the owning section directory.
    slug : str
        File name without its extension.
    modified_at : dt.datetime
        Filesystem modification time (UTC); the only ordering key.
    path : Path
        Location of the file on disk.
    """

    section: str
    slug: str
    modified_at: dt.datetime
    path: Path

    @property
    def is_markdown(self) -> bool:
        """Return whether the file carries the document extension."""
        return self.path.name.endswith(DOCUMENT_SUFFIX)

    @property
    def is_listable(self) -> bool:
        """Return whether the file is a document its slug can link to."""
        return self.is_markdown and DOCUMENT_SLUG_PATTERN.match(self.slug) is not None

    def read(self) -> str:
        """Load the body from disk; nothing is cached.

        Line endings are kept as stored. Bytes that are not valid UTF-8 are
        replaced with U+FFFD rather than failing the page.
        """
        try:
            return self.path.read_bytes().decode("utf-8", errors="replace")
        except OSError as exc:
            msg = f"Document '{self.section}/{self.slug}' could not be read: {exc}"
            raise DocumentNotFound(msg) from exc


def list_documents(content_root: Path, section: str) -> list[Document]:
    """Return every regular file in ``section``, most recently modified first.

    Non-Markdown files are included: they count towards pagination totals even
    though listings skip them, as they skip documents whose name cannot be
    used as a page slug. Files with identical modification times keep
    name order.

    Raises
    ------
    SectionUnreadable
        If the section directory cannot be listed.
    """
    directory = content_root / section
    try:
        entries = sorted(directory.iterdir(), key=lambda entry: entry.name)
        documents = [_describe(section, entry) for entry in entries if entry.is_file()]
    except OSError as exc:
        msg = f"Section '{section}' could not be listed: {exc}"
        raise SectionUnreadable(msg) from exc
    documents.sort(key=lambda document: document.modified_at, reverse=True)
    return documents


def excerpt(body: str) -> str:
    """Return the first three newline-separated segments of ``body``."""
    return "\n".join(body.split("\n", EXCERPT_SEGMENTS)[:EXCERPT_SEGMENTS])


def read_more_link(config: SiteConfig, document: Document) -> str:
    """Return the Markdown link pointing at the full ``document``."""
    return f"[{config.read_more_text}](/{document.section}/{document.slug})"


def build_listing(config: SiteConfig, section: str, page_number: int) -> str:
    """Return the Markdown for one listing page of ``section``.

    Parameters
    ----------
    config : SiteConfig
        Site settings supplying the content root, page size, and link text.
    section : str
        Section directory name.
    page_number : int
        Requested 1-based page number.

    Returns
    -------
    str
        Document bodies (or excerpts with "read more" links) and, when the
        section spans several pages, the pagination block, joined by blank
        lines. Empty when the page holds no Markdown files.

    Raises
    ------
    SectionUnreadable
        If the section directory cannot be listed.
    PageOutOfRange
        If ``page_number`` starts past the last file.
    DocumentNotFound
        If a listed document vanishes before it can be read.
    """
    documents = list_documents(config.content_folder, section)
    total_count = len(documents)
    window = page_window(total_count, page_number, config.articles_per_page)

    fragments: list[str] = []
    for document in window.select(documents):
        if not document.is_listable:
            continue
        body = document.read()
        if total_count > 1:
            fragments.append(excerpt(body))
            fragments.append(read_more_link(config, document))
        else:
            fragments.append(body)

    if window.has_multiple_pages:
        fragments.append(pagination_markup(section, page_number, window.page_count))
    return "\n\n".join(fragments)


def load_document(content_root: Path, section: str, slug: str) -> str:
    """Return the unmodified body of ``<content_root>/<section>/<slug>.md``.

    Raises
    ------
    DocumentNotFound
        If the file does not exist or cannot be read.
    """
    path = content_root / section / f"{slug}{DOCUMENT_SUFFIX}"
    if not path.is_file():
        msg = f"Document '{section}/{slug}' does not exist."
        raise DocumentNotFound(msg)
    try:
        document = _describe(section, path)
    except OSError as exc:
        msg = f"Document '{section}/{slug}' could not be read: {exc}"
        raise DocumentNotFound(msg) from exc
    return document.read()


def _describe(section: str, entry: Path) -> Document:
    """Return the Document for ``entry``; the body is not loaded."""
    return Document(
        section=section,
        slug=entry.name.removesuffix(DOCUMENT_SUFFIX),
        modified_at=dt.datetime.fromtimestamp(entry.stat().st_mtime, tz=dt.UTC),
        path=entry,
    )


__all__ = [
    "Document",
    "build_listing",
    "excerpt",
    "list_documents",
    "load_document",
    "read_more_link",
]
