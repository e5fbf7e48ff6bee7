"""Page windows and pagination link markup for section listings.

The calculator is a pure function of ``(total_count, page_number, page_size)``.
Page numbers are 1-based; anything below 1 is treated as the first page.

Examples
--------
>>> window = page_window(25, 1, 10)
>>> (window.start, window.end, window.page_count)
(0, 10, 3)
>>> window.has_multiple_pages
True
"""

from __future__ import annotations

import dataclasses as dc
import math
import typing as typ
from html import escape

from mdsite.errors import PageOutOfRange

_T = typ.TypeVar("_T")


@dc.dataclass(frozen=True, slots=True)
class PageWindow:
    """The contiguous slice of a section's documents shown on one page.

    Attributes
    ----------
    start : int
        Index of the first document on the page (inclusive).
    end : int
        Index one past the last document on the page.
    page_count : int
        Number of pages needed for every document in the section.
    has_multiple_pages : bool
        Whether more documents exist than fit on one page.
    """

    start: int
    end: int
    page_count: int
    has_multiple_pages: bool

    def select(self, items: list[_T]) -> list[_T]:
        """Return the part of ``items`` that falls inside this window."""
        return items[self.start : self.end]


def page_count(total_count: int, page_size: int) -> int:
    """Return how many pages ``total_count`` documents occupy."""
    _check_page_size(page_size)
    return math.ceil(total_count / page_size)


def page_window(total_count: int, page_number: int, page_size: int) -> PageWindow:
    """Compute the window for ``page_number``.

    Parameters
    ----------
    total_count : int
        Number of entries in the section.
    page_number : int
        Requested 1-based page; values below 1 select the first page.
    page_size : int
        Entries per page; must be positive.

    Returns
    -------
    PageWindow
        Start and end indices plus page count metadata.

    Raises
    ------
    PageOutOfRange
        If the window would start at or beyond ``total_count``. With no entries
        at all, every page is out of range.
    ValueError
        If ``page_size`` is not positive.
    """
    _check_page_size(page_size)
    start = max(page_size * (page_number - 1), 0)
    if start >= total_count:
        msg = f"No such page: {page_number} (only {total_count} entries)."
        raise PageOutOfRange(msg)
    end = min(start + page_size, total_count)
    return PageWindow(
        start=start,
        end=end,
        page_count=page_count(total_count, page_size),
        has_multiple_pages=total_count > page_size,
    )


def page_link(section: str, number: int) -> str:
    """Return the URL of listing page ``number`` of ``section``."""
    if number == 1:
        return f"/{section}"
    return f"/{section}/{number}"


def pagination_markup(section: str, page_number: int, total_pages: int) -> str:
    """Return the ``<ul class="pagination">`` block linking every page.

    The entry for ``page_number`` carries ``class="active"`` but keeps its
    link, so templates style it rather than drop it.
    """
    items = ['<ul class="pagination">']
    for number in range(1, total_pages + 1):
        href = escape(page_link(section, number), quote=True)
        css = ' class="active"' if number == page_number else ""
        items.append(f'<li{css}><a href="{href}">{number}</a></li>')
    items.append("</ul>")
    return " ".join(items)


def _check_page_size(page_size: int) -> None:
    if page_size < 1:
        msg = f"page_size must be positive, got {page_size}."
        raise ValueError(msg)


__all__ = [
    "PageWindow",
    "page_count",
    "page_link",
    "page_window",
    "pagination_markup",
]
