r"""Derive the navigation menu from the content root's section directories.

Each visible directory directly under the content root becomes one
:class:`MenuItem`. Directory names double as URL segments, while a leading
``<digits>-`` prefix only forces ordering and never shows up in the title.

Example
-------
>>> derive_title("3-photo-gallery")
'Photo Gallery'
"""

from __future__ import annotations

import dataclasses as dc
import re
import typing as typ

from mdsite.errors import ContentRootUnreadable, NoSectionsConfigured

if typ.TYPE_CHECKING:
    from pathlib import Path

ORDER_PREFIX_PATTERN = re.compile(r"^[0-9]+-")
WORD_START_PATTERN = re.compile(r"(^|\s)(\S)")


@dc.dataclass(slots=True)
class MenuItem:
    """One navigable section.

    Attributes
    ----------
    title : str
        Human-readable label derived from the directory name.
    link : str
        URL path of the section; ``/`` for the first item in menu order.
    section : str
        Raw directory name, used as identifier, URL segment, and sort key.
    """

    title: str
    link: str
    section: str


def derive_title(directory_name: str) -> str:
    """Return the menu label for ``directory_name``.

    A single leading ``<digits>-`` run is dropped, remaining dashes become
    spaces, and the first letter of every word is upper-cased. Letters after
    the first are left untouched.
    """
    stripped = ORDER_PREFIX_PATTERN.sub("", directory_name, count=1)
    spaced = stripped.replace("-", " ")
    return WORD_START_PATTERN.sub(
        lambda match: match.group(1) + match.group(2).upper(), spaced
    )


def build_menu(content_root: Path) -> list[MenuItem]:
    """List the section directories under ``content_root`` as menu items.

    Parameters
    ----------
    content_root : Path
        Directory whose immediate subdirectories are the site's sections.

    Returns
    -------
    list[MenuItem]
        Items sorted by ``section`` in plain lexicographic order, so
        ``10-news`` sorts before ``2-about``. The first item links to ``/``.
        Empty when the root holds no visible directories.

    Raises
    ------
    ContentRootUnreadable
        If ``content_root`` cannot be opened or listed.
    """
    try:
        entries = list(content_root.iterdir())
    except OSError as exc:
        msg = f"Content folder '{content_root}' could not be listed: {exc}"
        raise ContentRootUnreadable(msg) from exc

    menu = [
        MenuItem(
            title=derive_title(entry.name),
            link=f"/{entry.name}",
            section=entry.name,
        )
        for entry in entries
        if entry.is_dir() and not entry.name.startswith(".")
    ]
    menu.sort(key=lambda item: item.section)
    if menu:
        menu[0].link = "/"
    return menu


def home_section(menu: typ.Sequence[MenuItem]) -> str:
    """Return the section served at ``/``.

    Raises
    ------
    NoSectionsConfigured
        If ``menu`` is empty.
    """
    if not menu:
        msg = "The content folder holds no section directories."
        raise NoSectionsConfigured(msg)
    return menu[0].section


def current_menu_item(
    menu: typ.Sequence[MenuItem], section: str
) -> MenuItem | None:
    """Return the item whose ``section`` is ``section``, or None when absent."""
    return next((item for item in menu if item.section == section), None)


__all__ = [
    "MenuItem",
    "build_menu",
    "current_menu_item",
    "derive_title",
    "home_section",
]
