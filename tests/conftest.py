"""Shared fixtures for building content trees and site configurations.

Content trees are written under pytest's ``tmp_path`` with explicit
modification times (via ``os.utime``) so listing order never depends on how
fast the filesystem writes files.
"""

from __future__ import annotations

import os
import typing as typ

import pytest

from mdsite._constants import BUNDLED_TEMPLATES
from mdsite.config import SiteConfig

if typ.TYPE_CHECKING:
    from pathlib import Path

BASE_MTIME = 1_700_000_000

DocWriter = typ.Callable[..., "Path"]
ConfigFactory = typ.Callable[..., SiteConfig]

BLOG_POSTS: dict[str, tuple[str, int]] = {
    "first-post": ("# First post\nFirst intro.\nFirst detail.\nFirst hidden.", 10),
    "second-post": ("# Second post\nSecond intro.\nSecond detail.\nSecond hidden.", 20),
    "third-post": ("# Third post\nThird intro.\nThird detail.\nThird hidden.", 30),
}
WELCOME_BODY = "# Welcome\n\nThis page is shown in full.\n\nIt has a second paragraph.\n"


@pytest.fixture
def write_doc() -> DocWriter:
    """Return a helper writing ``body`` to ``directory/name`` with a fixed mtime."""

    def _write(directory: Path, name: str, body: str, *, offset: int = 0) -> Path:
        directory.mkdir(parents=True, exist_ok=True)
        path = directory / name
        path.write_text(body, encoding="utf-8")
        stamp = BASE_MTIME + offset
        os.utime(path, (stamp, stamp))
        return path

    return _write


@pytest.fixture
def content_root(tmp_path: Path, write_doc: DocWriter) -> Path:
    """Build a small site: a single-page home, a three-post blog, and noise.

    Layout
    ------
    - ``1-home/welcome.md``: the only document in its section.
    - ``2-blog/{first,second,third}-post.md``: modified in that order.
    - ``3-photo-gallery/``: an empty section.
    - ``.git/`` and ``notes.txt`` at the root, which never reach the menu.
    """
    root = tmp_path / "content"
    write_doc(root / "1-home", "welcome.md", WELCOME_BODY)
    for slug, (body, offset) in BLOG_POSTS.items():
        write_doc(root / "2-blog", f"{slug}.md", body, offset=offset)
    (root / "3-photo-gallery").mkdir()
    (root / ".git").mkdir()
    write_doc(root, "notes.txt", "not a section")
    return root


@pytest.fixture
def make_config(content_root: Path) -> ConfigFactory:
    """Return a factory for SiteConfig values rooted at ``content_root``."""

    def _make(**overrides: typ.Any) -> SiteConfig:
        values: dict[str, typ.Any] = {
            "content_folder": content_root,
            "template_folder": BUNDLED_TEMPLATES,
            "read_more_text": "Read more",
            "articles_per_page": 2,
            "server_ip": "127.0.0.1:9999",
        }
        values.update(overrides)
        return SiteConfig(**values)

    return _make
