"""Typed dataclasses describing mdsite configuration."""

from __future__ import annotations

import dataclasses as dc
from pathlib import Path

from mdsite.errors import ConfigurationError


@dc.dataclass(frozen=True, slots=True)
class SiteConfig:
    """Process-wide, read-only settings loaded once at startup.

    Attributes
    ----------
    content_folder : Path
        Root directory whose subdirectories become menu sections.
    template_folder : Path
        Directory holding ``template.html``.
    read_more_text : str
        Label used for excerpt continuation links.
    articles_per_page : int
        Page size for section listings; always positive.
    server_ip : str
        ``host:port`` bind address consumed by the HTTP layer.
    source : Path or None
        Path of the file the settings were read from, if any.
    """

    content_folder: Path
    template_folder: Path
    read_more_text: str
    articles_per_page: int
    server_ip: str
    source: Path | None = None

    def __post_init__(self) -> None:
        """Reject page sizes that would make pagination meaningless."""
        if self.articles_per_page < 1:
            msg = (
                "ArticlesPerPage must be a positive integer, "
                f"got {self.articles_per_page!r}."
            )
            raise ConfigurationError(msg)


__all__ = ["ConfigurationError", "SiteConfig"]
