"""Load the site configuration file into an immutable SiteConfig."""

from __future__ import annotations

import typing as typ
from pathlib import Path

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from mdsite._constants import (
    BUNDLED_TEMPLATES,
    DEFAULT_ARTICLES_PER_PAGE,
    DEFAULT_READ_MORE_TEXT,
    DEFAULT_SERVER_IP,
)
from mdsite.errors import ConfigurationError

from .helpers import _optional_str, _parse_page_size, _resolve_folder
from .models import SiteConfig


def load_site_config(path: Path) -> SiteConfig:
    """Load the JSON or YAML file describing where content and templates live.

    Parameters
    ----------
    path : Path
        Filesystem path to the configuration file (for example,
        ``config.json``). JSON is accepted because it is valid YAML 1.2.

    Returns
    -------
    SiteConfig
        Frozen settings with folder paths resolved relative to the directory
        holding ``path`` and defaults applied for optional keys.

    Raises
    ------
    ConfigurationError
        If the file is missing or unreadable, cannot be parsed, is not a
        mapping, lacks ``ContentFolder``, or carries an invalid
        ``ArticlesPerPage``.

    Examples
    --------
    >>> from pathlib import Path
    >>> from mdsite.config import load_site_config
    >>> config = load_site_config(Path("config.json"))  # doctest: +SKIP
    >>> config.articles_per_page  # doctest: +SKIP
    10
    """
    if not path.is_file():
        msg = f"Configuration file '{path}' not found."
        raise ConfigurationError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    try:
        with path.open("r", encoding="utf-8") as handle:
            loaded = loader.load(handle)
    except OSError as exc:
        msg = f"Configuration file '{path}' could not be read: {exc}"
        raise ConfigurationError(msg) from exc
    except YAMLError as exc:
        msg = f"Configuration file '{path}' is malformed: {exc}"
        raise ConfigurationError(msg) from exc
    if not isinstance(loaded, dict):
        msg = f"Configuration file '{path}' must contain a mapping."
        raise ConfigurationError(msg)
    return build_site_config(loaded, base_dir=path.resolve().parent, source=path)


def build_site_config(
    raw: typ.Mapping[str, typ.Any],
    *,
    base_dir: Path,
    source: Path | None = None,
) -> SiteConfig:
    """Build a SiteConfig from an already parsed mapping."""
    content_folder = _resolve_folder(raw.get("ContentFolder"), base_dir)
    if content_folder is None:
        msg = "Configuration is missing 'ContentFolder'."
        raise ConfigurationError(msg)
    template_folder = (
        _resolve_folder(raw.get("TemplateFolder"), base_dir) or BUNDLED_TEMPLATES
    )
    read_more_text = _optional_str(raw.get("ReadMoreText")) or DEFAULT_READ_MORE_TEXT
    articles_per_page = _parse_page_size(
        raw.get("ArticlesPerPage", DEFAULT_ARTICLES_PER_PAGE)
    )
    server_ip = _optional_str(raw.get("ServerIp")) or DEFAULT_SERVER_IP

    return SiteConfig(
        content_folder=content_folder,
        template_folder=template_folder,
        read_more_text=read_more_text,
        articles_per_page=articles_per_page,
        server_ip=server_ip,
        source=source,
    )


__all__ = ["build_site_config", "load_site_config"]
