"""Load and validate the mdsite configuration file.

This subpackage parses ``config.json`` (or any YAML 1.2 document with the same
keys), applies defaults for optional settings, resolves folder paths, and
produces the frozen :class:`SiteConfig` that every other component receives
explicitly. The primary entry point is :func:`load_site_config`.

Examples
--------
>>> from pathlib import Path
>>> from mdsite.config import load_site_config
>>> site = load_site_config(Path("config.json"))  # doctest: +SKIP
>>> site.read_more_text  # doctest: +SKIP
'Read more'
"""

from .helpers import split_bind_address
from .loader import build_site_config, load_site_config
from .models import ConfigurationError, SiteConfig

__all__ = [
    "ConfigurationError",
    "SiteConfig",
    "build_site_config",
    "load_site_config",
    "split_bind_address",
]
