"""Common literal values used across mdsite.

These constants keep filenames, extensions, and defaults centralized so the
loader, the content engine, and tests can import the same values without
drifting. Intended for internal use within the mdsite package.

Examples
--------
>>> from mdsite import _constants
>>> _constants.DOCUMENT_SUFFIX
'.md'
>>> _constants.TEMPLATE_NAME.endswith(".html")
True
"""

import re
from pathlib import Path

DOCUMENT_SUFFIX = ".md"
TEMPLATE_NAME = "template.html"
DEFAULT_CONFIG_PATH = Path("config.json")
DEFAULT_READ_MORE_TEXT = "Read more"
DEFAULT_ARTICLES_PER_PAGE = 10
DEFAULT_SERVER_IP = "127.0.0.1:9999"
BUNDLED_TEMPLATES = Path(__file__).parent / "templates"
DOCUMENT_SLUG_PATTERN = re.compile(r"^[A-Za-z][A-Za-z0-9._-]*$")
