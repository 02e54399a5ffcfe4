"""Common literal values used across docs_sidebar.

These constants keep default paths and content-file conventions centralized so
the loader, validator, CLI, and tests can import the same values without
drifting. Intended for internal use within the docs_sidebar package.

Examples
--------
>>> from docs_sidebar import _constants
>>> _constants.DEFAULT_PAGE_SUFFIXES
('.md',)
>>> _constants.EXPORT_FORMATS["js"]
'.js'
"""

from pathlib import Path

DEFAULT_CONFIG = Path("config/sidebar.yaml")
DEFAULT_CONTENT_ROOT = Path("src")
DEFAULT_EXPORT_PATH = Path("src/.vuepress/sidebar.js")
DEFAULT_PAGE_SUFFIXES = (".md",)
EXTERNAL_PREFIXES = ("http://", "https://")
INDEX_STEMS = ("README", "index")
EXPORT_FORMATS: dict[str, str] = {
    "js": ".js",
    "json": ".json",
    "yaml": ".yaml",
}
