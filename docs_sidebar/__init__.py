"""Sidebar navigation table for the documentation site.

This package loads the table that maps documentation section paths to ordered
page slugs, checks it against the docs source tree, and exports it for the
VuePress build. The ``sidebar`` console script wraps the same calls.

Exports
-------
- ``SidebarTable``: immutable, ordered section-to-pages mapping.
- ``load``: build a table from a mapping literal.
- ``validate``: probe the docs tree for every section and page.
- ``app`` / ``main``: Cyclopts CLI entry points.

Examples
--------
>>> from docs_sidebar import load
>>> table = load({"/a/": ["1.index", "2.page"]})
>>> table["/a/"]
('1.index', '2.page')
"""

from __future__ import annotations

from .cli import app, main
from .errors import BrokenReferenceError, MalformedConfigError, SidebarError
from .table import SidebarTable, load
from .validation import BrokenReference, ValidationResult, validate

__all__ = [
    "BrokenReference",
    "BrokenReferenceError",
    "MalformedConfigError",
    "SidebarError",
    "SidebarTable",
    "ValidationResult",
    "app",
    "load",
    "main",
    "validate",
]
