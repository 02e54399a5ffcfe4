"""Load sidebar tables and the ``sidebar.yaml`` build configuration.

This subpackage reads the project's ``config/sidebar.yaml`` file, applies
build defaults (content root, page suffixes, export target), and produces a
:class:`SidebarConfig` that the validator and exporters consume. Bare tables
stored as YAML, JSON, or a VuePress ``sidebar.js`` module load through
:func:`load_sidebar_file`.

Examples
--------
>>> from pathlib import Path
>>> from docs_sidebar.config import load_sidebar_config
>>> config = load_sidebar_config(Path("config/sidebar.yaml"))  # doctest: +SKIP
>>> config.table["/senior/vue3/"]  # doctest: +SKIP
('1.index',)
"""

from .loader import load_sidebar_config, load_sidebar_file
from .models import SidebarConfig

__all__ = ["SidebarConfig", "load_sidebar_config", "load_sidebar_file"]
