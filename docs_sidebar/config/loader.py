"""Load sidebar tables and their build configuration from disk."""

from __future__ import annotations

import collections.abc as cabc
import json
import logging
import typing as typ
from pathlib import Path

from .._constants import DEFAULT_CONTENT_ROOT, DEFAULT_EXPORT_PATH
from ..errors import MalformedConfigError
from ..table import SidebarTable, load
from ..vuepress import parse_sidebar_module
from .helpers import (
    _check_export_format,
    _check_path,
    _normalize_suffixes,
    _read_yaml,
)
from .models import SidebarConfig

YAML_SUFFIXES = frozenset({".yaml", ".yml"})
JSON_SUFFIXES = frozenset({".json"})
MODULE_SUFFIXES = frozenset({".js", ".cjs", ".mjs"})

logger = logging.getLogger(__name__)


def _reject_duplicate_keys(pairs: list[tuple[str, typ.Any]]) -> dict[str, typ.Any]:
    """Build a JSON object, refusing keys that appear twice."""
    result: dict[str, typ.Any] = {}
    for key, value in pairs:
        if key in result:
            msg = f"Duplicate section '{key}' in JSON sidebar."
            raise MalformedConfigError(msg)
        result[key] = value
    return result


def load_sidebar_file(path: Path) -> SidebarTable:
    """Load a bare sidebar table from a YAML, JSON, or VuePress module file.

    Parameters
    ----------
    path : Path
        File holding only the table: a mapping of section paths to page slug
        lists. The format is chosen from the file suffix.

    Returns
    -------
    SidebarTable
        The validated, immutable table.

    Raises
    ------
    FileNotFoundError
        If ``path`` does not exist.
    MalformedConfigError
        If the suffix is unsupported, the file cannot be parsed, or its
        content is not a mapping of strings to string lists.

    Examples
    --------
    >>> from pathlib import Path
    >>> table = load_sidebar_file(Path("src/.vuepress/sidebar.js"))  # doctest: +SKIP
    >>> next(iter(table))  # doctest: +SKIP
    '/base/engine/'
    """
    if not path.exists():
        msg = f"Sidebar file '{path}' not found."
        raise FileNotFoundError(msg)

    suffix = path.suffix.lower()
    if suffix in YAML_SUFFIXES:
        raw = _read_yaml(path)
    elif suffix in JSON_SUFFIXES:
        try:
            raw = json.loads(
                path.read_text(encoding="utf-8"),
                object_pairs_hook=_reject_duplicate_keys,
            )
        except json.JSONDecodeError as exc:
            msg = f"Could not parse JSON in '{path}': {exc}"
            raise MalformedConfigError(msg) from exc
    elif suffix in MODULE_SUFFIXES:
        raw = parse_sidebar_module(path.read_text(encoding="utf-8"))
    else:
        msg = f"Unsupported sidebar file type '{path.suffix}' for '{path}'."
        raise MalformedConfigError(msg)

    logger.debug("loading sidebar table from %s", path)
    return load(typ.cast("cabc.Mapping[typ.Any, typ.Any]", raw))


def load_sidebar_config(path: Path) -> SidebarConfig:
    """Load the ``sidebar.yaml`` configuration describing the docs sidebar.

    The file has two top-level sections. ``defaults`` holds build settings;
    ``sidebar`` holds either the table itself or a path to a file containing
    it (see :func:`load_sidebar_file`)::

        defaults:
          content_root: src
          page_suffixes: [.md]
          export_path: src/.vuepress/sidebar.js
          export_format: js
        sidebar:
          /base/engine/:
            - 1.index

    Relative paths are kept relative to the working directory, matching how
    the ``sidebar`` CLI is run from the repository root.

    Parameters
    ----------
    path : Path
        Filesystem path to the YAML configuration file.

    Returns
    -------
    SidebarConfig
        Parsed configuration with defaults applied.

    Raises
    ------
    FileNotFoundError
        If the configuration file (or a referenced sidebar file) is missing.
    MalformedConfigError
        If the document or any of its sections has the wrong shape, or no
        sidebar is defined.
    """
    if not path.exists():
        msg = f"Configuration file '{path}' not found."
        raise FileNotFoundError(msg)

    loaded = _read_yaml(path) or {}
    if not isinstance(loaded, dict):
        msg = "Top-level YAML structure must be a mapping."
        raise MalformedConfigError(msg)
    raw: dict[str, typ.Any] = dict(loaded)

    defaults = raw.get("defaults") or {}
    if not isinstance(defaults, dict):
        msg = "'defaults' must be a mapping."
        raise MalformedConfigError(msg)

    sidebar_raw = raw.get("sidebar")
    match sidebar_raw:
        case None:
            msg = f"No sidebar defined in configuration '{path}'."
            raise MalformedConfigError(msg)
        case str() as reference:
            table = load_sidebar_file(Path(reference))
        case _:
            table = load(sidebar_raw)

    return SidebarConfig(
        table=table,
        content_root=_check_path(defaults, "content_root", DEFAULT_CONTENT_ROOT),
        page_suffixes=_normalize_suffixes(defaults.get("page_suffixes")),
        export_path=_check_path(defaults, "export_path", DEFAULT_EXPORT_PATH),
        export_format=_check_export_format(defaults.get("export_format", "js")),
        source=path,
    )


__all__ = ["load_sidebar_config", "load_sidebar_file"]
