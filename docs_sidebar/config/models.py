"""Typed dataclasses describing sidebar build configuration."""

from __future__ import annotations

import dataclasses as dc
from pathlib import Path

from .._constants import (
    DEFAULT_CONTENT_ROOT,
    DEFAULT_EXPORT_PATH,
    DEFAULT_PAGE_SUFFIXES,
)
from ..table import SidebarTable


@dc.dataclass(frozen=True, slots=True)
class SidebarConfig:
    """A fully resolved ``sidebar.yaml`` alongside its build defaults."""

    table: SidebarTable
    content_root: Path = DEFAULT_CONTENT_ROOT
    page_suffixes: tuple[str, ...] = DEFAULT_PAGE_SUFFIXES
    export_path: Path = DEFAULT_EXPORT_PATH
    export_format: str = "js"
    source: Path | None = None


__all__ = ["SidebarConfig"]
