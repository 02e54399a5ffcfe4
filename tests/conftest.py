"""Shared fixtures for the docs_sidebar test suite."""

from __future__ import annotations

import collections.abc as cabc
import typing as typ
from pathlib import Path

import pytest

from docs_sidebar.table import SidebarTable, load


BuildTree = cabc.Callable[..., Path]


def build_content_tree(
    root: Path,
    sections: cabc.Mapping[str, cabc.Iterable[str]],
    *,
    suffix: str = ".md",
) -> Path:
    """Create a docs source tree holding one file per section page."""
    for section, pages in sections.items():
        section_dir = root / section.strip("/")
        section_dir.mkdir(parents=True, exist_ok=True)
        for slug in pages:
            (section_dir / f"{slug}{suffix}").write_text(
                f"# {slug}\n", encoding="utf-8"
            )
    return root


@pytest.fixture
def content_tree(tmp_path: Path) -> BuildTree:
    """Return a factory laying out a docs tree, by default under ``tmp_path / "src"``."""

    def _build(
        sections: cabc.Mapping[str, cabc.Iterable[str]],
        *,
        root: Path | None = None,
        **kwargs: typ.Any,
    ) -> Path:
        return build_content_tree(root or tmp_path / "src", sections, **kwargs)

    return _build


@pytest.fixture
def sample_table() -> SidebarTable:
    """Return a small two-section table used across tests."""
    return load(
        {
            "/guide/": ["1.index", "2.install", "3.usage"],
            "/reference/api/": ["1.index", "10.client", "2.server"],
        }
    )
