"""Check sidebar entries against the documentation source tree.

Validation is optional tooling run before publishing: it probes the content
root for every section directory and page file named in a
:class:`~docs_sidebar.table.SidebarTable` and reports what is missing. Nothing
is written to disk.

Page slugs resolve the way VuePress resolves sidebar links:

- ``"1.index"`` probes ``1.index.md`` (one candidate per configured suffix);
- ``"guide.md"`` already carries a suffix and is probed as is;
- ``""`` or ``"sub/"`` probe ``README.md`` then ``index.md`` in that folder;
- ``"/other/page"`` is resolved from the content root, not the section;
- ``http://`` and ``https://`` links are external and never probed.

Examples
--------
>>> from pathlib import Path
>>> from docs_sidebar.table import load
>>> from docs_sidebar.validation import validate
>>> table = load({"/a/": ["1.index", "2.page"]})
>>> result = validate(table, Path("src"))  # doctest: +SKIP
>>> [ref.target for ref in result.errors]  # doctest: +SKIP
['/a/2.page']
"""

from __future__ import annotations

import collections.abc as cabc
import dataclasses as dc
import enum
import logging
import posixpath
import typing as typ
from pathlib import Path

from ._constants import DEFAULT_PAGE_SUFFIXES, EXTERNAL_PREFIXES, INDEX_STEMS
from .errors import BrokenReferenceError
from .table import SEPARATOR

if typ.TYPE_CHECKING:
    from .table import SidebarTable

logger = logging.getLogger(__name__)


class ReferenceKind(enum.StrEnum):
    """Kinds of unresolved sidebar entries."""

    MISSING_SECTION = "missing_section"
    MISSING_PAGE = "missing_page"


@dc.dataclass(frozen=True, slots=True)
class BrokenReference:
    """A section or page named in the sidebar that has no backing file.

    Attributes
    ----------
    kind : ReferenceKind
        Whether the section directory or a page file is missing.
    section : str
        Section path the entry belongs to, e.g. ``"/a/"``.
    slug : str | None
        Page slug for ``missing_page`` entries; ``None`` for sections.
    expected : str
        POSIX path, relative to the content root, of the first location
        probed for the entry.
    """

    kind: ReferenceKind
    section: str
    slug: str | None
    expected: str

    @property
    def target(self) -> str:
        """Return the site path of the entry, e.g. ``"/a/2.page"``."""
        if self.slug is None:
            return self.section
        if self.slug.startswith(SEPARATOR):
            return self.slug
        return f"{self.section}{self.slug}"

    def describe(self) -> str:
        """Return a one-line human readable summary."""
        label = "section" if self.kind is ReferenceKind.MISSING_SECTION else "page"
        return f"missing {label} '{self.target}' (expected {self.expected})"


@dc.dataclass(frozen=True, slots=True)
class ValidationResult:
    """Outcome of probing a sidebar table against a content root."""

    errors: tuple[BrokenReference, ...] = ()
    warnings: tuple[str, ...] = ()

    @property
    def ok(self) -> bool:
        """Return ``True`` when every entry resolved."""
        return not self.errors

    def __bool__(self) -> bool:
        return self.ok

    def raise_for_errors(self) -> None:
        """Raise :class:`BrokenReferenceError` if any entry failed to resolve."""
        if self.errors:
            raise BrokenReferenceError(self.errors)


def validate(
    table: SidebarTable,
    content_root: Path,
    *,
    suffixes: cabc.Sequence[str] = DEFAULT_PAGE_SUFFIXES,
) -> ValidationResult:
    """Report sections and pages that do not exist under ``content_root``.

    Parameters
    ----------
    table : SidebarTable
        Loaded sidebar table.
    content_root : Path
        Root of the documentation source tree that section paths are
        relative to (the VuePress ``src`` directory).
    suffixes : Sequence[str], optional
        Content file suffixes tried for each slug, in order. Defaults to
        ``(".md",)``.

    Returns
    -------
    ValidationResult
        Broken references in table order, plus warnings for slugs listed more
        than once within a section. A missing section yields a single error
        and its pages are not probed.
    """
    if not suffixes:
        msg = "At least one page suffix is required for validation."
        raise ValueError(msg)

    errors: list[BrokenReference] = []
    for section, pages in table.items():
        section_rel = section.strip(SEPARATOR)
        section_dir = content_root / section_rel if section_rel else content_root
        if not section_dir.is_dir():
            logger.debug("section directory %s not found", section_dir)
            errors.append(
                BrokenReference(
                    kind=ReferenceKind.MISSING_SECTION,
                    section=section,
                    slug=None,
                    expected=section_rel or ".",
                )
            )
            continue
        for slug in pages:
            if slug.startswith(EXTERNAL_PREFIXES):
                continue
            candidates = _page_candidates(section, slug, suffixes)
            if any((content_root / candidate).is_file() for candidate in candidates):
                continue
            logger.debug("page %r in %s not found", slug, section)
            errors.append(
                BrokenReference(
                    kind=ReferenceKind.MISSING_PAGE,
                    section=section,
                    slug=slug,
                    expected=candidates[0],
                )
            )

    warnings = tuple(
        f"duplicate page '{slug}' in section '{section}'"
        for section, slugs in table.duplicate_pages().items()
        for slug in slugs
    )
    return ValidationResult(errors=tuple(errors), warnings=warnings)


def _page_candidates(
    section: str, slug: str, suffixes: cabc.Sequence[str]
) -> list[str]:
    """Return content-root-relative POSIX paths that may back ``slug``."""
    base = slug if slug.startswith(SEPARATOR) else f"{section}{slug}"
    # Anchors select a heading inside the page, not a separate file.
    base = base.split("#", 1)[0]
    if not base or base.endswith(SEPARATOR):
        folder = base.strip(SEPARATOR)
        return [
            posixpath.join(folder, f"{stem}{suffix}") if folder else f"{stem}{suffix}"
            for stem in INDEX_STEMS
            for suffix in suffixes
        ]
    relative = base.lstrip(SEPARATOR)
    if relative.endswith(tuple(suffixes)):
        return [relative]
    if relative.endswith(".html"):
        relative = relative.removesuffix(".html")
    return [f"{relative}{suffix}" for suffix in suffixes]


__all__ = ["BrokenReference", "ReferenceKind", "ValidationResult", "validate"]
