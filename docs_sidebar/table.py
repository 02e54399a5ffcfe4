"""Immutable sidebar table mapping section paths to ordered page slugs.

The table is the single artifact the site generator needs to lay out its
navigation sidebar. It is built once with :func:`load` from a plain mapping
(an inline literal or the decoded contents of a config file) and then passed
around by reference; nothing mutates it afterwards.

Examples
--------
>>> from docs_sidebar.table import load
>>> table = load({"/guide/": ["1.index", "2.install"]})
>>> table["/guide/"]
('1.index', '2.install')
>>> list(table)
['/guide/']
"""

from __future__ import annotations

import collections.abc as cabc
import logging
import typing as typ

from .errors import MalformedConfigError

SEPARATOR = "/"

logger = logging.getLogger(__name__)


class SidebarTable(cabc.Mapping[str, tuple[str, ...]]):
    """Read-only, ordered mapping of section paths to page slug sequences.

    Iteration follows insertion order, which is the order sections appear in
    the rendered sidebar. Equality is structural and order-sensitive: two
    tables are equal only when they list the same sections in the same order
    with identical slug sequences.
    """

    __slots__ = ("_sections",)

    def __init__(
        self, sections: cabc.Iterable[tuple[str, cabc.Iterable[str]]] = ()
    ) -> None:
        ordered: dict[str, tuple[str, ...]] = {}
        for path, pages in sections:
            if path in ordered:
                msg = f"Duplicate section '{path}' in sidebar table."
                raise MalformedConfigError(msg)
            ordered[path] = tuple(pages)
        self._sections = ordered

    def __getitem__(self, path: str) -> tuple[str, ...]:
        return self._sections[path]

    def __iter__(self) -> cabc.Iterator[str]:
        return iter(self._sections)

    def __len__(self) -> int:
        return len(self._sections)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, SidebarTable):
            return list(self._sections.items()) == list(other._sections.items())
        return NotImplemented

    def __hash__(self) -> int:
        return hash(tuple(self._sections.items()))

    def __repr__(self) -> str:
        return f"SidebarTable({self._sections!r})"

    @property
    def page_count(self) -> int:
        """Return the total number of page entries across all sections."""
        return sum(len(pages) for pages in self._sections.values())

    def to_dict(self) -> dict[str, list[str]]:
        """Return a plain ``dict`` of lists suitable for serialisation."""
        return {path: list(pages) for path, pages in self._sections.items()}

    def duplicate_pages(self) -> dict[str, list[str]]:
        """Return slugs listed more than once, keyed by their section path."""
        duplicates: dict[str, list[str]] = {}
        for path, pages in self._sections.items():
            seen: set[str] = set()
            repeated: list[str] = []
            for slug in pages:
                if slug in seen and slug not in repeated:
                    repeated.append(slug)
                seen.add(slug)
            if repeated:
                duplicates[path] = repeated
        return duplicates


def load(source: cabc.Mapping[typ.Any, typ.Any]) -> SidebarTable:
    """Build a :class:`SidebarTable` from a mapping literal.

    Parameters
    ----------
    source : Mapping
        Mapping of section path strings to ordered lists of page slug strings,
        supplied inline or decoded from a YAML/JSON/VuePress file.

    Returns
    -------
    SidebarTable
        The table with its structure unchanged; lists become tuples.

    Raises
    ------
    MalformedConfigError
        If ``source`` is not a mapping, a key is not a well-formed section
        path, or a value is not a list of strings.

    Examples
    --------
    >>> load({"/a/": ["1.index", "2.page"]})["/a/"]
    ('1.index', '2.page')
    >>> load({"/a/": "1.index"})
    Traceback (most recent call last):
    ...
    docs_sidebar.errors.MalformedConfigError: Section '/a/' must map to a list of page slugs, got str.
    """
    if not isinstance(source, cabc.Mapping):
        msg = f"Sidebar source must be a mapping, got {type(source).__name__}."
        raise MalformedConfigError(msg)

    sections: list[tuple[str, tuple[str, ...]]] = []
    for key, value in source.items():
        path = _check_section_path(key)
        sections.append((path, _check_pages(path, value)))
    table = SidebarTable(sections)
    logger.debug(
        "loaded sidebar table with %d sections and %d pages",
        len(table),
        table.page_count,
    )
    return table


def _check_section_path(key: object) -> str:
    """Return ``key`` when it is a well-formed section path."""
    if not isinstance(key, str):
        msg = f"Section path {key!r} must be a string, got {type(key).__name__}."
        raise MalformedConfigError(msg)
    if not key.startswith(SEPARATOR) or not key.endswith(SEPARATOR):
        msg = f"Section path '{key}' must begin and end with '{SEPARATOR}'."
        raise MalformedConfigError(msg)
    if ".." in key.split(SEPARATOR):
        msg = f"Section path '{key}' must not contain '..' segments."
        raise MalformedConfigError(msg)
    return key


def _check_pages(path: str, value: object) -> tuple[str, ...]:
    """Return ``value`` as a tuple when it is a list of page slug strings."""
    # str is itself a Sequence; a lone slug is not a page list.
    if not isinstance(value, cabc.Sequence) or isinstance(value, str | bytes):
        msg = (
            f"Section '{path}' must map to a list of page slugs, "
            f"got {type(value).__name__}."
        )
        raise MalformedConfigError(msg)
    pages: list[str] = []
    for index, slug in enumerate(value):
        if not isinstance(slug, str):
            msg = (
                f"Page {index} of section '{path}' must be a string, "
                f"got {type(slug).__name__}."
            )
            raise MalformedConfigError(msg)
        pages.append(slug)
    return tuple(pages)


__all__ = ["SEPARATOR", "SidebarTable", "load"]
