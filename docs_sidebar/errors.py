"""Exception types raised while loading and checking sidebar tables."""

from __future__ import annotations

import typing as typ

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from .validation import BrokenReference


class SidebarError(ValueError):
    """Base class for sidebar configuration failures."""


class MalformedConfigError(SidebarError):
    """Raised when a sidebar source does not have the expected shape."""


class BrokenReferenceError(SidebarError):
    """Raised when sidebar entries do not resolve to files in the docs tree."""

    def __init__(self, references: cabc.Sequence[BrokenReference]) -> None:
        self.references = tuple(references)
        lines = [f"{len(self.references)} broken sidebar reference(s):"]
        lines.extend(f"  - {ref.describe()}" for ref in self.references)
        super().__init__("\n".join(lines))


__all__ = ["BrokenReferenceError", "MalformedConfigError", "SidebarError"]
