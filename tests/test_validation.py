"""Unit tests for probing sidebar entries against a docs source tree."""

from __future__ import annotations

import typing as typ

import pytest

from docs_sidebar.errors import BrokenReferenceError
from docs_sidebar.table import load
from docs_sidebar.validation import ReferenceKind, validate

if typ.TYPE_CHECKING:
    import collections.abc as cabc
    from pathlib import Path

    from docs_sidebar.table import SidebarTable

    BuildTree = cabc.Callable[..., Path]


def test_complete_tree_is_valid(
    sample_table: SidebarTable, content_tree: BuildTree
) -> None:
    """Every section and page present yields no errors."""
    root = content_tree(sample_table)
    result = validate(sample_table, root)

    assert result.ok, f"expected no errors, got {result.errors!r}"
    assert bool(result) is True
    assert result.warnings == ()


def test_missing_page_names_site_path(content_tree: BuildTree) -> None:
    """A missing '2.page' under '/a/' is reported as '/a/2.page'."""
    table = load({"/a/": ["1.index", "2.page"]})
    root = content_tree({"/a/": ["1.index"]})

    result = validate(table, root)

    assert len(result.errors) == 1, f"expected one error, got {result.errors!r}"
    error = result.errors[0]
    assert error.kind is ReferenceKind.MISSING_PAGE
    assert error.target == "/a/2.page", f"unexpected target {error.target!r}"
    assert error.expected == "a/2.page.md"


def test_missing_section_reported_once(content_tree: BuildTree) -> None:
    """A missing section directory is one error; its pages are not probed."""
    table = load({"/a/": ["1.index"], "/b/": ["1.index", "2.page"]})
    root = content_tree({"/a/": ["1.index"]})

    result = validate(table, root)

    assert [(ref.kind, ref.target) for ref in result.errors] == [
        (ReferenceKind.MISSING_SECTION, "/b/")
    ], f"unexpected errors {result.errors!r}"
    assert result.errors[0].slug is None


def test_errors_follow_table_order(content_tree: BuildTree) -> None:
    """Errors are listed in sidebar order, not filesystem order."""
    table = load({"/z/": ["9.last", "1.first"], "/a/": ["1.index"]})
    root = content_tree({"/z/": [], "/a/": []})

    targets = [ref.target for ref in validate(table, root).errors]

    assert targets == ["/z/9.last", "/z/1.first", "/a/1.index"]


def test_readme_and_trailing_slash_slugs(content_tree: BuildTree) -> None:
    """Empty slugs and folder slugs resolve to README.md or index.md."""
    root = content_tree({"/guide/": ["README"], "/guide/deep/": ["index"]})
    table = load({"/guide/": ["", "deep/", "missing/"]})

    result = validate(table, root)

    assert [ref.target for ref in result.errors] == ["/guide/missing/"]
    assert result.errors[0].expected == "guide/missing/README.md"


def test_root_section_readme(content_tree: BuildTree) -> None:
    """The '/' section maps to the content root itself."""
    root = content_tree({"/": ["README"]})
    assert validate(load({"/": [""]}), root).ok


def test_absolute_slug_resolves_from_root(content_tree: BuildTree) -> None:
    """A slug starting with '/' is looked up from the content root."""
    root = content_tree({"/a/": ["1.index"], "/shared/": ["faq"]})
    table = load({"/a/": ["1.index", "/shared/faq", "/shared/gone"]})

    result = validate(table, root)

    assert [ref.target for ref in result.errors] == ["/shared/gone"]


def test_explicit_suffix_anchor_and_external_links(content_tree: BuildTree) -> None:
    """Suffixed slugs and anchors hit the same file; URLs are skipped."""
    root = content_tree({"/a/": ["1.index"]})
    table = load(
        {
            "/a/": [
                "1.index.md",
                "1.index.html",
                "1.index#setup",
                "https://example.invalid/docs",
            ]
        }
    )

    assert validate(table, root).ok


def test_custom_suffixes_are_tried_in_order(content_tree: BuildTree) -> None:
    """Pages may be backed by any configured suffix."""
    root = content_tree({"/a/": ["1.index"]}, suffix=".mdx")
    table = load({"/a/": ["1.index", "2.page"]})

    result = validate(table, root, suffixes=(".md", ".mdx"))

    assert [ref.target for ref in result.errors] == ["/a/2.page"]
    assert result.errors[0].expected == "a/2.page.md"


def test_empty_suffix_list_is_rejected(
    sample_table: SidebarTable, tmp_path: Path
) -> None:
    """Validation needs at least one suffix to probe."""
    with pytest.raises(ValueError, match="At least one page suffix"):
        validate(sample_table, tmp_path, suffixes=())


def test_duplicate_pages_are_warnings(content_tree: BuildTree) -> None:
    """Repeated slugs resolve normally but surface as warnings."""
    root = content_tree({"/a/": ["1.index"]})
    result = validate(load({"/a/": ["1.index", "1.index"]}), root)

    assert result.ok
    assert result.warnings == ("duplicate page '1.index' in section '/a/'",)


def test_raise_for_errors_carries_references(content_tree: BuildTree) -> None:
    """Fail-fast callers get every broken reference in one exception."""
    root = content_tree({"/a/": []})
    result = validate(load({"/a/": ["1.index"], "/b/": ["1.index"]}), root)

    with pytest.raises(BrokenReferenceError) as excinfo:
        result.raise_for_errors()

    assert [ref.target for ref in excinfo.value.references] == ["/a/1.index", "/b/"]
    message = str(excinfo.value)
    assert "2 broken sidebar reference(s)" in message
    assert "missing page '/a/1.index' (expected a/1.index.md)" in message
    assert "missing section '/b/' (expected b)" in message


def test_raise_for_errors_is_silent_when_valid(
    sample_table: SidebarTable, content_tree: BuildTree
) -> None:
    """A clean result does not raise."""
    validate(sample_table, content_tree(sample_table)).raise_for_errors()


def test_validate_does_not_touch_tree(content_tree: BuildTree) -> None:
    """Probing never creates the files it looks for."""
    root = content_tree({"/a/": []})
    validate(load({"/a/": ["1.index"], "/b/": ["1.index"]}), root)

    assert sorted(path.name for path in root.rglob("*")) == ["a"]
