"""Cyclopts CLI entrypoint for checking and exporting the docs sidebar.

The ``sidebar`` console script defined here loads ``config/sidebar.yaml``,
checks every section and page against the documentation source tree, and
writes the table out in the format the site generator imports (a VuePress
``sidebar.js`` module by default). Typical usage runs ``sidebar check`` in CI
before publishing, then ``sidebar export`` as part of the site build.

Examples
--------
Check the default configuration against ``src``:

>>> from docs_sidebar.cli import main
>>> main()  # doctest: +SKIP

Convert an existing VuePress sidebar into YAML:

>>> from docs_sidebar.cli import app
>>> app(
...     ["convert", "src/.vuepress/sidebar.js", "config/sidebar.yaml"]
... )  # doctest: +SKIP
"""

from __future__ import annotations

import logging
import sys
import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter

from ._constants import DEFAULT_CONFIG
from .config import load_sidebar_config, load_sidebar_file
from .config.helpers import _check_export_format
from .errors import SidebarError
from .serialize import write_table
from .validation import validate

app = App(name="sidebar", config=cyclopts.config.Env("INPUT_", command=False))  # type: ignore[unknown-argument]


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:  # pragma: no cover - fallback for different roots
            return str(path)
    return str(path)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _format_for(output: Path, export_format: str | None) -> str:
    """Return the explicit format or the one implied by ``output``'s suffix."""
    if export_format:
        return _check_export_format(export_format)
    suffix = output.suffix.lower()
    if suffix == ".yml":
        return "yaml"
    return _check_export_format(suffix.lstrip("."))


@app.command(help="Check that every sidebar section and page exists on disk.")
def check(
    *,
    config: typ.Annotated[
        Path, Parameter(help="Path to sidebar config", env_var="INPUT_CONFIG")
    ] = DEFAULT_CONFIG,
    content_root: typ.Annotated[
        Path | None,
        Parameter(
            help="Override the docs source folder", env_var="INPUT_CONTENT_ROOT"
        ),
    ] = None,
    verbose: bool = False,
) -> None:
    """Validate the configured sidebar against the documentation tree.

    Parameters
    ----------
    config : Path, optional
        Path to the ``sidebar.yaml`` configuration file (overridable via
        ``INPUT_CONFIG``).
    content_root : Path or None, optional
        Documentation source folder to probe instead of the configured
        ``content_root``.
    verbose : bool, optional
        Emit debug logging for every probe.

    Raises
    ------
    SystemExit
        With status ``1`` when any section or page is missing.
    """
    _configure_logging(verbose)
    sidebar_config = load_sidebar_config(config)
    root = content_root or sidebar_config.content_root
    result = validate(
        sidebar_config.table, root, suffixes=sidebar_config.page_suffixes
    )
    for warning in result.warnings:
        print(f"warning: {warning}", file=sys.stderr)
    if not result.ok:
        for reference in result.errors:
            print(f"error: {reference.describe()}", file=sys.stderr)
        raise SystemExit(1)
    table = sidebar_config.table
    print(
        f"ok: {len(table)} sections, {table.page_count} pages "
        f"under {_format_path(root)}"
    )


@app.command(help="Write the sidebar in the format the site generator imports.")
def export(
    *,
    config: typ.Annotated[
        Path, Parameter(help="Path to sidebar config", env_var="INPUT_CONFIG")
    ] = DEFAULT_CONFIG,
    output: typ.Annotated[
        Path | None,
        Parameter(help="Override the export path", env_var="INPUT_OUTPUT"),
    ] = None,
    export_format: typ.Annotated[
        str | None,
        Parameter(
            name="--format",
            help="Override the export format (js, json, yaml)",
            env_var="INPUT_FORMAT",
        ),
    ] = None,
    verbose: bool = False,
) -> None:
    """Render the configured sidebar table to disk.

    Parameters
    ----------
    config : Path, optional
        Path to the ``sidebar.yaml`` configuration file.
    output : Path or None, optional
        Destination file; defaults to the configured ``export_path``.
    export_format : str or None, optional
        One of ``js``, ``json`` or ``yaml``; defaults to the configured
        ``export_format``.
    verbose : bool, optional
        Emit debug logging.
    """
    _configure_logging(verbose)
    sidebar_config = load_sidebar_config(config)
    target = output or sidebar_config.export_path
    fmt = _check_export_format(export_format or sidebar_config.export_format)
    written = write_table(
        sidebar_config.table, target, fmt, source=_format_path(config)
    )
    print(f"wrote {_format_path(written)}")


@app.command(help="Convert a sidebar file between YAML, JSON, and sidebar.js.")
def convert(
    source: typ.Annotated[Path, Parameter(help="Sidebar file to read")],
    output: typ.Annotated[Path, Parameter(help="File to write")],
    *,
    export_format: typ.Annotated[
        str | None,
        Parameter(name="--format", help="Output format; inferred from suffix"),
    ] = None,
    verbose: bool = False,
) -> None:
    """Load a bare sidebar table from ``source`` and write it to ``output``."""
    _configure_logging(verbose)
    table = load_sidebar_file(source)
    fmt = _format_for(output, export_format)
    written = write_table(table, output, fmt, source=_format_path(source))
    print(f"wrote {_format_path(written)}")


def main() -> None:
    """Invoke the Cyclopts application that powers the `sidebar` console command.

    Configuration and file errors are printed as ``error: <message>`` and end
    the process with status ``1``.

    Examples
    --------
    >>> main()  # doctest: +SKIP
    """
    try:
        app()
    except (SidebarError, FileNotFoundError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
