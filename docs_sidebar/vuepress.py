r"""Read and write VuePress ``sidebar.js`` modules.

VuePress sites keep their sidebar in ``src/.vuepress/sidebar.js`` as a
CommonJS module exporting an object literal::

    const sidebar = {
        '/base/engine/': [
            '1.index',
            '2.project',
        ],
    }
    module.exports = sidebar

:func:`parse_sidebar_module` extracts that literal so existing sites can be
migrated to ``sidebar.yaml``; :func:`render_sidebar_module` writes it back out
from a :class:`~docs_sidebar.table.SidebarTable` for the site build to import.
Only the subset shown above is understood: string keys, arrays of string
literals, trailing commas, and ``//`` or ``/* */`` comments.

Examples
--------
>>> from docs_sidebar.vuepress import parse_sidebar_module
>>> parse_sidebar_module("module.exports = {'/a/': ['1.index',],}")
{'/a/': ['1.index']}
"""

from __future__ import annotations

import re
import typing as typ
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape

from .errors import MalformedConfigError

if typ.TYPE_CHECKING:
    from .table import SidebarTable

TOKEN_PATTERN = re.compile(
    r"""
    (?P<space>\s+)
    | (?P<line_comment>//[^\n]*)
    | (?P<block_comment>/\*.*?\*/)
    | (?P<string>'(?:[^'\\\n]|\\.)*'|"(?:[^"\\\n]|\\.)*")
    | (?P<punct>[{}\[\]:,;=.()])
    | (?P<word>[A-Za-z_$][A-Za-z0-9_$]*)
    """,
    re.VERBOSE | re.DOTALL,
)
ESCAPE_PATTERN = re.compile(
    r"\\(u\{[0-9a-fA-F]+\}|u[0-9a-fA-F]{4}|x[0-9a-fA-F]{2}|.)", re.DOTALL
)
MAX_CODE_POINT = 0x10FFFF
SIMPLE_ESCAPES = {
    "n": "\n",
    "t": "\t",
    "r": "\r",
    "b": "\b",
    "f": "\f",
    "v": "\v",
    "0": "\0",
    "\n": "",
}
MODULE_TEMPLATE = "sidebar.js.jinja"

_Token = tuple[str, str, int]


def parse_sidebar_module(text: str) -> dict[str, list[str]]:
    """Return the sidebar mapping declared in a VuePress ``sidebar.js`` module.

    Parameters
    ----------
    text : str
        JavaScript source of the module.

    Returns
    -------
    dict[str, list[str]]
        Section paths mapped to page slugs, in source order. The result is a
        plain mapping; pass it to :func:`docs_sidebar.table.load` to validate
        its shape.

    Raises
    ------
    MalformedConfigError
        If the module contains no object literal or uses syntax beyond
        string keys and arrays of string literals.
    """
    tokens = _tokenize(text)
    start = next(
        (index for index, token in enumerate(tokens) if token[1] == "{"), None
    )
    if start is None:
        msg = "No sidebar object literal found in module."
        raise MalformedConfigError(msg)
    parser = _LiteralParser(tokens, start)
    return parser.parse_object()


def render_sidebar_module(
    table: SidebarTable,
    *,
    source: str | None = None,
    templates_dir: Path | None = None,
) -> str:
    """Render ``table`` as a VuePress ``sidebar.js`` CommonJS module.

    Parameters
    ----------
    table : SidebarTable
        Table to render; section and page order are kept as is.
    source : str, optional
        Name of the file the table came from, mentioned in a header comment
        so readers know where to make edits.
    templates_dir : Path, optional
        Directory containing ``sidebar.js.jinja``. Defaults to the
        ``docs_sidebar/templates`` directory.
    """
    env = Environment(
        loader=FileSystemLoader(
            str(templates_dir or Path(__file__).parent / "templates")
        ),
        autoescape=select_autoescape(["html", "xml"]),
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
    )
    env.filters["js_string"] = js_string
    template = env.get_template(MODULE_TEMPLATE)
    return template.render(sections=list(table.items()), source=source)


def js_string(value: str) -> str:
    """Return ``value`` as a single-quoted JavaScript string literal."""
    escaped = (
        value.replace("\\", "\\\\")
        .replace("'", "\\'")
        .replace("\n", "\\n")
        .replace("\r", "\\r")
    )
    return f"'{escaped}'"


def _tokenize(text: str) -> list[_Token]:
    """Split ``text`` into ``(kind, value, offset)`` tokens, dropping comments."""
    tokens: list[_Token] = []
    position = 0
    while position < len(text):
        match = TOKEN_PATTERN.match(text, position)
        if match is None:
            line = text.count("\n", 0, position) + 1
            msg = f"Unexpected character {text[position]!r} on line {line}."
            raise MalformedConfigError(msg)
        kind = typ.cast("str", match.lastgroup)
        if kind not in {"space", "line_comment", "block_comment"}:
            tokens.append((kind, match.group(), position))
        position = match.end()
    return tokens


def _unquote(literal: str) -> str:
    """Decode a quoted JavaScript string literal."""

    def _replace(match: re.Match[str]) -> str:
        escape = match.group(1)
        if escape.startswith("u{"):
            code_point = int(escape[2:-1], 16)
            if code_point > MAX_CODE_POINT:
                msg = f"Invalid code point escape '\\{escape}' in string literal."
                raise MalformedConfigError(msg)
            return chr(code_point)
        if escape[0] in {"u", "x"} and len(escape) > 1:
            return chr(int(escape[1:], 16))
        return SIMPLE_ESCAPES.get(escape, escape)

    return ESCAPE_PATTERN.sub(_replace, literal[1:-1])


class _LiteralParser:
    """Recursive-descent reader for the sidebar object literal."""

    def __init__(self, tokens: list[_Token], start: int) -> None:
        self._tokens = tokens
        self._index = start

    def parse_object(self) -> dict[str, list[str]]:
        self._expect("{")
        result: dict[str, list[str]] = {}
        while not self._peek_is("}"):
            key = self._expect_string("section path")
            if key in result:
                msg = f"Duplicate section '{key}' in sidebar module."
                raise MalformedConfigError(msg)
            self._expect(":")
            result[key] = self._parse_array(key)
            if not self._peek_is("}"):
                self._expect(",")
        self._expect("}")
        return result

    def _parse_array(self, key: str) -> list[str]:
        if not self._peek_is("["):
            msg = f"Section '{key}' must map to an array of page slugs."
            raise MalformedConfigError(msg)
        self._expect("[")
        pages: list[str] = []
        while not self._peek_is("]"):
            pages.append(self._expect_string(f"page slug in '{key}'"))
            if not self._peek_is("]"):
                self._expect(",")
        self._expect("]")
        return pages

    def _current(self) -> _Token:
        if self._index >= len(self._tokens):
            msg = "Unexpected end of sidebar module."
            raise MalformedConfigError(msg)
        return self._tokens[self._index]

    def _peek_is(self, value: str) -> bool:
        return self._current()[1] == value

    def _expect(self, value: str) -> None:
        if not self._peek_is(value):
            _, found, offset = self._current()
            msg = f"Expected '{value}' at offset {offset}, found {found!r}."
            raise MalformedConfigError(msg)
        self._index += 1

    def _expect_string(self, what: str) -> str:
        kind, value, offset = self._current()
        if kind != "string":
            msg = f"Expected {what} string at offset {offset}, found {value!r}."
            raise MalformedConfigError(msg)
        self._index += 1
        return _unquote(value)


__all__ = ["js_string", "parse_sidebar_module", "render_sidebar_module"]
