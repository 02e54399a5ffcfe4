"""Write sidebar tables back out as YAML, JSON, or a VuePress module.

Every format here reloads into an equal table through
:func:`docs_sidebar.config.load_sidebar_file`, so a table can be moved between
formats without losing section or page order.
"""

from __future__ import annotations

import io
import json
import logging
import typing as typ

from ruamel.yaml import YAML

from ._constants import EXPORT_FORMATS
from .errors import MalformedConfigError
from .vuepress import render_sidebar_module

if typ.TYPE_CHECKING:
    from pathlib import Path

    from .table import SidebarTable

logger = logging.getLogger(__name__)


def dump_yaml(table: SidebarTable, stream: typ.TextIO | None = None) -> str:
    """Serialise ``table`` as block-style YAML.

    The text is written to ``stream`` when one is given and returned either
    way. Slugs that YAML would read as numbers (``1.10``) are quoted.
    """
    yaml = _build_roundtrip_yaml()
    buffer = io.StringIO()
    yaml.dump(table.to_dict(), buffer)
    text = buffer.getvalue()
    if stream is not None:
        stream.write(text)
    return text


def dump_json(table: SidebarTable) -> str:
    """Serialise ``table`` as an indented JSON object."""
    return json.dumps(table.to_dict(), indent=2, ensure_ascii=False) + "\n"


def render_table(
    table: SidebarTable, export_format: str, *, source: str | None = None
) -> str:
    """Return ``table`` rendered in ``export_format`` (``js``, ``json``, ``yaml``)."""
    match export_format:
        case "js":
            return render_sidebar_module(table, source=source)
        case "json":
            return dump_json(table)
        case "yaml":
            return dump_yaml(table)
        case _:
            known = ", ".join(sorted(EXPORT_FORMATS))
            msg = f"Unknown export format '{export_format}'. Known formats: {known}"
            raise MalformedConfigError(msg)


def write_table(
    table: SidebarTable,
    output: Path,
    export_format: str,
    *,
    source: str | None = None,
) -> Path:
    """Render ``table`` and write it to ``output``, creating parent folders."""
    text = render_table(table, export_format, source=source)
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(text, encoding="utf-8")
    logger.debug("wrote %s sidebar to %s", export_format, output)
    return output


def _build_roundtrip_yaml() -> YAML:
    yaml = YAML()
    yaml.width = 120
    yaml.indent(mapping=2, sequence=4, offset=2)
    return yaml


__all__ = ["dump_json", "dump_yaml", "render_table", "write_table"]
