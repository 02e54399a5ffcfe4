"""Utility helpers shared by the sidebar configuration loader."""

from __future__ import annotations

from pathlib import Path

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from .._constants import DEFAULT_PAGE_SUFFIXES, EXPORT_FORMATS
from ..errors import MalformedConfigError


def _read_yaml(path: Path) -> object:
    """Return the safe-loaded YAML 1.2 document at ``path``."""
    loader = YAML(typ="safe")
    loader.version = (1, 2)
    try:
        with path.open("r", encoding="utf-8") as handle:
            return loader.load(handle)
    except YAMLError as exc:
        msg = f"Could not parse YAML in '{path}': {exc}"
        raise MalformedConfigError(msg) from exc


def _normalize_suffixes(value: str | list[object] | None) -> tuple[str, ...]:
    """Normalize suffix definitions into a tuple of dotted suffixes."""
    if value is None:
        return DEFAULT_PAGE_SUFFIXES
    if isinstance(value, str):
        value = [segment for segment in value.split() if segment]
    if not isinstance(value, list):
        msg = "'page_suffixes' must be a string or a list of strings."
        raise MalformedConfigError(msg)
    normalized: list[str] = []
    for segment in value:
        text = str(segment).strip()
        if not text:
            continue
        suffix = text if text.startswith(".") else f".{text}"
        if suffix not in normalized:
            normalized.append(suffix)
    if not normalized:
        msg = "'page_suffixes' must name at least one suffix."
        raise MalformedConfigError(msg)
    return tuple(normalized)


def _check_export_format(value: object) -> str:
    """Return ``value`` lower-cased when it names a supported export format."""
    text = str(value).strip().lower()
    if text not in EXPORT_FORMATS:
        known = ", ".join(sorted(EXPORT_FORMATS))
        msg = f"Unknown export format '{value}'. Known formats: {known}"
        raise MalformedConfigError(msg)
    return text


def _check_path(defaults: dict[str, object], key: str, default: Path) -> Path:
    """Return ``defaults[key]`` as a path, or ``default`` when the key is absent."""
    if key not in defaults:
        return default
    value = defaults[key]
    if not isinstance(value, str) or not value.strip():
        msg = f"'{key}' must be a non-empty path string, got {value!r}."
        raise MalformedConfigError(msg)
    return Path(value.strip())


__all__ = ["_check_export_format", "_check_path", "_normalize_suffixes", "_read_yaml"]
