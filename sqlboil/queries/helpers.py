"""Helpers for working with model objects."""

from __future__ import annotations

import dataclasses
from typing import Any

_INITIALISMS = frozenset(
    {
        "api", "guid", "html", "http", "https", "id", "ip",
        "json", "sql", "uid", "uri", "url", "uuid",
    }
)


def title_case(name: str) -> str:
    """Turn a snake_case name into TitleCase, upper-casing common initialisms."""
    parts = []
    for part in name.split("_"):
        if not part:
            continue
        if part.lower() in _INITIALISMS:
            parts.append(part.upper())
        else:
            parts.append(part[0].upper() + part[1:])
    return "".join(parts)


def _is_zero(value: Any) -> bool:
    if value is None:
        return True
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return all(
            _is_zero(getattr(value, f.name)) for f in dataclasses.fields(value)
        )
    if isinstance(value, (bool, int, float, complex, str, bytes, bytearray,
                          list, tuple, dict, set, frozenset)):
        return not value
    return False


def _lookup(obj: Any, name: str) -> Any:
    for candidate in (name, title_case(name)):
        try:
            return getattr(obj, candidate)
        except AttributeError:
            continue
    raise AttributeError(
        f"could not find field name {title_case(name)} in type {type(obj).__name__}"
    )


def non_zero_default_set(defaults, obj) -> list[str]:
    """Return the names in defaults whose fields on obj hold non-zero values."""
    return [d for d in defaults if not _is_zero(_lookup(obj, d))]