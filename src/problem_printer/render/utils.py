"""Small, pure helpers shared across problem renderers."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any


def choice_label(index: int) -> str:
    """Return A, B, ..., Z, AA, AB, ... for 0-based index."""
    alphabet = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
    label = ""
    value = index + 1
    while value:
        value, rem = divmod(value - 1, 26)
        label = alphabet[rem] + label
    return label


def normalize_style_choice(value: object | None, *, default: str, aliases: dict[str, str]) -> str:
    if value is None:
        return default
    candidate = str(value).strip().lower()
    if not candidate:
        return default
    return (
        aliases.get(candidate, candidate)
        if candidate in aliases or candidate in aliases.values()
        else default
    )


def unit_type(unit: Mapping[str, Any]) -> object:
    return unit.get("type")


def is_graph(unit: Mapping[str, Any]) -> bool:
    return unit_type(unit) == "graph"


def is_options(unit: Mapping[str, Any]) -> bool:
    return unit_type(unit) == "options"


def field_text(value: object) -> str | None:
    """Return display text for an optional title-page field, or None when falsy."""
    if not value:
        return None
    return str(value)


__all__ = [
    "choice_label",
    "field_text",
    "is_graph",
    "is_options",
    "normalize_style_choice",
    "unit_type",
]
