"""Canonical text for default values."""

import json
from typing import Any, Optional

from .raw import ArrayEntry, ArrayLiteral


def normalize_value(value: Any, declared_type: Optional[str]) -> str:
    """Render a raw default value as source text.

    Arrays (declared type "array") serialize to compact JSON: a list when
    any entry is positional, an object otherwise. Strings are wrapped in
    double quotes as-is. Anything else passes through as text.
    """
    if value is None:
        return ""

    if declared_type == "array" and not isinstance(value, str):
        return json.dumps(_build_container(value), separators=(",", ":"))
    if declared_type == "string":
        return f'"{value}"'
    return str(value)


def _entries(value: Any) -> list[tuple[Optional[str], Any]]:
    """Flatten the accepted array shapes into (key, value) pairs."""
    if isinstance(value, ArrayLiteral):
        value = value.items
    if isinstance(value, dict):
        return list(value.items())

    entries = []
    for item in value:
        if isinstance(item, ArrayEntry):
            entries.append((item.key, item.value))
        else:
            entries.append((None, item))
    return entries


def _build_container(value: Any):
    entries = _entries(value)
    if not entries:
        return []

    if any(key is None for key, _ in entries):
        container: list = []
        for key, item in entries:
            index = _as_index(key)
            if index is not None and index < len(container):
                container[index] = item
            else:
                container.append(item)
        return container

    mapping: dict = {}
    for key, item in entries:
        mapping[str(key)] = item
    return mapping


def _as_index(key) -> Optional[int]:
    if key is None:
        return None
    try:
        index = int(key)
    except (TypeError, ValueError):
        return None
    return index if index >= 0 else None
