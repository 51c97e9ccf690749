"""Display adapter and serialization for token trees."""

from dataclasses import asdict
from typing import Any, Iterator

from .tokens import SECTIONS, TokenTree


def get_tree_item(item):
    """Render an item for display. Items render as themselves."""
    return item


def get_children(item=None) -> list:
    """List the children of an item.

    Hierarchy is left to the consumer, so this is always empty.
    """
    return []


def flatten_tree(tree: TokenTree) -> Iterator[tuple[str, Any]]:
    """Yield (section, token) pairs in section then source order.

    Sections that were never allocated are skipped.
    """
    for section in SECTIONS:
        for token in getattr(tree, section) or []:
            yield section, token


def token_tree_to_dict(tree: TokenTree) -> dict:
    """Convert a TokenTree to plain JSON-able data.

    Absent sections are omitted rather than emitted as empty lists.
    """
    result: dict = {"strict": tree.strict}
    for section in SECTIONS:
        members = getattr(tree, section)
        if members is not None:
            result[section] = [_token_to_dict(token) for token in members]
    return result


def _token_to_dict(token) -> dict:
    return _clean(asdict(token))


def _clean(value):
    """Drop unset optional fields recursively."""
    if isinstance(value, dict):
        return {k: _clean(v) for k, v in value.items() if v is not None}
    if isinstance(value, list):
        return [_clean(v) for v in value]
    return value
