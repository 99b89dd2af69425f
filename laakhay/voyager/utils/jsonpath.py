"""Fail-closed access to nested JSON payloads.

Voyager responses nest the interesting values several levels deep under
keys that change between API revisions. These helpers walk a path of dict
keys and list indices and return a default instead of raising when any step
is missing or has the wrong type.

Examples:
    >>> dig({"a": [{"b": 1}]}, "a", 0, "b")
    1
    >>> dig({"a": []}, "a", 0, "b", default="none")
    'none'
"""

from __future__ import annotations

from typing import Any

_MISSING = object()


def dig(data: Any, *path: str | int, default: Any = None) -> Any:
    """Walk ``path`` through dicts and lists.

    Args:
        data: Decoded JSON value
        *path: Dict keys (str) and list indices (int)
        default: Value returned when any step cannot be followed

    Returns:
        Value at the end of the path, or ``default``
    """
    node = data
    for step in path:
        if isinstance(step, int) and not isinstance(step, bool):
            if not isinstance(node, list) or not -len(node) <= step < len(node):
                return default
            node = node[step]
        elif isinstance(node, dict):
            node = node.get(step, _MISSING)
            if node is _MISSING:
                return default
        else:
            return default
    return node


def dig_list(data: Any, *path: str | int) -> list[Any]:
    """Like :func:`dig` but always returns a list (empty when absent)."""
    value = dig(data, *path)
    return value if isinstance(value, list) else []


def dig_str(data: Any, *path: str | int, default: str = "") -> str:
    """Like :func:`dig` but only accepts string leaves."""
    value = dig(data, *path)
    return value if isinstance(value, str) else default


def dig_int(data: Any, *path: str | int, default: int = 0) -> int:
    """Like :func:`dig` but only accepts integer leaves (bools excluded)."""
    value = dig(data, *path)
    if isinstance(value, bool) or not isinstance(value, int):
        return default
    return value
