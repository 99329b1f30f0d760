"""Deep merge used to layer configuration files.

Dicts merge recursively. Lists are replaced by the higher layer unless the
override list starts with ``"+"``, in which case its remaining items are
appended (``"="`` forces an explicit replace).
"""
from __future__ import annotations

from typing import Any, Dict, List


def deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Recursively merge ``override`` onto ``base`` without mutating either.

    Example:
        >>> deep_merge({"layers": {"marker": ".c12"}}, {"layers": {"discover": True}})
        {'layers': {'marker': '.c12', 'discover': True}}
    """
    result: Dict[str, Any] = dict(base)
    for key, value in (override or {}).items():
        current = result.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            result[key] = deep_merge(current, value)
        elif isinstance(current, list) and isinstance(value, list):
            result[key] = merge_arrays(current, value)
        else:
            result[key] = value
    return result


def merge_arrays(base: List[Any], override: List[Any]) -> List[Any]:
    """Merge two config lists.

    Example:
        >>> merge_arrays(["a"], ["b"])
        ['b']
        >>> merge_arrays(["a"], ["+", "b"])
        ['a', 'b']
    """
    if not override:
        return list(base)
    head = override[0]
    if head == "+":
        return [*base, *override[1:]]
    if head == "=":
        return list(override[1:])
    return list(override)


__all__ = ["deep_merge", "merge_arrays"]
