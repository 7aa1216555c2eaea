"""
Array helpers.

Functional Core - pure, total functions over lists and tuples. Any other
input (str included) is treated as an empty array. Results are new lists;
inputs are never mutated.
"""

from __future__ import annotations

import math
from collections.abc import Callable, Hashable, Mapping
from typing import Any


def is_array(value: object) -> bool:
    return isinstance(value, (list, tuple))


def last(arr: object) -> Any:
    """Last element, or None."""
    if not is_array(arr) or not arr:
        return None
    return arr[-1]  # type: ignore[index]


def includes(arr: object, value: object) -> bool:
    if not is_array(arr):
        return False
    return value in arr  # type: ignore[operator]


def without(arr: object, *values: object) -> list[Any]:
    """Copy of arr with every element equal to one of `values` removed."""
    if not is_array(arr):
        return []
    return [item for item in arr if item not in values]  # type: ignore[attr-defined]


def chunk(arr: object, size: int = 1) -> list[list[Any]]:
    """
    Split arr into consecutive slices of `size` elements.

    The last chunk holds the remainder. size < 1 yields no chunks.
    """
    if not is_array(arr) or isinstance(size, bool) or not isinstance(size, int) or size < 1:
        return []
    items = list(arr)  # type: ignore[call-overload]
    return [items[i : i + size] for i in range(0, len(items), size)]


def unique(arr: object) -> list[Any]:
    """Drop repeated elements, keeping first occurrences in order."""
    if not is_array(arr):
        return []
    seen: set[Any] = set()
    seen_unhashable: list[Any] = []
    result: list[Any] = []
    for item in arr:  # type: ignore[attr-defined]
        if isinstance(item, Hashable):
            try:
                if item in seen:
                    continue
                seen.add(item)
            except TypeError:
                # Hashable by type but not by value, e.g. a tuple holding a list
                if item in seen_unhashable:
                    continue
                seen_unhashable.append(item)
        else:
            if item in seen_unhashable:
                continue
            seen_unhashable.append(item)
        result.append(item)
    return result


def is_valid_depth(depth: object) -> bool:
    if isinstance(depth, bool):
        return False
    if isinstance(depth, int):
        return depth >= 0
    return depth == math.inf


def flatten(arr: object, depth: float = 1) -> list[Any]:
    """
    Flatten nested lists/tuples up to `depth` levels.

    flatten(x, math.inf) flattens completely.
    """
    if not is_array(arr) or not is_valid_depth(depth):
        return []
    if depth < 1:
        return list(arr)  # type: ignore[call-overload]
    result: list[Any] = []
    for item in arr:  # type: ignore[attr-defined]
        if is_array(item):
            result.extend(flatten(item, depth - 1))
        else:
            result.append(item)
    return result


def group_by(arr: object, key: Callable[[Any], Any] | Hashable) -> dict[Any, list[Any]]:
    """
    Group elements by a key function or by a mapping field name.

    With a field name, elements that are not mappings, or lack the field,
    are grouped under None.
    """
    if not is_array(arr):
        return {}
    if callable(key):
        key_fn = key
    elif not isinstance(key, Hashable):
        return {}
    else:
        def key_fn(item: Any) -> Any:
            return item.get(key) if isinstance(item, Mapping) else None

    groups: dict[Any, list[Any]] = {}
    for item in arr:  # type: ignore[attr-defined]
        groups.setdefault(key_fn(item), []).append(item)
    return groups

