"""
Object helpers.

Functional Core - pure, total functions over mappings. Non-mapping input
(None included) yields an empty list or dict.
"""

from __future__ import annotations

import copy
from collections.abc import Hashable, Mapping
from datetime import date, datetime, time, timedelta
from typing import Any

_IMMUTABLE = (str, bytes, int, float, complex, bool, type(None), date, datetime, time, timedelta)


def keys(obj: object) -> list[Any]:
    if not isinstance(obj, Mapping):
        return []
    return list(obj.keys())


def values(obj: object) -> list[Any]:
    if not isinstance(obj, Mapping):
        return []
    return list(obj.values())


def pick(obj: object, *names: Any) -> dict[Any, Any]:
    """
    Only the listed keys that obj actually has, in the requested order.

    Unhashable names can never be keys and are skipped.
    """
    if not isinstance(obj, Mapping):
        return {}
    return {name: obj[name] for name in names if isinstance(name, Hashable) and name in obj}


def omit(obj: object, *names: Any) -> dict[Any, Any]:
    """Every key of obj except the listed ones, in obj's order."""
    if not isinstance(obj, Mapping):
        return {}
    return {k: v for k, v in obj.items() if k not in names}


def deep_clone(obj: Any) -> Any:
    """
    Recursive copy of plain dicts, lists, tuples and sets.

    Immutable scalars and dates are shared. Anything else, subclasses
    such as OrderedDict, defaultdict and namedtuples included, is copied
    with copy.deepcopy so its type and extra state survive.
    """
    if isinstance(obj, _IMMUTABLE):
        return obj
    kind = type(obj)
    if kind is dict:
        return {k: deep_clone(v) for k, v in obj.items()}
    if kind is list:
        return [deep_clone(item) for item in obj]
    if kind is tuple:
        return tuple(deep_clone(item) for item in obj)
    if kind is set:
        return {deep_clone(item) for item in obj}
    if kind is frozenset:
        return frozenset(deep_clone(item) for item in obj)
    return copy.deepcopy(obj)
