"""Mapping helpers with dot-notation access.

A string key such as ``"database.connections.default"`` is read as a path of
nested mapping lookups. A key present verbatim at the top level always wins
over its dotted interpretation.
"""

from __future__ import annotations

import math
from typing import (
    Any,
    Callable,
    Dict,
    Hashable,
    Iterable,
    List,
    Mapping,
    MutableMapping,
    Optional,
    Union,
)

Key = Hashable


def get(data: Mapping[Key, Any], key: Optional[Key], default: Any = None) -> Any:
    if key is None:
        return data

    if key in data:
        return data[key]

    if not isinstance(key, str) or "." not in key:
        return default

    current: Any = data
    for segment in key.split("."):
        if isinstance(current, Mapping) and segment in current:
            current = current[segment]
        else:
            return default
    return current


def set(data: MutableMapping[Key, Any], key: Key, value: Any) -> MutableMapping[Key, Any]:
    """Assign ``value`` at ``key`` creating intermediate mappings as needed.

    A non-mapping value found on the way is replaced by an empty dict. A key
    already present verbatim is overwritten in place, mirroring :func:`get`.
    Returns ``data``, which is modified in place.
    """

    if key in data or not isinstance(key, str):
        data[key] = value
        return data

    *parents, last = key.split(".")
    current = data
    for segment in parents:
        child = current.get(segment)
        if not isinstance(child, MutableMapping):
            child = {}
            current[segment] = child
        current = child
    current[last] = value
    return data


def has(data: Mapping[Key, Any], key: Optional[Key]) -> bool:
    if key is None:
        return True

    if key in data:
        return True

    if not isinstance(key, str):
        return False

    current: Any = data
    for segment in key.split("."):
        if isinstance(current, Mapping) and segment in current:
            current = current[segment]
        else:
            return False
    return True


def forget(data: MutableMapping[Key, Any], keys: Union[Key, Iterable[Key]]) -> None:
    """Remove one or more (dotted) keys in place; unknown paths are ignored."""

    if isinstance(keys, (str, bytes)) or not isinstance(keys, Iterable):
        keys = [keys]

    for key in keys:
        if key in data:
            del data[key]
            continue
        if not isinstance(key, str):
            continue

        *parents, last = key.split(".")
        current: Any = data
        for segment in parents:
            child = current.get(segment)
            if not isinstance(child, MutableMapping):
                break
            current = child
        else:
            current.pop(last, None)


def flatten(items: Union[Mapping[Any, Any], Iterable[Any]], depth: float = math.inf) -> List[Any]:
    """Collapse nested lists, tuples and mapping values into a flat list."""

    if isinstance(items, Mapping):
        items = items.values()

    result: List[Any] = []
    for item in items:
        if not isinstance(item, (list, tuple, Mapping)):
            result.append(item)
        elif depth <= 1:
            result.extend(item.values() if isinstance(item, Mapping) else item)
        else:
            result.extend(flatten(item, depth - 1))
    return result


def only(data: Mapping[Key, Any], keys: Iterable[Key]) -> Dict[Key, Any]:
    wanted = frozenset(keys)
    return {key: value for key, value in data.items() if key in wanted}


def except_(data: Mapping[Key, Any], keys: Iterable[Key]) -> Dict[Key, Any]:
    excluded = frozenset(keys)
    return {key: value for key, value in data.items() if key not in excluded}


def first(
    items: Union[Mapping[Any, Any], Iterable[Any]],
    callback: Optional[Callable[[Any, Any], bool]] = None,
    default: Any = None,
) -> Any:
    """Return the first value, or the first for which ``callback(value, key)`` holds."""

    pairs = items.items() if isinstance(items, Mapping) else enumerate(items)
    for key, value in pairs:
        if callback is None or callback(value, key):
            return value
    return default


def wrap(value: Any) -> List[Any]:
    if value is None:
        return []
    if isinstance(value, list):
        return value
    return [value]


__all__ = ["except_", "first", "flatten", "forget", "get", "has", "only", "set", "wrap"]
