"""Ephemeral object-cache backends consumed by the cache repository."""

from __future__ import annotations

import time
from typing import Any, Callable, Dict, Optional, Protocol, Tuple, Union


class _Missing:
    """Marker returned by stores when a key holds no value."""

    _instance: Optional["_Missing"] = None

    def __new__(cls) -> "_Missing":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING: Any = _Missing()


class ObjectCacheStore(Protocol):
    """Grouped key-value cache.

    Stores may additionally implement ``incr(key, amount, group)``,
    ``decr(key, amount, group)`` and ``flush_group(group)``.
    """

    def get(self, key: str, group: str) -> Any: ...

    def set(self, key: str, value: Any, group: str, ttl: int = 0) -> bool: ...

    def add(self, key: str, value: Any, group: str, ttl: int = 0) -> bool: ...

    def delete(self, key: str, group: str) -> bool: ...


class TransientStore(Protocol):
    """Persistent key-value store with explicit expiry."""

    def get(self, key: str) -> Any: ...

    def set(self, key: str, value: Any, ttl: int = 0) -> bool: ...

    def delete(self, key: str) -> bool: ...


Number = Union[int, float]
_Entry = Tuple[Any, Optional[float]]


class InMemoryObjectCache:
    """Process-local object cache with per-entry ttl and group flush."""

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        self._clock = clock
        self._entries: Dict[str, Dict[str, _Entry]] = {}

    def get(self, key: str, group: str) -> Any:
        entry = self._live_entry(key, group)
        return MISSING if entry is None else entry[0]

    def set(self, key: str, value: Any, group: str, ttl: int = 0) -> bool:
        expires_at = self._clock() + ttl if ttl > 0 else None
        self._entries.setdefault(group, {})[key] = (value, expires_at)
        return True

    def add(self, key: str, value: Any, group: str, ttl: int = 0) -> bool:
        if self._live_entry(key, group) is not None:
            return False
        return self.set(key, value, group, ttl)

    def delete(self, key: str, group: str) -> bool:
        if self._live_entry(key, group) is None:
            return False
        del self._entries[group][key]
        return True

    def incr(self, key: str, amount: int, group: str) -> Union[Number, bool]:
        entry = self._live_entry(key, group)
        if entry is None:
            return False
        value, expires_at = entry
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            value = 0
        # Counters never go negative.
        value = max(value + amount, 0)
        self._entries[group][key] = (value, expires_at)
        return value

    def decr(self, key: str, amount: int, group: str) -> Union[Number, bool]:
        return self.incr(key, -amount, group)

    def flush_group(self, group: str) -> bool:
        self._entries.pop(group, None)
        return True

    def _live_entry(self, key: str, group: str) -> Optional[_Entry]:
        bucket = self._entries.get(group)
        if not bucket or key not in bucket:
            return None
        value, expires_at = bucket[key]
        if expires_at is not None and expires_at <= self._clock():
            del bucket[key]
            return None
        return value, expires_at


class NullObjectCache:
    """Stand-in used when no object cache is available: stores nothing."""

    def get(self, key: str, group: str) -> Any:
        return MISSING

    def set(self, key: str, value: Any, group: str, ttl: int = 0) -> bool:
        return False

    def add(self, key: str, value: Any, group: str, ttl: int = 0) -> bool:
        return False

    def delete(self, key: str, group: str) -> bool:
        return False


__all__ = [
    "InMemoryObjectCache",
    "MISSING",
    "NullObjectCache",
    "ObjectCacheStore",
    "TransientStore",
]
