"""Context-prefixed cache facade over an object cache and a transient store."""

from __future__ import annotations

import logging
from typing import Any, Callable, TypeVar, Union

from kernel.context import PluginContext

from .stores import MISSING, ObjectCacheStore, TransientStore

logger = logging.getLogger(__name__)

T = TypeVar("T")


class CacheRepository:
    """Plugin-scoped cache.

    Object cache entries are keyed ``prefix + key`` inside a group named after
    the plugin slug; transients use the context's transient key. Backend
    failures are reported as ``False`` and never raised. ``remember`` is not
    atomic: concurrent misses each run the producer and the last write wins.
    """

    def __init__(
        self,
        context: PluginContext,
        store: ObjectCacheStore,
        transients: TransientStore,
    ) -> None:
        self._context = context
        self._store = store
        self._transients = transients
        self.group = context.slug

    # ------------------------------------------------------------------
    # Object cache
    # ------------------------------------------------------------------
    def get(self, key: str, default: Any = None) -> Any:
        value = self._store.get(self._prefix_key(key), self.group)
        return default if value is MISSING else value

    def put(self, key: str, value: Any, ttl: int = 3600) -> bool:
        return self._store.set(self._prefix_key(key), value, self.group, ttl)

    def add(self, key: str, value: Any, ttl: int = 3600) -> bool:
        """Store ``value`` only when ``key`` is not cached yet."""

        return self._store.add(self._prefix_key(key), value, self.group, ttl)

    def forget(self, key: str) -> bool:
        return self._store.delete(self._prefix_key(key), self.group)

    def has(self, key: str) -> bool:
        return self._store.get(self._prefix_key(key), self.group) is not MISSING

    def remember(self, key: str, ttl: int, producer: Callable[[], T]) -> T:
        value = self._store.get(self._prefix_key(key), self.group)
        if value is not MISSING:
            return value

        value = producer()
        self.put(key, value, ttl)
        return value

    def remember_forever(self, key: str, producer: Callable[[], T]) -> T:
        return self.remember(key, 0, producer)

    def increment(self, key: str, amount: int = 1) -> Union[int, float, bool]:
        incr = getattr(self._store, "incr", None)
        if incr is None:
            return False
        return incr(self._prefix_key(key), amount, self.group)

    def decrement(self, key: str, amount: int = 1) -> Union[int, float, bool]:
        decr = getattr(self._store, "decr", None)
        if decr is None:
            return False
        return decr(self._prefix_key(key), amount, self.group)

    def flush(self) -> bool:
        flush_group = getattr(self._store, "flush_group", None)
        if flush_group is None:
            logger.debug("Object cache for %s does not support group flush", self.group)
            return False
        return flush_group(self.group)

    # ------------------------------------------------------------------
    # Transients (persistent fallback)
    # ------------------------------------------------------------------
    def transient_get(self, key: str, default: Any = None) -> Any:
        value = self._transients.get(self._context.transient_key(key))
        return default if value is MISSING else value

    def transient_put(self, key: str, value: Any, ttl: int = 3600) -> bool:
        return self._transients.set(self._context.transient_key(key), value, ttl)

    def transient_forget(self, key: str) -> bool:
        return self._transients.delete(self._context.transient_key(key))

    def transient_remember(self, key: str, ttl: int, producer: Callable[[], T]) -> T:
        value = self._transients.get(self._context.transient_key(key))
        if value is not MISSING:
            return value

        value = producer()
        self.transient_put(key, value, ttl)
        return value

    def _prefix_key(self, key: str) -> str:
        return self._context.prefix + key


__all__ = ["CacheRepository"]
