"""Dependency registration for the cache service."""

from __future__ import annotations

from kernel import Application, Container, PluginContext
from services.database_service.deps import CAPABILITY_SESSION_FACTORY, resolve_settings

from .repository import CacheRepository
from .stores import InMemoryObjectCache, NullObjectCache, ObjectCacheStore, TransientStore
from .transients import DatabaseTransientStore


CAPABILITY_STORE = "cache.store"
CAPABILITY_TRANSIENTS = "cache.transients"
CAPABILITY_REPOSITORY = "cache"


def _create_store(container: Container) -> ObjectCacheStore:
    if resolve_settings(container).OBJECT_CACHE == "memory":
        return InMemoryObjectCache()
    return NullObjectCache()


def _create_transients(container: Container) -> TransientStore:
    return DatabaseTransientStore(container.get(CAPABILITY_SESSION_FACTORY))


def _create_repository(container: Container) -> CacheRepository:
    return CacheRepository(
        context=container.get(PluginContext),
        store=container.get(CAPABILITY_STORE),
        transients=container.get(CAPABILITY_TRANSIENTS),
    )


def register_dependencies(app: Application) -> None:
    app.singleton(CAPABILITY_STORE, _create_store)
    app.singleton(CAPABILITY_TRANSIENTS, _create_transients)
    app.singleton(CacheRepository, _create_repository)
    app.singleton(CAPABILITY_REPOSITORY, lambda c: c.get(CacheRepository))


__all__ = [
    "CAPABILITY_REPOSITORY",
    "CAPABILITY_STORE",
    "CAPABILITY_TRANSIENTS",
    "register_dependencies",
]
