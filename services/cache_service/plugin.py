"""Cache service provider binding the plugin-scoped cache repository."""

from __future__ import annotations

from kernel import Application, ServiceProvider

from . import deps


class CacheServiceProvider(ServiceProvider):
    """Register the object cache, the transient store and the cache facade.

    The transient store needs ``db.session_factory`` from the database provider
    by the time the cache is first resolved.
    """

    def register(self, app: Application) -> None:
        super().register(app)
        deps.register_dependencies(app)


__all__ = ["CacheServiceProvider"]
