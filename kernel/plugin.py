"""Service provider contract for feature modules that plug into the kernel."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Optional, Protocol, runtime_checkable

from .container import Factory, Identifier
from .context import PluginContext

if TYPE_CHECKING:  # pragma: no cover
    from .application import Application


@runtime_checkable
class ServiceProviderContract(Protocol):
    """Two-phase lifecycle every provider exposes to the application."""

    def register(self, app: "Application") -> None: ...

    def boot(self, app: "Application") -> None: ...


class ServiceProvider:
    """Base class for providers.

    ``register`` binds services and keeps a back-reference to the
    application; subclasses overriding it must call ``super().register(app)``.
    ``boot`` runs once every provider is registered and is a no-op here.
    """

    app: "Application"

    def register(self, app: "Application") -> None:
        self.app = app

    def boot(self, app: "Application") -> None:
        """Hook invoked by the application during its boot phase."""

    # ------------------------------------------------------------------
    # Container shortcuts
    # ------------------------------------------------------------------
    def bind(self, identifier: Identifier, factory: Optional[Factory] = None) -> None:
        self.app.bind(identifier, factory)

    def singleton(self, identifier: Identifier, factory: Optional[Factory] = None) -> None:
        self.app.singleton(identifier, factory)

    def make(self, identifier: Identifier) -> Any:
        return self.app.make(identifier)

    def context(self) -> PluginContext:
        return self.app.context


__all__ = ["ServiceProvider", "ServiceProviderContract"]
