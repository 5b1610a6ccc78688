"""Per-plugin application kernel coordinating the container and service providers."""

from __future__ import annotations

import logging
from typing import Any, List, Optional

from .container import ContainerContract, Factory, Identifier
from .context import PluginContext
from .paths import Paths
from .plugin import ServiceProviderContract


logger = logging.getLogger(__name__)


class Application:
    """Service container front and provider coordinator for one plugin.

    Providers go through two phases. ``register`` runs as soon as a provider
    is added; ``boot`` runs for every provider, in registration order, the
    first time :meth:`boot` is called. Providers added after that are booted
    immediately. Provider exceptions propagate and abort the remaining work.
    """

    def __init__(self, context: PluginContext, container: ContainerContract) -> None:
        if not isinstance(container, ContainerContract):
            raise TypeError(
                f"{type(container).__name__} does not implement get/has/bind/singleton"
            )

        self._context = context
        self._container = container
        self._paths = Paths(context)
        self._providers: List[ServiceProviderContract] = []
        self._booted = False

        self._register_base_bindings()

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------
    @property
    def context(self) -> PluginContext:
        return self._context

    @property
    def container(self) -> ContainerContract:
        return self._container

    @property
    def paths(self) -> Paths:
        return self._paths

    @property
    def booted(self) -> bool:
        return self._booted

    @property
    def providers(self) -> List[ServiceProviderContract]:
        return list(self._providers)

    # ------------------------------------------------------------------
    # Provider lifecycle
    # ------------------------------------------------------------------
    def register(self, provider: ServiceProviderContract) -> "Application":
        self._providers.append(provider)
        provider.register(self)
        logger.debug(
            "Registered provider %s",
            type(provider).__name__,
            extra={"plugin": self._context.slug, "provider": type(provider).__name__},
        )

        if self._booted:
            self._boot_provider(provider)

        return self

    def boot(self) -> None:
        if self._booted:
            return

        for provider in self._providers:
            self._boot_provider(provider)

        self._booted = True
        logger.info(
            "Booted %s with %d provider(s)",
            self._context.slug,
            len(self._providers),
            extra={"plugin": self._context.slug},
        )

    def _boot_provider(self, provider: ServiceProviderContract) -> None:
        provider.boot(self)
        logger.debug(
            "Booted provider %s",
            type(provider).__name__,
            extra={"plugin": self._context.slug, "provider": type(provider).__name__},
        )

    # ------------------------------------------------------------------
    # Container delegation
    # ------------------------------------------------------------------
    def make(self, identifier: Identifier) -> Any:
        return self._container.get(identifier)

    def has(self, identifier: Identifier) -> bool:
        return self._container.has(identifier)

    def bind(self, identifier: Identifier, factory: Optional[Factory] = None) -> None:
        self._container.bind(identifier, factory)

    def singleton(self, identifier: Identifier, factory: Optional[Factory] = None) -> None:
        self._container.singleton(identifier, factory)

    def _register_base_bindings(self) -> None:
        self.singleton(Application, lambda _: self)
        if type(self) is not Application:
            self.singleton(type(self), lambda _: self)
        self.singleton("app", lambda _: self)

        self.singleton(PluginContext, lambda _: self._context)
        self.singleton("context", lambda _: self._context)

        self.singleton(Paths, lambda _: self._paths)
        self.singleton("paths", lambda _: self._paths)


__all__ = ["Application"]
