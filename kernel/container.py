"""Container contract and the default in-process implementation."""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Optional, Protocol, Union, runtime_checkable


logger = logging.getLogger(__name__)

Identifier = Union[str, type]
Factory = Callable[["Container"], Any]


@runtime_checkable
class ContainerContract(Protocol):
    """Operations the application kernel requires from a container."""

    def get(self, identifier: Identifier) -> Any: ...

    def has(self, identifier: Identifier) -> bool: ...

    def bind(self, identifier: Identifier, factory: Optional[Factory] = None) -> None: ...

    def singleton(self, identifier: Identifier, factory: Optional[Factory] = None) -> None: ...


class Container:
    """Lazy factory registry with transient and shared bindings.

    Factories receive the container so they can resolve their own
    dependencies. Binding an identifier again replaces the previous
    factory and drops any instance cached for it.
    """

    def __init__(self) -> None:
        self._factories: Dict[Identifier, Factory] = {}
        self._shared: Dict[Identifier, bool] = {}
        self._instances: Dict[Identifier, Any] = {}

    def bind(self, identifier: Identifier, factory: Optional[Factory] = None) -> None:
        self._register(identifier, factory, shared=False)

    def singleton(self, identifier: Identifier, factory: Optional[Factory] = None) -> None:
        self._register(identifier, factory, shared=True)

    def has(self, identifier: Identifier) -> bool:
        return identifier in self._factories

    def get(self, identifier: Identifier) -> Any:
        if identifier not in self._factories:
            raise KeyError(f"Service '{_describe(identifier)}' is not registered")

        if identifier in self._instances:
            return self._instances[identifier]

        instance = self._factories[identifier](self)
        if self._shared[identifier]:
            self._instances[identifier] = instance
        return instance

    def _register(self, identifier: Identifier, factory: Optional[Factory], *, shared: bool) -> None:
        if factory is None:
            if not isinstance(identifier, type):
                raise TypeError(
                    f"A factory is required to bind non-class identifier '{_describe(identifier)}'"
                )
            cls = identifier
            factory = lambda _: cls()  # noqa: E731

        if identifier in self._factories:
            logger.debug("Rebinding service %s", _describe(identifier))
        self._factories[identifier] = factory
        self._shared[identifier] = shared
        self._instances.pop(identifier, None)


def _describe(identifier: Identifier) -> str:
    if isinstance(identifier, type):
        return f"{identifier.__module__}.{identifier.__qualname__}"
    return str(identifier)


__all__ = ["Container", "ContainerContract", "Factory", "Identifier"]
