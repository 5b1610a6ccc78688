"""Kernel package exposing the application runtime and its collaborators."""

from .application import Application
from .container import Container, ContainerContract
from .context import HostEnvironment, PluginContext
from .paths import Paths
from .plugin import ServiceProvider, ServiceProviderContract

__all__ = [
    "Application",
    "Container",
    "ContainerContract",
    "HostEnvironment",
    "Paths",
    "PluginContext",
    "ServiceProvider",
    "ServiceProviderContract",
]
