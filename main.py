"""Entry point bootstrapping a plugin application with its default providers."""

from __future__ import annotations

import json
import os
import sys
from typing import Any, Iterable, Mapping, Optional

from core.config import Settings, get_settings, set_settings
from core.logging import setup_logging
from kernel import Application, Container, ContainerContract, HostEnvironment, PluginContext
from kernel.plugin import ServiceProviderContract
from services.cache_service.plugin import CacheServiceProvider
from services.database_service.deps import CAPABILITY_SETTINGS
from services.database_service.plugin import DatabaseServiceProvider


def default_providers() -> list:
    return [DatabaseServiceProvider(), CacheServiceProvider()]


def create_application(
    config: Mapping[str, Any],
    *,
    settings: Optional[Settings] = None,
    container: Optional[ContainerContract] = None,
    providers: Optional[Iterable[ServiceProviderContract]] = None,
) -> Application:
    """Build an unbooted application for the plugin described by ``config``.

    ``config`` carries ``file``, ``slug``, ``prefix``, ``textDomain`` and
    ``version``. The host calls :meth:`Application.boot` once it is ready.
    """

    settings = settings or get_settings()
    set_settings(settings)
    setup_logging(settings.LOG_LEVEL, settings.LOG_FORMAT)

    context = PluginContext.create(config, host=HostEnvironment.from_settings(settings))
    app = Application(context, container if container is not None else Container())
    app.singleton(CAPABILITY_SETTINGS, lambda _: settings)

    for provider in providers if providers is not None else default_providers():
        app.register(provider)
    return app


if __name__ == "__main__":
    plugin_file = sys.argv[1] if len(sys.argv) > 1 else os.path.abspath(__file__)
    slug = os.path.basename(os.path.dirname(plugin_file)) or "plugin"
    application = create_application(
        {
            "file": plugin_file,
            "slug": slug,
            "prefix": slug.replace("-", "_") + "_",
            "textDomain": slug,
            "version": "0.0.0",
        }
    )
    application.boot()
    print(
        json.dumps(
            {
                "slug": application.context.slug,
                "base_path": application.paths.path(),
                "base_url": application.paths.url(),
                "providers": [type(p).__name__ for p in application.providers],
                "booted": application.booted,
            },
            indent=2,
        )
    )
