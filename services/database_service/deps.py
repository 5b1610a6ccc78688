"""Dependency registration for the database service."""

from __future__ import annotations

from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker

from core.config import Settings, get_settings
from database import build_engine, build_session_factory
from kernel import Application, Container


CAPABILITY_SETTINGS = "settings"
CAPABILITY_ENGINE = "db.engine"
CAPABILITY_SESSION_FACTORY = "db.session_factory"


def resolve_settings(container: Container) -> Settings:
    """Return the settings bound in the container, or the process settings."""

    if container.has(CAPABILITY_SETTINGS):
        return container.get(CAPABILITY_SETTINGS)
    return get_settings()


def _create_engine(container: Container) -> Engine:
    settings = resolve_settings(container)
    return build_engine(settings, echo=settings.DEBUG)


def _create_session_factory(container: Container) -> sessionmaker:
    return build_session_factory(container.get(CAPABILITY_ENGINE))


def register_dependencies(app: Application) -> None:
    app.singleton(CAPABILITY_ENGINE, _create_engine)
    app.singleton(CAPABILITY_SESSION_FACTORY, _create_session_factory)


__all__ = [
    "CAPABILITY_ENGINE",
    "CAPABILITY_SESSION_FACTORY",
    "CAPABILITY_SETTINGS",
    "register_dependencies",
    "resolve_settings",
]
