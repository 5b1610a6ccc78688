"""Database provider wiring the engine and creating tables on boot."""

from __future__ import annotations

import logging

import models  # noqa: F401  registers the ORM tables on Base.metadata
from database import Base
from kernel import Application, ServiceProvider

from . import deps

logger = logging.getLogger(__name__)


class DatabaseServiceProvider(ServiceProvider):
    """Expose the SQLAlchemy engine and session factory to other providers."""

    def register(self, app: Application) -> None:
        super().register(app)
        deps.register_dependencies(app)

    def boot(self, app: Application) -> None:
        engine = app.make(deps.CAPABILITY_ENGINE)
        Base.metadata.create_all(bind=engine)
        logger.debug("Ensured tables for %s", app.context.slug, extra={"plugin": app.context.slug})


__all__ = ["DatabaseServiceProvider"]
