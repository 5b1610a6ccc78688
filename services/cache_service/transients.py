"""SQLAlchemy-backed transient store (persistent cache fallback)."""

from __future__ import annotations

import logging
import time
from typing import Any, Callable

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker

from database import session_scope
from models import Transient

from .stores import MISSING

logger = logging.getLogger(__name__)


class DatabaseTransientStore:
    """Persist transients in the ``transients`` table.

    Values must be JSON serialisable. A ttl of ``0`` stores the entry without
    expiry; expired rows are deleted when read. Database errors are logged and
    reported as a miss or ``False``.
    """

    def __init__(self, session_factory: sessionmaker, clock: Callable[[], float] = time.time):
        self._session_factory = session_factory
        self._clock = clock

    def get(self, key: str) -> Any:
        try:
            with session_scope(self._session_factory) as db:
                row = db.get(Transient, key)
                if row is None:
                    return MISSING
                if row.is_expired(self._clock()):
                    db.delete(row)
                    return MISSING
                return row.value
        except SQLAlchemyError:
            logger.exception("Error reading transient %s", key)
            return MISSING

    def set(self, key: str, value: Any, ttl: int = 0) -> bool:
        expires_at = self._clock() + ttl if ttl > 0 else None
        try:
            with session_scope(self._session_factory) as db:
                db.merge(Transient(name=key, value=value, expires_at=expires_at))
            return True
        except (SQLAlchemyError, TypeError, ValueError):
            logger.exception("Error storing transient %s", key)
            return False

    def delete(self, key: str) -> bool:
        try:
            with session_scope(self._session_factory) as db:
                row = db.get(Transient, key)
                if row is None:
                    return False
                db.delete(row)
            return True
        except SQLAlchemyError:
            logger.exception("Error deleting transient %s", key)
            return False


__all__ = ["DatabaseTransientStore"]
