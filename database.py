"""SQLAlchemy helpers used by the database service provider."""

from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator, Optional

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

from core.config import Settings


Base = declarative_base()


def build_engine(settings: Settings, *, echo: Optional[bool] = None) -> Engine:
    """Create the SQLAlchemy engine for the configured database URL."""

    url = settings.DATABASE_URL
    if url.startswith("sqlite") and ":memory:" in url:
        # One shared connection, otherwise every session sees an empty database.
        return create_engine(
            url,
            echo=bool(echo),
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    return create_engine(url, echo=bool(echo))


def build_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@contextmanager
def session_scope(session_factory: sessionmaker) -> Iterator[Session]:
    """Yield a session that is committed on success and rolled back on error."""

    db = session_factory()
    try:
        yield db
        db.commit()
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()


__all__ = ["Base", "build_engine", "build_session_factory", "session_scope"]
