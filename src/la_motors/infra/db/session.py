from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator

from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import Session, sessionmaker

from la_motors.infra.config import database_url, db_max_overflow, db_pool_size

# Created on first use so importing the app never needs DATABASE_URL
_engine: Engine | None = None
_session_local: sessionmaker[Session] | None = None


def get_engine() -> Engine:
    """
    Get or create the database engine.

    Pool size and overflow come from DB_POOL_SIZE / DB_MAX_OVERFLOW.
    pool_pre_ping drops connections the server closed while idle, and
    pool_recycle retires connections after an hour.
    """
    global _engine
    if _engine is None:
        _engine = create_engine(
            database_url(),
            pool_size=db_pool_size(),
            max_overflow=db_max_overflow(),
            pool_pre_ping=True,
            pool_recycle=3600,
        )
    return _engine


def get_session_local() -> sessionmaker[Session]:
    """Get or create the session factory."""
    global _session_local
    if _session_local is None:
        _session_local = sessionmaker(
            bind=get_engine(),
            class_=Session,
            expire_on_commit=False,
        )
    return _session_local


@contextmanager
def get_session() -> Iterator[Session]:
    """
    Unit of work: commit when the block finishes, roll back if it raises.

    A vehicle write is therefore only visible to the next list() once the
    request that made it has completed.
    """
    session = get_session_local()()

    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()
