"""SQLAlchemy engine, session factory and the per-request session dependency."""

from __future__ import annotations

from typing import Iterator

from fastapi import Request
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

from ..core.config import AppSettings

# ``Base`` is the parent class for every SQLAlchemy model defined in models/.
Base = declarative_base()


def build_engine(settings: AppSettings) -> Engine:
    """Create the process-wide engine (and its connection pool) from settings."""

    url = settings.database_url
    backend = url.get_backend_name()

    if backend == "sqlite":
        # SQLite is only used for local runs and tests. An in-memory database
        # must stay on one shared connection or every session sees an empty DB.
        kwargs: dict = {
            "connect_args": {"check_same_thread": False, "timeout": settings.DB_CONNECT_TIMEOUT},
        }
        if url.database in (None, "", ":memory:"):
            kwargs["poolclass"] = StaticPool
        return create_engine(url, **kwargs)

    connect_args: dict = {}
    if backend == "mysql":
        connect_args = {
            "connect_timeout": settings.DB_CONNECT_TIMEOUT,
            "read_timeout": settings.DB_QUERY_TIMEOUT,
            "write_timeout": settings.DB_QUERY_TIMEOUT,
        }
    return create_engine(
        url,
        connect_args=connect_args,
        pool_size=settings.DB_POOL_SIZE,
        max_overflow=settings.DB_MAX_OVERFLOW,
        pool_timeout=settings.DB_POOL_TIMEOUT,
        pool_recycle=settings.DB_POOL_RECYCLE,
        pool_pre_ping=True,
    )


def build_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db(request: Request) -> Iterator[Session]:
    """FastAPI dependency that yields a session and guarantees cleanup."""

    db = request.app.state.session_factory()
    try:
        yield db
    finally:
        db.close()
