"""
Database integration.

This module builds the SQLAlchemy engine and session factory from the
configured ``database_url``, creates the tables on application start
(``init_db``) and exposes ``get_session``, a FastAPI dependency that
yields one ORM session per request.

Any SQLAlchemy URL works; SQLite is the default.  An in-memory SQLite
URL (``sqlite://``) is bound to a single shared connection so every
request sees the same database, which is what the test suite relies on.
"""

from typing import Iterator

from fastapi import Request
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker
from sqlalchemy.pool import StaticPool


class Base(DeclarativeBase):
    """Declarative base shared by all ORM models."""


def create_db_engine(database_url: str) -> Engine:
    """Create an engine for ``database_url``.

    SQLite connections are opened with ``check_same_thread=False``
    because FastAPI runs synchronous endpoints in a thread pool.
    """
    url = make_url(database_url)
    if url.get_backend_name() != "sqlite":
        return create_engine(url, pool_pre_ping=True)
    kwargs = {"connect_args": {"check_same_thread": False}}
    if url.database in (None, "", ":memory:"):
        kwargs["poolclass"] = StaticPool
    return create_engine(url, **kwargs)


def create_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)


def init_db(engine: Engine) -> None:
    """Create all tables that do not exist yet."""
    # Importing the models registers them on ``Base.metadata``.
    from minimal_api.app import models  # noqa: F401

    Base.metadata.create_all(bind=engine)


def get_session(request: Request) -> Iterator[Session]:
    """Dependency that yields a session bound to the application's engine.

    The session is closed when the request finishes.  Repositories
    commit their own writes, so nothing is committed here.
    """
    session = request.app.state.session_factory()
    try:
        yield session
    finally:
        session.close()
