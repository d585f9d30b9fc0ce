"""Database setup - SQLModel/SQLAlchemy engine with a bounded connection pool.

One ``Database`` is built by the app factory at process start and kept on
``app.state.db``. Request handlers reach it through ``get_session``; services
receive the resulting ``Session`` explicitly. There is no module-level engine.

SQLite (the development default) gets ``PRAGMA foreign_keys=ON`` on every
connection so that the ON DELETE rules declared on the tables are enforced.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Iterator
from contextlib import contextmanager

from fastapi import Request
from sqlalchemy import event, text
from sqlalchemy.engine import Engine
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

from outpace.config import Settings

logger = logging.getLogger(__name__)


def _is_sqlite(url: str) -> bool:
    return url.startswith("sqlite")


def _is_memory_sqlite(url: str) -> bool:
    return url in ("sqlite://", "sqlite:///:memory:")


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def register_models() -> None:
    """Import all SQL models so SQLModel metadata registers them."""
    from outpace.models.activity import ActivityLog, Notification, TaskPerformance  # noqa: F401
    from outpace.models.project import Project  # noqa: F401
    from outpace.models.task import Task, TaskAssignment, TaskComment  # noqa: F401
    from outpace.models.team import Team, TeamMember  # noqa: F401
    from outpace.models.user import User  # noqa: F401


def build_engine(settings: Settings) -> Engine:
    """Create the engine and its pool from settings."""
    url = settings.database_url

    if _is_memory_sqlite(url):
        # A single shared connection, otherwise every checkout sees an empty DB
        engine = create_engine(
            url,
            echo=False,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    elif _is_sqlite(url):
        engine = create_engine(
            url,
            echo=False,
            connect_args={"check_same_thread": False, "timeout": settings.db_connect_timeout},
            pool_size=settings.db_pool_size,
            max_overflow=0,
            pool_timeout=settings.db_connect_timeout,
        )
    else:
        engine = create_engine(
            url,
            echo=False,
            connect_args={"connect_timeout": settings.db_connect_timeout},
            pool_size=settings.db_pool_size,
            max_overflow=0,
            pool_timeout=settings.db_connect_timeout,
            pool_recycle=settings.db_idle_timeout,
            pool_pre_ping=True,
        )

    if _is_sqlite(url):
        event.listen(engine, "connect", _enable_sqlite_foreign_keys)
    return engine


class Database:
    """Owns the engine (and therefore the connection pool)."""

    def __init__(self, settings: Settings) -> None:
        self.url = settings.database_url
        self.engine = build_engine(settings)

    def _ensure_sqlite_dir(self) -> None:
        if _is_sqlite(self.url) and not _is_memory_sqlite(self.url):
            db_path = self.url.replace("sqlite:///", "")
            db_dir = os.path.dirname(db_path)
            if db_dir:
                os.makedirs(db_dir, exist_ok=True)

    def create_all(self) -> None:
        """Create all tables defined by SQLModel metadata."""
        register_models()
        self._ensure_sqlite_dir()
        SQLModel.metadata.create_all(self.engine)
        logger.info("Database ready (%s)", self.engine.url.render_as_string(hide_password=True))

    def ping(self) -> bool:
        with self.engine.connect() as conn:
            conn.execute(text("SELECT 1")).fetchone()
        return True

    @contextmanager
    def session(self) -> Iterator[Session]:
        with Session(self.engine) as session:
            yield session

    def dispose(self) -> None:
        self.engine.dispose()


def get_database(request: Request) -> Database:
    return request.app.state.db


def get_session(request: Request) -> Iterator[Session]:
    """Dependency for FastAPI endpoints."""
    with get_database(request).session() as session:
        yield session
