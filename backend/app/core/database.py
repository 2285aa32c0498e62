"""
Database connection management.

A single engine is created lazily on first use and reused for the lifetime of
the process. Sessions are handed out per request through ``get_db``.
"""

import json
import logging
from functools import partial
from typing import Generator, Optional

from psycopg2 import errorcodes
from sqlalchemy import create_engine, event, text
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session, declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

from app.core.config import settings

logger = logging.getLogger(__name__)

Base = declarative_base()

_engine: Optional[Engine] = None
_session_factory: Optional[sessionmaker] = None


def _engine_options(database_url: str) -> dict:
    url = make_url(database_url)
    options = {
        "echo": settings.database_echo,
        "pool_pre_ping": True,
        # keep non-ASCII text readable and searchable inside JSON columns
        "json_serializer": partial(json.dumps, ensure_ascii=False),
    }
    if url.get_backend_name() == "sqlite":
        options["connect_args"] = {"check_same_thread": False}
        if url.database in (None, "", ":memory:"):
            # every session must see the same in-memory database
            options["poolclass"] = StaticPool
    return options


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def get_engine() -> Engine:
    """Return the cached engine, creating it on first call."""
    global _engine
    if _engine is None:
        _engine = create_engine(settings.database_url, **_engine_options(settings.database_url))
        if _engine.dialect.name == "sqlite":
            event.listen(_engine, "connect", _enable_sqlite_foreign_keys)
        logger.info("Database engine created for %s", make_url(settings.database_url).render_as_string(hide_password=True))
    return _engine


def get_sessionmaker() -> sessionmaker:
    global _session_factory
    if _session_factory is None:
        _session_factory = sessionmaker(autocommit=False, autoflush=False, bind=get_engine())
    return _session_factory


def get_db() -> Generator[Session, None, None]:
    """Dependency provider that yields a DB session and always closes it."""
    db = get_sessionmaker()()
    try:
        yield db
    finally:
        db.close()


def init_db() -> None:
    """Create all tables known to the declarative base."""
    # models register themselves on Base when imported
    import app.models  # noqa: F401

    Base.metadata.create_all(bind=get_engine())


def close_database_connection() -> None:
    """Dispose of the cached engine so the next call reconnects."""
    global _engine, _session_factory
    if _engine is not None:
        _engine.dispose()
        logger.info("Database connections closed")
    _engine = None
    _session_factory = None


def check_database_health() -> bool:
    """Run a trivial query against the database."""
    try:
        with get_engine().connect() as connection:
            connection.execute(text("SELECT 1"))
        return True
    except SQLAlchemyError as e:
        logger.error(f"Database health check failed: {e}")
        return False


def get_connection_status() -> str:
    """Describe the state of the cached connection."""
    if _engine is None:
        return "disconnected"
    try:
        with _engine.connect():
            return "connected"
    except SQLAlchemyError:
        return "error"


def is_unique_violation(exc: IntegrityError) -> bool:
    """True when the integrity error comes from a unique index, not a foreign key or NOT NULL."""
    if getattr(exc.orig, "pgcode", None) == errorcodes.UNIQUE_VIOLATION:
        return True
    return "UNIQUE constraint failed" in str(exc.orig)
