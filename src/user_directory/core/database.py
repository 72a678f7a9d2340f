"""Database connection and session management.

This module handles the database connection using SQLAlchemy. The URL comes
from configuration and defaults to a SQLite file in the data directory.
"""

import logging
from pathlib import Path
from typing import Iterator

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from user_directory.config import DATABASE_URL, SQL_ECHO
from user_directory.models.base import Base
# Import models to ensure they are registered with Base.metadata
import user_directory.models  # noqa: F401

logger = logging.getLogger(__name__)


def create_db_engine(url: str, echo: bool = False) -> Engine:
    """Create an engine for the given database URL.

    SQLite connections are shared across FastAPI's worker threads, so the
    same-thread check is disabled. An in-memory SQLite database lives in a
    single connection, which every session has to reuse.

    Args:
        url: SQLAlchemy database URL.
        echo: Whether to log every SQL statement.

    Returns:
        Configured SQLAlchemy Engine.
    """
    parsed = make_url(url)
    if parsed.get_backend_name() != "sqlite":
        return create_engine(url, echo=echo)

    kwargs = {"connect_args": {"check_same_thread": False}}
    if parsed.database in (None, "", ":memory:"):
        kwargs["poolclass"] = StaticPool
    return create_engine(url, echo=echo, **kwargs)


engine = create_db_engine(DATABASE_URL, echo=SQL_ECHO)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def init_db(bind: Engine = engine) -> None:
    """Create all tables that do not exist yet.

    Args:
        bind: Engine to create the tables on.
    """
    database = bind.url.database
    if bind.url.get_backend_name() == "sqlite" and database not in (None, "", ":memory:"):
        # Ensure the directory holding the SQLite file exists
        Path(database).parent.mkdir(parents=True, exist_ok=True)
    Base.metadata.create_all(bind=bind)
    logger.info("Database ready at %s", bind.url.render_as_string(hide_password=True))


def get_db() -> Iterator[Session]:
    """Dependency for getting a database session."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
