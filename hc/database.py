"""
Database configuration and initialization for HC.

Uses SQLite as the data storage backend with SQLAlchemy ORM.
"""

from datetime import datetime, timezone
from pathlib import Path

from sqlalchemy import Engine, create_engine, event
from sqlalchemy.orm import DeclarativeBase, sessionmaker


class Base(DeclarativeBase):
    """Base class for all SQLAlchemy models."""
    pass


def set_sqlite_pragma(dbapi_connection, connection_record):
    """Enable foreign key constraints for SQLite connections."""
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def build_engine(path: Path | str) -> Engine:
    """
    Create an engine for the SQLite file at ``path``.

    Connections are shared across the server's worker threads, and every
    new connection has foreign keys switched on so that the schema's
    cascade and set-null rules are enforced by SQLite itself.
    """
    engine = create_engine(
        f"sqlite:///{path}",
        connect_args={"check_same_thread": False},  # Required for SQLite with FastAPI
        echo=False  # Set to True for SQL query logging
    )
    event.listen(engine, "connect", set_sqlite_pragma)
    return engine


def init_db(engine: Engine) -> None:
    """
    Initialize the database by creating all tables.

    Existing tables are left untouched.
    """
    # Register the models on Base.metadata before creating tables
    from . import models  # noqa: F401

    Base.metadata.create_all(bind=engine)


def make_session_factory(engine: Engine) -> sessionmaker:
    """Session factory bound to ``engine``."""
    return sessionmaker(
        bind=engine,
        autoflush=False,
        expire_on_commit=False,
    )


def utcnow() -> datetime:
    """Current UTC time as a naive datetime, the form stored in SQLite."""
    return datetime.now(timezone.utc).replace(tzinfo=None)
