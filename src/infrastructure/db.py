"""Database infrastructure for the household store.

This module exposes concrete helpers to create and reuse the SQLAlchemy engine
backing the durable home store. It belongs to the infrastructure layer because
it deals with external systems (SQLite or PostgreSQL).
"""

import os
from typing import Optional

import dotenv
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.pool import QueuePool

from src.application.ports.database import DatabaseEnginePort
from src.utils.utils import get_project_root


DEFAULT_DB_FILENAME = "household.db"


def _get_env_var(name: str, default: str | None = None) -> str:
    """Read an environment variable or raise a descriptive error.

    Args:
        name: Name of the environment variable to read.
        default: Value returned when the variable is missing or empty.

    Returns:
        str: The raw value of the environment variable.

    Raises:
        RuntimeError: If the variable is missing and no default is given.
    """
    dotenv.load_dotenv()
    value = os.getenv(name)
    if not value:
        if default is not None:
            return default
        raise RuntimeError(f"Missing environment variable: {name}")
    return value


def _default_db_url() -> str:
    """Return the SQLite URL used when HOUSEHOLD_DB_URL is unset."""
    data_dir = get_project_root() / "data"
    data_dir.mkdir(parents=True, exist_ok=True)
    return f"sqlite:///{data_dir / DEFAULT_DB_FILENAME}"


def _create_engine(db_url: str) -> Engine:
    """Create a configured SQLAlchemy engine.

    Args:
        db_url: Fully qualified database URL (including driver and credentials)

    Returns:
        Engine: A SQLAlchemy engine instance with a small connection pool and
        health checks enabled.
    """
    return create_engine(
        db_url,
        poolclass=QueuePool,
        pool_size=5,
        max_overflow=5,
        pool_pre_ping=True,
        future=True,
    )


_household_engine: Optional[Engine] = None


def get_household_engine() -> Engine:
    """Get a singleton SQLAlchemy engine for the household database.

    Returns:
        Engine: Lazily initialized engine connected to the household store.
    """
    global _household_engine
    if _household_engine is None:
        db_url = (
            _get_env_var("HOUSEHOLD_DB_URL", default="") or _default_db_url()
        )
        _household_engine = _create_engine(db_url)
    return _household_engine


class SqlAlchemyDatabaseEngineAdapter(DatabaseEnginePort):
    """DatabaseEnginePort implementation backed by a SQLAlchemy engine.

    The adapter hides configuration details (environment variables, pooling)
    behind the port so the store depends only on the protocol.
    """

    def __init__(self, db_url: str | None = None) -> None:
        """Initialize the adapter.

        Args:
            db_url: Optional explicit URL; the shared engine is used otherwise.
        """
        self._db_url = db_url
        self._engine: Optional[Engine] = None

    def get_household_engine(self) -> Engine:
        """Get the engine for the household database.

        Returns:
            Engine: SQLAlchemy engine connected to the household store.
        """
        if self._db_url is None:
            return get_household_engine()
        if self._engine is None:
            self._engine = _create_engine(self._db_url)
        return self._engine


__all__ = [
    "get_household_engine",
    "SqlAlchemyDatabaseEngineAdapter",
]
