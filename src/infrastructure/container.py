"""Composition root for wiring infrastructure adapters."""

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.home_store import HomeStorePort
from src.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from src.infrastructure.home_store import SqlAlchemyHomeStore
from src.infrastructure.in_memory_home_store import InMemoryHomeStore
from src.infrastructure.settings import HouseholdSettings


def build_database_adapter() -> DatabaseEnginePort:
    """Return the database adapter instance."""
    return SqlAlchemyDatabaseEngineAdapter()


def build_home_store(
    db_port: DatabaseEnginePort | None = None,
    settings: HouseholdSettings | None = None,
) -> HomeStorePort:
    """Return the configured home store.

    Raises:
        ValueError: If the configured store is not supported.
    """
    resolved_settings = settings or HouseholdSettings.from_env()
    if resolved_settings.store == "memory":
        return InMemoryHomeStore()
    if resolved_settings.store == "sqlalchemy":
        resolved_db = db_port or build_database_adapter()
        return SqlAlchemyHomeStore(resolved_db)
    raise ValueError(
        "Unsupported home store: "
        f"{resolved_settings.store}. Expected sqlalchemy or memory."
    )


__all__ = [
    "build_database_adapter",
    "build_home_store",
]
