"""Database ports for the household store.

This module defines the application-layer protocol for accessing the database
engine. Infrastructure implementations are expected to provide concrete
adapters that satisfy this port.
"""

from typing import Protocol

from sqlalchemy.engine import Engine


class DatabaseEnginePort(Protocol):
    """Port exposing the database engine backing the household store.

    Application code can depend on this protocol instead of concrete
    database drivers or configuration details.
    """

    def get_household_engine(self) -> Engine:
        """Get the engine for the household database.

        Returns:
            Engine: SQLAlchemy engine connected to the household store.
        """


__all__ = ["DatabaseEnginePort"]
