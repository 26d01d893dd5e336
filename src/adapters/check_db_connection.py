"""Simple CLI to validate the household database connection.

This adapter is meant for local operations: it instantiates the concrete
database adapter from the infrastructure layer, runs a basic health check,
and makes sure the household tables exist.
"""

from src.infrastructure.container import build_database_adapter
from src.infrastructure.home_store import SqlAlchemyHomeStore
from src.infrastructure.logging.logger import get_app_logger


def main() -> None:
    """Run a connectivity check against the configured database."""
    adapter = build_database_adapter()
    logger = get_app_logger()

    engine = adapter.get_household_engine()
    logger.info(f"Household DB: {engine.url}")

    with engine.connect() as conn:
        conn.exec_driver_sql("SELECT 1")
    SqlAlchemyHomeStore(adapter).prepare_schema()

    logger.info("Household database is ready.")


if __name__ == "__main__":
    main()
