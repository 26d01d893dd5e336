"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass
import os

import dotenv

from src.infrastructure.logging.logger import get_app_logger


SUPPORTED_STORES = ("sqlalchemy", "memory")


@dataclass(frozen=True)
class HouseholdSettings:
    """Settings for selecting the home store and display options.

    Attributes:
        store: Store identifier (sqlalchemy or memory).
        currency_symbol: Symbol prepended to amounts in the UI and CLI.
    """

    store: str = "sqlalchemy"
    currency_symbol: str = "$"

    @classmethod
    def from_env(cls) -> "HouseholdSettings":
        """Build settings from environment variables.

        Returns:
            HouseholdSettings: Settings sourced from environment variables.
        """
        dotenv.load_dotenv()
        store = os.getenv("HOUSEHOLD_STORE", "sqlalchemy").strip().lower()
        if store not in SUPPORTED_STORES:
            get_app_logger().warning(
                f"Unknown HOUSEHOLD_STORE '{store}'. "
                f"Expected one of {', '.join(SUPPORTED_STORES)}."
            )
        symbol = os.getenv("HOUSEHOLD_CURRENCY_SYMBOL", "$").strip() or "$"
        return cls(store=store, currency_symbol=symbol)


__all__ = ["HouseholdSettings", "SUPPORTED_STORES"]
