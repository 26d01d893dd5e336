"""CLI adapter printing the proration of the persisted home.

This module wires the GetProrationUseCase to the configured home store and
provides a simple command-line entry point for reading the split.
"""

from src.adapters.interface.formatting import (
    format_currency,
    format_percentage,
)
from src.application.use_cases.get_proration import GetProrationUseCase
from src.infrastructure.container import build_home_store
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.settings import HouseholdSettings


def main() -> None:
    """Print each member's share and contribution."""
    logger = get_app_logger()
    settings = HouseholdSettings.from_env()
    store = build_home_store(settings=settings)
    use_case = GetProrationUseCase(store=store, logger=logger)

    view = use_case.execute()
    if not view.results:
        print("No members found. Add members from the dashboard first.")
        return

    symbol = settings.currency_symbol
    for result in view.results:
        print(
            f"{result.member_name}: "
            f"{format_percentage(result.proportional_percentage)} "
            f"-> {format_currency(result.assigned_amount, symbol)}"
        )
    print(
        f"Shared expenses: "
        f"{format_currency(view.summary.shared_expenses, symbol)}"
    )
    for expense in view.orphaned_expenses:
        print(
            f"Unassigned expense '{expense.description}' "
            f"({format_currency(expense.amount, symbol)}) is not counted."
        )


if __name__ == "__main__":  # pragma: no cover
    main()
