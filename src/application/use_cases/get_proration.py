"""Use case to compute member contributions for the active home."""

from src.application.ports.home_store import HomeStorePort
from src.domain.models import ProrationView
from src.domain.services.proration import (
    calculate_proration,
    compute_household_summary,
    find_orphaned_expenses,
)
from src.infrastructure.logging.logger import get_app_logger


class GetProrationUseCase:
    """Split the active home's expenses between its members."""

    def __init__(self, store: HomeStorePort, logger=None) -> None:
        """Initialize the use case.

        Args:
            store: Port holding the active home.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._store = store
        self._logger = logger or get_app_logger()

    def execute(self) -> ProrationView:
        """Return the proration for the current snapshot.

        Returns:
            ProrationView: Per-member results, the household summary, and
            the individual expenses nobody pays for. Empty when no home is
            active.
        """
        snapshot = self._store.get_snapshot()
        if snapshot is None:
            return ProrationView(
                results=[],
                summary=compute_household_summary([], []),
                orphaned_expenses=[],
            )

        members = snapshot.members
        expenses = snapshot.expenses
        orphaned = find_orphaned_expenses(members, expenses)
        for expense in orphaned:
            self._logger.warning(
                f"Unassigned individual expense excluded: id={expense.id}, "
                f"amount={expense.amount}, "
                f"member_id_assigned={expense.member_id_assigned}"
            )

        results = calculate_proration(members, expenses)
        summary = compute_household_summary(members, expenses)
        self._logger.info(
            f"Proration computed: members={summary.member_count}, "
            f"expenses={summary.expense_count}, "
            f"shared={summary.shared_expenses}"
        )
        return ProrationView(
            results=results,
            summary=summary,
            orphaned_expenses=orphaned,
        )


__all__ = ["GetProrationUseCase"]
