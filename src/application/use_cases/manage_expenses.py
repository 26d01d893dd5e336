"""Use cases to add and remove home expenses."""

from datetime import datetime, timezone
from uuid import uuid4

from src.application.errors import NoActiveHomeError
from src.application.ports.home_store import HomeStorePort
from src.domain.models import Expense, ExpenseScope, ExpenseType
from src.domain.services.normalization import (
    normalize_expense_scope,
    normalize_expense_type,
    normalize_member_reference,
)
from src.domain.services.validation import (
    ValidationError,
    require_positive,
    require_text,
)
from src.infrastructure.logging.logger import get_usage_logger


class AddExpenseUseCase:
    """Add a shared or individual expense to the active home."""

    def __init__(self, store: HomeStorePort, logger=None) -> None:
        """Initialize the use case.

        Args:
            store: Port holding the active home.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._store = store
        self._logger = logger or get_usage_logger()

    def execute(
        self,
        description: str,
        amount,
        expense_type: ExpenseType | str = ExpenseType.FIXED,
        scope: ExpenseScope | str = ExpenseScope.SHARED,
        member_id_assigned: str | None = None,
    ) -> Expense:
        """Validate the input and store the expense.

        Shared expenses never keep an assignee. Individual expenses may be
        stored without one; they are then reported as unassigned.

        Args:
            description: Expense label.
            amount: Amount, number or numeric text.
            expense_type: FIXED or VARIABLE.
            scope: SHARED or INDIVIDUAL.
            member_id_assigned: Responsible member for individual expenses.

        Returns:
            Expense: The stored expense.

        Raises:
            NoActiveHomeError: If no home is active.
            ValidationError: If a field is invalid.
        """
        snapshot = self._store.get_snapshot()
        if snapshot is None:
            raise NoActiveHomeError()
        try:
            resolved_type = normalize_expense_type(expense_type)
            resolved_scope = normalize_expense_scope(scope)
        except ValueError as exc:
            raise ValidationError(str(exc)) from exc

        assignee = None
        if resolved_scope == ExpenseScope.INDIVIDUAL:
            assignee = normalize_member_reference(member_id_assigned)

        expense = Expense(
            id=str(uuid4()),
            home_id=snapshot.home.id,
            description=require_text(description, "Description"),
            amount=require_positive(amount, "Amount"),
            expense_type=resolved_type,
            scope=resolved_scope,
            member_id_assigned=assignee,
            created_at=datetime.now(timezone.utc),
        )
        self._store.add_expense(expense)
        self._logger.info(
            f"Expense added: id={expense.id}, scope={resolved_scope.value}, "
            f"member_id_assigned={assignee}"
        )
        return expense


class RemoveExpenseUseCase:
    """Remove an expense from the active home."""

    def __init__(self, store: HomeStorePort, logger=None) -> None:
        self._store = store
        self._logger = logger or get_usage_logger()

    def execute(self, expense_id: str) -> bool:
        """Delete the expense.

        Args:
            expense_id: Identifier of the expense to remove.

        Returns:
            bool: True when an expense was removed.
        """
        removed = self._store.remove_expense(expense_id)
        if removed:
            self._logger.info(f"Expense removed: id={expense_id}")
        else:
            self._logger.warning(f"Expense not found: id={expense_id}")
        return removed


__all__ = ["AddExpenseUseCase", "RemoveExpenseUseCase"]
