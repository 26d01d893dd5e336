"""Tests for the expense use cases."""

from unittest.mock import MagicMock

import pytest

from src.application.errors import NoActiveHomeError
from src.application.use_cases.manage_expenses import (
    AddExpenseUseCase,
    RemoveExpenseUseCase,
)
from src.application.use_cases.manage_home import CreateHomeUseCase
from src.domain.models import ExpenseScope, ExpenseType
from src.domain.services.validation import ValidationError
from src.infrastructure.in_memory_home_store import InMemoryHomeStore


def _store_with_home() -> InMemoryHomeStore:
    store = InMemoryHomeStore()
    CreateHomeUseCase(store=store, logger=MagicMock()).execute("Flat")
    return store


def test_add_shared_expense_with_defaults() -> None:
    store = _store_with_home()

    expense = AddExpenseUseCase(store=store, logger=MagicMock()).execute(
        " Rent ",
        "1200",
    )

    assert expense.description == "Rent"
    assert expense.amount == 1200.0
    assert expense.expense_type is ExpenseType.FIXED
    assert expense.scope is ExpenseScope.SHARED
    assert expense.member_id_assigned is None
    assert store.get_snapshot().expenses == (expense,)


def test_shared_expense_drops_assignee() -> None:
    store = _store_with_home()

    expense = AddExpenseUseCase(store=store, logger=MagicMock()).execute(
        "Internet",
        60,
        expense_type="VARIABLE",
        scope="SHARED",
        member_id_assigned="someone",
    )

    assert expense.expense_type is ExpenseType.VARIABLE
    assert expense.member_id_assigned is None


def test_individual_expense_keeps_assignee() -> None:
    store = _store_with_home()

    expense = AddExpenseUseCase(store=store, logger=MagicMock()).execute(
        "Gym",
        30,
        scope=ExpenseScope.INDIVIDUAL,
        member_id_assigned="member-1",
    )

    assert expense.scope is ExpenseScope.INDIVIDUAL
    assert expense.member_id_assigned == "member-1"


def test_individual_expense_without_assignee_is_accepted() -> None:
    """Unassigned individual expenses are stored and reported later."""
    store = _store_with_home()

    expense = AddExpenseUseCase(store=store, logger=MagicMock()).execute(
        "Gift",
        45,
        scope="individual",
        member_id_assigned="",
    )

    assert expense.member_id_assigned is None


@pytest.mark.parametrize(
    ("description", "amount", "scope"),
    [
        ("", 10, "SHARED"),
        ("Rent", 0, "SHARED"),
        ("Rent", -1, "SHARED"),
        ("Rent", "ten", "SHARED"),
        ("Rent", 10, "FAMILY"),
    ],
)
def test_add_expense_rejects_invalid_input(description, amount, scope) -> None:
    store = _store_with_home()

    with pytest.raises(ValidationError):
        AddExpenseUseCase(store=store, logger=MagicMock()).execute(
            description,
            amount,
            scope=scope,
        )

    assert store.get_snapshot().expenses == ()


def test_add_expense_requires_active_home() -> None:
    with pytest.raises(NoActiveHomeError):
        AddExpenseUseCase(
            store=InMemoryHomeStore(),
            logger=MagicMock(),
        ).execute("Rent", 10)


def test_remove_expense() -> None:
    store = _store_with_home()
    add_expense = AddExpenseUseCase(store=store, logger=MagicMock())
    rent = add_expense.execute("Rent", 100)
    food = add_expense.execute("Food", 50)
    logger = MagicMock()
    use_case = RemoveExpenseUseCase(store=store, logger=logger)

    assert use_case.execute(rent.id) is True
    assert use_case.execute(rent.id) is False
    assert store.get_snapshot().expenses == (food,)
    logger.warning.assert_called_once()
