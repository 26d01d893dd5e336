"""Tests for the in-memory home store."""

from datetime import datetime, timezone

import pytest

from src.application.errors import NoActiveHomeError
from src.domain.models import (
    Expense,
    ExpenseScope,
    ExpenseType,
    Home,
    HomeSnapshot,
    Member,
)
from src.infrastructure.in_memory_home_store import InMemoryHomeStore


_NOW = datetime(2024, 1, 1, tzinfo=timezone.utc)
_HOME = Home(id="h", name="Flat", share_code="AAA111", created_at=_NOW)


def _member(member_id: str) -> Member:
    return Member(
        id=member_id,
        home_id="h",
        name=member_id,
        monthly_income=100,
        created_at=_NOW,
    )


def _individual(expense_id: str, member_id: str) -> Expense:
    return Expense(
        id=expense_id,
        home_id="h",
        description=expense_id,
        amount=10,
        expense_type=ExpenseType.FIXED,
        scope=ExpenseScope.INDIVIDUAL,
        member_id_assigned=member_id,
        created_at=_NOW,
    )


def test_snapshot_is_isolated_from_later_mutations() -> None:
    """A snapshot handed out keeps its content after the store changes."""
    store = InMemoryHomeStore(HomeSnapshot(home=_HOME))
    store.add_member(_member("a"))
    snapshot = store.get_snapshot()

    store.add_member(_member("b"))

    assert [m.id for m in snapshot.members] == ["a"]
    assert [m.id for m in store.get_snapshot().members] == ["a", "b"]


def test_remove_member_cascades() -> None:
    store = InMemoryHomeStore(
        HomeSnapshot(
            home=_HOME,
            members=(_member("a"), _member("b")),
            expenses=(_individual("x", "a"), _individual("y", "b")),
        )
    )

    assert store.remove_member("a") is True
    assert store.remove_member("a") is False
    assert [e.id for e in store.get_snapshot().expenses] == ["y"]


def test_mutations_require_active_home() -> None:
    store = InMemoryHomeStore()

    with pytest.raises(NoActiveHomeError):
        store.add_member(_member("a"))
    with pytest.raises(NoActiveHomeError):
        store.add_expense(_individual("x", "a"))


def test_reset_and_save_home() -> None:
    store = InMemoryHomeStore(
        HomeSnapshot(home=_HOME, members=(_member("a"),))
    )

    store.save_home(_HOME)
    assert store.get_snapshot().members == ()

    store.reset()
    assert store.get_snapshot() is None
