"""Domain models package."""

from .household import (
    Expense,
    ExpenseScope,
    ExpenseType,
    Home,
    HomeSnapshot,
    HouseholdSummary,
    Member,
    ProrationResult,
    ProrationView,
)

__all__ = [
    "Expense",
    "ExpenseScope",
    "ExpenseType",
    "Home",
    "HomeSnapshot",
    "HouseholdSummary",
    "Member",
    "ProrationResult",
    "ProrationView",
]
