"""Domain models for homes, members, expenses, and proration results."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum


class ExpenseType(str, Enum):
    """Recurrence of an expense. Informational only."""

    FIXED = "FIXED"
    VARIABLE = "VARIABLE"


class ExpenseScope(str, Enum):
    """Who pays for an expense."""

    SHARED = "SHARED"
    INDIVIDUAL = "INDIVIDUAL"


@dataclass(frozen=True)
class Home:
    """Group of members sharing expenses.

    Attributes:
        id: Unique identifier.
        name: Display name.
        share_code: Opaque join token shown to other members.
        created_at: Creation timestamp.
    """

    id: str
    name: str
    share_code: str
    created_at: datetime


@dataclass(frozen=True)
class Member:
    """Person in a home with a declared monthly income."""

    id: str
    home_id: str
    name: str
    monthly_income: float
    created_at: datetime


@dataclass(frozen=True)
class Expense:
    """Cost record owned by a home.

    Attributes:
        id: Unique identifier.
        home_id: Owning home identifier.
        description: Free text label.
        amount: Amount in currency units.
        expense_type: FIXED or VARIABLE.
        scope: SHARED or INDIVIDUAL.
        member_id_assigned: Responsible member for INDIVIDUAL expenses.
        created_at: Creation timestamp.
    """

    id: str
    home_id: str
    description: str
    amount: float
    expense_type: ExpenseType
    scope: ExpenseScope
    member_id_assigned: str | None
    created_at: datetime


@dataclass(frozen=True)
class ProrationResult:
    """Contribution computed for a single member."""

    member_id: str
    member_name: str
    proportional_percentage: float
    assigned_amount: float


@dataclass(frozen=True)
class HomeSnapshot:
    """Consistent read of the active home, in insertion order."""

    home: Home
    members: tuple[Member, ...] = field(default_factory=tuple)
    expenses: tuple[Expense, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class HouseholdSummary:
    """Headline figures for the household dashboard.

    Attributes:
        total_income: Sum of member incomes.
        total_expenses: Sum of every expense amount.
        shared_expenses: Sum of SHARED expense amounts.
        individual_expenses: Sum of INDIVIDUAL expense amounts.
        member_count: Number of members.
        expense_count: Number of expenses.
    """

    total_income: float
    total_expenses: float
    shared_expenses: float
    individual_expenses: float
    member_count: int
    expense_count: int

    @property
    def balance(self) -> float:
        """Return total_income minus total_expenses."""
        return self.total_income - self.total_expenses

    @property
    def shared_ratio(self) -> float | None:
        """Return the shared part of total expenses, None without expenses."""
        if self.total_expenses <= 0:
            return None
        return self.shared_expenses / self.total_expenses


@dataclass(frozen=True)
class ProrationView:
    """Proration results with the context the presentation layer shows."""

    results: list[ProrationResult]
    summary: HouseholdSummary
    orphaned_expenses: list[Expense]


__all__ = [
    "ExpenseType",
    "ExpenseScope",
    "Home",
    "Member",
    "Expense",
    "ProrationResult",
    "HomeSnapshot",
    "HouseholdSummary",
    "ProrationView",
]
