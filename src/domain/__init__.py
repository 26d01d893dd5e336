"""Domain package for business rules and core models."""

from .constants import (
    JOINED_HOME_NAME_PREFIX,
    SHARE_CODE_ALPHABET,
    SHARE_CODE_LENGTH,
)
from .models import (
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
from .services import (
    ValidationError,
    calculate_proration,
    compute_household_summary,
    find_orphaned_expenses,
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
    "JOINED_HOME_NAME_PREFIX",
    "SHARE_CODE_ALPHABET",
    "SHARE_CODE_LENGTH",
    "ValidationError",
    "calculate_proration",
    "compute_household_summary",
    "find_orphaned_expenses",
]
