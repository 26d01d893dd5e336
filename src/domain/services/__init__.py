"""Domain services package."""

from .normalization import (
    generate_share_code,
    normalize_expense_scope,
    normalize_expense_type,
    normalize_member_reference,
    normalize_share_code,
)
from .proration import (
    calculate_proration,
    compute_household_summary,
    find_orphaned_expenses,
    total_income,
    total_individual_expenses,
    total_shared_expenses,
)
from .validation import (
    ValidationError,
    parse_amount,
    require_positive,
    require_text,
)

__all__ = [
    "calculate_proration",
    "compute_household_summary",
    "find_orphaned_expenses",
    "total_income",
    "total_individual_expenses",
    "total_shared_expenses",
    "generate_share_code",
    "normalize_expense_scope",
    "normalize_expense_type",
    "normalize_member_reference",
    "normalize_share_code",
    "ValidationError",
    "parse_amount",
    "require_positive",
    "require_text",
]
