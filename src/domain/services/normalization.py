"""Domain normalization helpers."""

import secrets

from src.domain.constants import SHARE_CODE_ALPHABET, SHARE_CODE_LENGTH
from src.domain.models import ExpenseScope, ExpenseType


def normalize_share_code(share_code: str | None) -> str | None:
    """Normalize share code values.

    Args:
        share_code: Raw code typed by a user.

    Returns:
        str | None: Upper-cased code, or None when blank.
    """
    if not share_code:
        return None
    cleaned = share_code.strip()
    return cleaned.upper() if cleaned else None


def normalize_member_reference(member_id: str | None) -> str | None:
    """Normalize an optional member identifier.

    Args:
        member_id: Raw identifier, possibly an empty form value.

    Returns:
        str | None: Identifier, or None when blank.
    """
    if not member_id:
        return None
    cleaned = member_id.strip()
    return cleaned or None


def normalize_expense_type(value: ExpenseType | str) -> ExpenseType:
    """Coerce raw expense type values to ExpenseType."""
    if isinstance(value, ExpenseType):
        return value
    return ExpenseType(str(value).strip().upper())


def normalize_expense_scope(value: ExpenseScope | str) -> ExpenseScope:
    """Coerce raw expense scope values to ExpenseScope."""
    if isinstance(value, ExpenseScope):
        return value
    return ExpenseScope(str(value).strip().upper())


def generate_share_code() -> str:
    """Return a random upper-case share code."""
    return "".join(
        secrets.choice(SHARE_CODE_ALPHABET) for _ in range(SHARE_CODE_LENGTH)
    )


__all__ = [
    "normalize_share_code",
    "normalize_member_reference",
    "normalize_expense_type",
    "normalize_expense_scope",
    "generate_share_code",
]
