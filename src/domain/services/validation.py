"""Domain validation helpers for user-provided household data."""

import math


class ValidationError(ValueError):
    """Raised when user input cannot be accepted."""


def parse_amount(raw_value, field_name: str) -> float:
    """Convert a raw numeric input into a float.

    Args:
        raw_value: Number or numeric text from a form or CLI argument.
        field_name: Field label used in error messages.

    Returns:
        float: Parsed value.

    Raises:
        ValidationError: If the value is missing, not numeric, or not finite.
    """
    if raw_value is None or isinstance(raw_value, bool):
        raise ValidationError(f"{field_name} is required")
    if isinstance(raw_value, str):
        cleaned = raw_value.strip().replace(",", "")
        if not cleaned:
            raise ValidationError(f"{field_name} is required")
        raw_value = cleaned
    try:
        value = float(raw_value)
    except (TypeError, ValueError) as exc:
        raise ValidationError(
            f"{field_name} must be a number, got {raw_value!r}"
        ) from exc
    if not math.isfinite(value):
        raise ValidationError(f"{field_name} must be a finite number")
    return value


def require_text(value: str | None, field_name: str) -> str:
    """Return the stripped text or raise when it is blank."""
    cleaned = (value or "").strip()
    if not cleaned:
        raise ValidationError(f"{field_name} must not be blank")
    return cleaned


def require_positive(raw_value, field_name: str) -> float:
    """Return the parsed value when strictly positive."""
    value = parse_amount(raw_value, field_name)
    if value <= 0:
        raise ValidationError(f"{field_name} must be greater than zero")
    return value


__all__ = [
    "ValidationError",
    "parse_amount",
    "require_text",
    "require_positive",
]
