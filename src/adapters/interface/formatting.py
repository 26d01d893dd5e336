"""Display formatting for amounts and percentages.

Formatted values are for humans only and are never fed back into the
proration computation.
"""


def format_currency(value: float, symbol: str = "$") -> str:
    """Format an amount with thousands grouping and no decimals."""
    sign = "-" if value < 0 else ""
    return f"{sign}{symbol}{abs(value):,.0f}"


def format_percentage(value: float, digits: int = 1) -> str:
    """Format a ratio in [0, 1] as a percentage string."""
    return f"{value * 100:.{digits}f}%"


def format_count(count: int, singular: str, plural: str | None = None) -> str:
    """Return ``count`` followed by the matching noun form."""
    noun = singular if count == 1 else (plural or f"{singular}s")
    return f"{count} {noun}"


__all__ = ["format_currency", "format_percentage", "format_count"]
