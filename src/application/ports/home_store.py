"""Port for reading and mutating the active home."""

from typing import Protocol

from src.domain.models import Expense, Home, HomeSnapshot, Member


class HomeStorePort(Protocol):
    """Port exposing the single active home and its members and expenses.

    Implementations apply each mutation atomically and serially so readers
    always observe a consistent snapshot.
    """

    def get_snapshot(self) -> HomeSnapshot | None:
        """Return the active home with its members and expenses."""

    def save_home(self, home: Home) -> None:
        """Make the home active, dropping any previous home data."""

    def load_home(self, snapshot: HomeSnapshot) -> None:
        """Replace the active home data with the provided snapshot."""

    def add_member(self, member: Member) -> None:
        """Append a member to the active home."""

    def remove_member(self, member_id: str) -> bool:
        """Delete a member and the expenses individually assigned to them."""

    def add_expense(self, expense: Expense) -> None:
        """Append an expense to the active home."""

    def remove_expense(self, expense_id: str) -> bool:
        """Delete an expense."""

    def reset(self) -> None:
        """Drop the active home and all its data."""


__all__ = ["HomeStorePort"]
