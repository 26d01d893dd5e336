"""In-memory home store used by tests and ephemeral sessions."""

from threading import Lock

from src.application.errors import NoActiveHomeError
from src.application.ports.home_store import HomeStorePort
from src.domain.models import Expense, Home, HomeSnapshot, Member


class InMemoryHomeStore(HomeStorePort):
    """Home store keeping the active home in process memory."""

    def __init__(self, snapshot: HomeSnapshot | None = None) -> None:
        """Initialize the store.

        Args:
            snapshot: Optional initial content.
        """
        self._lock = Lock()
        self._home: Home | None = None
        self._members: list[Member] = []
        self._expenses: list[Expense] = []
        if snapshot is not None:
            self.load_home(snapshot)

    def get_snapshot(self) -> HomeSnapshot | None:
        with self._lock:
            if self._home is None:
                return None
            return HomeSnapshot(
                home=self._home,
                members=tuple(self._members),
                expenses=tuple(self._expenses),
            )

    def save_home(self, home: Home) -> None:
        with self._lock:
            self._home = home
            self._members = []
            self._expenses = []

    def load_home(self, snapshot: HomeSnapshot) -> None:
        with self._lock:
            self._home = snapshot.home
            self._members = list(snapshot.members)
            self._expenses = list(snapshot.expenses)

    def add_member(self, member: Member) -> None:
        with self._lock:
            self._require_home()
            self._members.append(member)

    def remove_member(self, member_id: str) -> bool:
        with self._lock:
            remaining = [m for m in self._members if m.id != member_id]
            if len(remaining) == len(self._members):
                return False
            self._members = remaining
            self._expenses = [
                e for e in self._expenses if e.member_id_assigned != member_id
            ]
            return True

    def add_expense(self, expense: Expense) -> None:
        with self._lock:
            self._require_home()
            self._expenses.append(expense)

    def remove_expense(self, expense_id: str) -> bool:
        with self._lock:
            remaining = [e for e in self._expenses if e.id != expense_id]
            removed = len(remaining) != len(self._expenses)
            self._expenses = remaining
            return removed

    def reset(self) -> None:
        with self._lock:
            self._home = None
            self._members = []
            self._expenses = []

    def _require_home(self) -> None:
        if self._home is None:
            raise NoActiveHomeError()


__all__ = ["InMemoryHomeStore"]
