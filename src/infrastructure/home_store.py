"""SQLAlchemy-backed durable store for the active home."""

from datetime import datetime
from threading import Lock

from sqlalchemy import text
from sqlalchemy.engine import Connection

from src.application.errors import NoActiveHomeError
from src.application.ports.database import DatabaseEnginePort
from src.application.ports.home_store import HomeStorePort
from src.domain.models import (
    Expense,
    ExpenseScope,
    ExpenseType,
    Home,
    HomeSnapshot,
    Member,
)


CREATE_HOMES_SQL = """
CREATE TABLE IF NOT EXISTS homes (
    id TEXT PRIMARY KEY,
    name TEXT NOT NULL,
    share_code TEXT NOT NULL,
    created_at TEXT NOT NULL
)
"""

CREATE_MEMBERS_SQL = """
CREATE TABLE IF NOT EXISTS members (
    id TEXT PRIMARY KEY,
    home_id TEXT NOT NULL,
    name TEXT NOT NULL,
    monthly_income DOUBLE PRECISION NOT NULL,
    created_at TEXT NOT NULL,
    position INTEGER NOT NULL
)
"""

CREATE_EXPENSES_SQL = """
CREATE TABLE IF NOT EXISTS expenses (
    id TEXT PRIMARY KEY,
    home_id TEXT NOT NULL,
    description TEXT NOT NULL,
    amount DOUBLE PRECISION NOT NULL,
    expense_type TEXT NOT NULL,
    scope TEXT NOT NULL,
    member_id_assigned TEXT,
    created_at TEXT NOT NULL,
    position INTEGER NOT NULL
)
"""

SELECT_HOME_SQL = text(
    """
    SELECT id, name, share_code, created_at
    FROM homes
    """
)

SELECT_MEMBERS_SQL = text(
    """
    SELECT id, home_id, name, monthly_income, created_at
    FROM members
    WHERE home_id = :home_id
    ORDER BY position
    """
)

SELECT_EXPENSES_SQL = text(
    """
    SELECT id, home_id, description, amount, expense_type, scope,
           member_id_assigned, created_at
    FROM expenses
    WHERE home_id = :home_id
    ORDER BY position
    """
)

INSERT_HOME_SQL = text(
    """
    INSERT INTO homes (id, name, share_code, created_at)
    VALUES (:id, :name, :share_code, :created_at)
    """
)

INSERT_MEMBER_SQL = text(
    """
    INSERT INTO members (
        id, home_id, name, monthly_income, created_at, position
    )
    VALUES (
        :id, :home_id, :name, :monthly_income, :created_at,
        (SELECT COALESCE(MAX(position), 0) + 1 FROM members)
    )
    """
)

INSERT_EXPENSE_SQL = text(
    """
    INSERT INTO expenses (
        id, home_id, description, amount, expense_type, scope,
        member_id_assigned, created_at, position
    )
    VALUES (
        :id, :home_id, :description, :amount, :expense_type, :scope,
        :member_id_assigned, :created_at,
        (SELECT COALESCE(MAX(position), 0) + 1 FROM expenses)
    )
    """
)

DELETE_MEMBER_SQL = text("DELETE FROM members WHERE id = :id")
DELETE_ASSIGNED_EXPENSES_SQL = text(
    "DELETE FROM expenses WHERE member_id_assigned = :member_id"
)
DELETE_EXPENSE_SQL = text("DELETE FROM expenses WHERE id = :id")

CLEAR_TABLES_SQL = (
    "DELETE FROM expenses",
    "DELETE FROM members",
    "DELETE FROM homes",
)


class SqlAlchemyHomeStore(HomeStorePort):
    """Home store persisted through SQLAlchemy.

    Every mutation runs in a single transaction. Tables are created on first
    use.
    """

    def __init__(self, db_port: DatabaseEnginePort) -> None:
        """Initialize the store.

        Args:
            db_port: Port providing access to the household engine.
        """
        self._db_port = db_port
        self._write_lock = Lock()
        self._schema_ready = False

    def prepare_schema(self) -> None:
        """Ensure the household tables exist."""
        if self._schema_ready:
            return
        engine = self._db_port.get_household_engine()
        with engine.begin() as conn:
            conn.exec_driver_sql(CREATE_HOMES_SQL)
            conn.exec_driver_sql(CREATE_MEMBERS_SQL)
            conn.exec_driver_sql(CREATE_EXPENSES_SQL)
        self._schema_ready = True

    def get_snapshot(self) -> HomeSnapshot | None:
        """Return the active home with its members and expenses."""
        self.prepare_schema()
        engine = self._db_port.get_household_engine()
        with engine.begin() as conn:
            home_row = conn.execute(SELECT_HOME_SQL).first()
            if home_row is None:
                return None
            params = {"home_id": home_row.id}
            member_rows = conn.execute(SELECT_MEMBERS_SQL, params).all()
            expense_rows = conn.execute(SELECT_EXPENSES_SQL, params).all()
        return HomeSnapshot(
            home=Home(
                id=home_row.id,
                name=home_row.name,
                share_code=home_row.share_code,
                created_at=_parse_timestamp(home_row.created_at),
            ),
            members=tuple(_to_member(row) for row in member_rows),
            expenses=tuple(_to_expense(row) for row in expense_rows),
        )

    def save_home(self, home: Home) -> None:
        """Make the home active, dropping any previous home data."""
        self.load_home(HomeSnapshot(home=home))

    def load_home(self, snapshot: HomeSnapshot) -> None:
        """Replace the stored data with the provided snapshot."""
        self.prepare_schema()
        engine = self._db_port.get_household_engine()
        with self._write_lock, engine.begin() as conn:
            _clear_tables(conn)
            conn.execute(INSERT_HOME_SQL, _home_params(snapshot.home))
            for member in snapshot.members:
                conn.execute(INSERT_MEMBER_SQL, _member_params(member))
            for expense in snapshot.expenses:
                conn.execute(INSERT_EXPENSE_SQL, _expense_params(expense))

    def add_member(self, member: Member) -> None:
        """Append a member to the active home."""
        self.prepare_schema()
        engine = self._db_port.get_household_engine()
        with self._write_lock, engine.begin() as conn:
            _require_home(conn)
            conn.execute(INSERT_MEMBER_SQL, _member_params(member))

    def remove_member(self, member_id: str) -> bool:
        """Delete a member and the expenses individually assigned to them."""
        self.prepare_schema()
        engine = self._db_port.get_household_engine()
        with self._write_lock, engine.begin() as conn:
            result = conn.execute(DELETE_MEMBER_SQL, {"id": member_id})
            if result.rowcount == 0:
                return False
            conn.execute(
                DELETE_ASSIGNED_EXPENSES_SQL,
                {"member_id": member_id},
            )
        return True

    def add_expense(self, expense: Expense) -> None:
        """Append an expense to the active home."""
        self.prepare_schema()
        engine = self._db_port.get_household_engine()
        with self._write_lock, engine.begin() as conn:
            _require_home(conn)
            conn.execute(INSERT_EXPENSE_SQL, _expense_params(expense))

    def remove_expense(self, expense_id: str) -> bool:
        """Delete an expense."""
        self.prepare_schema()
        engine = self._db_port.get_household_engine()
        with self._write_lock, engine.begin() as conn:
            result = conn.execute(DELETE_EXPENSE_SQL, {"id": expense_id})
            return result.rowcount > 0

    def reset(self) -> None:
        """Drop the active home and all its data."""
        self.prepare_schema()
        engine = self._db_port.get_household_engine()
        with self._write_lock, engine.begin() as conn:
            _clear_tables(conn)


def _clear_tables(conn: Connection) -> None:
    for statement in CLEAR_TABLES_SQL:
        conn.exec_driver_sql(statement)


def _require_home(conn: Connection) -> None:
    if conn.execute(SELECT_HOME_SQL).first() is None:
        raise NoActiveHomeError()


def _parse_timestamp(value) -> datetime:
    if isinstance(value, datetime):
        return value
    return datetime.fromisoformat(str(value))


def _home_params(home: Home) -> dict[str, str]:
    return {
        "id": home.id,
        "name": home.name,
        "share_code": home.share_code,
        "created_at": home.created_at.isoformat(),
    }


def _member_params(member: Member) -> dict[str, object]:
    return {
        "id": member.id,
        "home_id": member.home_id,
        "name": member.name,
        "monthly_income": float(member.monthly_income),
        "created_at": member.created_at.isoformat(),
    }


def _expense_params(expense: Expense) -> dict[str, object]:
    return {
        "id": expense.id,
        "home_id": expense.home_id,
        "description": expense.description,
        "amount": float(expense.amount),
        "expense_type": expense.expense_type.value,
        "scope": expense.scope.value,
        "member_id_assigned": expense.member_id_assigned,
        "created_at": expense.created_at.isoformat(),
    }


def _to_member(row) -> Member:
    return Member(
        id=row.id,
        home_id=row.home_id,
        name=row.name,
        monthly_income=float(row.monthly_income),
        created_at=_parse_timestamp(row.created_at),
    )


def _to_expense(row) -> Expense:
    return Expense(
        id=row.id,
        home_id=row.home_id,
        description=row.description,
        amount=float(row.amount),
        expense_type=ExpenseType(row.expense_type),
        scope=ExpenseScope(row.scope),
        member_id_assigned=row.member_id_assigned,
        created_at=_parse_timestamp(row.created_at),
    )


__all__ = [
    "SqlAlchemyHomeStore",
    "CREATE_HOMES_SQL",
    "CREATE_MEMBERS_SQL",
    "CREATE_EXPENSES_SQL",
]
