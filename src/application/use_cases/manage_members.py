"""Use cases to add and remove home members."""

from datetime import datetime, timezone
from uuid import uuid4

from src.application.errors import NoActiveHomeError
from src.application.ports.home_store import HomeStorePort
from src.domain.models import Member
from src.domain.services.validation import require_positive, require_text
from src.infrastructure.logging.logger import get_usage_logger


class AddMemberUseCase:
    """Add a member with a monthly income to the active home."""

    def __init__(self, store: HomeStorePort, logger=None) -> None:
        """Initialize the use case.

        Args:
            store: Port holding the active home.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._store = store
        self._logger = logger or get_usage_logger()

    def execute(self, name: str, monthly_income) -> Member:
        """Validate the input and store the member.

        Args:
            name: Member display name.
            monthly_income: Declared monthly income, number or numeric text.

        Returns:
            Member: The stored member.

        Raises:
            NoActiveHomeError: If no home is active.
            ValidationError: If the name is blank or the income not positive.
        """
        snapshot = self._store.get_snapshot()
        if snapshot is None:
            raise NoActiveHomeError()
        member = Member(
            id=str(uuid4()),
            home_id=snapshot.home.id,
            name=require_text(name, "Member name"),
            monthly_income=require_positive(monthly_income, "Monthly income"),
            created_at=datetime.now(timezone.utc),
        )
        self._store.add_member(member)
        self._logger.info(
            f"Member added: id={member.id}, home_id={member.home_id}"
        )
        return member


class RemoveMemberUseCase:
    """Remove a member and the expenses individually assigned to them."""

    def __init__(self, store: HomeStorePort, logger=None) -> None:
        self._store = store
        self._logger = logger or get_usage_logger()

    def execute(self, member_id: str) -> bool:
        """Delete the member.

        Args:
            member_id: Identifier of the member to remove.

        Returns:
            bool: True when a member was removed.
        """
        removed = self._store.remove_member(member_id)
        if removed:
            self._logger.info(f"Member removed: id={member_id}")
        else:
            self._logger.warning(f"Member not found: id={member_id}")
        return removed


__all__ = ["AddMemberUseCase", "RemoveMemberUseCase"]
