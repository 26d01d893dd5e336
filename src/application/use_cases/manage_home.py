"""Use cases to create, join, and leave the active home."""

from datetime import datetime, timezone
from uuid import uuid4

from src.application.ports.home_store import HomeStorePort
from src.domain.constants import JOINED_HOME_NAME_PREFIX
from src.domain.models import Home
from src.domain.services.normalization import (
    generate_share_code,
    normalize_share_code,
)
from src.domain.services.validation import ValidationError, require_text
from src.infrastructure.logging.logger import get_usage_logger


class CreateHomeUseCase:
    """Create a new home and make it the active one."""

    def __init__(self, store: HomeStorePort, logger=None) -> None:
        """Initialize the use case.

        Args:
            store: Port holding the active home.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._store = store
        self._logger = logger or get_usage_logger()

    def execute(self, name: str, share_code: str | None = None) -> Home:
        """Create the home.

        Args:
            name: Display name typed by the user.
            share_code: Optional code; a random one is generated when absent.

        Returns:
            Home: The newly active home.

        Raises:
            ValidationError: If the name is blank.
        """
        home = Home(
            id=str(uuid4()),
            name=require_text(name, "Home name"),
            share_code=normalize_share_code(share_code)
            or generate_share_code(),
            created_at=datetime.now(timezone.utc),
        )
        self._store.save_home(home)
        self._logger.info(
            f"Home created: id={home.id}, share_code={home.share_code}"
        )
        return home


class JoinHomeUseCase:
    """Join a home through its share code.

    Joining is local only: a fresh home carrying the code is created, no
    remote data is fetched.
    """

    def __init__(self, store: HomeStorePort, logger=None) -> None:
        self._store = store
        self._logger = logger or get_usage_logger()

    def execute(self, share_code: str) -> Home:
        """Create a local home for the given share code.

        Args:
            share_code: Code received from another member.

        Returns:
            Home: The newly active home.

        Raises:
            ValidationError: If the code is blank.
        """
        code = normalize_share_code(share_code)
        if code is None:
            raise ValidationError("Share code must not be blank")
        home = Home(
            id=str(uuid4()),
            name=f"{JOINED_HOME_NAME_PREFIX} {code}",
            share_code=code,
            created_at=datetime.now(timezone.utc),
        )
        self._store.save_home(home)
        self._logger.info(f"Home joined: id={home.id}, share_code={code}")
        return home


class ResetHomeUseCase:
    """Leave the active home, dropping its data."""

    def __init__(self, store: HomeStorePort, logger=None) -> None:
        self._store = store
        self._logger = logger or get_usage_logger()

    def execute(self) -> None:
        """Reset the store."""
        self._store.reset()
        self._logger.info("Active home reset")


__all__ = ["CreateHomeUseCase", "JoinHomeUseCase", "ResetHomeUseCase"]
