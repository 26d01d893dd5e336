"""Application-level errors."""


class NoActiveHomeError(RuntimeError):
    """Raised when a mutation needs a home but none is active."""

    def __init__(self) -> None:
        super().__init__("No active home. Create or join a home first.")


__all__ = ["NoActiveHomeError"]
