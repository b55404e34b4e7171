"""Base exception classes for the hostaddr domain layer."""


class HostAddressError(Exception):
    """Base exception for all host address errors.

    All domain-specific exceptions MUST inherit from this class so
    callers can reject a protocol exchange with a single handler.
    """

    def __init__(self, message: str = "") -> None:
        """Initialize the exception with an optional message.

        Args:
            message: Human-readable error description.
        """
        super().__init__(message)
