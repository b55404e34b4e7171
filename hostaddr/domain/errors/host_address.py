"""Host address errors.

Provides specific exception classes for endpoint parsing, address family
classification, and payload decoding. All exceptions inherit from
HostAddressError.

None of these errors are retried or suppressed; the caller decides how
to surface them (usually by rejecting the protocol exchange).
"""

from __future__ import annotations

from hostaddr.domain.exceptions import HostAddressError


class FormatError(HostAddressError):
    """Error when an endpoint string cannot be parsed.

    Raised when the "host:port" separator is missing or misplaced, or
    when the host part is not an IP literal.

    Attributes:
        endpoint: The rejected endpoint string.
        reason: Short description of what was wrong.
    """

    def __init__(self, endpoint: str, reason: str) -> None:
        """Initialize the error.

        Args:
            endpoint: The rejected endpoint string.
            reason: Short description of what was wrong.
        """
        self.endpoint = endpoint
        self.reason = reason
        super().__init__(f"Invalid format of client address {endpoint!r}: {reason}")


class UnsupportedFamilyError(HostAddressError):
    """Error when a parsed IP is neither IPv4 nor IPv6.

    Attributes:
        endpoint: The endpoint whose host could not be classified.
    """

    def __init__(self, endpoint: str) -> None:
        """Initialize the error.

        Args:
            endpoint: The endpoint whose host could not be classified.
        """
        self.endpoint = endpoint
        super().__init__(f"Could not determine address type of client address {endpoint!r}")


class DecodeError(HostAddressError):
    """Error when an encoded payload is not well formed.

    Raised when the inner octet-string payload of a host address, or a
    complete DER-encoded HostAddress / HostAddresses value, cannot be
    decoded.

    Attributes:
        reason: Description of the decoding failure.
    """

    def __init__(self, reason: str) -> None:
        """Initialize the error.

        Args:
            reason: Description of the decoding failure.
        """
        self.reason = reason
        super().__init__(f"Could not decode host address payload: {reason}")


class HostAddressValidationError(HostAddressError):
    """Error when a HostAddress is constructed from ill-typed fields."""

    pass
