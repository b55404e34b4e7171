"""Domain errors for hostaddr.

Provides specific exception classes for different failure scenarios.
All exceptions inherit from HostAddressError.
"""

from hostaddr.domain.errors.host_address import (
    DecodeError,
    FormatError,
    HostAddressValidationError,
    UnsupportedFamilyError,
)

__all__: list[str] = [
    "DecodeError",
    "FormatError",
    "HostAddressValidationError",
    "UnsupportedFamilyError",
]
