"""
Domain layer - pure host address logic.

This layer contains:
- Value objects (HostAddress, HostAddressSet, AddressType)
- Endpoint parsing
- Domain exceptions

CRITICAL: This layer must NOT import from application or infrastructure.
Only stdlib and typing imports are allowed.
"""

from hostaddr.domain.errors import (
    DecodeError,
    FormatError,
    HostAddressValidationError,
    UnsupportedFamilyError,
)
from hostaddr.domain.exceptions import HostAddressError
from hostaddr.domain.models import AddressType, HostAddress, HostAddressSet

__all__: list[str] = [
    "AddressType",
    "DecodeError",
    "FormatError",
    "HostAddress",
    "HostAddressError",
    "HostAddressSet",
    "HostAddressValidationError",
    "UnsupportedFamilyError",
]
