"""Domain models for hostaddr.

Value objects are immutable types defined by their attributes rather
than identity.
"""

from hostaddr.domain.models.address_type import AddressType
from hostaddr.domain.models.host_address import (
    HostAddress,
    HostAddressSet,
    host_address_equal,
    host_addresses_contain,
    host_addresses_equal,
)

__all__: list[str] = [
    "AddressType",
    "HostAddress",
    "HostAddressSet",
    "host_address_equal",
    "host_addresses_contain",
    "host_addresses_equal",
]
