"""Host address value objects (RFC 4120, section 5.2.5).

HostAddress     ::= SEQUENCE  {
        addr-type       [0] Int32,
        address         [1] OCTET STRING
}

HostAddresses   ::= SEQUENCE OF HostAddress

HostAddresses is always used as an OPTIONAL field of a protocol message
and should not be empty when present. Enforcing that is the job of the
embedding message, not of this module.

Equality is always exact: an IPv4-mapped IPv6 address never equals its
IPv4 form, and payload bytes are compared without any normalization.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass, field

from hostaddr.domain.errors.host_address import HostAddressValidationError
from hostaddr.domain.models.address_type import AddressType

INT32_MIN: int = -(2**31)
INT32_MAX: int = 2**31 - 1


@dataclass(frozen=True, eq=True)
class HostAddress:
    """Single host address - immutable.

    Attributes:
        addr_type: Address family tag. Locally built values use AddressType
            members; decoded values may carry any Int32.
        address: Raw payload bytes. For addresses built from an endpoint
            this is a DER OCTET STRING wrapping the textual address.
    """

    addr_type: int
    address: bytes

    def __post_init__(self) -> None:
        """Validate field types.

        Raises:
            HostAddressValidationError: If a field has the wrong type or
                addr_type does not fit in an Int32.
        """
        if isinstance(self.addr_type, bool) or not isinstance(self.addr_type, int):
            raise HostAddressValidationError(
                f"addr_type must be int, got {type(self.addr_type).__name__}"
            )
        if not INT32_MIN <= self.addr_type <= INT32_MAX:
            raise HostAddressValidationError(
                f"addr_type must fit in Int32, got {self.addr_type}"
            )
        if not isinstance(self.address, bytes):
            raise HostAddressValidationError(
                f"address must be bytes, got {type(self.address).__name__}"
            )

    @property
    def family(self) -> AddressType | None:
        """Registry member for addr_type, or None for unknown tags."""
        return AddressType.classify(self.addr_type)

    def equal(self, other: HostAddress) -> bool:
        """Check exact equality with another host address.

        Returns:
            True iff both addr_type and the address bytes are identical.
        """
        return host_address_equal(self, other)


@dataclass(frozen=True)
class HostAddressSet:
    """Ordered, immutable collection of host addresses.

    Order is kept for deterministic serialization but carries no weight
    in contains() or equal().

    Attributes:
        addresses: The host addresses, in wire order.
    """

    addresses: tuple[HostAddress, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        """Freeze the addresses into a tuple and check element types."""
        addresses = tuple(self.addresses)
        for item in addresses:
            if not isinstance(item, HostAddress):
                raise HostAddressValidationError(
                    f"HostAddressSet elements must be HostAddress, got {type(item).__name__}"
                )
        object.__setattr__(self, "addresses", addresses)

    @classmethod
    def from_iterable(cls, addresses: Iterable[HostAddress]) -> HostAddressSet:
        """Build a set from any iterable of host addresses."""
        return cls(addresses=tuple(addresses))

    def __len__(self) -> int:
        return len(self.addresses)

    def __iter__(self) -> Iterator[HostAddress]:
        return iter(self.addresses)

    def __getitem__(self, index: int) -> HostAddress:
        return self.addresses[index]

    def __contains__(self, item: object) -> bool:
        return isinstance(item, HostAddress) and self.contains(item)

    @property
    def is_empty(self) -> bool:
        """True if the set holds no addresses."""
        return not self.addresses

    def contains(self, address: HostAddress) -> bool:
        """Check whether an address is permitted by this set.

        Args:
            address: Candidate host address (e.g. the observed client).

        Returns:
            True if some element is exactly equal to the candidate.
        """
        return host_addresses_contain(self.addresses, address)

    def equal(self, other: HostAddressSet | Sequence[HostAddress]) -> bool:
        """Compare against another collection of host addresses.

        Lengths must match and every element of ``other`` must be found
        in this set. Duplicates are not matched one-to-one, so this is
        not multiset equality.
        """
        return host_addresses_equal(self.addresses, other)


def host_address_equal(a: HostAddress, b: HostAddress) -> bool:
    """Exact equality of two host addresses."""
    if a.addr_type != b.addr_type:
        return False
    return a.address == b.address


def host_addresses_contain(
    addresses: Iterable[HostAddress], address: HostAddress
) -> bool:
    """Linear scan for an exactly equal element; stops at the first match."""
    for candidate in addresses:
        if host_address_equal(candidate, address):
            return True
    return False


def host_addresses_equal(
    a: Sequence[HostAddress] | HostAddressSet,
    b: Sequence[HostAddress] | HostAddressSet,
) -> bool:
    """Length check plus containment of every element of ``b`` in ``a``.

    Args:
        a: Collection searched for matches.
        b: Collection whose elements must all be found in ``a``.

    Returns:
        True if both have the same length and ``a`` contains each
        element of ``b``.
    """
    if len(a) != len(b):
        return False
    for address in b:
        if not host_addresses_contain(a, address):
            return False
    return True
