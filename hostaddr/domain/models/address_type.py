"""Address family registry (RFC 4120, section 7.5.3).

The values are wire constants and must be preserved verbatim for
interoperability with other Kerberos implementations.
"""

from __future__ import annotations

from enum import IntEnum


class AddressType(IntEnum):
    """Address family tags carried in the addr-type field.

    Only IPV4 and IPV6 can be built from an observed endpoint. The other
    members are recognized so that decoded addresses can be classified,
    but no endpoint conversion exists for them.
    """

    IPV4 = 2
    DIRECTIONAL = 3
    CHAOSNET = 5
    XNS = 6
    ISO = 7
    DECNET_PHASE_IV = 12
    APPLETALK_DDP = 16
    NETBIOS = 20
    IPV6 = 24

    @property
    def is_implemented(self) -> bool:
        """True if endpoints of this family can be converted."""
        return self in _IMPLEMENTED

    @property
    def expected_length(self) -> int | None:
        """Length in bytes of the packed binary address, if known."""
        return _PACKED_LENGTHS.get(self)

    @classmethod
    def classify(cls, tag: int) -> AddressType | None:
        """Return the registry member for a tag.

        Args:
            tag: Raw addr-type value.

        Returns:
            The matching AddressType, or None when the tag is not in the
            registry at all.
        """
        try:
            return cls(tag)
        except ValueError:
            return None


_IMPLEMENTED: frozenset[AddressType] = frozenset({AddressType.IPV4, AddressType.IPV6})

_PACKED_LENGTHS: dict[AddressType, int] = {
    AddressType.IPV4: 4,
    AddressType.IPV6: 16,
}
