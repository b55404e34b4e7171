"""HostAddress wire schema (RFC 4120, section 5.2.5).

HostAddress     ::= SEQUENCE  {
        addr-type       [0] Int32,
        address         [1] OCTET STRING
}

HostAddresses   ::= SEQUENCE OF HostAddress

Both tags are explicit and context-specific, so the tag octets are
constructed (0xA0, 0xA1). Decoded values are converted to
domain models without checking addr_type against the address length.
"""

from __future__ import annotations

from pyasn1.codec.der import decoder, encoder
from pyasn1.error import PyAsn1Error
from pyasn1.type import base, constraint, namedtype, tag, univ

from hostaddr.domain.errors.host_address import DecodeError
from hostaddr.domain.models.host_address import (
    INT32_MAX,
    INT32_MIN,
    HostAddress,
    HostAddressSet,
)


def _explicit(tag_value: int) -> tag.Tag:
    return tag.Tag(tag.tagClassContext, tag.tagFormatConstructed, tag_value)


class Int32(univ.Integer):
    """Int32 ::= INTEGER (-2147483648..2147483647)"""

    subtypeSpec = univ.Integer.subtypeSpec + constraint.ValueRangeConstraint(
        INT32_MIN, INT32_MAX
    )


class HostAddressRecord(univ.Sequence):
    """HostAddress ::= SEQUENCE { addr-type [0] Int32, address [1] OCTET STRING }"""

    componentType = namedtype.NamedTypes(
        namedtype.NamedType("addr-type", Int32().subtype(explicitTag=_explicit(0))),
        namedtype.NamedType(
            "address", univ.OctetString().subtype(explicitTag=_explicit(1))
        ),
    )


class HostAddressesRecord(univ.SequenceOf):
    """HostAddresses ::= SEQUENCE OF HostAddress"""

    componentType = HostAddressRecord()


def _to_record(host_address: HostAddress) -> HostAddressRecord:
    record = HostAddressRecord()
    record["addr-type"] = int(host_address.addr_type)
    record["address"] = host_address.address
    return record


def _from_record(record: HostAddressRecord) -> HostAddress:
    return HostAddress(
        addr_type=int(record["addr-type"]),
        address=bytes(record["address"]),
    )


def _decode(data: bytes, spec: base.Asn1Item, what: str) -> base.Asn1Item:
    if not data:
        raise DecodeError(f"empty {what}")
    try:
        value, remainder = decoder.decode(data, asn1Spec=spec)
    except PyAsn1Error as exc:
        raise DecodeError(f"malformed {what}: {exc}") from exc
    if remainder:
        raise DecodeError(f"{len(remainder)} trailing byte(s) after {what}")
    if encoder.encode(value) != data:
        raise DecodeError(f"not DER: {what} is not in canonical encoding")
    return value


def encode_host_address(host_address: HostAddress) -> bytes:
    """DER-encode a single HostAddress."""
    return encoder.encode(_to_record(host_address))


def decode_host_address(data: bytes) -> HostAddress:
    """Decode a DER HostAddress.

    Raises:
        DecodeError: If the data is not exactly one well-formed HostAddress.
    """
    return _from_record(_decode(data, HostAddressRecord(), "HostAddress"))


def encode_host_addresses(addresses: HostAddressSet) -> bytes:
    """DER-encode HostAddresses, preserving element order."""
    records = HostAddressesRecord()
    records.clear()
    for position, host_address in enumerate(addresses):
        records.setComponentByPosition(position, _to_record(host_address))
    return encoder.encode(records)


def decode_host_addresses(data: bytes) -> HostAddressSet:
    """Decode DER HostAddresses into a HostAddressSet, in wire order.

    Raises:
        DecodeError: If the data is not exactly one well-formed
            SEQUENCE OF HostAddress.
    """
    records = _decode(data, HostAddressesRecord(), "HostAddresses")
    return HostAddressSet.from_iterable(_from_record(record) for record in records)
