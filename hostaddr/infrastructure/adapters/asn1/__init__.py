"""pyasn1 adapters for the HostAddress wire format."""

from hostaddr.infrastructure.adapters.asn1.host_address_schema import (
    HostAddressesRecord,
    HostAddressRecord,
    Int32,
    decode_host_address,
    decode_host_addresses,
    encode_host_address,
    encode_host_addresses,
)
from hostaddr.infrastructure.adapters.asn1.octet_string_codec import (
    Pyasn1OctetStringCodec,
)

__all__: list[str] = [
    "HostAddressRecord",
    "HostAddressesRecord",
    "Int32",
    "Pyasn1OctetStringCodec",
    "decode_host_address",
    "decode_host_addresses",
    "encode_host_address",
    "encode_host_addresses",
]
