"""Endpoint parsing domain service.

Splits a "host:port" endpoint into its host part and classifies the
host as an IPv4 or IPv6 literal. No name resolution is performed; a
host that is not an IP literal is rejected.

Splitting rules:
- The last colon separates host from port.
- An IPv6 host must be enclosed in brackets ("[::1]:88").
- An unbracketed host may not contain a colon.
- Brackets may only appear around the host.
"""

from __future__ import annotations

import ipaddress
from dataclasses import dataclass

from hostaddr.domain.errors.host_address import FormatError, UnsupportedFamilyError
from hostaddr.domain.models.address_type import AddressType

IPAddress = ipaddress.IPv4Address | ipaddress.IPv6Address


@dataclass(frozen=True)
class ParsedHost:
    """Host part of an endpoint, classified.

    Attributes:
        addr_type: IPV4 or IPV6.
        ip: The parsed address. IPv4-mapped IPv6 hosts are reduced to
            their IPv4 form when unwrapping is enabled.
    """

    addr_type: AddressType
    ip: IPAddress

    @property
    def text(self) -> str:
        """Canonical textual form of the address.

        IPv4-mapped IPv6 addresses are always written "::ffff:a.b.c.d" so
        the payload bytes do not depend on the interpreter version.
        """
        if isinstance(self.ip, ipaddress.IPv6Address) and self.ip.ipv4_mapped is not None:
            return f"::ffff:{self.ip.ipv4_mapped}"
        return str(self.ip)


def split_host_port(endpoint: str) -> tuple[str, str]:
    """Split an endpoint into host and port.

    Args:
        endpoint: String of the form "host:port" or "[host]:port".

    Returns:
        (host, port) with any brackets removed from host.

    Raises:
        FormatError: If the separator is missing or misplaced.
    """
    if not isinstance(endpoint, str):
        raise FormatError(repr(endpoint), "endpoint must be a string")

    last_colon = endpoint.rfind(":")
    if last_colon < 0:
        raise FormatError(endpoint, "missing port in address")

    if endpoint.startswith("["):
        end = endpoint.find("]")
        if end < 0:
            raise FormatError(endpoint, "missing ']' in address")
        if end + 1 == len(endpoint):
            raise FormatError(endpoint, "missing port in address")
        if end + 1 != last_colon:
            if endpoint[end + 1] == ":":
                raise FormatError(endpoint, "too many colons in address")
            raise FormatError(endpoint, "missing port in address")
        host = endpoint[1:end]
        host_start, port_start = 1, end + 1
    else:
        host = endpoint[:last_colon]
        if ":" in host:
            raise FormatError(endpoint, "too many colons in address")
        host_start, port_start = 0, 0

    if "[" in endpoint[host_start:]:
        raise FormatError(endpoint, "unexpected '[' in address")
    if "]" in endpoint[port_start:]:
        raise FormatError(endpoint, "unexpected ']' in address")

    return host, endpoint[last_colon + 1 :]


def parse_host(endpoint: str, unwrap_ipv4_mapped: bool = True) -> ParsedHost:
    """Parse and classify the host part of an endpoint.

    Args:
        endpoint: String of the form "host:port". The port is discarded.
        unwrap_ipv4_mapped: Treat "::ffff:a.b.c.d" as the IPv4 address
            a.b.c.d.

    Returns:
        The classified host.

    Raises:
        FormatError: If the endpoint cannot be split or the host is not
            an IP literal (zone identifiers are not accepted).
        UnsupportedFamilyError: If the address is neither 4 nor 16 bytes.
    """
    host, _port = split_host_port(endpoint)

    try:
        ip = ipaddress.ip_address(host)
    except ValueError:
        raise FormatError(endpoint, f"{host!r} is not an IP address") from None

    if isinstance(ip, ipaddress.IPv6Address):
        if ip.scope_id is not None:
            raise FormatError(endpoint, f"{host!r} carries a zone identifier")
        if unwrap_ipv4_mapped and ip.ipv4_mapped is not None:
            ip = ip.ipv4_mapped

    packed_length = len(ip.packed)
    if packed_length == AddressType.IPV4.expected_length:
        return ParsedHost(addr_type=AddressType.IPV4, ip=ip)
    if packed_length == AddressType.IPV6.expected_length:
        return ParsedHost(addr_type=AddressType.IPV6, ip=ip)
    raise UnsupportedFamilyError(endpoint)
