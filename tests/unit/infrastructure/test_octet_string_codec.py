"""Unit tests for the pyasn1 OCTET STRING adapter."""

from __future__ import annotations

import pytest

from hostaddr.application.ports.octet_string_codec import OctetStringCodecProtocol
from hostaddr.domain.errors.host_address import DecodeError
from hostaddr.infrastructure.adapters.asn1.octet_string_codec import (
    Pyasn1OctetStringCodec,
)


@pytest.fixture
def octets() -> Pyasn1OctetStringCodec:
    return Pyasn1OctetStringCodec()


class TestWrap:
    """Tests for DER wrapping."""

    def test_short_form_length(self, octets: Pyasn1OctetStringCodec) -> None:
        assert octets.wrap(b"10.0.0.1") == b"\x04\x0810.0.0.1"

    def test_empty_content(self, octets: Pyasn1OctetStringCodec) -> None:
        assert octets.wrap(b"") == b"\x04\x00"

    def test_long_form_length(self, octets: Pyasn1OctetStringCodec) -> None:
        """Contents of 128 bytes or more use a long-form length."""
        assert octets.wrap(b"a" * 200) == b"\x04\x81\xc8" + b"a" * 200

    def test_satisfies_port(self, octets: Pyasn1OctetStringCodec) -> None:
        port: OctetStringCodecProtocol = octets
        assert port.unwrap(port.wrap(b"x")) == b"x"


class TestUnwrap:
    """Tests for DER unwrapping."""

    def test_well_formed(self, octets: Pyasn1OctetStringCodec) -> None:
        assert octets.unwrap(b"\x04\x0b192.168.1.5") == b"192.168.1.5"

    def test_empty_input(self, octets: Pyasn1OctetStringCodec) -> None:
        with pytest.raises(DecodeError, match="empty"):
            octets.unwrap(b"")

    def test_wrong_tag(self, octets: Pyasn1OctetStringCodec) -> None:
        """An INTEGER is not an OCTET STRING."""
        with pytest.raises(DecodeError):
            octets.unwrap(b"\x02\x01\x05")

    def test_truncated(self, octets: Pyasn1OctetStringCodec) -> None:
        with pytest.raises(DecodeError):
            octets.unwrap(b"\x04\x05abc")

    def test_trailing_bytes(self, octets: Pyasn1OctetStringCodec) -> None:
        with pytest.raises(DecodeError, match="trailing"):
            octets.unwrap(b"\x04\x01ab")

    def test_constructed_encoding_rejected(self, octets: Pyasn1OctetStringCodec) -> None:
        """A constructed OCTET STRING is BER, not DER."""
        with pytest.raises(DecodeError, match="not DER"):
            octets.unwrap(b"\x24\x0a\x04\x0810.0.0.1")

    def test_non_minimal_length_rejected(self, octets: Pyasn1OctetStringCodec) -> None:
        """Short contents must use the short-form length."""
        with pytest.raises(DecodeError, match="not DER"):
            octets.unwrap(b"\x04\x81\x0810.0.0.1")
