"""DER OCTET STRING codec backed by pyasn1.

Implements OctetStringCodecProtocol. Wrapping produces the primitive
DER form (tag 0x04, definite length, content).
"""

from __future__ import annotations

from pyasn1.codec.der import decoder, encoder
from pyasn1.error import PyAsn1Error
from pyasn1.type import univ

from hostaddr.domain.errors.host_address import DecodeError


class Pyasn1OctetStringCodec:
    """OCTET STRING codec using pyasn1's DER encoder and decoder."""

    def wrap(self, content: bytes) -> bytes:
        """Encode content as a DER OCTET STRING."""
        return encoder.encode(univ.OctetString(content))

    def unwrap(self, encoded: bytes) -> bytes:
        """Decode a single DER OCTET STRING.

        Raises:
            DecodeError: If the input is empty, truncated, carries a
                different tag, is not in DER form, or has trailing bytes.
        """
        if not encoded:
            raise DecodeError("empty payload")
        try:
            value, remainder = decoder.decode(encoded, asn1Spec=univ.OctetString())
        except PyAsn1Error as exc:
            raise DecodeError(str(exc)) from exc
        if remainder:
            raise DecodeError(f"{len(remainder)} trailing byte(s) after octet string")
        if encoder.encode(value) != encoded:
            raise DecodeError("not DER: octet string is constructed or has a non-minimal length")
        return bytes(value)
