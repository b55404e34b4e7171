"""Octet string codec port.

Defines the interface to the generic tagged-binary engine for the one
operation host addresses need from it: wrapping raw bytes in an
OCTET STRING encoding and unwrapping them again.
"""

from __future__ import annotations

from typing import Protocol


class OctetStringCodecProtocol(Protocol):
    """Protocol for OCTET STRING wrapping.

    Implementations must be pure and deterministic.

    Methods:
        wrap: Encode content bytes as a complete OCTET STRING.
        unwrap: Decode a complete OCTET STRING back to its content.
    """

    def wrap(self, content: bytes) -> bytes:
        """Encode content as an OCTET STRING.

        Args:
            content: Raw content bytes.

        Returns:
            The tag, length and content octets.
        """
        ...

    def unwrap(self, encoded: bytes) -> bytes:
        """Decode an OCTET STRING.

        Args:
            encoded: A single complete OCTET STRING encoding.

        Returns:
            The content bytes.

        Raises:
            DecodeError: If the input is not exactly one well-formed
                OCTET STRING.
        """
        ...
