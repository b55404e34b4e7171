"""Bootstrap wiring for the address codec."""

from __future__ import annotations

from hostaddr.application.services.address_codec import AddressCodec
from hostaddr.config.codec_config import AddressCodecConfig
from hostaddr.infrastructure.adapters.asn1.octet_string_codec import (
    Pyasn1OctetStringCodec,
)
from hostaddr.infrastructure.observability.logging import get_logger_for_service

_address_codec: AddressCodec | None = None


def get_address_codec() -> AddressCodec:
    """Get address codec instance configured from the environment."""
    global _address_codec
    if _address_codec is None:
        config = AddressCodecConfig.from_environment()
        _address_codec = AddressCodec(Pyasn1OctetStringCodec(), config)
        get_logger_for_service("AddressCodec").info(
            "address_codec_initialized",
            unwrap_ipv4_mapped=config.unwrap_ipv4_mapped,
        )
    return _address_codec


def set_address_codec(codec: AddressCodec) -> None:
    """Set custom address codec (testing override)."""
    global _address_codec
    _address_codec = codec


def reset_address_codec() -> None:
    """Reset address codec singleton."""
    global _address_codec
    _address_codec = None
