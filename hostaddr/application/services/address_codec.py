"""Address codec service.

Converts an observed client endpoint ("host:port") into the tagged
HostAddress form carried in tickets and authenticators, and recovers the
textual address from such a value.

The address payload is the textual form of the IP address wrapped in an
OCTET STRING by the injected codec, not the packed binary address. The
port is discarded.

Failures are logged and re-raised; nothing is retried or suppressed.
"""

from __future__ import annotations

from structlog import get_logger

from hostaddr.application.ports.octet_string_codec import OctetStringCodecProtocol
from hostaddr.config.codec_config import DEFAULT_ADDRESS_CODEC_CONFIG, AddressCodecConfig
from hostaddr.domain.errors.host_address import (
    DecodeError,
    FormatError,
    UnsupportedFamilyError,
)
from hostaddr.domain.models.host_address import HostAddress
from hostaddr.domain.services.endpoint_parser import parse_host

logger = get_logger(__name__)

TEXT_ENCODING: str = "ascii"


class AddressCodec:
    """Service converting between endpoint strings and HostAddress values.

    Holds no state besides its collaborators, so a single instance may be
    shared freely.

    Attributes:
        _octets: Codec used to wrap and unwrap the address payload.
        _config: Codec configuration.

    Example:
        >>> codec = AddressCodec(Pyasn1OctetStringCodec())
        >>> address = codec.from_endpoint("192.168.1.5:88")
        >>> codec.decode_address_text(address)
        '192.168.1.5'
    """

    def __init__(
        self,
        octets: OctetStringCodecProtocol,
        config: AddressCodecConfig | None = None,
    ) -> None:
        """Initialize the codec.

        Args:
            octets: OCTET STRING codec (the tagged-binary engine).
            config: Codec configuration. Defaults to
                DEFAULT_ADDRESS_CODEC_CONFIG.
        """
        self._octets = octets
        self._config = config or DEFAULT_ADDRESS_CODEC_CONFIG

    @property
    def config(self) -> AddressCodecConfig:
        """Configuration in use."""
        return self._config

    def from_endpoint(self, endpoint: str) -> HostAddress:
        """Build a HostAddress from a "host:port" endpoint.

        Args:
            endpoint: Observed client endpoint, e.g. "10.0.0.1:88" or
                "[2001:db8::1]:88".

        Returns:
            HostAddress tagged IPV4 or IPV6 whose payload is the
            OCTET STRING wrapped textual address.

        Raises:
            FormatError: If the endpoint cannot be split or the host is
                not an IP literal.
            UnsupportedFamilyError: If the host is neither IPv4 nor IPv6.
        """
        try:
            parsed = parse_host(
                endpoint, unwrap_ipv4_mapped=self._config.unwrap_ipv4_mapped
            )
        except (FormatError, UnsupportedFamilyError) as exc:
            logger.warning(
                "endpoint_rejected",
                endpoint=endpoint,
                error_type=type(exc).__name__,
                reason=str(exc),
            )
            raise

        address = HostAddress(
            addr_type=parsed.addr_type,
            address=self._octets.wrap(parsed.text.encode(TEXT_ENCODING)),
        )
        logger.debug(
            "host_address_built",
            addr_type=int(parsed.addr_type),
            address_text=parsed.text,
        )
        return address

    def decode_address_text(self, host_address: HostAddress) -> str:
        """Recover the textual address carried by a HostAddress.

        Args:
            host_address: Address whose payload is an OCTET STRING.

        Returns:
            The text content of the payload.

        Raises:
            DecodeError: If the payload is not a single well-formed
                OCTET STRING or its content is not ASCII text.
        """
        try:
            content = self._octets.unwrap(host_address.address)
            return content.decode(TEXT_ENCODING)
        except UnicodeDecodeError as exc:
            logger.warning(
                "address_payload_rejected",
                addr_type=host_address.addr_type,
                reason="payload is not ASCII text",
            )
            raise DecodeError(f"payload is not {TEXT_ENCODING} text") from exc
        except DecodeError as exc:
            logger.warning(
                "address_payload_rejected",
                addr_type=host_address.addr_type,
                reason=exc.reason,
            )
            raise
