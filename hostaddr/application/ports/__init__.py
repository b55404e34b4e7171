"""Application ports - interfaces to external collaborators."""

from hostaddr.application.ports.octet_string_codec import OctetStringCodecProtocol

__all__: list[str] = ["OctetStringCodecProtocol"]
