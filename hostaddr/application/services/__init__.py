"""Application services for hostaddr."""

from hostaddr.application.services.address_codec import AddressCodec

__all__: list[str] = ["AddressCodec"]
