"""Configuration module for hostaddr.

Available Configurations:
- AddressCodecConfig: Endpoint conversion and log output mode
"""

from hostaddr.config.codec_config import (
    DEFAULT_ADDRESS_CODEC_CONFIG,
    DEVELOPMENT_ADDRESS_CODEC_CONFIG,
    STRICT_ADDRESS_CODEC_CONFIG,
    AddressCodecConfig,
)

__all__ = [
    "AddressCodecConfig",
    "DEFAULT_ADDRESS_CODEC_CONFIG",
    "DEVELOPMENT_ADDRESS_CODEC_CONFIG",
    "STRICT_ADDRESS_CODEC_CONFIG",
]
