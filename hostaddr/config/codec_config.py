"""Address codec configuration.

This module defines configuration for endpoint conversion and logging
with environment variable overrides.

Environment Variables:
- HOSTADDR_UNWRAP_IPV4_MAPPED: Tag "::ffff:a.b.c.d" hosts as IPv4 (default: true)
- HOSTADDR_LOG_ENVIRONMENT: "production" (JSON) or "development" (console)
  log output (default: production)
"""

from __future__ import annotations

import os
from dataclasses import dataclass

LOG_ENVIRONMENTS: frozenset[str] = frozenset({"production", "development"})

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES = frozenset({"0", "false", "no", "off"})


def _get_bool_env(key: str, default: bool) -> bool:
    """Get boolean environment variable with default.

    Args:
        key: Environment variable name.
        default: Default value if not set or unrecognized.

    Returns:
        Parsed boolean value or default.
    """
    value = os.environ.get(key)
    if value is None:
        return default
    value = value.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    return default


def _get_str_env(key: str, default: str) -> str:
    """Get string environment variable with default.

    Args:
        key: Environment variable name.
        default: Default value if not set or empty.

    Returns:
        The stripped value or default.
    """
    value = os.environ.get(key, "").strip()
    return value or default


@dataclass(frozen=True)
class AddressCodecConfig:
    """Configuration for the address codec.

    Attributes:
        unwrap_ipv4_mapped: Reduce IPv4-mapped IPv6 hosts to their IPv4
            form and tag them IPV4. Default: True.
        log_environment: Log output mode passed to configure_structlog.
            Default: "production".
    """

    unwrap_ipv4_mapped: bool = True
    log_environment: str = "production"

    def __post_init__(self) -> None:
        """Validate configuration values."""
        if self.log_environment not in LOG_ENVIRONMENTS:
            raise ValueError(
                f"log_environment must be one of {sorted(LOG_ENVIRONMENTS)}, "
                f"got {self.log_environment!r}"
            )

    @classmethod
    def from_environment(cls) -> "AddressCodecConfig":
        """Create config from environment variables with defaults.

        Environment Variables:
            HOSTADDR_UNWRAP_IPV4_MAPPED: IPv4-mapped unwrapping (default: true)
            HOSTADDR_LOG_ENVIRONMENT: Log output mode (default: production)

        Returns:
            AddressCodecConfig with values from environment or defaults.

        Raises:
            ValueError: If HOSTADDR_LOG_ENVIRONMENT names an unknown mode.
        """
        return cls(
            unwrap_ipv4_mapped=_get_bool_env("HOSTADDR_UNWRAP_IPV4_MAPPED", True),
            log_environment=_get_str_env("HOSTADDR_LOG_ENVIRONMENT", "production"),
        )


# Default config
DEFAULT_ADDRESS_CODEC_CONFIG = AddressCodecConfig()

# Keep IPv4-mapped IPv6 hosts tagged IPV6
STRICT_ADDRESS_CODEC_CONFIG = AddressCodecConfig(unwrap_ipv4_mapped=False)

# Console log output for local work
DEVELOPMENT_ADDRESS_CODEC_CONFIG = AddressCodecConfig(log_environment="development")
