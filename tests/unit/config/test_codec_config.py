"""Unit tests for AddressCodecConfig.

Tests for codec configuration including:
- Default values
- Environment variable loading
- Input validation
"""

from __future__ import annotations

import dataclasses
import os
from unittest.mock import patch

import pytest

from hostaddr.config.codec_config import (
    DEFAULT_ADDRESS_CODEC_CONFIG,
    DEVELOPMENT_ADDRESS_CODEC_CONFIG,
    STRICT_ADDRESS_CODEC_CONFIG,
    AddressCodecConfig,
)


class TestAddressCodecConfig:
    """Tests for AddressCodecConfig dataclass."""

    class TestDefaults:
        """Tests for default configuration values."""

        def test_default_unwrap_ipv4_mapped(self) -> None:
            """IPv4-mapped hosts are unwrapped by default."""
            assert AddressCodecConfig().unwrap_ipv4_mapped is True

        def test_default_log_environment(self) -> None:
            assert AddressCodecConfig().log_environment == "production"

        def test_is_frozen(self) -> None:
            config = AddressCodecConfig()
            with pytest.raises(dataclasses.FrozenInstanceError):
                config.unwrap_ipv4_mapped = False  # type: ignore[misc]

    class TestValidation:
        """Tests for configuration validation."""

        def test_unknown_log_environment_rejected(self) -> None:
            with pytest.raises(ValueError, match="log_environment"):
                AddressCodecConfig(log_environment="staging")

    class TestFromEnvironment:
        """Tests for environment variable loading."""

        def test_defaults_when_unset(self) -> None:
            with patch.dict(os.environ, {}, clear=True):
                config = AddressCodecConfig.from_environment()

            assert config == AddressCodecConfig()

        @pytest.mark.parametrize("value", ["0", "false", "No", " OFF "])
        def test_unwrap_disabled(self, value: str) -> None:
            with patch.dict(os.environ, {"HOSTADDR_UNWRAP_IPV4_MAPPED": value}):
                config = AddressCodecConfig.from_environment()

            assert config.unwrap_ipv4_mapped is False

        @pytest.mark.parametrize("value", ["1", "true", "YES", "on"])
        def test_unwrap_enabled(self, value: str) -> None:
            with patch.dict(os.environ, {"HOSTADDR_UNWRAP_IPV4_MAPPED": value}):
                config = AddressCodecConfig.from_environment()

            assert config.unwrap_ipv4_mapped is True

        def test_unrecognized_boolean_uses_default(self) -> None:
            with patch.dict(os.environ, {"HOSTADDR_UNWRAP_IPV4_MAPPED": "maybe"}):
                config = AddressCodecConfig.from_environment()

            assert config.unwrap_ipv4_mapped is True

        def test_log_environment(self) -> None:
            with patch.dict(os.environ, {"HOSTADDR_LOG_ENVIRONMENT": "development"}):
                config = AddressCodecConfig.from_environment()

            assert config.log_environment == "development"

        def test_empty_log_environment_uses_default(self) -> None:
            with patch.dict(os.environ, {"HOSTADDR_LOG_ENVIRONMENT": "  "}):
                config = AddressCodecConfig.from_environment()

            assert config.log_environment == "production"

        def test_invalid_log_environment_raises(self) -> None:
            with patch.dict(os.environ, {"HOSTADDR_LOG_ENVIRONMENT": "verbose"}):
                with pytest.raises(ValueError):
                    AddressCodecConfig.from_environment()

    class TestPresets:
        """Tests for pre-defined configurations."""

        def test_default_preset(self) -> None:
            assert DEFAULT_ADDRESS_CODEC_CONFIG == AddressCodecConfig()

        def test_strict_preset(self) -> None:
            assert STRICT_ADDRESS_CODEC_CONFIG.unwrap_ipv4_mapped is False

        def test_development_preset(self) -> None:
            assert DEVELOPMENT_ADDRESS_CODEC_CONFIG.log_environment == "development"
