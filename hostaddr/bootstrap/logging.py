"""Bootstrap wiring for logging configuration."""

from __future__ import annotations

from hostaddr.config.codec_config import AddressCodecConfig
from hostaddr.infrastructure.observability import configure_structlog as _configure_structlog


def configure_structlog(environment: str) -> None:
    """Configure structlog for the given environment."""
    _configure_structlog(environment=environment)


def configure_logging_from_environment() -> None:
    """Configure structlog using HOSTADDR_LOG_ENVIRONMENT."""
    configure_structlog(AddressCodecConfig.from_environment().log_environment)


__all__ = ["configure_logging_from_environment", "configure_structlog"]
