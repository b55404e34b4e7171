"""
Pytest configuration and shared fixtures for hostaddr tests.

Testing Standards:
- Unit tests go in tests/unit/<layer>/
- Integration tests go in tests/integration/
- structlog is reset after every test so capture_logs sees every event
"""

from collections.abc import Iterator

import pytest
import structlog

from hostaddr.domain.models import AddressType, HostAddress


@pytest.fixture(autouse=True)
def reset_structlog() -> Iterator[None]:
    """Restore structlog defaults after each test."""
    yield
    structlog.reset_defaults()


@pytest.fixture
def project_version() -> str:
    """Provide the current project version for tests."""
    from hostaddr import __version__

    return __version__


@pytest.fixture
def ipv4_address() -> HostAddress:
    """10.0.0.1 as produced by the codec (DER OCTET STRING of the text)."""
    return HostAddress(addr_type=AddressType.IPV4, address=b"\x04\x0810.0.0.1")


@pytest.fixture
def other_ipv4_address() -> HostAddress:
    """10.0.0.2 as produced by the codec."""
    return HostAddress(addr_type=AddressType.IPV4, address=b"\x04\x0810.0.0.2")


@pytest.fixture
def ipv6_address() -> HostAddress:
    """2001:db8::1 as produced by the codec."""
    return HostAddress(addr_type=AddressType.IPV6, address=b"\x04\x0b2001:db8::1")
