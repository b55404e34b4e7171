"""Domain services for hostaddr.

Pure functions with no I/O and no retained state.
"""

from hostaddr.domain.services.endpoint_parser import (
    ParsedHost,
    parse_host,
    split_host_port,
)

__all__: list[str] = ["ParsedHost", "parse_host", "split_host_port"]
