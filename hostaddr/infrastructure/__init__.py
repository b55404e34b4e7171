"""
Infrastructure layer - adapters and cross-cutting concerns.

This layer contains:
- pyasn1 adapters for the DER wire format
- structlog observability configuration

May import from the domain and application layers.
"""
