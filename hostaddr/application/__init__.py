"""
Application layer - host address use cases.

This layer contains:
- Ports (abstract interfaces to the encoding engine)
- Services (endpoint conversion)

May import from the domain layer only.
"""
