"""Composition root for wiring dependencies.

This package centralizes infrastructure-aware wiring so callers can get a
ready AddressCodec without importing pyasn1 adapters directly.
"""
