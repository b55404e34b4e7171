"""
hostaddr - Kerberos host address primitives (RFC 4120, section 5.2.5)

Host addresses pair an address-family tag with an encoded address value
and restrict where a ticket may be presented. This package converts
observed client endpoints into that tagged form and provides the exact
equality and containment checks used when validating address
restrictions.
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
