"""Lazy, chainable query operators over Python iterables.

Queries are started from the functions in ``linqpy.query``.
"""

__version__ = "0.1.0"
__all__ = ["__version__"]