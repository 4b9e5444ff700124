"""
Error taxonomy for bound construction.

Every error is a ``ValueError`` so callers that only care about "bad input"
can catch the builtin.
"""

from __future__ import annotations


class GeoBoundError(ValueError):
    """Base class for all construction-time precondition violations."""


class InvalidArgumentError(GeoBoundError):
    """Raised for a negative radius around a center point."""


class OutOfRangeError(GeoBoundError):
    """Raised when a map tile index is outside ``[0, 2**zoom)``."""


class InvalidEncodingError(GeoBoundError):
    """Raised when a GeoHash contains a character outside the base-32 alphabet."""
