"""Schema tote exception hierarchy.

This module defines the errors raised by the store itself.
Read and parse failures are not wrapped and reach callers unchanged.
"""

from __future__ import annotations


class ToteError(Exception):
    """Base exception for all schema tote failures."""


class ToteConfigError(ToteError):
    """Raised for invalid runtime configuration."""


class ToteShapeError(ToteError):
    """Raised when a loaded JSON document is not a top-level array."""


class ToteSourceError(ToteError):
    """Raised when a source locator cannot be interpreted."""


class ToteDependencyError(ToteError):
    """Raised when an optional runtime dependency is missing."""
