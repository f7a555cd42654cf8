"""Utility functions for truncstr."""

from .formatting import MARKER, InvalidWidthError, truncate, is_truncated

__all__ = [
    "MARKER",
    "InvalidWidthError",
    "truncate",
    "is_truncated",
]
