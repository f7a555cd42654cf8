"""truncstr - fit strings into a fixed display width."""

from .utils import MARKER, InvalidWidthError, truncate, is_truncated

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "MARKER",
    "InvalidWidthError",
    "truncate",
    "is_truncated",
]
