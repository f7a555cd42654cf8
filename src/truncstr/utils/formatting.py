"""Text truncation functions."""

from __future__ import annotations

MARKER = "."


class InvalidWidthError(ValueError):
    """Exception raised when a negative width is requested."""

    pass


def _check_width(width: int) -> None:
    if isinstance(width, bool) or not isinstance(width, int):
        raise TypeError(f"width must be an integer, got {type(width).__name__}")
    if width < 0:
        raise InvalidWidthError(f"width must be non-negative, got {width}")


def truncate(text: str, width: int) -> str:
    """Truncate text to fit within width characters.

    When the text is longer than width, the last kept position holds
    MARKER. A width of 1 has no room for both content and marker, so
    only the first character is kept.

    Args:
        text: Text to truncate
        width: Maximum length of the result (>= 0)

    Returns:
        The original text if it fits, otherwise a string of exactly
        width characters

    Raises:
        InvalidWidthError: If width is negative
        TypeError: If width is not an integer
    """
    _check_width(width)
    if len(text) <= width:
        return text
    if width > 1:
        return text[: width - 1] + MARKER
    return text[:width]


def is_truncated(text: str, width: int) -> bool:
    """Check whether truncate(text, width) would shorten text."""
    _check_width(width)
    return len(text) > width
