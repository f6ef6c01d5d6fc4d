"""
Character-class and length predicates - no external dependencies.
"""

__all__ = [
    "is_alpha",
    "is_alphanumeric",
    "is_upper",
    "is_lower",
    "is_blank",
    "is_length_valid",
]

import sys


def is_alpha(text: str) -> bool:
    """Check if text is non-empty and made only of letters."""
    return text.isalpha()


def is_alphanumeric(text: str) -> bool:
    """Check if text is non-empty and made only of letters and digits."""
    return text.isalnum()


def is_upper(text: str) -> bool:
    """
    Check if text is alphabetic and entirely uppercase.

    A string with any non-letter (digits, spaces, punctuation), or with no
    cased letter at all, is neither upper nor lower.

    Example:
        >>> is_upper("HELLO")
        True
        >>> is_upper("HELLO WORLD")
        False
    """
    return text.isalpha() and text.isupper()


def is_lower(text: str) -> bool:
    """
    Check if text is alphabetic and entirely lowercase.

    Example:
        >>> is_lower("hello")
        True
        >>> is_lower("hello1")
        False
    """
    return text.isalpha() and text.islower()


def is_blank(text: str) -> bool:
    """Check if text is empty or whitespace only."""
    return not text.strip()


def is_length_valid(
    text: str,
    min_length: int = 1,
    max_length: int = sys.maxsize,
) -> bool:
    """
    Check if the character count of text lies in ``[min_length, max_length]``.

    Args:
        text: String to measure
        min_length: Minimum length (inclusive)
        max_length: Maximum length (inclusive)

    Returns:
        True if the length is within range

    Example:
        >>> is_length_valid("hello", 3, 10)
        True
        >>> is_length_valid("")
        False
    """
    return min_length <= len(text) <= max_length
