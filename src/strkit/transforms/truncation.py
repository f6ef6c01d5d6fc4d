"""
Length limiting - no external dependencies.

Lengths are counted in characters, never bytes.
"""

__all__ = [
    "truncate",
    "words",
]

from loguru import logger

from strkit.config import DEFAULT_SUFFIX


def truncate(text: str, length: int, suffix: str = DEFAULT_SUFFIX) -> str:
    """
    Truncate text to length characters, suffix included.

    When length is shorter than the suffix, no text is kept and the suffix
    is returned on its own.

    Args:
        text: Text to truncate
        length: Maximum length including suffix
        suffix: Suffix to add if truncated

    Returns:
        Truncated text with suffix, or original if short enough

    Raises:
        ValueError: If length is negative

    Example:
        >>> truncate("This is a long sentence", 10)
        'This is...'
        >>> truncate("Short", 10)
        'Short'
    """
    if length < 0:
        raise ValueError(f"length must be non-negative, got {length}")
    if len(text) <= length:
        return text

    keep = length - len(suffix)
    if keep < 0:
        logger.debug("Suffix {!r} longer than length {}, keeping no text", suffix, length)
        keep = 0
    return text[:keep] + suffix


def words(text: str, limit: int, suffix: str = DEFAULT_SUFFIX) -> str:
    """
    Keep the first limit space-separated words of text.

    Only single spaces separate words here; tabs and newlines stay inside
    their word.

    Args:
        text: Text to limit
        limit: Number of words to keep
        suffix: Suffix to add if words were dropped

    Returns:
        Word-limited text

    Example:
        >>> words("The quick brown fox", 2)
        'The quick...'
    """
    tokens = text.split(" ")
    if len(tokens) <= limit:
        return text
    return " ".join(tokens[:max(limit, 0)]) + suffix
