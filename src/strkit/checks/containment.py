"""
Substring containment and pattern matching - no external dependencies.

All checks are case-sensitive except matches_any, which normalizes both sides.
"""

__all__ = [
    "contains_any",
    "contains_all",
    "starts_with",
    "ends_with",
    "matches_any",
]

from typing import Iterable, Union

Needles = Union[str, Iterable[str]]

WILDCARD = "*"


def _as_tuple(needles: Needles) -> tuple:
    if isinstance(needles, str):
        return (needles,)
    return tuple(needles)


def contains_any(haystack: str, *needles: str) -> bool:
    """
    Check if haystack contains at least one of the needles.

    Example:
        >>> contains_any("Hello World", "foo", "World")
        True
        >>> contains_any("Hello World")
        False
    """
    return any(needle in haystack for needle in needles)


def contains_all(haystack: str, *needles: str) -> bool:
    """
    Check if haystack contains every needle (vacuously true with none).

    Example:
        >>> contains_all("Hello World", "Hello", "World")
        True
    """
    return all(needle in haystack for needle in needles)


def starts_with(haystack: str, needles: Needles) -> bool:
    """
    Check if haystack starts with a needle.

    Args:
        haystack: String to inspect
        needles: A single prefix or an iterable of prefixes

    Returns:
        True if any prefix matches

    Example:
        >>> starts_with("https://example.com", ["http://", "https://"])
        True
    """
    return haystack.startswith(_as_tuple(needles))


def ends_with(haystack: str, needles: Needles) -> bool:
    """
    Check if haystack ends with a needle.

    Args:
        haystack: String to inspect
        needles: A single suffix or an iterable of suffixes

    Returns:
        True if any suffix matches

    Example:
        >>> ends_with("photo.JPG", (".jpg", ".JPG"))
        True
    """
    return haystack.endswith(_as_tuple(needles))


def matches_any(
    text: str,
    patterns: Iterable[str],
    wildcard: bool = False,
) -> bool:
    """
    Check if text equals any pattern, ignoring case and surrounding whitespace.

    With ``wildcard`` enabled, a pattern ending in ``*`` matches every string
    that starts with the rest of the pattern.

    Args:
        text: String to test
        patterns: Candidate patterns
        wildcard: Treat a trailing ``*`` as a prefix marker

    Returns:
        True on the first matching pattern; False for empty text or patterns

    Example:
        >>> matches_any("admin.php", ["admin.*", "edit.*"], wildcard=True)
        True
        >>> matches_any("admin.php", ["admin.*"])
        False
    """
    if not text or not patterns:
        return False

    text = text.strip().lower()
    for pattern in patterns:
        pattern = pattern.strip().lower()
        if wildcard and pattern.endswith(WILDCARD):
            if text.startswith(pattern.rstrip(WILDCARD)):
                return True
        elif text == pattern:
            return True
    return False
