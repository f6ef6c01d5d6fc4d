"""
Key and slug sanitization - no external dependencies.

Reduces arbitrary text to identifier-safe keys and URL-safe slugs.
"""

__all__ = [
    "sanitize_key",
    "sanitize_title",
]

import re

from strkit.web.accents import remove_accents
from strkit.web.tags import strip_all_tags

_UNSAFE_KEY = re.compile(r"[^a-z0-9_\-]")
_UNSAFE_SLUG = re.compile(r"[^a-z0-9]+")


def sanitize_key(text: str) -> str:
    """
    Lowercase text and drop every character outside ``[a-z0-9_-]``.

    Example:
        >>> sanitize_key("My Key!")
        'mykey'
    """
    return _UNSAFE_KEY.sub("", text.lower())


def sanitize_title(text: str) -> str:
    """
    Build a URL slug from text.

    Tags are stripped and accents removed before lowercasing; every run of
    characters outside ``[a-z0-9]`` becomes a single hyphen.

    Args:
        text: Text to slugify

    Returns:
        Lowercase slug, no leading or trailing hyphens

    Example:
        >>> sanitize_title("Hello, Wörld!")
        'hello-world'
        >>> sanitize_title("snake_case value")
        'snake-case-value'
    """
    slug = remove_accents(strip_all_tags(text)).lower()
    return _UNSAFE_SLUG.sub("-", slug).strip("-")
