"""
Excerpt generation - no external dependencies.
"""

__all__ = ["excerpt"]

from strkit.config import DEFAULT_SUFFIX, EXCERPT_LENGTH
from strkit.transforms import truncate
from strkit.web import strip_all_tags


def excerpt(
    content: str,
    length: int = EXCERPT_LENGTH,
    strip_tags: bool = True,
) -> str:
    """
    Create a short plain-text preview of content.

    Args:
        content: Content to excerpt, possibly markup
        length: Maximum length in characters, suffix included
        strip_tags: Strip markup tags before truncating

    Returns:
        Excerpt ending in ``...`` when the content was cut

    Example:
        >>> excerpt("<p>Hello <em>world</em></p>", 8)
        'Hello...'
    """
    if strip_tags:
        content = strip_all_tags(content)
    return truncate(content, length, DEFAULT_SUFFIX)
