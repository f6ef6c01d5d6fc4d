"""
Normalization helpers - no external dependencies.
"""

__all__ = [
    "to_ascii",
    "normalize",
    "random_string",
]

from strkit.config import RANDOM_LENGTH
from strkit.web import generate_password, remove_accents


def to_ascii(text: str) -> str:
    """
    Remove accents, transliterating to the closest ASCII.

    Example:
        >>> to_ascii("Ångström")
        'Angstrom'
    """
    return remove_accents(text)


def normalize(text: str) -> str:
    """Trim and lowercase text."""
    return text.strip().lower()


def random_string(length: int = RANDOM_LENGTH, special_chars: bool = False) -> str:
    """
    Generate a cryptographically secure random string.

    Args:
        length: Number of characters
        special_chars: Include punctuation in the alphabet

    Returns:
        Random string of letters and digits (and punctuation if requested)
    """
    return generate_password(length, special_chars=special_chars)
