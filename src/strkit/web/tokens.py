"""
Secure random strings - no external dependencies.

Backed by :mod:`secrets`, so output is suitable for passwords and tokens.
"""

__all__ = ["generate_password"]

import secrets
import string

from strkit.config import CONFIG, RANDOM_LENGTH

_ALPHABET = string.ascii_letters + string.digits


def generate_password(
    length: int = RANDOM_LENGTH,
    special_chars: bool = True,
) -> str:
    """
    Generate a cryptographically secure random string.

    Args:
        length: Number of characters
        special_chars: Include ``!@#$%^&*()`` in the alphabet

    Returns:
        Random string of exactly ``length`` characters

    Raises:
        ValueError: If length is negative
    """
    if length < 0:
        raise ValueError(f"length must be non-negative, got {length}")
    alphabet = _ALPHABET
    if special_chars:
        alphabet += CONFIG["password_special_chars"]
    return "".join(secrets.choice(alphabet) for _ in range(length))
