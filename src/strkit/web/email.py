"""
Email address shape validation - no external dependencies.

Checks the overall shape of an address without any DNS lookup.
"""

__all__ = ["is_email"]

import re

_LOCAL = re.compile(r"[a-zA-Z0-9!#$%&'*+/=?^_`{|}~.\-]+")
_LABEL = re.compile(r"[a-z0-9\-]+", re.I)

MIN_LENGTH = 6


def is_email(text: str) -> bool:
    """
    Check whether text looks like an email address.

    The local part may hold any RFC 5322 atom character; the domain must have
    at least two dot-separated labels of letters, digits and hyphens, none of
    them starting or ending with a hyphen.

    Args:
        text: Candidate address

    Returns:
        True if the address is well formed

    Example:
        >>> is_email("user@example.com")
        True
        >>> is_email("user@localhost")
        False
    """
    if len(text) < MIN_LENGTH or text.count("@") != 1 or text.startswith("@"):
        return False

    local, domain = text.split("@")
    if not _LOCAL.fullmatch(local):
        return False

    if ".." in domain or domain.startswith(".") or domain.endswith("."):
        return False

    labels = domain.split(".")
    if len(labels) < 2:
        return False

    for label in labels:
        if not _LABEL.fullmatch(label):
            return False
        if label.startswith("-") or label.endswith("-"):
            return False
    return True
