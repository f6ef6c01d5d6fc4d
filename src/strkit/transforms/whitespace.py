"""
Whitespace normalization - no external dependencies.
"""

__all__ = [
    "reduce_whitespace",
    "remove_whitespace",
    "remove_line_breaks",
]

import os
import re

_WHITESPACE = re.compile(r"\s+")


def reduce_whitespace(text: str) -> str:
    """
    Trim text and collapse every whitespace run to a single space.

    Example:
        >>> reduce_whitespace("  a \\t b\\n\\nc ")
        'a b c'
    """
    return _WHITESPACE.sub(" ", text.strip())


def remove_whitespace(text: str) -> str:
    """Delete all whitespace from text."""
    return _WHITESPACE.sub("", text)


def remove_line_breaks(text: str) -> str:
    """
    Trim text, then delete carriage returns and line feeds.

    Example:
        >>> remove_line_breaks("one\\r\\ntwo\\n")
        'onetwo'
    """
    text = text.strip()
    for sequence in (os.linesep, "\r", "\n"):
        text = text.replace(sequence, "")
    return text
