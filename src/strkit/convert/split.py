"""
String <-> sequence conversion - no external dependencies.
"""

__all__ = [
    "to_array",
    "to_csv",
    "to_words",
    "to_lines",
    "to_sentences",
]

import re
from typing import Any, Iterable, List

from strkit.config import DEFAULT_SEPARATOR
from strkit.convert.stringify import from_value

_WHITESPACE = re.compile(r"\s+")
_LINE_BREAK = re.compile(r"\r\n|\r|\n")
_SENTENCE_END = re.compile(r"[.!?]+")


def to_array(text: str, separator: str = DEFAULT_SEPARATOR) -> List[str]:
    """
    Split a delimited string into trimmed tokens.

    Args:
        text: Delimited string
        separator: Token separator (must not be empty)

    Returns:
        List of trimmed tokens; empty tokens are kept

    Raises:
        ValueError: If separator is empty

    Example:
        >>> to_array("apple, banana, cherry")
        ['apple', 'banana', 'cherry']
    """
    return [token.strip() for token in text.split(separator)]


def to_csv(items: Iterable[Any], separator: str = DEFAULT_SEPARATOR) -> str:
    """
    Join items with separator after stringifying and trimming each one.

    Embedded separators are not quoted or escaped.

    Example:
        >>> to_csv([" apple", "banana ", 3])
        'apple,banana,3'
    """
    return separator.join(from_value(item).strip() for item in items)


def to_words(text: str) -> List[str]:
    """
    Split text on whitespace runs, dropping empty tokens.

    Example:
        >>> to_words("  hello   world ")
        ['hello', 'world']
    """
    return [token for token in _WHITESPACE.split(text) if token]


def to_lines(text: str) -> List[str]:
    """
    Split text on CR, LF or CRLF, dropping empty lines.

    Example:
        >>> to_lines("one\\r\\ntwo\\n\\nthree")
        ['one', 'two', 'three']
    """
    return [line for line in _LINE_BREAK.split(text) if line]


def to_sentences(text: str) -> List[str]:
    """
    Split text on runs of ``.``, ``!`` and ``?``, dropping empty fragments.

    Fragments are not trimmed, so every sentence after the first usually
    keeps its leading space.

    Example:
        >>> to_sentences("Hi there. How are you?! Fine")
        ['Hi there', ' How are you', ' Fine']
    """
    return [fragment for fragment in _SENTENCE_END.split(text) if fragment]
