"""
Case conversion - no external dependencies.

camel, title and sentence only touch letter case and spacing; snake and
kebab also restrict the output to an identifier-safe character set.
"""

__all__ = [
    "camel",
    "snake",
    "kebab",
    "title",
    "sentence",
    "upper",
    "lower",
]

import re
from typing import Any

from strkit.convert.stringify import from_value
from strkit.web import sanitize_key, sanitize_title

# First character of the string and every character after whitespace
_WORD_START = re.compile(r"(?:^|(?<=\s))\S")


def _capitalize_words(text: str) -> str:
    """Uppercase the first character of each word, leaving the rest as is."""
    return _WORD_START.sub(lambda m: m.group(0).upper(), text)


def camel(text: str) -> str:
    """
    Convert text to camelCase.

    Hyphens and underscores act as word separators. Letters inside a word
    keep their case.

    Example:
        >>> camel("hello_world-example")
        'helloWorldExample'
        >>> camel("Hello World")
        'helloWorld'
    """
    text = text.replace("-", " ").replace("_", " ")
    text = _capitalize_words(text).replace(" ", "")
    return text[:1].lower() + text[1:]


def snake(text: str) -> str:
    """
    Convert text to snake_case.

    Spaces become underscores; anything outside ``[a-z0-9_-]`` after
    lowercasing is dropped.

    Example:
        >>> snake("Hello World!")
        'hello_world'
    """
    return sanitize_key(text.replace(" ", "_"))


def kebab(text: str) -> str:
    """
    Convert text to a kebab-case slug.

    Example:
        >>> kebab("Hello World, Again")
        'hello-world-again'
    """
    return sanitize_title(text)


def title(text: str) -> str:
    """
    Convert text to Title Case.

    Only whitespace starts a new word, so ``"don't"`` becomes ``"Don't"``.

    Example:
        >>> title("hELLO wORLD")
        'Hello World'
    """
    return _capitalize_words(text.lower())


def sentence(value: Any) -> str:
    """
    Convert a value to sentence case: lowercase with a capital first letter.

    Example:
        >>> sentence("HELLO World")
        'Hello world'
    """
    text = from_value(value).lower()
    return text[:1].upper() + text[1:]


def upper(value: Any) -> str:
    """Uppercase the string form of a value (see ``from_value``)."""
    return from_value(value).upper()


def lower(value: Any) -> str:
    """Lowercase the string form of a value (see ``from_value``)."""
    return from_value(value).lower()
