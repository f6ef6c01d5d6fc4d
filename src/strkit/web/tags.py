"""
Markup stripping - no external dependencies.

Removes every angle-bracket tag from a string and tidies the text left behind.
"""

__all__ = ["strip_all_tags"]

import html
import re

_SCRIPT_STYLE = re.compile(r"<(script|style)[^>]*?>.*?</\1\s*>", re.I | re.S)
_TAG = re.compile(r"<[^>]*>", re.S)
_WHITESPACE = re.compile(r"\s+")


def strip_all_tags(text: str) -> str:
    """
    Strip all markup tags, including script and style contents.

    Entities are decoded after the tags are gone, and runs of whitespace
    (line breaks included) are collapsed to a single space.

    Args:
        text: Markup to strip

    Returns:
        Plain text, trimmed

    Example:
        >>> strip_all_tags("<p>Hello <b>world</b></p>")
        'Hello world'
        >>> strip_all_tags("<script>alert(1)</script>Text")
        'Text'
    """
    if not text:
        return ""
    text = _SCRIPT_STYLE.sub("", text)
    text = _TAG.sub("", text)
    text = html.unescape(text)
    return _WHITESPACE.sub(" ", text).strip()
