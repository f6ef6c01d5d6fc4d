"""
Format validation predicates - no external dependencies.

Each predicate checks one well-known grammar (JSON, URL, date, IP address,
number) and never raises.
"""

__all__ = [
    "is_json",
    "is_email",
    "is_url",
    "is_date",
    "is_ip",
    "is_numeric",
    "is_integer",
    "is_float",
    "is_hex",
]

import datetime as _dt
import ipaddress
import json
import math
import re
import urllib.parse
from typing import NoReturn

from loguru import logger

from strkit.config import DATE_FORMATS, INT_MAX, INT_MIN
from strkit.web import is_email

_FLOAT = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)
_INTEGER = re.compile(r"[+-]?(?:0|[1-9]\d*)", re.ASCII)
_HEX = re.compile(r"[0-9a-fA-F]+")
_SCHEME = re.compile(r"[a-zA-Z][a-zA-Z0-9+.\-]*")
_HOST = re.compile(r"[a-z0-9\-._~%:]+")

# Schemes that carry no authority component
_PATH_SCHEMES = {"mailto", "news", "file"}


def _reject_constant(name: str) -> NoReturn:
    raise ValueError(f"invalid JSON constant: {name}")


def is_json(text: str) -> bool:
    """
    Check if text is strict JSON.

    ``NaN`` and ``Infinity`` are rejected, as is the empty string.

    Example:
        >>> is_json('{"a": 1}')
        True
        >>> is_json("{a: 1}")
        False
    """
    try:
        json.loads(text, parse_constant=_reject_constant)
    except (ValueError, TypeError, RecursionError):
        return False
    return True


def is_url(text: str) -> bool:
    """
    Check if text is an absolute URL.

    A valid scheme is required. ``mailto:``, ``news:`` and ``file:`` URLs need
    a path; every other scheme needs a host.

    Example:
        >>> is_url("https://example.com/path?q=1")
        True
        >>> is_url("example.com")
        False
    """
    if not text or any(ch.isspace() for ch in text):
        return False
    try:
        parsed = urllib.parse.urlsplit(text)
        parsed.port
    except ValueError:
        return False

    if not _SCHEME.fullmatch(parsed.scheme):
        return False
    if parsed.scheme.lower() in _PATH_SCHEMES:
        return bool(parsed.path)
    return bool(parsed.hostname) and bool(_HOST.fullmatch(parsed.hostname))


def is_date(text: str) -> bool:
    """
    Check if text can be parsed as a calendar date or time.

    ISO-8601 is tried first, then each format in ``config.DATE_FORMATS``.

    Example:
        >>> is_date("2024-02-29")
        True
        >>> is_date("2023-02-29")
        False
    """
    text = text.strip()
    if not text:
        return False
    try:
        _dt.datetime.fromisoformat(text.replace("Z", "+00:00"))
        return True
    except ValueError:
        pass

    for fmt in DATE_FORMATS:
        try:
            _dt.datetime.strptime(text, fmt)
            return True
        except ValueError:
            continue

    logger.debug("Unparseable date: {!r}", text)
    return False


def is_ip(text: str) -> bool:
    """
    Check if text is an IPv4 or IPv6 address literal.

    Example:
        >>> is_ip("192.168.0.1")
        True
        >>> is_ip("::1")
        True
        >>> is_ip("256.1.1.1")
        False
    """
    try:
        ipaddress.ip_address(text)
    except ValueError:
        return False
    return True


def is_numeric(text: str) -> bool:
    """
    Check if text is a decimal number (sign, fraction and exponent allowed).

    Surrounding whitespace is ignored.

    Example:
        >>> is_numeric(" -1.5e3 ")
        True
        >>> is_numeric("0x1A")
        False
    """
    return bool(_FLOAT.fullmatch(text.strip()))


def is_integer(text: str) -> bool:
    """
    Check if text is a decimal integer that fits in a signed 64-bit int.

    Leading zeros are rejected; surrounding whitespace is ignored.

    Example:
        >>> is_integer("42")
        True
        >>> is_integer("042")
        False
        >>> is_integer("4.0")
        False
    """
    text = text.strip()
    if not _INTEGER.fullmatch(text):
        return False
    return INT_MIN <= int(text) <= INT_MAX


def is_float(text: str) -> bool:
    """
    Check if text is a finite float literal (integers included).

    Literals that overflow to infinity, such as ``1e999``, are rejected.

    Example:
        >>> is_float("3.14")
        True
        >>> is_float("10")
        True
        >>> is_float("1,5")
        False
    """
    text = text.strip()
    if not _FLOAT.fullmatch(text):
        return False
    return math.isfinite(float(text))


def is_hex(text: str) -> bool:
    """Check if text is non-empty and made only of hexadecimal digits."""
    return bool(_HEX.fullmatch(text))
