"""
Safe stringification - no external dependencies.

Turns any Python value into text without ever raising.
"""

__all__ = ["from_value"]

import dataclasses
import json
from collections.abc import Mapping, Sequence, Set
from typing import Any

from loguru import logger

_SEPARATORS = (",", ":")


def _to_json_compatible(obj: Any) -> Any:
    """json.dumps ``default`` hook for sets, sequences, dataclasses and plain objects."""
    if isinstance(obj, (Set, Sequence)):
        return list(obj)
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return dataclasses.asdict(obj)
    if isinstance(obj, Mapping):
        return dict(obj)
    if hasattr(obj, "__dict__"):
        return vars(obj)
    raise TypeError(f"{type(obj).__name__} is not JSON serializable")


def _is_structured(value: Any) -> bool:
    if isinstance(value, (str, bytes, bytearray)):
        return False
    if isinstance(value, (Sequence, Mapping, Set)):
        return True
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return True
    # Plain objects without a custom __str__ serialize their attributes
    return hasattr(value, "__dict__") and type(value).__str__ is object.__str__


def from_value(value: Any) -> str:
    """
    Convert any value to a string safely.

    Structured values (sequences such as lists, tuples, deques and ranges,
    mappings, sets, dataclass instances and plain objects) become compact
    JSON; ``None`` becomes an empty string; bytes are decoded as UTF-8 with
    replacement; everything else goes through ``str()``, so booleans become
    ``"True"`` and ``"False"``. NaN and infinity have no JSON form, so
    structured values holding them yield an empty string.

    Args:
        value: Value to convert

    Returns:
        String representation, or an empty string if serialization fails

    Example:
        >>> from_value([1, 2, 3])
        '[1,2,3]'
        >>> from_value({"a": 1})
        '{"a":1}'
        >>> from_value(None)
        ''
        >>> from_value(42)
        '42'
    """
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, (bytes, bytearray)):
        return bytes(value).decode("utf-8", errors="replace")

    try:
        if _is_structured(value):
            return json.dumps(
                value,
                default=_to_json_compatible,
                separators=_SEPARATORS,
                ensure_ascii=False,
                allow_nan=False,
            )
        return str(value)
    except Exception as e:  # str() may run arbitrary user code
        logger.debug("Could not stringify {}: {}", type(value).__name__, e)
        return ""
