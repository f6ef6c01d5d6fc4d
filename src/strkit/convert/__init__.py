"""
Converters subpackage - no external dependencies.

Safe stringification and string <-> sequence conversions.
"""

from strkit.convert.stringify import from_value

from strkit.convert.split import (
    to_array,
    to_csv,
    to_words,
    to_lines,
    to_sentences,
)

__all__ = [
    # stringify
    "from_value",
    # split
    "to_array",
    "to_csv",
    "to_words",
    "to_lines",
    "to_sentences",
]
