"""
Predicates subpackage - no external dependencies.

Boolean checks over strings: containment, format validation, character
classes, blankness and length bounds. None of them raise.
"""

from strkit.checks.containment import (
    contains_any,
    contains_all,
    starts_with,
    ends_with,
    matches_any,
)

from strkit.checks.formats import (
    is_json,
    is_email,
    is_url,
    is_date,
    is_ip,
    is_numeric,
    is_integer,
    is_float,
    is_hex,
)

from strkit.checks.charclass import (
    is_alpha,
    is_alphanumeric,
    is_upper,
    is_lower,
    is_blank,
    is_length_valid,
)

__all__ = [
    # containment
    "contains_any",
    "contains_all",
    "starts_with",
    "ends_with",
    "matches_any",
    # formats
    "is_json",
    "is_email",
    "is_url",
    "is_date",
    "is_ip",
    "is_numeric",
    "is_integer",
    "is_float",
    "is_hex",
    # charclass
    "is_alpha",
    "is_alphanumeric",
    "is_upper",
    "is_lower",
    "is_blank",
    "is_length_valid",
]
