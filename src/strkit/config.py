"""
Library defaults.

All default lengths, rates and character sets are centralized here so the
functions stay free of magic numbers.
"""

__all__ = [
    "CONFIG",
    "DEFAULT_SUFFIX",
    "DEFAULT_SEPARATOR",
    "EXCERPT_LENGTH",
    "WORDS_PER_MINUTE",
    "MASK_VISIBLE",
    "MASK_CHAR",
    "RANDOM_LENGTH",
    "DATE_FORMATS",
    "INT_MIN",
    "INT_MAX",
]

from typing import Any, Dict, List

# ====================================================================
# LIBRARY CONFIGURATION
# ====================================================================

CONFIG: Dict[str, Any] = {
    # Truncation
    "default_suffix": "...",  # Appended by truncate/words/excerpt when text is cut
    "excerpt_length": 150,  # Default excerpt size in characters
    # Content
    "words_per_minute": 200,  # Average adult silent reading speed
    # Conversion
    "separator": ",",  # to_array / to_csv delimiter
    # Masking
    "mask_visible": 4,  # Characters left visible at each end
    "mask_char": "*",
    # Random strings
    "random_length": 12,
    "password_special_chars": "!@#$%^&*()",
    # Integer bounds (signed 64-bit)
    "int_min": -(2**63),
    "int_max": 2**63 - 1,
}

DEFAULT_SUFFIX: str = CONFIG["default_suffix"]
DEFAULT_SEPARATOR: str = CONFIG["separator"]
EXCERPT_LENGTH: int = CONFIG["excerpt_length"]
WORDS_PER_MINUTE: int = CONFIG["words_per_minute"]
MASK_VISIBLE: int = CONFIG["mask_visible"]
MASK_CHAR: str = CONFIG["mask_char"]
RANDOM_LENGTH: int = CONFIG["random_length"]
INT_MIN: int = CONFIG["int_min"]
INT_MAX: int = CONFIG["int_max"]

# Accepted by is_date after ISO-8601 parsing fails
DATE_FORMATS: List[str] = [
    "%Y-%m-%d",
    "%Y/%m/%d",
    "%Y-%m-%d %H:%M",
    "%Y-%m-%d %H:%M:%S",
    "%m/%d/%Y",
    "%d.%m.%Y",
    "%d-%m-%Y",
    "%d %B %Y",
    "%d %b %Y",
    "%B %d, %Y",
    "%b %d, %Y",
    "%B %d %Y",
    "%b %d %Y",
    "%a, %d %b %Y %H:%M:%S",
    "%H:%M",
    "%H:%M:%S",
]
