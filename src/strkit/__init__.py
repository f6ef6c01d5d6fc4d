"""
strkit - Pure, stateless string utilities.

This package is organized into focused subpackages:

- checks/      Predicates (no dependencies)
               - containment: contains_any, contains_all, starts_with, ends_with, matches_any
               - formats: is_json, is_email, is_url, is_date, is_ip, is_numeric, ...
               - charclass: is_alpha, is_upper, is_lower, is_blank, is_length_valid, ...

- transforms/  String-to-string rewrites (no dependencies)
               - replace: replace_first, replace_last, between
               - truncation: truncate, words
               - whitespace: reduce_whitespace, remove_whitespace, remove_line_breaks
               - case: camel, snake, kebab, title, sentence, upper, lower
               - masking: mask
               - normalize: to_ascii, normalize, random_string

- content/     Content helpers (no dependencies)
               - excerpt: excerpt
               - reading: word_count, reading_time, ReadingTime

- convert/     Converters (no dependencies)
               - stringify: from_value
               - split: to_array, to_csv, to_words, to_lines, to_sentences

- web/         Markup, slug and email helpers (no dependencies)
               - tags: strip_all_tags
               - keys: sanitize_key, sanitize_title
               - accents: remove_accents
               - email: is_email
               - tokens: generate_password

- df/          DataFrame columns (requires polars, not imported here)
               - columns: map_column, filter_matching

Logging goes through loguru and is disabled for this package by default;
call ``logger.enable("strkit")`` to see debug records.

Usage:
    from strkit import truncate, between, reading_time
    from strkit.checks import matches_any
    from strkit.df import map_column
"""

__version__ = "0.1.0"

from loguru import logger

logger.disable("strkit")

# Convenience imports from checks
from strkit.checks import (
    contains_any,
    contains_all,
    starts_with,
    ends_with,
    matches_any,
    is_json,
    is_email,
    is_url,
    is_date,
    is_ip,
    is_numeric,
    is_integer,
    is_float,
    is_hex,
    is_alpha,
    is_alphanumeric,
    is_upper,
    is_lower,
    is_blank,
    is_length_valid,
)

# Convenience imports from transforms
from strkit.transforms import (
    replace_first,
    replace_last,
    between,
    truncate,
    words,
    reduce_whitespace,
    remove_whitespace,
    remove_line_breaks,
    camel,
    snake,
    kebab,
    title,
    sentence,
    upper,
    lower,
    mask,
    to_ascii,
    normalize,
    random_string,
)

# Convenience imports from content
from strkit.content import (
    excerpt,
    word_count,
    reading_time,
    ReadingTime,
)

# Convenience imports from convert
from strkit.convert import (
    from_value,
    to_array,
    to_csv,
    to_words,
    to_lines,
    to_sentences,
)

__all__ = [
    "__version__",
    # checks.containment
    "contains_any",
    "contains_all",
    "starts_with",
    "ends_with",
    "matches_any",
    # checks.formats
    "is_json",
    "is_email",
    "is_url",
    "is_date",
    "is_ip",
    "is_numeric",
    "is_integer",
    "is_float",
    "is_hex",
    # checks.charclass
    "is_alpha",
    "is_alphanumeric",
    "is_upper",
    "is_lower",
    "is_blank",
    "is_length_valid",
    # transforms.replace
    "replace_first",
    "replace_last",
    "between",
    # transforms.truncation
    "truncate",
    "words",
    # transforms.whitespace
    "reduce_whitespace",
    "remove_whitespace",
    "remove_line_breaks",
    # transforms.case
    "camel",
    "snake",
    "kebab",
    "title",
    "sentence",
    "upper",
    "lower",
    # transforms.masking
    "mask",
    # transforms.normalize
    "to_ascii",
    "normalize",
    "random_string",
    # content
    "excerpt",
    "word_count",
    "reading_time",
    "ReadingTime",
    # convert
    "from_value",
    "to_array",
    "to_csv",
    "to_words",
    "to_lines",
    "to_sentences",
]
