"""
Transforms subpackage - no external dependencies.

String-to-string rewrites: replacement, extraction, truncation, whitespace
normalization, case conversion and masking.
"""

from strkit.transforms.replace import (
    replace_first,
    replace_last,
    between,
)

from strkit.transforms.truncation import (
    truncate,
    words,
)

from strkit.transforms.whitespace import (
    reduce_whitespace,
    remove_whitespace,
    remove_line_breaks,
)

from strkit.transforms.case import (
    camel,
    snake,
    kebab,
    title,
    sentence,
    upper,
    lower,
)

from strkit.transforms.masking import mask

from strkit.transforms.normalize import (
    to_ascii,
    normalize,
    random_string,
)

__all__ = [
    # replace
    "replace_first",
    "replace_last",
    "between",
    # truncation
    "truncate",
    "words",
    # whitespace
    "reduce_whitespace",
    "remove_whitespace",
    "remove_line_breaks",
    # case
    "camel",
    "snake",
    "kebab",
    "title",
    "sentence",
    "upper",
    "lower",
    # masking
    "mask",
    # normalize
    "to_ascii",
    "normalize",
    "random_string",
]
