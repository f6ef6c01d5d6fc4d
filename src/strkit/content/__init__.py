"""
Content helpers subpackage - no external dependencies.

Higher-level text processing built on the transforms: excerpts, word
counts and reading-time estimates.
"""

from strkit.content.excerpt import excerpt

from strkit.content.reading import (
    ReadingTime,
    word_count,
    reading_time,
)

__all__ = [
    # excerpt
    "excerpt",
    # reading
    "ReadingTime",
    "word_count",
    "reading_time",
]
