"""
Word counting and reading-time estimates - no external dependencies.
"""

__all__ = [
    "ReadingTime",
    "word_count",
    "reading_time",
]

import math
import re
from dataclasses import asdict, dataclass
from typing import Dict

from strkit.config import WORDS_PER_MINUTE
from strkit.web import strip_all_tags

# Letters/digits, optionally joined by inner apostrophes or hyphens
_WORD = re.compile(r"[^\W_]+(?:['’\-][^\W_]+)*")

SECONDS_PER_MINUTE = 60


@dataclass(frozen=True)
class ReadingTime:
    """Estimated reading time."""

    minutes: int = 0
    seconds: int = 0

    def as_dict(self) -> Dict[str, int]:
        return asdict(self)


def word_count(text: str) -> int:
    """
    Count the words in text after stripping markup.

    Hyphenated and apostrophized words count once; punctuation alone is not
    a word.

    Example:
        >>> word_count("<p>It's a well-known fact.</p>")
        4
    """
    return len(_WORD.findall(strip_all_tags(text)))


def reading_time(
    content: str,
    words_per_minute: int = WORDS_PER_MINUTE,
) -> ReadingTime:
    """
    Estimate how long content takes to read.

    Seconds are rounded half up; 59.5 seconds or more rolls over into the
    next minute.

    Args:
        content: Text or markup to analyze
        words_per_minute: Reading speed, must be positive

    Returns:
        ReadingTime with whole minutes and remaining seconds

    Raises:
        ValueError: If words_per_minute is not positive

    Example:
        >>> reading_time("word " * 300)
        ReadingTime(minutes=1, seconds=30)
    """
    if words_per_minute <= 0:
        raise ValueError(f"words_per_minute must be positive, got {words_per_minute}")

    total_minutes = word_count(content) / words_per_minute
    minutes = math.floor(total_minutes)
    seconds = math.floor((total_minutes - minutes) * SECONDS_PER_MINUTE + 0.5)
    if seconds == SECONDS_PER_MINUTE:
        minutes, seconds = minutes + 1, 0
    return ReadingTime(minutes=minutes, seconds=seconds)
