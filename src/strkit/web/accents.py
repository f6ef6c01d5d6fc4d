"""
Accent removal - no external dependencies.

Transliterates accented Latin text to its closest ASCII approximation.
"""

__all__ = ["remove_accents"]

import unicodedata

# Letters that carry no combining mark under NFKD
_TRANSLITERATIONS = {
    "ß": "ss",
    "ẞ": "SS",
    "æ": "ae",
    "Æ": "AE",
    "œ": "oe",
    "Œ": "OE",
    "ø": "o",
    "Ø": "O",
    "ł": "l",
    "Ł": "L",
    "đ": "d",
    "Đ": "D",
    "ð": "d",
    "Ð": "D",
    "þ": "th",
    "Þ": "TH",
    "ħ": "h",
    "Ħ": "H",
    "ı": "i",
    "ŋ": "n",
    "Ŋ": "N",
    "ſ": "s",
    "‘": "'",
    "’": "'",
    "“": '"',
    "”": '"',
}

_TABLE = str.maketrans(_TRANSLITERATIONS)


def remove_accents(text: str) -> str:
    """
    Remove diacritics and transliterate special Latin letters.

    Characters with no ASCII counterpart (CJK, emoji, ...) are left as is.

    Args:
        text: Text to convert

    Returns:
        Text with accents removed

    Example:
        >>> remove_accents("Crème brûlée")
        'Creme brulee'
        >>> remove_accents("Straße")
        'Strasse'
    """
    if text.isascii():
        return text
    decomposed = unicodedata.normalize("NFKD", text.translate(_TABLE))
    return "".join(ch for ch in decomposed if not unicodedata.combining(ch))
