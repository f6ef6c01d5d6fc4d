"""
Masking of sensitive strings - no external dependencies.
"""

__all__ = ["mask"]

from strkit.config import MASK_CHAR, MASK_VISIBLE


def mask(text: str, visible: int = MASK_VISIBLE, char: str = MASK_CHAR) -> str:
    """
    Mask the middle of text, keeping visible characters at each end.

    Text too short to hide anything (``len(text) <= 2 * visible``) is masked
    entirely.

    Args:
        text: Sensitive text
        visible: Characters left visible at the start and at the end
        char: Single mask character

    Returns:
        Masked text of the same length

    Raises:
        ValueError: If visible is negative or char is not one character

    Example:
        >>> mask("1234567890123456")
        '1234********3456'
        >>> mask("secret", 4)
        '******'
    """
    if visible < 0:
        raise ValueError(f"visible must be non-negative, got {visible}")
    if len(char) != 1:
        raise ValueError(f"char must be a single character, got {char!r}")

    length = len(text)
    if length <= 2 * visible:
        return char * length
    return text[:visible] + char * (length - 2 * visible) + text[length - visible:]
