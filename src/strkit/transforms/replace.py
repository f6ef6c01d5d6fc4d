"""
Replacement and extraction - no external dependencies.
"""

__all__ = [
    "replace_first",
    "replace_last",
    "between",
]


def replace_first(search: str, replace: str, subject: str) -> str:
    """
    Replace the first occurrence of search in subject.

    Args:
        search: Substring to look for
        replace: Replacement text
        subject: String to search in

    Returns:
        Subject with the first match replaced, or subject unchanged when
        search or subject is empty or there is no match

    Example:
        >>> replace_first("a", "o", "banana")
        'bonana'
    """
    if not search or not subject:
        return subject
    return subject.replace(search, replace, 1)


def replace_last(search: str, replace: str, subject: str) -> str:
    """
    Replace the last occurrence of search in subject.

    Example:
        >>> replace_last("a", "o", "banana")
        'banano'
    """
    if not search or not subject:
        return subject
    position = subject.rfind(search)
    if position == -1:
        return subject
    return subject[:position] + replace + subject[position + len(search):]


def between(start: str, end: str, subject: str) -> str:
    """
    Extract the text between the first start delimiter and the next end.

    The end delimiter is searched for only after the start match, so
    ``between("[", "]", "] [a]")`` is ``"a"``.

    Args:
        start: Opening delimiter
        end: Closing delimiter
        subject: String to search in

    Returns:
        The enclosed text, or an empty string if either delimiter is missing

    Example:
        >>> between("[", "]", "Hello [world] test")
        'world'
    """
    start_pos = subject.find(start)
    if start_pos == -1:
        return ""
    start_pos += len(start)

    end_pos = subject.find(end, start_pos)
    if end_pos == -1:
        return ""
    return subject[start_pos:end_pos]
