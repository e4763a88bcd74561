"""Non-ASCII stripping applied by callers before chunking"""
from typing import Optional


def strip_non_ascii(text: Optional[str]) -> Optional[str]:
    """
    Replace runs of non-ASCII characters with a single space

    A run produces no space at the start of the output or right after a
    space that is already there, so the filter never doubles spaces.

    Args:
        text: Input text

    Returns:
        ASCII-only text (None passes through)
    """
    if text is None:
        return None

    result = []
    for char in text:
        if ord(char) < 128:
            result.append(char)
        elif result and result[-1] != ' ':
            result.append(' ')

    return ''.join(result)
