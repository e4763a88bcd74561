"""Break point search for token-sized segments"""
from typing import Callable, Tuple

SEARCH_WINDOW = 50

SENTENCE_TERMINATORS = ".?!"
BREAK_CHARS = " \n"


def _is_paragraph_break(text: str, offset: int) -> bool:
    return offset > 0 and text[offset - 1] == '\n' and text[offset] == '\n'


def _is_sentence_end(text: str, offset: int) -> bool:
    return (
        offset > 0
        and text[offset - 1] in SENTENCE_TERMINATORS
        and text[offset] in BREAK_CHARS
    )


def _is_word_break(text: str, offset: int) -> bool:
    return text[offset] in BREAK_CHARS


# Tiers in priority order
_BREAK_TIERS: Tuple[Callable[[str, int], bool], ...] = (
    _is_paragraph_break,
    _is_sentence_end,
    _is_word_break,
)


def find_break(text: str, target_offset: int, max_offset: int) -> int:
    """
    Find a sensible cut point near target_offset

    Looks SEARCH_WINDOW characters either side of the target for a paragraph
    break, then a sentence end, then a word break. Within a tier the lowest
    offset wins.

    Args:
        text: Text being segmented
        target_offset: Desired cut offset
        max_offset: Hard upper bound (usually len(text))

    Returns:
        Offset to cut at
    """
    if target_offset >= max_offset:
        return max_offset

    window_start = max(target_offset - SEARCH_WINDOW, 0)
    window_end = min(target_offset + SEARCH_WINDOW, max_offset)

    for is_break in _BREAK_TIERS:
        for offset in range(window_start, window_end):
            if is_break(text, offset):
                return offset

    return min(target_offset, max_offset)
