"""Token estimation and text helpers shared by all chunkers"""
from .tokenizer_utils import (
    TokenEstimator,
    ApproximateTokenEstimator,
    HuggingFaceTokenEstimator,
    count_tokens,
    char_offset_for_tokens,
)
from .break_points import find_break
from .ascii_filter import strip_non_ascii

__all__ = [
    'TokenEstimator',
    'ApproximateTokenEstimator',
    'HuggingFaceTokenEstimator',
    'count_tokens',
    'char_offset_for_tokens',
    'find_break',
    'strip_non_ascii',
]
