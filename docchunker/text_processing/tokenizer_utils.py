"""
Token counting utilities for chunk sizing

The default estimator approximates 4 characters per token. Chunkers only
talk to the TokenEstimator interface, so an exact tokenizer can be dropped
in without touching call sites.
"""
from abc import ABC, abstractmethod
from typing import Optional
import logging

logger = logging.getLogger(__name__)

CHARS_PER_TOKEN = 4


class TokenEstimator(ABC):
    """Interface for counting tokens and mapping token budgets to offsets"""

    def __init__(self, model_name: Optional[str] = None):
        self.model_name = model_name

    @abstractmethod
    def count_tokens(self, text: Optional[str]) -> int:
        """Number of tokens in text, 0 for empty or None"""
        pass

    @abstractmethod
    def char_offset_for_tokens(self, text: Optional[str], target_tokens: int) -> int:
        """
        Offset into text at which target_tokens tokens have been consumed

        Never larger than len(text).
        """
        pass


class ApproximateTokenEstimator(TokenEstimator):
    """Character-based approximation: ~4 characters per token.

    model_name is accepted for forward compatibility and ignored.
    """

    def count_tokens(self, text: Optional[str]) -> int:
        """
        Approximate token count

        Args:
            text: Input text

        Returns:
            ceil(characters / 4)
        """
        if not text:
            return 0

        char_count = len(text)
        token_estimate = (char_count + CHARS_PER_TOKEN - 1) // CHARS_PER_TOKEN

        logger.debug(f"Token count estimate: {token_estimate} (from {char_count} characters)")
        return token_estimate

    def char_offset_for_tokens(self, text: Optional[str], target_tokens: int) -> int:
        if not text or target_tokens <= 0:
            return 0

        return min(target_tokens * CHARS_PER_TOKEN, len(text))


class HuggingFaceTokenEstimator(TokenEstimator):
    """Exact token counts from a HuggingFace tokenizer.

    Needs the ``hf`` extra (transformers). The tokenizer is loaded on first
    use unless a pre-loaded one is passed in.
    """

    def __init__(self, model_name: str, tokenizer=None):
        """
        Args:
            model_name: HuggingFace model ID (e.g., "BAAI/bge-base-en-v1.5")
            tokenizer: Optional pre-loaded tokenizer
        """
        super().__init__(model_name)
        self._tokenizer = tokenizer

    @property
    def tokenizer(self):
        if self._tokenizer is None:
            from transformers import AutoTokenizer

            logger.info(f"Loading tokenizer for {self.model_name}")
            self._tokenizer = AutoTokenizer.from_pretrained(self.model_name)
        return self._tokenizer

    def count_tokens(self, text: Optional[str]) -> int:
        if not text:
            return 0

        return len(self.tokenizer.encode(text, add_special_tokens=False))

    def char_offset_for_tokens(self, text: Optional[str], target_tokens: int) -> int:
        """
        Offset where the target_tokens-th token ends

        Uses the tokenizer's offset mapping (fast tokenizers only).
        """
        if not text or target_tokens <= 0:
            return 0

        encoding = self.tokenizer(
            text,
            add_special_tokens=False,
            return_offsets_mapping=True
        )
        offsets = encoding["offset_mapping"]

        if target_tokens >= len(offsets):
            return len(text)

        return offsets[target_tokens - 1][1]


def count_tokens(text: Optional[str], model: Optional[str] = None) -> int:
    """Approximate token count of text"""
    return ApproximateTokenEstimator(model).count_tokens(text)


def char_offset_for_tokens(text: Optional[str], target_tokens: int, model: Optional[str] = None) -> int:
    """Approximate offset reached after target_tokens tokens"""
    return ApproximateTokenEstimator(model).char_offset_for_tokens(text, target_tokens)
