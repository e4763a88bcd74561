"""Two-pass refinement of structural chunks: split oversized, merge undersized"""
from typing import List, Optional
import logging

from ..schema import Chunk
from ..token_chunker import segment_text
from ...text_processing.tokenizer_utils import TokenEstimator, ApproximateTokenEstimator

logger = logging.getLogger(__name__)

MIN_MERGE_TOKENS = 20
PARAGRAPH_SEPARATOR = "\n\n"


def merge_threshold(chunk_size: int) -> int:
    """Chunks below this many tokens are merge candidates"""
    return max(chunk_size // 4, MIN_MERGE_TOKENS)


def _same_context(first: Chunk, second: Chunk) -> bool:
    """Both without context, or both with byte-identical context"""
    return first.heading_context == second.heading_context


class ChunkRefiner:
    """
    Size-driven refinement over a sequence of chunks

    Pass 1 splits chunks over the token limit at natural break points.
    Pass 2 merges runs of small chunks that share a heading context.
    """

    def __init__(self, estimator: Optional[TokenEstimator] = None):
        self.estimator = estimator or ApproximateTokenEstimator()

    def refine(self, chunks: List[Chunk], chunk_size: int) -> List[Chunk]:
        split = self.split_oversized(chunks, chunk_size)
        logger.debug(f"After split pass: {len(split)} chunks")

        merged = self.merge_undersized(split, merge_threshold(chunk_size), chunk_size)
        logger.debug(f"After merge pass: {len(merged)} chunks")

        return merged

    def split_oversized(self, chunks: List[Chunk], max_tokens: int) -> List[Chunk]:
        """
        Split every chunk over max_tokens into segments

        Segments inherit the heading context of the chunk they came from.

        Args:
            chunks: Chunks in document order
            max_tokens: Token limit per chunk

        Returns:
            Chunks with every oversized one replaced by its segments
        """
        result = []

        for chunk in chunks:
            if chunk.token_count <= max_tokens:
                result.append(chunk)
                continue

            segments = segment_text(chunk.content, max_tokens, self.estimator)
            logger.debug(
                f"Split {chunk.token_count}-token chunk into {len(segments)} segments"
            )
            result.extend(self._make_chunk(segment, chunk.heading_context) for segment in segments)

        return self._reindex(result)

    def merge_undersized(
        self,
        chunks: List[Chunk],
        min_tokens: int,
        max_tokens: int
    ) -> List[Chunk]:
        """
        Merge consecutive undersized chunks under the same heading context

        A pending chunk that cannot absorb its neighbour is emitted as is,
        even if it is still below min_tokens.

        Args:
            chunks: Chunks in document order
            min_tokens: Chunks below this size look for a merge partner
            max_tokens: Merged chunks never exceed this size

        Returns:
            Merged chunks in document order
        """
        result = []
        pending: Optional[Chunk] = None

        for chunk in chunks:
            if pending is None:
                if chunk.token_count >= min_tokens:
                    result.append(chunk)
                else:
                    pending = chunk
                continue

            if (
                _same_context(pending, chunk)
                and pending.token_count + chunk.token_count <= max_tokens
            ):
                pending.content = f"{pending.content}{PARAGRAPH_SEPARATOR}{chunk.content}"
                pending.token_count = self.estimator.count_tokens(pending.content)
                continue

            result.append(pending)
            if chunk.token_count >= min_tokens:
                result.append(chunk)
                pending = None
            else:
                pending = chunk

        if pending is not None:
            result.append(pending)

        return self._reindex(result)

    def _make_chunk(self, content: str, heading_context: Optional[str]) -> Chunk:
        return Chunk(
            content=content,
            token_count=self.estimator.count_tokens(content),
            heading_context=heading_context
        )

    @staticmethod
    def _reindex(chunks: List[Chunk]) -> List[Chunk]:
        for i, chunk in enumerate(chunks):
            chunk.index = i
        return chunks
