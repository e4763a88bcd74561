"""Fixed-size token chunking with overlap"""
from typing import List, Optional
import logging

from .base_chunker import BaseDocumentChunker
from ..config import ChunkConfig
from ..exceptions import ChunkingProgressError
from ..text_processing.break_points import find_break
from ..text_processing.tokenizer_utils import TokenEstimator, ApproximateTokenEstimator

logger = logging.getLogger(__name__)

# Skipped between segments
SEGMENT_WHITESPACE = " \t\n\r"

# Accepted as the start of an overlap window
OVERLAP_BOUNDARY = " \t\n"


def _check_progress(previous: int, current: int, length: int) -> None:
    if current <= previous:
        raise ChunkingProgressError(previous, length)


def _skip_whitespace(text: str, offset: int) -> int:
    while offset < len(text) and text[offset] in SEGMENT_WHITESPACE:
        offset += 1
    return offset


def _segment_end(remaining: str, max_tokens: int, estimator: TokenEstimator) -> int:
    """Length of the next segment taken from the front of remaining"""
    target = estimator.char_offset_for_tokens(remaining, max_tokens)
    end = find_break(remaining, target, len(remaining))

    # A break at offset 0 would stall the loop
    if end <= 0:
        end = target if target > 0 else len(remaining)

    return end


def segment_text(text: str, max_tokens: int, estimator: TokenEstimator) -> List[str]:
    """
    Cut text into consecutive segments of about max_tokens tokens

    No overlap. Whitespace between segments is dropped.

    Args:
        text: Text to segment
        max_tokens: Target tokens per segment
        estimator: Token estimator

    Returns:
        Segments in document order
    """
    segments = []
    length = len(text)
    start = 0

    while start < length:
        remaining = text[start:]
        end = _segment_end(remaining, max_tokens, estimator)
        segments.append(remaining[:end])

        next_start = _skip_whitespace(text, start + end)
        _check_progress(start, next_start, length)
        start = next_start

    return segments


def chunk_by_tokens(
    text: str,
    config: ChunkConfig,
    estimator: Optional[TokenEstimator] = None
) -> List[str]:
    """
    Split flat text into chunks of config.chunk_size tokens

    Consecutive chunks share about config.overlap tokens. The overlap
    window only starts at whitespace found by searching forward, so a
    chunk whose tail is one long word gets no overlap.

    Args:
        text: Text to chunk
        config: Chunk size and overlap
        estimator: Token estimator (approximate by default)

    Returns:
        Ordered chunk strings
    """
    if not text:
        return []

    estimator = estimator or ApproximateTokenEstimator()
    length = len(text)
    total_tokens = estimator.count_tokens(text)

    logger.debug(
        f"Chunking text: {length} chars, ~{total_tokens} tokens, "
        f"chunk_size={config.chunk_size}, overlap={config.overlap}"
    )

    if total_tokens <= config.chunk_size:
        return [text]

    chunks = []
    start = 0

    while start < length:
        remaining = text[start:]
        end = _segment_end(remaining, config.chunk_size, estimator)

        chunk = remaining[:end]
        chunk_tokens = estimator.count_tokens(chunk)
        chunks.append(chunk)

        logger.debug(
            f"Chunk {len(chunks) - 1}: offset={start}, length={end}, ~{chunk_tokens} tokens"
        )

        if 0 < config.overlap < chunk_tokens:
            overlap_offset = estimator.char_offset_for_tokens(
                chunk, chunk_tokens - config.overlap
            )

            # Search forward only, never past the chunk end
            while overlap_offset < end and chunk[overlap_offset] not in OVERLAP_BOUNDARY:
                overlap_offset += 1

            if overlap_offset >= end:
                overlap_offset = end

            next_start = start + overlap_offset
        else:
            next_start = start + end

        _check_progress(start, next_start, length)
        start = next_start

        if start >= length:
            break

        start = _skip_whitespace(text, start)

    logger.debug(f"Created {len(chunks)} chunks from text")
    return chunks


class TokenChunker(BaseDocumentChunker):
    """Flat text chunker: fixed token windows with overlap"""

    def chunk_document(self, content: str) -> List[str]:
        return chunk_by_tokens(content, self.config, self.estimator)
