"""
Caller-side entry point: resolve configuration, filter text, chunk.

This is the boundary a queueing or storage layer talks to. It merges
per-call overrides over the global ChunkingSettings and applies the
ASCII filter before handing text to the engine.
"""
from typing import List, Optional
import logging

from .config import ChunkConfig, ChunkingSettings
from .chunkers.chunker_factory import chunk, parse_chunk_strategy
from .text_processing.ascii_filter import strip_non_ascii
from .text_processing.tokenizer_utils import TokenEstimator, ApproximateTokenEstimator

logger = logging.getLogger(__name__)


class ChunkingPipeline:
    """Chunk documents with global defaults and per-call overrides"""

    def __init__(
        self,
        settings: Optional[ChunkingSettings] = None,
        estimator: Optional[TokenEstimator] = None
    ):
        """
        Args:
            settings: Global defaults (library defaults if omitted)
            estimator: Token estimator; defaults to the approximate one
                carrying settings.model
        """
        self.settings = settings or ChunkingSettings()
        self.estimator = estimator or ApproximateTokenEstimator(self.settings.model)

    def resolve_config(
        self,
        strategy: Optional[str] = None,
        chunk_size: Optional[int] = None,
        overlap: Optional[int] = None
    ) -> ChunkConfig:
        """
        Build a ChunkConfig; None for any argument means the global default
        """
        return ChunkConfig(
            strategy=parse_chunk_strategy(strategy if strategy is not None else self.settings.strategy),
            chunk_size=chunk_size if chunk_size is not None else self.settings.chunk_size,
            overlap=overlap if overlap is not None else self.settings.overlap,
        )

    def chunk_document(
        self,
        content: Optional[str],
        strategy: Optional[str] = None,
        chunk_size: Optional[int] = None,
        overlap: Optional[int] = None
    ) -> List[str]:
        """
        Chunk one document

        Args:
            content: Raw document text
            strategy: Strategy name override
            chunk_size: Chunk size override in tokens
            overlap: Overlap override in tokens

        Returns:
            Ordered chunk strings, one row per chunk for the caller to store
        """
        if content is None:
            return []

        config = self.resolve_config(strategy, chunk_size, overlap)

        if self.settings.strip_non_ascii:
            content = strip_non_ascii(content)

        chunks = chunk(content, config, self.estimator)
        logger.info(
            f"Chunked {len(content)} chars into {len(chunks)} chunks "
            f"(strategy={config.strategy.value}, chunk_size={config.chunk_size}, overlap={config.overlap})"
        )
        return chunks
