"""Strategy dispatch: pick a chunker for a configured strategy"""
from typing import List, Optional
import logging

from .base_chunker import BaseDocumentChunker
from .token_chunker import TokenChunker
from .markdown import HybridChunker, StructuralChunker
from ..config import ChunkConfig, ChunkStrategy
from ..exceptions import InvalidStrategyError
from ..text_processing.tokenizer_utils import TokenEstimator

logger = logging.getLogger(__name__)

_STRATEGY_NAMES = {
    'token_based': ChunkStrategy.TOKEN,
    'token': ChunkStrategy.TOKEN,
    'semantic': ChunkStrategy.SEMANTIC,
    'markdown': ChunkStrategy.MARKDOWN,
    'sentence': ChunkStrategy.SENTENCE,
    'recursive': ChunkStrategy.RECURSIVE,
    'hybrid': ChunkStrategy.HYBRID,
}

_UNIMPLEMENTED = (ChunkStrategy.SEMANTIC, ChunkStrategy.SENTENCE, ChunkStrategy.RECURSIVE)


def parse_chunk_strategy(name: Optional[str]) -> ChunkStrategy:
    """
    Map a strategy name to a ChunkStrategy, case-insensitively

    None means the token strategy. Unknown names log a warning and also
    resolve to the token strategy.
    """
    if name is None:
        return ChunkStrategy.TOKEN

    strategy = _STRATEGY_NAMES.get(name.lower())
    if strategy is None:
        logger.warning(f"Unknown chunk strategy '{name}', defaulting to token_based")
        return ChunkStrategy.TOKEN

    return strategy


class ChunkerFactory:
    """Factory for creating strategy-specific document chunkers"""

    @staticmethod
    def create(
        config: ChunkConfig,
        estimator: Optional[TokenEstimator] = None
    ) -> BaseDocumentChunker:
        """
        Create a document chunker for config.strategy

        Args:
            config: Resolved chunk configuration
            estimator: Optional token estimator shared by the chunker's stages

        Returns:
            Strategy-specific document chunker instance

        Raises:
            InvalidStrategyError: If config.strategy is not a ChunkStrategy
        """
        strategy = config.strategy

        if strategy == ChunkStrategy.TOKEN:
            return TokenChunker(config, estimator)

        if strategy == ChunkStrategy.HYBRID:
            return HybridChunker(config, estimator)

        if strategy == ChunkStrategy.MARKDOWN:
            return StructuralChunker(config, estimator)

        if strategy in _UNIMPLEMENTED:
            logger.warning(
                f"Chunking strategy '{strategy.value}' not yet implemented, using token_based"
            )
            return TokenChunker(config, estimator)

        raise InvalidStrategyError(strategy)

    @staticmethod
    def supported_strategies() -> List[str]:
        """Return names of strategies with a dedicated implementation"""
        return [s.value for s in ChunkStrategy if s not in _UNIMPLEMENTED]


def chunk(
    content: Optional[str],
    config: ChunkConfig,
    estimator: Optional[TokenEstimator] = None
) -> List[str]:
    """
    Chunk content according to config.strategy

    Args:
        content: Raw document text
        config: Resolved chunk configuration
        estimator: Optional token estimator (approximate by default)

    Returns:
        Ordered chunk strings; empty for empty or None content
    """
    if not content:
        return []

    chunker = ChunkerFactory.create(config, estimator)
    return chunker.chunk_document(content)
