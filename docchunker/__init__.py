"""
Token-bounded document chunking for embedding pipelines

"""

__version__ = "1.0.0"

from .config import ChunkConfig, ChunkStrategy, ChunkingSettings
from .exceptions import ChunkingError, InvalidStrategyError, ChunkingProgressError
from .text_processing import (
    TokenEstimator,
    ApproximateTokenEstimator,
    HuggingFaceTokenEstimator,
    count_tokens,
    char_offset_for_tokens,
    find_break,
    strip_non_ascii,
)
from .chunkers import (
    Chunk,
    TokenChunker,
    HybridChunker,
    StructuralChunker,
    ChunkerFactory,
    chunk,
    chunk_by_tokens,
    parse_chunk_strategy,
)
from .chunkers.markdown import is_likely_markdown, parse_markdown_structure
from .pipeline import ChunkingPipeline

__all__ = [
    'ChunkConfig',
    'ChunkStrategy',
    'ChunkingSettings',
    'ChunkingError',
    'InvalidStrategyError',
    'ChunkingProgressError',
    'TokenEstimator',
    'ApproximateTokenEstimator',
    'HuggingFaceTokenEstimator',
    'count_tokens',
    'char_offset_for_tokens',
    'find_break',
    'strip_non_ascii',
    'Chunk',
    'TokenChunker',
    'HybridChunker',
    'StructuralChunker',
    'ChunkerFactory',
    'chunk',
    'chunk_by_tokens',
    'parse_chunk_strategy',
    'is_likely_markdown',
    'parse_markdown_structure',
    'ChunkingPipeline',
]
