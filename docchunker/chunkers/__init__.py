"""Document chunkers package"""
from .schema import Chunk
from .base_chunker import BaseDocumentChunker
from .token_chunker import TokenChunker, chunk_by_tokens, segment_text
from .markdown import HybridChunker, StructuralChunker
from .chunker_factory import ChunkerFactory, chunk, parse_chunk_strategy

__all__ = [
    'Chunk',
    'BaseDocumentChunker',
    'TokenChunker',
    'chunk_by_tokens',
    'segment_text',
    'HybridChunker',
    'StructuralChunker',
    'ChunkerFactory',
    'chunk',
    'parse_chunk_strategy',
]
