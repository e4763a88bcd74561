"""Markdown chunking module - all markdown-specific logic"""
from .markdown_parser import (
    MarkdownParser,
    MarkdownElement,
    ElementType,
    HeadingStack,
    is_likely_markdown,
    parse_markdown_structure,
)
from .refiner import ChunkRefiner, merge_threshold
from .hybrid_chunker import HybridChunker
from .structural_chunker import StructuralChunker

__all__ = [
    'MarkdownParser',
    'MarkdownElement',
    'ElementType',
    'HeadingStack',
    'is_likely_markdown',
    'parse_markdown_structure',
    'ChunkRefiner',
    'merge_threshold',
    'HybridChunker',
    'StructuralChunker',
]
