"""Docling-style hybrid chunker: structure first, then token-aware refinement"""
from typing import List, Optional
import logging

from ..base_chunker import BaseDocumentChunker
from ..token_chunker import chunk_by_tokens
from .markdown_parser import MarkdownParser, is_likely_markdown
from .refiner import ChunkRefiner
from .utils import elements_to_chunks, render_chunks
from ...config import ChunkConfig
from ...text_processing.tokenizer_utils import TokenEstimator

logger = logging.getLogger(__name__)


class HybridChunker(BaseDocumentChunker):
    """
    Structure-aware chunker with split and merge refinement

    Stages:
    1. Fall back to token chunking when the text is not markdown
    2. Parse markdown into elements with heading breadcrumbs
    3. Split chunks over chunk_size tokens
    4. Merge small neighbours that share a breadcrumb
    5. Prefix each chunk with its breadcrumb
    """

    def __init__(self, config: ChunkConfig, estimator: Optional[TokenEstimator] = None):
        super().__init__(config, estimator)
        self.parser = MarkdownParser(self.estimator)
        self.refiner = ChunkRefiner(self.estimator)

    def chunk_document(self, content: str) -> List[str]:
        if not content:
            return []

        if not is_likely_markdown(content):
            logger.debug("Content doesn't appear to be markdown, falling back to token-based chunking")
            return chunk_by_tokens(content, self.config, self.estimator)

        logger.debug(f"Hybrid chunking: chunk_size={self.chunk_size}, overlap={self.config.overlap}")

        elements = self.parser.parse(content)
        chunks = elements_to_chunks(elements, fold_headings=True)
        if not chunks:
            return []

        chunks = self.refiner.refine(chunks, self.chunk_size)

        logger.debug(f"Hybrid chunking produced {len(chunks)} chunks")
        return render_chunks(chunks)
