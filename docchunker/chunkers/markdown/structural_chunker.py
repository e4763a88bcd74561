"""Pure markdown chunker: structure boundaries only, no merging"""
from typing import List
import logging

from ..base_chunker import BaseDocumentChunker
from ..schema import Chunk
from ..token_chunker import chunk_by_tokens, segment_text
from .markdown_parser import MarkdownParser, is_likely_markdown
from .utils import elements_to_chunks, render_chunks

logger = logging.getLogger(__name__)


class StructuralChunker(BaseDocumentChunker):
    """
    Chunk along markdown structure without refinement

    Elements over chunk_size tokens are segmented at break points, smaller
    ones become one chunk each. Cheaper than the hybrid strategy, but small
    elements are never merged.
    """

    def chunk_document(self, content: str) -> List[str]:
        if not content:
            return []

        if not is_likely_markdown(content):
            logger.debug("Content doesn't appear to be markdown, falling back to token-based chunking")
            return chunk_by_tokens(content, self.config, self.estimator)

        logger.debug(f"Markdown chunking: chunk_size={self.chunk_size}")

        elements = MarkdownParser(self.estimator).parse(content)

        chunks = []
        for chunk in elements_to_chunks(elements):
            if chunk.token_count <= self.chunk_size:
                chunks.append(chunk)
                continue

            for segment in segment_text(chunk.content, self.chunk_size, self.estimator):
                chunks.append(Chunk(
                    content=segment,
                    token_count=self.estimator.count_tokens(segment),
                    heading_context=chunk.heading_context
                ))

        for i, chunk in enumerate(chunks):
            chunk.index = i

        return render_chunks(chunks)
