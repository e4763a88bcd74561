import logging
from typing import List

from .markdown_parser import MarkdownElement, ElementType
from ..schema import Chunk

logger = logging.getLogger(__name__)


def _heading_has_body(elements: List[MarkdownElement], index: int) -> bool:
    """True if the next content element sits under the same breadcrumb"""
    heading = elements[index]
    for element in elements[index + 1:]:
        if element.type == ElementType.HORIZONTAL_RULE:
            continue
        return element.heading_context == heading.heading_context
    return False


def elements_to_chunks(
    elements: List[MarkdownElement],
    fold_headings: bool = False
) -> List[Chunk]:
    """
    Map parsed elements to initial chunks

    Horizontal rules are dropped. With fold_headings, a heading followed by
    body text is dropped too, since the body's [Context: ...] prefix already
    names it; headings of empty sections are kept.
    """
    chunks = []

    for i, element in enumerate(elements):
        if element.type == ElementType.HORIZONTAL_RULE:
            continue
        if (
            fold_headings
            and element.type == ElementType.HEADING
            and _heading_has_body(elements, i)
        ):
            continue

        chunks.append(Chunk(
            content=element.content,
            token_count=element.token_count,
            heading_context=element.heading_context,
            index=len(chunks)
        ))

    logger.debug(f"Created {len(chunks)} initial chunks from {len(elements)} elements")
    return chunks


def render_chunks(chunks: List[Chunk]) -> List[str]:
    """Final chunk strings, each prefixed with its heading context"""
    return [chunk.render() for chunk in chunks]
