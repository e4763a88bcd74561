"""Line-oriented markdown structure parser with heading breadcrumbs"""
from dataclasses import dataclass
from typing import List, Optional
from enum import Enum
import re
import logging

from ...text_processing.tokenizer_utils import TokenEstimator, ApproximateTokenEstimator

logger = logging.getLogger(__name__)

MAX_HEADING_LEVELS = 6

HEADING_RE = re.compile(r'^(#{1,6})(?:[ \t]|$)')
CODE_FENCE_RE = re.compile(r'^ {0,3}(?:```|~~~)')
LIST_ITEM_RE = re.compile(r'^[ \t]*(?:[-*+]|\d+[.)])[ \t]')
BLOCKQUOTE_RE = re.compile(r'^ {0,3}>')
HORIZONTAL_RULE_RE = re.compile(r'^ {0,3}([-*_])(?:\1| )*$')

# Detection only looks at the first three columns of indentation
INDICATOR_HEADING_RE = re.compile(r'^ {0,3}#{1,6}(?:[ \t]|$)')
INDICATOR_FENCE_RE = re.compile(r'^ {0,3}(?:```|~~~)')
INDICATOR_LIST_RE = re.compile(r'^ {0,3}(?:[-*+]|\d+[.)])[ \t]')
INDICATOR_BLOCKQUOTE_RE = re.compile(r'^ {0,3}>')


class ElementType(Enum):
    """Types of markdown elements"""
    HEADING = "heading"
    PARAGRAPH = "paragraph"
    CODE_BLOCK = "code_block"
    LIST_ITEM = "list_item"
    BLOCKQUOTE = "blockquote"
    TABLE = "table"
    HORIZONTAL_RULE = "horizontal_rule"


@dataclass(frozen=True)
class MarkdownElement:
    """Represents a parsed markdown element"""
    type: ElementType
    content: str
    token_count: int
    heading_level: int = 0  # 1-6 for headings
    heading_context: Optional[str] = None


class HeadingStack:
    """Most recent heading text per level, h1 first"""

    def __init__(self):
        self._slots: List[Optional[str]] = [None] * MAX_HEADING_LEVELS

    def push(self, level: int, text: str) -> None:
        """Set the heading for level, forgetting it and all deeper levels first"""
        for i in range(level - 1, MAX_HEADING_LEVELS):
            self._slots[i] = None
        self._slots[level - 1] = text

    def context(self) -> Optional[str]:
        """
        Breadcrumb such as "# Guide > ## Install", None when empty
        """
        parts = [
            f"{'#' * (i + 1)} {text}"
            for i, text in enumerate(self._slots)
            if text is not None
        ]
        return " > ".join(parts) if parts else None


def is_blank_line(line: str) -> bool:
    return all(c in ' \t\r' for c in line)


def get_heading_level(line: str) -> int:
    """Heading level (1-6) of line, or 0 if it is not a heading"""
    match = HEADING_RE.match(line)
    return len(match.group(1)) if match else 0


def is_code_fence(line: str) -> bool:
    return bool(CODE_FENCE_RE.match(line))


def is_list_item(line: str) -> bool:
    return bool(LIST_ITEM_RE.match(line))


def is_blockquote(line: str) -> bool:
    return bool(BLOCKQUOTE_RE.match(line))


def is_horizontal_rule(line: str) -> bool:
    """Three or more of the same -, * or _ with optional spaces between"""
    match = HORIZONTAL_RULE_RE.match(line)
    return bool(match) and line.count(match.group(1)) >= 3


def is_table_row(line: str) -> bool:
    return '|' in line


def _has_link(content: str) -> bool:
    """True if a bracketed span is immediately followed by '('"""
    length = len(content)
    start = content.find('[')

    while start != -1:
        depth = 1
        pos = start + 1
        while pos < length and depth > 0:
            if content[pos] == '[':
                depth += 1
            elif content[pos] == ']':
                depth -= 1
            pos += 1

        if depth == 0 and pos < length and content[pos] == '(':
            return True

        start = content.find('[', start + 1)

    return False


def is_likely_markdown(content: Optional[str]) -> bool:
    """
    Detect whether content would benefit from structure-aware chunking

    A heading or a code fence is enough on its own. Otherwise two distinct
    indicators are needed among list items, blockquotes, table rows and
    links/images.

    Args:
        content: Document text

    Returns:
        True if the text looks like markdown
    """
    if not content:
        return False

    indicators = set()

    for line in content.split('\n'):
        if INDICATOR_HEADING_RE.match(line):
            indicators.add('heading')
        if INDICATOR_FENCE_RE.match(line):
            indicators.add('code_fence')
        if INDICATOR_LIST_RE.match(line):
            indicators.add('list')
        if INDICATOR_BLOCKQUOTE_RE.match(line):
            indicators.add('blockquote')
        if line.count('|') >= 2:
            indicators.add('table')

        if 'heading' in indicators or 'code_fence' in indicators or len(indicators) >= 2:
            return True

    # A link only matters if it would be the second indicator
    return len(indicators) == 1 and _has_link(content)


class MarkdownParser:
    """Parse markdown into a flat list of typed elements in a single pass"""

    def __init__(self, estimator: Optional[TokenEstimator] = None):
        self.estimator = estimator or ApproximateTokenEstimator()

    def parse(self, content: str) -> List[MarkdownElement]:
        """
        Parse markdown content into elements

        Every element carries the heading breadcrumb in effect after any
        heading on its own line has been applied.

        Args:
            content: Raw markdown text

        Returns:
            List of parsed markdown elements
        """
        if not content:
            return []

        lines = content.split('\n')
        if content.endswith('\n'):
            lines.pop()
        last_index = len(lines) - 1

        elements: List[MarkdownElement] = []
        buffer: List[str] = []
        current_type = ElementType.PARAGRAPH
        in_code_block = False
        headings = HeadingStack()
        heading_context: Optional[str] = None

        def flush():
            # Code lines keep their own newlines, other lines are joined
            block = ''.join(buffer) if in_code_block else '\n'.join(buffer)
            buffer.clear()
            if block:
                elements.append(self._make_element(current_type, block, heading_context))

        for index, line in enumerate(lines):
            newline = '\n' if (index < last_index or content.endswith('\n')) else ''

            if is_code_fence(line):
                if in_code_block:
                    buffer.append(line + newline)
                    flush()
                    in_code_block = False
                    current_type = ElementType.PARAGRAPH
                    continue

                flush()
                in_code_block = True
                current_type = ElementType.CODE_BLOCK

            if in_code_block:
                buffer.append(line + newline)
                continue

            if is_blank_line(line):
                flush()
                current_type = ElementType.PARAGRAPH
                continue

            level = get_heading_level(line)
            if level > 0:
                flush()
                headings.push(level, line[level:].lstrip(' \t'))
                heading_context = headings.context()
                elements.append(self._make_element(
                    ElementType.HEADING, line, heading_context, heading_level=level
                ))
                current_type = ElementType.PARAGRAPH
                continue

            if is_horizontal_rule(line):
                flush()
                elements.append(MarkdownElement(
                    type=ElementType.HORIZONTAL_RULE,
                    content=line,
                    token_count=1,
                    heading_context=heading_context
                ))
                current_type = ElementType.PARAGRAPH
                continue

            # Later checks win: a list line containing '|' is a table row
            for matches, element_type in (
                (is_list_item, ElementType.LIST_ITEM),
                (is_blockquote, ElementType.BLOCKQUOTE),
                (is_table_row, ElementType.TABLE),
            ):
                if matches(line):
                    if current_type != element_type:
                        flush()
                    current_type = element_type

            buffer.append(line)

        flush()

        logger.debug(f"Parsed {len(elements)} markdown elements")
        return elements

    def _make_element(
        self,
        element_type: ElementType,
        content: str,
        heading_context: Optional[str],
        heading_level: int = 0
    ) -> MarkdownElement:
        return MarkdownElement(
            type=element_type,
            content=content,
            token_count=self.estimator.count_tokens(content),
            heading_level=heading_level,
            heading_context=heading_context
        )


def parse_markdown_structure(
    content: str,
    estimator: Optional[TokenEstimator] = None
) -> List[MarkdownElement]:
    """Parse content with a fresh MarkdownParser"""
    return MarkdownParser(estimator).parse(content)
