from typing import Optional
from dataclasses import dataclass


@dataclass
class Chunk:
    """A text segment sized for embedding"""
    content: str
    token_count: int

    # Breadcrumb of ancestor headings, e.g. "# Guide > ## Install"
    heading_context: Optional[str] = None

    index: int = 0

    def render(self) -> str:
        """Final text handed back to the caller, context prefixed when present"""
        if self.heading_context:
            return f"[Context: {self.heading_context}]\n\n{self.content}"
        return self.content
