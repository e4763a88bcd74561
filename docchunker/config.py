from dataclasses import dataclass
from enum import Enum
from typing import Optional


class ChunkStrategy(Enum):
    """Chunking strategies understood by the dispatcher"""
    TOKEN = "token_based"
    SEMANTIC = "semantic"       # not implemented, falls back to TOKEN
    MARKDOWN = "markdown"
    SENTENCE = "sentence"       # not implemented, falls back to TOKEN
    RECURSIVE = "recursive"     # not implemented, falls back to TOKEN
    HYBRID = "hybrid"


# Defaults and accepted ranges for the global settings
DEFAULT_STRATEGY = "token_based"
DEFAULT_CHUNK_SIZE = 400
MIN_CHUNK_SIZE = 50
MAX_CHUNK_SIZE = 2000
DEFAULT_OVERLAP = 50
MIN_OVERLAP = 0
MAX_OVERLAP = 500
DEFAULT_MODEL = "text-embedding-3-small"


@dataclass(frozen=True)
class ChunkConfig:
    """
    Resolved configuration for a single chunking call.

    overlap < chunk_size is expected but not enforced here; the token
    chunker ignores overlap for any chunk that is not larger than it.
    """
    strategy: ChunkStrategy = ChunkStrategy.TOKEN
    chunk_size: int = DEFAULT_CHUNK_SIZE
    overlap: int = DEFAULT_OVERLAP
    separators: Optional[str] = None  # reserved


@dataclass
class ChunkingSettings:
    """Global defaults that per-call overrides are merged over"""
    strategy: str = DEFAULT_STRATEGY
    chunk_size: int = DEFAULT_CHUNK_SIZE
    overlap: int = DEFAULT_OVERLAP
    strip_non_ascii: bool = True
    model: str = DEFAULT_MODEL

    def __post_init__(self):
        if not MIN_CHUNK_SIZE <= self.chunk_size <= MAX_CHUNK_SIZE:
            raise ValueError(
                f"chunk_size ({self.chunk_size}) must be between "
                f"{MIN_CHUNK_SIZE} and {MAX_CHUNK_SIZE}"
            )

        if not MIN_OVERLAP <= self.overlap <= MAX_OVERLAP:
            raise ValueError(
                f"overlap ({self.overlap}) must be between "
                f"{MIN_OVERLAP} and {MAX_OVERLAP}"
            )

        if not self.strategy:
            raise ValueError("strategy cannot be empty")
