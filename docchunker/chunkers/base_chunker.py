"""Base abstract class for document chunkers"""
from abc import ABC, abstractmethod
from typing import List, Optional
import logging

from ..config import ChunkConfig
from ..text_processing.tokenizer_utils import TokenEstimator, ApproximateTokenEstimator

logger = logging.getLogger(__name__)


class BaseDocumentChunker(ABC):
    """
    Abstract base class for document-level chunking.

    Chunkers hold only the per-call configuration and a token estimator;
    every intermediate structure is local to chunk_document.
    """

    def __init__(self, config: ChunkConfig, estimator: Optional[TokenEstimator] = None):
        self.config = config
        self.estimator = estimator or ApproximateTokenEstimator()
        logger.debug(f"{self.__class__.__name__} initialized")

    @abstractmethod
    def chunk_document(self, content: str) -> List[str]:
        """
        Chunk document content.

        Args:
            content: Raw document text

        Returns:
            Ordered chunk strings, empty for empty input
        """
        pass

    @property
    def chunk_size(self) -> int:
        """Target size of a chunk in tokens"""
        return self.config.chunk_size
