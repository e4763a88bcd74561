from typing import List, Optional

from ..text_processing.tokenizer_utils import TokenEstimator, ApproximateTokenEstimator


class ChunkStatistics:
    """Handles display of chunking statistics"""

    def __init__(self, estimator: Optional[TokenEstimator] = None):
        self.estimator = estimator or ApproximateTokenEstimator()

    def print_statistics(self, chunks: List[str]):
        """
        Print statistics about generated chunks

        Args:
            chunks: Rendered chunk strings
        """
        if not chunks:
            return

        chunk_sizes = [len(chunk) for chunk in chunks]
        token_counts = [self.estimator.count_tokens(chunk) for chunk in chunks]
        total_chars = sum(chunk_sizes)
        avg_size = total_chars / len(chunks)

        print(f"\n  Chunk Statistics:")
        print(f"    Total chunks: {len(chunks)}")
        print(f"    Total characters: {total_chars:,}")
        print(f"    Average chunk size: {avg_size:.0f} chars")
        print(f"    Min chunk size: {min(chunk_sizes)} chars")
        print(f"    Max chunk size: {max(chunk_sizes)} chars")
        print(f"    Max chunk tokens: ~{max(token_counts)}")


class ChunkOutputFormatter:
    """Handles formatted output of chunk text"""

    def print_chunks(self, chunks: List[str], separator: str):
        """
        Print chunks in order, separated by a separator line

        Args:
            chunks: Rendered chunk strings
            separator: Line printed between chunks
        """
        for i, chunk in enumerate(chunks):
            if i > 0:
                print(separator)
            print(chunk)
