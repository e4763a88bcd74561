"""
Custom exceptions for the chunking engine.

Empty input and unknown strategy names are not errors; these exceptions
signal caller defects or broken engine invariants and abort the call.
"""


class ChunkingError(Exception):
    """Base exception for all chunking errors"""
    pass


class InvalidStrategyError(ChunkingError):
    """Raised when a value that is not a ChunkStrategy reaches the dispatcher"""
    def __init__(self, strategy):
        super().__init__(f"Invalid chunking strategy: {strategy!r}")
        self.strategy = strategy


class ChunkingProgressError(ChunkingError):
    """Raised when a segmentation loop fails to advance its offset"""
    def __init__(self, offset: int, length: int):
        self.offset = offset
        self.length = length
        super().__init__(
            f"Segmentation made no progress at offset {offset} of {length}"
        )
