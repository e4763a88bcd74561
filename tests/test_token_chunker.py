import pytest

from docchunker.config import ChunkConfig
from docchunker.exceptions import ChunkingProgressError
from docchunker.chunkers.token_chunker import TokenChunker, chunk_by_tokens, segment_text
from docchunker.text_processing.tokenizer_utils import TokenEstimator, ApproximateTokenEstimator


class StalledEstimator(TokenEstimator):
    """One token per character, but never maps a budget past offset 0"""

    def count_tokens(self, text):
        return len(text or "")

    def char_offset_for_tokens(self, text, target_tokens):
        return 0


def numbered_words(count):
    # Every word is 4 chars, so word k starts at offset 5 * k
    return " ".join(f"w{i:03d}" for i in range(count))


def test_empty_text_gives_no_chunks():
    assert chunk_by_tokens("", ChunkConfig()) == []


def test_text_within_budget_is_one_chunk():
    text = "A short document.\n\nWith two paragraphs."

    assert chunk_by_tokens(text, ChunkConfig(chunk_size=400, overlap=50)) == [text]


def test_chunks_without_overlap_cover_text():
    text = numbered_words(400)

    chunks = chunk_by_tokens(text, ChunkConfig(chunk_size=100, overlap=0))

    assert len(chunks) >= 5
    assert " ".join(chunks) == text
    assert chunks[0].endswith("w070")


def test_overlap_repeats_tail_of_previous_chunk():
    text = numbered_words(400)

    chunks = chunk_by_tokens(text, ChunkConfig(chunk_size=100, overlap=20))

    assert chunks[1].startswith("w056")
    assert "w056" in chunks[0].split()
    assert chunks[-1].endswith("w399")
    for previous, current in zip(chunks, chunks[1:]):
        assert current.split()[0] in previous.split()


def test_overlap_not_smaller_than_chunk_is_ignored():
    text = numbered_words(400)

    with_overlap = chunk_by_tokens(text, ChunkConfig(chunk_size=100, overlap=500))
    without_overlap = chunk_by_tokens(text, ChunkConfig(chunk_size=100, overlap=0))

    assert with_overlap == without_overlap


def test_long_word_gets_no_overlap():
    chunks = chunk_by_tokens("x" * 2000, ChunkConfig(chunk_size=100, overlap=20))

    assert chunks == ["x" * 400] * 5


def test_stalled_offset_raises():
    with pytest.raises(ChunkingProgressError):
        chunk_by_tokens(" abc def", ChunkConfig(chunk_size=4, overlap=2), StalledEstimator())


def test_segment_text_drops_whitespace_between_segments():
    segments = segment_text("aaaa bbbb cccc", 2, ApproximateTokenEstimator())

    assert segments == ["aaaa", "bbbb", "cccc"]


def test_token_chunker_delegates():
    chunker = TokenChunker(ChunkConfig(chunk_size=400))

    assert chunker.chunk_size == 400
    assert chunker.chunk_document("hello") == ["hello"]
