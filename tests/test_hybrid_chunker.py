from docchunker.config import ChunkConfig, ChunkStrategy
from docchunker.chunkers.markdown import HybridChunker, StructuralChunker

HYBRID = ChunkConfig(strategy=ChunkStrategy.HYBRID, chunk_size=400, overlap=50)
MARKDOWN = ChunkConfig(strategy=ChunkStrategy.MARKDOWN, chunk_size=400, overlap=50)


def test_title_and_short_paragraph():
    chunks = HybridChunker(HYBRID).chunk_document("# Title\n\nShort para.")

    assert chunks == ["[Context: # Title]\n\nShort para."]


def test_plain_text_falls_back_to_token_chunking():
    text = "plain sentence with no markup"

    assert HybridChunker(HYBRID).chunk_document(text) == [text]


def test_empty_input():
    assert HybridChunker(HYBRID).chunk_document("") == []


def test_small_paragraphs_in_one_section_merge():
    chunks = HybridChunker(HYBRID).chunk_document("# Guide\n\nFirst para.\n\nSecond para.")

    assert chunks == ["[Context: # Guide]\n\nFirst para.\n\nSecond para."]


def test_sections_stay_separate():
    chunks = HybridChunker(HYBRID).chunk_document("# A\n\nAlpha text.\n\n# B\n\nBeta text.")

    assert chunks == [
        "[Context: # A]\n\nAlpha text.",
        "[Context: # B]\n\nBeta text.",
    ]


def test_heading_of_empty_section_is_kept():
    chunks = HybridChunker(HYBRID).chunk_document("# A\n\n## B\n\nBody.")

    assert chunks == [
        "[Context: # A]\n\n# A",
        "[Context: # A > ## B]\n\nBody.",
    ]


def test_horizontal_rules_are_dropped():
    chunks = HybridChunker(HYBRID).chunk_document("# T\n\nA.\n\n---\n\nB.")

    assert chunks == ["[Context: # T]\n\nA.\n\nB."]


def test_code_block_is_kept_whole():
    chunks = HybridChunker(HYBRID).chunk_document("# Code\n\n```\nprint(1)\n```")

    assert chunks == ["[Context: # Code]\n\n```\nprint(1)\n```"]


def test_oversized_section_is_split_under_context():
    config = ChunkConfig(strategy=ChunkStrategy.HYBRID, chunk_size=50, overlap=0)
    content = "# H\n\n" + ("abcd " * 120).strip()

    chunks = HybridChunker(config).chunk_document(content)

    assert len(chunks) == 4
    assert all(c.startswith("[Context: # H]\n\nabcd") for c in chunks)


def test_structural_chunker_does_not_merge():
    chunks = StructuralChunker(MARKDOWN).chunk_document("# Guide\n\nFirst para.\n\nSecond para.")

    assert chunks == [
        "[Context: # Guide]\n\n# Guide",
        "[Context: # Guide]\n\nFirst para.",
        "[Context: # Guide]\n\nSecond para.",
    ]


def test_structural_chunker_segments_oversized_elements():
    config = ChunkConfig(strategy=ChunkStrategy.MARKDOWN, chunk_size=50, overlap=0)
    content = "# H\n\n" + ("abcd " * 120).strip()

    chunks = StructuralChunker(config).chunk_document(content)

    assert len(chunks) == 5
    assert chunks[0] == "[Context: # H]\n\n# H"
    assert all(c.startswith("[Context: # H]\n\n") for c in chunks)
