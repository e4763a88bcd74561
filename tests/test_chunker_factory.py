import logging

import pytest

from docchunker import chunk
from docchunker.config import ChunkConfig, ChunkStrategy
from docchunker.exceptions import InvalidStrategyError
from docchunker.chunkers import (
    ChunkerFactory,
    TokenChunker,
    HybridChunker,
    StructuralChunker,
    parse_chunk_strategy,
)


@pytest.mark.parametrize("name,expected", [
    ("token_based", ChunkStrategy.TOKEN),
    ("token", ChunkStrategy.TOKEN),
    ("TOKEN", ChunkStrategy.TOKEN),
    ("semantic", ChunkStrategy.SEMANTIC),
    ("markdown", ChunkStrategy.MARKDOWN),
    ("sentence", ChunkStrategy.SENTENCE),
    ("recursive", ChunkStrategy.RECURSIVE),
    ("Hybrid", ChunkStrategy.HYBRID),
    (None, ChunkStrategy.TOKEN),
])
def test_parse_chunk_strategy(name, expected):
    assert parse_chunk_strategy(name) == expected


def test_unknown_strategy_warns_and_falls_back(caplog):
    with caplog.at_level(logging.WARNING):
        assert parse_chunk_strategy("bogus") == ChunkStrategy.TOKEN

    assert "bogus" in caplog.text


@pytest.mark.parametrize("strategy,chunker_class", [
    (ChunkStrategy.TOKEN, TokenChunker),
    (ChunkStrategy.HYBRID, HybridChunker),
    (ChunkStrategy.MARKDOWN, StructuralChunker),
])
def test_create(strategy, chunker_class):
    chunker = ChunkerFactory.create(ChunkConfig(strategy=strategy))

    assert type(chunker) is chunker_class


@pytest.mark.parametrize("strategy", [
    ChunkStrategy.SEMANTIC,
    ChunkStrategy.SENTENCE,
    ChunkStrategy.RECURSIVE,
])
def test_unimplemented_strategies_use_token_chunker(strategy, caplog):
    with caplog.at_level(logging.WARNING):
        chunker = ChunkerFactory.create(ChunkConfig(strategy=strategy))

    assert type(chunker) is TokenChunker
    assert "not yet implemented" in caplog.text


def test_non_enum_strategy_raises():
    config = ChunkConfig(strategy="hybrid")

    with pytest.raises(InvalidStrategyError) as exc_info:
        chunk("# Title\n\nShort para.", config)

    assert exc_info.value.strategy == "hybrid"


def test_supported_strategies():
    assert ChunkerFactory.supported_strategies() == ["token_based", "markdown", "hybrid"]


def test_empty_content():
    config = ChunkConfig(strategy=ChunkStrategy.TOKEN, chunk_size=400, overlap=50)

    assert chunk("", config) == []
    assert chunk(None, config) == []


def test_chunk_dispatches_hybrid():
    config = ChunkConfig(strategy=ChunkStrategy.HYBRID, chunk_size=400, overlap=50)

    assert chunk("# Title\n\nShort para.", config) == ["[Context: # Title]\n\nShort para."]
