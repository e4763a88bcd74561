import pytest

from docchunker.config import ChunkConfig, ChunkStrategy, ChunkingSettings, DEFAULT_MODEL
from docchunker.pipeline import ChunkingPipeline


def test_settings_defaults():
    settings = ChunkingSettings()

    assert settings.strategy == "token_based"
    assert settings.chunk_size == 400
    assert settings.overlap == 50
    assert settings.strip_non_ascii is True
    assert settings.model == DEFAULT_MODEL


@pytest.mark.parametrize("kwargs", [
    {"chunk_size": 49},
    {"chunk_size": 2001},
    {"overlap": -1},
    {"overlap": 501},
    {"strategy": ""},
])
def test_settings_out_of_range(kwargs):
    with pytest.raises(ValueError):
        ChunkingSettings(**kwargs)


def test_settings_range_bounds_are_inclusive():
    ChunkingSettings(chunk_size=50, overlap=0)
    ChunkingSettings(chunk_size=2000, overlap=500)


def test_resolve_config_uses_defaults():
    pipeline = ChunkingPipeline()

    assert pipeline.resolve_config() == ChunkConfig(ChunkStrategy.TOKEN, 400, 50)


def test_resolve_config_applies_overrides():
    pipeline = ChunkingPipeline(ChunkingSettings(strategy="markdown"))

    assert pipeline.resolve_config(chunk_size=100) == ChunkConfig(ChunkStrategy.MARKDOWN, 100, 50)
    assert pipeline.resolve_config(strategy="hybrid", overlap=0) == ChunkConfig(ChunkStrategy.HYBRID, 400, 0)


def test_model_reaches_estimator():
    pipeline = ChunkingPipeline(ChunkingSettings(model="custom-model"))

    assert pipeline.estimator.model_name == "custom-model"


def test_none_content():
    assert ChunkingPipeline().chunk_document(None) == []


def test_non_ascii_is_stripped_by_default():
    assert ChunkingPipeline().chunk_document("naïve text") == ["na ve text"]


def test_non_ascii_kept_when_disabled():
    pipeline = ChunkingPipeline(ChunkingSettings(strip_non_ascii=False))

    assert pipeline.chunk_document("naïve text") == ["naïve text"]


def test_strategy_override():
    chunks = ChunkingPipeline().chunk_document("# Title\n\nShort para.", strategy="hybrid")

    assert chunks == ["[Context: # Title]\n\nShort para."]
