"""Tests for the module-level entry points."""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from seo_metadata import pipeline
from seo_metadata.config import get_settings
from seo_metadata.services.content_analyzer import ContentAnalyzer
from seo_metadata.services.inference_client import HuggingFaceInferenceClient
from seo_metadata.services.metadata_generator import MetadataGenerator, PageMetadata


@pytest.fixture(autouse=True)
def _clear_caches(monkeypatch):
    """Build fresh settings and singletons for each test."""
    monkeypatch.setenv("LLM_PROVIDER", "huggingface")
    monkeypatch.setenv("LLM_MAX_RETRIES", "5")
    monkeypatch.setenv("LLM_RETRY_BASE_DELAY_MS", "200")
    get_settings.cache_clear()
    pipeline.get_metadata_generator.cache_clear()
    pipeline.get_content_analyzer.cache_clear()
    yield
    get_settings.cache_clear()
    pipeline.get_metadata_generator.cache_clear()
    pipeline.get_content_analyzer.cache_clear()


def test_generator_built_from_settings():
    generator = pipeline.get_metadata_generator()
    assert isinstance(generator, MetadataGenerator)
    assert isinstance(generator.client, HuggingFaceInferenceClient)
    assert generator.max_retries == 5
    assert generator.base_delay_ms == 200
    assert pipeline.get_metadata_generator() is generator


def test_analyzer_built_from_settings():
    analyzer = pipeline.get_content_analyzer()
    assert isinstance(analyzer, ContentAnalyzer)
    assert analyzer.max_retries == 5


@pytest.mark.asyncio
async def test_generate_llm_metadata_delegates():
    page = PageMetadata(id=7, url="http://x", title="T", description="D.", keywords="k")
    generator = MagicMock()
    generator.generate = AsyncMock(return_value=page)

    with patch.object(pipeline, "get_metadata_generator", return_value=generator):
        result = await pipeline.generate_llm_metadata("http://x", "content")

    assert result is page
    generator.generate.assert_awaited_once_with("http://x", "content")


@pytest.mark.asyncio
async def test_analyze_content_delegates():
    analyzer = MagicMock()
    analyzer.analyze = AsyncMock(return_value=["one", "two"])

    with patch.object(pipeline, "get_content_analyzer", return_value=analyzer):
        assert await pipeline.analyze_content("content") == ["one", "two"]


@pytest.mark.asyncio
async def test_get_pages_is_empty():
    assert await pipeline.get_pages() == []
