"""Process-wide entry points for metadata generation and content analysis."""

from functools import lru_cache

from seo_metadata.config import get_settings
from seo_metadata.services.content_analyzer import ContentAnalyzer
from seo_metadata.services.inference_client import InferenceConfig, get_inference_client
from seo_metadata.services.metadata_generator import MetadataGenerator, PageMetadata


@lru_cache
def get_metadata_generator() -> MetadataGenerator:
    """Get cached generator built from settings."""
    settings = get_settings()
    client = get_inference_client(InferenceConfig.from_settings(settings))
    return MetadataGenerator(
        client,
        max_retries=settings.llm_max_retries,
        base_delay_ms=settings.llm_retry_base_delay_ms,
    )


@lru_cache
def get_content_analyzer() -> ContentAnalyzer:
    """Get cached analyzer built from settings."""
    settings = get_settings()
    client = get_inference_client(InferenceConfig.from_settings(settings))
    return ContentAnalyzer(
        client,
        max_retries=settings.llm_max_retries,
        base_delay_ms=settings.llm_retry_base_delay_ms,
    )


async def generate_llm_metadata(url: str, content: str) -> PageMetadata:
    """Generate SEO metadata for a page; always returns a result."""
    return await get_metadata_generator().generate(url, content)


async def analyze_content(content: str) -> list[str]:
    """Return SEO suggestions for content; always returns a result."""
    return await get_content_analyzer().analyze(content)


async def get_pages() -> list[PageMetadata]:
    # Pages are not persisted
    return []
