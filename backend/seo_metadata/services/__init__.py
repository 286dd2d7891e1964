"""Business logic services."""

from seo_metadata.services.content_analyzer import ContentAnalyzer
from seo_metadata.services.inference_client import (
    InferenceConfig,
    InferenceError,
    get_inference_client,
)
from seo_metadata.services.metadata_generator import MetadataGenerator, PageMetadata
from seo_metadata.services.seo_score import seo_score

__all__ = [
    "ContentAnalyzer",
    "InferenceConfig",
    "InferenceError",
    "get_inference_client",
    "MetadataGenerator",
    "PageMetadata",
    "seo_score",
]
