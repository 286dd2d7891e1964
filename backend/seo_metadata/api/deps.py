"""Dependency injection for FastAPI routes."""

from typing import Annotated

from fastapi import Depends

from seo_metadata.pipeline import get_content_analyzer, get_metadata_generator
from seo_metadata.services.content_analyzer import ContentAnalyzer
from seo_metadata.services.metadata_generator import MetadataGenerator

# Type aliases for dependency injection
Generator = Annotated[MetadataGenerator, Depends(get_metadata_generator)]
Analyzer = Annotated[ContentAnalyzer, Depends(get_content_analyzer)]
