"""LLM prompts for various tasks."""

from seo_metadata.prompts.content_analysis import CONTENT_ANALYSIS_PROMPT
from seo_metadata.prompts.seo_metadata import SEO_METADATA_PROMPT

__all__ = [
    "CONTENT_ANALYSIS_PROMPT",
    "SEO_METADATA_PROMPT",
]
