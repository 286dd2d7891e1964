"""Free-text SEO suggestions for page content."""

import asyncio
import logging
from typing import Awaitable, Callable

from seo_metadata.prompts import CONTENT_ANALYSIS_PROMPT
from seo_metadata.services.inference_client import DecodingParameters, InferenceClient
from seo_metadata.services.retry import retry_with_backoff

logger = logging.getLogger(__name__)

ANALYSIS_DECODING = DecodingParameters(max_new_tokens=250, temperature=0.7)

DEFAULT_SUGGESTIONS = (
    "Ensure your content includes relevant keywords.",
    "Write a compelling meta description.",
    "Use header tags (H1, H2, etc.) to structure your content.",
    "Include internal and external links where appropriate.",
    "Optimize your images with alt text and descriptive file names.",
)


class ContentAnalyzer:
    """Asks the model for SEO suggestions, with a static list as fallback."""

    def __init__(
        self,
        client: InferenceClient,
        *,
        max_retries: int = 3,
        base_delay_ms: int = 1000,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ):
        self.client = client
        self.max_retries = max_retries
        self.base_delay_ms = base_delay_ms
        self._sleep = sleep

    def build_prompt(self, content: str) -> str:
        return CONTENT_ANALYSIS_PROMPT.format(content=content)

    @staticmethod
    def split_suggestions(text: str) -> list[str]:
        """One suggestion per non-blank line, in order."""
        return [line.strip() for line in text.splitlines() if line.strip()]

    async def analyze(self, content: str) -> list[str]:
        """Return SEO suggestions for ``content``. Never raises."""
        prompt = self.build_prompt(content)

        try:
            text = await retry_with_backoff(
                lambda: self.client.generate(prompt, ANALYSIS_DECODING),
                max_retries=self.max_retries,
                base_delay_ms=self.base_delay_ms,
                sleep=self._sleep,
            )
        except Exception as e:
            logger.warning(f"Error analyzing content with LLM: {e}")
            return list(DEFAULT_SUGGESTIONS)

        suggestions = self.split_suggestions(text)
        if not suggestions:
            logger.warning("LLM returned no suggestions, using defaults")
            return list(DEFAULT_SUGGESTIONS)
        return suggestions
