"""LLM-based SEO metadata generation with deterministic fallbacks.

Each stage returns a tagged outcome instead of raising, so the generator can
always hand back a complete ``PageMetadata``:

    build_prompt -> invoke -> InferenceOk | RetryExhausted
                    parse_response -> ParsedMetadata | ParseInvalid

``RetryExhausted`` and ``ParseInvalid`` both end in ``fallback_metadata``,
parameterized by a ``FallbackReason``.
"""

import asyncio
import itertools
import json
import logging
import time
from dataclasses import dataclass
from enum import Enum
from typing import Awaitable, Callable

from seo_metadata.prompts import SEO_METADATA_PROMPT
from seo_metadata.services.inference_client import DecodingParameters, InferenceClient
from seo_metadata.services.retry import retry_with_backoff
from seo_metadata.services.text_normalizer import extract_keywords, format_description

logger = logging.getLogger(__name__)

METADATA_DECODING = DecodingParameters(
    max_new_tokens=300,
    temperature=0.7,
    top_p=0.95,
    repetition_penalty=1.2,
)

REQUIRED_FIELDS = ("title", "description", "keywords")


@dataclass(frozen=True)
class PageMetadata:
    """SEO metadata for a single page."""
    id: int
    url: str
    title: str
    description: str
    keywords: str


class FallbackReason(str, Enum):
    """Why the model result was replaced by synthesized metadata."""
    RETRY_EXHAUSTED = "retry_exhausted"
    PARSE_INVALID = "parse_invalid"


FALLBACK_TEMPLATES = {
    FallbackReason.RETRY_EXHAUSTED: (
        "Explore essential information about {topic}. "
        "Find practical tips and expert recommendations for optimal outcomes."
    ),
    FallbackReason.PARSE_INVALID: (
        "Discover comprehensive insights about {topic}. "
        "Get expert guidance and practical strategies for better results."
    ),
}


@dataclass(frozen=True)
class InferenceOk:
    """Model call succeeded."""
    text: str


@dataclass(frozen=True)
class RetryExhausted:
    """Every attempt at the model call failed."""
    error: Exception


@dataclass(frozen=True)
class ParsedMetadata:
    """Validated fields from the model response, already finalized."""
    title: str
    description: str
    keywords: str


@dataclass(frozen=True)
class ParseInvalid:
    """Model response was not usable metadata."""
    reason: str


def timestamp_id_source() -> Callable[[], int]:
    """Return a counter seeded with the current time in milliseconds."""
    counter = itertools.count(time.time_ns() // 1_000_000)
    return lambda: next(counter)


class MetadataGenerator:
    """Generates page metadata from a hosted model, falling back to templates."""

    def __init__(
        self,
        client: InferenceClient,
        *,
        id_source: Callable[[], int] | None = None,
        max_retries: int = 3,
        base_delay_ms: int = 1000,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ):
        self.client = client
        self.id_source = id_source or timestamp_id_source()
        self.max_retries = max_retries
        self.base_delay_ms = base_delay_ms
        self._sleep = sleep

    def build_prompt(self, url: str, content: str) -> str:
        return SEO_METADATA_PROMPT.format(url=url, content=content)

    async def invoke(self, prompt: str) -> InferenceOk | RetryExhausted:
        """Call the model through the retry policy."""
        try:
            text = await retry_with_backoff(
                lambda: self.client.generate(prompt, METADATA_DECODING),
                max_retries=self.max_retries,
                base_delay_ms=self.base_delay_ms,
                sleep=self._sleep,
            )
        except Exception as e:
            return RetryExhausted(error=e)
        return InferenceOk(text=text)

    def parse_response(self, text: str) -> ParsedMetadata | ParseInvalid:
        """Parse and validate the model's JSON.

        Markdown code fences around the object are tolerated. Fields must be
        non-blank strings and the description must survive formatting.
        """
        content = text.strip()

        # Remove markdown code fences if present
        if content.startswith("```"):
            first_newline = content.find("\n")
            if first_newline != -1:
                content = content[first_newline + 1:]
            if content.endswith("```"):
                content = content[:-3].rstrip()

        try:
            data = json.loads(content)
        except (json.JSONDecodeError, RecursionError) as e:
            return ParseInvalid(reason=f"invalid JSON: {e}")

        if not isinstance(data, dict):
            return ParseInvalid(reason="response is not a JSON object")

        for name in REQUIRED_FIELDS:
            value = data.get(name)
            if not isinstance(value, str) or not value.strip():
                return ParseInvalid(reason=f"incomplete metadata: missing {name}")

        description = format_description(data["description"])
        if not description:
            return ParseInvalid(reason="description is empty after formatting")

        return ParsedMetadata(
            title=data["title"].strip(),
            description=description,
            keywords=data["keywords"].strip(),
        )

    def fallback_metadata(self, url: str, content: str, reason: FallbackReason) -> PageMetadata:
        """Synthesize metadata from the content's first sentence."""
        main_topic = content.split(".")[0]
        description = FALLBACK_TEMPLATES[reason].format(topic=main_topic.lower())

        return PageMetadata(
            id=self.id_source(),
            url=url,
            title=main_topic.strip(),
            description=format_description(description),
            keywords=extract_keywords(content),
        )

    async def generate(self, url: str, content: str) -> PageMetadata:
        """Generate metadata for a page. Never raises."""
        prompt = self.build_prompt(url, content)

        outcome = await self.invoke(prompt)
        if isinstance(outcome, RetryExhausted):
            logger.warning(f"Error generating metadata with LLM for {url}: {outcome.error}")
            return self.fallback_metadata(url, content, FallbackReason.RETRY_EXHAUSTED)

        parsed = self.parse_response(outcome.text)
        if isinstance(parsed, ParseInvalid):
            logger.warning(f"Failed to parse or validate LLM response for {url}: {parsed.reason}")
            return self.fallback_metadata(url, content, FallbackReason.PARSE_INVALID)

        logger.info(f"Generated metadata for {url} with {self.client.model}")
        return PageMetadata(
            id=self.id_source(),
            url=url,
            title=parsed.title,
            description=parsed.description,
            keywords=parsed.keywords,
        )
