"""Clients for hosted text-generation models.

Every client exposes the same coroutine: given a prompt and decoding
parameters, return the generated text or raise ``InferenceError``.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any

import httpx

from seo_metadata.config import Settings

logger = logging.getLogger(__name__)


class InferenceError(Exception):
    """Raised when the remote model call fails or returns no text."""


@dataclass(frozen=True)
class DecodingParameters:
    """Generation controls passed to the model."""
    max_new_tokens: int
    temperature: float
    top_p: float | None = None
    repetition_penalty: float | None = None


@dataclass(frozen=True)
class InferenceConfig:
    """Everything a client needs to reach its provider."""
    provider: str
    model: str
    api_key: str | None = None
    base_url: str | None = None
    timeout_seconds: float | None = 60.0

    @classmethod
    def from_settings(cls, settings: Settings) -> "InferenceConfig":
        """Pick the credential and endpoint for the configured provider."""
        api_keys = {
            "huggingface": settings.huggingface_api_key,
            "openai": settings.openai_api_key,
            "anthropic": settings.anthropic_api_key,
        }
        base_url = None
        if settings.llm_provider == "huggingface":
            base_url = settings.huggingface_inference_url
        return cls(
            provider=settings.llm_provider,
            model=settings.llm_model,
            api_key=api_keys.get(settings.llm_provider),
            base_url=base_url,
            timeout_seconds=settings.llm_timeout_seconds,
        )


class InferenceClient(ABC):
    """Base class for text-generation clients."""

    def __init__(self, config: InferenceConfig):
        self.config = config

    @property
    def model(self) -> str:
        return self.config.model

    @abstractmethod
    async def generate(self, prompt: str, parameters: DecodingParameters) -> str:
        """Return generated text or raise InferenceError."""


class HuggingFaceInferenceClient(InferenceClient):
    """Client for the Hugging Face text-generation inference API."""

    DEFAULT_BASE_URL = "https://router.huggingface.co/hf-inference/models"

    def __init__(
        self,
        config: InferenceConfig,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        super().__init__(config)
        self.base_url = (config.base_url or self.DEFAULT_BASE_URL).rstrip("/")
        self._transport = transport

    def _get_headers(self) -> dict[str, str]:
        """Get request headers with optional bearer token."""
        headers = {"Content-Type": "application/json"}
        if self.config.api_key:
            headers["Authorization"] = f"Bearer {self.config.api_key}"
        return headers

    def _build_payload(self, prompt: str, parameters: DecodingParameters) -> dict[str, Any]:
        params: dict[str, Any] = {
            "max_new_tokens": parameters.max_new_tokens,
            "temperature": parameters.temperature,
            "return_full_text": False,
        }
        if parameters.top_p is not None:
            params["top_p"] = parameters.top_p
        if parameters.repetition_penalty is not None:
            params["repetition_penalty"] = parameters.repetition_penalty
        return {"inputs": prompt, "parameters": params}

    def _extract_text(self, data: Any) -> str:
        """Read generated_text from a list or object response."""
        if isinstance(data, list) and data:
            data = data[0]
        if isinstance(data, dict):
            if data.get("error"):
                raise InferenceError(f"Model error: {data['error']}")
            text = data.get("generated_text")
            if isinstance(text, str):
                return text
        raise InferenceError("Response did not contain generated_text")

    async def generate(self, prompt: str, parameters: DecodingParameters) -> str:
        url = f"{self.base_url}/{self.config.model}"
        logger.info(f"Calling huggingface {self.config.model}...")

        try:
            async with httpx.AsyncClient(
                timeout=self.config.timeout_seconds,
                transport=self._transport,
            ) as client:
                response = await client.post(
                    url,
                    headers=self._get_headers(),
                    json=self._build_payload(prompt, parameters),
                )
                response.raise_for_status()
                data = response.json()
        except httpx.HTTPStatusError as e:
            logger.error(f"Inference API error: {e.response.status_code} - {e.response.text}")
            raise InferenceError(f"Inference API returned {e.response.status_code}") from e
        except httpx.RequestError as e:
            logger.error(f"Inference API request failed: {e}")
            raise InferenceError(f"Inference API request failed: {e}") from e
        except ValueError as e:
            raise InferenceError("Inference API returned invalid JSON") from e

        return self._extract_text(data)


class OpenAIInferenceClient(InferenceClient):
    """Client for OpenAI chat completions."""

    def __init__(self, config: InferenceConfig):
        super().__init__(config)
        self._client = None

    def _get_client(self):
        """Lazy load OpenAI client."""
        if self._client is None:
            from openai import AsyncOpenAI
            self._client = AsyncOpenAI(
                api_key=self.config.api_key,
                timeout=self.config.timeout_seconds,
            )
        return self._client

    async def generate(self, prompt: str, parameters: DecodingParameters) -> str:
        from openai import OpenAIError

        client = self._get_client()
        logger.info(f"Calling openai {self.config.model}...")

        kwargs: dict[str, Any] = {}
        if parameters.top_p is not None:
            kwargs["top_p"] = parameters.top_p
        try:
            response = await client.chat.completions.create(
                model=self.config.model,
                messages=[{"role": "user", "content": prompt}],
                max_tokens=parameters.max_new_tokens,
                temperature=parameters.temperature,
                **kwargs,
            )
        except OpenAIError as e:
            raise InferenceError(f"OpenAI request failed: {e}") from e

        content = response.choices[0].message.content if response.choices else None
        if not content:
            raise InferenceError("OpenAI response contained no text")
        return content


class AnthropicInferenceClient(InferenceClient):
    """Client for the Anthropic messages API."""

    def __init__(self, config: InferenceConfig):
        super().__init__(config)
        self._client = None

    def _get_client(self):
        """Lazy load Anthropic client."""
        if self._client is None:
            from anthropic import AsyncAnthropic
            self._client = AsyncAnthropic(
                api_key=self.config.api_key,
                timeout=self.config.timeout_seconds,
            )
        return self._client

    async def generate(self, prompt: str, parameters: DecodingParameters) -> str:
        from anthropic import AnthropicError

        client = self._get_client()
        logger.info(f"Calling anthropic {self.config.model}...")

        kwargs: dict[str, Any] = {}
        if parameters.top_p is not None:
            kwargs["top_p"] = parameters.top_p
        try:
            response = await client.messages.create(
                model=self.config.model,
                max_tokens=parameters.max_new_tokens,
                messages=[{"role": "user", "content": prompt}],
                temperature=parameters.temperature,
                **kwargs,
            )
        except AnthropicError as e:
            raise InferenceError(f"Anthropic request failed: {e}") from e

        text = "".join(
            block.text for block in response.content if getattr(block, "type", None) == "text"
        )
        if not text:
            raise InferenceError("Anthropic response contained no text")
        return text


def get_inference_client(config: InferenceConfig) -> InferenceClient:
    """Create the client for ``config.provider``.

    Raises:
        ValueError: If the provider is unknown
    """
    if config.provider == "huggingface":
        return HuggingFaceInferenceClient(config)
    elif config.provider == "openai":
        return OpenAIInferenceClient(config)
    elif config.provider == "anthropic":
        return AnthropicInferenceClient(config)
    else:
        raise ValueError(f"Unknown LLM provider: {config.provider}")
