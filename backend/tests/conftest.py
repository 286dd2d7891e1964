"""
Shared fixtures for the SEO metadata test suite.

Everything runs against a scripted inference client, so no model endpoint
or API key is needed.
"""

import json

import pytest

from seo_metadata.services.inference_client import (
    DecodingParameters,
    InferenceClient,
    InferenceConfig,
    InferenceError,
)


class FakeInferenceClient(InferenceClient):
    """Returns scripted responses and records every call.

    Each entry in ``responses`` is either a string to return or an exception
    to raise. The last entry repeats once the script runs out.
    """

    def __init__(self, *responses):
        super().__init__(InferenceConfig(provider="fake", model="fake-model"))
        self.responses = list(responses)
        self.calls: list[tuple[str, DecodingParameters]] = []

    async def generate(self, prompt: str, parameters: DecodingParameters) -> str:
        self.calls.append((prompt, parameters))
        index = min(len(self.calls) - 1, len(self.responses) - 1)
        response = self.responses[index]
        if isinstance(response, Exception):
            raise response
        return response


class SleepRecorder:
    """Stands in for asyncio.sleep and records requested delays."""

    def __init__(self):
        self.delays: list[float] = []

    async def __call__(self, seconds: float) -> None:
        self.delays.append(seconds)


@pytest.fixture
def sleep():
    return SleepRecorder()


@pytest.fixture
def failing_client():
    return FakeInferenceClient(InferenceError("model is loading"))


@pytest.fixture
def metadata_json():
    """A well-formed model response."""
    return json.dumps({
        "title": "  Healthy Eating Guide for Busy Professionals  ",
        "description": (
            "Here are 3 tips for eating well: 1. Plan meals ahead. "
            "2. Choose whole grains. 3. Limit sugar."
        ),
        "keywords": " healthy eating, nutrition, meal planning, whole grains, wellness ",
    })


@pytest.fixture
def page_content():
    return "Healthy eating matters. It helps you."


@pytest.fixture
def make_client():
    """Factory for scripted clients: make_client("text", InferenceError(...))."""
    return FakeInferenceClient
