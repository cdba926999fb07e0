"""Shared test fixtures."""

from __future__ import annotations

import json
from unittest.mock import AsyncMock

import pytest
from google.genai import types as genai_types

from content_gini.clients.llm_client import LLMClient


def make_response(*texts: str | None) -> genai_types.GenerateContentResponse:
    """Build a Gemini response with one candidate whose parts carry ``texts``."""
    parts = [genai_types.Part(text=t) for t in texts]
    return genai_types.GenerateContentResponse(
        candidates=[
            genai_types.Candidate(content=genai_types.Content(role="model", parts=parts)),
        ]
    )


class FakeClock:
    """Manually advanced stand-in for time.monotonic."""

    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def sample_payload() -> dict:
    return {
        "languages": ["en", "kn"],
        "samples": {
            "en": [
                "  The team shipped the release on time.  ",
                "The release shipped on schedule.",
            ],
            "kn": ["ತಂಡವು ಸಮಯಕ್ಕೆ ಸರಿಯಾಗಿ ಬಿಡುಗಡೆ ಮಾಡಿತು."],
        },
    }


@pytest.fixture
def sample_response(sample_payload) -> genai_types.GenerateContentResponse:
    text = "```json\n" + json.dumps(sample_payload, ensure_ascii=False, indent=2) + "\n```"
    return make_response(text)


@pytest.fixture
def fake_clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def mock_llm_client(sample_response) -> LLMClient:
    """Create a mock LLM client."""
    client = AsyncMock(spec=LLMClient)
    client.generate = AsyncMock(return_value=sample_response)
    return client


@pytest.fixture
def response_factory():
    return make_response
