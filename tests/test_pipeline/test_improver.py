"""Tests for the ContentImprover pipeline."""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock

from content_gini.models import ErrorKind
from content_gini.pipeline.improver import MISSING_API_KEY, ContentImprover
from content_gini.pipeline.normalizer import NO_CANDIDATES
from content_gini.pipeline.prompt_builder import build_improvement_prompt


def _factory(llm) -> MagicMock:
    return MagicMock(return_value=llm)


class TestContentImprover:
    async def test_success(self, mock_llm_client, sample_payload):
        factory = _factory(mock_llm_client)
        improver = ContentImprover("key", model="gemini-test", timeout=10, llm_factory=factory)

        result = await improver.improve("my text")

        assert result.ok
        assert result.data == sample_payload
        factory.assert_called_once_with(api_key="key", timeout=10)
        mock_llm_client.generate.assert_awaited_once_with(
            build_improvement_prompt("my text"), model="gemini-test"
        )

    async def test_missing_key_skips_network(self, mock_llm_client):
        factory = _factory(mock_llm_client)
        improver = ContentImprover(None, llm_factory=factory)

        result = await improver.improve("my text")

        assert result.kind == ErrorKind.CONFIG
        assert result.error == MISSING_API_KEY
        factory.assert_not_called()
        mock_llm_client.generate.assert_not_awaited()

    async def test_blank_key_is_missing(self, mock_llm_client):
        improver = ContentImprover("  ", llm_factory=_factory(mock_llm_client))
        result = await improver.improve("x")
        assert result.kind == ErrorKind.CONFIG

    async def test_transport_error(self, mock_llm_client):
        mock_llm_client.generate = AsyncMock(side_effect=ConnectionError("network down"))
        improver = ContentImprover("key", llm_factory=_factory(mock_llm_client))

        result = await improver.improve("x")

        assert result.kind == ErrorKind.TRANSPORT
        assert result.error == "An error occurred: network down"

    async def test_client_construction_error(self):
        factory = MagicMock(side_effect=ValueError("bad key format"))
        improver = ContentImprover("key", llm_factory=factory)

        result = await improver.improve("x")

        assert result.kind == ErrorKind.TRANSPORT
        assert "bad key format" in result.error

    async def test_shape_error_passes_through(self, mock_llm_client, response_factory):
        from google.genai import types as genai_types

        mock_llm_client.generate = AsyncMock(
            return_value=genai_types.GenerateContentResponse(candidates=[])
        )
        improver = ContentImprover("key", llm_factory=_factory(mock_llm_client))

        result = await improver.improve("x")

        assert result.kind == ErrorKind.SHAPE
        assert result.error == NO_CANDIDATES

    async def test_parse_error_does_not_raise(self, mock_llm_client, response_factory):
        mock_llm_client.generate = AsyncMock(return_value=response_factory("sorry, no JSON today"))
        improver = ContentImprover("key", llm_factory=_factory(mock_llm_client))

        result = await improver.improve("x")

        assert result.kind == ErrorKind.PARSE
