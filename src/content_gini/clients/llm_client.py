"""Gemini API wrapper with async support."""

from __future__ import annotations

import logging

from google import genai
from google.genai import types as genai_types

logger = logging.getLogger(__name__)

DEFAULT_MODEL = "gemini-1.5-pro"


class LLMClient:
    """Async Gemini client. One call per prompt, no retries."""

    def __init__(self, api_key: str | None = None, timeout: float | None = None):
        kwargs: dict = {}
        if api_key is not None:
            kwargs["api_key"] = api_key
        if timeout is not None:
            # google-genai takes the HTTP timeout in milliseconds
            kwargs["http_options"] = genai_types.HttpOptions(timeout=int(timeout * 1000))
        self.client = genai.Client(**kwargs)

    async def generate(
        self,
        prompt: str,
        model: str = DEFAULT_MODEL,
    ) -> genai_types.GenerateContentResponse:
        """Send a prompt to Gemini and return the raw SDK response.

        The response is returned untouched so callers can inspect
        ``candidates[].content.parts[].text`` themselves.
        """
        logger.debug("LLM call: model=%s, prompt=%d chars", model, len(prompt))
        try:
            response = await self.client.aio.models.generate_content(
                model=model,
                contents=prompt,
            )
        except Exception:
            logger.error("LLM call failed", exc_info=True)
            raise
        usage = getattr(response, "usage_metadata", None)
        if usage is not None:
            logger.debug(
                "LLM response: %s input, %s output tokens",
                usage.prompt_token_count,
                usage.candidates_token_count,
            )
        return response
