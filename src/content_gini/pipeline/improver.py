"""Content improvement pipeline: prompt, one Gemini call, normalization."""

from __future__ import annotations

import logging
from typing import Callable

from content_gini.clients.llm_client import DEFAULT_MODEL, LLMClient
from content_gini.models.result import ErrorKind, ImprovementResult
from content_gini.pipeline.normalizer import normalize_response
from content_gini.pipeline.prompt_builder import build_improvement_prompt

logger = logging.getLogger(__name__)

MISSING_API_KEY = "Please provide your Gemini API key."


class ContentImprover:
    """Runs one improvement request and always answers with an ImprovementResult."""

    def __init__(
        self,
        api_key: str | None,
        *,
        model: str = DEFAULT_MODEL,
        timeout: float | None = None,
        llm_factory: Callable[..., LLMClient] = LLMClient,
    ):
        self.api_key = api_key
        self.model = model
        self.timeout = timeout
        self._llm_factory = llm_factory

    async def improve(self, text: str) -> ImprovementResult:
        """Improve ``text``. Errors are returned, not raised."""
        if not self.api_key or not self.api_key.strip():
            logger.warning("Submission aborted: no API key configured")
            return ImprovementResult.failure(ErrorKind.CONFIG, MISSING_API_KEY)

        prompt = build_improvement_prompt(text)
        try:
            llm = self._llm_factory(api_key=self.api_key, timeout=self.timeout)
            response = await llm.generate(prompt, model=self.model)
        except Exception as e:
            logger.exception("Error generating content")
            return ImprovementResult.failure(ErrorKind.TRANSPORT, f"An error occurred: {e}")

        result = normalize_response(response)
        if result.ok:
            logger.info(
                "Improvement ready: %d language(s), %d sample(s)",
                len(result.languages),
                len(result.sample_keys()),
            )
        return result
