"""Turn a Gemini response into an ImprovementResult."""

from __future__ import annotations

import json
import logging

from content_gini.models.result import ErrorKind, ImprovementResult
from content_gini.utils.json_parser import extract_fenced_json

logger = logging.getLogger(__name__)

NO_RESPONSE = "No response was returned by the API."
NO_CANDIDATES = "No candidates found in the API response."
MISSING_PARTS = "Unexpected structure in the API response (missing content parts)."
MISSING_TEXT = "No text content found in the API response."
EMPTY_PAYLOAD = "The API response contained an empty JSON payload."
PARSE_FAILED = "Failed to parse the API response."


def _shape_error(message: str) -> ImprovementResult:
    logger.warning("Unusable API response: %s", message)
    return ImprovementResult.failure(ErrorKind.SHAPE, message)


def normalize_response(response) -> ImprovementResult:
    """Extract and parse the JSON payload from the first candidate.

    Never raises: every failure mode becomes an error result with its own
    message. On a parse failure the raw completion text is logged.
    """
    if response is None:
        return _shape_error(NO_RESPONSE)

    candidates = getattr(response, "candidates", None)
    if not candidates:
        return _shape_error(NO_CANDIDATES)

    content = getattr(candidates[0], "content", None)
    parts = getattr(content, "parts", None) if content is not None else None
    if not parts:
        return _shape_error(MISSING_PARTS)

    text = getattr(parts[0], "text", None)
    if not text:
        return _shape_error(MISSING_TEXT)

    json_text = extract_fenced_json(text)
    try:
        parsed = json.loads(json_text)
    except (json.JSONDecodeError, TypeError, RecursionError):
        logger.exception("Error parsing JSON response")
        logger.error("Raw response text: %s", text)
        return ImprovementResult.failure(ErrorKind.PARSE, PARSE_FAILED)

    if parsed is None:
        # A literal `null` has nothing to render and cannot be a success value.
        return _shape_error(EMPTY_PAYLOAD)

    result = ImprovementResult.success(parsed)
    if not result.is_well_formed():
        logger.warning("API payload lacks a languages list or samples mapping: %.200s", json_text)
    return result
