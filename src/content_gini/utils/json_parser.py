"""Utility to pull the JSON payload out of a completion string."""

from __future__ import annotations

import re

# Everything between an opening ```json line and the last closing ``` line.
FENCE_PATTERN = re.compile(r"```json\n(.*)\n```", re.DOTALL)


def extract_fenced_json(text: str) -> str:
    """Return the interior of a ```json fenced block, or ``text`` unchanged.

    The captured interior is whitespace-trimmed. Text without a fence is
    returned as-is, so callers can always hand the result to ``json.loads``.
    """
    match = FENCE_PATTERN.search(text)
    if match and match.group(1):
        return match.group(1).strip()
    return text
