"""Prompt template for the content improvement request."""

from __future__ import annotations

PROMPT_TEMPLATE = """\
Act as a content expert.
Please improve the following paragraph for grammar, spelling, clarity, and overall quality.
Return the improved text versions within a JSON object where keys represent the language.
Each language key should have an array of improved text samples (even if it's just one).
The JSON object should have the following structure:
{
  "languages": ["en", "kn"],
  "samples": {
    "en": [
      "Improved English version 1",
      "Improved English version 2"
    ],
    "kn": [
      "Kannada version"
    ]
  }
}

Do not include any extra text or explanation outside of this JSON structure.

---
"""


def build_improvement_prompt(text: str) -> str:
    """Append the user's paragraph, verbatim, to the fixed instruction block."""
    return PROMPT_TEMPLATE + text
