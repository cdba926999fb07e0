"""Pydantic model for the outcome of one improvement request."""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, model_validator


class ErrorKind(str, Enum):
    CONFIG = "config"  # missing credential, no network call made
    TRANSPORT = "transport"  # the SDK call raised
    SHAPE = "shape"  # response lacks candidates / parts / text
    PARSE = "parse"  # completion text is not JSON


class ImprovementResult(BaseModel):
    """Either the parsed suggestion payload or an error message, never both.

    The payload is expected to look like::

        {"languages": ["en", "kn"], "samples": {"en": ["..."], "kn": ["..."]}}

    but is kept as parsed. Accessors return empty lists where the payload
    does not have that shape.
    """

    data: Any = None
    error: str | None = None
    kind: ErrorKind | None = None

    @model_validator(mode="after")
    def _exactly_one(self) -> ImprovementResult:
        if (self.data is None) == (self.error is None):
            raise ValueError("ImprovementResult needs exactly one of data or error")
        if self.error is not None and self.kind is None:
            raise ValueError("error results need a kind")
        if self.data is not None and self.kind is not None:
            raise ValueError("success results do not carry an error kind")
        return self

    @classmethod
    def success(cls, data: Any) -> ImprovementResult:
        return cls(data=data)

    @classmethod
    def failure(cls, kind: ErrorKind, message: str) -> ImprovementResult:
        return cls(error=message, kind=kind)

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def languages(self) -> list[str]:
        if not isinstance(self.data, dict):
            return []
        langs = self.data.get("languages")
        if not isinstance(langs, list):
            return []
        return [lang for lang in langs if isinstance(lang, str)]

    def samples_for(self, language: str) -> list[str]:
        """Samples for one language, in payload order, with non-strings dropped."""
        if not isinstance(self.data, dict):
            return []
        samples = self.data.get("samples")
        if not isinstance(samples, dict):
            return []
        items = samples.get(language)
        if not isinstance(items, list):
            return []
        return [s for s in items if isinstance(s, str)]

    def sample_keys(self) -> list[str]:
        """Trimmed sample strings across every language in ``samples``.

        Duplicates after trimming collapse to one key.
        """
        if not isinstance(self.data, dict) or not isinstance(self.data.get("samples"), dict):
            return []
        keys: dict[str, None] = {}
        for language in self.data["samples"]:
            for sample in self.samples_for(language):
                keys[sample.strip()] = None
        return list(keys)

    def is_well_formed(self) -> bool:
        """True when the payload has a ``languages`` list and a ``samples`` mapping."""
        return (
            isinstance(self.data, dict)
            and isinstance(self.data.get("languages"), list)
            and isinstance(self.data.get("samples"), dict)
        )
