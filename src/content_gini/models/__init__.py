"""Data models for the content improver."""

from content_gini.models.result import ErrorKind, ImprovementResult

__all__ = [
    "ErrorKind",
    "ImprovementResult",
]
