"""Application configuration loaded from config.yaml and the environment."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

import yaml

API_KEY_ENV = "GEMINI_API_KEY"


@dataclass(frozen=True)
class LLMConfig:
    model: str = "gemini-1.5-pro"
    timeout: int = 60

    def __post_init__(self):
        if not self.model:
            raise ValueError("llm.model must not be empty")
        if not 1 <= self.timeout <= 600:
            raise ValueError(f"llm.timeout must be between 1 and 600, got {self.timeout}")


@dataclass(frozen=True)
class UIConfig:
    title: str = "Gen AI Utility"
    page_title: str = "Content Improver with Gemini AI"
    copy_reset_seconds: float = 1.5
    drawer_width: int = 240

    def __post_init__(self):
        if self.copy_reset_seconds <= 0:
            raise ValueError(
                f"ui.copy_reset_seconds must be positive, got {self.copy_reset_seconds}"
            )
        if self.drawer_width < 0:
            raise ValueError(f"ui.drawer_width must not be negative, got {self.drawer_width}")


@dataclass(frozen=True)
class AppConfig:
    llm: LLMConfig = field(default_factory=LLMConfig)
    ui: UIConfig = field(default_factory=UIConfig)


def load_config(path: str | Path | None = None) -> AppConfig:
    """Load config from YAML file, falling back to defaults."""
    if path is None:
        # Look for config.yaml relative to the project root
        candidates = [
            Path.cwd() / "config.yaml",
            Path(__file__).resolve().parent.parent.parent / "config.yaml",
        ]
        for c in candidates:
            if c.exists():
                path = c
                break

    raw: dict = {}
    if path is not None:
        p = Path(path)
        if p.exists():
            raw = yaml.safe_load(p.read_text()) or {}

    try:
        return AppConfig(
            llm=LLMConfig(**raw.get("llm", {})),
            ui=UIConfig(**raw.get("ui", {})),
        )
    except TypeError as e:
        # Unknown keys in a section
        raise ValueError(f"Invalid config: {e}") from e


def get_api_key() -> str | None:
    """Return the Gemini API key from the environment, or None if unset/blank."""
    key = os.environ.get(API_KEY_ENV, "").strip()
    return key or None
