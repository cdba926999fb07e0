"""Tests for the Streamlit page, driven through AppTest."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import AsyncMock, MagicMock, patch

from streamlit.testing.v1 import AppTest

from content_gini.models import ImprovementResult

APP_PATH = str(Path(__file__).resolve().parent.parent / "streamlit_app.py")
IMPROVE = "content_gini.pipeline.improver.ContentImprover.improve"


class _Interrupted(BaseException):
    """Stands in for Streamlit's script-control exceptions, which skip `except Exception`."""


def _improve_button(at: AppTest):
    return next(b for b in at.button if b.label in ("Improve Content", "Processing..."))


class TestSubmit:
    def test_interrupted_run_leaves_page_ready(self, monkeypatch):
        monkeypatch.setenv("GEMINI_API_KEY", "test-key")
        with patch(IMPROVE, new=MagicMock(side_effect=_Interrupted())):
            at = AppTest.from_file(APP_PATH, default_timeout=10).run()
            _improve_button(at).click().run()

            assert at.session_state["improver"].busy is False

            at.run()

        button = _improve_button(at)
        assert button.label == "Improve Content"
        assert not button.disabled

    def test_successful_run_renders_samples(self, monkeypatch, sample_payload):
        monkeypatch.setenv("GEMINI_API_KEY", "test-key")
        result = ImprovementResult.success(sample_payload)
        with patch(IMPROVE, new=AsyncMock(return_value=result)):
            at = AppTest.from_file(APP_PATH, default_timeout=10).run()
            _improve_button(at).click().run()

        state = at.session_state["improver"]
        assert state.busy is False
        assert state.result == result
        rendered = [t.value for t in at.text]
        assert "The team shipped the release on time." in rendered
        assert not at.exception
