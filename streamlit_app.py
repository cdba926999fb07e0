"""Streamlit Web UI for content-gini.

Single page: paste a paragraph, get improved versions per language from
Gemini, copy any of them to the clipboard.
"""

from __future__ import annotations

import asyncio
import logging
import os

logger = logging.getLogger(__name__)

import nest_asyncio
import streamlit as st
from dotenv import load_dotenv

load_dotenv()
nest_asyncio.apply()
logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

# Streamlit Cloud: sync st.secrets → os.environ so the client can read it
for key in ("GEMINI_API_KEY",):
    if key not in os.environ:
        try:
            os.environ[key] = st.secrets[key]
        except Exception:
            pass

from content_gini.config import get_api_key, load_config
from content_gini.pipeline.improver import ContentImprover
from content_gini.ui.clipboard import BrowserClipboard
from content_gini.ui.layout import (
    DrawerState,
    Page,
    Router,
    ShellConfig,
    render_app_bar,
    render_drawer,
)
from content_gini.ui.state import ImproverState, SubmissionInProgress

config = load_config()

# ---------------------------------------------------------------------------
# Page config
# ---------------------------------------------------------------------------

st.set_page_config(
    page_title=config.ui.title,
    page_icon=":memo:",
    layout="wide",
)

# ---------------------------------------------------------------------------
# Session state
# ---------------------------------------------------------------------------

if "drawer" not in st.session_state:
    st.session_state.drawer = DrawerState()
if "improver" not in st.session_state:
    st.session_state.improver = ImproverState(copy_reset_seconds=config.ui.copy_reset_seconds)
if "clipboard" not in st.session_state:
    st.session_state.clipboard = BrowserClipboard()

drawer: DrawerState = st.session_state.drawer
state: ImproverState = st.session_state.improver
clipboard: BrowserClipboard = st.session_state.clipboard
shell = ShellConfig(title=config.ui.title, drawer_width=config.ui.drawer_width)


# ---------------------------------------------------------------------------
# Content improver page
# ---------------------------------------------------------------------------


def _submit() -> None:
    try:
        state.begin_submit()
    except SubmissionInProgress:
        logger.info("Ignoring submit while a request is in flight")
        return
    improver = ContentImprover(
        get_api_key(),
        model=config.llm.model,
        timeout=config.llm.timeout,
    )
    result = None
    try:
        with st.spinner("Processing..."):
            result = asyncio.run(improver.improve(state.input_text))
    finally:
        # Widget interaction interrupts the run with a BaseException (RerunException)
        if result is None:
            state.abort_submit()
    state.finish_submit(result)


def _render_results() -> None:
    result = state.result
    if result is None:
        return

    if not result.ok:
        with st.container(border=True):
            st.subheader("Error:")
            st.write(result.error)
        return

    for language in result.languages:
        with st.container(border=True):
            st.markdown(f"**{language} Content**")
            for index, content in enumerate(result.samples_for(language), 1):
                trimmed = content.strip()
                num_col, text_col, copy_col = st.columns([1, 10, 1])
                num_col.markdown(f"**{index}**")
                text_col.text(trimmed)
                copied = state.copy_state.is_copied(trimmed)
                icon = ":material/check_circle:" if copied else ":material/content_copy:"
                # Row identity is the trimmed text; the index keeps widget keys unique
                if copy_col.button(icon, key=f"copy_{language}_{index}_{trimmed}", help="copy"):
                    state.copy(trimmed, clipboard.write)
                    st.rerun()


def _content_improver_page() -> None:
    st.title(config.ui.page_title)

    input_col, button_col = st.columns([5, 1], vertical_alignment="center")
    with input_col:
        state.input_text = st.text_area(
            "Enter your paragraph here...",
            value=state.input_text,
            height=120,
        )
    with button_col:
        label = "Processing..." if state.busy else "Improve Content"
        if st.button(label, type="primary", disabled=state.busy):
            _submit()

    clipboard.flush()

    # Re-run the results block while a copy flag is active so it reverts on its own
    interval = state.poll_interval()

    @st.fragment(run_every=interval)
    def _results() -> None:
        if state.polling_finished(interval):
            # Full rerun re-creates the fragment without a timer
            st.rerun()
        _render_results()

    _results()


router = Router([Page(path="/", name="Content Improver", render=_content_improver_page)])

# ---------------------------------------------------------------------------
# Shell
# ---------------------------------------------------------------------------

render_drawer(drawer, shell)
render_app_bar(drawer, shell)
router.resolve(st.query_params.get("page")).render()
