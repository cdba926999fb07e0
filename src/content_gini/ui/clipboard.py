"""Clipboard writes, performed in the user's browser."""

from __future__ import annotations

import json
import logging

import streamlit.components.v1 as components

logger = logging.getLogger(__name__)

# Runs inside the component iframe; falls back to execCommand where the
# async clipboard API is missing. Failures only reach the browser console.
COPY_SCRIPT = """\
<script>
  // copy request {nonce}
  (async () => {{
    const text = {payload};
    try {{
      if (navigator.clipboard && navigator.clipboard.writeText) {{
        await navigator.clipboard.writeText(text);
        return;
      }}
      const el = document.createElement("textarea");
      el.value = text;
      el.setAttribute("readonly", "");
      el.style.position = "fixed";
      el.style.opacity = "0";
      document.body.appendChild(el);
      el.select();
      document.execCommand("copy");
      document.body.removeChild(el);
    }} catch (err) {{
      console.error("Failed to copy text: ", err);
    }}
  }})();
</script>
"""


def build_copy_script(text: str, nonce: int = 0) -> str:
    """HTML snippet that writes ``text`` to the clipboard when rendered.

    ``nonce`` makes repeated copies of the same text render as new content.
    """
    # "</" would close the script tag early
    payload = json.dumps(text).replace("</", "<\\/")
    return COPY_SCRIPT.format(payload=payload, nonce=nonce)


class BrowserClipboard:
    """Queues copy requests during one script run and emits them on the next render.

    Kept in ``st.session_state`` so requests survive the ``st.rerun()`` that
    follows a copy click.
    """

    def __init__(self):
        self.pending: list[str] = []
        self._sent = 0

    def write(self, text: str) -> bool:
        """Queue ``text``. Matches the writer signature ``ImproverState.copy`` expects."""
        self.pending.append(text)
        return True

    def flush(self) -> None:
        """Render one invisible component per queued request."""
        while self.pending:
            text = self.pending.pop(0)
            self._sent += 1
            try:
                components.html(build_copy_script(text, self._sent), height=0)
            except Exception:
                logger.exception("Failed to copy text")
                continue
            logger.info("Text sent to browser clipboard: %.80s", text)
