"""Session state for the content improver page."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from typing import Callable

from content_gini.models.result import ImprovementResult

logger = logging.getLogger(__name__)

COPY_RESET_SECONDS = 1.5


class SubmissionInProgress(RuntimeError):
    """Raised when a submission starts while another is still running."""


class CopyState:
    """Per-sample "recently copied" flags that expire on their own.

    A flag reads True from ``mark()`` until ``reset_after`` seconds have
    passed since the most recent mark of that same string.
    """

    def __init__(
        self,
        keys: list[str] | None = None,
        *,
        reset_after: float = COPY_RESET_SECONDS,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.reset_after = reset_after
        self._clock = clock
        # key -> time of the latest mark, None when never marked
        self._marked_at: dict[str, float | None] = {k: None for k in keys or []}

    def __contains__(self, key: str) -> bool:
        return key in self._marked_at

    def __len__(self) -> int:
        return len(self._marked_at)

    def mark(self, key: str) -> None:
        self._marked_at[key] = self._clock()

    def is_copied(self, key: str) -> bool:
        marked = self._marked_at.get(key)
        if marked is None:
            return False
        return self._clock() - marked < self.reset_after

    def any_active(self) -> bool:
        return any(self.is_copied(k) for k in self._marked_at)

    def as_dict(self) -> dict[str, bool]:
        return {k: self.is_copied(k) for k in self._marked_at}


@dataclass
class ImproverState:
    """Input text, current result, busy flag and copy flags for one session."""

    input_text: str = ""
    result: ImprovementResult | None = None
    busy: bool = False
    copy_reset_seconds: float = COPY_RESET_SECONDS
    clock: Callable[[], float] = field(default=time.monotonic, repr=False)
    copy_state: CopyState = field(init=False)

    def __post_init__(self):
        self.copy_state = self._new_copy_state([])

    def _new_copy_state(self, keys: list[str]) -> CopyState:
        return CopyState(keys, reset_after=self.copy_reset_seconds, clock=self.clock)

    def begin_submit(self) -> None:
        if self.busy:
            raise SubmissionInProgress("A submission is already being processed")
        self.busy = True
        self.result = None

    def finish_submit(self, result: ImprovementResult) -> None:
        self.busy = False
        self.result = result
        if result.ok:
            self.copy_state = self._new_copy_state(result.sample_keys())

    def abort_submit(self) -> None:
        """Leave the page ready to resubmit after a run that never produced a result."""
        self.busy = False

    def poll_interval(self) -> float | None:
        """How often the results block should refresh, or None when no flag is lit."""
        if self.copy_state.any_active():
            return self.copy_reset_seconds / 3
        return None

    def polling_finished(self, interval: float | None) -> bool:
        """True once a block started with ``interval`` has nothing left to expire."""
        return interval is not None and not self.copy_state.any_active()

    def copy(self, text: str, writer: Callable[[str], bool]) -> bool:
        """Write the trimmed ``text`` with ``writer`` and flag it on success."""
        key = text.strip()
        if not writer(key):
            return False
        self.copy_state.mark(key)
        return True
