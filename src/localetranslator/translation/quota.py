"""Cumulative character quota shared by every language of a run."""

from __future__ import annotations

import math
import threading
from collections.abc import Mapping
from dataclasses import dataclass, field

from localetranslator.core.constants import UNLIMITED_QUOTA
from localetranslator.core.locale_file import text_length


@dataclass
class QuotaState:
    """Characters consumed so far against an optional ceiling."""

    consumed: int = 0
    ceiling: float = UNLIMITED_QUOTA
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False, compare=False)

    @property
    def unlimited(self) -> bool:
        return math.isinf(self.ceiling)

    @property
    def remaining(self) -> float:
        return self.ceiling - self.consumed


_PROCESS_QUOTA: QuotaState | None = None


def default_quota_state(
    start: int | None = None,
    ceiling: float | None = None,
) -> QuotaState:
    """Return the process-wide quota state used when a run is not given one.

    Every run in the process draws from this one counter. A run passing
    *ceiling* sets the budget it is checked against, and *start* raises
    ``consumed`` to at least the characters already spent elsewhere.
    Without arguments the state is returned unchanged.
    """
    global _PROCESS_QUOTA
    if _PROCESS_QUOTA is None:
        _PROCESS_QUOTA = QuotaState()
    state = _PROCESS_QUOTA
    with state._lock:
        if ceiling is not None:
            state.ceiling = ceiling
        if start is not None and start > state.consumed:
            state.consumed = start
    return state


class QuotaTracker:
    """Check-and-reserve guard in front of every remote translation."""

    def __init__(self, state: QuotaState | None = None) -> None:
        self.state = state if state is not None else default_quota_state()

    def check(self, text_config: Mapping[str, str]) -> bool:
        """Reserve the characters of *text_config* against the quota.

        Returns False, leaving the state untouched, when the reservation would
        push ``consumed`` past ``ceiling``. An infinite ceiling always passes
        and is not tracked.
        """
        state = self.state
        if state.unlimited:
            return True

        total = text_length(text_config)
        with state._lock:
            if state.consumed + total > state.ceiling:
                return False
            state.consumed += total
        return True
