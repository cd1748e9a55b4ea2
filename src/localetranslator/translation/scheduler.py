"""Pace batches into per-second windows and send each window concurrently.

A window holds at most as many batches as the provider accepts requests per
second. Window ``i`` starts ``i * delay`` seconds after the run started,
measured on one clock, so total pacing does not drift with remote latency.
"""

from __future__ import annotations

import asyncio
import logging
import time
from collections.abc import Awaitable, Callable, Sequence

from localetranslator.core.constants import INTER_WINDOW_DELAY, MAX_REQUESTS_PER_SECOND
from localetranslator.core.locale_file import LocaleMap
from localetranslator.translation.partition import Batch

logger = logging.getLogger(__name__)

Window = list[Batch]

# Sends one batch and returns its translations keyed like the batch.
Sender = Callable[[Batch], Awaitable[LocaleMap]]
Sleep = Callable[[float], Awaitable[object]]
Clock = Callable[[], float]
# (window_index, window_count)
WindowCallback = Callable[[int, int], None]


def schedule(
    batches: Sequence[Batch],
    per_window: int = MAX_REQUESTS_PER_SECOND,
) -> list[Window]:
    """Slice *batches* into consecutive windows of at most *per_window*."""
    if per_window < 1:
        raise ValueError(f"per_window must be positive, got {per_window}")
    return [list(batches[i : i + per_window]) for i in range(0, len(batches), per_window)]


async def _send_window(window: Window, sender: Sender) -> list[LocaleMap]:
    """Fan out one window and wait for every batch.

    The first failure cancels the batches still in flight and propagates.
    """
    tasks = [asyncio.ensure_future(sender(batch)) for batch in window]
    try:
        return await asyncio.gather(*tasks)
    except BaseException:
        for task in tasks:
            if not task.done():
                task.cancel()
        raise


async def run_windows(
    windows: Sequence[Window],
    sender: Sender,
    *,
    delay: float = INTER_WINDOW_DELAY,
    sleep: Sleep = asyncio.sleep,
    clock: Clock = time.monotonic,
    on_window: WindowCallback | None = None,
) -> LocaleMap:
    """Send every window in order and merge all results into one mapping.

    Nothing is returned if any batch fails: the exception of the first
    failing batch is raised as is.
    """
    start = clock()
    merged: LocaleMap = {}
    total = len(windows)

    for index, window in enumerate(windows):
        wait = start + index * delay - clock()
        if wait > 0:
            await sleep(wait)

        logger.debug("Sending window %d/%d (%d batches)", index + 1, total, len(window))
        for result in await _send_window(window, sender):
            merged.update(result)

        if on_window:
            on_window(index + 1, total)

    return merged
