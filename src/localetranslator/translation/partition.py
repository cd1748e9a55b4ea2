"""Split a LocaleMap into requests bounded by total text length."""

from __future__ import annotations

from collections.abc import Mapping

from localetranslator.core.constants import MAX_REQUEST_LENGTH
from localetranslator.core.locale_file import LocaleMap
from localetranslator.errors import ContentTooLong

# One remote request: a slice of a LocaleMap.
Batch = LocaleMap


def partition(
    locale_map: Mapping[str, str],
    max_len: int = MAX_REQUEST_LENGTH,
) -> list[Batch]:
    """Greedily pack entries, in order, into as few batches as fit *max_len*.

    An entry that would overflow the current batch opens the next one; entries
    are never split.

    Raises:
        ContentTooLong: If a single value is longer than *max_len*.
        ValueError: If *max_len* is not positive.
    """
    if max_len < 1:
        raise ValueError(f"max_len must be positive, got {max_len}")

    batches: list[Batch] = []
    current: Batch = {}
    running = 0

    for key, value in locale_map.items():
        length = len(value)
        if length > max_len:
            raise ContentTooLong(key, length, max_len)
        if current and running + length > max_len:
            batches.append(current)
            current = {}
            running = 0
        current[key] = value
        running += length

    if current:
        batches.append(current)
    return batches
