"""Compare a source locale with a previously written translation."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field

from localetranslator.core.locale_file import LocaleMap


@dataclass
class LocaleDiff:
    """What has to happen to one target file to match the source locale."""

    to_translate: LocaleMap = field(default_factory=dict)
    to_keep: LocaleMap = field(default_factory=dict)
    removed_keys: set[str] = field(default_factory=set)

    @property
    def has_changes(self) -> bool:
        return bool(self.to_translate or self.removed_keys)


def _is_blank(value: str | None) -> bool:
    return not value or not value.strip()


def diff_locale(
    source: Mapping[str, str],
    existing: Mapping[str, str] | None,
) -> LocaleDiff:
    """Split *source* into entries to translate and entries to keep.

    A key is re-translated only when its existing translation is missing or
    empty. A changed source text does not invalidate an existing translation.

    Blank source values are never translated. Without an existing file they
    are simply left out; with one, whatever the file holds for them is kept.
    """
    if existing is None:
        return LocaleDiff(
            to_translate={k: v for k, v in source.items() if not _is_blank(v)},
        )

    result = LocaleDiff(removed_keys={k for k in existing if k not in source})
    for key, value in source.items():
        current = existing.get(key)
        if not current and not _is_blank(value):
            result.to_translate[key] = value
        elif key in existing:
            result.to_keep[key] = current  # type: ignore[assignment]
    return result


def merge_translations(
    source: Mapping[str, str],
    diff: LocaleDiff,
    translated: Mapping[str, str],
) -> LocaleMap:
    """Combine kept and new translations in source order.

    Keys listed in ``diff.removed_keys`` cannot appear: only source keys are
    emitted.
    """
    merged: LocaleMap = {}
    for key in source:
        if key in translated:
            merged[key] = translated[key]
        elif key in diff.to_keep:
            merged[key] = diff.to_keep[key]
    return merged
