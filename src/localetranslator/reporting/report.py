"""Translation run report data model."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum


class LanguageState(str, Enum):
    """Where a target language ended up (or got stuck) in the pipeline."""
    idle = "idle"
    diffing = "diffing"
    quota_check = "quota_check"
    sending = "sending"
    merging = "merging"
    persisted = "persisted"
    unchanged = "unchanged"
    skipped = "skipped"
    failed = "failed"


@dataclass
class LanguageReport:
    """Statistics for one target language."""

    lang: str
    file_path: str = ""
    state: LanguageState = LanguageState.idle

    strings_translated: int = 0
    strings_kept: int = 0
    keys_removed: int = 0
    characters_sent: int = 0
    batches: int = 0
    windows: int = 0
    written: bool = False

    error: str | None = None

    def to_dict(self) -> dict:
        return {
            "lang": self.lang,
            "file_path": self.file_path,
            "state": self.state.value,
            "strings_translated": self.strings_translated,
            "strings_kept": self.strings_kept,
            "keys_removed": self.keys_removed,
            "characters_sent": self.characters_sent,
            "batches": self.batches,
            "windows": self.windows,
            "written": self.written,
            "error": self.error,
        }


@dataclass
class RunReport:
    """Collects statistics about a translation run across all languages."""

    source_lang: str = ""
    backend: str = ""
    languages: list[LanguageReport] = field(default_factory=list)
    # Merged content of every language that received new translations.
    translations: dict[str, dict[str, str]] = field(default_factory=dict)

    quota_consumed: int = 0
    quota_ceiling: float = float("inf")

    started_at: datetime = field(default_factory=datetime.now)
    finished_at: datetime | None = None

    @property
    def duration_seconds(self) -> float:
        if self.finished_at is None:
            return 0.0
        return (self.finished_at - self.started_at).total_seconds()

    @property
    def total_translated(self) -> int:
        return sum(lr.strings_translated for lr in self.languages)

    @property
    def failed_languages(self) -> list[str]:
        return [
            lr.lang for lr in self.languages
            if lr.state in (LanguageState.failed, LanguageState.skipped)
        ]

    def language(self, lang: str) -> LanguageReport | None:
        for lr in self.languages:
            if lr.lang == lang:
                return lr
        return None

    def finish(self) -> None:
        self.finished_at = datetime.now()

    def to_dict(self) -> dict:
        return {
            "source_lang": self.source_lang,
            "backend": self.backend,
            "quota_consumed": self.quota_consumed,
            "quota_ceiling": None if self.quota_ceiling == float("inf") else self.quota_ceiling,
            "total_translated": self.total_translated,
            "duration_seconds": self.duration_seconds,
            "languages": [lr.to_dict() for lr in self.languages],
        }
