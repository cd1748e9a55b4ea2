"""Shared test fixtures for localetranslator tests."""

from __future__ import annotations

import threading
import time
from pathlib import Path

import pytest

from localetranslator.backends.base import TranslationBackend
from localetranslator.config import TranslateSettings
from localetranslator.core.locale_file import LocaleFileStore
from localetranslator.translation.quota import QuotaState


class RecordingBackend(TranslationBackend):
    """Backend that tags texts like DummyBackend and records every call.

    Texts listed in *fail_on* make the call raise, as a provider error would.
    """

    name = "recording"

    def __init__(self, fail_on: set[str] | None = None, latency: float = 0.0) -> None:
        self.fail_on = fail_on or set()
        self.latency = latency
        self.calls: list[tuple[str, list[str]]] = []
        self.call_times: list[float] = []
        self._lock = threading.Lock()

    def translate_batch(
        self,
        texts: list[str],
        target_lang: str,
        source_lang: str | None = None,
    ) -> list[str]:
        with self._lock:
            self.calls.append((target_lang, list(texts)))
            self.call_times.append(time.monotonic())
        if self.latency:
            time.sleep(self.latency)
        for text in texts:
            if text in self.fail_on:
                raise RuntimeError(f"UnsupportedOperation: cannot translate {text!r}")
        return [f"[{target_lang.upper()}] {text}" for text in texts]

    @property
    def langs_called(self) -> list[str]:
        return [lang for lang, _ in self.calls]


def make_settings(output_dir: Path, langs: list[str] | None = None, **overrides) -> TranslateSettings:
    """Settings with pacing disabled so tests run instantly."""
    values = dict(
        source_lang="en",
        target_langs=langs or ["fr"],
        output_dir=output_dir,
        inter_window_delay=0.0,
        inter_language_delay=0.0,
    )
    values.update(overrides)
    return TranslateSettings(**values)


@pytest.fixture
def backend() -> RecordingBackend:
    return RecordingBackend()


@pytest.fixture
def store() -> LocaleFileStore:
    return LocaleFileStore()


@pytest.fixture
def quota() -> QuotaState:
    """A fresh, unlimited quota so runs never touch the process-wide one."""
    return QuotaState()


@pytest.fixture
def locales_dir(tmp_path: Path) -> Path:
    path = tmp_path / "locales"
    path.mkdir()
    return path


@pytest.fixture
def process_quota(monkeypatch):
    """Start from a fresh process-wide quota and restore the previous one after."""
    from localetranslator.translation import quota as quota_module

    monkeypatch.setattr(quota_module, "_PROCESS_QUOTA", None)
    return quota_module
