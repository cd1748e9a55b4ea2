"""Per-language translation pipeline: Diff → Quota check → Send → Merge → Write.

Target languages are processed one after another. Each one is diffed
against its existing file, charged against the shared character quota,
partitioned into length-bounded batches, sent window by window and finally
merged with the translations that were already on disk.
"""

from __future__ import annotations

import asyncio
import logging
import time
from collections.abc import Callable, Mapping
from pathlib import Path

from localetranslator.backends.base import TranslationBackend
from localetranslator.config import BackendCredentials, TranslateSettings
from localetranslator.core.locale_file import LocaleFileStore, LocaleMap, TargetSpec, text_length
from localetranslator.errors import QuotaExceeded, RemoteFailure, TranslateError
from localetranslator.reporting.report import LanguageReport, LanguageState, RunReport
from localetranslator.translation.diff import diff_locale, merge_translations
from localetranslator.translation.partition import Batch, partition
from localetranslator.translation.quota import (
    QuotaState,
    QuotaTracker,
    default_quota_state,
)
from localetranslator.translation.scheduler import Clock, Sender, Sleep, run_windows, schedule

logger = logging.getLogger(__name__)

# Type alias for progress callback: (phase, current, total, message)
ProgressCallback = Callable[[str, int, int, str], None]


# ── Backend creation ──


def create_backend(
    backend_name: str,
    credentials: BackendCredentials | None = None,
    settings: TranslateSettings | None = None,
) -> TranslationBackend:
    """Create a translation backend instance.

    Provider options that belong to the run, such as the Tencent project id,
    are taken from *settings*.

    Raises:
        ValueError: If the backend is unknown or its credentials are missing.
    """
    from localetranslator.backends.dummy import DummyBackend

    if credentials is None:
        credentials = BackendCredentials.from_env()

    if backend_name == "dummy":
        return DummyBackend()
    elif backend_name == "deepl":
        if not credentials.deepl_api_key:
            raise ValueError("DeepL API key required. Set DEEPL_API_KEY.")
        from localetranslator.backends.deepl import DeepLBackend
        return DeepLBackend(credentials.deepl_api_key)
    elif backend_name == "tencent":
        if not (credentials.tencent_secret_id and credentials.tencent_secret_key):
            raise ValueError(
                "Tencent Cloud credentials required. "
                "Set TENCENTCLOUD_SECRET_ID and TENCENTCLOUD_SECRET_KEY."
            )
        from localetranslator.backends.tencent import TencentBackend
        return TencentBackend(
            credentials.tencent_secret_id,
            credentials.tencent_secret_key,
            region=credentials.tencent_region,
            endpoint=credentials.tencent_endpoint,
            project_id=settings.project_id if settings else 0,
        )
    raise ValueError(f"Unknown backend: {backend_name!r}")


# ── Sending ──


def _make_sender(
    backend: TranslationBackend,
    target_lang: str,
    source_lang: str | None,
) -> Sender:
    """Wrap the blocking backend call so a window's batches overlap."""

    async def send(batch: Batch) -> LocaleMap:
        texts = list(batch.values())
        try:
            translated = await asyncio.to_thread(
                backend.translate_batch, texts, target_lang, source_lang,
            )
        except Exception as e:
            logger.error("translate error from %s (%s): %s", backend.name, target_lang, e)
            raise RemoteFailure(f"{backend.name} request failed: {e}", target_lang) from e

        if len(translated) != len(texts):
            raise RemoteFailure(
                f"{backend.name} returned {len(translated)} texts for a batch of {len(texts)}",
                target_lang,
            )
        return dict(zip(batch, translated, strict=True))

    return send


# ── One language ──


async def translate_language(
    target: TargetSpec,
    source: Mapping[str, str],
    *,
    settings: TranslateSettings,
    backend: TranslationBackend,
    tracker: QuotaTracker,
    store: LocaleFileStore,
    report: LanguageReport,
    sleep: Sleep = asyncio.sleep,
    clock: Clock = time.monotonic,
    on_progress: ProgressCallback | None = None,
) -> LocaleMap | None:
    """Bring one target file up to date with *source*.

    Returns the merged mapping when new translations were fetched, None
    otherwise. *report* is updated as the language moves through its states.

    Raises:
        QuotaExceeded: Before any remote call, if the pending text does not
            fit the remaining quota.
        ContentTooLong, RemoteFailure, IOFailure: Propagated unchanged.
    """
    lang = target.lang
    path = target.file_path
    report.file_path = str(path)

    report.state = LanguageState.diffing
    existing = store.read_optional(path)
    diff = diff_locale(source, existing)
    report.strings_kept = len(diff.to_keep)
    report.keys_removed = len(diff.removed_keys)

    if not diff.has_changes:
        report.state = LanguageState.unchanged
        logger.info("%s: up to date, nothing to write", lang)
        return None

    translated: LocaleMap = {}
    if diff.to_translate:
        batches = partition(diff.to_translate, settings.max_request_length)
        windows = schedule(batches, settings.max_requests_per_second)

        report.state = LanguageState.quota_check
        if not tracker.check(diff.to_translate):
            state = tracker.state
            raise QuotaExceeded(
                text_length(diff.to_translate), state.consumed, state.ceiling, lang,
            )
        report.characters_sent = text_length(diff.to_translate)

        report.state = LanguageState.sending
        report.batches = len(batches)
        report.windows = len(windows)
        logger.info(
            "%s: translating %d strings in %d batches over %d windows",
            lang, len(diff.to_translate), len(batches), len(windows),
        )

        def on_window(done: int, total: int) -> None:
            if on_progress:
                on_progress("window", done, total, lang)

        translated = await run_windows(
            windows,
            _make_sender(backend, lang, settings.source_lang),
            delay=settings.inter_window_delay,
            sleep=sleep,
            clock=clock,
            on_window=on_window,
        )
        report.strings_translated = len(translated)

    report.state = LanguageState.merging
    merged = merge_translations(source, diff, translated)

    if settings.write_files:
        store.write(path, merged)
        report.written = True
    report.state = LanguageState.persisted
    if diff.removed_keys:
        logger.info("%s: removed %d obsolete keys", lang, len(diff.removed_keys))

    return merged if translated else None


# ═══════════════════════════════════════════════════════════════════
# Public API
# ═══════════════════════════════════════════════════════════════════


async def translate_locales(
    source: Mapping[str, str] | str | Path,
    settings: TranslateSettings,
    backend: TranslationBackend,
    *,
    quota: QuotaState | None = None,
    store: LocaleFileStore | None = None,
    on_progress: ProgressCallback | None = None,
    sleep: Sleep = asyncio.sleep,
    clock: Clock = time.monotonic,
) -> RunReport:
    """Translate *source* into every target language of *settings*.

    *source* is either the source LocaleMap or the path of its JSON file.
    Without an explicit *quota*, the process-wide counter is used with this
    run's ceiling and ``quota_start`` applied to it.

    A language whose quota check fails is skipped when
    ``settings.stop_on_quota_exceeded`` is False; every other failure stops
    the run. Languages already written stay written.
    """
    settings.validate()
    store = store or LocaleFileStore()
    if quota is None:
        quota = default_quota_state(settings.quota_start, settings.quota_ceiling)
    tracker = QuotaTracker(quota)

    if isinstance(source, (str, Path)):
        source = store.read(source)

    report = RunReport(
        source_lang=settings.source_lang,
        backend=backend.name,
        quota_ceiling=quota.ceiling,
    )
    targets = settings.targets()

    for index, target in enumerate(targets):
        if index > 0:
            await sleep(settings.inter_language_delay)

        if on_progress:
            on_progress("language", index, len(targets), target.lang)

        lang_report = LanguageReport(lang=target.lang)
        report.languages.append(lang_report)
        try:
            merged = await translate_language(
                target,
                source,
                settings=settings,
                backend=backend,
                tracker=tracker,
                store=store,
                report=lang_report,
                sleep=sleep,
                clock=clock,
                on_progress=on_progress,
            )
        except TranslateError as e:
            if e.lang is None:
                e.lang = target.lang
            lang_report.error = str(e)
            if isinstance(e, QuotaExceeded) and not settings.stop_on_quota_exceeded:
                lang_report.state = LanguageState.skipped
                logger.warning("%s", e)
                continue
            lang_report.state = LanguageState.failed
            logger.error("%s", e)
            raise

        if merged is not None:
            report.translations[target.lang] = merged

    if on_progress:
        on_progress("language", len(targets), len(targets), "")

    report.quota_consumed = quota.consumed
    report.finish()
    return report


def run_translation(
    source: Mapping[str, str] | str | Path,
    settings: TranslateSettings,
    backend: TranslationBackend,
    **kwargs,
) -> RunReport:
    """Blocking wrapper around translate_locales for synchronous callers."""
    return asyncio.run(translate_locales(source, settings, backend, **kwargs))
