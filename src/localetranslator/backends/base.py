"""Abstract base class for remote translation providers."""

from __future__ import annotations

from abc import ABC, abstractmethod


class TranslationBackend(ABC):
    """Interface the pipeline sends batches through.

    Implementations make exactly one attempt per call: pacing is handled by
    the scheduler and failures are never retried.
    """

    #: Label used in reports and log lines.
    name: str = "backend"

    @abstractmethod
    def translate_batch(
        self,
        texts: list[str],
        target_lang: str,
        source_lang: str | None = None,
    ) -> list[str]:
        """Translate a batch of texts.

        Args:
            texts: Strings to translate, in request order.
            target_lang: Target language code, in the provider's convention.
            source_lang: Source language code, or None for auto-detect.

        Returns:
            Translated strings aligned with *texts* by position.
        """
        ...

    def translate(
        self,
        text: str,
        target_lang: str,
        source_lang: str | None = None,
    ) -> str:
        """Translate a single text. Default implementation uses translate_batch."""
        results = self.translate_batch([text], target_lang, source_lang)
        return results[0]
