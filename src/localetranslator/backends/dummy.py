"""Offline backend for dry runs and tests: prefixes strings with a [XX] tag."""

from __future__ import annotations

from localetranslator.backends.base import TranslationBackend


class DummyBackend(TranslationBackend):
    """Example: ``"Hello"`` → ``"[FR] Hello"``."""

    name = "dummy"

    def translate_batch(
        self,
        texts: list[str],
        target_lang: str,
        source_lang: str | None = None,
    ) -> list[str]:
        tag = f"[{target_lang.upper()}]"
        return [f"{tag} {text}" for text in texts]
