"""DeepL API translation backend."""

from __future__ import annotations

from localetranslator.backends.base import TranslationBackend

# DeepL accepts at most this many texts per request.
MAX_BATCH_SIZE = 50


class DeepLBackend(TranslationBackend):
    """Translation backend using the DeepL API."""

    name = "deepl"

    def __init__(self, api_key: str) -> None:
        try:
            import deepl
        except ImportError:
            raise ImportError(
                "DeepL backend requires the 'deepl' package. "
                "Install it with: pip install localetranslator[deepl]"
            ) from None
        self._deepl = deepl
        self._translator = deepl.Translator(api_key)

    def translate_batch(
        self,
        texts: list[str],
        target_lang: str,
        source_lang: str | None = None,
    ) -> list[str]:
        """Translate texts with DeepL, splitting at the per-request text count."""
        if not texts:
            return []

        results: list[str] = []
        for i in range(0, len(texts), MAX_BATCH_SIZE):
            chunk = texts[i : i + MAX_BATCH_SIZE]
            result = self._translator.translate_text(
                chunk,
                target_lang=target_lang,
                source_lang=source_lang,
            )
            # translate_text returns a list of TextResult when given a list
            if isinstance(result, list):
                results.extend(r.text for r in result)
            else:
                results.append(result.text)
        return results
