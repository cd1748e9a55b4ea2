"""Exceptions raised while translating locale files."""

from __future__ import annotations

from pathlib import Path


class TranslateError(Exception):
    """Base class for every failure surfaced by a translation run.

    ``lang`` is filled in by the pipeline once the error escapes a language,
    so the caller can tell which target failed.
    """

    def __init__(self, message: str, lang: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.lang = lang

    def __str__(self) -> str:
        if self.lang:
            return f"translate {self.lang} failed: {self.message}"
        return self.message


class ContentTooLong(TranslateError):
    """A single value is longer than the per-request length limit."""

    def __init__(self, key: str, length: int, limit: int, lang: str | None = None) -> None:
        super().__init__(
            f"value of key {key!r} is {length} characters long, "
            f"the request limit is {limit}",
            lang,
        )
        self.key = key
        self.length = length
        self.limit = limit


class QuotaExceeded(TranslateError):
    """Translating the pending strings would exceed the character quota."""

    def __init__(
        self,
        requested: int,
        consumed: int,
        ceiling: float,
        lang: str | None = None,
    ) -> None:
        super().__init__(
            f"the {requested} characters that need to be translated exceed the "
            f"character quota ({consumed} of {ceiling:.0f} already used)",
            lang,
        )
        self.requested = requested
        self.consumed = consumed
        self.ceiling = ceiling


class RemoteFailure(TranslateError):
    """The translation provider rejected or failed a request."""


class IOFailure(TranslateError):
    """A locale file could not be read, parsed or written."""

    def __init__(self, path: str | Path, message: str, lang: str | None = None) -> None:
        super().__init__(f"{path}: {message}", lang)
        self.path = Path(path)
