"""Facade for loading and saving JSON locale files."""

from __future__ import annotations

import json
import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from pathlib import Path

from localetranslator.core.constants import LOCALE_FILE_ENCODING
from localetranslator.errors import IOFailure

logger = logging.getLogger(__name__)

# key → text. Insertion order is the order entries are written and batched in.
LocaleMap = dict[str, str]

NameRule = Callable[[str], str]


def text_length(mapping: Mapping[str, str]) -> int:
    """Characters a mapping costs: the summed length of its values."""
    return sum(len(value) for value in mapping.values())


def default_name_rule(lang: str) -> str:
    """``"fr"`` → ``"fr.json"``."""
    return f"{lang}.json"


@dataclass(frozen=True)
class TargetSpec:
    """Where the translation for one target language lives on disk."""

    lang: str
    output_dir: Path
    name_rule: NameRule = default_name_rule

    @property
    def file_name(self) -> str:
        return self.name_rule(self.lang)

    @property
    def file_path(self) -> Path:
        return Path(self.output_dir) / self.file_name


def build_targets(
    langs: list[str],
    output_dir: str | Path,
    name_rule: NameRule = default_name_rule,
) -> list[TargetSpec]:
    """Build one TargetSpec per language, all sharing a directory and name rule."""
    return [TargetSpec(lang=lang, output_dir=Path(output_dir), name_rule=name_rule) for lang in langs]


def parse_locale(text: str, path: str | Path = "<string>") -> LocaleMap:
    """Parse a JSON document into a LocaleMap.

    Raises:
        IOFailure: If the document is not a JSON object of strings.
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise IOFailure(path, f"invalid JSON: {e}") from e

    if not isinstance(data, dict):
        raise IOFailure(path, f"expected a JSON object, got {type(data).__name__}")

    for key, value in data.items():
        if not isinstance(value, str):
            raise IOFailure(path, f"value of key {key!r} is not a string")

    return data


class LocaleFileStore:
    """Reads and writes locale files as UTF-8 JSON objects."""

    def __init__(self, indent: int | None = 2) -> None:
        self._indent = indent

    def exists(self, path: str | Path) -> bool:
        return Path(path).is_file()

    def read(self, path: str | Path) -> LocaleMap:
        path = Path(path)
        try:
            text = path.read_text(encoding=LOCALE_FILE_ENCODING)
        except OSError as e:
            raise IOFailure(path, f"cannot read locale file: {e}") from e
        return parse_locale(text, path)

    def read_optional(self, path: str | Path) -> LocaleMap | None:
        """Read *path*, or return None when the file does not exist yet."""
        if not self.exists(path):
            return None
        return self.read(path)

    def write(self, path: str | Path, mapping: Mapping[str, str]) -> None:
        """Write *mapping* to *path*, creating missing parent directories."""
        path = Path(path)
        content = json.dumps(dict(mapping), ensure_ascii=False, indent=self._indent)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(content + "\n", encoding=LOCALE_FILE_ENCODING)
        except OSError as e:
            raise IOFailure(path, f"cannot write locale file: {e}") from e
        logger.debug("Wrote %d entries to %s", len(mapping), path)
