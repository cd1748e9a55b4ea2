"""Run configuration and provider credentials."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from localetranslator.backends.tencent import DEFAULT_ENDPOINT, DEFAULT_REGION
from localetranslator.core.constants import (
    INTER_LANGUAGE_DELAY,
    INTER_WINDOW_DELAY,
    MAX_REQUEST_LENGTH,
    MAX_REQUESTS_PER_SECOND,
    UNLIMITED_QUOTA,
)
from localetranslator.core.locale_file import NameRule, TargetSpec, build_targets, default_name_rule


@dataclass
class TranslateSettings:
    """Everything one translation run needs besides the backend.

    Delays are in seconds. ``quota_start`` seeds the characters already spent
    this billing period; ``quota_ceiling`` is the character budget.
    """

    source_lang: str
    target_langs: list[str]
    output_dir: Path
    name_rule: NameRule = default_name_rule
    project_id: int = 0

    max_request_length: int = MAX_REQUEST_LENGTH
    max_requests_per_second: int = MAX_REQUESTS_PER_SECOND
    inter_window_delay: float = INTER_WINDOW_DELAY
    inter_language_delay: float = INTER_LANGUAGE_DELAY

    quota_start: int = 0
    quota_ceiling: float = UNLIMITED_QUOTA

    write_files: bool = True
    stop_on_quota_exceeded: bool = True

    def __post_init__(self) -> None:
        self.output_dir = Path(self.output_dir)

    def validate(self) -> None:
        """Raise ValueError on settings the scheduler cannot honour."""
        if self.max_request_length < 1:
            raise ValueError("max_request_length must be positive")
        if self.max_requests_per_second < 1:
            raise ValueError("max_requests_per_second must be positive")
        if self.inter_window_delay < 0 or self.inter_language_delay < 0:
            raise ValueError("delays cannot be negative")
        if self.quota_start < 0:
            raise ValueError("quota_start cannot be negative")
        if self.quota_ceiling < self.quota_start:
            raise ValueError("quota_ceiling is below quota_start")

    def targets(self) -> list[TargetSpec]:
        return build_targets(self.target_langs, self.output_dir, self.name_rule)


@dataclass
class BackendCredentials:
    """Provider secrets, usually taken from the environment."""

    deepl_api_key: str | None = None
    tencent_secret_id: str | None = None
    tencent_secret_key: str | None = None
    tencent_region: str = DEFAULT_REGION
    tencent_endpoint: str = DEFAULT_ENDPOINT

    @classmethod
    def from_env(cls) -> BackendCredentials:
        return cls(
            deepl_api_key=os.environ.get("DEEPL_API_KEY") or None,
            tencent_secret_id=os.environ.get("TENCENTCLOUD_SECRET_ID") or None,
            tencent_secret_key=os.environ.get("TENCENTCLOUD_SECRET_KEY") or None,
            tencent_region=os.environ.get("TENCENTCLOUD_REGION") or DEFAULT_REGION,
            tencent_endpoint=os.environ.get("TENCENTCLOUD_ENDPOINT") or DEFAULT_ENDPOINT,
        )
