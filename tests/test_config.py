"""Tests for run settings and credential loading."""

import math
from pathlib import Path

import pytest

from localetranslator.config import BackendCredentials, TranslateSettings


class TestTranslateSettings:
    def test_defaults(self):
        settings = TranslateSettings(source_lang="en", target_langs=["fr"], output_dir="out")
        assert settings.output_dir == Path("out")
        assert settings.max_request_length == 2000
        assert settings.max_requests_per_second == 5
        assert settings.inter_window_delay == pytest.approx(1.1)
        assert settings.inter_language_delay == pytest.approx(1.1)
        assert math.isinf(settings.quota_ceiling)
        assert settings.write_files
        settings.validate()

    @pytest.mark.parametrize("overrides", [
        {"max_request_length": 0},
        {"max_requests_per_second": 0},
        {"inter_window_delay": -1},
        {"inter_language_delay": -0.5},
        {"quota_start": 10, "quota_ceiling": 5},
    ])
    def test_validate_rejects(self, overrides):
        settings = TranslateSettings(
            source_lang="en", target_langs=["fr"], output_dir="out", **overrides,
        )
        with pytest.raises(ValueError):
            settings.validate()

    def test_targets_use_name_rule(self, tmp_path):
        settings = TranslateSettings(
            source_lang="en", target_langs=["fr", "de"], output_dir=tmp_path,
            name_rule=lambda lang: f"{lang}-LANG.json",
        )
        assert [t.file_path for t in settings.targets()] == [
            tmp_path / "fr-LANG.json", tmp_path / "de-LANG.json",
        ]


class TestBackendCredentials:
    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("DEEPL_API_KEY", "deepl-key")
        monkeypatch.setenv("TENCENTCLOUD_SECRET_ID", "sid")
        monkeypatch.setenv("TENCENTCLOUD_SECRET_KEY", "skey")
        monkeypatch.setenv("TENCENTCLOUD_REGION", "ap-beijing")
        monkeypatch.delenv("TENCENTCLOUD_ENDPOINT", raising=False)

        creds = BackendCredentials.from_env()
        assert creds.deepl_api_key == "deepl-key"
        assert creds.tencent_secret_id == "sid"
        assert creds.tencent_secret_key == "skey"
        assert creds.tencent_region == "ap-beijing"
        assert creds.tencent_endpoint == "tmt.tencentcloudapi.com"

    def test_empty_values_are_missing(self, monkeypatch):
        monkeypatch.setenv("DEEPL_API_KEY", "")
        assert BackendCredentials.from_env().deepl_api_key is None
