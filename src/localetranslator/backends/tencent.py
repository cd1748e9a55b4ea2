"""Tencent Cloud Machine Translation (TMT) backend.

Uses the ``TextTranslateBatch`` action, which translates a list of texts in a
single request of at most 2000 characters and 5 requests per second.
"""

from __future__ import annotations

from localetranslator.backends.base import TranslationBackend

DEFAULT_REGION = "ap-guangzhou"
DEFAULT_ENDPOINT = "tmt.tencentcloudapi.com"


class TencentBackend(TranslationBackend):
    """Translation backend using Tencent Cloud TMT."""

    name = "tencent"

    def __init__(
        self,
        secret_id: str,
        secret_key: str,
        *,
        region: str = DEFAULT_REGION,
        endpoint: str = DEFAULT_ENDPOINT,
        project_id: int = 0,
        default_source: str = "auto",
    ) -> None:
        try:
            from tencentcloud.common import credential
            from tencentcloud.common.profile.client_profile import ClientProfile
            from tencentcloud.common.profile.http_profile import HttpProfile
            from tencentcloud.tmt.v20180321 import models, tmt_client
        except ImportError:
            raise ImportError(
                "Tencent backend requires the 'tencentcloud-sdk-python' package. "
                "Install it with: pip install localetranslator[tencent]"
            ) from None

        http_profile = HttpProfile()
        http_profile.endpoint = endpoint
        client_profile = ClientProfile()
        client_profile.httpProfile = http_profile

        self._models = models
        self._client = tmt_client.TmtClient(
            credential.Credential(secret_id, secret_key), region, client_profile,
        )
        self._project_id = project_id
        self._default_source = default_source

    def translate_batch(
        self,
        texts: list[str],
        target_lang: str,
        source_lang: str | None = None,
    ) -> list[str]:
        if not texts:
            return []

        request = self._models.TextTranslateBatchRequest()
        request.Source = source_lang or self._default_source
        request.Target = target_lang
        request.ProjectId = self._project_id
        request.SourceTextList = list(texts)

        response = self._client.TextTranslateBatch(request)
        return list(response.TargetTextList)
