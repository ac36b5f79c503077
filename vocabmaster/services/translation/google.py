"""Google Translate (public gtx endpoint) provider implementation."""

from __future__ import annotations

import logging
from typing import Any

from vocabmaster.services.http import ProviderUnavailableError, request_json
from vocabmaster.services.translation.base import TranslationProvider

logger = logging.getLogger(__name__)


def extract_nested_translation(data: Any) -> str | None:
    """Return ``data[0][0][0]`` when the response has the nested-array shape."""
    if not isinstance(data, list) or not data or not isinstance(data[0], list):
        return None
    if not data[0] or not isinstance(data[0][0], list) or not data[0][0]:
        return None
    candidate = data[0][0][0]
    return candidate if isinstance(candidate, str) else None


class GoogleTranslateProvider(TranslationProvider):
    """Translation provider using the keyless translate_a/single endpoint."""

    provider_name = "google"
    BASE_URL = "https://translate.googleapis.com/translate_a/single"

    def __init__(
        self,
        source_language: str = "en",
        target_language: str = "vi",
        base_url: str | None = None,
        timeout: float = 30.0,
    ) -> None:
        self.source_language = source_language
        self.target_language = target_language
        self.base_url = base_url or self.BASE_URL
        self.timeout = timeout

    async def translate(self, word: str) -> str | None:
        params = {
            "client": "gtx",
            "sl": self.source_language,
            "tl": self.target_language,
            "dt": "t",
            "q": word,
        }
        data = await request_json(
            self.provider_name, "GET", self.base_url, timeout=self.timeout, params=params
        )
        if data is None:
            return None

        translation = extract_nested_translation(data)
        if translation is None:
            raise ProviderUnavailableError(
                "Unexpected response shape", self.provider_name, {"response": str(data)[:200]}
            )

        logger.info(f"[GoogleTranslate] '{word}' -> '{translation}'")
        return translation
