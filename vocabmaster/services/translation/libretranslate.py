"""LibreTranslate provider implementation."""

from __future__ import annotations

import logging
from typing import Any

from vocabmaster.services.http import ProviderUnavailableError, request_json
from vocabmaster.services.translation.base import TranslationProvider

logger = logging.getLogger(__name__)


class LibreTranslateProvider(TranslationProvider):
    """Translation provider for LibreTranslate-compatible servers."""

    provider_name = "libretranslate"
    BASE_URL = "https://libretranslate.com/translate"

    def __init__(
        self,
        source_language: str = "en",
        target_language: str = "vi",
        base_url: str | None = None,
        api_key: str | None = None,
        timeout: float = 30.0,
    ) -> None:
        self.source_language = source_language
        self.target_language = target_language
        self.base_url = base_url or self.BASE_URL
        self.api_key = api_key
        self.timeout = timeout

    def _build_payload(self, word: str) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "q": word,
            "source": self.source_language,
            "target": self.target_language,
            "format": "text",
        }
        if self.api_key:
            payload["api_key"] = self.api_key
        return payload

    async def translate(self, word: str) -> str | None:
        data = await request_json(
            self.provider_name,
            "POST",
            self.base_url,
            timeout=self.timeout,
            json=self._build_payload(word),
        )
        if data is None:
            return None

        translated = data.get("translatedText") if isinstance(data, dict) else None
        if not isinstance(translated, str):
            raise ProviderUnavailableError(
                "Response missing 'translatedText'",
                self.provider_name,
                {"response": str(data)[:200]},
            )

        logger.info(f"[LibreTranslate] '{word}' -> '{translated}'")
        return translated
