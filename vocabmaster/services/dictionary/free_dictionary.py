"""Free Dictionary API (dictionaryapi.dev) provider implementation."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING
from urllib.parse import quote

from vocabmaster.core.config import get_settings
from vocabmaster.schemas.definition import DefinitionPayload
from vocabmaster.services.dictionary.base import DictionaryProvider
from vocabmaster.services.http import ProviderUnavailableError, request_json

if TYPE_CHECKING:
    from vocabmaster.core.config import Settings

logger = logging.getLogger(__name__)


class FreeDictionaryProvider(DictionaryProvider):
    """Dictionary provider backed by https://dictionaryapi.dev."""

    provider_name = "free_dictionary"
    BASE_URL = "https://api.dictionaryapi.dev/api/v2/entries/en"

    def __init__(self, base_url: str | None = None, timeout: float = 30.0) -> None:
        """
        Initialize the provider.

        Args:
            base_url: Override for the entries endpoint (no trailing word).
            timeout: Request timeout in seconds.
        """
        self.base_url = (base_url or self.BASE_URL).rstrip("/")
        self.timeout = timeout

    async def lookup(self, word: str) -> DefinitionPayload | None:
        url = f"{self.base_url}/{quote(word, safe='')}"
        logger.debug(f"[FreeDictionary] GET {url}")

        data = await request_json(self.provider_name, "GET", url, timeout=self.timeout)
        if data is None:
            return None

        if not isinstance(data, list):
            raise ProviderUnavailableError(
                "Unexpected response shape", self.provider_name, {"type": type(data).__name__}
            )
        if not data:
            return None

        try:
            payload = DefinitionPayload.from_api_entry(data[0])
        except ValueError as e:
            raise ProviderUnavailableError(
                "Unexpected response shape", self.provider_name, {"error": str(e)}
            ) from e

        logger.info(
            f"[FreeDictionary] Resolved '{word}': {len(payload.phonetics)} phonetics, "
            f"{len(payload.meanings)} meanings"
        )
        return payload


def get_dictionary_provider(settings: Settings | None = None) -> DictionaryProvider:
    """Build the dictionary provider described by the application settings."""
    settings = settings or get_settings()
    return FreeDictionaryProvider(
        base_url=settings.dictionary_api_url,
        timeout=float(settings.http_timeout_seconds),
    )
