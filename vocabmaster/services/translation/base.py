"""Translation provider base interface."""

from __future__ import annotations

import enum
import logging
from abc import ABC, abstractmethod

from vocabmaster.services.http import ProviderUnavailableError

logger = logging.getLogger(__name__)


class TranslationProviderType(str, enum.Enum):
    """Supported translation provider types."""

    GOOGLE = "google"
    LIBRETRANSLATE = "libretranslate"
    STATIC = "static"


class TranslationProvider(ABC):
    """Abstract base class for word translation providers."""

    provider_name: str

    @abstractmethod
    async def translate(self, word: str) -> str | None:
        """
        Translate a word into the configured target language.

        Returns:
            The translated string, or None if the provider has no translation.

        Raises:
            ProviderUnavailableError: If the request fails or the response is malformed.
        """
        ...

    async def fetch(self, word: str) -> str | None:
        """Translate a word, degrading every failure to None."""
        if not word or not word.strip():
            logger.warning(f"[{self.provider_name}] Empty word, skipping translation")
            return None

        try:
            translation = await self.translate(word.strip())
        except ProviderUnavailableError as e:
            logger.warning(f"[{self.provider_name}] Translation failed for '{word}': {e}")
            return None

        if translation:
            translation = translation.strip()
        if not translation:
            logger.info(f"[{self.provider_name}] No translation for '{word}'")
            return None
        return translation
