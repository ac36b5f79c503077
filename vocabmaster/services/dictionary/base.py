"""Dictionary provider base interface."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod

from vocabmaster.schemas.definition import DefinitionPayload
from vocabmaster.services.http import ProviderUnavailableError

logger = logging.getLogger(__name__)


class DictionaryProvider(ABC):
    """Abstract base class for dictionary (phonetics + meanings) providers."""

    provider_name: str

    @abstractmethod
    async def lookup(self, word: str) -> DefinitionPayload | None:
        """
        Resolve a word against the external dictionary.

        Args:
            word: The word to look up.

        Returns:
            Capped DefinitionPayload, or None if the dictionary has no entry.

        Raises:
            ProviderUnavailableError: If the request fails or the response is malformed.
        """
        ...

    async def fetch(self, word: str) -> DefinitionPayload | None:
        """
        Resolve a word, degrading every failure to None.

        Args:
            word: The word to look up.

        Returns:
            DefinitionPayload, or None on a missing entry or any provider failure.
        """
        if not word or not word.strip():
            logger.warning(f"[{self.provider_name}] Empty word, skipping lookup")
            return None

        try:
            payload = await self.lookup(word.strip())
        except ProviderUnavailableError as e:
            logger.warning(f"[{self.provider_name}] Lookup failed for '{word}': {e}")
            return None

        if payload is None:
            logger.info(f"[{self.provider_name}] No definition found for '{word}'")
        return payload
