"""Cache-or-fetch resolution of word definitions."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from sqlalchemy.orm import Session

from vocabmaster.core.config import get_settings
from vocabmaster.models.vocabulary import Vocabulary, normalize_word
from vocabmaster.schemas.definition import DefinitionPayload
from vocabmaster.schemas.word import ResolutionSource, ResolvedWord
from vocabmaster.services.cache.definition import CachedDefinition, DefinitionCache
from vocabmaster.services.dictionary import DictionaryProvider, get_dictionary_provider
from vocabmaster.services.translation import TranslationProvider, TranslationService

if TYPE_CHECKING:
    from vocabmaster.core.config import Settings

logger = logging.getLogger(__name__)


class DefinitionService:
    """
    Resolves a word's definition and translation.

    Order of resolution:
    - cached payload in the vocabulary table, when it is not empty
    - dictionary provider, then translation provider; any result is written back
    - degraded response with the word and any translation already known

    Provider failures never escape this service; storage failures always do.
    """

    def __init__(
        self,
        settings: Settings | None = None,
        definition_cache: DefinitionCache | None = None,
        dictionary_provider: DictionaryProvider | None = None,
        translation_provider: TranslationProvider | None = None,
    ) -> None:
        self.settings = settings or get_settings()
        self.definition_cache = definition_cache or DefinitionCache()
        self._dictionary_provider = dictionary_provider
        self._translation_provider = translation_provider

    @property
    def dictionary_provider(self) -> DictionaryProvider:
        """Get or create the dictionary provider."""
        if self._dictionary_provider is None:
            self._dictionary_provider = get_dictionary_provider(self.settings)
        return self._dictionary_provider

    @property
    def translation_provider(self) -> TranslationProvider:
        """Get or create the translation provider chain."""
        if self._translation_provider is None:
            self._translation_provider = TranslationService(self.settings)
        return self._translation_provider

    async def get_or_fetch_definition(self, session: Session, word: str) -> DefinitionPayload:
        """
        Return the definition payload for a word, fetching it on a cache miss.

        Raises:
            ValueError: If ``word`` is blank.
            StorageError: If the catalogue cannot be read or written.
        """
        resolved = await self.resolve(session, word)
        return resolved.definition

    async def resolve(self, session: Session, word: str) -> ResolvedWord:
        """Resolve a word that may or may not already be in the catalogue."""
        if not word or not word.strip():
            raise ValueError("Word cannot be empty")

        cached = self.definition_cache.try_get(session, word)
        return await self._resolve(session, normalize_word(word), cached)

    async def resolve_entry(self, session: Session, vocabulary: Vocabulary) -> ResolvedWord:
        """Resolve a catalogue row that has already been loaded."""
        cached = self.definition_cache.read(vocabulary)
        return await self._resolve(session, vocabulary.word, cached)

    async def _resolve(
        self, session: Session, word: str, cached: CachedDefinition | None
    ) -> ResolvedWord:
        if cached is not None and not cached.needs_update:
            logger.info(f"[DefinitionService] Cache hit for '{word}'")
            return ResolvedWord(
                word=cached.word,
                translation=cached.translation,
                definition=cached.payload,
                source=ResolutionSource.CACHE,
            )

        known_translation = cached.translation if cached else None
        previous_payload = DefinitionPayload()
        if cached is not None and cached.payload is not None:
            previous_payload = cached.payload
        logger.info(f"[DefinitionService] Cache miss for '{word}', calling providers")

        payload = await self.dictionary_provider.fetch(word)
        translation = known_translation
        if not translation:
            translation = await self.translation_provider.fetch(word)

        if payload is None and translation == known_translation:
            logger.warning(
                f"[DefinitionService] No provider data for '{word}', returning basic response"
            )
            return ResolvedWord(
                word=word,
                translation=known_translation,
                definition=previous_payload,
                source=ResolutionSource.DEGRADED,
            )

        vocabulary = self.definition_cache.put(session, word, payload, translation)
        logger.info(
            f"[DefinitionService] Cached '{word}' "
            f"(definition={'yes' if payload is not None else 'no'}, translation={'yes' if translation else 'no'})"
        )
        return ResolvedWord(
            word=vocabulary.word,
            translation=vocabulary.translation or None,
            definition=payload if payload is not None else previous_payload,
            source=ResolutionSource.API,
        )
