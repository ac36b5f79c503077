"""Batch jobs that warm the vocabulary catalogue from external providers."""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING, Awaitable, Callable

from sqlalchemy.orm import Session

from vocabmaster.core.config import get_settings
from vocabmaster.repositories.vocabulary import VocabularyRepository
from vocabmaster.services.cache.definition import DefinitionCache
from vocabmaster.services.dictionary import DictionaryProvider, get_dictionary_provider
from vocabmaster.services.translation import TranslationProvider, TranslationService

if TYPE_CHECKING:
    from vocabmaster.core.config import Settings

logger = logging.getLogger(__name__)


class BulkCacheJob:
    """
    Sequential passes over the whole catalogue.

    Entries are processed one at a time with a fixed pause after every entry
    that needed a network call. A failing entry is logged and counted; it never
    stops the pass.
    """

    def __init__(
        self,
        settings: Settings | None = None,
        vocabulary_repository: VocabularyRepository | None = None,
        definition_cache: DefinitionCache | None = None,
        dictionary_provider: DictionaryProvider | None = None,
        translation_provider: TranslationProvider | None = None,
        delay_seconds: float | None = None,
        sleep: Callable[[float], Awaitable[object]] = asyncio.sleep,
    ) -> None:
        self.settings = settings or get_settings()
        self.vocabulary_repository = vocabulary_repository or VocabularyRepository()
        self.definition_cache = definition_cache or DefinitionCache(self.vocabulary_repository)
        self.dictionary_provider = dictionary_provider or get_dictionary_provider(self.settings)
        self.translation_provider = translation_provider or TranslationService(self.settings)
        if delay_seconds is None:
            delay_seconds = self.settings.bulk_request_delay_seconds
        self.delay_seconds = max(delay_seconds, 0.0)
        self._sleep = sleep

    async def cache_all_vocabulary_definitions(self, session: Session) -> int:
        """
        Fetch and store definitions for every entry whose cached payload is empty.

        Args:
            session: Database session.

        Returns:
            Number of entries successfully cached.

        Raises:
            StorageError: If the catalogue cannot be listed.
        """
        vocabularies = self.vocabulary_repository.list_all(session)
        logger.info(f"[BulkCacheJob] Caching definitions for {len(vocabularies)} catalogue entries")

        success_count = 0
        fail_count = 0
        skipped_count = 0

        for vocabulary in vocabularies:
            word = vocabulary.word
            try:
                if not self.definition_cache.read(vocabulary).needs_update:
                    skipped_count += 1
                    continue

                payload = await self.dictionary_provider.fetch(word)
                if payload is None:
                    fail_count += 1
                    logger.warning(f"[BulkCacheJob] No definition for '{word}'")
                else:
                    self.vocabulary_repository.update_definition(
                        session, vocabulary, payload=payload
                    )
                    success_count += 1
                    logger.info(f"[BulkCacheJob] Cached definition for '{word}'")
            except Exception as e:
                fail_count += 1
                logger.error(f"[BulkCacheJob] Error caching '{word}': {e}")

            await self._pause()

        logger.info(
            f"[BulkCacheJob] Finished caching definitions. Success: {success_count}, "
            f"Failed: {fail_count}, Skipped: {skipped_count}"
        )
        return success_count

    async def crawl_all_translations(self, session: Session) -> int:
        """
        Fetch and store translations for every entry that has none.

        Returns:
            Number of entries successfully translated.
        """
        vocabularies = [
            vocabulary
            for vocabulary in self.vocabulary_repository.list_all(session)
            if not vocabulary.translation
        ]
        logger.info(f"[BulkCacheJob] Found {len(vocabularies)} entries without a translation")

        success_count = 0
        fail_count = 0

        for vocabulary in vocabularies:
            word = vocabulary.word
            try:
                translation = await self.translation_provider.fetch(word)
                if not translation:
                    fail_count += 1
                    logger.warning(f"[BulkCacheJob] Could not translate '{word}', skipping")
                else:
                    self.vocabulary_repository.update_definition(
                        session, vocabulary, translation=translation
                    )
                    success_count += 1
                    logger.info(f"[BulkCacheJob] Translated '{word}' to '{translation}'")
            except Exception as e:
                fail_count += 1
                logger.error(f"[BulkCacheJob] Error translating '{word}': {e}")

            await self._pause()

        logger.info(
            f"[BulkCacheJob] Finished crawling translations. Success: {success_count}, "
            f"Failed: {fail_count}"
        )
        return success_count

    async def _pause(self) -> None:
        if self.delay_seconds > 0:
            await self._sleep(self.delay_seconds)
