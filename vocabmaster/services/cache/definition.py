"""Definition cache persisted in the vocabulary table."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from sqlalchemy.orm import Session

from vocabmaster.models.vocabulary import Vocabulary
from vocabmaster.repositories.vocabulary import VocabularyRepository, load_payload
from vocabmaster.schemas.definition import DefinitionPayload

logger = logging.getLogger(__name__)


def needs_update(payload: DefinitionPayload | None) -> bool:
    """Return True when a cached payload is missing or has no phonetics and no meanings."""
    return payload is None or payload.is_empty


@dataclass(frozen=True)
class CachedDefinition:
    """What the catalogue currently holds for a word."""

    word: str
    translation: str | None
    payload: DefinitionPayload | None

    @property
    def needs_update(self) -> bool:
        return needs_update(self.payload)


class DefinitionCache:
    """Answers "is this word already resolved" without network calls."""

    def __init__(self, vocabulary_repository: VocabularyRepository | None = None) -> None:
        self.vocabulary_repository = vocabulary_repository or VocabularyRepository()

    @staticmethod
    def needs_update(payload: DefinitionPayload | None) -> bool:
        return needs_update(payload)

    def read(self, vocabulary: Vocabulary) -> CachedDefinition:
        """Decode the cached state of an already loaded catalogue row."""
        return CachedDefinition(
            word=vocabulary.word,
            translation=vocabulary.translation or None,
            payload=load_payload(vocabulary),
        )

    def try_get(self, session: Session, word: str) -> CachedDefinition | None:
        """
        Look up a word's cached definition.

        Returns:
            The cached state, or None if the word is not in the catalogue.

        Raises:
            StorageError: If the catalogue cannot be read.
        """
        vocabulary = self.vocabulary_repository.get_by_word(session, word)
        if vocabulary is None:
            logger.info(f"[DefinitionCache] Word '{word}' not in catalogue")
            return None
        return self.read(vocabulary)

    def put(
        self,
        session: Session,
        word: str,
        payload: DefinitionPayload | None,
        translation: str | None = None,
    ) -> Vocabulary:
        """
        Upsert the catalogue entry for ``word``.

        Args:
            session: Database session.
            word: Word to store (case-insensitive).
            payload: Resolved definition; None keeps the stored payload.
            translation: Non-empty values replace the stored translation;
                empty values never do.

        Returns:
            The persisted vocabulary row.
        """
        vocabulary = self.vocabulary_repository.get_by_word(session, word)
        if vocabulary is None:
            logger.info(f"[DefinitionCache] Adding new word '{word}' to catalogue")
            vocabulary = self.vocabulary_repository.create(session, word=word)

        return self.vocabulary_repository.update_definition(
            session, vocabulary, payload=payload, translation=translation
        )
