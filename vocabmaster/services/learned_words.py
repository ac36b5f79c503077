"""Learned-word mutations and cached membership lookups."""

from __future__ import annotations

import logging
import math

from sqlalchemy.orm import Session

from vocabmaster.models.learned_word import LearnedWord
from vocabmaster.models.vocabulary import normalize_word
from vocabmaster.repositories.learned_word import AlreadyLearnedError, LearnedWordRepository
from vocabmaster.schemas.word import LearnedWordPage, LearnedWordRead
from vocabmaster.services.cache.membership import LearnedWordCache, get_learned_word_cache

logger = logging.getLogger(__name__)


class LearnedWordService:
    """
    Per-user learned-word store.

    Every successful mutation invalidates the user's entry in the membership
    cache before returning, so the next selection never sees a stale set.
    """

    def __init__(
        self,
        repository: LearnedWordRepository | None = None,
        cache: LearnedWordCache | None = None,
    ) -> None:
        self.repository = repository or LearnedWordRepository()
        self.cache = cache or get_learned_word_cache()

    def add(self, session: Session, user_id: int, word: str) -> bool:
        """
        Mark a word as learned for a user.

        Returns:
            True on success, False for a blank word.

        Raises:
            AlreadyLearnedError: If the user already learned the word.
            StorageError: If the store fails.
        """
        if not word or not word.strip():
            logger.warning(f"[LearnedWordService] User {user_id} tried to add an empty word")
            return False

        if word.strip().lower() in self.get_learned_words(session, user_id):
            logger.warning(f"[LearnedWordService] User {user_id} already learned '{word}'")
            raise AlreadyLearnedError(user_id, normalize_word(word))

        try:
            self.repository.create(session, user_id=user_id, word=word)
        finally:
            # Also covers a duplicate inserted by a concurrent request
            self.cache.invalidate(user_id)

        logger.info(f"[LearnedWordService] Marked '{word}' as learned for user {user_id}")
        return True

    def remove_by_id(
        self, session: Session, learned_word_id: int, user_id: int | None = None
    ) -> bool:
        """
        Remove a learned-word record by id.

        Args:
            session: Database session.
            learned_word_id: Record id.
            user_id: When given, only remove the record if it belongs to this user.

        Returns:
            True if a record was removed, False otherwise.
        """
        learned_word = self.repository.get(session, learned_word_id)
        if learned_word is None or (user_id is not None and learned_word.user_id != user_id):
            logger.warning(
                f"[LearnedWordService] Learned word {learned_word_id} not found "
                f"or not owned by user {user_id}"
            )
            return False

        owner_id = learned_word.user_id
        self.repository.delete(session, learned_word)
        self.cache.invalidate(owner_id)
        logger.info(f"[LearnedWordService] Removed learned word {learned_word_id} of user {owner_id}")
        return True

    def remove_by_word(self, session: Session, user_id: int, word: str) -> bool:
        """Remove a user's learned word by its text; False if it was not learned."""
        if not word or not word.strip():
            return False

        learned_word = self.repository.get_by_user_and_word(session, user_id, word)
        if learned_word is None:
            logger.warning(f"[LearnedWordService] '{word}' not learned by user {user_id}")
            return False

        self.repository.delete(session, learned_word)
        self.cache.invalidate(user_id)
        logger.info(f"[LearnedWordService] Removed '{word}' for user {user_id}")
        return True

    def get_by_user_id(self, session: Session, user_id: int) -> list[LearnedWord]:
        """Return a user's learned-word records, most recent first."""
        return self.repository.get_by_user_id(session, user_id)

    def get_learned_words(self, session: Session, user_id: int) -> frozenset[str]:
        """Return the user's learned words as a lower-cased set, using the cache."""
        cached = self.cache.get(user_id)
        if cached is not None:
            return cached

        version = self.cache.version(user_id)
        words = self.repository.list_words(session, user_id)
        return self.cache.set(user_id, words, version=version)

    def is_word_learned(self, session: Session, user_id: int, word: str) -> bool:
        """Check whether a user has learned a word, ignoring case."""
        if not word or not word.strip():
            return False
        return word.strip().lower() in self.get_learned_words(session, user_id)

    def list_paginated(
        self, session: Session, user_id: int, page: int = 1, page_size: int = 20
    ) -> LearnedWordPage:
        """Return one page of a user's learned words."""
        if page < 1:
            raise ValueError(f"page must be >= 1, got {page}")
        if page_size < 1:
            raise ValueError(f"page_size must be >= 1, got {page_size}")

        total_count = self.repository.count_by_user(session, user_id)
        items = self.repository.list_paginated(
            session, user_id, skip=(page - 1) * page_size, limit=page_size
        )
        return LearnedWordPage(
            items=[LearnedWordRead.model_validate(item) for item in items],
            total_count=total_count,
            total_pages=math.ceil(total_count / page_size),
            page=page,
            page_size=page_size,
        )
