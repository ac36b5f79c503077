"""Database access helpers for learned-word records."""

from __future__ import annotations

import logging

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from vocabmaster.models.learned_word import LearnedWord
from vocabmaster.models.vocabulary import normalize_word
from vocabmaster.repositories.base import BaseRepository, storage_errors

logger = logging.getLogger(__name__)


class AlreadyLearnedError(Exception):
    """Raised when a user marks a word that is already in their learned list."""

    def __init__(self, user_id: int, word: str) -> None:
        self.user_id = user_id
        self.word = word
        super().__init__(f"Word '{word}' is already learned by user {user_id}")


class LearnedWordRepository(BaseRepository[LearnedWord]):
    """Repository for interacting with learned-word records."""

    def __init__(self) -> None:
        super().__init__(model=LearnedWord)

    def get_by_user_id(self, session: Session, user_id: int) -> list[LearnedWord]:
        """Return a user's learned words, most recent first."""
        with storage_errors(session, "list learned words"):
            statement = (
                select(LearnedWord)
                .where(LearnedWord.user_id == user_id)
                .order_by(LearnedWord.learned_at.desc(), LearnedWord.id.desc())
            )
            return list(session.scalars(statement).all())

    def list_words(self, session: Session, user_id: int) -> list[str]:
        """Return only the word column of a user's learned words."""
        with storage_errors(session, "list learned word strings"):
            statement = select(LearnedWord.word).where(LearnedWord.user_id == user_id)
            return list(session.scalars(statement).all())

    def get_by_user_and_word(
        self, session: Session, user_id: int, word: str
    ) -> LearnedWord | None:
        """Fetch a user's learned-word record by word, ignoring case."""
        with storage_errors(session, "get learned word"):
            statement = select(LearnedWord).where(
                LearnedWord.user_id == user_id,
                LearnedWord.word == normalize_word(word),
            )
            return session.scalars(statement).first()

    def count_by_user(self, session: Session, user_id: int) -> int:
        """Count a user's learned words."""
        with storage_errors(session, "count learned words"):
            statement = (
                select(func.count())
                .select_from(LearnedWord)
                .where(LearnedWord.user_id == user_id)
            )
            return session.execute(statement).scalar() or 0

    def list_paginated(
        self, session: Session, user_id: int, skip: int = 0, limit: int = 20
    ) -> list[LearnedWord]:
        """Return one page of a user's learned words, most recent first."""
        with storage_errors(session, "list learned words page"):
            statement = (
                select(LearnedWord)
                .where(LearnedWord.user_id == user_id)
                .order_by(LearnedWord.learned_at.desc(), LearnedWord.id.desc())
                .offset(skip)
                .limit(limit)
            )
            return list(session.scalars(statement).all())

    def create(self, session: Session, *, user_id: int, word: str) -> LearnedWord:
        """
        Insert a learned-word record.

        Raises:
            AlreadyLearnedError: If the (user, word) pair already exists.
            StorageError: On any other database failure.
        """
        normalized = normalize_word(word)
        learned_word = LearnedWord(user_id=user_id, word=normalized)
        with storage_errors(session, "create learned word"):
            try:
                created = self.add(session, learned_word)
                session.commit()
            except IntegrityError as exc:
                session.rollback()
                logger.warning(
                    f"[LearnedWordRepository] Duplicate '{normalized}' for user {user_id}"
                )
                raise AlreadyLearnedError(user_id, normalized) from exc
        return created

    def delete(self, session: Session, learned_word: LearnedWord) -> None:
        """Permanently remove a learned-word record."""
        with storage_errors(session, "delete learned word"):
            session.delete(learned_word)
            session.commit()
