"""Database access helpers for the vocabulary catalogue."""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from typing import Iterable

from pydantic import TypeAdapter, ValidationError
from sqlalchemy import ColumnElement, func, select, true
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from vocabmaster.core.random_source import RandomSource, get_random_source
from vocabmaster.models.learned_word import LearnedWord
from vocabmaster.models.vocabulary import DEFINITION_PAYLOAD_VERSION, Vocabulary, normalize_word
from vocabmaster.repositories.base import BaseRepository, storage_errors
from vocabmaster.schemas.definition import DefinitionPayload, Meaning, Phonetic

logger = logging.getLogger(__name__)

_phonetics_adapter = TypeAdapter(list[Phonetic])
_meanings_adapter = TypeAdapter(list[Meaning])


class VocabularyRepository(BaseRepository[Vocabulary]):
    """Repository for sampling and updating vocabulary records."""

    def __init__(self, random_source: RandomSource | None = None) -> None:
        super().__init__(model=Vocabulary)
        self._random = random_source or get_random_source()

    def count(self, session: Session) -> int:
        """Return the total catalogue size."""
        with storage_errors(session, "count vocabularies"):
            statement = select(func.count()).select_from(Vocabulary)
            return session.execute(statement).scalar() or 0

    def list_all(self, session: Session) -> list[Vocabulary]:
        """Return every catalogue entry in insertion order."""
        with storage_errors(session, "list vocabularies"):
            statement = select(Vocabulary).order_by(Vocabulary.id)
            return list(session.scalars(statement).all())

    def get_by_word(self, session: Session, word: str) -> Vocabulary | None:
        """Fetch an entry by word, ignoring case."""
        with storage_errors(session, "get vocabulary by word"):
            statement = select(Vocabulary).where(Vocabulary.word == normalize_word(word))
            return session.scalars(statement).first()

    def get_random(self, session: Session) -> Vocabulary | None:
        """Return a uniformly random entry, or None when the catalogue is empty."""
        return self._pick_uniform(session, true(), "get random vocabulary")

    def get_random_excluding(
        self, session: Session, exclude_words: Iterable[str]
    ) -> Vocabulary | None:
        """
        Return a uniformly random entry whose word is not in ``exclude_words``.

        The exclusion predicate is applied in SQL and the random offset is drawn
        over the filtered population, so every remaining entry is equally likely.

        Args:
            session: Database session.
            exclude_words: Words to leave out (compared case-insensitively).

        Returns:
            A matching entry, or None if every entry is excluded.
        """
        excluded = {normalize_word(word) for word in exclude_words if word and word.strip()}
        if not excluded:
            return self.get_random(session)

        logger.debug(f"[VocabularyRepository] Sampling while excluding {len(excluded)} words")
        return self._pick_uniform(
            session,
            Vocabulary.word.not_in(sorted(excluded)),
            "get random vocabulary excluding words",
        )

    def get_random_unlearned(self, session: Session, user_id: int) -> Vocabulary | None:
        """
        Return a uniformly random entry the user has not learned.

        Learned words are excluded with a subquery on ``learned_words``, so the
        statement size does not grow with the learned list.
        """
        learned = select(LearnedWord.word).where(LearnedWord.user_id == user_id)
        return self._pick_uniform(
            session,
            Vocabulary.word.not_in(learned),
            "get random unlearned vocabulary",
        )

    def _pick_uniform(
        self, session: Session, condition: ColumnElement[bool], operation: str
    ) -> Vocabulary | None:
        with storage_errors(session, operation):
            count_statement = select(func.count()).select_from(Vocabulary).where(condition)
            total = session.execute(count_statement).scalar() or 0
            if total == 0:
                return None

            index = self._random.randrange(total)
            statement = (
                select(Vocabulary)
                .where(condition)
                .order_by(Vocabulary.id)
                .offset(index)
                .limit(1)
            )
            vocabulary = session.scalars(statement).first()

        if vocabulary is None:
            # Rows removed between the count and the fetch
            logger.warning(f"[VocabularyRepository] No row at random index {index} of {total}")
        return vocabulary

    def create(
        self, session: Session, *, word: str, translation: str | None = None
    ) -> Vocabulary:
        """
        Create a new catalogue entry with an empty definition payload.

        If another session inserted the same word first, the existing row is
        returned instead.
        """
        normalized = normalize_word(word)
        vocabulary = Vocabulary(
            word=normalized,
            translation=translation or None,
            phonetics_json="[]",
            meanings_json="[]",
            payload_version=DEFINITION_PAYLOAD_VERSION,
        )
        with storage_errors(session, "create vocabulary"):
            try:
                created = self.add(session, vocabulary)
                session.commit()
            except IntegrityError:
                session.rollback()
                logger.warning(
                    f"[VocabularyRepository] '{normalized}' was inserted concurrently, reusing it"
                )
                existing = session.scalars(
                    select(Vocabulary).where(Vocabulary.word == normalized)
                ).first()
                if existing is None:
                    raise
                return existing
        return created

    def update_definition(
        self,
        session: Session,
        vocabulary: Vocabulary,
        *,
        payload: DefinitionPayload | None = None,
        translation: str | None = None,
    ) -> Vocabulary:
        """
        Store a resolved payload and/or translation on an existing entry.

        An empty translation never replaces a non-empty one.
        """
        if payload is not None:
            vocabulary.phonetics_json, vocabulary.meanings_json = dump_payload(payload)
            vocabulary.payload_version = DEFINITION_PAYLOAD_VERSION
        if translation:
            vocabulary.translation = translation
        vocabulary.updated_at = datetime.now(timezone.utc)

        with storage_errors(session, "update vocabulary"):
            session.flush()
            session.refresh(vocabulary)
            session.commit()
        return vocabulary


def dump_payload(payload: DefinitionPayload) -> tuple[str, str]:
    """Serialize a payload into the (phonetics_json, meanings_json) column pair."""
    phonetics = json.dumps([p.model_dump() for p in payload.phonetics], ensure_ascii=False)
    meanings = json.dumps([m.model_dump() for m in payload.meanings], ensure_ascii=False)
    return phonetics, meanings


def load_payload(vocabulary: Vocabulary) -> DefinitionPayload | None:
    """
    Deserialize the cached payload stored on a vocabulary row.

    Returns None when nothing was ever stored, when the row was written with an
    unknown payload version, or when the stored JSON cannot be parsed.
    """
    if vocabulary.phonetics_json is None and vocabulary.meanings_json is None:
        return None

    if vocabulary.payload_version != DEFINITION_PAYLOAD_VERSION:
        logger.warning(
            f"[VocabularyRepository] Unsupported payload version {vocabulary.payload_version} "
            f"for word '{vocabulary.word}'"
        )
        return None

    try:
        return DefinitionPayload(
            phonetics=_phonetics_adapter.validate_json(vocabulary.phonetics_json or "[]"),
            meanings=_meanings_adapter.validate_json(vocabulary.meanings_json or "[]"),
        )
    except ValidationError as exc:
        logger.error(
            f"[VocabularyRepository] Corrupt cached payload for word '{vocabulary.word}': {exc}"
        )
        return None
