"""Random word selection that skips words a user has already learned."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Union

from sqlalchemy.orm import Session

from vocabmaster.core.config import get_settings
from vocabmaster.models.vocabulary import Vocabulary
from vocabmaster.repositories.vocabulary import VocabularyRepository
from vocabmaster.schemas.word import ResolvedWord
from vocabmaster.services.definitions import DefinitionService
from vocabmaster.services.learned_words import LearnedWordService

if TYPE_CHECKING:
    from vocabmaster.core.config import Settings

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SelectionExhausted:
    """Returned when no unlearned word could be found for a user."""

    user_id: int
    learned_count: int


SelectionResult = Union[ResolvedWord, SelectionExhausted]


class WordSelector:
    """
    Picks a random catalogue word the user has not learned and resolves it.

    Sampling happens in two stages. The first draws uniformly from the
    catalogue with the user's learned words excluded by a subquery. If that
    yields nothing, a bounded number of unfiltered draws are tried before
    giving up with ``SelectionExhausted``; a learned word is never returned.
    """

    def __init__(
        self,
        settings: Settings | None = None,
        vocabulary_repository: VocabularyRepository | None = None,
        learned_word_service: LearnedWordService | None = None,
        definition_service: DefinitionService | None = None,
    ) -> None:
        self.settings = settings or get_settings()
        self.vocabulary_repository = vocabulary_repository or VocabularyRepository()
        self.learned_word_service = learned_word_service or LearnedWordService()
        self.definition_service = definition_service or DefinitionService(self.settings)
        self.max_attempts = max(self.settings.selector_max_attempts, 0)

    async def select_random_word_for_user(
        self, session: Session, user_id: int
    ) -> SelectionResult:
        """
        Select and resolve a random word the user has not learned yet.

        Args:
            session: Database session.
            user_id: User to select for.

        Returns:
            The resolved word, or ``SelectionExhausted`` when the catalogue is
            empty or every draw hit a learned word.

        Raises:
            StorageError: If the catalogue or learned-word store fails.
        """
        learned = self.learned_word_service.get_learned_words(session, user_id)

        if not learned:
            vocabulary = self.vocabulary_repository.get_random(session)
        else:
            vocabulary = self.vocabulary_repository.get_random_unlearned(session, user_id)
            if vocabulary is None:
                logger.info(
                    f"[WordSelector] Exclusion sample empty for user {user_id}, "
                    f"drawing up to {self.max_attempts} more times"
                )
                vocabulary = self._draw_fallback(session, learned)

        if vocabulary is None:
            logger.warning(
                f"[WordSelector] No unlearned word available for user {user_id} "
                f"({len(learned)} learned)"
            )
            return SelectionExhausted(user_id=user_id, learned_count=len(learned))

        logger.info(f"[WordSelector] Selected '{vocabulary.word}' for user {user_id}")
        return await self.definition_service.resolve_entry(session, vocabulary)

    async def select_random_word(self, session: Session) -> ResolvedWord | None:
        """Select and resolve any random catalogue word; None if the catalogue is empty."""
        vocabulary = self.vocabulary_repository.get_random(session)
        if vocabulary is None:
            logger.warning("[WordSelector] Catalogue is empty")
            return None
        return await self.definition_service.resolve_entry(session, vocabulary)

    def _draw_fallback(self, session: Session, learned: frozenset[str]) -> Vocabulary | None:
        for attempt in range(1, self.max_attempts + 1):
            vocabulary = self.vocabulary_repository.get_random(session)
            if vocabulary is None:
                return None
            if vocabulary.word.lower() not in learned:
                logger.debug(f"[WordSelector] Fallback draw {attempt} found '{vocabulary.word}'")
                return vocabulary
        return None
