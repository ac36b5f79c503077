"""Repository exports."""

from .base import StorageError
from .learned_word import AlreadyLearnedError, LearnedWordRepository
from .vocabulary import VocabularyRepository

__all__ = [
    "AlreadyLearnedError",
    "LearnedWordRepository",
    "StorageError",
    "VocabularyRepository",
]
