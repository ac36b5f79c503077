"""Database models package."""

from .learned_word import LearnedWord
from .vocabulary import Vocabulary, normalize_word

__all__ = ["LearnedWord", "Vocabulary", "normalize_word"]
