"""Caches sitting in front of the vocabulary and learned-word stores."""

from vocabmaster.services.cache.definition import CachedDefinition, DefinitionCache, needs_update
from vocabmaster.services.cache.membership import LearnedWordCache, get_learned_word_cache

__all__ = [
    "CachedDefinition",
    "DefinitionCache",
    "LearnedWordCache",
    "get_learned_word_cache",
    "needs_update",
]
