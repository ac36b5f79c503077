"""Dictionary provider abstraction layer."""

from vocabmaster.services.dictionary.base import DictionaryProvider
from vocabmaster.services.dictionary.free_dictionary import (
    FreeDictionaryProvider,
    get_dictionary_provider,
)

__all__ = [
    "DictionaryProvider",
    "FreeDictionaryProvider",
    "get_dictionary_provider",
]
