"""Service layer: definition resolution, word selection and batch jobs."""

from .bulk_cache import BulkCacheJob
from .definitions import DefinitionService
from .http import ProviderUnavailableError
from .learned_words import LearnedWordService
from .word_selector import SelectionExhausted, SelectionResult, WordSelector

__all__ = [
    "BulkCacheJob",
    "DefinitionService",
    "LearnedWordService",
    "ProviderUnavailableError",
    "SelectionExhausted",
    "SelectionResult",
    "WordSelector",
]
