"""Process-wide random source shared by every sampling component."""

from __future__ import annotations

import random
import threading
from functools import lru_cache

from vocabmaster.core.config import get_settings


class RandomSource:
    """Thread-safe wrapper around a single ``random.Random`` instance."""

    def __init__(self, seed: int | None = None) -> None:
        self._random = random.Random(seed)
        self._lock = threading.Lock()

    def randrange(self, stop: int) -> int:
        """Return a uniform integer in ``[0, stop)``."""
        if stop <= 0:
            raise ValueError(f"stop must be positive, got {stop}")
        with self._lock:
            return self._random.randrange(stop)

    def seed(self, value: int | None) -> None:
        """Reseed the underlying generator."""
        with self._lock:
            self._random.seed(value)


@lru_cache
def get_random_source() -> RandomSource:
    """Return the random source created once per process."""
    return RandomSource(seed=get_settings().random_seed)
