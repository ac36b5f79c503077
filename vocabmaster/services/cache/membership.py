"""In-process cache of each user's learned-word set."""

from __future__ import annotations

import logging
import threading
import time
from dataclasses import dataclass
from functools import lru_cache
from typing import Callable, Iterable

from vocabmaster.core.config import get_settings

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class _Entry:
    words: frozenset[str]
    expires_at: float


class LearnedWordCache:
    """
    Thread-safe per-user cache of learned words with a fixed TTL.

    Every user also has a version counter that ``invalidate`` bumps. A loader
    reads the version before querying the store and passes it to ``set``; a
    result computed before an invalidation is then discarded instead of
    overwriting the fresh state.
    """

    def __init__(
        self,
        ttl_seconds: float = 900.0,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.ttl_seconds = ttl_seconds
        self._clock = clock
        self._entries: dict[int, _Entry] = {}
        self._versions: dict[int, int] = {}
        self._lock = threading.Lock()

    def get(self, user_id: int) -> frozenset[str] | None:
        """Return the cached set for a user, or None when missing or expired."""
        with self._lock:
            entry = self._entries.get(user_id)
            if entry is None:
                return None
            if entry.expires_at <= self._clock():
                del self._entries[user_id]
                return None
            return entry.words

    def version(self, user_id: int) -> int:
        """Return the user's current invalidation counter."""
        with self._lock:
            return self._versions.get(user_id, 0)

    def set(
        self, user_id: int, words: Iterable[str], version: int | None = None
    ) -> frozenset[str]:
        """
        Store a user's learned set.

        Args:
            user_id: Owner of the set.
            words: Learned words (stored lower-cased).
            version: Counter read before loading ``words``; if the user was
                invalidated since then the set is returned but not cached.

        Returns:
            The normalized frozenset.
        """
        normalized = frozenset(word.strip().lower() for word in words if word)
        with self._lock:
            if version is not None and version != self._versions.get(user_id, 0):
                logger.debug(f"[LearnedWordCache] Discarding stale load for user {user_id}")
                return normalized
            self._entries[user_id] = _Entry(normalized, self._clock() + self.ttl_seconds)
        return normalized

    def invalidate(self, user_id: int) -> None:
        """Drop a user's cached set."""
        with self._lock:
            self._entries.pop(user_id, None)
            self._versions[user_id] = self._versions.get(user_id, 0) + 1
        logger.debug(f"[LearnedWordCache] Invalidated user {user_id}")

    def clear(self) -> None:
        """Drop every cached set."""
        with self._lock:
            self._entries.clear()
            self._versions.clear()


@lru_cache
def get_learned_word_cache() -> LearnedWordCache:
    """Return the cache instance owned by this process."""
    return LearnedWordCache(ttl_seconds=float(get_settings().learned_words_cache_ttl_seconds))
