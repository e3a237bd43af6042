"""
History tracker biasing word selection away from recently used words.
"""

import logging
from typing import List, Optional, Protocol

logger = logging.getLogger(__name__)

MAX_HISTORY = 100


class HistoryStore(Protocol):
    """Durable storage for the recent words list."""

    def load_history(self) -> List[str]:
        ...

    def save_history(self, words: List[str]) -> None:
        ...


class HistoryTracker:
    """Most-recent-first list of words dealt in previous rounds."""

    def __init__(self, store: Optional[HistoryStore] = None, max_history: int = MAX_HISTORY):
        self.store = store
        self.max_history = max_history
        self._words: List[str] = []

    @property
    def capacity(self) -> int:
        """Each recorded pair contributes two words."""
        return 2 * self.max_history

    def load(self) -> None:
        """Replace the in-memory history with the store's content."""
        if self.store is None:
            return
        words = self.store.load_history()
        self._words = self._dedupe(words)[:self.capacity]
        logger.debug("Loaded %d recent words", len(self._words))

    def save(self) -> None:
        """Push the current history to the store."""
        if self.store is None:
            return
        self.store.save_history(list(self._words))

    def recent_words(self) -> List[str]:
        """Recent words, most recent first."""
        return list(self._words)

    def contains(self, word: str) -> bool:
        return word in self._words

    def record(self, word_a: str, word_b: str) -> None:
        """
        Prepend a dealt pair to the history.

        word_b goes in first so that word_a ends up most recent. Older
        duplicates are dropped and the list is cut to capacity.
        """
        self._words = self._dedupe([word_a, word_b] + self._words)[:self.capacity]

    def clear(self) -> None:
        self._words = []

    @staticmethod
    def _dedupe(words: List[str]) -> List[str]:
        seen = set()
        result = []
        for word in words:
            if word in seen:
                continue
            seen.add(word)
            result.append(word)
        return result
