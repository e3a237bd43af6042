"""
History stores that keep the recent words list between sessions.
"""

import json
import logging
from pathlib import Path
from typing import Dict, List, Optional

logger = logging.getLogger(__name__)

WORD_DELIMITER = ","


class InMemoryHistoryStore:
    """History store living for the process lifetime only."""

    def __init__(self, words: Optional[List[str]] = None):
        self._blob = WORD_DELIMITER.join(words or [])

    def load_history(self) -> List[str]:
        return _split(self._blob)

    def save_history(self, words: List[str]) -> None:
        self._blob = WORD_DELIMITER.join(words)


class FileHistoryStore:
    """
    Key/value text store backed by a JSON file.

    The history is kept as one delimiter-joined string under a single key,
    other keys in the file are preserved on save.
    """

    def __init__(self, path: str, key: str = "recent_words"):
        self.path = Path(path).expanduser()
        self.key = key

    def _read(self) -> Dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.warning("Ignoring unreadable history file %s: %s", self.path, e)
            return {}
        if not isinstance(data, dict):
            logger.warning("Ignoring history file %s: expected an object", self.path)
            return {}
        return data

    def load_history(self) -> List[str]:
        """
        Load recent words from disk.

        Returns:
            Words most recent first; empty when the file is missing or unreadable
        """
        blob = self._read().get(self.key, "")
        if not isinstance(blob, str):
            return []
        return _split(blob)

    def save_history(self, words: List[str]) -> None:
        """
        Save recent words to disk.

        A failed write is logged and the game carries on with the in-memory
        history only.

        Args:
            words: Words most recent first
        """
        data = self._read()
        data[self.key] = WORD_DELIMITER.join(words)
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.path, 'w', encoding='utf-8') as f:
                json.dump(data, f, indent=2, ensure_ascii=False)
        except OSError as e:
            logger.warning("Could not save history file %s: %s", self.path, e)


def _split(blob: str) -> List[str]:
    return [word for word in blob.split(WORD_DELIMITER) if word]
