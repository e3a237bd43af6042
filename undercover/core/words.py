"""
Word bank: pairs of related secret words loaded from a two-column dataset.
"""

import logging
from dataclasses import dataclass
from importlib import resources
from pathlib import Path
from typing import FrozenSet, List, Optional, Tuple

logger = logging.getLogger(__name__)

BUNDLED_DATASET = "word_pairs.csv"


@dataclass(frozen=True)
class WordPair:
    """Two close but distinguishable words for the same concept."""
    word_a: str
    word_b: str

    def __contains__(self, word: str) -> bool:
        return word == self.word_a or word == self.word_b


DEFAULT_WORD_PAIR = WordPair("Cat", "Dog")


def _read_dataset_text(path: Optional[str]) -> str:
    if path is None:
        return resources.files("undercover.data").joinpath(BUNDLED_DATASET).read_text(encoding="utf-8")
    return Path(path).read_text(encoding="utf-8")


def read_word_pairs_dataset(path: Optional[str] = None) -> List[Tuple[str, str]]:
    """
    Read the comma-separated word dataset.

    Lines that do not split into exactly two fields are skipped.

    Args:
        path: CSV file to read, or None for the bundled dataset

    Raises:
        OSError: If the file cannot be read
        UnicodeDecodeError: If the file is not valid UTF-8
    """
    rows = []
    for line in _read_dataset_text(path).splitlines():
        fields = line.split(",")
        if len(fields) != 2:
            continue
        rows.append((fields[0].strip(), fields[1].strip()))
    return rows


class WordBank:
    """Process-scoped cache of word pairs, loaded once on first use."""

    def __init__(self, dataset_path: Optional[str] = None):
        self.dataset_path = dataset_path
        self._pairs: Optional[FrozenSet[WordPair]] = None

    @property
    def is_loaded(self) -> bool:
        return self._pairs is not None

    def load_pairs(self) -> FrozenSet[WordPair]:
        """
        Return every word pair, reading the dataset on the first call.

        A dataset that cannot be read, or that holds no usable line,
        yields the single default pair instead of an error.
        """
        if self._pairs is not None:
            return self._pairs

        try:
            rows = read_word_pairs_dataset(self.dataset_path)
        except (OSError, UnicodeDecodeError) as e:
            logger.warning("Could not load word pairs from %s: %s", self.dataset_path or BUNDLED_DATASET, e)
            rows = []

        pairs = frozenset(WordPair(a, b) for a, b in rows)
        if not pairs:
            logger.warning("No word pairs available, falling back to %s", DEFAULT_WORD_PAIR)
            pairs = frozenset([DEFAULT_WORD_PAIR])

        self._pairs = pairs
        logger.debug("Loaded %d word pairs", len(pairs))
        return self._pairs
