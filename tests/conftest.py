"""
Pytest fixtures for Undercover engine tests.
"""

import random

import pytest

from undercover.core import (
    Player, Role, Power, WordBank, HistoryTracker, RoleAssignor, GameSession,
)
from undercover.config.game_config import GameConfig
from undercover.storage import InMemoryHistoryStore

CIVILIAN_WORD = "Café"
UNDERCOVER_WORD = "Bistro"


@pytest.fixture
def game_config():
    """Test engine configuration."""
    return GameConfig(
        random_seed=1234,
        use_announcements=False  # Disable for cleaner test output
    )


@pytest.fixture
def rng():
    """Seeded random source for reproducible tests."""
    return random.Random(1234)


@pytest.fixture
def word_file(tmp_path):
    """Small word dataset on disk."""
    path = tmp_path / "word_pairs.csv"
    path.write_text("Coffee,Tea\nLion,Tiger\nCafé,Bistro\n", encoding="utf-8")
    return path


@pytest.fixture
def word_bank(word_file):
    return WordBank(str(word_file))


@pytest.fixture
def history():
    return HistoryTracker(InMemoryHistoryStore())


@pytest.fixture
def assignor(word_bank, history, rng):
    return RoleAssignor(word_bank, history, rng)


@pytest.fixture
def session(game_config, word_bank, history):
    """Session wired to the test word bank and an in-memory history."""
    return GameSession(game_config, word_bank=word_bank, history=history)


@pytest.fixture
def make_players():
    """
    Factory building a round's players from (name, role[, power]) tuples.

    Civilians get CIVILIAN_WORD, Undercovers get UNDERCOVER_WORD.
    """
    def _make(*seats):
        players = []
        for seat in seats:
            name, role = seat[0], seat[1]
            power = seat[2] if len(seat) > 2 else None
            word = {
                Role.CIVILIAN: CIVILIAN_WORD,
                Role.UNDERCOVER: UNDERCOVER_WORD,
                Role.MR_WHITE: None,
            }[role]
            players.append(Player(name=name, role=role, word=word, power=power))
        return players
    return _make


@pytest.fixture
def five_players(make_players):
    """Four Civilians (one Jester) and one Undercover."""
    return make_players(
        ("Alice", Role.CIVILIAN, Power.JESTER),
        ("Bob", Role.CIVILIAN),
        ("Chloe", Role.CIVILIAN),
        ("David", Role.CIVILIAN),
        ("Emma", Role.UNDERCOVER),
    )
