"""
Tests for role, word and power assignment.
"""

import random

import pytest

from undercover.core import (
    RoleAssignor, RoundConfiguration, Role, Power, WordBank, WordPair, HistoryTracker,
    InvalidConfigurationError,
)

NAMES = ["Alice", "Bob", "Chloe", "David", "Emma", "Farid", "Gina"]


def count_roles(players):
    counts = {role: 0 for role in Role}
    for player in players:
        counts[player.role] += 1
    return counts


@pytest.mark.parametrize("undercovers, mr_whites", [(1, 0), (2, 1), (0, 3), (3, 0)])
def test_role_counts(assignor, undercovers, mr_whites):
    """Test that exactly the configured number of each role is dealt."""
    config = RoundConfiguration(player_count=7, undercover_count=undercovers, mr_white_count=mr_whites)

    players = assignor.assign(NAMES, config)

    counts = count_roles(players)
    assert counts[Role.CIVILIAN] == config.civilian_count
    assert counts[Role.UNDERCOVER] == undercovers
    assert counts[Role.MR_WHITE] == mr_whites
    assert len(players) == 7


def test_players_keep_input_order(assignor):
    players = assignor.assign(NAMES, RoundConfiguration(player_count=7, undercover_count=2))
    assert [p.name for p in players] == NAMES
    assert all(not p.is_eliminated and not p.is_power_used for p in players)


def test_word_consistency(assignor):
    """Test that each faction shares one word and Mr. White has none."""
    for _ in range(20):
        players = assignor.assign(NAMES, RoundConfiguration(player_count=7, undercover_count=2, mr_white_count=1))

        civilian_words = {p.word for p in players if p.role == Role.CIVILIAN}
        undercover_words = {p.word for p in players if p.role == Role.UNDERCOVER}
        assert len(civilian_words) == 1
        assert len(undercover_words) == 1
        assert civilian_words != undercover_words
        assert all(p.word is None for p in players if p.role == Role.MR_WHITE)

        pair = assignor.last_word_pair
        assert civilian_words | undercover_words == {pair.word_a, pair.word_b}


def test_both_orientations_are_dealt(tmp_path):
    """Test that either word of the pair can be the Civilian word."""
    path = tmp_path / "one_pair.csv"
    path.write_text("Coffee,Tea\n", encoding="utf-8")
    assignor = RoleAssignor(WordBank(str(path)), HistoryTracker(), random.Random(7))

    civilian_words = set()
    for _ in range(40):
        players = assignor.assign(NAMES[:3], RoundConfiguration(player_count=3))
        civilian_words.add(next(p.word for p in players if p.role == Role.CIVILIAN))
    assert civilian_words == {"Coffee", "Tea"}


def test_pair_recorded_in_history_on_selection(assignor, history):
    assignor.assign(NAMES[:3], RoundConfiguration(player_count=3))

    pair = assignor.last_word_pair
    assert history.recent_words()[:2] == [pair.word_a, pair.word_b]
    assert history.store.load_history()[:2] == [pair.word_a, pair.word_b]


def test_history_avoidance(assignor, history):
    """Test that a pair containing a recent word is never picked while others remain."""
    for _ in range(10):
        history.clear()
        history.record("Coffee", "Lion")
        assignor.assign(NAMES[:3], RoundConfiguration(player_count=3))
        assert assignor.last_word_pair == WordPair("Café", "Bistro")


def test_rounds_cycle_through_bank(assignor):
    """Test that three rounds use the three available pairs before repeating."""
    seen = set()
    for _ in range(3):
        assignor.assign(NAMES[:3], RoundConfiguration(player_count=3))
        seen.add(assignor.last_word_pair)
    assert len(seen) == 3


def test_history_exhaustion_falls_back_to_full_bank(assignor, history):
    for word in ["Coffee", "Lion", "Café"]:
        history.record(word, word)

    assignor.assign(NAMES[:3], RoundConfiguration(player_count=3))

    assert assignor.last_word_pair in assignor.word_bank.load_pairs()


def test_powers_assigned_to_distinct_players(assignor):
    powers = frozenset({Power.JESTER, Power.BOOMERANG, Power.GHOST})
    players = assignor.assign(NAMES, RoundConfiguration(player_count=7, undercover_count=2, powers=powers))

    dealt = [p.power for p in players if p.power is not None]
    assert sorted(dealt, key=lambda p: p.value) == sorted(powers, key=lambda p: p.value)


def test_more_powers_than_players(word_bank):
    """Test that surplus powers are left unassigned."""
    assignor = RoleAssignor(word_bank, HistoryTracker(), random.Random(3))
    powers = frozenset({Power.JESTER, Power.BOOMERANG, Power.GHOST, Power.GODDESS_OF_JUSTICE})

    players = assignor.assign(NAMES[:3], RoundConfiguration(player_count=3, powers=powers))

    dealt = [p.power for p in players]
    assert None not in dealt
    assert len(set(dealt)) == 3
    assert set(dealt) < powers


def test_seeded_assignment_is_reproducible(word_bank):
    config = RoundConfiguration(player_count=7, undercover_count=2, mr_white_count=1,
                                powers=frozenset({Power.JESTER, Power.AVENGER}))
    first = RoleAssignor(word_bank, HistoryTracker(), random.Random(99)).assign(NAMES, config)
    second = RoleAssignor(word_bank, HistoryTracker(), random.Random(99)).assign(NAMES, config)
    assert first == second


def test_random_roles_stay_within_bounds(assignor):
    """Test random faction sizes: 1..n/2 bad roles, Mr. White only from 5 players."""
    for player_count in (3, 4, 5, 7):
        config = RoundConfiguration(player_count=player_count, undercover_count=1, random_roles=True)
        for _ in range(30):
            players = assignor.assign(NAMES[:player_count], config)
            counts = count_roles(players)
            bad = counts[Role.UNDERCOVER] + counts[Role.MR_WHITE]
            assert 1 <= bad <= player_count // 2
            if player_count < 5:
                assert counts[Role.MR_WHITE] == 0
            assert assignor.last_counts.civilians == counts[Role.CIVILIAN]


def test_random_roles_override_supplied_counts(word_bank):
    assignor = RoleAssignor(word_bank, HistoryTracker(), random.Random(5))
    config = RoundConfiguration(player_count=7, undercover_count=1, random_roles=True)

    seen = set()
    for _ in range(50):
        assignor.assign(NAMES, config)
        seen.add((assignor.last_counts.undercovers, assignor.last_counts.mr_whites))

    assert len(seen) > 1


def test_name_count_must_match(assignor):
    with pytest.raises(InvalidConfigurationError):
        assignor.assign(NAMES[:4], RoundConfiguration(player_count=5))


def test_too_many_bad_roles_is_caller_error(assignor):
    with pytest.raises(InvalidConfigurationError):
        assignor.assign(NAMES[:3], RoundConfiguration(player_count=3, undercover_count=3, mr_white_count=1))
