"""
Role, word and power assignment at the start of each round.
"""

import logging
import random
from dataclasses import dataclass
from typing import List, Optional, Sequence

from .exceptions import InvalidConfigurationError
from .history import HistoryTracker
from .player import Player
from .roles import Role, get_role_distribution
from .round_config import RoundConfiguration
from .words import WordBank, WordPair

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RoleCounts:
    """Faction sizes actually dealt for one round."""
    civilians: int
    undercovers: int
    mr_whites: int


class RoleAssignor:
    """Deals roles, words and powers to a list of player names."""

    def __init__(self, word_bank: WordBank, history: HistoryTracker, rng: Optional[random.Random] = None):
        self.word_bank = word_bank
        self.history = history
        self.rng = rng or random.Random()
        self.last_word_pair: Optional[WordPair] = None
        self.last_counts: Optional[RoleCounts] = None

    def select_word_pair(self) -> WordPair:
        """
        Pick a pair with no recently used word and record it in the history.

        When every pair has a recent word the whole bank is eligible again.
        The pair is recorded as soon as it is picked, even if the round is
        later abandoned.
        """
        pairs = sorted(self.word_bank.load_pairs(), key=lambda p: (p.word_a, p.word_b))
        recent = set(self.history.recent_words())
        fresh = [p for p in pairs if p.word_a not in recent and p.word_b not in recent]
        if not fresh:
            logger.debug("Word history exhausted all %d pairs, reusing full bank", len(pairs))
            fresh = pairs

        pair = self.rng.choice(fresh)
        self.history.record(pair.word_a, pair.word_b)
        self.history.save()
        return pair

    def resolve_counts(self, config: RoundConfiguration) -> RoleCounts:
        """Faction sizes for this round, drawn at random when random_roles is set."""
        player_count = config.player_count
        if not config.random_roles:
            undercovers, mr_whites = config.undercover_count, config.mr_white_count
        else:
            max_bad = player_count // 2
            if max_bad == 0:
                undercovers, mr_whites = 0, 0
            else:
                total_bad = self.rng.randint(1, max_bad)
                mr_whites = self.rng.randint(0, total_bad) if player_count >= 5 else 0
                undercovers = total_bad - mr_whites

        civilians = player_count - undercovers - mr_whites
        if civilians < 0:
            raise InvalidConfigurationError(
                f"{undercovers} Undercover and {mr_whites} Mr. White do not fit in {player_count} players"
            )
        return RoleCounts(civilians=civilians, undercovers=undercovers, mr_whites=mr_whites)

    def assign(self, names: Sequence[str], config: RoundConfiguration) -> List[Player]:
        """
        Deal a new round.

        Args:
            names: Player names, in seating order
            config: Round settings (validated by the caller)

        Returns:
            One fresh Player per name, in the same order
        """
        if len(names) != config.player_count:
            raise InvalidConfigurationError(
                f"Expected {config.player_count} player names, got {len(names)}"
            )

        pair = self.select_word_pair()
        counts = self.resolve_counts(config)

        roles = get_role_distribution(counts.civilians, counts.undercovers, counts.mr_whites)
        self.rng.shuffle(roles)

        if self.rng.random() < 0.5:
            civilian_word, undercover_word = pair.word_a, pair.word_b
        else:
            civilian_word, undercover_word = pair.word_b, pair.word_a

        # Sorted first so a seeded rng deals the same powers regardless of set order
        powers_to_assign = sorted(config.powers, key=lambda p: p.value)
        self.rng.shuffle(powers_to_assign)
        player_indices = list(range(len(names)))
        self.rng.shuffle(player_indices)
        player_powers = dict(zip(player_indices, powers_to_assign))

        words = {
            Role.CIVILIAN: civilian_word,
            Role.UNDERCOVER: undercover_word,
            Role.MR_WHITE: None,
        }
        players = [
            Player(name=name, role=roles[index], word=words[roles[index]], power=player_powers.get(index))
            for index, name in enumerate(names)
        ]

        self.last_word_pair = pair
        self.last_counts = counts
        logger.debug(
            "Dealt %d civilians, %d undercovers, %d Mr. White with powers %s",
            counts.civilians, counts.undercovers, counts.mr_whites,
            {index: power.value for index, power in player_powers.items()},
        )
        return players
