"""
Cross-round score keeping.
"""

import logging
from typing import Dict, Iterable, List, Mapping, Optional, Tuple

from .exceptions import ScoringError
from .player import Player
from .roles import Power, Role, Winner
from ..config.game_config import GameConfig, default_config

logger = logging.getLogger(__name__)


def apply_round_result(ledger: Mapping[str, int], winner: Winner, players: List[Player],
                       first_eliminated: Optional[Player],
                       config: GameConfig = default_config,
                       guesser: Optional[str] = None) -> Dict[str, int]:
    """
    Add one round's points to the running totals.

    Args:
        ledger: Points per player name before the round (not modified)
        winner: Round outcome; must not be Winner.NONE
        players: Players as dealt for the round
        first_eliminated: First player voted out, if any
        config: Point values
        guesser: Name of the Mr. White whose guess won the round

    Returns:
        New ledger with the round's points added

    Raises:
        ScoringError: If the round has no winner yet
    """
    if winner == Winner.NONE:
        raise ScoringError("Cannot score a round that has no winner")

    scores = dict(ledger)

    def award(name: str, points: int) -> None:
        scores[name] = scores.get(name, 0) + points

    if first_eliminated is not None and first_eliminated.power == Power.JESTER:
        award(first_eliminated.name, config.jester_bonus)

    if winner == Winner.CIVILIANS_WIN:
        for player in players:
            if player.is_civilian:
                award(player.name, config.civilian_win_points)
    elif winner == Winner.BAD_WIN:
        for player in players:
            if player.is_bad:
                award(player.name, config.bad_win_points)
    elif winner == Winner.MR_WHITE_WINS:
        mr_white = next((p for p in players if p.role == Role.MR_WHITE
                         and (guesser is None or p.name == guesser)), None)
        if mr_white is not None:
            award(mr_white.name, config.mr_white_win_points)

    return scores


class ScoreLedger:
    """Points per player name for one session."""

    def __init__(self, scores: Optional[Mapping[str, int]] = None):
        self._scores: Dict[str, int] = dict(scores or {})

    def __len__(self) -> int:
        return len(self._scores)

    def get(self, name: str) -> int:
        return self._scores.get(name, 0)

    def register(self, names: Iterable[str]) -> None:
        """Make sure every player shows up on the scoreboard, starting at 0."""
        for name in names:
            self._scores.setdefault(name, 0)

    def apply_round_result(self, winner: Winner, players: List[Player],
                           first_eliminated: Optional[Player],
                           config: GameConfig = default_config,
                           guesser: Optional[str] = None) -> Dict[str, int]:
        """Score a finished round and return the new totals."""
        self._scores = apply_round_result(self._scores, winner, players, first_eliminated,
                                          config, guesser)
        logger.info("Round scored (%s): %s", winner.value, self._scores)
        return dict(self._scores)

    def standings(self) -> List[Tuple[str, int]]:
        """(name, points) pairs, best score first."""
        return sorted(self._scores.items(), key=lambda item: item[1], reverse=True)

    def reset(self) -> None:
        self._scores = {}

    def as_dict(self) -> Dict[str, int]:
        return dict(self._scores)
