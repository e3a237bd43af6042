"""
Core engine components: roles, players, word selection, round flow and scoring.
"""

from .exceptions import (
    UndercoverError, InvalidConfigurationError, InvalidTransitionError,
    InvalidTargetError, ScoringError,
)
from .roles import Role, Power, Team, Winner, get_role_distribution
from .player import Player
from .round_config import RoundConfiguration, MIN_PLAYERS
from .words import WordBank, WordPair, DEFAULT_WORD_PAIR, read_word_pairs_dataset
from .history import HistoryTracker, HistoryStore, MAX_HISTORY
from .assignor import RoleAssignor, RoleCounts
from .round_engine import (
    RoundPhase, RoundState, Reveal, Speaking, Voting, PlayerEliminated,
    BoomerangEffect, AvengerRevenge, MrWhiteGuess, MrWhiteFailed, RoundOver,
    Scoreboard, check_winner, compute_speaking_order, normalize_guess,
    is_correct_guess,
)
from .scoring import ScoreLedger, apply_round_result
from .session import GameSession

__all__ = [
    'UndercoverError',
    'InvalidConfigurationError',
    'InvalidTransitionError',
    'InvalidTargetError',
    'ScoringError',
    'Role',
    'Power',
    'Team',
    'Winner',
    'get_role_distribution',
    'Player',
    'RoundConfiguration',
    'MIN_PLAYERS',
    'WordBank',
    'WordPair',
    'DEFAULT_WORD_PAIR',
    'read_word_pairs_dataset',
    'HistoryTracker',
    'HistoryStore',
    'MAX_HISTORY',
    'RoleAssignor',
    'RoleCounts',
    'RoundPhase',
    'RoundState',
    'Reveal',
    'Speaking',
    'Voting',
    'PlayerEliminated',
    'BoomerangEffect',
    'AvengerRevenge',
    'MrWhiteGuess',
    'MrWhiteFailed',
    'RoundOver',
    'Scoreboard',
    'check_winner',
    'compute_speaking_order',
    'normalize_guess',
    'is_correct_guess',
    'ScoreLedger',
    'apply_round_result',
    'GameSession',
]
