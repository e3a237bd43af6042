"""
Round state machine: reveal, discussion, elimination, powers and win checks.

Every transition is a plain function taking the current state (and the
caller's action) and returning the next state. Player lists are copied
before being changed, so earlier states are never modified.
"""

import random
import unicodedata
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Dict, List, Optional, Union, TYPE_CHECKING

from .exceptions import InvalidTransitionError, InvalidTargetError, UndercoverError
from .player import Player
from .roles import Power, Winner
from ..config.game_config import GameConfig, default_config

if TYPE_CHECKING:
    from .scoring import ScoreLedger


class RoundPhase(Enum):
    """Current round phase."""
    REVEAL = "reveal"
    SPEAKING = "speaking"
    VOTING = "voting"
    PLAYER_ELIMINATED = "player_eliminated"
    BOOMERANG_EFFECT = "boomerang_effect"
    AVENGER_REVENGE = "avenger_revenge"
    MR_WHITE_GUESS = "mr_white_guess"
    MR_WHITE_FAILED = "mr_white_failed"
    ROUND_OVER = "round_over"
    SCOREBOARD = "scoreboard"


class _PlayersView:
    """Read helpers shared by every in-round state."""
    players: List[Player]
    first_eliminated: Optional[str]

    @property
    def active_players(self) -> List[Player]:
        return [p for p in self.players if p.is_active]

    @property
    def eliminated_players(self) -> List[Player]:
        return [p for p in self.players if p.is_eliminated]

    @property
    def first_eliminated_player(self) -> Optional[Player]:
        if self.first_eliminated is None:
            return None
        return get_player(self.players, self.first_eliminated)


@dataclass(frozen=True)
class Reveal(_PlayersView):
    """Players look at their secret card one after the other."""
    players: List[Player]
    index: int = 0
    is_revealed: bool = False
    first_eliminated: Optional[str] = None
    phase = RoundPhase.REVEAL

    @property
    def current_player(self) -> Player:
        return self.players[self.index]

    @property
    def is_last_player(self) -> bool:
        return self.index == len(self.players) - 1


@dataclass(frozen=True)
class Speaking(_PlayersView):
    players: List[Player]
    speaking_order: List[Player]
    first_eliminated: Optional[str] = None
    phase = RoundPhase.SPEAKING


@dataclass(frozen=True)
class Voting(_PlayersView):
    players: List[Player]
    first_eliminated: Optional[str] = None
    phase = RoundPhase.VOTING


@dataclass(frozen=True)
class PlayerEliminated(_PlayersView):
    players: List[Player]
    eliminated: Player
    is_first_elimination: bool
    first_eliminated: Optional[str] = None
    phase = RoundPhase.PLAYER_ELIMINATED


@dataclass(frozen=True)
class BoomerangEffect(_PlayersView):
    players: List[Player]
    boomerang_player: Player
    first_eliminated: Optional[str] = None
    phase = RoundPhase.BOOMERANG_EFFECT


@dataclass(frozen=True)
class AvengerRevenge(_PlayersView):
    players: List[Player]
    avenger: Player
    first_eliminated: Optional[str] = None
    phase = RoundPhase.AVENGER_REVENGE

    @property
    def eligible_victims(self) -> List[Player]:
        return [p for p in self.players if p.is_active and p.name != self.avenger.name]


@dataclass(frozen=True)
class MrWhiteGuess(_PlayersView):
    players: List[Player]
    mr_white: Player
    first_eliminated: Optional[str] = None
    phase = RoundPhase.MR_WHITE_GUESS


@dataclass(frozen=True)
class MrWhiteFailed(_PlayersView):
    players: List[Player]
    first_eliminated: Optional[str] = None
    phase = RoundPhase.MR_WHITE_FAILED


@dataclass(frozen=True)
class RoundOver(_PlayersView):
    winner: Winner
    players: List[Player]
    first_eliminated: Optional[str] = None
    guesser: Optional[str] = None  # Mr. White who guessed the word
    phase = RoundPhase.ROUND_OVER


@dataclass(frozen=True)
class Scoreboard:
    scores: Dict[str, int] = field(default_factory=dict)
    phase = RoundPhase.SCOREBOARD

    def standings(self) -> List[tuple]:
        """(name, points) pairs, best score first."""
        return sorted(self.scores.items(), key=lambda item: item[1], reverse=True)


RoundState = Union[
    Reveal, Speaking, Voting, PlayerEliminated, BoomerangEffect,
    AvengerRevenge, MrWhiteGuess, MrWhiteFailed, RoundOver, Scoreboard,
]


# --- Queries ---

def get_player(players: List[Player], name: str) -> Optional[Player]:
    """Get player by name."""
    for player in players:
        if player.name == name:
            return player
    return None


def check_winner(players: List[Player]) -> Winner:
    """
    Check the win rule over active players.

    Civilians win once no Undercover or Mr. White is left; the bad
    faction wins when at most one Civilian remains.
    """
    active = [p for p in players if p.is_active]
    civilians = sum(1 for p in active if p.is_civilian)
    bad = sum(1 for p in active if p.is_bad)

    if bad == 0:
        return Winner.CIVILIANS_WIN
    if civilians <= 1:
        return Winner.BAD_WIN
    return Winner.NONE


def compute_speaking_order(players: List[Player], rng: random.Random) -> List[Player]:
    """
    Active players in seating order, starting from a random player.

    The starter is never Mr. White unless only Mr. Whites are left.
    """
    active = [p for p in players if p.is_active]
    if not active:
        return []

    starters = [p for p in active if not p.is_mr_white] or active
    starter = rng.choice(starters)
    start = next(i for i, p in enumerate(players) if p is starter)
    rotated = players[start:] + players[:start]
    return [p for p in rotated if p.is_active]


def normalize_guess(text: str) -> str:
    """Strip accents and case so 'Café' and 'cafe' compare equal."""
    decomposed = unicodedata.normalize("NFD", text.strip())
    stripped = "".join(c for c in decomposed if not unicodedata.combining(c))
    return stripped.casefold()


def is_correct_guess(guess: str, word: str) -> bool:
    return normalize_guess(guess) == normalize_guess(word)


def civilian_word(players: List[Player]) -> str:
    """The word shared by every Civilian of the round."""
    for player in players:
        if player.is_civilian and player.word is not None:
            return player.word
    raise UndercoverError("Round has no Civilian word")


# --- Internal helpers ---

def _copy_players(players: List[Player]) -> List[Player]:
    return [replace(p) for p in players]


def _require(state: RoundState, expected: type, action: str) -> None:
    if not isinstance(state, expected):
        raise InvalidTransitionError(state.phase.value, action)


def _active_target(players: List[Player], name: str) -> Player:
    player = get_player(players, name)
    if player is None:
        raise InvalidTargetError(name, "no such player")
    if not player.is_active:
        raise InvalidTargetError(name, "player is already eliminated")
    return player


def _continue_or_end(players: List[Player], first_eliminated: Optional[str],
                     rng: random.Random) -> RoundState:
    winner = check_winner(players)
    if winner != Winner.NONE:
        return RoundOver(winner=winner, players=players, first_eliminated=first_eliminated)
    return Speaking(players=players, speaking_order=compute_speaking_order(players, rng),
                    first_eliminated=first_eliminated)


# --- Transitions ---

def start_round(players: List[Player]) -> Reveal:
    """Initial state of a freshly dealt round."""
    if not players:
        raise UndercoverError("Cannot start a round without players")
    return Reveal(players=_copy_players(players))


def reveal_card(state: RoundState) -> Reveal:
    """The current player confirms and sees their card."""
    _require(state, Reveal, "reveal a card")
    if state.is_revealed:
        raise InvalidTransitionError(state.phase.value, "reveal a card", "Card is already revealed")
    return replace(state, is_revealed=True)


def advance_reveal(state: RoundState, rng: random.Random) -> Union[Reveal, Speaking]:
    """Hand the device to the next player, or open the discussion after the last one."""
    _require(state, Reveal, "advance the reveal")
    if not state.is_revealed:
        raise InvalidTransitionError(state.phase.value, "advance the reveal",
                                     "Current card has not been revealed yet")
    if state.is_last_player:
        return Speaking(players=state.players,
                        speaking_order=compute_speaking_order(state.players, rng),
                        first_eliminated=state.first_eliminated)
    return replace(state, index=state.index + 1, is_revealed=False)


def start_voting(state: RoundState) -> Voting:
    _require(state, Speaking, "start voting")
    return Voting(players=state.players, first_eliminated=state.first_eliminated)


def vote(state: RoundState, name: str) -> Union[BoomerangEffect, PlayerEliminated]:
    """
    Apply the majority vote against one active player.

    An unused Boomerang deflects the vote and is consumed. Otherwise the
    target is eliminated; the first such elimination of the round is
    remembered for the Jester bonus.
    """
    _require(state, Voting, "vote")
    _active_target(state.players, name)

    players = _copy_players(state.players)
    target = get_player(players, name)

    if target.has_unused_power(Power.BOOMERANG):
        target.use_power()
        return BoomerangEffect(players=players, boomerang_player=target,
                               first_eliminated=state.first_eliminated)

    is_first = not any(p.is_eliminated for p in players)
    target.eliminate()
    first_eliminated = target.name if is_first else state.first_eliminated
    return PlayerEliminated(players=players, eliminated=target,
                            is_first_elimination=is_first, first_eliminated=first_eliminated)


def resolve_elimination(state: RoundState, rng: random.Random) -> RoundState:
    """Consequences of an elimination: Avenger, Mr. White guess, win check."""
    _require(state, PlayerEliminated, "resolve an elimination")
    eliminated = get_player(state.players, state.eliminated.name)
    others_active = [p for p in state.players if p.is_active and p.name != eliminated.name]

    if eliminated.has_unused_power(Power.AVENGER) and others_active:
        players = _copy_players(state.players)
        avenger = get_player(players, eliminated.name)
        avenger.use_power()
        return AvengerRevenge(players=players, avenger=avenger,
                              first_eliminated=state.first_eliminated)

    if eliminated.is_mr_white:
        return MrWhiteGuess(players=state.players, mr_white=eliminated,
                            first_eliminated=state.first_eliminated)

    return _continue_or_end(state.players, state.first_eliminated, rng)


def choose_avenger_victim(state: RoundState, name: str) -> PlayerEliminated:
    """
    Eliminate the player picked by the Avenger.

    This is not a vote: a Boomerang does not deflect it and it never
    counts as the round's first elimination.
    """
    _require(state, AvengerRevenge, "choose an Avenger victim")
    if name == state.avenger.name:
        raise InvalidTargetError(name, "the Avenger cannot choose themselves")
    _active_target(state.players, name)

    players = _copy_players(state.players)
    victim = get_player(players, name)
    victim.eliminate()
    return PlayerEliminated(players=players, eliminated=victim,
                            is_first_elimination=False, first_eliminated=state.first_eliminated)


def resolve_boomerang(state: RoundState, rng: random.Random) -> Speaking:
    _require(state, BoomerangEffect, "resolve a Boomerang")
    return Speaking(players=state.players,
                    speaking_order=compute_speaking_order(state.players, rng),
                    first_eliminated=state.first_eliminated)


def submit_guess(state: RoundState, guess: str) -> Union[RoundOver, MrWhiteFailed]:
    """
    Check Mr. White's guess of the Civilian word.

    A correct guess wins the round outright. A wrong one still ends the
    round if the elimination already decided it.
    """
    _require(state, MrWhiteGuess, "submit a guess")
    if is_correct_guess(guess, civilian_word(state.players)):
        return RoundOver(winner=Winner.MR_WHITE_WINS, players=state.players,
                         first_eliminated=state.first_eliminated,
                         guesser=state.mr_white.name)

    winner = check_winner(state.players)
    if winner != Winner.NONE:
        return RoundOver(winner=winner, players=state.players,
                         first_eliminated=state.first_eliminated)
    return MrWhiteFailed(players=state.players, first_eliminated=state.first_eliminated)


def resolve_failed_guess(state: RoundState, rng: random.Random) -> Speaking:
    _require(state, MrWhiteFailed, "continue after a failed guess")
    return Speaking(players=state.players,
                    speaking_order=compute_speaking_order(state.players, rng),
                    first_eliminated=state.first_eliminated)


def acknowledge(state: RoundState, rng: random.Random) -> RoundState:
    """Move past an informational beat."""
    if isinstance(state, PlayerEliminated):
        return resolve_elimination(state, rng)
    if isinstance(state, BoomerangEffect):
        return resolve_boomerang(state, rng)
    if isinstance(state, MrWhiteFailed):
        return resolve_failed_guess(state, rng)
    raise InvalidTransitionError(state.phase.value, "continue")


def finish_round(state: RoundState, ledger: 'ScoreLedger',
                 config: GameConfig = default_config) -> Scoreboard:
    """Score the finished round into the session ledger."""
    _require(state, RoundOver, "show the scoreboard")
    scores = ledger.apply_round_result(state.winner, state.players,
                                       state.first_eliminated_player, config,
                                       guesser=state.guesser)
    return Scoreboard(scores=scores)
