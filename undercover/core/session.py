"""
Session controller driving rounds for the presentation layer.
"""

import logging
import random
from typing import Dict, List, Optional, Sequence

from . import round_engine as engine
from .assignor import RoleAssignor
from .exceptions import InvalidConfigurationError, InvalidTransitionError
from .history import HistoryTracker
from .player import Player
from .roles import Winner
from .round_engine import (
    RoundState, Reveal, Speaking, BoomerangEffect,
    AvengerRevenge, MrWhiteGuess, RoundOver, Scoreboard,
)
from .scoring import ScoreLedger
from .words import WordBank
from .round_config import RoundConfiguration
from ..config.game_config import GameConfig, default_config
from ..storage import FileHistoryStore, InMemoryHistoryStore

logger = logging.getLogger(__name__)

_WINNER_ANNOUNCEMENTS = {
    Winner.CIVILIANS_WIN: "The Civilians win!",
    Winner.BAD_WIN: "The Undercovers win!",
    Winner.MR_WHITE_WINS: "Mr. White wins!",
}


class GameSession:
    """
    One table of players sharing a score ledger across rounds.

    Every action returns the new round state. Calling an action that the
    current state does not accept raises InvalidTransitionError.
    """

    def __init__(self, config: GameConfig = default_config,
                 word_bank: Optional[WordBank] = None,
                 history: Optional[HistoryTracker] = None,
                 rng: Optional[random.Random] = None):
        self.config = config
        logging.getLogger("undercover").setLevel(str(config.log_level).upper())

        if rng is None:
            rng = random.Random(config.random_seed) if config.random_seed is not None else random.Random()
        self.rng = rng

        self.word_bank = word_bank or WordBank(config.word_pairs_path)
        if history is None:
            store = FileHistoryStore(config.history_path) if config.history_path else InMemoryHistoryStore()
            history = HistoryTracker(store, max_history=config.max_history)
            history.load()
        self.history = history
        self.assignor = RoleAssignor(self.word_bank, self.history, self.rng)

        self.ledger = ScoreLedger()
        self.announcements: List[str] = []
        self.state: Optional[RoundState] = None
        self.round_number = 0
        self._names: List[str] = []
        self._round_config: Optional[RoundConfiguration] = None

    # --- Read access ---

    @property
    def scores(self) -> Dict[str, int]:
        return self.ledger.as_dict()

    @property
    def players(self) -> List[Player]:
        if self.state is None or isinstance(self.state, Scoreboard):
            return []
        return list(self.state.players)

    @property
    def civilian_word(self) -> Optional[str]:
        players = self.players
        if not players:
            return None
        return engine.civilian_word(players)

    def announce(self, message: str) -> None:
        """Make a host announcement."""
        if self.config.use_announcements:
            self.announcements.append(message)
            print(f"[HOST] {message}")

    # --- Session lifecycle ---

    def start_session(self, names: Sequence[str], round_config: RoundConfiguration) -> RoundState:
        """
        Validate the settings, reset the scores and deal the first round.

        A rejected start leaves the running session untouched.

        Raises:
            InvalidConfigurationError: If the settings cannot be played
        """
        round_config.validate()
        names = list(names)
        if len(names) != round_config.player_count:
            raise InvalidConfigurationError(
                f"Expected {round_config.player_count} player names, got {len(names)}")
        players = self.assignor.assign(names, round_config)

        self._names = names
        self._round_config = round_config
        self.ledger.reset()
        self.ledger.register(names)
        self.round_number = 0
        logger.info("Session started with %d players", len(names))
        return self._begin_round(players)

    def next_round(self) -> RoundState:
        """Deal a new round to the same table, keeping the scores."""
        self._require(Scoreboard, "start the next round")
        return self._begin_round(self.assignor.assign(self._names, self._round_config))

    def quit_session(self) -> None:
        """Forget the table and its scores."""
        logger.info("Session ended after %d rounds", self.round_number)
        self.ledger.reset()
        self.state = None
        self.round_number = 0
        self._names = []
        self._round_config = None

    def _begin_round(self, players: List[Player]) -> RoundState:
        self.round_number += 1
        self.state = engine.start_round(players)
        self.announce(f"Round {self.round_number}. Pass the device to {players[0].name}.")
        return self.state

    # --- Round actions ---

    def reveal_card(self) -> RoundState:
        self.state = engine.reveal_card(self._current())
        return self.state

    def advance_reveal(self) -> RoundState:
        """
        Step through the reveal: show the current card, then hand over.

        The first call on a hidden card reveals it; the next call moves on
        to the following player (or to the discussion after the last one).
        """
        state = self._require(Reveal, "advance the reveal")
        if not state.is_revealed:
            self.state = engine.reveal_card(state)
            return self.state

        self.state = engine.advance_reveal(state, self.rng)
        if isinstance(self.state, Speaking):
            self._announce_speaking_order(self.state)
        else:
            self.announce(f"Pass the device to {self.state.current_player.name}.")
        return self.state

    def proceed_to_vote(self) -> RoundState:
        self.state = engine.start_voting(self._current())
        self.announce("It is voting time.")
        return self.state

    def confirm_vote(self, name: str) -> RoundState:
        self.state = engine.vote(self._current(), name)
        if isinstance(self.state, BoomerangEffect):
            self.announce(f"Boomerang! The votes against {name} bounce back.")
        else:
            self.announce(f"{name} has been eliminated. Their role was {self.state.eliminated.role.display_name}.")
        return self.state

    def choose_avenger_victim(self, name: str) -> RoundState:
        state = self._require(AvengerRevenge, "choose an Avenger victim")
        self.state = engine.choose_avenger_victim(state, name)
        self.announce(f"{state.avenger.name} takes revenge on {name}.")
        return self.state

    def submit_guess(self, text: str) -> bool:
        """
        Record Mr. White's guess.

        Returns:
            True if the guess matched the Civilian word
        """
        state = self._require(MrWhiteGuess, "submit a guess")
        self.state = engine.submit_guess(state, text)
        correct = isinstance(self.state, RoundOver) and self.state.winner == Winner.MR_WHITE_WINS
        if correct:
            self.announce(f"{state.mr_white.name} found the word!")
        else:
            self.announce(f"Wrong guess, {state.mr_white.name}.")
        self._announce_outcome()
        return correct

    def acknowledge_and_continue(self) -> RoundState:
        """Move past the current informational screen."""
        state = self._current()
        if isinstance(state, RoundOver):
            self.state = engine.finish_round(state, self.ledger, self.config)
            return self.state

        self.state = engine.acknowledge(state, self.rng)
        if isinstance(self.state, AvengerRevenge):
            self.announce(f"{self.state.avenger.name} is the Avenger and chooses someone to take along.")
        elif isinstance(self.state, MrWhiteGuess):
            self.announce(f"{self.state.mr_white.name} was Mr. White and may guess the Civilian word.")
        elif isinstance(self.state, Speaking):
            self._announce_speaking_order(self.state)
        self._announce_outcome()
        return self.state

    # --- Helpers ---

    def _current(self) -> RoundState:
        if self.state is None:
            raise InvalidTransitionError("setup", "play", "No session in progress")
        return self.state

    def _require(self, expected: type, action: str):
        state = self._current()
        if not isinstance(state, expected):
            raise InvalidTransitionError(state.phase.value, action)
        return state

    def _announce_speaking_order(self, state: Speaking) -> None:
        order = [p.name for p in state.speaking_order]
        self.announce(f"Speaking order: {order}")

    def _announce_outcome(self) -> None:
        if isinstance(self.state, RoundOver):
            self.announce(_WINNER_ANNOUNCEMENTS[self.state.winner])
