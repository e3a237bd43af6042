"""
Role, power and winner definitions for the Undercover game.
"""

from enum import Enum


class Team(Enum):
    """Faction used for win checks and scoring."""
    CIVILIANS = "civilians"
    BAD = "bad"  # Undercovers and Mr. White


class Role(Enum):
    """Secret role dealt to a player for one round."""
    CIVILIAN = "civilian"
    UNDERCOVER = "undercover"
    MR_WHITE = "mr_white"

    @property
    def display_name(self) -> str:
        return {
            Role.CIVILIAN: "Civilian",
            Role.UNDERCOVER: "Undercover",
            Role.MR_WHITE: "Mr. White",
        }[self]

    @property
    def team(self) -> Team:
        return Team.CIVILIANS if self == Role.CIVILIAN else Team.BAD

    @property
    def has_word(self) -> bool:
        """Mr. White plays without a secret word."""
        return self != Role.MR_WHITE


class Power(Enum):
    """Optional special power, at most one per player per round."""
    JESTER = "jester"
    BOOMERANG = "boomerang"
    GODDESS_OF_JUSTICE = "goddess_of_justice"
    GHOST = "ghost"
    AVENGER = "avenger"

    @property
    def display_name(self) -> str:
        return _POWER_TEXT[self][0]

    @property
    def description(self) -> str:
        return _POWER_TEXT[self][1]

    @property
    def min_players(self) -> int:
        """Smallest table this power may be enabled for."""
        return 5 if self == Power.AVENGER else 0


_POWER_TEXT = {
    Power.JESTER: (
        "The Jester",
        "Earns 4 extra points if eliminated first.",
    ),
    Power.BOOMERANG: (
        "The Boomerang",
        "The first time the Boomerang receives the majority of votes, "
        "the votes bounce back and nobody is eliminated.",
    ),
    Power.GODDESS_OF_JUSTICE: (
        "Goddess of Justice",
        "Breaks tie votes, even after being eliminated.",
    ),
    Power.GHOST: (
        "The Ghost",
        "Can still vote after being eliminated.",
    ),
    Power.AVENGER: (
        "The Avenger",
        "When eliminated, takes one more player down with them "
        "(requires 5 players or more).",
    ),
}


class Winner(Enum):
    """Outcome of a win check."""
    CIVILIANS_WIN = "civilians_win"
    BAD_WIN = "bad_win"
    MR_WHITE_WINS = "mr_white_wins"
    NONE = "none"


def get_role_distribution(civilian_count: int, undercover_count: int, mr_white_count: int) -> list[Role]:
    """Unshuffled list of roles for one round."""
    return (
        [Role.CIVILIAN] * civilian_count
        + [Role.UNDERCOVER] * undercover_count
        + [Role.MR_WHITE] * mr_white_count
    )
