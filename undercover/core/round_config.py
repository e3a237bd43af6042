"""
Per-session round settings and their validation.
"""

from dataclasses import dataclass, field
from typing import FrozenSet

from .exceptions import InvalidConfigurationError
from .roles import Power

MIN_PLAYERS = 3


@dataclass(frozen=True)
class RoundConfiguration:
    """How many players, how many bad roles and which powers a round uses."""
    player_count: int
    undercover_count: int = 1
    mr_white_count: int = 0
    powers: FrozenSet[Power] = field(default_factory=frozenset)
    random_roles: bool = False

    @property
    def civilian_count(self) -> int:
        return self.player_count - self.undercover_count - self.mr_white_count

    @property
    def bad_count(self) -> int:
        return self.undercover_count + self.mr_white_count

    @property
    def max_bad_count(self) -> int:
        return self.player_count // 2

    def validate(self) -> None:
        """
        Reject configurations the engine cannot run.

        Raises:
            InvalidConfigurationError: with a message naming the broken rule
        """
        if self.player_count < MIN_PLAYERS:
            raise InvalidConfigurationError(
                f"At least {MIN_PLAYERS} players are required, got {self.player_count}"
            )
        if self.undercover_count < 0 or self.mr_white_count < 0:
            raise InvalidConfigurationError("Role counts cannot be negative")
        if not 1 <= self.bad_count <= self.max_bad_count:
            raise InvalidConfigurationError(
                f"Undercover + Mr. White must be between 1 and {self.max_bad_count} "
                f"for {self.player_count} players, got {self.bad_count}"
            )
        for power in self.powers:
            if self.player_count < power.min_players:
                raise InvalidConfigurationError(
                    f"{power.display_name} requires at least {power.min_players} players"
                )
