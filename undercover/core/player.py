"""
Player class representing a participant in one round.
"""

from dataclasses import dataclass
from typing import Optional

from .roles import Role, Power, Team


@dataclass
class Player:
    """A named player with the secret role, word and power dealt this round."""
    name: str
    role: Role
    word: Optional[str] = None  # None for Mr. White
    power: Optional[Power] = None
    is_eliminated: bool = False
    is_power_used: bool = False

    def __str__(self) -> str:
        return f"{self.name} ({self.role.display_name})"

    @property
    def is_active(self) -> bool:
        """Check if player is still in the round."""
        return not self.is_eliminated

    @property
    def team(self) -> Team:
        return self.role.team

    @property
    def is_civilian(self) -> bool:
        return self.role.team == Team.CIVILIANS

    @property
    def is_bad(self) -> bool:
        """Check if player is an Undercover or Mr. White."""
        return self.role.team == Team.BAD

    @property
    def is_mr_white(self) -> bool:
        return self.role == Role.MR_WHITE

    def has_unused_power(self, power: Power) -> bool:
        return self.power == power and not self.is_power_used

    def eliminate(self) -> None:
        """Mark player as eliminated."""
        self.is_eliminated = True

    def use_power(self) -> None:
        """Mark the player's power as consumed."""
        self.is_power_used = True
