"""
Engine configuration and constants.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class GameConfig:
    """Configuration for engine parameters."""

    # Resources
    word_pairs_path: Optional[str] = None  # None uses the bundled dataset
    history_path: Optional[str] = None  # None keeps history in memory only
    max_history: int = 100  # Word pairs remembered (2 words each)

    # Scoring
    jester_bonus: int = 4
    civilian_win_points: int = 2
    bad_win_points: int = 10
    mr_white_win_points: int = 6

    # Session settings
    random_seed: Optional[int] = None  # Random seed for reproducible rounds
    log_level: str = "INFO"

    # Host announcements
    use_announcements: bool = True


# Default configuration instance
default_config = GameConfig()
