"""
Undercover: role dealing, round flow and scoring for a pass-the-device party game.
"""

from .core import GameSession, RoundConfiguration, Power
from .config import GameConfig, load_config

__all__ = ['GameSession', 'RoundConfiguration', 'Power', 'GameConfig', 'load_config']
