"""
Exceptions raised by the round engine.
"""


class UndercoverError(Exception):
    """Base class for all engine errors."""
    pass


class InvalidConfigurationError(UndercoverError):
    """Round settings that cannot be played (checked before a round starts)."""
    pass


class InvalidTransitionError(UndercoverError):
    """Raised when an action is not allowed in the current round phase."""

    def __init__(self, phase: str, action: str, message: str = ""):
        self.phase = phase
        self.action = action
        self.message = message or f"Cannot {action} during {phase}"
        super().__init__(self.message)


class InvalidTargetError(UndercoverError):
    """Raised when an action names a player that cannot be targeted."""

    def __init__(self, name: str, reason: str):
        self.name = name
        self.reason = reason
        super().__init__(f"Invalid target '{name}': {reason}")


class ScoringError(UndercoverError):
    """Raised when a round result cannot be scored."""
    pass
