"""
Console Mastermind: guess the hidden 4-color code.
"""

from .errors import ConfigurationError, GameFinishedError, InvalidGuessError, MastermindError
from .input_loop import InputLoop
from .session import GameSession

__all__ = [
    "ConfigurationError",
    "GameFinishedError",
    "GameSession",
    "InputLoop",
    "InvalidGuessError",
    "MastermindError",
]
