"""
Exceptions raised by the game.
Everything derives from MastermindError so callers can catch one type.
"""


class MastermindError(Exception):
    pass


class ConfigurationError(MastermindError):
    """Bad settings, e.g. a round limit that is not a positive integer."""


class InvalidGuessError(MastermindError):
    """
    A guess that breaks the rules (length, palette, duplicates).
    The message is meant to be shown to the player as is.
    """


class GameFinishedError(MastermindError):
    """Raised when a guess is evaluated on a session that already ended."""
