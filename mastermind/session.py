"""
Game session
Holds the state of one game: secret, round counter and won/over flags.
No I/O happens here.
"""

import logging
import random
from dataclasses import dataclass, field
from typing import Optional, Tuple

from .engine import generate_secret, is_win, score_guess
from .errors import ConfigurationError, GameFinishedError, InvalidGuessError
from .schemas import parse_guess
from .types import DEFAULT_MAX_ROUNDS, Code, Feedback, GameStatus

logger = logging.getLogger(__name__)

WON_MESSAGE = "YOU WON!!"
GAME_OVER_MESSAGE = "GAME OVER: You exceeded the allowed attempts."


def try_again_message(remaining: int) -> str:
    return f"Try again! {remaining} attempts remaining."


def validate_max_rounds(max_rounds: object) -> int:
    # bool is an int subclass, reject it explicitly
    if isinstance(max_rounds, bool) or not isinstance(max_rounds, int):
        raise ConfigurationError(f"max_rounds must be an integer, got {max_rounds!r}.")
    if max_rounds <= 0:
        raise ConfigurationError(f"max_rounds must be positive, got {max_rounds}.")
    return max_rounds


@dataclass
class GameSession:
    secret: Code = field(repr=False)
    max_rounds: int = DEFAULT_MAX_ROUNDS
    # Every game starts from round 0 with both flags down
    round_counter: int = field(default=0, init=False)
    won: bool = field(default=False, init=False)
    over: bool = field(default=False, init=False)

    def __post_init__(self) -> None:
        self.max_rounds = validate_max_rounds(self.max_rounds)
        # An explicit secret follows the same rules as a guess
        try:
            self.secret = parse_guess(self.secret)
        except InvalidGuessError as err:
            raise ConfigurationError(f"Invalid secret code: {err}") from err

    @classmethod
    def new(cls, max_rounds: int = DEFAULT_MAX_ROUNDS, rng: Optional[random.Random] = None) -> "GameSession":
        """Start a fresh game with a random secret."""
        validate_max_rounds(max_rounds)
        session = cls(secret=generate_secret(rng), max_rounds=max_rounds)
        logger.debug("New session: max_rounds=%d secret=%s", max_rounds, session.reveal_secret())
        return session

    @property
    def status(self) -> GameStatus:
        if self.won:
            return "won"
        if self.over:
            return "lost"
        return "in_progress"

    @property
    def is_finished(self) -> bool:
        return self.won or self.over

    @property
    def attempts_left(self) -> int:
        return self.max_rounds - self.round_counter

    def reveal_secret(self) -> str:
        return "".join(self.secret)

    def evaluate(self, guess: Code) -> Tuple[Feedback, str]:
        """
        Score one well-formed guess and advance the game.
        Returns (feedback, status message). Win takes precedence over game over
        when the last allowed round is also the winning one.
        """
        if self.is_finished:
            raise GameFinishedError(f"Game already {self.status}. No more guesses allowed.")

        feedback = score_guess(self.secret, guess)
        self.round_counter += 1

        if is_win(feedback):
            self.won = True
        if self.round_counter >= self.max_rounds:
            self.over = True

        if self.won:
            message = WON_MESSAGE
        elif self.over:
            message = GAME_OVER_MESSAGE
        else:
            message = try_again_message(self.attempts_left)

        logger.info(
            "Round %d/%d: guess=%s status=%s",
            self.round_counter,
            self.max_rounds,
            "".join(guess),
            self.status,
        )
        return feedback, message
