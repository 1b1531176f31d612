"""
Console driver
Prompts for guesses, validates them, hands them to the GameSession and prints
the result. All reading and writing for a game happens here.
"""

import logging
from typing import Callable, Optional

import click

from .engine import render_feedback
from .errors import InvalidGuessError
from .schemas import parse_guess
from .session import GameSession
from .types import CODE_LENGTH, PALETTE, GameStatus

logger = logging.getLogger(__name__)

PROMPT = f"Insert a string of {CODE_LENGTH} colors."
LEGEND = ", ".join(f"{symbol}->{name}" for symbol, name in PALETTE) + "."
FORFEIT_MESSAGE = "No more input, forfeiting the game."


def stdin_line_reader() -> Callable[[], Optional[str]]:
    """
    Line reader over stdin that never fails on undecodable bytes.
    They come back as U+FFFD, which the palette check rejects.
    """
    # One stream for the whole game, a new wrapper would drop buffered lines
    stream = click.get_text_stream("stdin", errors="replace")

    def read_line() -> Optional[str]:
        # readline() returns "" only at end of input; a blank line is "\n"
        line = stream.readline()
        if line == "":
            return None
        return line

    return read_line


class InputLoop:
    def __init__(
        self,
        session: GameSession,
        read_line: Optional[Callable[[], Optional[str]]] = None,
        write: Optional[Callable[[str], None]] = None,
    ) -> None:
        self.session = session
        self._read_line = read_line or stdin_line_reader()
        self._write = write or click.echo
        self.forfeited = False

    def run(self) -> GameStatus:
        """
        Play until the session is won or lost, or input runs out.
        Returns the final session status.
        """
        while not self.session.is_finished:
            self._write(PROMPT)
            self._write(LEGEND)

            raw = self._read_line()
            if raw is None:
                self.forfeited = True
                logger.info("Input exhausted after %d round(s)", self.session.round_counter)
                self._write(FORFEIT_MESSAGE)
                self._reveal()
                return self.session.status

            try:
                guess = parse_guess(raw)
            except InvalidGuessError as err:
                # Rejected input does not use up a round
                logger.debug("Rejected guess %r: %s", raw, err)
                self._write(str(err))
                continue

            feedback, message = self.session.evaluate(guess)
            self._write(render_feedback(feedback))
            self._write(message)

        if self.session.status == "lost":
            self._reveal()
        return self.session.status

    def _reveal(self) -> None:
        self._write(f"The secret code was: {self.session.reveal_secret()}")
