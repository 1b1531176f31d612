"""
Mastermind CLI - play one game in the terminal.

Usage:
    mastermind [--max-rounds N] [--seed S] [--log-level LEVEL]

Defaults come from MASTERMIND_MAX_ROUNDS, MASTERMIND_SEED and
MASTERMIND_LOG_LEVEL (a local .env file is honoured).
"""

import logging
import random
from typing import Optional

import click

from .config import load_settings
from .errors import ConfigurationError
from .input_loop import InputLoop
from .log import setup_logging
from .session import GameSession

logger = logging.getLogger(__name__)


@click.command(name="mastermind")
@click.option("--max-rounds", type=int, default=None, help="Number of guesses allowed.")
@click.option("--seed", type=int, default=None, help="Seed for the secret code.")
@click.option("--log-level", default=None, help="Logging level (DEBUG, INFO, WARNING, ...).")
def main(max_rounds: Optional[int], seed: Optional[int], log_level: Optional[str]) -> None:
    """Break the hidden 4-color code before you run out of attempts."""
    # Configuration problems are fatal and reported before the first round
    try:
        settings = load_settings(max_rounds=max_rounds, seed=seed, log_level=log_level)
        setup_logging(settings.log_level)
        rng = random.Random(settings.seed) if settings.seed is not None else None
        session = GameSession.new(settings.max_rounds, rng=rng)
    except ConfigurationError as err:
        raise click.ClickException(str(err)) from err

    logger.info("Starting game with %d rounds", settings.max_rounds)
    status = InputLoop(session).run()
    logger.info("Game finished: %s", status)


if __name__ == "__main__":
    main()
