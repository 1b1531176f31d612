"""
Testing logging setup: records go to stderr, the format follows the level.
"""

import io
import logging
import random

from click.testing import CliRunner

from mastermind.cli import main
from mastermind.engine import generate_secret
from mastermind.log import DEBUG_LOG_FORMAT, LOG_FORMAT, setup_logging


def test_repeat_setup_replaces_handler(monkeypatch):
    first_stream = io.StringIO()
    monkeypatch.setattr("sys.stderr", first_stream)
    setup_logging("INFO")

    second_stream = io.StringIO()
    monkeypatch.setattr("sys.stderr", second_stream)
    handler = setup_logging("DEBUG")

    logger = logging.getLogger("mastermind")
    assert logger.handlers == [handler]
    assert logger.level == logging.DEBUG
    assert handler.formatter._fmt == DEBUG_LOG_FORMAT

    logging.getLogger("mastermind.session").debug("hello")
    assert "hello" in second_stream.getvalue()
    assert first_stream.getvalue() == ""


def test_default_level_uses_plain_format():
    handler = setup_logging()
    assert logging.getLogger("mastermind").level == logging.WARNING
    assert handler.formatter._fmt == LOG_FORMAT


def test_debug_logs_secret_to_stderr_only():
    secret = "".join(generate_secret(random.Random(3)))

    result = CliRunner().invoke(
        main, ["--seed", "3", "--max-rounds", "2", "--log-level", "DEBUG"], input=f"{secret}\n"
    )

    assert result.exit_code == 0
    assert "kkkk" in result.stdout
    assert f"secret={secret}" in result.stderr
    assert "secret=" not in result.stdout
    assert "[DEBUG]" not in result.stdout


def test_secret_not_logged_above_debug():
    secret = "".join(generate_secret(random.Random(3)))

    result = CliRunner().invoke(
        main, ["--seed", "3", "--max-rounds", "2", "--log-level", "INFO"], input=f"{secret}\n"
    )

    assert result.exit_code == 0
    assert "secret=" not in result.stderr
    assert "Starting game with 2 rounds" in result.stderr
