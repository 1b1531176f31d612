"""
- Sessions with a known secret so outcomes are predictable.
- A scripted console: feeds lines to the InputLoop and records what it prints.
- Keeps MASTERMIND_* variables from the real environment out of the tests.
"""
import logging
import pytest
from typing import List, Optional

from mastermind.session import GameSession


class ScriptedConsole:
    """Stands in for stdin/stdout. Returns None once the lines run out (end of input)."""

    def __init__(self, lines: List[str]) -> None:
        self.lines = list(lines)
        self.output: List[str] = []

    def read_line(self) -> Optional[str]:
        if not self.lines:
            return None
        return self.lines.pop(0)

    def write(self, text: str) -> None:
        self.output.append(text)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for name in ("MASTERMIND_MAX_ROUNDS", "MASTERMIND_SEED", "MASTERMIND_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    # load_dotenv() looks for .env from the working directory upwards
    monkeypatch.setattr("mastermind.config.load_dotenv", lambda *args, **kwargs: False)
    yield


@pytest.fixture
def session() -> GameSession:
    # Secret is hardcoded so we know what outcome should be
    return GameSession(secret=list("rgob"), max_rounds=10)


@pytest.fixture
def make_console():
    def _make(*lines: str) -> ScriptedConsole:
        return ScriptedConsole(list(lines))
    return _make


@pytest.fixture(autouse=True)
def _reset_logging():
    # The CLI attaches a stderr handler to the package logger; drop it between tests
    yield
    logger = logging.getLogger("mastermind")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
