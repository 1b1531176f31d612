"""
Single place to:
- Read settings from the environment (MASTERMIND_MAX_ROUNDS, MASTERMIND_SEED,
  MASTERMIND_LOG_LEVEL)
- Load a local .env if present (dev convenience)
- Validate everything into a Settings model

Command-line options override whatever comes from the environment.
"""

import os
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field, ValidationError, field_validator

from .errors import ConfigurationError
from .types import DEFAULT_MAX_ROUNDS

ENV_MAX_ROUNDS = "MASTERMIND_MAX_ROUNDS"
ENV_SEED = "MASTERMIND_SEED"
ENV_LOG_LEVEL = "MASTERMIND_LOG_LEVEL"


class Settings(BaseModel):
    max_rounds: int = Field(DEFAULT_MAX_ROUNDS, gt=0, description="Guesses allowed per game")
    seed: Optional[int] = Field(None, description="Seed for the secret code; random when unset")
    log_level: str = Field("WARNING", description="Logging level name or number")

    @field_validator("log_level")
    @classmethod
    def upper_level(cls, value: str) -> str:
        return value.strip().upper()


def load_settings(
    max_rounds: Optional[int] = None,
    seed: Optional[int] = None,
    log_level: Optional[str] = None,
) -> Settings:
    """
    Build Settings from the environment, explicit arguments win.
    Raises ConfigurationError on anything invalid.
    """
    # 1) Load env vars from .env if present
    load_dotenv()

    # 2) Collect raw values, pydantic does the type checks
    raw = {}
    env_rounds = os.getenv(ENV_MAX_ROUNDS)
    if env_rounds:
        raw["max_rounds"] = env_rounds
    env_seed = os.getenv(ENV_SEED)
    if env_seed:
        raw["seed"] = env_seed
    env_level = os.getenv(ENV_LOG_LEVEL)
    if env_level:
        raw["log_level"] = env_level

    if max_rounds is not None:
        raw["max_rounds"] = max_rounds
    if seed is not None:
        raw["seed"] = seed
    if log_level is not None:
        raw["log_level"] = log_level

    # 3) Validate
    try:
        return Settings(**raw)
    except ValidationError as err:
        problems = "; ".join(
            f"{'.'.join(str(part) for part in e['loc'])}: {e['msg']}" for e in err.errors()
        )
        raise ConfigurationError(f"Invalid configuration: {problems}") from err
