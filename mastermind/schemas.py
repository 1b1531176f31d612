"""
Explicit validation with Pydantic.
- GuessInput turns a raw line of text into a well-formed code.
- Rules are checked in a fixed order (length, palette, duplicates) so the
  player always gets the first problem with their input.
"""

from typing import Any, List

from pydantic import BaseModel, Field, ValidationError, field_validator

from .errors import InvalidGuessError
from .types import CODE_LENGTH, PALETTE_SYMBOLS, Code

LENGTH_MESSAGE = f"String must be {CODE_LENGTH}-characters long, try again!"
PALETTE_MESSAGE = "Input colors must be in the specified list!"
DUPLICATE_MESSAGE = "Characters in the string must be unique!"
TYPE_MESSAGE = "Input must be a string of colors!"


class GuessInput(BaseModel):
    guess: List[str] = Field(
        ..., description=f"{CODE_LENGTH} distinct palette symbols, case-insensitive"
    )

    @field_validator("guess", mode="before")
    @classmethod
    def validate_symbols(cls, value: Any) -> List[str]:
        # Accept "RGOB" as well as ["R", "G", "O", "B"]
        if isinstance(value, str):
            symbols = list(value.strip().lower())
        elif not isinstance(value, (list, tuple)):
            raise ValueError(TYPE_MESSAGE)
        else:
            symbols = [str(symbol).lower() for symbol in value]

        if len(symbols) != CODE_LENGTH:
            raise ValueError(LENGTH_MESSAGE)

        for symbol in symbols:
            if symbol not in PALETTE_SYMBOLS:
                raise ValueError(PALETTE_MESSAGE)

        if len(set(symbols)) != len(symbols):
            raise ValueError(DUPLICATE_MESSAGE)

        return symbols


def _first_message(err: ValidationError) -> str:
    details = err.errors()[0]
    inner = details.get("ctx", {}).get("error")
    if inner is not None:
        return str(inner)
    return details["msg"]


def parse_guess(raw: Any) -> Code:
    """
    Validate raw input and return the normalized code.
    Raises InvalidGuessError carrying the message for the player.
    """
    try:
        return GuessInput(guess=raw).guess
    except ValidationError as err:
        raise InvalidGuessError(_first_message(err)) from err
