"""
Labels for clarity.
"""

from enum import Enum
from typing import List, Literal, Tuple

Symbol = str  # one display character from the palette, e.g. "r"
Code = List[Symbol]  # 4 symbol guess or secret
GameStatus = Literal["in_progress", "won", "lost"]

# Palette: display character -> color name. Order is fixed.
PALETTE: Tuple[Tuple[Symbol, str], ...] = (
    ("r", "red"),
    ("g", "green"),
    ("o", "orange"),
    ("b", "blue"),
    ("y", "yellow"),
    ("p", "purple"),
)
PALETTE_SYMBOLS: Tuple[Symbol, ...] = tuple(symbol for symbol, _ in PALETTE)
CODE_LENGTH = 4
DEFAULT_MAX_ROUNDS = 10


class Mark(str, Enum):
    # Values double as the display characters; "k" sorts before "w".
    EXACT = "k"
    PARTIAL = "w"


Feedback = List[Mark]
