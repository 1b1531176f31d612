"""
Pure game logic (no I/O, no state).
For each guess we emit one mark per position:
- exact (k): right symbol, right position
- partial (w): right symbol, wrong position
- nothing: symbol not in the secret

Secrets and guesses never repeat a symbol, so a simple membership test per
position gives the same counts as the classic two-pass algorithm.
score_counts() implements the two-pass version; keep them in agreement if the
no-duplicates rule is ever relaxed.
"""

import random
from typing import Optional, Sequence, Tuple

from .types import CODE_LENGTH, PALETTE_SYMBOLS, Code, Feedback, Mark, Symbol


def generate_secret(
    rng: Optional[random.Random] = None,
    palette: Sequence[Symbol] = PALETTE_SYMBOLS,
    length: int = CODE_LENGTH,
) -> Code:
    """
    Draw `length` distinct symbols from the palette, order matters.
    sample() is a partial shuffle, so every permutation is equally likely.
    """
    if rng is None:
        rng = random.Random()
    return rng.sample(list(palette), k=length)


def score_guess(secret: Code, guess: Code) -> Feedback:
    """
    Example:
      secret = r g o b
      guess  = r o g b
      r and b are exact, g and o are partial
      Returns [EXACT, EXACT, PARTIAL, PARTIAL]
    """

    # 0. Validate lengths match
    n = len(secret)
    if n == 0 or len(guess) != n:
        raise ValueError("Secret and guess must be the same non-zero length.")

    # 1. One mark per position, membership test for the partials
    marks: Feedback = []
    for i in range(n):
        if guess[i] == secret[i]:
            marks.append(Mark.EXACT)
        elif guess[i] in secret:
            marks.append(Mark.PARTIAL)

    # 2. Canonical order: exact first
    marks.sort(key=lambda mark: mark.value)
    return marks


def score_counts(secret: Code, guess: Code) -> Tuple[int, int]:
    """
    Duplicate-aware scoring: (exact, partial).
    Exact matches are removed first, partials are then capped by how many of
    each symbol are left over on both sides.
    """
    n = len(secret)
    if n == 0 or len(guess) != n:
        raise ValueError("Secret and guess must be the same non-zero length.")

    exact = 0
    secret_left = {}
    guess_left = {}
    for i in range(n):
        if secret[i] == guess[i]:
            exact += 1
        else:
            secret_left[secret[i]] = secret_left.get(secret[i], 0) + 1
            guess_left[guess[i]] = guess_left.get(guess[i], 0) + 1

    partial = 0
    for symbol, count in guess_left.items():
        partial += min(count, secret_left.get(symbol, 0))

    return (exact, partial)


def is_win(feedback: Feedback, length: int = CODE_LENGTH) -> bool:
    """Win = one exact mark for every position."""
    return len(feedback) == length and all(mark is Mark.EXACT for mark in feedback)


def render_feedback(feedback: Feedback, length: int = CODE_LENGTH) -> str:
    """
    Compact display string, e.g. "kkw.".
    Positions that scored nothing are padded with "." so the line is always
    `length` characters wide.
    """
    text = "".join(mark.value for mark in feedback)
    return text.ljust(length, ".")
