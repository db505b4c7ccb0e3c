"""
Pure game logic (no HTTP, no console).
We compute two feedback numbers for each guess:
- black: how many indices are exactly correct (right digit, right place)
- white: how many of the remaining guess digits appear somewhere else in the
  secret, never counting a secret position twice

We allow duplicates in both the secret and the guess.
"""

from dataclasses import dataclass

from .types import Code

# Marks a position that was already matched, so it can't match again.
# Both are outside any digit range, and differ so they never match each other.
_USED_SECRET = -1
_USED_GUESS = -2


@dataclass(frozen=True)
class ScoreResult:
    black: int
    white: int

    def is_win(self, code_length: int) -> bool:
        return self.black == code_length


def evaluate(secret: Code, guess: Code) -> ScoreResult:
    """
    Example:
      secret = [1, 1, 2, 2]
      guess  = [1, 2, 1, 2]
      black = 2  (first and last positions)
      white = 2  (the 2 and the 1 in the middle swap places)

    The inputs are not modified; we work on copies.
    """

    # 0. Validate lengths match
    n = len(secret)
    if n == 0 or len(guess) != n:
        raise ValueError("Secret and guess must be the same non-zero length.")

    secret_left = list(secret)
    guess_left = list(guess)

    # 1. Exact position matches --> black
    black = 0
    for i in range(n):
        if guess_left[i] == secret_left[i]:
            black += 1
            secret_left[i] = _USED_SECRET
            guess_left[i] = _USED_GUESS

    # 2. Right digit, wrong place --> white
    #    Each guess digit takes the first secret position with the same value
    #    that nobody has used yet.
    white = 0
    for i in range(n):
        digit = guess_left[i]
        if digit == _USED_GUESS:
            continue
        for j in range(n):
            if secret_left[j] == digit:
                white += 1
                secret_left[j] = _USED_SECRET
                guess_left[i] = _USED_GUESS
                break

    return ScoreResult(black=black, white=white)

