"""
Explicit validation of what the player typed.

validate() never raises: it returns either
- ValidGuess(digits)       the parsed guess, ready for scoring
- RejectedGuess(reason)    one of the three RejectionReason values
"""

from dataclasses import dataclass
from enum import Enum
from typing import Union

from .config import GameConfig
from .types import Code

EXIT_COMMAND = "exit"


class RejectionReason(str, Enum):
    INVALID_LENGTH = "invalid_length"
    NON_NUMERIC_CHARACTERS = "non_numeric_characters"
    OUT_OF_RANGE_DIGITS = "out_of_range_digits"


@dataclass(frozen=True)
class ValidGuess:
    digits: Code


@dataclass(frozen=True)
class RejectedGuess:
    reason: RejectionReason


ValidationOutcome = Union[ValidGuess, RejectedGuess]


def is_exit_command(raw: str) -> bool:
    return raw.strip().lower() == EXIT_COMMAND


def validate(raw: str, config: GameConfig) -> ValidationOutcome:
    """
    Checks run in this order, first failure wins:
      "123"  -> INVALID_LENGTH          (for a 4-digit game)
      "12a4" -> NON_NUMERIC_CHARACTERS
      "1278" -> OUT_OF_RANGE_DIGITS     (for digits 1..6)
      "1234" -> ValidGuess([1, 2, 3, 4])
    """
    text = raw.strip()

    # 1. Length
    if len(text) != config.code_length:
        return RejectedGuess(RejectionReason.INVALID_LENGTH)

    # 2. Only plain ASCII 0-9: "²" (isdigit) and Persian "۱۲۳۴" (isdecimal) are rejected
    for ch in text:
        if ch < "0" or ch > "9":
            return RejectedGuess(RejectionReason.NON_NUMERIC_CHARACTERS)

    # 3. Range
    digits = [int(ch) for ch in text]
    for digit in digits:
        if not config.contains(digit):
            return RejectedGuess(RejectionReason.OUT_OF_RANGE_DIGITS)

    return ValidGuess(digits)
