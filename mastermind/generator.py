"""
Secret code generation for local games.
Each position is an independent, uniform draw from the digit range, so
duplicates are allowed (e.g. [3, 3, 1, 6]).
"""

import logging
from secrets import randbelow

from .config import GameConfig
from .types import Code

logger = logging.getLogger(__name__)


def generate_code(length: int = 4, low: int = 1, high: int = 6) -> Code:
    if length < 1:
        raise ValueError("Code length must be at least 1.")
    if low > high:
        raise ValueError(f"Empty digit range {low}..{high}.")

    # randbelow(span) gives 0..span-1, shift it into low..high
    span = high - low + 1
    digits = []
    k = 0
    while k < length:
        digits.append(low + randbelow(span))
        k += 1

    logger.debug("Generated a %d-digit secret from %d..%d", length, low, high)
    return digits


def generate_code_for(config: GameConfig) -> Code:
    return generate_code(config.code_length, config.min_digit, config.max_digit)
