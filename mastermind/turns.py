"""
What one line of player input turned into.
Produced by session.handle_line(), rendered by console.render_turn().
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .engine import ScoreResult
from .errors import APIError
from .types import Code
from .validator import RejectionReason


class TurnKind(str, Enum):
    REJECTED = "rejected"
    SCORED = "scored"
    WON = "won"
    QUIT = "quit"
    TRANSPORT_ERROR = "transport_error"


@dataclass(frozen=True)
class TurnResult:
    kind: TurnKind
    attempts: int
    score: Optional[ScoreResult] = None
    reason: Optional[RejectionReason] = None
    error: Optional[APIError] = None
    secret: Optional[Code] = None  # only when a local game ends
