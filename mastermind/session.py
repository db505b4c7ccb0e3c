"""
One game, from start to win or quit.

States:
AWAITING_START -> PLAYING -> WON | QUIT
AWAITING_START -> START_FAILED          (remote game could not be created)

Who owns the secret is hidden behind an "authority":
- LocalAuthority   generates the secret and scores with the engine
- RemoteAuthority  asks the web service for both

start_session() and handle_line() are the transition functions; play() wires
them to the console.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional, Protocol

from . import console
from .api_client import MastermindAPIClient
from .config import GameConfig
from .engine import ScoreResult, evaluate
from .errors import APIError
from .generator import generate_code_for
from .turns import TurnKind, TurnResult
from .types import Code
from .validator import EXIT_COMMAND, RejectedGuess, is_exit_command, validate

logger = logging.getLogger(__name__)


class SessionState(str, Enum):
    AWAITING_START = "awaiting_start"
    PLAYING = "playing"
    WON = "won"
    QUIT = "quit"
    START_FAILED = "start_failed"


_ALLOWED_MOVES = {
    SessionState.AWAITING_START: {SessionState.PLAYING, SessionState.START_FAILED},
    SessionState.PLAYING: {SessionState.WON, SessionState.QUIT},
    SessionState.WON: set(),
    SessionState.QUIT: set(),
    SessionState.START_FAILED: set(),
}


# ---------------- Authorities ----------------

class Authority(Protocol):
    """Whoever owns the secret and scores guesses."""

    remote: bool

    @property
    def session_id(self) -> Optional[str]: ...

    def start(self) -> None: ...

    def score(self, guess: Code) -> ScoreResult: ...

    def reveal(self) -> Optional[Code]: ...


class LocalAuthority:
    remote = False

    def __init__(
        self,
        config: GameConfig,
        secret: Optional[Code] = None,
        generate: Callable[[GameConfig], Code] = generate_code_for,
    ) -> None:
        self.config = config
        self._generate = generate
        self._secret = list(secret) if secret is not None else None

    @property
    def session_id(self) -> Optional[str]:
        return None

    def start(self) -> None:
        if self._secret is None:
            self._secret = list(self._generate(self.config))
        if len(self._secret) != self.config.code_length:
            raise ValueError(f"Secret must have exactly {self.config.code_length} digits.")

    def score(self, guess: Code) -> ScoreResult:
        return evaluate(self._secret, guess)

    def reveal(self) -> Optional[Code]:
        return list(self._secret) if self._secret is not None else None


class RemoteAuthority:
    remote = True

    def __init__(self, client: MastermindAPIClient) -> None:
        self.client = client
        self._game_id: Optional[str] = None

    @property
    def session_id(self) -> Optional[str]:
        return self._game_id

    def start(self) -> None:
        self._game_id = self.client.start_game()

    def score(self, guess: Code) -> ScoreResult:
        return self.client.make_guess(self._game_id, guess)

    def reveal(self) -> Optional[Code]:
        # The server never tells us the secret
        return None


# ---------------- Session ----------------

@dataclass
class GameSession:
    authority: Authority
    config: GameConfig
    state: SessionState = SessionState.AWAITING_START
    attempts: int = 0

    @property
    def is_over(self) -> bool:
        return not _ALLOWED_MOVES[self.state]


def _move(session: GameSession, new_state: SessionState) -> None:
    if new_state not in _ALLOWED_MOVES[session.state]:
        raise RuntimeError(f"Cannot go from {session.state.value} to {new_state.value}.")
    logger.debug("Session %s -> %s", session.state.value, new_state.value)
    session.state = new_state


def start_session(session: GameSession) -> Optional[APIError]:
    """Enter the game. Returns the transport error if the game could not start."""
    try:
        session.authority.start()
    except APIError as exc:
        logger.warning("Could not start game: %s", exc)
        _move(session, SessionState.START_FAILED)
        return exc
    _move(session, SessionState.PLAYING)
    return None


def handle_line(session: GameSession, line: str) -> TurnResult:
    """Process one line of player input while PLAYING."""
    if session.state is not SessionState.PLAYING:
        raise RuntimeError(f"Session is {session.state.value}, not playing.")

    # 1. Quit
    if is_exit_command(line):
        _move(session, SessionState.QUIT)
        return TurnResult(TurnKind.QUIT, session.attempts, secret=session.authority.reveal())

    # 2. Validate; a rejected line does not cost an attempt
    outcome = validate(line, session.config)
    if isinstance(outcome, RejectedGuess):
        return TurnResult(TurnKind.REJECTED, session.attempts, reason=outcome.reason)

    # 3. Score it
    session.attempts += 1
    try:
        score = session.authority.score(outcome.digits)
    except APIError as exc:
        logger.warning("Guess %d failed: %s", session.attempts, exc)
        return TurnResult(TurnKind.TRANSPORT_ERROR, session.attempts, error=exc)

    if score.is_win(session.config.code_length):
        _move(session, SessionState.WON)
        return TurnResult(
            TurnKind.WON, session.attempts, score=score, secret=session.authority.reveal()
        )
    return TurnResult(TurnKind.SCORED, session.attempts, score=score)


def play(
    session: GameSession,
    read_line: Optional[Callable[[str], str]] = None,
    write: Optional[Callable[[str], None]] = None,
) -> SessionState:
    """Run the whole game on the console and return the final state.

    read_line and write default to input() and print().
    """
    read_line = read_line or input
    write = write or print
    remote = session.authority.remote
    write(console.welcome(session.config, remote))

    if remote:
        write(console.CREATING_GAME)
    error = start_session(session)
    if error is not None:
        write(console.start_failed(error))
        return session.state
    if remote:
        write(console.game_started(session.authority.session_id))

    while session.state is SessionState.PLAYING:
        try:
            line = read_line(console.prompt(session.attempts + 1, session.config))
        except EOFError:
            # stdin closed, same as typing exit
            line = EXIT_COMMAND
        result = handle_line(session, line)
        for text in console.render_turn(result, session.config):
            write(text)

    return session.state
