"""
Everything the player reads. No input handling here, only text.
"""

from typing import List, Optional

from .config import GameConfig
from .engine import ScoreResult
from .errors import APIError
from .turns import TurnKind, TurnResult
from .types import Code
from .validator import RejectionReason

BLACK_PEG = "⚫️"  # right digit, right place
WHITE_PEG = "⚪️"  # right digit, wrong place

CREATING_GAME = "⏳ Creating a new game..."


def welcome(config: GameConfig, remote: bool) -> str:
    lines = [
        "=======================================",
        "    Welcome to the Mastermind Game!    ",
        "=======================================",
        f"You must guess a secret {config.code_length}-digit code.",
        f"The digits are between {config.min_digit} and {config.max_digit}.",
        f"{BLACK_PEG}: Correct digit in the correct position.",
        f"{WHITE_PEG}: Correct digit in the wrong position.",
        "Type 'exit' to quit the game at any time.",
    ]
    if remote:
        lines.append("Guesses are scored by the Mastermind server.")
    return "\n".join(lines)


def game_started(game_id: Optional[str]) -> str:
    return f"✅ Game started successfully. Game ID: {game_id}"


def start_failed(error: APIError) -> str:
    return f"❌ Error starting game: {error}"


def prompt(attempt: int, config: GameConfig) -> str:
    return (
        f"\n[{attempt}] Enter your guess "
        f"(a {config.code_length}-digit number between {config.min_digit} and {config.max_digit}): "
    )


def pegs(score: ScoreResult) -> str:
    return " ".join([BLACK_PEG] * score.black + [WHITE_PEG] * score.white)


def feedback(score: ScoreResult) -> str:
    if score.black == 0 and score.white == 0:
        return "Result: No correct digits."
    return f"Result: {pegs(score)}"


def rejection(reason: RejectionReason, config: GameConfig) -> str:
    if reason is RejectionReason.INVALID_LENGTH:
        return f"Error: Your guess must be exactly {config.code_length} digits long."
    if reason is RejectionReason.NON_NUMERIC_CHARACTERS:
        return "Error: Your guess must only contain numbers."
    return f"Error: All digits must be between {config.min_digit} and {config.max_digit}."


def transport_error(error: APIError) -> str:
    return f"❌ Error communicating with the server: {error}"


def secret_reveal(secret: Code) -> str:
    return "The secret code was: " + "".join(str(d) for d in secret)


def render_turn(result: TurnResult, config: GameConfig) -> List[str]:
    kind = result.kind
    lines: List[str] = []

    if kind is TurnKind.REJECTED:
        lines.append(rejection(result.reason, config))
    elif kind is TurnKind.TRANSPORT_ERROR:
        lines.append(transport_error(result.error))
    elif kind is TurnKind.SCORED:
        lines.append(feedback(result.score))
    elif kind is TurnKind.WON:
        lines.append(f"Result: {pegs(result.score)}")
        lines.append("\n🎉 Congratulations! You won! 🎉")
        lines.append(f"You found the code in {result.attempts} attempt(s).")
    elif kind is TurnKind.QUIT:
        lines.append("You have quit the game. Goodbye!")
    else:
        raise ValueError(f"No rendering for turn kind {kind!r}.")

    if kind in (TurnKind.WON, TurnKind.QUIT) and result.secret is not None:
        lines.append(secret_reveal(result.secret))
    return lines
