"""
Single place to:
- Describe the rules of one game (GameConfig: code length + digit range)
- Read runtime settings from env (Settings: API url, timeout, log level)

Env vars can also live in a local .env file (dev convenience).
"""

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

# 1) Load env vars from .env if present
load_dotenv()

DEFAULT_API_URL = "https://mastermind.darkube.app"
DEFAULT_TIMEOUT = 30.0
DEFAULT_LOG_LEVEL = "WARNING"


@dataclass(frozen=True)
class GameConfig:
    """
    Rules shared by the generator, the validator and the evaluator.

    Input is read one character per digit, so digits must stay within 0..9.
    """

    code_length: int = 4
    min_digit: int = 1
    max_digit: int = 6

    def __post_init__(self) -> None:
        if self.code_length < 1:
            raise ValueError("Code length must be at least 1.")
        if self.min_digit < 0 or self.max_digit > 9:
            raise ValueError("Digits must be between 0 and 9.")
        if self.min_digit > self.max_digit:
            raise ValueError(
                f"Lowest digit ({self.min_digit}) is above highest digit ({self.max_digit})."
            )

    def contains(self, digit: int) -> bool:
        return self.min_digit <= digit <= self.max_digit

    @classmethod
    def from_env(cls) -> "GameConfig":
        """Rules from MASTERMIND_CODE_LENGTH / _MIN_DIGIT / _MAX_DIGIT (local games only)."""
        return cls(
            code_length=_env_int("MASTERMIND_CODE_LENGTH", 4),
            min_digit=_env_int("MASTERMIND_MIN_DIGIT", 1),
            max_digit=_env_int("MASTERMIND_MAX_DIGIT", 6),
        )


# 2) Helpers that turn env text into numbers with a clear error message
def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}.") from None


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number, got {raw!r}.") from None
    if value <= 0:
        raise ValueError(f"{name} must be positive, got {raw!r}.")
    return value


@dataclass(frozen=True)
class Settings:
    api_url: str = DEFAULT_API_URL
    timeout: float = DEFAULT_TIMEOUT
    log_level: str = DEFAULT_LOG_LEVEL

    def __post_init__(self) -> None:
        if self.timeout <= 0:
            raise ValueError(f"Timeout must be positive, got {self.timeout}.")

    @classmethod
    def from_env(cls, overrides: Optional[dict] = None) -> "Settings":
        """
        3) Pull everything from the environment, falling back to the defaults.
        Non-None values in `overrides` win, and the env var they replace is
        never read (so a broken MASTERMIND_TIMEOUT can be fixed with --timeout).
        """
        given = {key: value for key, value in (overrides or {}).items() if value is not None}

        api_url = given.get("api_url")
        if api_url is None:
            api_url = os.getenv("MASTERMIND_API_URL", DEFAULT_API_URL)

        timeout = given.get("timeout")
        if timeout is None:
            timeout = _env_float("MASTERMIND_TIMEOUT", DEFAULT_TIMEOUT)

        log_level = given.get("log_level")
        if log_level is None:
            log_level = os.getenv("MASTERMIND_LOG_LEVEL", DEFAULT_LOG_LEVEL)

        return cls(api_url=api_url, timeout=timeout, log_level=log_level.upper())


def get_settings(overrides: Optional[dict] = None) -> Settings:
    return Settings.from_env(overrides)
