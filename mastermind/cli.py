#!/usr/bin/env python3
"""
Command-line interface for Mastermind.

Usage:
    mastermind local                       # secret generated here
    mastermind local --length 5 --max 8
    mastermind remote                      # secret kept by the web service
    mastermind remote --url http://localhost:8000 --timeout 10

Exit codes: 0 = won or quit, 1 = remote game could not start, 2 = bad usage.
"""

import argparse
import logging
import sys
from typing import List, Optional

from .api_client import MastermindAPIClient
from .config import GameConfig, get_settings
from .session import GameSession, LocalAuthority, RemoteAuthority, SessionState, play

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mastermind",
        description="Mastermind: guess the secret code",
    )
    parser.add_argument(
        "--log-level",
        help="Logging level for diagnostics on stderr (default: $MASTERMIND_LOG_LEVEL or WARNING)",
    )
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    local_parser = subparsers.add_parser("local", help="Play against a secret generated locally")
    local_parser.add_argument("--length", type=int, help="Code length (default 4)")
    local_parser.add_argument("--min", dest="min_digit", type=int, help="Lowest digit (default 1)")
    local_parser.add_argument("--max", dest="max_digit", type=int, help="Highest digit (default 6)")

    remote_parser = subparsers.add_parser("remote", help="Play against the Mastermind web service")
    remote_parser.add_argument("--url", help="Base URL of the service")
    remote_parser.add_argument("--timeout", type=float, help="Request timeout in seconds (default 30)")

    return parser


def _setup_logging(level_name: str) -> None:
    level = getattr(logging, level_name.upper(), None)
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level {level_name!r}.")
    logging.basicConfig(
        level=level,
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _game_config(args) -> GameConfig:
    if args.command == "remote":
        # The service plays the standard game: 4 digits, 1..6
        return GameConfig()
    # Env rules are read only here, so remote games never depend on them
    defaults = GameConfig.from_env()
    return GameConfig(
        code_length=args.length if args.length is not None else defaults.code_length,
        min_digit=args.min_digit if args.min_digit is not None else defaults.min_digit,
        max_digit=args.max_digit if args.max_digit is not None else defaults.max_digit,
    )


def cmd_local(config: GameConfig) -> SessionState:
    session = GameSession(authority=LocalAuthority(config), config=config)
    return play(session)


def cmd_remote(config: GameConfig, settings) -> SessionState:
    with MastermindAPIClient(settings.api_url, settings.timeout) as client:
        session = GameSession(authority=RemoteAuthority(client), config=config)
        return play(session)


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 2

    overrides = {
        "log_level": args.log_level,
        "api_url": getattr(args, "url", None),
        "timeout": getattr(args, "timeout", None),
    }
    try:
        settings = get_settings(overrides)
        _setup_logging(settings.log_level)
        config = _game_config(args)
    except ValueError as exc:
        # prints usage and exits with status 2
        parser.error(str(exc))

    if args.command == "local":
        final = cmd_local(config)
    else:
        final = cmd_remote(config, settings)

    logger.debug("Game finished in state %s", final.value)
    return 1 if final is SessionState.START_FAILED else 0


if __name__ == "__main__":
    sys.exit(main())
