"""
HTTP client for the remote Mastermind service.

Endpoints:
POST /game    -> {"game_id": "..."}
POST /guess   {"game_id": "...", "guess": "1234"} -> {"black": 1, "white": 2}

Every failure is raised as an APIError subclass (see errors.py); requests and
pydantic exceptions never leak out of this module.
"""

import logging
from typing import Optional, Type, TypeVar
from urllib.parse import urlparse

import requests
from pydantic import BaseModel, ValidationError

from .config import DEFAULT_API_URL, DEFAULT_TIMEOUT
from .engine import ScoreResult
from .errors import (
    DecodingError,
    InvalidURLError,
    NoDataError,
    NonSuccessStatusError,
    RequestFailedError,
)
from .schemas import GuessRequest, GuessResponse, StartGameResponse
from .types import Code

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


class MastermindAPIClient:
    def __init__(
        self,
        base_url: str = DEFAULT_API_URL,
        timeout: float = DEFAULT_TIMEOUT,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    def __enter__(self) -> "MastermindAPIClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def close(self) -> None:
        self.session.close()

    # --- Public API ---

    def start_game(self) -> str:
        """Ask the server for a new game and return its id."""
        game = self._post("/game", StartGameResponse)
        logger.info("Started remote game %s", game.game_id)
        return game.game_id

    def make_guess(self, game_id: str, guess: Code) -> ScoreResult:
        """Send one guess; the server answers with black/white counts."""
        payload = GuessRequest.from_code(game_id, guess)
        result = self._post("/guess", GuessResponse, payload.model_dump())

        # Pegs can't outnumber the digits we sent
        if result.black + result.white > len(guess):
            logger.warning(
                "Server scored %d black + %d white for a %d-digit guess",
                result.black, result.white, len(guess),
            )
            raise DecodingError(
                f"score of {result.black} black and {result.white} white "
                f"does not fit a {len(guess)}-digit guess"
            )
        return ScoreResult(black=result.black, white=result.white)

    # --- Helpers ---

    def _url(self, path: str) -> str:
        parts = urlparse(self.base_url)
        if parts.scheme not in ("http", "https") or not parts.netloc:
            raise InvalidURLError(self.base_url)
        return self.base_url + path

    def _post(self, path: str, model: Type[ModelT], body: Optional[dict] = None) -> ModelT:
        url = self._url(path)
        logger.debug("POST %s %s", url, body)

        # 1. Send the request; anything below HTTP (DNS, refused, timeout) lands here
        try:
            response = self.session.post(url, json=body, timeout=self.timeout)
        except (requests.exceptions.InvalidURL, requests.exceptions.MissingSchema,
                requests.exceptions.InvalidSchema) as exc:
            raise InvalidURLError(url) from exc
        except requests.exceptions.RequestException as exc:
            logger.warning("POST %s failed: %s", url, exc)
            raise RequestFailedError(str(exc)) from exc

        # 2. Only 2xx counts as success; keep status and body for diagnostics
        if not 200 <= response.status_code < 300:
            logger.warning("POST %s returned %s", url, response.status_code)
            raise NonSuccessStatusError(response.status_code, response.text or None)

        # 3. Decode the body into the expected shape
        if not response.content:
            raise NoDataError()
        try:
            return model.model_validate_json(response.content)
        except ValidationError as exc:
            logger.warning("Could not decode response from %s: %s", url, response.text)
            raise DecodingError(str(exc)) from exc
