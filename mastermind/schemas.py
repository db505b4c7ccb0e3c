"""
Pydantic models for the remote Mastermind service.
- Define the exact JSON shapes exchanged with the server.
- Decoding a response through these models is what turns "some JSON" into
  either a typed value or a DecodingError.
"""

from pydantic import BaseModel, Field, field_validator

from .types import Code


# 1. Response to POST /game
class StartGameResponse(BaseModel):
    game_id: str = Field(..., min_length=1, description="Opaque id of the new game")


# 2. Body of POST /guess
class GuessRequest(BaseModel):
    game_id: str = Field(..., description="Id returned by POST /game")
    guess: str = Field(..., description="Digits concatenated, e.g. [1, 2, 3, 4] -> '1234'")

    @field_validator("guess")
    @classmethod
    def validate_digits(cls, guess: str) -> str:
        if guess == "" or not all("0" <= ch <= "9" for ch in guess):
            raise ValueError("Guess must be a non-empty string of digits.")
        return guess

    @classmethod
    def from_code(cls, game_id: str, code: Code) -> "GuessRequest":
        return cls(game_id=game_id, guess="".join(str(d) for d in code))

    model_config = {
        "json_schema_extra": {
            "examples": [
                {"game_id": "5f1c2a", "guess": "1234"},
            ]
        }
    }


# 3. Response to POST /guess
class GuessResponse(BaseModel):
    black: int = Field(..., ge=0, description="Right digit, right place")
    white: int = Field(..., ge=0, description="Right digit, wrong place")
