"""
Everything that can go wrong while talking to the remote service.

All of them derive from APIError so the game loop can catch one type.
str(error) is the one-line message shown to the player.
"""

from typing import Optional


class APIError(Exception):
    """Base class for remote service failures."""


class InvalidURLError(APIError):
    def __init__(self, url: str) -> None:
        self.url = url
        super().__init__(f"The provided URL is invalid: {url!r}.")


class RequestFailedError(APIError):
    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Network request failed: {reason}")


class NonSuccessStatusError(APIError):
    def __init__(self, status_code: int, body: Optional[str]) -> None:
        self.status_code = status_code
        self.body = body
        shown = body if body else "No body content"
        super().__init__(
            f"Server responded with a non-success status code: {status_code}. Body: {shown}"
        )


class DecodingError(APIError):
    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Failed to decode the JSON response: {reason}")


class NoDataError(APIError):
    def __init__(self) -> None:
        super().__init__("Server did not return any data.")
