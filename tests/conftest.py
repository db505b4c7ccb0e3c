"""
- Keep MASTERMIND_* env vars from the developer's shell (or .env) out of tests
- Provide a fake requests.Session so API tests never touch the network
- Provide a scripted console (input lines in, printed lines out)
"""
from typing import List

import pytest
import requests

from mastermind.config import GameConfig


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for name in (
        "MASTERMIND_API_URL",
        "MASTERMIND_TIMEOUT",
        "MASTERMIND_CODE_LENGTH",
        "MASTERMIND_MIN_DIGIT",
        "MASTERMIND_MAX_DIGIT",
        "MASTERMIND_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def config() -> GameConfig:
    return GameConfig()


def make_response(status_code: int, body: bytes = b"") -> requests.Response:
    response = requests.Response()
    response.status_code = status_code
    response._content = body
    response.encoding = "utf-8"
    return response


class FakeSession:
    """Stands in for requests.Session: replays queued responses (or exceptions)."""

    def __init__(self) -> None:
        self.queue: List[object] = []
        self.calls: List[dict] = []
        self.closed = False

    def reply(self, status_code: int, body: bytes = b"") -> "FakeSession":
        self.queue.append(make_response(status_code, body))
        return self

    def fail(self, exc: Exception) -> "FakeSession":
        self.queue.append(exc)
        return self

    def post(self, url, json=None, timeout=None):
        self.calls.append({"url": url, "json": json, "timeout": timeout})
        item = self.queue.pop(0)
        if isinstance(item, Exception):
            raise item
        return item

    def close(self) -> None:
        self.closed = True


@pytest.fixture
def fake_session() -> FakeSession:
    return FakeSession()


class ScriptedConsole:
    def __init__(self, lines: List[str]) -> None:
        self.lines = list(lines)
        self.prompts: List[str] = []
        self.output: List[str] = []

    def read_line(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if not self.lines:
            raise EOFError
        return self.lines.pop(0)

    def write(self, text: str) -> None:
        self.output.append(text)

    @property
    def text(self) -> str:
        return "\n".join(self.output)


@pytest.fixture
def scripted():
    return ScriptedConsole
