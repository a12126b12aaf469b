"""Shared fixtures: an in-memory store and a scripted transport."""

from typing import Any

import pytest


class FakeResponse:
    """TransportResponse with canned status and body."""

    def __init__(self, status: int = 200, json_body: Any = None, text_body: str = "") -> None:
        self.status = status
        self._json_body = json_body
        self._text_body = text_body

    async def json(self) -> Any:
        if isinstance(self._json_body, Exception):
            raise self._json_body
        return self._json_body

    async def text(self) -> str:
        return self._text_body


class FakeTransport:
    """Records every call and returns a canned response or raises an error."""

    def __init__(self, response: FakeResponse | None = None, error: Exception | None = None) -> None:
        self.response = response or FakeResponse()
        self.error = error
        self.calls: list[tuple[str, dict[str, Any]]] = []

    async def __call__(self, target: str, options: dict[str, Any]) -> FakeResponse:
        self.calls.append((target, dict(options)))
        if self.error is not None:
            raise self.error
        return self.response


class FakeStore:
    """Collects dispatched actions and exposes a fixed state."""

    def __init__(self, state: Any = None) -> None:
        self.state = state if state is not None else {}
        self.actions: list[dict[str, Any]] = []

    def dispatch(self, action: dict[str, Any]) -> dict[str, Any]:
        self.actions.append(action)
        return action

    def get_state(self) -> Any:
        return self.state

    @property
    def types(self) -> list[str]:
        return [action["type"] for action in self.actions]


@pytest.fixture
def store() -> FakeStore:
    return FakeStore(state={"token": "abc", "user": "u-1"})


@pytest.fixture
def make_store():
    return FakeStore


@pytest.fixture
def make_transport():
    def _make(
        status: int = 200,
        json_body: Any = None,
        text_body: str = "",
        error: Exception | None = None,
    ) -> FakeTransport:
        return FakeTransport(FakeResponse(status, json_body, text_body), error=error)

    return _make
