r"""Shared test helpers for the client and retry tests.

This module contains the fake transport used to script the outcome of
each attempt, and helpers to inspect the emitted log records.
"""

from __future__ import annotations

__all__ = [
    "TEST_ENDPOINT",
    "ScriptedHandler",
    "create_async_client",
    "create_client",
    "create_response",
    "retry_messages",
]

import json
from typing import TYPE_CHECKING, Any

import httpx

from netclient import AsyncJsonClient, JsonClient

if TYPE_CHECKING:
    import logging

TEST_ENDPOINT = "https://api.example.com"


def create_response(
    status_code: int = 200, body: Any = None, *, text: str | None = None
) -> httpx.Response:
    """Create a real httpx.Response with a JSON or text body."""
    if text is not None:
        return httpx.Response(status_code, text=text)
    if body is None:
        return httpx.Response(status_code)
    return httpx.Response(status_code, text=json.dumps(body))


class ScriptedHandler:
    """Handler of an ``httpx.MockTransport`` replaying scripted outcomes.

    Each outcome is a response, or an exception class/instance to raise.
    The last outcome is repeated once the script is consumed. Every
    received request is recorded.
    """

    def __init__(self, *outcomes: httpx.Response | BaseException | type[BaseException]) -> None:
        self.outcomes = list(outcomes) or [create_response(200, {})]
        self.requests: list[httpx.Request] = []

    @property
    def call_count(self) -> int:
        return len(self.requests)

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        outcome = self.outcomes[min(len(self.requests), len(self.outcomes)) - 1]
        if isinstance(outcome, type) and issubclass(outcome, httpx.RequestError):
            raise outcome("scripted failure", request=request)
        if isinstance(outcome, BaseException):
            raise outcome
        return httpx.Response(
            outcome.status_code, headers=outcome.headers, content=outcome.content
        )


def create_client(
    *outcomes: httpx.Response | BaseException | type[BaseException], **kwargs: Any
) -> tuple[JsonClient, ScriptedHandler]:
    """Create a JsonClient whose transport replays ``outcomes``."""
    handler = ScriptedHandler(*outcomes)
    http_client = httpx.Client(transport=httpx.MockTransport(handler))
    return JsonClient(TEST_ENDPOINT, client=http_client, **kwargs), handler


def create_async_client(
    *outcomes: httpx.Response | BaseException | type[BaseException], **kwargs: Any
) -> tuple[AsyncJsonClient, ScriptedHandler]:
    """Create an AsyncJsonClient whose transport replays ``outcomes``."""
    handler = ScriptedHandler(*outcomes)
    http_client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return AsyncJsonClient(TEST_ENDPOINT, client=http_client, **kwargs), handler


def retry_messages(records: list[logging.LogRecord]) -> list[str]:
    """Return the messages of the "retrying" log records."""
    return [record.getMessage() for record in records if "retrying" in record.getMessage()]
