"""Shared fixtures for random.org client tests."""

from __future__ import annotations

import json
from typing import Any, Callable

import pytest

from randomorg.adapters import TransportResponse
from randomorg.client import RandomOrgClient


class RecordingTransport:
    """In-memory transport returning queued responses and recording payloads.

    Attributes:
        calls: Recorded `(url, payload)` pairs in call order.
        closed: True after `transport_close` was called.
    """

    def __init__(self, responses: list[TransportResponse | Exception]):
        self._responses = list(responses)
        self.calls: list[tuple[str, dict[str, Any]]] = []
        self.closed = False

    def transport_post_json(self, url: str, payload: dict[str, Any]) -> TransportResponse:
        self.calls.append((url, json.loads(json.dumps(payload))))
        next_response = self._responses.pop(0)
        if isinstance(next_response, Exception):
            raise next_response
        return next_response

    def transport_close(self) -> None:
        self.closed = True


def json_response(payload: dict[str, Any] | str, status_code: int = 200) -> TransportResponse:
    """Build one transport response from a mapping or raw body text."""

    body = payload if isinstance(payload, str) else json.dumps(payload)
    return TransportResponse(status_code=status_code, body=body.encode("utf-8"))


def random_result_body(data: list[Any], request_id: int = 1) -> dict[str, Any]:
    """Build a successful generate* response body around `data`."""

    return {
        "jsonrpc": "2.0",
        "result": {
            "random": {"data": data, "completionTime": "2011-10-10 13:19:12Z"},
            "bitsUsed": 16,
            "bitsLeft": 199984,
            "requestsLeft": 9999,
            "advisoryDelay": 0,
        },
        "id": request_id,
    }


@pytest.fixture
def make_client() -> Callable[..., tuple[RandomOrgClient, RecordingTransport]]:
    """Return a factory building a client over a recording transport."""

    def _make_client(*responses: TransportResponse | Exception) -> tuple[RandomOrgClient, RecordingTransport]:
        transport = RecordingTransport(list(responses))
        client = RandomOrgClient(api_key="test-key", transport=transport, endpoint_url="https://example.test/invoke")
        return client, transport

    return _make_client


@pytest.fixture
def json_response_factory() -> Callable[..., TransportResponse]:
    """Expose `json_response` to tests."""

    return json_response


@pytest.fixture
def random_result_body_factory() -> Callable[..., dict[str, Any]]:
    """Expose `random_result_body` to tests."""

    return random_result_body
