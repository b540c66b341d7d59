"""Shared test fixtures and configuration."""

from __future__ import annotations

from typing import Any

import pytest

from esquire.client import Client
from esquire.config.settings import Settings
from esquire.result import Response
from esquire.search.search import Search
from esquire.transport.base import Transport


class RecordingTransport(Transport):
    """Transport that records every request and replays a canned response."""

    def __init__(self, data: dict[str, Any] | None = None) -> None:
        self.data = data if data is not None else {"took": 1, "timed_out": False, "hits": {"total": 0, "hits": []}}
        self.calls: list[dict[str, Any]] = []
        self.closed = False

    def request(
        self,
        method: str,
        path: str,
        body: dict[str, Any] | None = None,
        params: dict[str, Any] | None = None,
    ) -> Response:
        self.calls.append({"method": method, "path": path, "body": body, "params": params})
        return Response(data=self.data)

    def close(self) -> None:
        self.closed = True

    @property
    def last(self) -> dict[str, Any]:
        return self.calls[-1]


@pytest.fixture
def settings() -> Settings:
    """Create a test Settings instance with defaults."""
    return Settings(
        _env_file=None,  # type: ignore[call-arg]
        client={"base_url": "http://search.test:9200", "timeout": 5},
    )


@pytest.fixture
def search_response() -> dict[str, Any]:
    """Sample search response with two hits."""
    return {
        "took": 3,
        "timed_out": False,
        "hits": {
            "total": {"value": 11, "relation": "eq"},
            "max_score": 1.5,
            "hits": [
                {
                    "_index": "articles",
                    "_type": "post",
                    "_id": "1",
                    "_score": 1.5,
                    "_source": {"username": "farrelley", "email": "test@test.com"},
                },
                {
                    "_index": "articles",
                    "_type": "post",
                    "_id": "2",
                    "_score": 0.7,
                    "_version": 3,
                    "_source": {"username": "bunny"},
                    "highlight": {"username": ["<em>bunny</em>"]},
                },
            ],
        },
    }


@pytest.fixture
def transport(search_response: dict[str, Any]) -> RecordingTransport:
    return RecordingTransport(search_response)


@pytest.fixture
def client(transport: RecordingTransport) -> Client:
    return Client(transport=transport)


@pytest.fixture
def search(client: Client) -> Search:
    return Search(client)
