"""Integration test fixtures — a live search service with seeded documents.

Expects a service reachable at ``ESQUIRE_TEST_URL``, e.g.::

    docker run -p 9200:9200 -e discovery.type=single-node elasticsearch:1.7
    ESQUIRE_TEST_URL=http://localhost:9200 pytest tests/integration

All tests here are skipped when the variable is not set.
"""

from __future__ import annotations

import os
from collections.abc import Iterator
from typing import Any

import httpx
import pytest

from esquire.client import Client
from esquire.config.settings import ClientSettings

TEST_INDEX = "esquire_test"
TEST_TYPE = "user"

MOCK_DOCUMENTS: list[dict[str, Any]] = [
    {"id": i, "email": "test@test.com", "username": "farrelley" if i <= 7 else "bunny"} for i in range(1, 12)
]


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    if os.environ.get("ESQUIRE_TEST_URL"):
        return
    skip = pytest.mark.skip(reason="ESQUIRE_TEST_URL not set")
    for item in items:
        if "integration" in str(item.fspath):
            item.add_marker(skip)


@pytest.fixture(scope="session")
def base_url() -> str:
    return os.environ["ESQUIRE_TEST_URL"].rstrip("/")


@pytest.fixture(scope="session")
def seeded_index(base_url: str) -> Iterator[str]:
    """Create the test index, load the documents, and drop it afterwards."""
    with httpx.Client(base_url=base_url, timeout=30) as http:
        http.delete(f"/{TEST_INDEX}")
        http.put(f"/{TEST_INDEX}", json={"settings": {"number_of_shards": 1, "number_of_replicas": 0}})
        for doc in MOCK_DOCUMENTS:
            http.put(f"/{TEST_INDEX}/{TEST_TYPE}/{doc['id']}", json=doc).raise_for_status()
        http.post(f"/{TEST_INDEX}/_refresh").raise_for_status()
        yield TEST_INDEX
        http.delete(f"/{TEST_INDEX}")


@pytest.fixture
def live_client(base_url: str) -> Iterator[Client]:
    with Client(ClientSettings(base_url=base_url)) as client:
        yield client


COMMON_INDEX = "esquire_common"
COMMON_TYPE = "test"

COMMON_DOCUMENTS: list[dict[str, Any]] = [
    {"id": 1, "body": "foo baz"},
    {"id": 2, "body": "foo bar baz"},
    {"id": 3, "body": "foo bar baz bat"},
    *({"id": i, "body": "foo bar"} for i in range(4, 24)),
]


@pytest.fixture(scope="session")
def common_index(base_url: str) -> Iterator[str]:
    """Index where ``foo`` and ``bar`` are common terms and ``baz``/``bat`` are rare."""
    with httpx.Client(base_url=base_url, timeout=30) as http:
        http.delete(f"/{COMMON_INDEX}")
        http.put(f"/{COMMON_INDEX}", json={"settings": {"number_of_shards": 1, "number_of_replicas": 0}})
        for doc in COMMON_DOCUMENTS:
            http.put(f"/{COMMON_INDEX}/{COMMON_TYPE}/{doc['id']}", json={"body": doc["body"]}).raise_for_status()
        http.post(f"/{COMMON_INDEX}/_refresh").raise_for_status()
        yield COMMON_INDEX
        http.delete(f"/{COMMON_INDEX}")
