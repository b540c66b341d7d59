"""Esquire client — entry point for talking to the search service.

Usage::

    with Client() as client:
        search = Search(client).add_index("articles")
        for hit in search.search("solar nowcasting", 5):
            print(hit.id, hit.score)

    # Or scoped through an index handle
    client = Client(Settings(client={"base_url": "http://es:9200"}).client)
    total = client.get_index("articles").count("solar")
"""

from __future__ import annotations

import logging
import time
from typing import Any

from esquire.config.settings import ClientSettings
from esquire.index import Index
from esquire.result import Response
from esquire.transport.base import Transport
from esquire.transport.http import HttpTransport

logger = logging.getLogger(__name__)


class Client:
    """Holds the transport and hands out index handles.

    Args:
        settings: Connection settings, used when no transport is given.
        transport: Transport to send requests through. Defaults to an
            ``HttpTransport`` built from ``settings``.
    """

    def __init__(self, settings: ClientSettings | None = None, transport: Transport | None = None) -> None:
        self.settings = settings or ClientSettings()
        self._transport = transport or HttpTransport(self.settings)

    def __enter__(self) -> Client:
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()

    def close(self) -> None:
        """Close the underlying transport."""
        self._transport.close()

    @property
    def transport(self) -> Transport:
        return self._transport

    def get_index(self, name: str) -> Index:
        return Index(self, name)

    def request(
        self,
        path: str,
        method: str = "GET",
        data: dict[str, Any] | None = None,
        query: dict[str, Any] | None = None,
    ) -> Response:
        """Send one request through the transport.

        Transport errors are not caught here.

        Args:
            path: Path relative to the service root.
            method: HTTP method.
            data: JSON body.
            query: Query-string parameters.

        Returns:
            The decoded response.
        """
        start = time.monotonic()
        response = self._transport.request(method, path, data, query or {})
        took_ms = int((time.monotonic() - start) * 1000)
        logger.debug("Request %s %s params=%s took=%dms", method, path, query or {}, took_ms)
        return response
