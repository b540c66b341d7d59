"""Base transport — abstract interface for sending requests to the search service."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from esquire.result import Response


class Transport(ABC):
    """Sends one request and returns the decoded response.

    A transport owns connection handling and error translation; request
    builders only ever call ``request``.
    """

    @abstractmethod
    def request(
        self,
        method: str,
        path: str,
        body: dict[str, Any] | None = None,
        params: dict[str, Any] | None = None,
    ) -> Response:
        """Send a request.

        Args:
            method: HTTP method, e.g. ``"GET"``.
            path: Request path relative to the service root.
            body: JSON body, or None for no body.
            params: Query-string parameters.

        Returns:
            The decoded response.

        Raises:
            ConnectionError: If the service cannot be reached.
            ResponseError: If the service answers with a non-2xx status.
        """

    def close(self) -> None:
        """Release any held connections."""

    def __enter__(self) -> Transport:
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()
