"""HTTP transport — sends search requests with ``httpx``.

Search requests are GETs with a JSON body, which the service accepts.
Parameter values are rendered the way the service expects on the query
string: booleans as ``true``/``false`` and lists as repeated keys.
"""

from __future__ import annotations

import logging
import time
from typing import Any

import httpx

from esquire.config.settings import ClientSettings
from esquire.exceptions import ConnectionError, ResponseError
from esquire.result import Response
from esquire.transport.base import Transport

logger = logging.getLogger(__name__)


class HttpTransport(Transport):
    """Transport backed by a synchronous ``httpx.Client``.

    Args:
        settings: Connection settings. Uses defaults if None.
        **httpx_kwargs: Additional keyword arguments passed to ``httpx.Client``
            (``transport=httpx.MockTransport(...)`` in tests).
    """

    def __init__(self, settings: ClientSettings | None = None, **httpx_kwargs: Any) -> None:
        self.settings = settings or ClientSettings()

        client_kwargs: dict[str, Any] = {
            "base_url": self.settings.base_url,
            "timeout": httpx.Timeout(self.settings.timeout),
            "verify": self.settings.verify_certs,
            "headers": {"Accept": "application/json", **self.settings.headers},
        }
        if self.settings.username and self.settings.password:
            client_kwargs["auth"] = (self.settings.username, self.settings.password)

        client_kwargs.update(httpx_kwargs)
        self._client = httpx.Client(**client_kwargs)

    def request(
        self,
        method: str,
        path: str,
        body: dict[str, Any] | None = None,
        params: dict[str, Any] | None = None,
    ) -> Response:
        url = "/" + path.lstrip("/")

        try:
            start = time.monotonic()
            resp = self._client.request(
                method,
                url,
                json=body,
                params=_encode_params(params or {}),
            )
            took_ms = int((time.monotonic() - start) * 1000)
        except httpx.TransportError as e:
            raise ConnectionError(f"Failed to reach search service at {self.settings.base_url}: {e}") from e

        logger.debug("%s %s -> %d (%dms)", method, url, resp.status_code, took_ms)

        response = Response.from_httpx(resp)
        if not resp.is_success:
            raise ResponseError(
                f"Search service returned {resp.status_code} for {method} {url}: {response.get_error()}",
                response,
            )
        return response

    def close(self) -> None:
        self._client.close()


def _encode_params(params: dict[str, Any]) -> list[tuple[str, str]]:
    """Flatten option values to query-string pairs."""
    pairs: list[tuple[str, str]] = []
    for key, value in params.items():
        values = value if isinstance(value, (list, tuple)) else [value]
        for v in values:
            if v is None:
                continue
            if isinstance(v, bool):
                v = "true" if v else "false"
            pairs.append((key, str(v)))
    return pairs
