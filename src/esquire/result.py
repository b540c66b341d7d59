"""Response and result models — wrap the service's JSON answer to a search.

``Response`` is the raw decoded body plus HTTP status. ``ResultSet`` turns a
search response into an iterable of ``Result`` hits with total-hit and
timeout accounting.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import TYPE_CHECKING, Any

import httpx
from pydantic import BaseModel, ConfigDict, Field

if TYPE_CHECKING:
    from esquire.query.query import Query


class Response(BaseModel):
    """Decoded response of a single request."""

    data: dict[str, Any] = Field(default_factory=dict, description="Decoded JSON body")
    status_code: int = Field(default=200, description="HTTP status code of the response")

    @classmethod
    def from_httpx(cls, resp: httpx.Response) -> Response:
        """Build a response from an ``httpx`` response; non-JSON bodies land under ``message``."""
        if not resp.content:
            return cls(status_code=resp.status_code)
        try:
            data = resp.json()
        except ValueError:
            data = {"message": resp.text}
        if not isinstance(data, dict):
            data = {"message": data}
        return cls(data=data, status_code=resp.status_code)

    def is_ok(self) -> bool:
        return 200 <= self.status_code < 300 and not self.has_error()

    def has_error(self) -> bool:
        return "error" in self.data

    def get_error(self) -> str:
        error = self.data.get("error", "")
        if isinstance(error, dict):
            return str(error.get("reason") or error.get("type") or error)
        return str(error)

    def get_took(self) -> int:
        return int(self.data.get("took", 0))


class Result(BaseModel):
    """A single search hit."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    id: str = Field(default="", alias="_id", description="Document identifier")
    index: str = Field(default="", alias="_index", description="Index the hit came from")
    type: str = Field(default="", alias="_type", description="Document type of the hit")
    score: float | None = Field(default=None, alias="_score", description="Relevance score")
    version: int | None = Field(default=None, alias="_version", description="Document version, if requested")
    source: dict[str, Any] = Field(default_factory=dict, alias="_source", description="Stored document body")
    highlights: dict[str, list[str]] = Field(default_factory=dict, alias="highlight", description="Highlighted fragments")
    explanation: dict[str, Any] | None = Field(default=None, alias="_explanation", description="Score explanation")

    def get_param(self, name: str) -> Any:
        """Return a raw hit key (``_version``, ``_routing`` ...), or ``{}`` when absent."""
        raw = self.model_dump(by_alias=True, exclude_none=True)
        return raw.get(name, {})


class ResultSet:
    """Iterable collection of hits for one search.

    Args:
        response: The search response.
        query: The query that produced it.
    """

    def __init__(self, response: Response, query: Query) -> None:
        self._response = response
        self._query = query
        hits = response.data.get("hits", {})
        self.total_hits = _parse_total(hits.get("total", 0))
        self.max_score = hits.get("max_score") or 0.0
        self.took = response.get_took()
        self.results = [Result.model_validate(hit) for hit in hits.get("hits", [])]

    def get_response(self) -> Response:
        return self._response

    def get_query(self) -> Query:
        return self._query

    def has_timed_out(self) -> bool:
        return bool(self._response.data.get("timed_out", False))

    def current(self) -> Result | None:
        """Return the first hit, or None for an empty page."""
        return self.results[0] if self.results else None

    def __len__(self) -> int:
        return len(self.results)

    def __iter__(self) -> Iterator[Result]:
        return iter(self.results)

    def __repr__(self) -> str:
        return f"ResultSet(total_hits={self.total_hits}, returned={len(self.results)})"


def _parse_total(total: Any) -> int:
    """Read ``hits.total`` in either the integer or ``{"value": n}`` form."""
    if isinstance(total, dict):
        return int(total.get("value", 0))
    return int(total or 0)
