"""Top-level request body — wraps a leaf query with paging and scoring controls."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from esquire.exceptions import InvalidInputError
from esquire.query.base import AbstractQuery, Param, serialize
from esquire.query.queries import MatchAll, QueryString


class Query(Param):
    """A complete search body.

    ``Query.create`` is the single entry point that turns the shapes a caller
    may hand to a search into a ``Query``:

      - ``None``, ``""`` or ``{}``: a match-all query
      - a string: a ``query_string`` query
      - a mapping: the raw request body
      - an ``AbstractQuery``: wrapped under the ``query`` key
      - a ``Query``: returned unchanged

    A body without a ``query`` key serializes with ``match_all``.
    """

    def __init__(self, query: Mapping[str, Any] | AbstractQuery | None = None) -> None:
        super().__init__()
        if isinstance(query, Mapping):
            self.set_raw_query(query)
        elif isinstance(query, AbstractQuery):
            self.set_query(query)
        elif query is not None:
            raise InvalidInputError(f"Unexpected argument to create a query for: {type(query).__name__}")

    @classmethod
    def create(cls, query: Any) -> Query:
        """Normalize any supported query shape to a ``Query``.

        Raises:
            InvalidInputError: If the value has an unsupported type.
        """
        if isinstance(query, Query):
            return query
        if isinstance(query, AbstractQuery):
            return cls(query)
        if query is None or (isinstance(query, (str, Mapping)) and not query):
            return cls(MatchAll())
        if isinstance(query, Mapping):
            return cls(query)
        if isinstance(query, str):
            return cls(QueryString(query))
        raise InvalidInputError(f"Unexpected argument to create a query for: {type(query).__name__}")

    def set_raw_query(self, query: Mapping[str, Any]) -> Query:
        """Replace the whole body with ``query``."""
        self.set_params(query)
        return self

    def set_query(self, query: AbstractQuery) -> Query:
        self.set_param("query", query)
        return self

    def set_from(self, offset: int) -> Query:
        self.set_param("from", offset)
        return self

    def set_limit(self, size: int = 10) -> Query:
        """Cap the number of returned hits (``size``)."""
        self.set_param("size", size)
        return self

    def set_explain(self, explain: bool = True) -> Query:
        self.set_param("explain", explain)
        return self

    def set_version(self, version: bool = True) -> Query:
        self.set_param("version", version)
        return self

    def set_sort(self, sort: list[Any]) -> Query:
        self.set_param("sort", list(sort))
        return self

    def add_sort(self, sort: Any) -> Query:
        self.add_param("sort", sort)
        return self

    def set_source(self, fields: list[str] | bool) -> Query:
        self.set_param("_source", fields)
        return self

    def set_highlight(self, highlight: Mapping[str, Any]) -> Query:
        self.set_param("highlight", dict(highlight))
        return self

    def set_min_score(self, min_score: float) -> Query:
        self.set_param("min_score", min_score)
        return self

    def to_dict(self) -> dict[str, Any]:
        body = serialize(self._params)
        if "query" not in body:
            body["query"] = MatchAll().to_dict()
        return body
