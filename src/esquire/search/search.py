"""Search request builder — compiles scope, query and options into one request.

A ``Search`` accumulates indices and types, holds one query and a validated
option map, and dispatches GET requests through a client::

    search = Search(client)
    search.add_index("articles").add_type("post")
    results = search.search("solar nowcasting", {"limit": 5, "routing": "r1"})
    total = search.count("solar")

Scope, options and query are kept between calls, so the same builder can
issue several searches. Instances are not safe for concurrent mutation;
callers sharing one across threads must serialize access themselves.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import TYPE_CHECKING, Any

from esquire.exceptions import UnsupportedConversionError
from esquire.query.query import Query
from esquire.result import ResultSet
from esquire.search.call import apply_call
from esquire.search.options import OptionRegistry, SearchOption, SearchType
from esquire.search.path import build_path
from esquire.search.scope import HasName, Scope

if TYPE_CHECKING:
    from esquire.client import Client

logger = logging.getLogger(__name__)


class Search:
    """Builds and sends search and count requests.

    Args:
        client: Client used to send requests.
    """

    def __init__(self, client: Client) -> None:
        self._client = client
        self._scope = Scope()
        self._options = OptionRegistry()
        self._query: Query | None = None

    @classmethod
    def create(cls, searchable: Any) -> Search:
        """Build a search from an arbitrary searchable object.

        Not supported: construct ``Search(client)`` and add the scope instead.

        Raises:
            UnsupportedConversionError: Always.
        """
        raise UnsupportedConversionError(
            f"Cannot create a Search from {type(searchable).__name__}; use Search(client) and add indices/types"
        )

    # ── Scope ────────────────────────────────────────────────────────────

    def add_index(self, index: str | HasName) -> Search:
        self._scope.add_index(index)
        return self

    def add_indices(self, indices: Iterable[str | HasName] = ()) -> Search:
        self._scope.add_indices(indices)
        return self

    def add_type(self, type_: str | HasName) -> Search:
        self._scope.add_type(type_)
        return self

    def add_types(self, types: Iterable[str | HasName] = ()) -> Search:
        self._scope.add_types(types)
        return self

    def get_indices(self) -> list[str]:
        return self._scope.indices

    def has_indices(self) -> bool:
        return self._scope.has_indices()

    def get_types(self) -> list[str]:
        return self._scope.types

    def has_types(self) -> bool:
        return self._scope.has_types()

    def get_path(self) -> str:
        """Return the request path for the current scope."""
        return build_path(self._scope.indices, self._scope.types)

    # ── Query ────────────────────────────────────────────────────────────

    def set_query(self, query: Any) -> Search:
        """Replace the current query with ``Query.create(query)``."""
        self._query = Query.create(query)
        return self

    def get_query(self) -> Query:
        """Return the current query, defaulting to match-all on first read."""
        if self._query is None:
            self._query = Query.create("")
        return self._query

    # ── Options ──────────────────────────────────────────────────────────

    def set_option(self, key: str | SearchOption, value: Any) -> Search:
        self._options.set_option(key, value)
        return self

    def set_options(self, options: Mapping[str, Any]) -> Search:
        self._options.set_options(options)
        return self

    def add_option(self, key: str | SearchOption, value: Any) -> Search:
        self._options.add_option(key, value)
        return self

    def clear_options(self) -> Search:
        self._options.clear_options()
        return self

    def has_option(self, key: str | SearchOption) -> bool:
        return self._options.has_option(key)

    def get_option(self, key: str | SearchOption) -> Any:
        return self._options.get_option(key)

    def get_options(self) -> dict[str, Any]:
        return self._options.get_options()

    def get_client(self) -> Client:
        return self._client

    # ── Dispatch ─────────────────────────────────────────────────────────

    def search(self, query: Any = "", options: int | Mapping[str, Any] | None = None) -> ResultSet:
        """Search the current scope.

        Args:
            query: A string, mapping, query object, or ``""`` to keep the
                current query.
            options: An int result limit, or a mapping of request options
                which may include ``limit`` and ``explain``.

        Returns:
            The result set for this request.

        Raises:
            InvalidInputError: If ``query`` or ``options`` has an unsupported type.
            InvalidOptionError: If ``options`` holds a key that is not allowed.
        """
        apply_call(self, query, options)

        query_obj = self.get_query()
        path = self.get_path()
        params = self.get_options()

        logger.debug("Searching %s with options %s", path, params)
        response = self._client.request(path, "GET", query_obj.to_dict(), params)
        return ResultSet(response, query_obj)

    def count(self, query: Any = "") -> int:
        """Count the documents matching ``query`` in the current scope.

        Sends ``search_type=count`` as the only option for this request;
        options stored on the builder are left untouched.
        """
        apply_call(self, query)

        query_obj = self.get_query()
        path = self.get_path()
        params = {SearchOption.SEARCH_TYPE.value: SearchType.COUNT.value}

        logger.debug("Counting %s", path)
        response = self._client.request(path, "GET", query_obj.to_dict(), params)
        return ResultSet(response, query_obj).total_hits

    def __repr__(self) -> str:
        return f"Search(path={self.get_path()!r}, options={self.get_options()!r})"
