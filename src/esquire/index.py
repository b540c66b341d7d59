"""Index and type handles — named scopes that can start a search."""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from esquire.result import ResultSet
from esquire.search.call import apply_call
from esquire.search.search import Search

if TYPE_CHECKING:
    from esquire.client import Client


class Index:
    """A named index on the search service.

    Args:
        client: Client the index belongs to.
        name: Index name.
    """

    def __init__(self, client: Client, name: str) -> None:
        self._client = client
        self._name = name

    @property
    def name(self) -> str:
        return self._name

    @property
    def client(self) -> Client:
        return self._client

    def get_type(self, name: str) -> Type:
        return Type(self, name)

    def create_search(self, query: Any = "", options: int | Mapping[str, Any] | None = None) -> Search:
        """Return a ``Search`` scoped to this index with ``query`` applied."""
        search = Search(self._client).add_index(self)
        return apply_call(search, query, options)

    def search(self, query: Any = "", options: int | Mapping[str, Any] | None = None) -> ResultSet:
        return Search(self._client).add_index(self).search(query, options)

    def count(self, query: Any = "") -> int:
        return Search(self._client).add_index(self).count(query)

    def __repr__(self) -> str:
        return f"Index({self._name!r})"


class Type:
    """A document type inside an index.

    Args:
        index: Parent index.
        name: Type name.
    """

    def __init__(self, index: Index, name: str) -> None:
        self._index = index
        self._name = name

    @property
    def name(self) -> str:
        return self._name

    @property
    def index(self) -> Index:
        return self._index

    def create_search(self, query: Any = "", options: int | Mapping[str, Any] | None = None) -> Search:
        """Return a ``Search`` scoped to this type and its index with ``query`` applied."""
        search = self._index.create_search(query, options)
        return search.add_type(self)

    def search(self, query: Any = "", options: int | Mapping[str, Any] | None = None) -> ResultSet:
        return self._scoped_search().search(query, options)

    def count(self, query: Any = "") -> int:
        return self._scoped_search().count(query)

    def _scoped_search(self) -> Search:
        return Search(self._index.client).add_index(self._index).add_type(self)

    def __repr__(self) -> str:
        return f"Type({self._index.name!r}, {self._name!r})"
