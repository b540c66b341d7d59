"""Esquire — search request builder and client for Elasticsearch-style services.

Quick start::

    from esquire import Client, Search

    client = Client()
    search = Search(client).add_index("articles").add_type("post")

    results = search.search("solar nowcasting", {"limit": 5, "routing": "r1"})
    print(results.total_hits, [hit.id for hit in results])

    print(search.count("solar"))
"""

from esquire.client import Client
from esquire.exceptions import (
    ConfigurationError,
    ConnectionError,
    EsquireError,
    InvalidInputError,
    InvalidOptionError,
    ResponseError,
    UnsupportedConversionError,
)
from esquire.index import Index, Type
from esquire.query import Common, MatchAll, Query, QueryString, Term
from esquire.result import Response, Result, ResultSet
from esquire.search import Search, SearchOption, SearchType

__version__ = "0.1.0"

__all__ = [
    "Client",
    "Common",
    "ConfigurationError",
    "ConnectionError",
    "EsquireError",
    "Index",
    "InvalidInputError",
    "InvalidOptionError",
    "MatchAll",
    "Query",
    "QueryString",
    "Response",
    "ResponseError",
    "Result",
    "ResultSet",
    "Search",
    "SearchOption",
    "SearchType",
    "Term",
    "Type",
    "UnsupportedConversionError",
    "__version__",
]
