"""Request options — the allow-listed controls sent on the query string."""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from typing import Any

from esquire.exceptions import InvalidOptionError


class SearchOption(str, Enum):
    """Options a search request may carry."""

    SEARCH_TYPE = "search_type"
    ROUTING = "routing"
    PREFERENCE = "preference"
    VERSION = "version"
    TIMEOUT = "timeout"
    FROM = "from"
    SIZE = "size"


class SearchType(str, Enum):
    """Values accepted by the ``search_type`` option."""

    COUNT = "count"
    SCAN = "scan"
    DFS_QUERY_THEN_FETCH = "dfs_query_then_fetch"
    DFS_QUERY_AND_FETCH = "dfs_query_and_fetch"
    QUERY_THEN_FETCH = "query_then_fetch"
    QUERY_AND_FETCH = "query_and_fetch"


ALLOWED_OPTIONS: frozenset[str] = frozenset(option.value for option in SearchOption)


def _key(key: str | SearchOption) -> str:
    return key.value if isinstance(key, SearchOption) else key


class OptionRegistry:
    """Validated option map.

    Keys must belong to ``SearchOption``; anything else is rejected as soon
    as it is set, added or read. ``add_option`` accumulates a list under one
    key, ``set_option`` stores a scalar.
    """

    def __init__(self) -> None:
        self._options: dict[str, Any] = {}

    @staticmethod
    def validate(key: str | SearchOption) -> None:
        """Raise ``InvalidOptionError`` unless ``key`` is an allowed option."""
        if _key(key) not in ALLOWED_OPTIONS:
            raise InvalidOptionError(f"Invalid option '{_key(key)}'. Allowed options: {sorted(ALLOWED_OPTIONS)}")

    def set_option(self, key: str | SearchOption, value: Any) -> OptionRegistry:
        self.validate(key)
        self._options[_key(key)] = value
        return self

    def add_option(self, key: str | SearchOption, value: Any) -> OptionRegistry:
        self.validate(key)
        self._options.setdefault(_key(key), []).append(value)
        return self

    def set_options(self, options: Mapping[str, Any]) -> OptionRegistry:
        """Replace all options.

        The map is cleared first; a bad key stops the loop and leaves the
        pairs before it in place.
        """
        self.clear_options()
        for key, value in options.items():
            self.set_option(key, value)
        return self

    def clear_options(self) -> OptionRegistry:
        self._options = {}
        return self

    def has_option(self, key: str | SearchOption) -> bool:
        return _key(key) in self._options

    def get_option(self, key: str | SearchOption) -> Any:
        """Return the stored value.

        Raises:
            InvalidOptionError: If the option was never set.
        """
        if not self.has_option(key):
            raise InvalidOptionError(f"Option '{_key(key)}' does not exist")
        return self._options[_key(key)]

    def get_options(self) -> dict[str, Any]:
        """Return a snapshot; list values from ``add_option`` are copied too."""
        return {k: list(v) if isinstance(v, list) else v for k, v in self._options.items()}
