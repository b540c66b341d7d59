"""Request path derived from the search scope."""

from __future__ import annotations

from collections.abc import Sequence

SEARCH_ENDPOINT = "_search"
ALL_INDICES = "_all"


def build_path(indices: Sequence[str], types: Sequence[str]) -> str:
    """Combine index and type names into a search path.

    Examples:
        >>> build_path([], [])
        '/_search'
        >>> build_path([], ["t1", "t2"])
        '_all/t1,t2/_search'
        >>> build_path(["a", "b"], [])
        'a,b/_search'
        >>> build_path(["a"], ["t1", "t2"])
        'a/t1,t2/_search'
    """
    path = ""
    if indices:
        path = ",".join(indices)
    elif types:
        path = ALL_INDICES

    if types:
        path += "/" + ",".join(types)

    return f"{path}/{SEARCH_ENDPOINT}"
