"""Call convention — how ``search(query, options)`` arguments reach the builder.

The ``options`` argument of a search is overloaded. It is classified once,
at the boundary, into one of three variants:

  - ``NoOptions``: ``None``
  - ``LimitShorthand``: a bare ``int``, meaning "cap the result count"
  - ``OptionMap``: a mapping of request options, which may also carry the
    reserved keys ``limit`` and ``explain``

Reserved keys are applied to the query and never sent as request options.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, ConfigDict, Field

from esquire.exceptions import InvalidInputError

if TYPE_CHECKING:
    from esquire.search.search import Search

LIMIT_KEY = "limit"
EXPLAIN_KEY = "explain"


class NoOptions(BaseModel):
    model_config = ConfigDict(frozen=True)


class LimitShorthand(BaseModel):
    model_config = ConfigDict(frozen=True)

    limit: int = Field(description="Maximum number of hits to return")


class OptionMap(BaseModel):
    model_config = ConfigDict(frozen=True)

    # keys are validated by the option registry, not here
    options: dict[Any, Any] = Field(default_factory=dict, description="Request options, reserved keys included")


CallOptions = NoOptions | LimitShorthand | OptionMap


def resolve_options(options: Any) -> CallOptions:
    """Classify the caller's ``options`` argument.

    Raises:
        InvalidInputError: If ``options`` is not None, an int or a mapping.
    """
    if options is None:
        return NoOptions()
    # bool is an int subclass but never a limit
    if isinstance(options, int) and not isinstance(options, bool):
        return LimitShorthand(limit=options)
    if isinstance(options, Mapping):
        return OptionMap(options=dict(options))
    raise InvalidInputError(
        f"Options must be None, an int limit or a mapping of options, got {type(options).__name__}"
    )


def is_empty_query(query: Any) -> bool:
    """True for the default query argument (``""`` or ``None``)."""
    return query is None or (isinstance(query, str) and query == "")


def apply_call(search: Search, query: Any = "", options: Any = None) -> Search:
    """Apply a search call's positional arguments to ``search``.

    The query is replaced first, so limit and explain land on the new query.
    """
    call_options = resolve_options(options)

    if not is_empty_query(query):
        search.set_query(query)

    match call_options:
        case NoOptions():
            pass
        case LimitShorthand(limit=limit):
            search.get_query().set_limit(limit)
        case OptionMap(options=requested):
            remaining = dict(requested)
            if LIMIT_KEY in remaining:
                search.get_query().set_limit(remaining.pop(LIMIT_KEY))
            if EXPLAIN_KEY in remaining:
                search.get_query().set_explain(remaining.pop(EXPLAIN_KEY))
            search.set_options(remaining)

    return search
