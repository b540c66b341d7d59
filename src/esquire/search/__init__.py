"""Search request builder."""

from esquire.search.call import LimitShorthand, NoOptions, OptionMap, resolve_options
from esquire.search.options import OptionRegistry, SearchOption, SearchType
from esquire.search.path import build_path
from esquire.search.scope import HasName, Scope
from esquire.search.search import Search

__all__ = [
    "HasName",
    "LimitShorthand",
    "NoOptions",
    "OptionMap",
    "OptionRegistry",
    "Scope",
    "Search",
    "SearchOption",
    "SearchType",
    "build_path",
    "resolve_options",
]
