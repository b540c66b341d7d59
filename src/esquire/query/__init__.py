"""Query DSL — request bodies and the leaf queries that go inside them."""

from esquire.query.base import AbstractQuery, Param
from esquire.query.queries import Common, MatchAll, QueryString, Term
from esquire.query.query import Query

__all__ = ["AbstractQuery", "Common", "MatchAll", "Param", "Query", "QueryString", "Term"]
