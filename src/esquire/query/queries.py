"""Leaf queries — match_all, query_string, term and common terms."""

from __future__ import annotations

from typing import Any

from esquire.query.base import AbstractQuery, serialize


class MatchAll(AbstractQuery):
    """Matches every document: ``{"match_all": {}}``."""

    param_name = "match_all"


class QueryString(AbstractQuery):
    """Free-text query parsed by the service's query-string syntax."""

    param_name = "query_string"

    def __init__(self, query: str = "") -> None:
        super().__init__()
        self.set_query(query)

    def set_query(self, query: str) -> QueryString:
        self.set_param("query", query)
        return self

    def set_default_field(self, field: str) -> QueryString:
        self.set_param("default_field", field)
        return self

    def set_default_operator(self, operator: str = "or") -> QueryString:
        self.set_param("default_operator", operator)
        return self

    def set_fields(self, fields: list[str]) -> QueryString:
        self.set_param("fields", list(fields))
        return self


class Term(AbstractQuery):
    """Exact-value match on a single field."""

    param_name = "term"

    def __init__(self, term: dict[str, Any] | None = None) -> None:
        super().__init__()
        if term:
            self.set_params(term)

    def set_term(self, key: str, value: Any, boost: float = 1.0) -> Term:
        self.set_params({key: {"value": value, "boost": boost}})
        return self


class Common(AbstractQuery):
    """Common terms query.

    Splits the query terms into low and high frequency groups using
    ``cutoff_frequency``; high frequency terms only contribute to scoring.

    Parameters set through ``set_param`` land under the field, next to
    ``query`` and ``cutoff_frequency``.

    Example::

        query = Common("body", "the quick fox", 0.001)
        query.set_low_frequency_operator(Common.OPERATOR_AND)
    """

    param_name = "common"

    OPERATOR_AND = "and"
    OPERATOR_OR = "or"

    def __init__(self, field: str, query: str, cutoff_frequency: float) -> None:
        super().__init__()
        self._field = field
        self.set_query(query)
        self.set_cutoff_frequency(cutoff_frequency)

    def set_field(self, field: str) -> Common:
        self._field = field
        return self

    def set_query(self, query: str) -> Common:
        self.set_param("query", query)
        return self

    def set_cutoff_frequency(self, frequency: float) -> Common:
        self.set_param("cutoff_frequency", float(frequency))
        return self

    def set_low_frequency_operator(self, operator: str = OPERATOR_OR) -> Common:
        self.set_param("low_freq_operator", operator)
        return self

    def set_high_frequency_operator(self, operator: str = OPERATOR_OR) -> Common:
        self.set_param("high_freq_operator", operator)
        return self

    def set_minimum_should_match(self, minimum: int | str) -> Common:
        self.set_param("minimum_should_match", minimum)
        return self

    def set_boost(self, boost: float) -> Common:
        self.set_param("boost", boost)
        return self

    def set_analyzer(self, analyzer: str) -> Common:
        self.set_param("analyzer", analyzer)
        return self

    def set_disable_coord(self, disable: bool = True) -> Common:
        self.set_param("disable_coord", disable)
        return self

    def to_dict(self) -> dict[str, Any]:
        return {self.param_name: {self._field: serialize(self._params)}}
