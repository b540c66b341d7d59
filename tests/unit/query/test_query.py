"""Tests for query normalization and the request body."""

from __future__ import annotations

import pytest

from esquire.exceptions import InvalidInputError
from esquire.query.queries import MatchAll, QueryString, Term
from esquire.query.query import Query


class TestQueryCreate:
    @pytest.mark.parametrize("value", ["", None, {}])
    def test_empty_values_match_all(self, value: object) -> None:
        assert Query.create(value).to_dict() == {"query": {"match_all": {}}}

    def test_string_becomes_query_string(self) -> None:
        assert Query.create("farrelley").to_dict() == {"query": {"query_string": {"query": "farrelley"}}}

    def test_mapping_is_raw_body(self) -> None:
        body = {"query": {"term": {"user": "kimchy"}}, "size": 3}
        assert Query.create(body).to_dict() == body

    def test_mapping_without_query_gets_match_all(self) -> None:
        assert Query.create({"size": 3}).to_dict() == {"size": 3, "query": {"match_all": {}}}

    def test_leaf_query_wrapped(self) -> None:
        query = Query.create(Term().set_term("user", "kimchy"))
        assert query.to_dict() == {"query": {"term": {"user": {"value": "kimchy", "boost": 1.0}}}}

    def test_query_returned_unchanged(self) -> None:
        query = Query(MatchAll())
        assert Query.create(query) is query

    @pytest.mark.parametrize("value", [5, 1.5, ["a"], object()])
    def test_invalid_input(self, value: object) -> None:
        with pytest.raises(InvalidInputError, match="Unexpected argument"):
            Query.create(value)

    def test_constructor_rejects_strings(self) -> None:
        with pytest.raises(InvalidInputError):
            Query("text")  # type: ignore[arg-type]


class TestQuerySetters:
    def test_limit_and_explain(self) -> None:
        query = Query.create("x").set_limit(5).set_explain(True)
        body = query.to_dict()
        assert body["size"] == 5
        assert body["explain"] is True

    def test_paging_and_scoring(self) -> None:
        body = (
            Query(QueryString("x"))
            .set_from(10)
            .set_version()
            .set_min_score(0.5)
            .set_source(["title"])
            .set_highlight({"fields": {"title": {}}})
            .to_dict()
        )
        assert body == {
            "query": {"query_string": {"query": "x"}},
            "from": 10,
            "version": True,
            "min_score": 0.5,
            "_source": ["title"],
            "highlight": {"fields": {"title": {}}},
        }

    def test_sort(self) -> None:
        query = Query().set_sort([{"date": "desc"}]).add_sort("_score")
        assert query.get_param("sort") == [{"date": "desc"}, "_score"]

    def test_get_missing_param_raises(self) -> None:
        with pytest.raises(InvalidInputError, match="does not exist"):
            Query().get_param("size")

    def test_to_dict_does_not_mutate(self) -> None:
        query = Query()
        query.to_dict()
        assert not query.has_param("query")

    def test_default_serialization_is_stable(self) -> None:
        query = Query.create("")
        assert query.to_dict() == query.to_dict()


class TestQueryString:
    def test_options(self) -> None:
        query = QueryString("solar").set_default_field("title").set_default_operator("and").set_fields(["a", "b"])
        assert query.to_dict() == {
            "query_string": {
                "query": "solar",
                "default_field": "title",
                "default_operator": "and",
                "fields": ["a", "b"],
            }
        }
