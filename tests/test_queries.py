import json

import pytest

from elastic_ops_exceptions import EncodingError
from search_operations import (
    Query,
    KnnQuery,
    TermQuery,
    MatchAllQuery,
    RawQuery,
    QueryEncodingError,
)


class FailingQuery(Query):
    def source(self):
        raise QueryEncodingError("cannot render")


def make_knn():
    return KnnQuery("embedding", 10, 100, [1.0, 2.0, 3.0])


def test_knn_without_filters_has_no_filter_key():
    doc = make_knn().source()
    assert doc == {
        "knn": {
            "field": "embedding",
            "k": 10,
            "num_candidates": 100,
            "query_vector": [1.0, 2.0, 3.0],
        }
    }
    assert "filter" not in doc["knn"]
    assert "boost" not in doc["knn"]


def test_knn_single_filter_is_inlined():
    term = TermQuery("field", "value")
    doc = make_knn().filter(term).source()
    assert doc == {
        "knn": {
            "field": "embedding",
            "k": 10,
            "num_candidates": 100,
            "query_vector": [1.0, 2.0, 3.0],
            "filter": {"term": {"field": "value"}},
        }
    }
    assert doc["knn"]["filter"] == term.source()
    assert not isinstance(doc["knn"]["filter"], list)


def test_knn_multiple_filters_keep_order():
    filters = [TermQuery("a", 1), MatchAllQuery(), TermQuery("b", "x")]
    doc = make_knn().filter(*filters).source()
    assert doc["knn"]["filter"] == [f.source() for f in filters]


def test_knn_filter_replaces_previous_filters():
    doc = make_knn().filter(TermQuery("a", 1), TermQuery("b", 2)).filter().source()
    assert "filter" not in doc["knn"]


def test_knn_filter_accepts_a_sequence():
    term = TermQuery("field", "value")
    assert make_knn().filter([term]).source() == make_knn().filter(term).source()
    assert make_knn().filter([term])._filter == [term]

    filters = (TermQuery("a", 1), MatchAllQuery())
    doc = make_knn().filter(filters).source()
    assert doc["knn"]["filter"] == [f.source() for f in filters]
    assert "filter" not in make_knn().filter([]).source()["knn"]


@pytest.mark.parametrize("boost", [0.0, 1.0, 2.5])
def test_knn_boost_emitted_when_set(boost):
    doc = make_knn().boost(boost).source()
    assert doc["knn"]["boost"] == boost


def test_knn_boost_none_clears_it():
    doc = make_knn().boost(3.0).boost(None).source()
    assert "boost" not in doc["knn"]


def test_knn_setters_apply_until_source():
    query = make_knn()
    query.field("other").k(3).num_candidates(30).query_vector((0.5, 0.25))
    knn = query.source()["knn"]
    assert knn["field"] == "other"
    assert knn["k"] == 3
    assert knn["num_candidates"] == 30
    assert knn["query_vector"] == [0.5, 0.25]


def test_knn_survives_json_round_trip():
    vector = [0.1, -2.5, 3.0, 1e-9]
    doc = KnnQuery("vec", 7, 70, vector).filter(TermQuery("lang", "en")).source()
    parsed = json.loads(json.dumps(doc))["knn"]
    assert parsed["field"] == "vec"
    assert parsed["k"] == 7
    assert parsed["num_candidates"] == 70
    assert parsed["query_vector"] == vector


def test_knn_nested_failure_propagates():
    with pytest.raises(QueryEncodingError):
        make_knn().filter(FailingQuery()).source()

    with pytest.raises(QueryEncodingError):
        make_knn().filter(TermQuery("a", 1), FailingQuery()).source()


def test_knn_rejects_non_query_filter():
    with pytest.raises(EncodingError):
        make_knn().filter({"term": {"a": 1}}).source()


def test_term_query_short_form():
    assert TermQuery("user", "kimchy").source() == {"term": {"user": "kimchy"}}


def test_term_query_long_form():
    doc = TermQuery("user", "kimchy").boost(1.2).case_insensitive(True).query_name("my_term").source()
    assert doc == {
        "term": {
            "user": {
                "value": "kimchy",
                "boost": 1.2,
                "case_insensitive": True,
                "_name": "my_term",
            }
        }
    }


def test_match_all_query():
    assert MatchAllQuery().source() == {"match_all": {}}
    assert MatchAllQuery().boost(0.0).source() == {"match_all": {"boost": 0.0}}


def test_raw_query_from_text_and_mapping():
    assert RawQuery('{"term": {"a": 1}}').source() == {"term": {"a": 1}}
    assert RawQuery({"exists": {"field": "title"}}).source() == {"exists": {"field": "title"}}


def test_raw_query_invalid_text_fails_inside_knn():
    with pytest.raises(QueryEncodingError):
        make_knn().filter(RawQuery("{not json")).source()
