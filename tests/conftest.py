import pytest

from config import ElasticSettings, ConnectionSettings
from connection_management import ElasticClient

BASE_URL = "http://es.test:9200"


@pytest.fixture
def settings():
    """Settings pointing at a host that only exists inside respx."""
    return ElasticSettings(connection=ConnectionSettings(url=BASE_URL))


@pytest.fixture
def client(settings):
    """Client used both offline (build_url) and against respx routes."""
    return ElasticClient(settings)


SEARCH_RESPONSE = {
    "took": 7,
    "timed_out": False,
    "_shards": {"total": 1, "successful": 1, "skipped": 0, "failed": 0},
    "hits": {
        "total": {"value": 2, "relation": "eq"},
        "max_score": 1.5,
        "hits": [
            {"_index": "my-index", "_id": "1", "_score": 1.5, "_source": {"title": "first"}},
            {"_index": "my-index", "_id": "2", "_score": 0.7, "_source": {"title": "second"}},
        ],
    },
}


@pytest.fixture
def search_response():
    return SEARCH_RESPONSE
