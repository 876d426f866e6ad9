import pytest

from connection_management import expand, escape_segment
from elastic_ops_exceptions import PathResolutionError


def test_expand_index():
    assert expand("{index}/_search/template", {"index": "my-index"}) == "my-index/_search/template"


def test_expand_escapes_path_segment():
    assert expand("{index}/_doc", {"index": "a b/c?d"}) == "a%20b%2Fc%3Fd/_doc"
    assert escape_segment("logs-2024.01_x~") == "logs-2024.01_x~"
    assert escape_segment("café") == "caf%C3%A9"


def test_expand_multiple_tokens():
    assert expand("{index}/_doc/{id}", {"index": "i", "id": "1"}) == "i/_doc/1"


@pytest.mark.parametrize(
    "template,bindings",
    [
        ("{index}/_search", {}),
        ("{}/_search", {"index": "i"}),
        ("{index/_search", {"index": "i"}),
        ("index}/_search", {"index": "i"}),
        ("{index}/_search", {"index": 5}),
        ("{index}/_search", {"index": "bad\udcff"}),
    ],
)
def test_expand_rejects_invalid_input(template, bindings):
    with pytest.raises(PathResolutionError):
        expand(template, bindings)
